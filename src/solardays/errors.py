"""Error types raised by solardays.

Setup errors abort a run before any work starts, transaction errors abort the
whole run, and per-day errors are isolated by the generator and the sink.
"""


class SolarDaysError(Exception):
  """Base class for all solardays errors."""


class StoreUnopenable(SolarDaysError):
  pass


class TemplateFileUnreadable(SolarDaysError):
  pass


class InvalidYearArgument(SolarDaysError):
  pass


class InvalidUtcOffsetArgument(SolarDaysError):
  pass


class StatementPrepareFailed(SolarDaysError):
  pass


class TransactionBeginFailed(SolarDaysError):
  def __init__(self, year: int, reason: str):
    super().__init__(f"Unable to start transaction for {year}: {reason}")
    self.year = year
    self.reason = reason


class TransactionCommitFailed(SolarDaysError):
  def __init__(self, year: int, reason: str):
    super().__init__(f"Unable to commit transaction for {year}: {reason}")
    self.year = year
    self.reason = reason


class RowWriteFailed(SolarDaysError):
  def __init__(self, index: int, date: str, reason: str):
    super().__init__(f"Failed to insert row {index} ({date}): {reason}")
    self.index = index
    self.date = date
    self.reason = reason


class InvalidMonth(SolarDaysError, ValueError):
  def __init__(self, month: int):
    super().__init__(f"Invalid month {month}, expected 1-12")
    self.month = month


class PolarDayOrNight(SolarDaysError):
  """The sun does not cross the zenith angle on this day.

  ``sun_up`` is True for polar day (the sun never sets) and False for polar
  night (the sun never rises).
  """

  def __init__(self, event: str, sun_up: bool, cos_h: float):
    kind = "polar day" if sun_up else "polar night"
    super().__init__(f"No {event} ({kind}, cosH={cos_h:.4f})")
    self.event = event
    self.sun_up = sun_up
    self.cos_h = cos_h


class InvalidSiteConfig(SolarDaysError):
  pass
