from ..errors import InvalidMonth

LEAP_RULES = ("gregorian", "literal")

_LONG_MONTHS = (1, 3, 5, 7, 8, 10, 12)
_SHORT_MONTHS = (4, 6, 9, 11)


def is_leap_year(year: int, rule: str = "gregorian") -> bool:
  """
  "gregorian" is the usual 4/100/400 rule. "literal" keeps the predicate the
  original tables were generated with (divisible by 4, not by 100, and by 400),
  which no year satisfies, so February never gets 29 days under it.
  """
  if rule == "gregorian":
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)
  if rule == "literal":
    return year % 4 == 0 and year % 100 != 0 and year % 400 == 0
  raise ValueError(f"Unknown leap rule {rule!r}, expected one of {LEAP_RULES}")


def days_in_month(year: int, month: int, leap_rule: str = "gregorian") -> int:
  if month in _LONG_MONTHS:
    return 31
  if month in _SHORT_MONTHS:
    return 30
  if month == 2:
    return 29 if is_leap_year(year, leap_rule) else 28
  raise InvalidMonth(month)


def julian_day_number(year: int, month: int, day: int) -> int:
  a = (14 - month) // 12
  y = year + 4800 - a
  m = month + 12*a - 3
  return day + (153*m + 2)//5 + 365*y + y//4 - y//100 + y//400 - 32045


def day_of_week(year: int, month: int, day: int) -> int:
  # Sunday = 0 ... Saturday = 6
  return (julian_day_number(year, month, day) + 1) % 7


def is_central_europe_dst(year: int, month: int, day: int) -> bool:
  """
  Central European summer time window. March and October switch on the last
  Sunday: ``day - day_of_week`` is the date of the most recent Sunday, and the
  last Sunday of a 31-day month always falls on the 25th or later.
  """
  if month < 3 or month > 10:
    return False
  if 3 < month < 10:
    return True
  last_sunday = day - day_of_week(year, month, day)
  if month == 3:
    return last_sunday >= 25
  return last_sunday < 25
