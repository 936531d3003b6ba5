from dataclasses import dataclass
from typing import Iterator, Optional

from ..core.calendar import is_central_europe_dst
from ..core.solar import DEFAULT_ZENITH, SolarTimeCalculator
from ..core.timebase import Timebase
from ..model.records import ClockTime, DateComponents, DayRecord, GeoLocation


def build_day_record(date: DateComponents, sunrise: Optional[ClockTime], sunset: Optional[ClockTime],
                     location: GeoLocation, utc_offset: int, is_dst: bool) -> DayRecord:
  return DayRecord(
    date=date,
    sunrise=sunrise,
    sunset=sunset,
    location=location,
    utc_offset=utc_offset,
    is_dst=is_dst,
  )


@dataclass(frozen=True)
class DatasetGenerator:
  """
  Sunrise/sunset records for every day in [from_year, until_year], in
  ascending (year, month, day) order.

  Iteration is lazy and starts over on every ``iter()``, so the same
  generator can be written to several sinks.
  """
  location: GeoLocation
  from_year: int
  until_year: int
  utc_offset: int = 1
  zenith: float = DEFAULT_ZENITH
  leap_rule: str = "gregorian"

  def __iter__(self) -> Iterator[DayRecord]:
    return self.records()

  def records(self) -> Iterator[DayRecord]:
    calc = SolarTimeCalculator(self.location, self.zenith)
    tb = Timebase(self.from_year, self.until_year, self.leap_rule)
    for year, month, day in tb.days():
      dst = is_central_europe_dst(year, month, day)
      date = DateComponents(year=year, month=month, day=day)
      yield build_day_record(
        date,
        calc.sunrise(date, self.utc_offset, dst),
        calc.sunset(date, self.utc_offset, dst),
        self.location,
        self.utc_offset,
        dst,
      )

  def records_for_year(self, year: int) -> Iterator[DayRecord]:
    one_year = DatasetGenerator(self.location, year, year, self.utc_offset, self.zenith, self.leap_rule)
    return one_year.records()
