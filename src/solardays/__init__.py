"""Daily sunrise/sunset tables for a fixed site, persisted to SQLite."""

from .core.calendar import days_in_month, is_central_europe_dst
from .core.solar import SolarTimeCalculator, calc_sun_time
from .io.write_sqlite import SQLiteSink, WriteReport
from .model.records import ClockTime, DateComponents, DayRecord, GeoLocation
from .synth.days import DatasetGenerator, build_day_record

__all__ = [
  "days_in_month",
  "is_central_europe_dst",
  "SolarTimeCalculator",
  "calc_sun_time",
  "SQLiteSink",
  "WriteReport",
  "ClockTime",
  "DateComponents",
  "DayRecord",
  "GeoLocation",
  "DatasetGenerator",
  "build_day_record",
]
