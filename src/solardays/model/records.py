from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..core.calendar import days_in_month


class GeoLocation(BaseModel):
  model_config = ConfigDict(frozen=True)

  latitude: float = Field(ge=-90.0, le=90.0)
  longitude: float = Field(ge=-180.0, le=180.0)  # positive East


class DateComponents(BaseModel):
  model_config = ConfigDict(frozen=True)

  year: int
  month: int = Field(ge=1, le=12)
  day: int = Field(ge=1, le=31)

  @model_validator(mode="after")
  def check_day_in_month(self):
    # gregorian bound; the literal leap rule only ever produces fewer days
    if self.day > days_in_month(self.year, self.month):
      raise ValueError(f"{self.year}-{self.month:02d} has no day {self.day}")
    return self

  def iso(self) -> str:
    return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


class ClockTime(BaseModel):
  model_config = ConfigDict(frozen=True)

  hour: int = Field(ge=0, le=23)
  minute: int = Field(ge=0, le=59)

  def hhmm(self) -> str:
    return f"{self.hour:02d}:{self.minute:02d}"


class DayRecord(BaseModel):
  """
  One calendar day at one location. A missing sunrise or sunset means the sun
  never crossed the horizon that day (polar day or night).
  """
  model_config = ConfigDict(frozen=True)

  date: DateComponents
  sunrise: Optional[ClockTime]
  sunset: Optional[ClockTime]
  location: GeoLocation
  utc_offset: int
  is_dst: bool
