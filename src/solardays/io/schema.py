from typing import Optional, Tuple

from pydantic import BaseModel

from ..model.records import DayRecord

# Column order of the insert template placeholders.
COLUMNS = ("date", "sunrise", "sunset", "latitude", "longitude", "utc_offset", "dst")


class DayRow(BaseModel):
  date: str
  sunrise: Optional[str]
  sunset: Optional[str]
  latitude: float
  longitude: float
  utc_offset: int
  dst: int

  @classmethod
  def from_record(cls, record: DayRecord) -> "DayRow":
    return cls(
      date=record.date.iso(),
      sunrise=record.sunrise.hhmm() if record.sunrise else None,
      sunset=record.sunset.hhmm() if record.sunset else None,
      latitude=record.location.latitude,
      longitude=record.location.longitude,
      utc_offset=record.utc_offset,
      dst=1 if record.is_dst else 0,
    )

  def params(self) -> Tuple:
    return tuple(getattr(self, c) for c in COLUMNS)
