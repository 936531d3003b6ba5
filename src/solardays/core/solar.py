from dataclasses import dataclass
from typing import Optional
import logging
import math

from ..errors import PolarDayOrNight
from ..model.records import ClockTime, DateComponents, GeoLocation

logger = logging.getLogger(__name__)

# Sun's zenith for rise/set, accounting for atmospheric refraction.
DEFAULT_ZENITH = -0.83

_RAD = math.pi / 180.0
_DEG = 180.0 / math.pi


def day_of_year(year: int, month: int, day: int) -> int:
  n1 = (275*month) // 9
  n2 = (month + 9) // 12
  n3 = 1 + (year % 4 + 2) // 3
  return n1 - n2*n3 + day - 30


def calc_sun_time(date: DateComponents, lat: float, lng: float, utc_offset: int,
                  is_dst: bool, want_sunset: bool, zenith: float = DEFAULT_ZENITH) -> float:
  """
  Fractional local clock hour of sunrise or sunset, after the Almanac for
  Computers algorithm. The result is not normalized: it may be negative or
  past 24, see ``to_clock_time``.

  Raises PolarDayOrNight when the sun stays above or below the zenith angle
  for the whole day.
  """
  event = "sunset" if want_sunset else "sunrise"
  n = day_of_year(date.year, date.month, date.day)

  lng_hour = lng / 15.0
  if want_sunset:
    t = n + (18 - lng_hour)/24
  else:
    t = n + (6 - lng_hour)/24

  # mean anomaly and true longitude
  m = 0.9856*t - 3.289
  sun_lng = (m + 1.916*math.sin(m*_RAD) + 0.020*math.sin(2*m*_RAD) + 282.634) % 360.0

  # right ascension, moved into the same quadrant as the true longitude, in hours
  ra = (_DEG*math.atan(0.91764*math.tan(sun_lng*_RAD))) % 360.0
  ra += math.floor(sun_lng/90)*90 - math.floor(ra/90)*90
  ra /= 15

  sin_dec = 0.39782*math.sin(sun_lng*_RAD)
  cos_dec = math.cos(math.asin(sin_dec))

  cos_h = (math.sin(zenith*_RAD) - sin_dec*math.sin(lat*_RAD)) / (cos_dec*math.cos(lat*_RAD))
  if cos_h > 1 or cos_h < -1:
    raise PolarDayOrNight(event, sun_up=cos_h < -1, cos_h=cos_h)

  if want_sunset:
    h = _DEG*math.acos(cos_h)
  else:
    h = 360 - _DEG*math.acos(cos_h)
  h /= 15

  local_mean = h + ra - 0.06571*t - 6.622
  ut = math.fmod(local_mean - lng_hour, 24.0)
  return ut + utc_offset + (1 if is_dst else 0)


def to_clock_time(hours: float) -> ClockTime:
  local = hours % 24.0
  if local >= 24.0:
    # tiny negative inputs round up to exactly 24.0
    local = 0.0
  whole = int(local)
  return ClockTime(hour=whole, minute=int((local - whole)*60))


@dataclass
class SolarTimeCalculator:
  location: GeoLocation
  zenith: float = DEFAULT_ZENITH

  def sun_time(self, date: DateComponents, utc_offset: int, is_dst: bool,
               want_sunset: bool) -> Optional[ClockTime]:
    try:
      hours = calc_sun_time(date, self.location.latitude, self.location.longitude,
                            utc_offset, is_dst, want_sunset, zenith=self.zenith)
    except PolarDayOrNight as e:
      logger.warning(f"{date.iso()}: {e}")
      return None
    return to_clock_time(hours)

  def sunrise(self, date: DateComponents, utc_offset: int, is_dst: bool) -> Optional[ClockTime]:
    return self.sun_time(date, utc_offset, is_dst, want_sunset=False)

  def sunset(self, date: DateComponents, utc_offset: int, is_dst: bool) -> Optional[ClockTime]:
    return self.sun_time(date, utc_offset, is_dst, want_sunset=True)
