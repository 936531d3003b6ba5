from dataclasses import dataclass
import logging

from ..errors import InvalidMonth
from .calendar import days_in_month

logger = logging.getLogger(__name__)

FIRST_MONTH = 1
LAST_MONTH = 12


@dataclass(frozen=True)
class Timebase:
  from_year: int
  until_year: int
  leap_rule: str = "gregorian"

  def days(self):
    # (year, month, day) in calendar order; empty when from_year > until_year
    for year in range(self.from_year, self.until_year + 1):
      for month in range(FIRST_MONTH, LAST_MONTH + 1):
        try:
          n_days = days_in_month(year, month, self.leap_rule)
        except InvalidMonth as e:
          logger.warning(f"Unable to get days for {year}-{month:02d}, skipping: {e}")
          continue
        for day in range(1, n_days + 1):
          yield year, month, day
