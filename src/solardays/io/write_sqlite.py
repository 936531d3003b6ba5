"""Year-batched persistence of day records into SQLite."""

from dataclasses import dataclass, field
from itertools import groupby
from typing import Dict, Iterable, List
import logging
import sqlite3

from ..errors import (
  RowWriteFailed,
  StatementPrepareFailed,
  TransactionBeginFailed,
  TransactionCommitFailed,
)
from ..model.records import DayRecord
from .schema import COLUMNS, DayRow

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FailedRow:
  index: int  # position of the day within the run, from 0
  date: str
  reason: str


@dataclass
class WriteReport:
  written: int = 0
  failed: List[FailedRow] = field(default_factory=list)
  written_by_year: Dict[int, int] = field(default_factory=dict)

  @property
  def ok(self) -> bool:
    return not self.failed

  @property
  def failed_indices(self) -> List[int]:
    return [f.index for f in self.failed]


class SQLiteSink:
  """Writes an ordered record stream with one transaction per year.

  Transaction errors are fatal and propagate. A row that fails to insert is
  logged and recorded in the returned WriteReport; the rest of the year is
  still committed.
  """

  def __init__(self, conn: sqlite3.Connection, insert_template: str):
    """Wrap a connection.

    Args:
      conn: Open connection. The sink switches it to autocommit mode and issues
        BEGIN/COMMIT itself.
      insert_template: Single statement with 7 positional placeholders in
        ``COLUMNS`` order.
    """
    self.conn = conn
    self.conn.isolation_level = None
    self.insert_template = insert_template.strip()
    self._prepared = False

  def prepare(self) -> None:
    """Compile the template once without executing it."""
    try:
      self.conn.execute("EXPLAIN " + self.insert_template, (None,) * len(COLUMNS)).fetchall()
    except sqlite3.Error as e:
      raise StatementPrepareFailed(f"Unable to prepare insert statement: {e}") from e
    self._prepared = True

  def write(self, records: Iterable[DayRecord]) -> WriteReport:
    """Persist records grouped by year.

    Args:
      records: Records in ascending date order.

    Returns:
      WriteReport with written counts and the rows that failed.

    Raises:
      StatementPrepareFailed: the template does not compile.
      TransactionBeginFailed: a year's transaction could not be opened.
      TransactionCommitFailed: a year's transaction could not be committed.
      ValueError: records are not in ascending year order.
    """
    if not self._prepared:
      self.prepare()

    report = WriteReport()
    index = 0
    last_year = None
    for year, day_records in groupby(records, key=lambda r: r.date.year):
      if last_year is not None and year <= last_year:
        raise ValueError(f"Records out of order: {year} after {last_year}")
      last_year = year

      self._begin(year)
      written = 0
      try:
        for record in day_records:
          if self._insert(year, index, record, report):
            written += 1
          index += 1
      except BaseException:
        self._rollback(year)
        raise
      self._commit(year)

      report.written_by_year[year] = written
      report.written += written
      logger.info(f"Committed {written} rows for {year}")

    if report.failed:
      logger.warning(f"{len(report.failed)} rows failed to insert")
    return report

  def _insert(self, year: int, index: int, record: DayRecord, report: WriteReport) -> bool:
    row = DayRow.from_record(record)
    try:
      self.conn.execute(self.insert_template, row.params())
    except sqlite3.Error as e:
      if not self.conn.in_transaction:
        # the failure ended the year's transaction; later rows would autocommit
        raise TransactionCommitFailed(year, f"transaction aborted by row {index} ({row.date}): {e}") from e
      err = RowWriteFailed(index, row.date, str(e))
      logger.warning(str(err))
      report.failed.append(FailedRow(index=err.index, date=err.date, reason=err.reason))
      return False
    return True

  def _begin(self, year: int) -> None:
    try:
      self.conn.execute("BEGIN")
    except sqlite3.Error as e:
      raise TransactionBeginFailed(year, str(e)) from e

  def _commit(self, year: int) -> None:
    try:
      self.conn.execute("COMMIT")
    except sqlite3.Error as e:
      self._rollback(year)
      raise TransactionCommitFailed(year, str(e)) from e

  def _rollback(self, year: int) -> None:
    if not self.conn.in_transaction:
      return
    try:
      self.conn.execute("ROLLBACK")
    except sqlite3.Error:
      logger.exception(f"Rollback of {year} failed")
