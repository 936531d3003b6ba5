import logging
import sqlite3
from pathlib import Path

from ..errors import StoreUnopenable, TemplateFileUnreadable

logger = logging.getLogger(__name__)


def open_store(path: str) -> sqlite3.Connection:
  """
  Open an existing SQLite store. The store is probed read-only first so a
  missing path is reported instead of silently creating an empty database.
  The returned connection is in autocommit mode; transactions are issued
  explicitly by the sink.
  """
  probe_uri = Path(path).resolve().as_uri() + "?mode=ro"
  try:
    probe = sqlite3.connect(probe_uri, uri=True)
    try:
      probe.execute("PRAGMA schema_version").fetchone()
    finally:
      probe.close()
  except sqlite3.Error as e:
    raise StoreUnopenable(f"Unable to open or locate SQLite database with path {path}: {e}") from e

  try:
    conn = sqlite3.connect(path, isolation_level=None)
  except sqlite3.Error as e:
    raise StoreUnopenable(f"Can't open database {path}: {e}") from e
  logger.debug(f"Opened store {path}")
  return conn


def load_insert_template(path: str) -> str:
  try:
    text = Path(path).read_text(encoding="utf-8")
  except (OSError, UnicodeDecodeError) as e:
    raise TemplateFileUnreadable(f"Unable to load INSERT template from file {path}: {e}") from e
  if not text.strip():
    raise TemplateFileUnreadable(f"INSERT template file {path} is empty")
  return text.strip()
