import sqlite3

import pytest

SCHEMA = """
CREATE TABLE sun (
  date TEXT UNIQUE,
  sunrise TEXT,
  sunset TEXT,
  latitude REAL,
  longitude REAL,
  utc_offset INTEGER,
  dst INTEGER
)
"""

INSERT = "INSERT INTO sun (date, sunrise, sunset, latitude, longitude, utc_offset, dst) VALUES (?, ?, ?, ?, ?, ?, ?);"


@pytest.fixture
def store_path(tmp_path):
  path = tmp_path / "sun.db"
  with sqlite3.connect(path) as conn:
    conn.execute(SCHEMA)
  conn.close()
  return path


@pytest.fixture
def template_path(tmp_path):
  path = tmp_path / "insert.sql"
  path.write_text(INSERT + "\n", encoding="utf-8")
  return path


@pytest.fixture
def insert_sql():
  return INSERT
