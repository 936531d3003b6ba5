import json
import sqlite3

from click.testing import CliRunner

from solardays.cli.generate import main as generate
from solardays.cli.summarize import main as summarize

def _rows(path):
  with sqlite3.connect(path) as conn:
    rows = conn.execute("SELECT date, utc_offset FROM sun ORDER BY date").fetchall()
  conn.close()
  return rows

def test_generate_one_year(store_path, template_path):
  result = CliRunner().invoke(generate, [str(store_path), str(template_path), "2023", "2023"])
  assert result.exit_code == 0, result.output
  assert "Wrote 365 rows" in result.output
  rows = _rows(store_path)
  assert len(rows) == 365
  assert rows[0] == ("2023-01-01", 1)

def test_generate_with_offset_and_site(store_path, template_path):
  result = CliRunner().invoke(
    generate,
    [str(store_path), str(template_path), "2024", "2024", "2", "--latitude", "60.17", "--longitude", "24.94"],
  )
  assert result.exit_code == 0, result.output
  rows = _rows(store_path)
  assert len(rows) == 366
  assert rows[-1] == ("2024-12-31", 2)

def test_reversed_range_writes_nothing(store_path, template_path):
  result = CliRunner().invoke(generate, [str(store_path), str(template_path), "2024", "2023"])
  assert result.exit_code == 0, result.output
  assert _rows(store_path) == []

def test_invalid_year(store_path, template_path):
  result = CliRunner().invoke(generate, [str(store_path), str(template_path), "twenty", "2023"])
  assert result.exit_code == 1
  assert "start year" in result.output

def test_year_before_1900(store_path, template_path):
  result = CliRunner().invoke(generate, [str(store_path), str(template_path), "1899", "1900"])
  assert result.exit_code == 1

def test_invalid_offset(store_path, template_path):
  result = CliRunner().invoke(generate, [str(store_path), str(template_path), "2023", "2023", "one"])
  assert result.exit_code == 1
  assert "UTC offset" in result.output

def test_missing_store(tmp_path, template_path):
  result = CliRunner().invoke(generate, [str(tmp_path / "none.db"), str(template_path), "2023", "2023"])
  assert result.exit_code == 1
  assert "Unable to open" in result.output

def test_bad_template(store_path, tmp_path):
  bad = tmp_path / "bad.sql"
  bad.write_text("INSERT INTO sun VALUES (?, ?)", encoding="utf-8")
  result = CliRunner().invoke(generate, [str(store_path), str(bad), "2023", "2023"])
  assert result.exit_code == 1
  assert "prepare" in result.output
  assert _rows(store_path) == []

def test_manifest_and_summary(store_path, template_path, tmp_path):
  manifest = tmp_path / "out" / "manifest.json"
  result = CliRunner().invoke(
    generate,
    [str(store_path), str(template_path), "2023", "2024", "--manifest", str(manifest)],
  )
  assert result.exit_code == 0, result.output
  meta = json.loads(manifest.read_text(encoding="utf-8"))
  assert meta["years"] == {"2023": {"written": 365, "failed": 0}, "2024": {"written": 366, "failed": 0}}
  assert meta["written"] == 731
  assert meta["site"]["latitude"] == 50.0
  assert len(meta["dataset_hash"]) == 16

  result = CliRunner().invoke(summarize, ["--manifest", str(manifest)])
  assert result.exit_code == 0, result.output
  assert "2024 |     366 |      0" in result.output
  assert "Total rows: 731" in result.output

def test_offset_out_of_range(store_path, template_path):
  for offset in ("15", "-13"):
    result = CliRunner().invoke(generate, [str(store_path), str(template_path), "2023", "2023", offset])
    assert result.exit_code == 1
    assert "between -12 and 14" in result.output
  assert _rows(store_path) == []

def test_offset_range_edges(store_path, template_path):
  result = CliRunner().invoke(generate, [str(store_path), str(template_path), "2023", "2023", "-12"])
  assert result.exit_code == 0, result.output
  assert _rows(store_path)[0] == ("2023-01-01", -12)

def test_config_file_and_literal_leap_rule(store_path, template_path, tmp_path):
  config = tmp_path / "site.yaml"
  config.write_text("latitude: 48.2\nlongitude: 16.37\nutc_offset: 1\n", encoding="utf-8")
  result = CliRunner().invoke(
    generate,
    [str(store_path), str(template_path), "2024", "2024", "--config", str(config), "--leap-rule", "literal"],
  )
  assert result.exit_code == 0, result.output
  rows = _rows(store_path)
  assert len(rows) == 365
  assert ("2024-02-29", 1) not in rows
  with sqlite3.connect(store_path) as conn:
    assert conn.execute("SELECT DISTINCT latitude, longitude FROM sun").fetchall() == [(48.2, 16.37)]
  conn.close()

def test_config_must_be_mapping(store_path, template_path, tmp_path):
  config = tmp_path / "site.yaml"
  config.write_text("- 50.0\n- 11.0\n", encoding="utf-8")
  result = CliRunner().invoke(generate, [str(store_path), str(template_path), "2023", "2023", "--config", str(config)])
  assert result.exit_code == 1
  assert "must be a mapping" in result.output

def _sunrise(path, date):
  with sqlite3.connect(path) as conn:
    row = conn.execute("SELECT sunrise, latitude FROM sun WHERE date = ?", (date,)).fetchone()
  conn.close()
  return row

def test_zenith_and_latitude_reach_store(tmp_path, store_path, template_path):
  result = CliRunner().invoke(generate, [str(store_path), str(template_path), "2023", "2023"])
  assert result.exit_code == 0, result.output
  official, lat = _sunrise(store_path, "2023-03-01")
  assert lat == 50.0

  other = tmp_path / "civil.db"
  with sqlite3.connect(other) as conn:
    conn.execute(
      "CREATE TABLE sun (date TEXT UNIQUE, sunrise TEXT, sunset TEXT, latitude REAL, "
      "longitude REAL, utc_offset INTEGER, dst INTEGER)"
    )
  conn.close()
  result = CliRunner().invoke(
    generate,
    [str(other), str(template_path), "2023", "2023", "--zenith", "-6", "--latitude", "45.0"],
  )
  assert result.exit_code == 0, result.output
  civil, lat = _sunrise(other, "2023-03-01")
  assert lat == 45.0
  assert civil < official

def test_manifest_write_failure(store_path, template_path, tmp_path):
  blocker = tmp_path / "taken"
  blocker.write_text("", encoding="utf-8")
  result = CliRunner().invoke(
    generate,
    [str(store_path), str(template_path), "2023", "2023", "--manifest", str(blocker / "m.json")],
  )
  assert result.exit_code == 1
  assert "Unable to write manifest" in result.output

def test_usage_errors_exit_like_other_failures(store_path, template_path):
  result = CliRunner().invoke(generate, ["sun.db", "insert.sql"])
  assert result.exit_code == 1
  result = CliRunner().invoke(generate, [str(store_path), str(template_path), "2023", "2023", "1", "extra"])
  assert result.exit_code == 1
