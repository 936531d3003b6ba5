import hashlib
import json
import os


def dataset_hash(meta: dict) -> str:
  s = json.dumps(meta, sort_keys=True).encode()
  return hashlib.sha256(s).hexdigest()[:16]


def build_manifest(store_path: str, from_year: int, until_year: int, site: dict, report) -> dict:
  """
  Run summary: inputs plus per-year written/failed counts from a WriteReport.
  """
  years = {}
  for year, written in sorted(report.written_by_year.items()):
    years[f"{year:04d}"] = {"written": written, "failed": 0}
  for f in report.failed:
    entry = years.setdefault(f.date[:4], {"written": 0, "failed": 0})
    entry["failed"] += 1
  return {
    "store": store_path,
    "from_year": from_year,
    "until_year": until_year,
    "site": site,
    "years": years,
    "written": report.written,
    "failed_rows": [{"index": f.index, "date": f.date, "reason": f.reason} for f in report.failed],
  }


def write_manifest(path: str, meta: dict):
  parent = os.path.dirname(path)
  if parent:
    os.makedirs(parent, exist_ok=True)
  meta["dataset_hash"] = dataset_hash(meta)
  with open(path, "w", encoding="utf-8") as f:
    json.dump(meta, f, indent=2)
