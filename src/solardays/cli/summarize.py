import json
from pathlib import Path

import click


@click.command()
@click.option("--manifest", required=True, type=click.Path(exists=True))
def main(manifest):
  m = json.loads(Path(manifest).read_text(encoding="utf-8"))
  years = m.get("years", {})
  rows = sorted(years.items())
  width = max(4, max((len(k) for k, _ in rows), default=4))
  click.echo("Year".ljust(width) + " | Written | Failed")
  click.echo("-" * width + "-|---------|-------")
  for k, v in rows:
    click.echo(k.ljust(width) + f" | {v.get('written', 0):>7,} | {v.get('failed', 0):>6,}")
  site = m.get("site", {})
  click.echo(
    f"Total rows: {m.get('written', 0):,}, failed: {len(m.get('failed_rows', []))}, "
    f"site: {site.get('latitude')}, {site.get('longitude')} UTC{site.get('utc_offset', 0):+d}"
  )


if __name__ == "__main__":
  main()
