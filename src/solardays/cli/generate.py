"""CLI command to fill a SQLite store with daily sunrise/sunset times."""

from typing import Optional
import logging
import sys

import click
import yaml
from pydantic import ValidationError

from ..core.calendar import LEAP_RULES
from ..errors import InvalidUtcOffsetArgument, InvalidYearArgument, SolarDaysError
from ..io.manifest import build_manifest, write_manifest
from ..io.store import load_insert_template, open_store
from ..io.write_sqlite import SQLiteSink, WriteReport
from ..model.site import SiteConfig, load_site_config
from ..synth.days import DatasetGenerator

logger = logging.getLogger(__name__)

MIN_YEAR = 1900


class GenerateCommand(click.Command):
    """Reports usage errors with the same exit status as every other failure."""

    def parse_args(self, ctx, args):
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            e.exit_code = 1
            raise


def parse_year(text: str, which: str) -> int:
    try:
        year = int(text)
    except ValueError:
        raise InvalidYearArgument(f"Expected an integer for the {which} year, got {text!r}") from None
    if year < MIN_YEAR:
        raise InvalidYearArgument(f"The {which} year must be {MIN_YEAR} or later, got {year}")
    return year


def parse_utc_offset(text: str) -> int:
    try:
        offset = int(text)
    except ValueError:
        raise InvalidUtcOffsetArgument(f"Expected an integer for the UTC offset in hours, got {text!r}") from None
    if not -12 <= offset <= 14:
        raise InvalidUtcOffsetArgument(f"UTC offset must be between -12 and 14 hours, got {offset}")
    return offset


def run(store_path: str, template_path: str, from_year: int, until_year: int, site: SiteConfig) -> WriteReport:
    """Generate and persist every day of the year range.

    Args:
        store_path: Existing SQLite database
        template_path: File holding the 7-placeholder insert statement
        from_year: First year (inclusive)
        until_year: Last year (inclusive); an earlier year than from_year writes nothing
        site: Location, offset, zenith and leap rule

    Returns:
        WriteReport of the run
    """
    template = load_insert_template(template_path)
    conn = open_store(store_path)
    try:
        sink = SQLiteSink(conn, template)
        sink.prepare()
        generator = DatasetGenerator(
            location=site.location(),
            from_year=from_year,
            until_year=until_year,
            utc_offset=site.utc_offset,
            zenith=site.zenith,
            leap_rule=site.leap_rule,
        )
        logger.info(
            f"Generating {from_year}-{until_year} for lat={site.latitude} lng={site.longitude} "
            f"UTC{site.utc_offset:+d}"
        )
        return sink.write(generator)
    finally:
        conn.close()


@click.command(cls=GenerateCommand)
@click.argument("store_path")
@click.argument("template_file")
@click.argument("from_year")
@click.argument("until_year")
@click.argument("utc_offset", required=False)
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML site configuration (latitude, longitude, zenith, utc_offset, leap_rule)",
)
@click.option("--latitude", type=float, help="Latitude in degrees, positive North")
@click.option("--longitude", type=float, help="Longitude in degrees, positive East")
@click.option("--zenith", type=float, help="Sun zenith for rise/set in degrees (default: -0.83)")
@click.option("--leap-rule", type=click.Choice(LEAP_RULES), help="February leap-year rule")
@click.option(
    "--manifest",
    type=click.Path(dir_okay=False),
    help="Write a JSON run manifest to this path",
)
@click.option(
    "--log-level",
    default="INFO",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (default: INFO)",
)
def main(
    store_path: str,
    template_file: str,
    from_year: str,
    until_year: str,
    utc_offset: Optional[str],
    config: Optional[str],
    latitude: Optional[float],
    longitude: Optional[float],
    zenith: Optional[float],
    leap_rule: Optional[str],
    manifest: Optional[str],
    log_level: str,
):
    """Store sunrise and sunset times for every day from FROM_YEAR to UNTIL_YEAR.

    UTC_OFFSET is the local standard time offset in whole hours (default: 1).
    Central European daylight saving time is applied on top of it.

    Examples:
        # Fill 2023-2025 for the default site
        solardays-generate sun.db insert.sql 2023 2025

        # Another site, UTC+2
        solardays-generate sun.db insert.sql 2024 2024 2 --latitude 60.17 --longitude 24.94
    """
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        start = parse_year(from_year, "start")
        end = parse_year(until_year, "end")
        offset = parse_utc_offset(utc_offset) if utc_offset is not None else None
        site = load_site_config(
            config,
            latitude=latitude,
            longitude=longitude,
            zenith=zenith,
            utc_offset=offset,
            leap_rule=leap_rule,
        )
    except (SolarDaysError, ValidationError, yaml.YAMLError, OSError, UnicodeDecodeError) as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(1)

    try:
        report = run(store_path, template_file, start, end, site)
    except SolarDaysError as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(1)

    if manifest:
        meta = build_manifest(store_path, start, end, site.model_dump(), report)
        try:
            write_manifest(manifest, meta)
        except OSError as e:
            click.echo(f"ERROR: Unable to write manifest {manifest}: {e}", err=True)
            sys.exit(1)
        logger.info(f"Wrote manifest to {manifest}")

    if not report.ok:
        click.echo(
            f"WARNING: {len(report.failed)} rows failed to insert (days {report.failed_indices})",
            err=True,
        )
    click.echo(f"Done. Wrote {report.written} rows to {store_path}")


if __name__ == "__main__":
    main()
