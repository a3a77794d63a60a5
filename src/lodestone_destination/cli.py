"""CLI entrypoint for lodestone-destination."""

from __future__ import annotations

import logging
import os

import click
from rich.console import Console
from rich.table import Table

from lodestone_destination.destination import destination
from lodestone_destination.geo import great_circle_km
from lodestone_destination.models import FeaturePoint
from lodestone_destination.units import Unit, UnrecognizedUnit, aliases

LOG_LEVEL = os.getenv("LODESTONE_LOG_LEVEL", "WARNING")
DEFAULT_UNITS = os.getenv("LODESTONE_DEFAULT_UNITS", "km")

console = Console()
logger = logging.getLogger(__name__)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log at DEBUG level.")
def cli(verbose: bool):
    """Lodestone — project a destination point along a great circle."""
    # getLevelName maps unknown names to the string "Level <name>"
    level = logging.getLevelName(LOG_LEVEL.upper())
    known = isinstance(level, int)
    logging.basicConfig(
        level=logging.DEBUG if verbose else (level if known else logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    if not known:
        logger.warning("Unknown LODESTONE_LOG_LEVEL %r, using WARNING", LOG_LEVEL)


@cli.command("destination")
@click.option("--lng", type=float, required=True, help="Origin longitude in degrees.")
@click.option("--lat", type=float, required=True, help="Origin latitude in degrees.")
@click.option("--distance", type=float, required=True, help="Distance to travel.")
@click.option("--bearing", type=float, required=True, help="Initial bearing, degrees from north.")
@click.option("--units", default=DEFAULT_UNITS, show_default=True,
              help="degrees, kilometers|km, meters|m, miles|mi or radians.")
@click.option("--json", "as_json", is_flag=True, help="Print the destination as GeoJSON.")
def destination_cmd(lng: float, lat: float, distance: float, bearing: float, units: str,
                    as_json: bool):
    """Compute the point reached from an origin after DISTANCE along BEARING."""
    origin = FeaturePoint(longitude=lng, latitude=lat)
    try:
        unit = Unit.parse(units)
    except UnrecognizedUnit as exc:
        logger.error("Rejected units: %s", exc)
        raise click.BadParameter(str(exc), param_hint="'--units'") from exc

    dest = destination(origin, distance, bearing, unit)

    if as_json:
        click.echo(dest.to_json())
        return

    span_km = great_circle_km(*origin.coordinates(), *dest.coordinates())

    table = Table(title=f"Destination ({distance:g} {unit.value} @ {bearing:g}°)")
    table.add_column("Point", style="bold")
    table.add_column("Longitude", justify="right")
    table.add_column("Latitude", justify="right")
    table.add_row("origin", f"{origin.longitude:.7f}", f"{origin.latitude:.7f}")
    table.add_row("[green]destination[/]", f"{dest.longitude:.7f}", f"{dest.latitude:.7f}")

    console.print(table)
    console.print(f"Great-circle span: {span_km:,.3f} km")


@cli.command("units")
def units_cmd():
    """List accepted unit tokens."""
    table = Table(title="Units of measurement")
    table.add_column("Unit", style="bold")
    table.add_column("Tokens")
    table.add_column("Radius divisor", justify="right")

    for unit in Unit:
        table.add_row(unit.name.lower(), ", ".join(aliases(unit)), f"{unit.radius:,.6f}")

    console.print(table)
