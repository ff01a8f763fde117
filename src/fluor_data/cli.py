"""Command-line interface for inspecting fluorophore data.

Reads the fluorophores and cytometers data files from a data directory and
answers name, peak, point-lookup, color and instrument queries.
"""

import json
import logging
import sys

import click
from rich.console import Console
from rich.table import Table

from fluor_data.config.factory import DataFactory
from fluor_data.data.fluorophores import FluorophoreCatalog
from fluor_data.data.instruments import InstrumentReader
from fluor_data.exceptions import ConfigurationError
from fluor_data.spectral.color import color_at

console = Console()


def _load_catalog(ctx: click.Context) -> tuple[DataFactory, FluorophoreCatalog]:
    """Load the catalog from the data directory given to the group."""
    factory = ctx.obj["factory"]
    catalog = FluorophoreCatalog()
    try:
        catalog.load(factory)
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    return factory, catalog


def _resolve(catalog: FluorophoreCatalog, name: str) -> str:
    fluor_id = catalog.resolve(name)
    if fluor_id is None:
        click.echo(f"Error: Unknown fluorophore: {name}", err=True)
        sys.exit(1)
    return fluor_id


@click.group()
@click.version_option(version="0.1.0")
@click.option(
    "--data-dir",
    "-d",
    type=click.Path(file_okay=False),
    default="data",
    help="Directory containing the data files (default: data)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, data_dir, verbose):
    """Fluor Data - inspect fluorophore spectra.

    \b
    - List display names and their canonical ids
    - Show excitation/emission peaks
    - Look up intensities at a wavelength
    - Convert a wavelength to an approximate RGB color
    - List instruments and their lasers and filters
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["factory"] = DataFactory(data_dir)


@cli.command()
@click.pass_context
def names(ctx):
    """List all display names with the fluorophore they resolve to.

    Example:
        fluor-data --data-dir data names
    """
    _, catalog = _load_catalog(ctx)
    ids = catalog.get_fluor_ids()
    multinames = catalog.get_fluor_multinames()

    table = Table(title=f"Fluorophores ({len(catalog)} names)")
    table.add_column("Name", style="bold")
    table.add_column("ID")
    table.add_column("Also known as")
    for name in catalog.get_fluor_names():
        table.add_row(name, ids[name], ", ".join(multinames.get(name, [])))
    console.print(table)


@cli.command()
@click.argument("name")
@click.option("--json", "as_json", is_flag=True, help="Output JSON")
@click.pass_context
def peak(ctx, name, as_json):
    """Show the excitation and emission peaks of a fluorophore.

    Example:
        fluor-data peak FITC
    """
    factory, catalog = _load_catalog(ctx)
    fluor_id = _resolve(catalog, name)
    entry = catalog.get_cache_spectrum(factory, fluor_id, index=0, name=name)

    result = {
        "name": name,
        "id": fluor_id,
        "valid": entry.spectrum.is_valid(),
        "excitation_max": entry.excitation_max(),
        "emission_max": entry.emission_max(),
        "absorption": entry.spectrum.is_absorption,
    }
    if as_json:
        click.echo(json.dumps(result, indent=2))
        return

    click.echo(f"{name} ({fluor_id})")
    click.echo(f"  Excitation max: {result['excitation_max']:g} nm")
    click.echo(f"  Emission max:   {result['emission_max']:g} nm")
    if not result["valid"]:
        click.echo("  Warning: spectral data is incomplete", err=True)


@cli.command()
@click.argument("name")
@click.argument("wavelength", type=int)
@click.pass_context
def lookup(ctx, name, wavelength):
    """Show excitation and emission intensity at a wavelength.

    Example:
        fluor-data lookup FITC 520
    """
    factory, catalog = _load_catalog(ctx)
    fluor_id = _resolve(catalog, name)
    spectrum = catalog.get_spectrum(factory, fluor_id)

    click.echo(f"{name} ({fluor_id}) at {wavelength} nm")
    click.echo(f"  Excitation: {spectrum.excitation_at(wavelength):g}")
    click.echo(f"  Emission:   {spectrum.emission_at(wavelength):g}")


@cli.command()
@click.argument("wavelength", type=float)
def color(wavelength):
    """Convert a wavelength to an approximate RGB color.

    Example:
        fluor-data color 520
    """
    rgb = color_at(wavelength)
    click.echo(f"{wavelength:g} nm: rgb{rgb.as_tuple()} {rgb.to_hex()}")


@cli.command()
@click.argument("instrument_id", required=False)
@click.pass_context
def instruments(ctx, instrument_id):
    """List instruments, or show the laser lines of one instrument.

    Example:
        fluor-data instruments canto
    """
    factory = ctx.obj["factory"]
    reader = InstrumentReader()
    try:
        reader.load(factory)
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if instrument_id is None:
        table = Table(title=f"Instruments ({len(reader)})")
        table.add_column("ID", style="bold")
        table.add_column("Name")
        for entry in reader.get_instrument_ids():
            table.add_row(entry.id, entry.name)
        console.print(table)
        return

    instrument = reader.get_instrument(factory, instrument_id)
    if instrument.is_empty():
        click.echo(f"Error: Unknown or invalid instrument: {instrument_id}", err=True)
        sys.exit(1)

    table = Table(title=instrument.name)
    table.add_column("Lasers", style="bold")
    table.add_column("Filters")
    for line in instrument.optics:
        table.add_row(
            ", ".join(f"{laser.wavelength:g} nm" for laser in line.lasers),
            ", ".join(str(filter_) for filter_ in line.filters),
        )
    console.print(table)


if __name__ == "__main__":
    cli()
