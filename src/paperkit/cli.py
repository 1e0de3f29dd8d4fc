"""
Command-line interface for paperkit.

Commands:
- generate: Build a kit and write its PDF/SVG document
- options: Show the options a kit accepts and their defaults
- scales: List the named model scales
- convert: Express a measurement in another unit

Usage:
    paperkit generate examples/simple_house.py:SimpleHouse --scale N -o house.pdf
    paperkit generate mykits.house:House --backend svg --set wallColor=tan
    paperkit options examples/simple_house.py:SimpleHouse
    paperkit convert "4' 6\\"" --to m
"""

from __future__ import annotations

import importlib
import importlib.util
import logging
from pathlib import Path

import click

from . import __version__
from .errors import PaperkitError
from .kit import Kit
from .measurement import world
from .options import load_options_file
from .render import BACKENDS
from .render.page_formats import PAGE_FORMATS_PT
from .scales import available_scales


def load_kit_class(target: str) -> type[Kit]:
    """
    Resolve ``module:Class`` or ``path/to/file.py:Class`` to a Kit subclass.

    Raises:
        click.BadParameter: if the target cannot be imported or is not a Kit
    """
    module_name, sep, class_name = target.rpartition(":")
    if not sep or not module_name or not class_name:
        raise click.BadParameter(f"Expected MODULE:CLASS or FILE.py:CLASS, got {target!r}")

    if module_name.endswith(".py"):
        path = Path(module_name)
        if not path.exists():
            raise click.BadParameter(f"No such file: {path}")
        spec = importlib.util.spec_from_file_location(path.stem, path)
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
    else:
        try:
            module = importlib.import_module(module_name)
        except ImportError as e:
            raise click.BadParameter(f"Cannot import {module_name!r}: {e}") from e

    kit_class = getattr(module, class_name, None)
    if not (isinstance(kit_class, type) and issubclass(kit_class, Kit)):
        raise click.BadParameter(f"{class_name!r} in {module_name!r} is not a Kit subclass")
    return kit_class


def _parse_settings(settings: tuple[str, ...]) -> dict[str, str]:
    overrides = {}
    for setting in settings:
        key, sep, value = setting.partition("=")
        if not sep or not key.strip():
            raise click.BadParameter(f"Expected KEY=VALUE, got {setting!r}", param_hint="--set")
        overrides[key.strip()] = value.strip()
    return overrides


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging.")
def cli(verbose: bool):
    """paperkit - printable paper model kits."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("target")
@click.option(
    "--output", "-o",
    type=click.Path(path_type=Path),
    help="Output file. Defaults to <KitClass>.pdf or .svg.",
)
@click.option("--scale", "-s", help="Model scale name (HO, N, ...) or ratio like 1:100.")
@click.option(
    "--format", "page_format",
    type=click.Choice(sorted(PAGE_FORMATS_PT), case_sensitive=False),
    help="Page format.",
)
@click.option("--orientation", type=click.Choice(["portrait", "landscape"]), help="Page orientation.")
@click.option("--backend", type=click.Choice(sorted(BACKENDS)), help="Output document type.")
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, path_type=Path),
    help="YAML file of options.",
)
@click.option("--set", "settings", multiple=True, metavar="KEY=VALUE", help="Override a kit option.")
def generate(
    target: str,
    output: Path | None,
    scale: str | None,
    page_format: str | None,
    orientation: str | None,
    backend: str | None,
    config: Path | None,
    settings: tuple[str, ...],
):
    """
    Build the kit TARGET and write its document.

    TARGET is MODULE:CLASS or FILE.py:CLASS naming a Kit subclass.
    Options are applied in order: kit defaults, --config, --set, then the
    dedicated flags.
    """
    kit_class = load_kit_class(target)

    overrides = {}
    if config:
        try:
            overrides.update(load_options_file(config))
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="--config") from e
    overrides.update(_parse_settings(settings))
    flags = {
        "scale": scale,
        "page_format": page_format,
        "orientation": orientation,
        "backend": backend,
        "output_path": output,
    }
    overrides.update({k: v for k, v in flags.items() if v is not None})

    try:
        paths = kit_class().generate(overrides)
    except PaperkitError as e:
        raise click.ClickException(str(e)) from e

    for path in paths:
        click.echo(f"Wrote {path}")


@cli.command()
@click.argument("target")
def options(target: str):
    """List the options of kit TARGET and their defaults."""
    kit = load_kit_class(target)()
    click.echo(f"Options for {type(kit).__name__}:")
    for key, value in kit.options.as_dict().items():
        if key == "extra":
            continue
        click.echo(f"  {key:<20} {value}")
    for key, value in kit.options.extra.items():
        click.echo(f"  {key:<20} {value}")


@cli.command()
def scales():
    """List the named model scales."""
    for scale in available_scales():
        click.echo(f"  {scale.name:<5} 1:{scale.ratio:<6g} {scale.description}")


@cli.command()
@click.argument("measurement")
@click.option("--to", "unit", default="m", show_default=True, help="Target unit.")
def convert(measurement: str, unit: str):
    """Express MEASUREMENT (e.g. "3 ft 6 in") in another unit."""
    try:
        value = world(measurement).in_units(unit)
    except PaperkitError as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"{value:g} {unit}")


def main():
    cli()


if __name__ == "__main__":
    main()
