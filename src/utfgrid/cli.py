"""Command-line interface for rendering UTFGrid tiles.

This module provides CLI commands for rendering a UTFGrid from a vector
file using the Typer framework. Defaults for tile size, resolution, extent
and fields come from the Dynaconf settings in ``utfgrid.config``.
"""
import json
import logging
import pathlib
from typing import List, Optional

import typer

from . import config, utils
from .errors import UTFGridError
from .extent import Extent, TileRequest, parse_tile
from .renderer import render_tile
from .sources import open_source

app = typer.Typer(add_completion=False)


@app.callback()
def callback():
    """
    Render vector features into UTFGrid interaction tiles.
    """


def _parse_extent(value):
    """Build an Extent from "MINX,MINY,MAXX,MAXY" or a four number sequence."""
    parts = value.split(",") if isinstance(value, str) else value
    try:
        bounds = [float(v) for v in parts]
    except (TypeError, ValueError):
        bounds = []
    if len(bounds) != 4:
        raise typer.BadParameter(
            f"Extent must be MINX,MINY,MAXX,MAXY, got {value!r}", param_hint="--extent")
    return Extent(*bounds)


def _parse_fields(value):
    """Field names from a list, or a comma separated string from settings."""
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(",")
    return [str(name).strip() for name in value if str(name).strip()]


def _config_int(key):
    """Positive integer setting; env vars may hand it over as a string."""
    value = config.get(key)
    if isinstance(value, str) and value.strip().isdigit():
        value = int(value)
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise typer.BadParameter(f"Setting {key!r} must be a positive integer, got {value!r}")
    return value


def _build_request(extent, tile, width, height):
    if extent and tile:
        raise typer.BadParameter("Use either --extent or --tile, not both")
    if tile:
        try:
            z, x, y = parse_tile(tile)
        except ValueError as err:
            raise typer.BadParameter(str(err), param_hint="--tile")
        return TileRequest(width, height, Extent.from_tile(z, x, y))
    if extent:
        return TileRequest(width, height, _parse_extent(extent))
    bounds = config.get("extent")
    if bounds is None:
        raise typer.BadParameter(
            "No extent given and none configured", param_hint="--extent")
    return TileRequest(width, height, _parse_extent(bounds))


@app.command()
def render(
    source: pathlib.Path = typer.Argument(..., exists=True, dir_okay=False,
                                          help="Vector file to rasterize."),
    extent: Optional[str] = typer.Option(None, help="MINX,MINY,MAXX,MAXY of the tile."),
    tile: Optional[str] = typer.Option(None, help="Slippy map tile as z/x/y."),
    width: Optional[int] = typer.Option(None, min=1, help="Tile width in pixels."),
    height: Optional[int] = typer.Option(None, min=1, help="Tile height in pixels."),
    resolution: Optional[int] = typer.Option(None, min=1, help="Pixels per grid cell."),
    field: Optional[List[str]] = typer.Option(None, "--field", "-f",
                                              help="Attribute to include, repeatable."),
    layer: Optional[str] = typer.Option(None, help="Layer of a multi-layer file."),
    output: Optional[pathlib.Path] = typer.Option(None, "--output", "-o",
                                                  help="Write JSON here instead of stdout."),
    env: str = typer.Option("DEFAULT", help="Settings environment."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """Render one tile of SOURCE as UTFGrid JSON."""
    if env != "DEFAULT":
        config.change_env(env)
    utils.VERBOSE = verbose
    if verbose:
        logging.basicConfig()
        logging.getLogger("utfgrid").setLevel(logging.DEBUG)

    width = width or _config_int("width")
    height = height or _config_int("height")
    resolution = resolution or _config_int("resolution")
    fields = _parse_fields(field or config.get("fields"))
    if not fields:
        raise typer.BadParameter("At least one --field is required", param_hint="--field")
    request = _build_request(extent, tile, width, height)
    utils.vprint(f"Rendering {source} for {request.extent}")

    try:
        features = open_source(source, layer=layer)
        utils.vprint(f"{len(features)} features, schema {features.schema_attribute_names()}",
                     level=1)
        utfgrid = render_tile(features, request, fields, resolution=resolution)
    except UTFGridError as err:
        typer.echo(f"Error: {err}", err=True)
        raise typer.Exit(code=1)

    text = json.dumps(utfgrid, indent=2, ensure_ascii=False, default=str)
    if output:
        output.write_text(text + "\n", encoding="utf-8")
        utils.vprint(f"Wrote {output}")
    else:
        typer.echo(text)


@app.command("tile-bounds")
def tile_bounds(tile: str = typer.Argument(..., help="Slippy map tile as z/x/y.")):
    """Print the lon/lat extent of a slippy map tile."""
    try:
        z, x, y = parse_tile(tile)
    except ValueError as err:
        raise typer.BadParameter(str(err), param_hint="TILE")
    typer.echo(",".join(repr(v) for v in Extent.from_tile(z, x, y).bounds))


if __name__ == "__main__":
    app()
