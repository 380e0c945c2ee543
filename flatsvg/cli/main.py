import math
from pathlib import Path
from typing import Optional, List, Dict, Any, Tuple

import typer

# Engine imports
from ..pathdata.normalize import (                      # relative -> absolute
    convert_relative_to_absolute, check_path_data, InvalidPathData, PathDataError,
)
from ..geometry.flatten import flatten_path, DEFAULT_RESOLUTION
from ..packaging.header_writer import write_header, HeaderOptions
from ..validators.intersections import has_self_intersections
# SVG/DXF writers are imported inside their commands to keep CLI import light

app = typer.Typer(help="SVG path flattening CLI")


# ---------------------------
# Helpers
# ---------------------------

def _load_options(options: Optional[Path]) -> Dict[str, Any]:
    """Options YAML as a dict; no file or an empty document gives {}."""
    if options is None:
        return {}
    import yaml

    data = yaml.safe_load(Path(options).read_text()) or {}
    if not isinstance(data, dict):
        raise typer.BadParameter(f"expected a mapping, got {type(data).__name__}", param_hint="--options")
    return data


def _header_options(opts: Dict[str, Any]) -> HeaderOptions:
    """`header` section of the options as HeaderOptions; unknown keys are rejected."""
    try:
        return HeaderOptions(**(opts.get("header") or {}))
    except TypeError as e:
        raise typer.BadParameter(f"bad header section: {e}", param_hint="--options")


def _resolve_resolution(raw: Optional[str], opts: Dict[str, Any]) -> float:
    """
    Pick the sampling step: --resolution, then options `resolution`, then 0.1.
    Text that is not a number falls back to the default; numbers outside (0, 1]
    are rejected.
    """
    if raw is None:
        raw = opts.get("resolution")
    if raw is None:
        return DEFAULT_RESOLUTION
    try:
        r = float(raw)
    except (TypeError, ValueError):
        typer.secho(f"Unparsable resolution {raw!r}, using {DEFAULT_RESOLUTION}", fg="yellow", err=True)
        return DEFAULT_RESOLUTION
    if not math.isfinite(r) or r <= 0 or r > 1:
        raise typer.BadParameter(f"resolution must be in (0, 1], got {r}", param_hint="--resolution")
    return r


def _flatten_file(inp: Path, resolution: float) -> List[Tuple[float, float]]:
    """Read path data, check it, make it absolute and flatten it. Exits 1 on bad input."""
    content = Path(inp).read_text(encoding="utf-8")
    try:
        check_path_data(content)
    except InvalidPathData as e:
        typer.secho("Invalid input! Only provide the contents of d='<you want this in your file>'", fg="red", err=True)
        typer.secho(str(e), fg="red", err=True)
        raise typer.Exit(code=1)
    typer.echo("Found a valid path, continuing...")
    try:
        absolute = convert_relative_to_absolute(content)
    except PathDataError as e:
        typer.secho(f"Could not convert path data: {e}", fg="red", err=True)
        raise typer.Exit(code=1)
    points = flatten_path(absolute, resolution)
    if has_self_intersections(points):
        typer.secho("Warning: flattened path intersects itself", fg="yellow", err=True)
    return points


# ---------------------------
# Commands
# ---------------------------

@app.command()
def convert(
    inp: Path = typer.Option(..., exists=True, dir_okay=False, help="Text file holding the path 'd' attribute"),
    out: Path = typer.Option(..., help="Output header path (.h is appended)"),
    resolution: Optional[str] = typer.Option(None, help="Bezier step size in (0, 1] (default 0.1)"),
    options: Optional[Path] = typer.Option(None, exists=True, dir_okay=False, help="Options YAML"),
):
    """
    Flatten path data and write it as a C++ header of draw calls.
    """
    opts = _load_options(options)
    header_opts = _header_options(opts)
    r = _resolve_resolution(resolution, opts)
    points = _flatten_file(inp, r)

    path = write_header(points, out, header_opts)
    typer.echo(f"Wrote header: {path}")


@app.command()
def normalize(
    inp: Path = typer.Option(..., exists=True, dir_okay=False, help="Text file holding the path 'd' attribute"),
):
    """
    Print the path data with relative commands rewritten as absolute ones.
    """
    content = Path(inp).read_text(encoding="utf-8")
    try:
        typer.echo(convert_relative_to_absolute(content))
    except PathDataError as e:
        typer.secho(f"Could not convert path data: {e}", fg="red", err=True)
        raise typer.Exit(code=1)


@app.command()
def preview(
    inp: Path = typer.Option(..., exists=True, dir_okay=False, help="Text file holding the path 'd' attribute"),
    out: Path = typer.Option(..., help="Output SVG path"),
    resolution: Optional[str] = typer.Option(None, help="Bezier step size in (0, 1] (default 0.1)"),
    options: Optional[Path] = typer.Option(None, exists=True, dir_okay=False, help="Options YAML"),
):
    """
    Write the flattened polyline to an SVG for quick visual checks.
    """
    from ..packaging.to_svg import polyline_to_svg

    opts = _load_options(options)
    r = _resolve_resolution(resolution, opts)
    points = _flatten_file(inp, r)

    out.parent.mkdir(parents=True, exist_ok=True)
    svg = opts.get("preview") or {}
    polyline_to_svg(points, str(out), name=inp.stem,
                    margin=svg.get("margin", 20), stroke_width=svg.get("stroke_width", 1))
    typer.echo(f"Wrote {out}")


@app.command("export-dxf")
def export_dxf_cmd(
    inp: Path = typer.Option(..., exists=True, dir_okay=False, help="Text file holding the path 'd' attribute"),
    out: Path = typer.Option(..., help="Output DXF path"),
    resolution: Optional[str] = typer.Option(None, help="Bezier step size in (0, 1] (default 0.1)"),
    units: str = typer.Option("mm", help="Units for $INSUNITS (mm|in|unitless)"),
    options: Optional[Path] = typer.Option(None, exists=True, dir_okay=False, help="Options YAML"),
):
    """
    Export the flattened polyline to DXF (AC1018) as one LWPOLYLINE.
    """
    from ..packaging.dxf_exporter import export_dxf  # import here to keep CLI import light

    opts = _load_options(options)
    r = _resolve_resolution(resolution, opts)
    points = _flatten_file(inp, r)

    out.parent.mkdir(parents=True, exist_ok=True)
    layer = (opts.get("dxf") or {}).get("layer", "CUT")
    path = export_dxf(points, str(out), units=units, layer=layer)
    typer.echo(f"Wrote DXF: {path}")


if __name__ == "__main__":
    app()
