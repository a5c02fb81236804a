"""Mini README: Entry point CLI for geobounds.

This script exposes a Typer CLI with two commands: ``compute`` prints the
bounding box of a GeoJSON file and ``serve`` starts the FastAPI service with
uvicorn. Settings come from ``GEOBOUNDS_*`` environment variables when
options are omitted.

Exit codes for ``compute``: 0 on a valid result, 1 when the file cannot be
read or parsed, 2 when the computed bounds are invalid (e.g. no coordinates).
"""

from __future__ import annotations

import json
from pathlib import Path

import typer
import uvicorn

from geobounds.configuration import get_settings
from geobounds.geometry import FeatureCollection, bounds, feature_bounds_table
from geobounds.logging_utils import configure_root_logger, get_logger
from geobounds.utils.geojson import bounds_payload, parse_geojson

LOGGER = get_logger(__name__)

cli = typer.Typer(help="Compute GeoJSON bounding boxes and serve them over HTTP.")


@cli.command()
def compute(
    path: Path = typer.Argument(..., help="GeoJSON file to read."),
    per_feature: bool = typer.Option(
        False, help="Also report bounds for each feature of a FeatureCollection."
    ),
) -> None:
    """Print the bounding box of a GeoJSON document as JSON."""

    try:
        entity = parse_geojson(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as error:
        typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1) from error

    box = bounds(entity)
    result = bounds_payload(box)
    if per_feature and isinstance(entity, FeatureCollection):
        result["features"] = [
            dict(id=feature_id, **bounds_payload(feature_box))
            for feature_id, feature_box in feature_bounds_table(entity)
        ]
    LOGGER.debug("Computed bounds for %s valid=%s", path, box.valid)
    typer.echo(json.dumps(result))
    if not box.valid:
        raise typer.Exit(code=2)


@cli.command()
def serve(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger()

    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting geobounds on {effective_host}:{effective_port}.\n"
        f"POST GeoJSON to http://{browser_host}:{effective_port}/bounds"
    )
    uvicorn.run(
        "geobounds.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


if __name__ == "__main__":
    cli()
