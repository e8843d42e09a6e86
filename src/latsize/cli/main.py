"""latsize CLI - lattice size of plane lattice polygons.

Command-line interface for computing lattice sizes and running the random
polygon timing experiment.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer

from latsize import __version__
from latsize.config import settings
from latsize.utils.logging import configure_logging, get_logger

app = typer.Typer(
    name="latsize",
    help="latsize: exact lattice size of plane lattice polygons",
    add_completion=False,
)


# =============================================================================
# Commands
# =============================================================================


@app.command()
def version(
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show version information."""
    if json_output:
        typer.echo(json.dumps({"version": __version__}))
    else:
        typer.echo(f"latsize {__version__}")


@app.command()
def compute(
    points: Annotated[
        list[str] | None,
        typer.Argument(help="Polygon vertices as x,y tokens (e.g. 0,0 3,5 7/2,9)"),
    ] = None,
    file: Annotated[
        Path | None,
        typer.Option(
            "--file",
            "-f",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            help="JSON file with [[x, y], ...] or a list of such polygons",
        ),
    ] = None,
    max_steps: Annotated[
        int | None,
        typer.Option("--max-steps", help="Defensive bound on reduction steps"),
    ] = None,
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Increase verbosity (-v, -vv)"
        ),
    ] = 0,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Compute the lattice size of one or more polygons."""
    from latsize.cli.runners import (  # noqa: PLC0415
        compute_polygons,
        load_polygons,
        parse_point_token,
    )
    from latsize.geometry import as_polygon  # noqa: PLC0415

    _configure_logging(verbose)
    logger = get_logger(__name__)

    try:
        if file is not None and points:
            raise ValueError("Pass points either as arguments or with --file, not both")
        if file is not None:
            polygons = load_polygons(file)
        elif points:
            polygons = [as_polygon(parse_point_token(token) for token in points)]
        else:
            raise ValueError("No polygon given: pass x,y points or --file")

        logger.info("Computing lattice size", polygons=len(polygons))
        results = compute_polygons(polygons, max_steps=max_steps)

        if json_output:
            payload = [r.to_dict() for r in results]
            typer.echo(json.dumps(payload[0] if len(payload) == 1 else payload, indent=2))
        else:
            for index, result in enumerate(results):
                prefix = f"[{index}] " if len(results) > 1 else ""
                typer.echo(f"{prefix}Lattice size: {result.size}")
                typer.echo(f"{prefix}Transform: {result.transform.to_tuple()}")
                typer.echo(f"{prefix}Iterations: {result.iterations}")

        raise typer.Exit(0)

    except typer.Exit:
        raise
    except Exception as e:
        logger.exception("Lattice size computation failed")
        if json_output:
            typer.echo(json.dumps({"error": str(e)}))
        else:
            typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None


@app.command()
def sample(  # noqa: PLR0913
    count: Annotated[
        int, typer.Option("--count", "-n", help="Number of random polygons")
    ] = settings.SAMPLE_COUNT,
    min_vertices: Annotated[
        int | None, typer.Option("--min-vertices", help="Fewest points per polygon")
    ] = None,
    max_vertices: Annotated[
        int | None, typer.Option("--max-vertices", help="Most points per polygon")
    ] = None,
    bound: Annotated[
        int, typer.Option("--bound", "-b", help="Coordinate bound (|x|, |y| <= bound)")
    ] = settings.SAMPLE_COORD_BOUND,
    seed: Annotated[int, typer.Option("--seed", "-s", help="Random seed")] = (
        settings.SAMPLE_SEED
    ),
    verbose: Annotated[
        int, typer.Option("--verbose", "-v", count=True, help="Increase verbosity")
    ] = 0,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Time the reduction on random lattice polygons."""
    from latsize.cli.runners import run_sample  # noqa: PLC0415

    _configure_logging(verbose)
    logger = get_logger(__name__)

    try:
        default_min, default_max = settings.require_sample_range()
        report = run_sample(
            count=count,
            min_vertices=default_min if min_vertices is None else min_vertices,
            max_vertices=default_max if max_vertices is None else max_vertices,
            bound=bound,
            seed=seed,
        )

        if json_output:
            typer.echo(json.dumps(report.to_dict(), indent=2))
        else:
            for record in report.records:
                typer.echo(
                    f"#{record.index}: points={record.n_points} size={record.size} "
                    f"iterations={record.iterations} time={record.seconds:.6f}s"
                )
            typer.echo(f"\nPolygons: {len(report.records)}")
            typer.echo(f"Max iterations: {report.max_iterations}")
            typer.echo(f"Mean time: {report.mean_seconds:.6f}s")
            typer.echo(f"Run ID: {report.run_id}")

        raise typer.Exit(0)

    except typer.Exit:
        raise
    except Exception as e:
        logger.exception("Sampling failed")
        if json_output:
            typer.echo(json.dumps({"error": str(e)}))
        else:
            typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """latsize: exact lattice size of plane lattice polygons."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


def _configure_logging(verbose: int) -> None:
    """Configure logging based on verbosity level."""
    if verbose == 0:
        level = "WARNING"
    elif verbose == 1:
        level = "INFO"
    else:  # verbose >= 2
        level = "DEBUG"

    configure_logging(level=level)


if __name__ == "__main__":  # pragma: no cover
    app()
