"""CLI runners for lattice size computation and sampling experiments.

This module provides the execution logic for the CLI commands, bridging the
CLI interface to the core reduction components.
"""

from __future__ import annotations

import json
import time
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from latsize.core import LatticeSizeResult, lattice_size
from latsize.geometry import Polygon, as_polygon
from latsize.sampling import sample_polygons
from latsize.utils.logging import correlation_scope, get_logger


@dataclass(frozen=True)
class SampleRecord:
    """Outcome of the reduction on one sampled polygon."""

    index: int
    n_points: int
    size: int | str
    iterations: int
    seconds: float


@dataclass
class SampleReport:
    """Result from a sampling experiment run."""

    run_id: str
    seed: int
    records: list[SampleRecord] = field(default_factory=list)

    @property
    def max_iterations(self) -> int:
        return max((r.iterations for r in self.records), default=0)

    @property
    def mean_seconds(self) -> float:
        if not self.records:
            return 0.0
        return sum(r.seconds for r in self.records) / len(self.records)

    def to_dict(self) -> dict[str, Any]:
        return {
            "run_id": self.run_id,
            "seed": self.seed,
            "count": len(self.records),
            "max_iterations": self.max_iterations,
            "mean_seconds": self.mean_seconds,
            "records": [
                {
                    "index": r.index,
                    "n_points": r.n_points,
                    "size": r.size,
                    "iterations": r.iterations,
                    "seconds": r.seconds,
                }
                for r in self.records
            ],
        }


def parse_point_token(token: str) -> tuple[str, str]:
    """Split an ``x,y`` command-line token into its two coordinates.

    Coordinates stay strings here; ``Point`` parses them exactly, so both
    ``"3/2,1"`` and ``"1.5,1"`` are read as rationals.

    Raises:
        ValueError: If the token does not have exactly two parts.
    """
    parts = [part.strip() for part in token.split(",")]
    if len(parts) != 2 or not all(parts):  # noqa: PLR2004
        raise ValueError(f"Expected a point as 'x,y', got {token!r}")
    return parts[0], parts[1]


def load_polygons(path: Path) -> list[Polygon]:
    """Load one polygon or a batch of polygons from a JSON file.

    Accepted shapes:
        [[x, y], [x, y], ...]            a single polygon
        [[[x, y], ...], [[x, y], ...]]   a batch of polygons

    Raises:
        ValueError: If the JSON does not match either shape.
    """
    with Path(path).open(encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON list of points in {path}")
    if data and all(_is_point_list(item) for item in data):
        return [as_polygon(item) for item in data]
    if _is_point_list(data):
        return [as_polygon(data)]
    raise ValueError(f"Expected [[x, y], ...] or a list of such lists in {path}")


def _is_point_list(value: object) -> bool:
    return isinstance(value, list) and all(
        isinstance(p, list) and len(p) == 2  # noqa: PLR2004
        and not any(isinstance(c, list) for c in p)
        for p in value
    )


def compute_polygons(
    polygons: list[Polygon],
    *,
    max_steps: int | None = None,
) -> list[LatticeSizeResult]:
    """Compute the lattice size of every polygon, in order."""
    logger = get_logger(__name__)
    results: list[LatticeSizeResult] = []
    for index, polygon in enumerate(polygons):
        with correlation_scope(polygon_id=str(index)):
            result = lattice_size(polygon, max_steps=max_steps)
            logger.info(
                "Polygon reduced",
                n_points=len(polygon),
                size=str(result.size),
                iterations=result.iterations,
            )
        results.append(result)
    return results


def run_sample(  # noqa: PLR0913
    *,
    count: int,
    min_vertices: int,
    max_vertices: int,
    bound: int,
    seed: int,
    max_steps: int | None = None,
) -> SampleReport:
    """Time the reduction on randomly sampled polygons."""
    logger = get_logger(__name__)

    timestamp = datetime.now(UTC).strftime("%Y%m%d_%H%M%S")
    run_id = f"sample_{seed}_{timestamp}"
    report = SampleReport(run_id=run_id, seed=seed)
    with correlation_scope(run_id=run_id):
        logger.info(
            "Sampling polygons",
            count=count,
            min_vertices=min_vertices,
            max_vertices=max_vertices,
            bound=bound,
            seed=seed,
        )
        polygons = sample_polygons(
            count=count,
            min_vertices=min_vertices,
            max_vertices=max_vertices,
            bound=bound,
            seed=seed,
        )
        for index, polygon in enumerate(polygons):
            with correlation_scope(polygon_id=str(index)):
                start_time = time.perf_counter()
                result = lattice_size(polygon, max_steps=max_steps)
                seconds = time.perf_counter() - start_time
            report.records.append(
                SampleRecord(
                    index=index,
                    n_points=len(polygon),
                    size=result.to_dict()["size"],
                    iterations=result.iterations,
                    seconds=seconds,
                )
            )

        logger.info(
            "Sampling complete",
            count=len(report.records),
            max_iterations=report.max_iterations,
            mean_seconds=report.mean_seconds,
        )
    return report
