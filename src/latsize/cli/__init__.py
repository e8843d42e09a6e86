"""CLI module for latsize.

Provides the command-line interface for computing lattice sizes and
running the random polygon timing experiment.
"""

from __future__ import annotations

from latsize.cli.main import app

__all__ = ["app"]
