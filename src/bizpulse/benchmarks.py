"""
Sector Benchmark Repository — sector name -> market reference metrics.

The table ships as ``data/sector_benchmarks.json``, is read once on first use
and exposed as a read-only mapping afterwards.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from bizpulse.models.benchmark import SectorBenchmark

logger = logging.getLogger("bizpulse.benchmarks")

DEFAULT_KEY = "default"

_BENCHMARKS: Mapping[str, SectorBenchmark] | None = None


def _load_benchmarks() -> Mapping[str, SectorBenchmark]:
    """Lazy-load the sector benchmarks JSON, preserving file order."""
    global _BENCHMARKS
    if _BENCHMARKS is None:
        data_path = Path(__file__).parent / "data" / "sector_benchmarks.json"
        with open(data_path, encoding="utf-8") as f:
            raw = json.load(f)
        table = {
            key: SectorBenchmark.model_validate(values)
            for key, values in raw.items()
            if key != "_meta"
        }
        if DEFAULT_KEY not in table:
            raise ValueError(f"Benchmark table at {data_path} has no '{DEFAULT_KEY}' entry")
        logger.debug("Loaded %d sector benchmarks", len(table))
        _BENCHMARKS = MappingProxyType(table)
    return _BENCHMARKS


def all_benchmarks() -> Mapping[str, SectorBenchmark]:
    """Return the full, read-only benchmark table."""
    return _load_benchmarks()


def available_sectors() -> list[str]:
    """Return benchmark keys in lookup order, ``default`` included."""
    return list(_load_benchmarks())


def get_benchmark(key: str) -> SectorBenchmark:
    """Exact lookup by table key. Raises ``ValueError`` for unknown keys."""
    table = _load_benchmarks()
    if key not in table:
        raise ValueError(f"Unknown benchmark key: {key}")
    return table[key]


def resolve_benchmark(sector: str | None) -> SectorBenchmark:
    """Resolve a free-text sector label to exactly one benchmark.

    The first key (in table order) contained in the lower-cased label wins;
    a label naming several sectors matches whichever comes first. Empty or
    unmatched labels resolve to the ``default`` entry.
    """
    table = _load_benchmarks()
    normalized = (sector or "").lower()

    for key, benchmark in table.items():
        if key.lower() in normalized:
            return benchmark

    return table[DEFAULT_KEY]
