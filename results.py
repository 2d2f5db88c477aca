"""
Tabular hand-off of benchmark metrics.

Reporting code (console tables, notebooks, plots) consumes the rows or the
pandas DataFrame built here instead of PathfindingMetrics objects, e.g.:

    from benchmark import BenchmarkCoordinator
    from results import metrics_to_frame, summarize

    metrics = BenchmarkCoordinator(seed=0).run_benchmarks((20, 20), iterations=5)
    df = metrics_to_frame(metrics)
    print(summarize(df))
"""

from typing import Any, Dict, List, Sequence

import pandas as pd

from benchmark import PathfindingMetrics

COLUMNS = [
    "algorithm",
    "grid",
    "grid.width",
    "grid.height",
    "obstacles",
    "path_found",
    "path_length",
    "nodes_explored",
    "nodes_in_frontier",
    "comparisons",
    "memory_allocations",
    "duration_us",
    "complexity",
    "successful_runs",
    "iterations",
]


def metric_to_row(m: PathfindingMetrics) -> Dict[str, Any]:
    width, height = m.grid_size
    return {
        "algorithm": m.algorithm_name,
        "grid": m.grid_label,
        "grid.width": width,
        "grid.height": height,
        "obstacles": m.obstacle_count,
        "path_found": m.path_found,
        "path_length": m.path_length,
        "nodes_explored": m.nodes_explored,
        "nodes_in_frontier": m.nodes_in_frontier,
        "comparisons": m.comparisons,
        "memory_allocations": m.memory_allocations,
        "duration_us": m.duration_us,
        "complexity": m.theoretical_complexity,
        "successful_runs": m.successful_runs,
        "iterations": m.iterations,
    }


def metrics_to_rows(metrics: Sequence[PathfindingMetrics]) -> List[Dict[str, Any]]:
    return [metric_to_row(m) for m in metrics]


def metrics_to_frame(metrics: Sequence[PathfindingMetrics]) -> pd.DataFrame:
    """One row per (algorithm, grid) pair, columns in COLUMNS order."""
    return pd.DataFrame(metrics_to_rows(metrics), columns=COLUMNS)


def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """Per-algorithm means across grids, in the order algorithms first appear."""
    if df.empty:
        return pd.DataFrame(columns=["path_length", "nodes_explored", "duration_us", "grids"])

    order = list(dict.fromkeys(df["algorithm"]))
    return (
        df.groupby("algorithm")
        .agg(
            path_length=("path_length", "mean"),
            nodes_explored=("nodes_explored", "mean"),
            duration_us=("duration_us", "mean"),
            grids=("grid", "count"),
        )
        .reindex(order)
    )

