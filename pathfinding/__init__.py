# pathfinding/__init__.py
import importlib
import pkgutil
from typing import Dict

from errors import UnknownAlgorithmError
from .base import PathfindingAlgorithm

PATHFINDING_ALGOS: Dict[str, PathfindingAlgorithm] = {}

# benchmark / report order
ALGORITHM_ORDER = ("astar", "dijkstra", "bfs", "dfs", "greedy")

# extra spellings accepted by get_algorithm(), on top of keys and display names
ALIASES: Dict[str, str] = {
    "1": "astar",
    "a*": "astar",
    "a-star": "astar",
    "2": "dijkstra",
    "3": "bfs",
    "breadth-first": "bfs",
    "4": "dfs",
    "depth-first": "dfs",
    "5": "greedy",
    "greedy-best-first": "greedy",
    "gbfs": "greedy",
}


def load_algorithms() -> None:
    global PATHFINDING_ALGOS
    PATHFINDING_ALGOS = {}
    package = __name__
    for info in pkgutil.iter_modules(__path__):
        name = info.name
        if name in {"base", "instrumentation", "__init__"}:
            continue
        module = importlib.import_module(f"{package}.{name}")
        algo = getattr(module, "ALGORITHM", None)
        if algo is None:
            continue
        if algo.key in PATHFINDING_ALGOS:
            raise ValueError(f"Duplicate pathfinding key: {algo.key}")
        PATHFINDING_ALGOS[algo.key] = algo


def get_algorithm(key: str) -> PathfindingAlgorithm:
    """Look up an algorithm by key, alias or display name (case-insensitive)."""
    wanted = key.strip().lower()
    wanted = ALIASES.get(wanted, wanted)
    if wanted in PATHFINDING_ALGOS:
        return PATHFINDING_ALGOS[wanted]
    for algo in PATHFINDING_ALGOS.values():
        if algo.name.lower() == wanted:
            return algo
    raise UnknownAlgorithmError(key)


load_algorithms()
