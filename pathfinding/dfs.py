from __future__ import annotations

from time import perf_counter
from typing import Dict, List, Optional, Set, Tuple

from env import Grid, Position
from .base import Path, PathfindingAlgorithm, new_counter, reconstruct_path
from .instrumentation import Instrumentation


class DepthFirstPlanner(PathfindingAlgorithm):
    """
    Depth-First Search on a 4-connected grid.

    Goes as deep as possible along the first open neighbour before
    backtracking. Finds *a* path, not necessarily the shortest one.

    find_path() uses an explicit stack. Neighbours are pushed in reverse
    so they are popped in the grid's usual right, down, left, up order.
    find_path_recursive() keeps the recursive formulation.
    """
    key = "dfs"
    name = "Depth-First Search"
    complexity = "O(V + E)"
    optimal = False

    def __init__(self) -> None:
        self.total_runtime: float = 0.0
        self.call_count: int = 0
        self.last_runtime: float = 0.0

    # ------------------------------------------------------------------ #
    # Public API                                                         #
    # ------------------------------------------------------------------ #
    def find_path(
        self,
        grid: Grid,
        instrumentation: Optional[Instrumentation] = None,
    ) -> Tuple[Path, Instrumentation]:
        counter = new_counter(instrumentation)
        t0 = perf_counter()

        # stack entries: (pos, parent it was pushed from)
        stack: List[Tuple[Position, Optional[Position]]] = [(grid.start, None)]
        discovered: Set[Position] = {grid.start}
        visited: Set[Position] = set()
        came_from: Dict[Position, Position] = {}
        counter.on_frontier_add(grid.start)

        while stack:
            cur, via = stack.pop()
            if cur in visited:
                continue
            visited.add(cur)
            if via is not None:
                came_from[cur] = via
            counter.on_explore(cur)

            if cur == grid.end:
                path = reconstruct_path(came_from, cur)
                counter.on_path(path)
                self._update_stats(perf_counter() - t0)
                return path, counter

            for np_ in reversed(grid.neighbors(cur)):
                counter.on_compare()
                if np_ in visited:
                    continue
                stack.append((np_, cur))
                if np_ not in discovered:
                    discovered.add(np_)
                    counter.on_frontier_add(np_)

        self._update_stats(perf_counter() - t0)
        return [], counter

    def find_path_recursive(
        self,
        grid: Grid,
        instrumentation: Optional[Instrumentation] = None,
    ) -> Tuple[Path, Instrumentation]:
        """
        Recursive DFS; the call stack is the frontier.

        NOTE: recursion depth grows with the path length, so this is only
        suitable for grids whose paths stay well below Python's recursion
        limit. Benchmarks use find_path().
        """
        counter = new_counter(instrumentation)
        t0 = perf_counter()

        visited: Set[Position] = set()
        path: Path = []
        counter.on_frontier_add(grid.start)

        if self._search(grid, grid.start, visited, path, counter):
            counter.on_path(path)
        else:
            path = []

        self._update_stats(perf_counter() - t0)
        return path, counter

    # ------------------------------------------------------------------ #
    # Internal helpers                                                   #
    # ------------------------------------------------------------------ #
    def _search(
        self,
        grid: Grid,
        cur: Position,
        visited: Set[Position],
        path: Path,
        counter: Instrumentation,
    ) -> bool:
        visited.add(cur)
        path.append(cur)
        counter.on_explore(cur)

        if cur == grid.end:
            return True

        for np_ in grid.neighbors(cur):
            counter.on_compare()
            if np_ in visited:
                continue
            counter.on_frontier_add(np_)
            if self._search(grid, np_, visited, path, counter):
                return True

        path.pop()
        return False


ALGORITHM = DepthFirstPlanner()
