from collections import deque
from time import perf_counter
from typing import Dict, Optional, Set, Tuple

from env import Grid, Position
from .base import Path, PathfindingAlgorithm, new_counter, reconstruct_path
from .instrumentation import Instrumentation


class BFSPlanner(PathfindingAlgorithm):
    key = "bfs"
    name = "Breadth-First Search"
    complexity = "O(V + E)"
    optimal = True

    def __init__(self) -> None:
        self.total_runtime = 0.0
        self.call_count = 0
        self.last_runtime = 0.0

    def find_path(
        self,
        grid: Grid,
        instrumentation: Optional[Instrumentation] = None,
    ) -> Tuple[Path, Instrumentation]:
        """
        BFS from grid.start. Returns the cells from start to end (inclusive),
        or an empty list [] if end is unreachable.
        """
        counter = new_counter(instrumentation)
        t0 = perf_counter()

        q = deque([grid.start])
        seen: Set[Position] = {grid.start}
        came_from: Dict[Position, Position] = {}
        counter.on_frontier_add(grid.start)

        path: Path = []
        while q:
            cur = q.popleft()
            counter.on_explore(cur)

            if cur == grid.end:
                path = reconstruct_path(came_from, cur)
                counter.on_path(path)
                break

            for np_ in grid.neighbors(cur):
                counter.on_compare()
                if np_ in seen:
                    continue
                seen.add(np_)
                came_from[np_] = cur
                q.append(np_)
                counter.on_frontier_add(np_)

        self._update_stats(perf_counter() - t0)
        # [] means "no path found"
        return path, counter


ALGORITHM = BFSPlanner()
