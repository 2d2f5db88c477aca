from __future__ import annotations

import logging
import math
import random
from collections import deque
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator, List, Optional, Set

import numpy as np

from config import FALLBACK_DENSITY_RATIO, MAX_ATTEMPTS_FACTOR

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Position:
    """A grid cell, addressed as (row, col). Hashable, compared by equality only."""
    row: int
    col: int

    def manhattan_distance_to(self, other: Position) -> int:
        return abs(self.row - other.row) + abs(self.col - other.col)

    def distance_to(self, other: Position) -> float:
        dr = self.row - other.row
        dc = self.col - other.col
        return (dr * dr + dc * dc) ** 0.5


class CellType(IntEnum):
    OPEN = 0
    BLOCKED = 1
    START = 2
    END = 3


# right, down, left, up; DFS / A* / greedy tie-breaking depends on this order
DIRECTIONS_4 = ((0, 1), (1, 0), (0, -1), (-1, 0))

DIRECTIONS_8 = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


def eight_neighbors(pos: Position, width: int, height: int) -> List[Position]:
    """All in-bounds cells around pos, diagonals included, ignoring obstacles."""
    out: List[Position] = []
    for dr, dc in DIRECTIONS_8:
        r, c = pos.row + dr, pos.col + dc
        if 0 <= r < height and 0 <= c < width:
            out.append(Position(r, c))
    return out


@dataclass
class Grid:
    """
    width x height matrix of CellType with a fixed start and end.

    Invariant: the start and end cells are never BLOCKED. Search algorithms
    only read a Grid; GridGenerator is the only writer.
    """
    width: int
    height: int
    start: Position
    end: Position
    cells: np.ndarray = field(repr=False)

    @classmethod
    def new(
        cls,
        width: int,
        height: int,
        start: Optional[Position] = None,
        end: Optional[Position] = None,
    ) -> Grid:
        if width < 1 or height < 1:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")

        start = start if start is not None else Position(0, 0)
        end = end if end is not None else Position(height - 1, width - 1)

        cells = np.full((height, width), CellType.OPEN, dtype=np.uint8)
        grid = cls(width=width, height=height, start=start, end=end, cells=cells)
        if grid.in_bounds(start):
            cells[start.row, start.col] = CellType.START
        if grid.in_bounds(end):
            cells[end.row, end.col] = CellType.END
        return grid

    # ------------------------------------------------------------------ #
    # Basic queries                                                      #
    # ------------------------------------------------------------------ #
    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.row < self.height and 0 <= pos.col < self.width

    def cell(self, pos: Position) -> CellType:
        return CellType(int(self.cells[pos.row, pos.col]))

    def is_valid_position(self, pos: Position) -> bool:
        """In bounds and not blocked."""
        return self.in_bounds(pos) and bool(self.cells[pos.row, pos.col] != CellType.BLOCKED)

    def neighbors(self, pos: Position) -> List[Position]:
        """
        4-connected neighbours of pos that are in bounds and not blocked,
        always in the order right, down, left, up.
        """
        out: List[Position] = []
        for dr, dc in DIRECTIONS_4:
            np_ = Position(pos.row + dr, pos.col + dc)
            if self.is_valid_position(np_):
                out.append(np_)
        return out

    @property
    def obstacle_count(self) -> int:
        return int(np.count_nonzero(self.cells == CellType.BLOCKED))

    def positions(self) -> Iterator[Position]:
        for r in range(self.height):
            for c in range(self.width):
                yield Position(r, c)

    def is_connected(self) -> bool:
        """BFS from start; True as soon as end is reached."""
        visited: Set[Position] = {self.start}
        q = deque([self.start])
        while q:
            cur = q.popleft()
            if cur == self.end:
                return True
            for np_ in self.neighbors(cur):
                if np_ not in visited:
                    visited.add(np_)
                    q.append(np_)
        return False

    # ------------------------------------------------------------------ #
    # Mutation (generator only)                                          #
    # ------------------------------------------------------------------ #
    def add_obstacle(self, pos: Position) -> None:
        """Block pos. Out-of-bounds cells and the start/end cells are left alone."""
        if not self.in_bounds(pos):
            return
        if pos == self.start or pos == self.end:
            return
        self.cells[pos.row, pos.col] = CellType.BLOCKED

    def clear(self, pos: Position) -> None:
        """Turn a blocked cell back into an open one."""
        if self.in_bounds(pos) and self.cells[pos.row, pos.col] == CellType.BLOCKED:
            self.cells[pos.row, pos.col] = CellType.OPEN

    def copy(self) -> Grid:
        return Grid(
            width=self.width,
            height=self.height,
            start=self.start,
            end=self.end,
            cells=self.cells.copy(),
        )


class GridGenerator:
    """
    Builds benchmark grids whose start and end are always connected.

    Random obstacles are placed one at a time and kept only if a BFS from
    start still reaches end. If the grid ends up disconnected anyway, it is
    rebuilt around a staircase path that no obstacle may touch.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self.rng = random.Random(seed)

    def empty(self, width: int, height: int) -> Grid:
        return Grid.new(width, height)

    def maze_like(self, width: int, height: int) -> Grid:
        """Pillars on every interior cell with an even row and an even column."""
        grid = Grid.new(width, height)
        for row in range(1, height - 1):
            for col in range(1, width - 1):
                if row % 2 == 0 and col % 2 == 0:
                    grid.add_obstacle(Position(row, col))
        return grid

    def generate(self, width: int, height: int, obstacle_percentage: float) -> Grid:
        """
        Random obstacles at roughly obstacle_percentage density, with start
        and end guaranteed to stay connected.
        """
        if not (0.0 <= obstacle_percentage <= 1.0):
            raise ValueError(
                f"obstacle_percentage must be between 0.0 and 1.0, got {obstacle_percentage}"
            )

        grid = Grid.new(width, height)

        # too small to block anything without sealing an endpoint
        if width < 3 or height < 3:
            return grid

        total_cells = width * height
        target = self.obstacle_target(width, height, obstacle_percentage)
        max_attempts = MAX_ATTEMPTS_FACTOR * total_cells
        protected = self.protected_positions(grid)

        candidates = [
            p for p in grid.positions()
            if p not in protected and grid.cells[p.row, p.col] == CellType.OPEN
        ]

        placed = 0
        attempts = 0
        while placed < target and attempts < max_attempts and candidates:
            attempts += 1
            idx = self.rng.randrange(len(candidates))
            pos = candidates[idx]
            # swap-remove: a cell that disconnects the grid now will
            # disconnect it forever, since obstacles are never removed
            candidates[idx] = candidates[-1]
            candidates.pop()

            grid.add_obstacle(pos)
            if grid.is_connected():
                placed += 1
            else:
                grid.clear(pos)

        logger.debug(
            "Placed %d/%d obstacles on %dx%d grid in %d attempts",
            placed, target, width, height, attempts,
        )

        if not grid.is_connected():
            logger.warning(
                "Random %dx%d grid lost connectivity; building staircase fallback",
                width, height,
            )
            return self.connected_fallback(width, height, obstacle_percentage)

        return grid

    def connected_fallback(self, width: int, height: int, obstacle_percentage: float) -> Grid:
        """
        Carve a staircase path start -> end (right first, then down), then
        scatter obstacles at half the requested density, only into cells
        that are not on the path, not next to it and not protected.
        """
        grid = Grid.new(width, height)
        path = self.staircase_path(grid)
        on_path: Set[Position] = set(path)
        keep_open = on_path | self.protected_positions(grid)

        eligible = [
            p for p in grid.positions()
            if p not in keep_open
            and grid.cells[p.row, p.col] == CellType.OPEN
            and not any(n in on_path for n in eight_neighbors(p, width, height))
        ]

        total_cells = width * height
        count = int((total_cells - len(path)) * obstacle_percentage * FALLBACK_DENSITY_RATIO)
        count = min(count, len(eligible))

        for pos in self.rng.sample(eligible, count):
            grid.add_obstacle(pos)
        return grid

    # ------------------------------------------------------------------ #
    # Helpers                                                            #
    # ------------------------------------------------------------------ #
    @staticmethod
    def obstacle_target(width: int, height: int, obstacle_percentage: float) -> int:
        """Obstacles generate() aims for: the requested share of cells, rounded half up."""
        return math.floor(width * height * obstacle_percentage + 0.5)

    @staticmethod
    def protected_positions(grid: Grid) -> Set[Position]:
        """start, end and their 8 surrounding cells."""
        protected: Set[Position] = {grid.start, grid.end}
        protected.update(eight_neighbors(grid.start, grid.width, grid.height))
        protected.update(eight_neighbors(grid.end, grid.width, grid.height))
        return protected

    @staticmethod
    def staircase_path(grid: Grid) -> List[Position]:
        """Monotone path from start: move along the row until the column matches, then down."""
        cur = grid.start
        path = [cur]
        while cur != grid.end:
            if cur.col < grid.end.col:
                cur = Position(cur.row, cur.col + 1)
            elif cur.col > grid.end.col:
                cur = Position(cur.row, cur.col - 1)
            elif cur.row < grid.end.row:
                cur = Position(cur.row + 1, cur.col)
            else:
                cur = Position(cur.row - 1, cur.col)
            path.append(cur)
        return path
