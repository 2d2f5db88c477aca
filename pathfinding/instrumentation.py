from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Protocol, Sequence, Set, Tuple

from env import Position


class Instrumentation(Protocol):
    """
    Receives search-progress events from a pathfinding algorithm.

    Every algorithm calls the same hooks at the same points, so any
    implementation (plain counting, step recording, ...) can be swapped in
    without touching the search code.
    """

    def on_explore(self, pos: Position) -> None:
        """pos was popped and committed to the explored set (once per node)."""
        ...

    def on_frontier_add(self, pos: Position) -> None:
        """pos entered the frontier for the first time."""
        ...

    def on_compare(self) -> None:
        """A neighbour was examined."""
        ...

    def on_path(self, path: Sequence[Position]) -> None:
        """The search reached the end; path runs start -> end."""
        ...


@dataclass
class PerformanceCounter:
    """Effort counters for a single search run. Never shared between runs."""
    nodes_explored: int = 0
    nodes_in_frontier: int = 0
    comparisons: int = 0
    memory_allocations: int = 0

    def on_explore(self, pos: Position) -> None:
        self.nodes_explored += 1

    def on_frontier_add(self, pos: Position) -> None:
        self.nodes_in_frontier += 1
        self.memory_allocations += 1

    def on_compare(self) -> None:
        self.comparisons += 1

    def on_path(self, path: Sequence[Position]) -> None:
        pass


@dataclass(frozen=True)
class SearchStep:
    """Snapshot of the search state after one event."""
    kind: str  # "explore", "frontier" or "path"
    current: Optional[Position]
    frontier: Tuple[Position, ...]
    explored: FrozenSet[Position]
    path: Tuple[Position, ...]
    description: str


@dataclass
class StepRecorder(PerformanceCounter):
    """
    PerformanceCounter that also snapshots the search after every event,
    for collaborators that animate a run.

    The counters it keeps are identical to a plain PerformanceCounter's
    for the same search.
    """
    algorithm_name: str = ""
    steps: List[SearchStep] = field(default_factory=list)
    frontier: List[Position] = field(default_factory=list)
    explored: Set[Position] = field(default_factory=set)

    def on_explore(self, pos: Position) -> None:
        super().on_explore(pos)
        self.explored.add(pos)
        if pos in self.frontier:
            self.frontier.remove(pos)
        self._snapshot("explore", pos, f"Exploring ({pos.row}, {pos.col})")

    def on_frontier_add(self, pos: Position) -> None:
        super().on_frontier_add(pos)
        self.frontier.append(pos)
        self._snapshot("frontier", None, f"Added ({pos.row}, {pos.col}) to frontier")

    def on_path(self, path: Sequence[Position]) -> None:
        self.steps.append(
            SearchStep(
                kind="path",
                current=None,
                frontier=(),
                explored=frozenset(self.explored),
                path=tuple(path),
                description="Final path found",
            )
        )

    def _snapshot(self, kind: str, current: Optional[Position], description: str) -> None:
        self.steps.append(
            SearchStep(
                kind=kind,
                current=current,
                frontier=tuple(self.frontier),
                explored=frozenset(self.explored),
                path=(),
                description=description,
            )
        )
