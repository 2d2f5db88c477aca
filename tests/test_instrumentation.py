"""Tests for PerformanceCounter and StepRecorder."""

from env import GridGenerator, Position
from pathfinding import get_algorithm
from pathfinding.instrumentation import PerformanceCounter, StepRecorder


class TestPerformanceCounter:
    def test_starts_at_zero(self):
        c = PerformanceCounter()
        assert (c.nodes_explored, c.nodes_in_frontier, c.comparisons, c.memory_allocations) == (0, 0, 0, 0)

    def test_hooks_increment(self):
        c = PerformanceCounter()
        p = Position(0, 0)
        c.on_frontier_add(p)
        c.on_explore(p)
        c.on_compare()
        c.on_compare()
        c.on_path([p])
        assert c.nodes_in_frontier == 1
        assert c.memory_allocations == 1
        assert c.nodes_explored == 1
        assert c.comparisons == 2


class TestStepRecorder:
    def test_counts_match_plain_counter(self, algorithm):
        grid = GridGenerator(seed=11).generate(10, 10, 0.3)
        plain_path, plain = algorithm.find_path(grid, PerformanceCounter())
        rec_path, recorder = algorithm.find_path(grid, StepRecorder(algorithm_name=algorithm.name))

        assert rec_path == plain_path
        assert recorder.nodes_explored == plain.nodes_explored
        assert recorder.nodes_in_frontier == plain.nodes_in_frontier
        assert recorder.comparisons == plain.comparisons
        assert recorder.memory_allocations == plain.memory_allocations

    def test_records_one_step_per_event(self, algorithm, open_grid):
        _, recorder = algorithm.find_path(open_grid, StepRecorder())
        kinds = [s.kind for s in recorder.steps]
        assert kinds.count("explore") == recorder.nodes_explored
        assert kinds.count("frontier") == recorder.nodes_in_frontier
        assert kinds[-1] == "path"

    def test_final_step_holds_path(self, algorithm, open_grid):
        path, recorder = algorithm.find_path(open_grid, StepRecorder())
        last = recorder.steps[-1]
        assert list(last.path) == path
        assert last.description == "Final path found"
        assert open_grid.end in last.explored

    def test_explored_nodes_leave_frontier(self, open_grid):
        _, recorder = get_algorithm("bfs").find_path(open_grid, StepRecorder())
        first_explore = next(s for s in recorder.steps if s.kind == "explore")
        assert first_explore.current == open_grid.start
        assert open_grid.start not in first_explore.frontier
        assert open_grid.start in first_explore.explored

    def test_no_path_step_when_unreachable(self, algorithm, sealed_grid):
        path, recorder = algorithm.find_path(sealed_grid, StepRecorder())
        assert path == []
        assert all(s.kind != "path" for s in recorder.steps)

    def test_intermediate_steps_carry_no_path(self, algorithm, open_grid):
        _, recorder = algorithm.find_path(open_grid, StepRecorder())
        for step in recorder.steps[:-1]:
            assert step.kind in ("explore", "frontier")
            assert step.path == ()
        assert all(isinstance(p, Position) for p in recorder.explored)
