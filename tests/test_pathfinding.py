"""Tests for the five pathfinding algorithms and the registry."""

import math

import pytest

from conftest import assert_valid_path
from env import Grid, GridGenerator, Position
from errors import UnknownAlgorithmError
from pathfinding import ALGORITHM_ORDER, PATHFINDING_ALGOS, get_algorithm
from pathfinding.base import heap_priority, heuristic, reconstruct_path
from pathfinding.dfs import DepthFirstPlanner
from pathfinding.instrumentation import PerformanceCounter


class TestRegistry:
    def test_all_five_registered(self):
        assert set(PATHFINDING_ALGOS) == set(ALGORITHM_ORDER)

    @pytest.mark.parametrize(
        "alias,key",
        [
            ("astar", "astar"),
            ("A*", "astar"),
            ("1", "astar"),
            ("Dijkstra", "dijkstra"),
            ("breadth-first", "bfs"),
            ("Breadth-First Search", "bfs"),
            ("depth-first", "dfs"),
            ("greedy-best-first", "greedy"),
            (" GREEDY ", "greedy"),
        ],
    )
    def test_aliases(self, alias, key):
        assert get_algorithm(alias).key == key

    def test_unknown_key_raises(self):
        with pytest.raises(UnknownAlgorithmError) as excinfo:
            get_algorithm("bogosearch")
        assert excinfo.value.key == "bogosearch"
        assert isinstance(excinfo.value, ValueError)


class TestHelpers:
    def test_heuristic_is_manhattan(self):
        assert heuristic(Position(0, 0), Position(3, 4)) == 7.0

    def test_heap_priority_nan_goes_last(self):
        assert heap_priority(3.0) == 3.0
        assert heap_priority(math.nan) == math.inf

    def test_reconstruct_path(self):
        a, b, c = Position(0, 0), Position(0, 1), Position(1, 1)
        assert reconstruct_path({b: a, c: b}, c) == [a, b, c]
        assert reconstruct_path({}, a) == [a]


class TestEveryAlgorithm:
    def test_open_3x3_path_length_is_five(self, algorithm, open_grid):
        path, counter = algorithm.find_path(open_grid)
        assert len(path) == 5
        assert_valid_path(open_grid, path)
        assert counter.nodes_explored > 0

    def test_sealed_corner_returns_empty_path(self, algorithm, sealed_grid):
        path, counter = algorithm.find_path(sealed_grid)
        assert path == []
        assert counter.nodes_explored > 0

    def test_valid_paths_on_generated_grids(self, algorithm):
        gen = GridGenerator(seed=42)
        for size in [(5, 5), (10, 8), (15, 15)]:
            grid = gen.generate(*size, 0.35)
            path, _ = algorithm.find_path(grid)
            assert path
            assert_valid_path(grid, path)

    def test_grid_is_not_mutated(self, algorithm):
        grid = GridGenerator(seed=3).generate(10, 10, 0.3)
        before = grid.cells.copy()
        algorithm.find_path(grid)
        assert (grid.cells == before).all()

    def test_uses_given_counter(self, algorithm, open_grid):
        counter = PerformanceCounter()
        _, returned = algorithm.find_path(open_grid, counter)
        assert returned is counter

    def test_counter_contract(self, algorithm):
        grid = GridGenerator(seed=9).generate(12, 12, 0.3)
        _, counter = algorithm.find_path(grid)
        assert counter.nodes_in_frontier == counter.memory_allocations
        assert counter.comparisons > 0
        # every explored node was admitted to the frontier first
        assert counter.nodes_explored <= counter.nodes_in_frontier
        assert counter.nodes_in_frontier <= grid.width * grid.height

    def test_start_equals_end(self, algorithm):
        grid = Grid.new(1, 1)
        path, counter = algorithm.find_path(grid)
        assert path == [grid.start]
        assert counter.nodes_explored == 1

    def test_timing_stats(self, algorithm, open_grid):
        algorithm.reset_stats()
        algorithm.find_path(open_grid)
        algorithm.find_path(open_grid)
        assert algorithm.call_count == 2
        assert algorithm.total_runtime >= algorithm.last_runtime >= 0.0


class TestOptimality:
    @pytest.mark.parametrize("seed", range(5))
    def test_bfs_dijkstra_astar_agree(self, seed):
        grid = GridGenerator(seed=seed).generate(20, 20, 0.35)
        lengths = {key: len(get_algorithm(key).find_path(grid)[0]) for key in ("bfs", "dijkstra", "astar")}
        assert len(set(lengths.values())) == 1

    @pytest.mark.parametrize("seed", range(5))
    def test_suboptimal_algorithms_never_shorter(self, seed):
        grid = GridGenerator(seed=seed).generate(20, 20, 0.35)
        shortest = len(get_algorithm("bfs").find_path(grid)[0])
        for key in ("dfs", "greedy"):
            assert len(get_algorithm(key).find_path(grid)[0]) >= shortest


class TestStraightLine:
    @pytest.mark.parametrize("key", ["bfs", "dijkstra"])
    def test_single_row(self, key):
        grid = Grid.new(4, 1)
        assert grid.end == Position(0, 3)
        path, _ = get_algorithm(key).find_path(grid)
        assert path == [Position(0, 0), Position(0, 1), Position(0, 2), Position(0, 3)]


class TestBreadthFirst:
    def test_counts_on_open_grid(self, open_grid):
        path, counter = get_algorithm("bfs").find_path(open_grid)
        # BFS admits every reachable cell once before reaching the far corner
        assert counter.nodes_in_frontier == 9
        assert counter.nodes_explored == 9


class TestDepthFirst:
    def test_recursive_matches_iterative_on_open_grid(self, open_grid):
        planner = DepthFirstPlanner()
        iterative, _ = planner.find_path(open_grid)
        recursive, _ = planner.find_path_recursive(open_grid)
        assert iterative == recursive

    def test_recursive_no_path(self, sealed_grid):
        path, counter = DepthFirstPlanner().find_path_recursive(sealed_grid)
        assert path == []
        assert counter.nodes_explored == 1

    def test_recursive_valid_path(self):
        grid = GridGenerator(seed=5).generate(10, 10, 0.3)
        path, _ = DepthFirstPlanner().find_path_recursive(grid)
        assert_valid_path(grid, path)


class TestGreedy:
    def test_heads_straight_for_goal(self, open_grid):
        path, counter = get_algorithm("greedy").find_path(open_grid)
        assert len(path) == 5
        assert counter.nodes_explored == 5
