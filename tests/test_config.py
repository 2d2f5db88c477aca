"""Tests for run configuration defaults."""

from config import BENCHMARK_OBSTACLE_PERCENTAGE, Config


class TestConfig:
    def test_defaults(self):
        cfg = Config()
        assert cfg.grid_size == (20, 20)
        assert cfg.obstacle_percentage == BENCHMARK_OBSTACLE_PERCENTAGE
        assert cfg.iterations == 10
        assert cfg.seed is None
        assert cfg.algorithm is None
        assert cfg.log_events is False

    def test_no_output_settings(self):
        assert not hasattr(Config(), "output_dir")
