from config import Config, configure_logging
from benchmark import BenchmarkCoordinator
from results import metrics_to_frame, summarize


def main() -> None:
    """
    Single-run entry point for the pathfinding benchmark.

    Typical usage:
      1. Open config.py and edit the Config defaults
         (grid size, iterations, seed, algorithm, ...).
      2. Run:
             python main.py
      3. Read the per-grid table and per-algorithm summary on stdout.
    """
    cfg = Config()
    configure_logging()

    coordinator = BenchmarkCoordinator(seed=cfg.seed, log_events=cfg.log_events)

    # None -> all five algorithms at the fixed benchmark density
    if cfg.algorithm is None:
        metrics = coordinator.run_benchmarks(cfg.grid_size, cfg.iterations)
    else:
        metrics = coordinator.run_single(
            cfg.algorithm, cfg.grid_size, cfg.iterations, cfg.obstacle_percentage
        )

    df = metrics_to_frame(metrics)
    print(df.to_string(index=False, float_format=lambda x: f"{x:.2f}"))
    print()
    print(summarize(df).to_string(float_format=lambda x: f"{x:.2f}"))


if __name__ == "__main__":
    main()
