from flocksim.main import build_parser, config_from_args, run_headless


def test_config_from_args_applies_overrides():
    args = build_parser().parse_args(["--headless", "--seed", "3", "--prey", "12",
                                      "--predators", "4", "--manual", "--grid"])
    config = config_from_args(args)

    assert config.seed == 3
    assert config.preyCount == 12
    assert config.predatorCount == 4
    assert config.manualControl is True
    assert config.useSpatialGrid is True


def test_defaults_without_overrides():
    config = config_from_args(build_parser().parse_args([]))
    assert config.seed == 42
    assert config.manualControl is False


def test_run_headless_trials_use_consecutive_seeds(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    config = config_from_args(build_parser().parse_args(["--seed", "10", "--prey", "10"]))

    results = run_headless(config, frames=20, trials=2, export=True)

    assert [r["seed"] for r in results] == [10, 11]
    assert (tmp_path / "simulation_results.csv").exists()
    assert (tmp_path / "simulation_report.json").exists()
