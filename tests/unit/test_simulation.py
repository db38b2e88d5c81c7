"""Tests for headless playouts."""

import json

from click.testing import CliRunner

from klondike.cli.simulate import main
from klondike.players import GreedyPlayer, RandomPlayer
from klondike.simulation import (
    BatchSummary,
    GameResult,
    SimulationConfig,
    simulate_batch,
    simulate_game,
)


def test_simulate_game_returns_result() -> None:
    result = simulate_game(GreedyPlayer(seed=1), seed=42)

    assert isinstance(result, GameResult)
    assert result.seed == 42
    assert 0 <= result.foundation_cards <= 52
    assert result.completion_percentage == result.foundation_cards * 100 // 52
    assert result.steps <= 1000
    assert result.won == (result.foundation_cards == 52)


def test_simulate_game_deterministic() -> None:
    """Test same seeds produce the same playout."""
    result1 = simulate_game(RandomPlayer(seed=3), seed=42, max_steps=300)
    result2 = simulate_game(RandomPlayer(seed=3), seed=42, max_steps=300)

    assert result1 == result2


def test_step_limit_respected() -> None:
    result = simulate_game(RandomPlayer(seed=3), seed=42, max_steps=10)

    assert result.steps <= 10
    assert result.moves <= 10


def test_config_generates_seed() -> None:
    config = SimulationConfig()

    assert config.seed is not None
    assert config.num_games == 100
    assert config.player == "greedy"


def test_simulate_batch() -> None:
    config = SimulationConfig(num_games=3, seed=100, player="random", max_steps=200)

    summary = simulate_batch(config)

    assert summary.games == 3
    assert [r.seed for r in summary.results] == [100, 101, 102]
    assert 0.0 <= summary.win_rate <= 1.0
    assert summary.to_dict()["games"] == 3


def test_empty_summary() -> None:
    summary = BatchSummary(results=())

    assert summary.win_rate == 0.0
    assert summary.average_completion == 0.0


def test_cli_writes_summary(tmp_path) -> None:
    output = tmp_path / "summary.json"
    runner = CliRunner()

    result = runner.invoke(main, [
        "--games", "2", "--seed", "7", "--player", "random",
        "--max-steps", "100", "--output", str(output),
    ])

    assert result.exit_code == 0, result.output
    assert "Won" in result.output
    data = json.loads(output.read_text())
    assert data["seed"] == 7
    assert data["games"] == 2
    assert len(data["results"]) == 2
