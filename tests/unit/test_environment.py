"""
Unit tests for the Gymnasium environment.
"""
import numpy as np
import pytest
from minefield import BoardShape, GameConfig, MinesweeperEnv, render_ansi
from minefield.board import create_empty_board


@pytest.fixture
def env() -> MinesweeperEnv:
    return MinesweeperEnv()


@pytest.fixture
def hex_env(hexagon_config: GameConfig) -> MinesweeperEnv:
    return MinesweeperEnv(config=hexagon_config, render_mode="ansi")


class TestSpaces:
    """Test observation and action spaces."""

    def test_reset_returns_hidden_board(self, env: MinesweeperEnv) -> None:
        obs, info = env.reset()
        assert obs.shape == (9, 9)
        assert np.all(obs == -1)
        assert info["game_state"] == "NOT_STARTED"
        assert info["total_safe"] == 71

    def test_observation_in_space(self, hex_env: MinesweeperEnv) -> None:
        obs, _ = hex_env.reset()
        assert hex_env.observation_space.contains(obs)
        assert obs[0, 0] == -3

    def test_action_mask_covers_active_cells(
        self, hex_env: MinesweeperEnv
    ) -> None:
        hex_env.reset()
        mask = hex_env.get_action_mask()
        assert mask.shape == (81,)
        assert int(mask.sum()) == 41
        assert mask[0] == False  # noqa: E712
        assert mask[4 * 9 + 4] == True  # noqa: E712


class TestStep:
    """Test stepping through a game."""

    def test_first_step_is_safe(self, env: MinesweeperEnv) -> None:
        env.reset(seed=5)
        obs, reward, terminated, truncated, info = env.step(40)
        assert reward in (1.0, 10.0)
        assert obs[4, 4] == 0
        assert truncated is False
        assert info["revealed"] >= 9

    def test_repeat_action_is_invalid(self, env: MinesweeperEnv) -> None:
        env.reset(seed=5)
        env.step(40)
        _, reward, _, _, _ = env.step(40)
        assert reward == pytest.approx(-0.1)

    def test_inactive_action_is_invalid(self, hex_env: MinesweeperEnv) -> None:
        hex_env.reset(seed=1)
        _, reward, terminated, _, _ = hex_env.step(0)
        assert reward == pytest.approx(-0.1)
        assert terminated is False

    def test_hitting_mine_terminates(self, env: MinesweeperEnv) -> None:
        env.reset(seed=9)
        env.step(40)
        mine = next(c for c in env.game.board.active_cells() if c.is_mine)
        _, reward, terminated, _, info = env.step(mine.row * 9 + mine.col)
        assert reward == -10.0
        assert terminated is True
        assert info["game_state"] == "LOST"

    def test_seeded_reset_is_reproducible(self) -> None:
        first, second = MinesweeperEnv(), MinesweeperEnv()
        first.reset(seed=21)
        second.reset(seed=21)
        obs_a = first.step(10)[0]
        obs_b = second.step(10)[0]
        assert np.array_equal(obs_a, obs_b)


class TestRender:
    """Test text rendering."""

    def test_ansi_render_has_one_line_per_row(
        self, hex_env: MinesweeperEnv
    ) -> None:
        hex_env.reset()
        text = hex_env.render()
        assert len(text.split("\n")) == 9

    def test_inactive_cells_render_blank(self) -> None:
        text = render_ansi(create_empty_board(9, 9, BoardShape.HEXAGON))
        top = text.split("\n")[0]
        assert top.strip() == "."

    def test_marks_render(self) -> None:
        board = create_empty_board(3, 3)
        board.cells[0][0].cycle_mark()
        board.cells[0][1].cycle_mark()
        board.cells[0][1].cycle_mark()
        assert render_ansi(board).split("\n")[0] == "F ? ."
