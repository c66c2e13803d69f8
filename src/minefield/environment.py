"""
Gymnasium environment wrapper for Minesweeper.

Lets programs play shaped boards through a standard step/reset interface.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, GameConfig, GameState
from .cell import OBS_FLAGGED, OBS_HIDDEN, OBS_INACTIVE, OBS_MINE
from .game import Game


# ============================================================================
# ANSI Rendering
# ============================================================================

_SYMBOLS = {
    OBS_INACTIVE: " ",
    OBS_FLAGGED: "F",
    OBS_HIDDEN: ".",
    OBS_MINE: "*",
    0: "_",
}


def render_ansi(board: Board, questioned: str = "?") -> str:
    """
    Render a board as text, one row per line.

    Inactive positions are blank so the board shape stays visible.
    """
    lines = []
    obs = board.get_observation()
    for row in range(board.rows):
        symbols = []
        for col in range(board.cols):
            if board.cells[row][col].is_questioned:
                symbols.append(questioned)
                continue
            val = int(obs[row, col])
            symbols.append(_SYMBOLS.get(val, str(val)))
        lines.append(" ".join(symbols).rstrip())
    return "\n".join(lines)


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -3 = position outside the board shape
        - -2 = flagged cell
        - -1 = hidden cell
        - 0-8 = revealed cell with neighbor mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size rows * cols.
        Action i corresponds to cell at (i // cols, i % cols).

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (revealed, flagged or inactive)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Game configuration (default: 9x9 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or GameConfig()
        self.game = Game(config=self.config)
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=OBS_INACTIVE,
            high=OBS_MINE,
            shape=(self.config.rows, self.config.cols),
            dtype=np.int8,
        )

        # One action per grid position, active or not
        self.action_space = spaces.Discrete(self.config.rows * self.config.cols)

        self._steps = 0
        self._total_safe_cells = (
            self.config.active_cells - self.config.effective_mines
        )

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducible minefields.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        if seed is not None:
            self.game = Game(config=self.config, rng=_rng_from(self.np_random))
        else:
            self.game.reset()
        self._steps = 0

        return self.game.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index to reveal (row * cols + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        row, col = self._action_to_position(action)
        self._steps += 1

        reward = self._calculate_reward(row, col)
        observation = self.game.board.get_observation()
        terminated = self.game.is_over

        return observation, reward, terminated, False, self._get_info()

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        return int(action) // self.config.cols, int(action) % self.config.cols

    def _calculate_reward(self, row: int, col: int) -> float:
        """Reveal a cell and score the outcome."""
        cell = self.game.board.get_cell(row, col)
        if cell is None or not cell.exists or not cell.is_hidden:
            return -0.1

        state = self.game.reveal(row, col)
        if state == GameState.WON:
            return 10.0
        if state == GameState.LOST:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        board = self.game.board
        return {
            "steps": self._steps,
            "revealed": sum(1 for cell in board.active_cells() if cell.is_revealed),
            "total_safe": self._total_safe_cells,
            "game_state": self.game.state.name,
            "valid_actions": int(self.get_action_mask().sum()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_ansi(self.game.board)
        if self.render_mode == "human":
            print(render_ansi(self.game.board))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = hidden active cell.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        for cell in self.game.board.active_cells():
            if cell.is_hidden:
                mask[cell.row * self.config.cols + cell.col] = True
        return mask


def _rng_from(generator: np.random.Generator) -> random.Random:
    """Derive a stdlib Random from a numpy generator for mine placement."""
    return random.Random(int(generator.integers(0, 2**63 - 1)))
