"""
Game session for Minesweeper.

Sequences board engine calls for one player: lazy mine placement on the
first reveal, end-of-game handling, the mines-left counter, the timer and
statistics recording. The engine itself stays stateless; this class owns
the current board snapshot.
"""
import random
import time
from dataclasses import replace
from typing import TYPE_CHECKING, Callable, Optional

from .board import (
    DIFFICULTY_CONFIGS,
    Board,
    Difficulty,
    GameConfig,
    GameState,
    calculate_neighbor_mines,
    check_game_state,
    chord_reveal,
    create_empty_board,
    flag_remaining_mines,
    get_mines_left,
    place_mines,
    reveal_all_mines,
    reveal_cell,
    toggle_flag,
)
from .shapes import BoardShape

if TYPE_CHECKING:
    from records.statistics import StatisticsStore


class Game:
    """
    One Minesweeper session.

    Actions are ignored once the game is won or lost; reset() or a
    difficulty/shape change starts over with a fresh board.
    """

    def __init__(
        self,
        difficulty: Difficulty = Difficulty.EASY,
        config: Optional[GameConfig] = None,
        shape: Optional[BoardShape] = None,
        statistics: Optional["StatisticsStore"] = None,
        clock: Callable[[], float] = time.monotonic,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Initialize the session.

        Args:
            difficulty: Preset used for statistics and default config.
            config: Explicit configuration (overrides the preset).
            shape: Board shape applied on top of the configuration.
            statistics: Store that receives finished games.
            clock: Monotonic time source in seconds.
            rng: Random source for mine placement.
        """
        self.statistics = statistics
        self._clock = clock
        self._rng = rng
        self._difficulty = difficulty
        self._config = self._build_config(difficulty, config, shape)
        self.reset()

    @staticmethod
    def _build_config(
        difficulty: Difficulty,
        config: Optional[GameConfig],
        shape: Optional[BoardShape],
    ) -> GameConfig:
        base = config or DIFFICULTY_CONFIGS[difficulty]
        if shape is None:
            return replace(base)
        return replace(base, board_shape=shape)

    # ========================================================================
    # Lifecycle
    # ========================================================================

    def reset(self) -> None:
        """Start a new game with the current configuration."""
        self._board = create_empty_board(
            self._config.rows, self._config.cols, self._config.board_shape
        )
        self._state = GameState.NOT_STARTED
        self._start_time: Optional[float] = None
        self._end_time: Optional[float] = None

    def set_difficulty(
        self,
        difficulty: Difficulty,
        custom_config: Optional[GameConfig] = None,
    ) -> None:
        """
        Switch difficulty and start over.

        Args:
            difficulty: New preset.
            custom_config: Explicit configuration, used as given including
                its board shape. Without one, the preset is applied with the
                current board shape.
        """
        self._difficulty = difficulty
        if custom_config is not None:
            self._config = self._build_config(difficulty, custom_config, None)
        else:
            self._config = self._build_config(
                difficulty, None, self._config.board_shape
            )
        self.reset()

    def set_shape(self, shape: BoardShape) -> None:
        """Switch board shape and start over."""
        self._config = replace(self._config, board_shape=shape)
        self.reset()

    # ========================================================================
    # Player Actions
    # ========================================================================

    def reveal(self, row: int, col: int) -> GameState:
        """
        Reveal a cell; the first reveal also lays the minefield.

        Returns:
            Game state after the action.
        """
        if self.is_over:
            return self._state

        board = self._board
        if not board.mines_placed:
            cell = board.get_cell(row, col)
            if cell is None or not cell.exists:
                return self._state
            board = place_mines(
                board, self._config.effective_mines, row, col, rng=self._rng
            )
            board = calculate_neighbor_mines(board)
            self._start_time = self._clock()

        self._apply(reveal_cell(board, row, col))
        return self._state

    def toggle_flag(self, row: int, col: int) -> GameState:
        """Cycle the marker on a cell while the game is in progress."""
        if self._state == GameState.PLAYING:
            self._board = toggle_flag(self._board, row, col)
        return self._state

    def chord(self, row: int, col: int) -> GameState:
        """Chord on a numbered cell while the game is in progress."""
        if self._state == GameState.PLAYING:
            self._apply(chord_reveal(self._board, row, col))
        return self._state

    def _apply(self, board: Board) -> None:
        """Adopt a new snapshot and handle the end of the game."""
        state = check_game_state(board, self._config)
        if state == GameState.LOST:
            board = reveal_all_mines(board)
        elif state == GameState.WON:
            board = flag_remaining_mines(board)

        self._board = board
        self._state = state
        if self.is_over:
            self._finish()

    def _finish(self) -> None:
        self._end_time = self._clock()
        if self.statistics is not None:
            self.statistics.record_game(
                self._state, self._difficulty, self.time_elapsed
            )

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def board(self) -> Board:
        """Current board snapshot."""
        return self._board

    @property
    def state(self) -> GameState:
        """Current game state."""
        return self._state

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    @property
    def is_over(self) -> bool:
        """Check if the game was won or lost."""
        return self._state in (GameState.WON, GameState.LOST)

    @property
    def mines_left(self) -> int:
        """Mine counter shown to the player."""
        return get_mines_left(self._board, self._config.effective_mines)

    @property
    def time_elapsed(self) -> int:
        """Whole seconds since the first reveal, frozen at game end."""
        if self._start_time is None:
            return 0
        end = self._end_time if self._end_time is not None else self._clock()
        return int(end - self._start_time)
