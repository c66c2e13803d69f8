"""
Minesweeper board engine.

Provides board shapes, the board engine, a game session controller and
a Gymnasium environment.
"""
from .cell import Cell, CellState
from .shapes import (
    BoardShape,
    ShapeRule,
    adjust_mine_count,
    available_shapes,
    cell_exists,
    count_active_cells,
    get_neighbors,
    get_shape_rule,
)
from .board import (
    Board,
    Difficulty,
    GameConfig,
    GameState,
    DIFFICULTY_CONFIGS,
    calculate_neighbor_mines,
    check_game_state,
    chord_reveal,
    config_for,
    create_empty_board,
    flag_remaining_mines,
    get_mines_left,
    place_mines,
    reveal_all_mines,
    reveal_cell,
    toggle_flag,
)
from .game import Game
from .environment import MinesweeperEnv, render_ansi

__all__ = [
    "Cell",
    "CellState",
    "BoardShape",
    "ShapeRule",
    "adjust_mine_count",
    "available_shapes",
    "cell_exists",
    "count_active_cells",
    "get_neighbors",
    "get_shape_rule",
    "Board",
    "Difficulty",
    "GameConfig",
    "GameState",
    "DIFFICULTY_CONFIGS",
    "calculate_neighbor_mines",
    "check_game_state",
    "chord_reveal",
    "config_for",
    "create_empty_board",
    "flag_remaining_mines",
    "get_mines_left",
    "place_mines",
    "reveal_all_mines",
    "reveal_cell",
    "toggle_flag",
    "Game",
    "MinesweeperEnv",
    "render_ansi",
]
