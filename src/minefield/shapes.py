"""
Board shape rules for Minesweeper.

Each shape decides which grid positions are active cells and which
positions count as neighbors. Shapes are dispatched through a table of
pure functions keyed by the BoardShape enum.
"""
import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Tuple

Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

class BoardShape(Enum):
    """Available board shapes."""

    RECTANGLE = "rectangle"
    HEXAGON = "hexagon"
    TRIANGLE = "triangle"
    DIAMOND = "diamond"
    CROSS = "cross"
    CIRCLE = "circle"
    CUSTOM = "custom"


MOORE_OFFSETS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)

HEX_EVEN_ROW_OFFSETS = ((-1, -1), (-1, 0), (0, -1), (0, 1), (1, -1), (1, 0))
HEX_ODD_ROW_OFFSETS = ((-1, 0), (-1, 1), (0, -1), (0, 1), (1, 0), (1, 1))


# ============================================================================
# Existence Predicates (Low-level)
# ============================================================================

def _in_bounds(row: int, col: int, rows: int, cols: int) -> bool:
    return 0 <= row < rows and 0 <= col < cols


def _rectangle_exists(row: int, col: int, rows: int, cols: int) -> bool:
    return _in_bounds(row, col, rows, cols)


def _manhattan_exists(row: int, col: int, rows: int, cols: int) -> bool:
    """Diamond-shaped region around the grid center (hexagon and diamond)."""
    center_row = rows // 2
    center_col = cols // 2
    radius = min(center_row, center_col)
    return abs(row - center_row) + abs(col - center_col) <= radius


def _triangle_exists(row: int, col: int, rows: int, cols: int) -> bool:
    """Centered band narrowing linearly from the top row downward."""
    max_col = cols - 1
    triangle_width = (max_col * (rows - row)) // rows
    start_col = (max_col - triangle_width) // 2
    return start_col <= col <= start_col + triangle_width


def _cross_exists(row: int, col: int, rows: int, cols: int) -> bool:
    center_row = rows // 2
    center_col = cols // 2
    thickness = max(1, min(rows, cols) // 6)
    in_horizontal_bar = center_row - thickness <= row <= center_row + thickness
    in_vertical_bar = center_col - thickness <= col <= center_col + thickness
    return in_horizontal_bar or in_vertical_bar


def _circle_exists(row: int, col: int, rows: int, cols: int) -> bool:
    center_row = rows / 2
    center_col = cols / 2
    radius = min(rows, cols) / 2.5
    return math.hypot(row - center_row, col - center_col) <= radius


# ============================================================================
# Neighbor Functions (Low-level)
# ============================================================================

def _offset_neighbors(
    row: int, col: int, rows: int, cols: int, offsets
) -> List[Position]:
    neighbors = []
    for delta_row, delta_col in offsets:
        new_row = row + delta_row
        new_col = col + delta_col
        if _in_bounds(new_row, new_col, rows, cols):
            neighbors.append((new_row, new_col))
    return neighbors


def _moore_neighbors(row: int, col: int, rows: int, cols: int) -> List[Position]:
    """8-connected neighborhood clipped to the grid."""
    return _offset_neighbors(row, col, rows, cols, MOORE_OFFSETS)


def _hexagon_neighbors(
    row: int, col: int, rows: int, cols: int
) -> List[Position]:
    """6 neighbors in an offset-row hex layout (odd rows shifted right)."""
    offsets = HEX_EVEN_ROW_OFFSETS if row % 2 == 0 else HEX_ODD_ROW_OFFSETS
    return _offset_neighbors(row, col, rows, cols, offsets)


def _triangle_neighbors(
    row: int, col: int, rows: int, cols: int
) -> List[Position]:
    return [
        (r, c) for r, c in _moore_neighbors(row, col, rows, cols)
        if _triangle_exists(r, c, rows, cols)
    ]


# ============================================================================
# Shape Table
# ============================================================================

@dataclass(frozen=True)
class ShapeRule:
    """
    Existence and neighbor policy for one board shape.

    Attributes:
        shape: The shape this rule implements.
        display_name: Human readable name for front ends.
        description: One-line description of the layout.
        exists: Predicate (row, col, rows, cols) -> bool.
        neighbors: Function (row, col, rows, cols) -> positions in bounds.
    """

    shape: BoardShape
    display_name: str
    description: str
    exists: Callable[[int, int, int, int], bool]
    neighbors: Callable[[int, int, int, int], List[Position]]


SHAPE_RULES: Dict[BoardShape, ShapeRule] = {
    BoardShape.RECTANGLE: ShapeRule(
        BoardShape.RECTANGLE, "Rectangle",
        "Classic rectangular Minesweeper board",
        _rectangle_exists, _moore_neighbors,
    ),
    BoardShape.HEXAGON: ShapeRule(
        BoardShape.HEXAGON, "Hexagon",
        "Hexagonal board with 6-sided cells",
        _manhattan_exists, _hexagon_neighbors,
    ),
    BoardShape.TRIANGLE: ShapeRule(
        BoardShape.TRIANGLE, "Triangle",
        "Triangular board shape",
        _triangle_exists, _triangle_neighbors,
    ),
    BoardShape.DIAMOND: ShapeRule(
        BoardShape.DIAMOND, "Diamond",
        "Diamond-shaped board",
        _manhattan_exists, _moore_neighbors,
    ),
    BoardShape.CROSS: ShapeRule(
        BoardShape.CROSS, "Cross",
        "Cross-shaped board",
        _cross_exists, _moore_neighbors,
    ),
    BoardShape.CIRCLE: ShapeRule(
        BoardShape.CIRCLE, "Circle",
        "Circular board shape",
        _circle_exists, _moore_neighbors,
    ),
    BoardShape.CUSTOM: ShapeRule(
        BoardShape.CUSTOM, "Custom",
        "User-defined custom shape",
        _rectangle_exists, _moore_neighbors,
    ),
}


# ============================================================================
# Public API (High-level)
# ============================================================================

def get_shape_rule(shape: BoardShape) -> ShapeRule:
    """Get the rule for a shape, falling back to the rectangle."""
    return SHAPE_RULES.get(shape, SHAPE_RULES[BoardShape.RECTANGLE])


def available_shapes() -> List[BoardShape]:
    """List every selectable board shape."""
    return list(BoardShape)


def cell_exists(
    shape: BoardShape, row: int, col: int, rows: int, cols: int
) -> bool:
    """Check whether (row, col) is an active cell of the shape."""
    if not _in_bounds(row, col, rows, cols):
        return False
    return get_shape_rule(shape).exists(row, col, rows, cols)


def get_neighbors(
    shape: BoardShape, row: int, col: int, rows: int, cols: int
) -> List[Position]:
    """
    Get the neighbor positions of a cell for a shape.

    Positions are clipped to the grid but not filtered by existence
    (except for the triangle); intersect with cell_exists before use.
    """
    return get_shape_rule(shape).neighbors(row, col, rows, cols)


def count_active_cells(rows: int, cols: int, shape: BoardShape) -> int:
    """Count the active cells of a shape on a rows x cols grid."""
    return sum(
        1
        for row in range(rows)
        for col in range(cols)
        if cell_exists(shape, row, col, rows, cols)
    )


def adjust_mine_count(
    base_mines: int, rows: int, cols: int, shape: BoardShape
) -> int:
    """
    Scale a mine count to the active area of a shape.

    Rectangles keep the base count. Other shapes scale proportionally to
    active/total cells, clamped to [1, active - 9].

    Args:
        base_mines: Mine count for the full rectangle.
        rows: Grid rows.
        cols: Grid columns.
        shape: Board shape.

    Returns:
        Mine count to place on the shaped board.
    """
    if shape == BoardShape.RECTANGLE:
        return base_mines

    total_cells = rows * cols
    active_cells = count_active_cells(rows, cols, shape)
    scaled = base_mines * active_cells // total_cells
    return max(1, min(scaled, active_cells - 9))
