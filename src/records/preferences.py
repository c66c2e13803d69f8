"""
Player preference persistence.

Preferences are read once when the store is created and written back on
every change. Unknown or malformed values fall back to defaults.
"""
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from minefield.shapes import BoardShape

from .paths import data_dir

logger = logging.getLogger(__name__)

PREFERENCES_FILE = "preferences.json"

THEMES = ("light", "dark", "neon", "ocean")

ANIMATIONS_KEY = "animations_enabled"
BOARD_SHAPE_KEY = "board_shape"
THEME_KEY = "theme"


@dataclass
class Preferences:
    """
    User preferences.

    Attributes:
        animations_enabled: Whether reveal animations play.
        board_shape: Shape used for new games.
        theme: One of THEMES.
    """

    animations_enabled: bool = True
    board_shape: BoardShape = BoardShape.RECTANGLE
    theme: str = "light"


class PreferenceStore:
    """JSON-file backed preference store keyed by string names."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = Path(path) if path else data_dir() / PREFERENCES_FILE
        self._prefs = self._load()

    @property
    def preferences(self) -> Preferences:
        """Current preferences."""
        return self._prefs

    @property
    def animations_enabled(self) -> bool:
        """Whether animations are enabled."""
        return self._prefs.animations_enabled

    @property
    def board_shape(self) -> BoardShape:
        """Preferred board shape."""
        return self._prefs.board_shape

    @property
    def theme(self) -> str:
        """Selected theme name."""
        return self._prefs.theme

    def set_animations_enabled(self, enabled: bool) -> None:
        """Turn animations on or off and persist the choice."""
        self._prefs.animations_enabled = bool(enabled)
        self._save()

    def set_board_shape(self, shape: BoardShape) -> None:
        """Store the preferred board shape."""
        self._prefs.board_shape = BoardShape(shape)
        self._save()

    def set_theme(self, theme: str) -> bool:
        """
        Select a theme by name.

        Returns:
            True if the theme is known and was stored, False otherwise.
        """
        if theme not in THEMES:
            return False
        self._prefs.theme = theme
        self._save()
        return True

    # ========================================================================
    # File Access
    # ========================================================================

    def _load(self) -> Preferences:
        prefs = Preferences()
        if not self.path.exists():
            return prefs
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as error:
            logger.warning("Failed to load preferences: %s", error)
            return prefs
        if not isinstance(data, dict):
            return prefs

        if isinstance(data.get(ANIMATIONS_KEY), bool):
            prefs.animations_enabled = data[ANIMATIONS_KEY]
        try:
            prefs.board_shape = BoardShape(data.get(BOARD_SHAPE_KEY, prefs.board_shape.value))
        except ValueError:
            logger.warning("Ignoring unknown board shape %r", data.get(BOARD_SHAPE_KEY))
        if data.get(THEME_KEY) in THEMES:
            prefs.theme = data[THEME_KEY]
        return prefs

    def _save(self) -> None:
        data = {
            ANIMATIONS_KEY: self._prefs.animations_enabled,
            BOARD_SHAPE_KEY: self._prefs.board_shape.value,
            THEME_KEY: self._prefs.theme,
        }
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
        except OSError as error:
            logger.warning("Failed to save preferences: %s", error)
