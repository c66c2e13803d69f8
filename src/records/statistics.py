"""
Player statistics persistence.

Keeps cumulative counters across games in a JSON file. Load and save
failures degrade to default statistics instead of interrupting play.
"""
import json
import logging
import time
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional

from minefield.board import Difficulty, GameState

from .paths import data_dir

logger = logging.getLogger(__name__)

STATISTICS_FILE = "statistics.json"


# ============================================================================
# Statistics Data
# ============================================================================

@dataclass
class PlayerStatistics:
    """Cumulative statistics; best times are keyed by difficulty value."""

    games_played: int = 0
    games_won: int = 0
    games_lost: int = 0
    total_time: int = 0
    best_time: Dict[str, int] = field(default_factory=dict)
    current_streak: int = 0
    best_streak: int = 0
    average_time: float = 0.0
    win_rate: float = 0.0
    last_played: float = field(default_factory=time.time)

    def best_time_for(self, difficulty: Difficulty) -> Optional[int]:
        """Best winning time for a difficulty, if any."""
        return self.best_time.get(difficulty.value)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlayerStatistics":
        """
        Build from stored data, filling missing fields with defaults.

        Raises:
            ValueError: If a stored field has the wrong type.
        """
        known = {f.name for f in fields(cls)}
        values = {key: value for key, value in data.items() if key in known}

        for key, value in values.items():
            if key == "best_time":
                if not isinstance(value, dict) or not all(
                    _is_number(t) for t in value.values()
                ):
                    raise ValueError(f"Invalid best_time: {value!r}")
            elif not _is_number(value):
                raise ValueError(f"Invalid {key}: {value!r}")
        return cls(**values)


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a valid counter
    return isinstance(value, (int, float)) and not isinstance(value, bool)


# ============================================================================
# Statistics Store
# ============================================================================

class StatisticsStore:
    """JSON-file backed statistics store."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = Path(path) if path else data_dir() / STATISTICS_FILE

    def load(self) -> PlayerStatistics:
        """Read statistics, returning defaults when missing or unreadable."""
        if not self.path.exists():
            return PlayerStatistics()
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("statistics file does not hold an object")
            return PlayerStatistics.from_dict(data)
        except (OSError, ValueError, TypeError) as error:
            logger.warning("Failed to load statistics: %s", error)
            return PlayerStatistics()

    def save(self, stats: PlayerStatistics) -> None:
        """Write statistics; failures are logged and ignored."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(stats.to_dict(), f, indent=2)
        except OSError as error:
            logger.warning("Failed to save statistics: %s", error)

    def record_game(
        self,
        game_state: GameState,
        difficulty: Difficulty,
        time_elapsed: int,
    ) -> PlayerStatistics:
        """
        Add a finished game to the statistics.

        Args:
            game_state: WON or LOST; other states only count as played.
            difficulty: Difficulty the game was played on.
            time_elapsed: Game duration in seconds.

        Returns:
            Updated statistics.
        """
        stats = self.load()

        stats.games_played += 1
        stats.total_time += time_elapsed
        stats.last_played = time.time()

        if game_state == GameState.WON:
            stats.games_won += 1
            stats.current_streak += 1
            stats.best_streak = max(stats.best_streak, stats.current_streak)

            current_best = stats.best_time.get(difficulty.value)
            if current_best is None or time_elapsed < current_best:
                stats.best_time[difficulty.value] = time_elapsed
        elif game_state == GameState.LOST:
            stats.games_lost += 1
            stats.current_streak = 0

        stats.win_rate = stats.games_won / stats.games_played * 100
        stats.average_time = (
            stats.total_time / stats.games_won if stats.games_won else 0.0
        )

        self.save(stats)
        return stats

    def reset(self) -> PlayerStatistics:
        """Replace stored statistics with fresh ones."""
        stats = PlayerStatistics()
        self.save(stats)
        return stats


# ============================================================================
# Formatting
# ============================================================================

DIFFICULTY_NAMES = {
    Difficulty.EASY: "Easy",
    Difficulty.MEDIUM: "Medium",
    Difficulty.HARD: "Hard",
    Difficulty.CUSTOM: "Custom",
}


def format_time(seconds: int) -> str:
    """Format seconds as MM:SS."""
    minutes, remaining = divmod(int(seconds), 60)
    return f"{minutes:02d}:{remaining:02d}"
