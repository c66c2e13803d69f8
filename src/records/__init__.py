"""
Persistent player records.

Statistics and preferences are kept as JSON files in the data directory.
"""
from .paths import data_dir
from .preferences import THEMES, PreferenceStore, Preferences
from .statistics import (
    DIFFICULTY_NAMES,
    PlayerStatistics,
    StatisticsStore,
    format_time,
)

__all__ = [
    "data_dir",
    "THEMES",
    "PreferenceStore",
    "Preferences",
    "DIFFICULTY_NAMES",
    "PlayerStatistics",
    "StatisticsStore",
    "format_time",
]
