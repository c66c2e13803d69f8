"""
Storage location for statistics and preferences.
"""
import os
import pathlib


def data_dir() -> pathlib.Path:
    """
    Directory holding statistics and preference files.

    Returns:
        MINESWEEPER_HOME when set, otherwise ~/.minesweeper.
    """
    override = os.getenv("MINESWEEPER_HOME")
    if override:
        return pathlib.Path(override)
    return pathlib.Path.home() / ".minesweeper"
