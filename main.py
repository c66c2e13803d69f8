#!/usr/bin/env python3
"""
Minesweeper - terminal entry point.

Usage:
    python main.py play [--difficulty {easy,medium,hard,custom}] [--shape SHAPE]
    python main.py stats
    python main.py reset-stats
    python main.py shapes
"""
import argparse
import logging
import random

from minefield import (
    BoardShape,
    Difficulty,
    Game,
    GameConfig,
    GameState,
    available_shapes,
    config_for,
    get_shape_rule,
    render_ansi,
)
from records import (
    DIFFICULTY_NAMES,
    PreferenceStore,
    StatisticsStore,
    format_time,
)

HELP_TEXT = (
    "Commands: r ROW COL (reveal), f ROW COL (flag/question), "
    "c ROW COL (chord), n (new game), q (quit)"
)


def print_board(game: Game) -> None:
    """Print the board with column and row indices."""
    cols = game.config.cols
    print("    " + " ".join(str(col % 10) for col in range(cols)))
    for row, line in enumerate(render_ansi(game.board).split("\n")):
        print(f"{row:>3} {line}")
    print(
        f"Mines left: {game.mines_left} | "
        f"Time: {format_time(game.time_elapsed)} | "
        f"State: {game.state.name}"
    )


def build_config(args: argparse.Namespace, shape: BoardShape) -> GameConfig:
    """Preset config for the difficulty, overridden by custom dimensions."""
    difficulty = Difficulty(args.difficulty)
    config = config_for(difficulty, shape)
    if difficulty == Difficulty.CUSTOM:
        config = GameConfig(
            rows=args.rows or config.rows,
            cols=args.cols or config.cols,
            mines=args.mines if args.mines is not None else config.mines,
            board_shape=shape,
        )
    return config


def play(args: argparse.Namespace) -> None:
    """Play interactively in the terminal."""
    preferences = PreferenceStore()
    if args.shape:
        shape = BoardShape(args.shape)
        preferences.set_board_shape(shape)
    else:
        shape = preferences.board_shape

    try:
        config = build_config(args, shape)
    except ValueError as error:
        print(f"Invalid configuration: {error}")
        return

    rng = random.Random(args.seed) if args.seed is not None else None
    game = Game(
        difficulty=Difficulty(args.difficulty),
        config=config,
        statistics=StatisticsStore(),
        rng=rng,
    )

    print(
        f"{DIFFICULTY_NAMES[game.difficulty]} {get_shape_rule(shape).display_name}: "
        f"{config.rows}x{config.cols} with {config.effective_mines} mines"
    )
    print(HELP_TEXT)

    while True:
        print_board(game)
        if game.state == GameState.WON:
            print(f"\n*** WIN in {format_time(game.time_elapsed)}! ***")
        elif game.state == GameState.LOST:
            print("\n*** LOST (hit mine) ***")

        try:
            line = input("> ").strip().lower()
        except EOFError:
            break

        parts = line.split()
        if not parts:
            continue
        command = parts[0]
        if command == "q":
            break
        if command == "n":
            game.reset()
            continue
        if command not in ("r", "f", "c") or len(parts) != 3:
            print(HELP_TEXT)
            continue
        try:
            row, col = int(parts[1]), int(parts[2])
        except ValueError:
            print(HELP_TEXT)
            continue

        if command == "r":
            game.reveal(row, col)
        elif command == "f":
            game.toggle_flag(row, col)
        else:
            game.chord(row, col)


def stats(args: argparse.Namespace) -> None:
    """Print stored statistics."""
    record = StatisticsStore().load()

    print("=" * 40)
    print("Statistics")
    print("=" * 40)
    print(f"  Games played: {record.games_played}")
    print(f"  Games won:    {record.games_won}")
    print(f"  Games lost:   {record.games_lost}")
    print(f"  Win rate:     {record.win_rate:.1f}%")
    print(f"  Average time: {format_time(record.average_time)}")
    print(f"  Streak:       {record.current_streak} (best {record.best_streak})")
    for difficulty, name in DIFFICULTY_NAMES.items():
        best = record.best_time_for(difficulty)
        best_text = "--:--" if best is None else format_time(best)
        print(f"  Best {name:<8} {best_text}")


def reset_stats(args: argparse.Namespace) -> None:
    """Clear stored statistics."""
    StatisticsStore().reset()
    print("Statistics reset.")


def shapes(args: argparse.Namespace) -> None:
    """List board shapes with their active cells and mine counts."""
    difficulty = Difficulty(args.difficulty)
    print(f"{'Shape':<12} {'Cells':>6} {'Mines':>6}  Description")
    print("-" * 60)
    for shape in available_shapes():
        rule = get_shape_rule(shape)
        config = config_for(difficulty, shape)
        print(
            f"{rule.display_name:<12} {config.active_cells:>6} "
            f"{config.effective_mines:>6}  {rule.description}"
        )


def main() -> None:
    """Parse arguments and run the appropriate command."""
    logging.basicConfig(level=logging.WARNING)

    parser = argparse.ArgumentParser(description="Minesweeper on shaped boards")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    difficulties = [difficulty.value for difficulty in Difficulty]
    shape_names = [shape.value for shape in BoardShape]

    # Play command
    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument(
        "--difficulty", choices=difficulties, default="easy",
        help="Difficulty preset",
    )
    play_parser.add_argument(
        "--shape", choices=shape_names, default=None,
        help="Board shape (default: last used)",
    )
    play_parser.add_argument("--rows", type=int, default=None, help="Custom rows")
    play_parser.add_argument("--cols", type=int, default=None, help="Custom columns")
    play_parser.add_argument("--mines", type=int, default=None, help="Custom mines")
    play_parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for the minefield"
    )

    # Statistics commands
    subparsers.add_parser("stats", help="Show statistics")
    subparsers.add_parser("reset-stats", help="Clear statistics")

    # Shapes command
    shapes_parser = subparsers.add_parser("shapes", help="List board shapes")
    shapes_parser.add_argument(
        "--difficulty", choices=difficulties, default="easy",
        help="Difficulty preset used for cell and mine counts",
    )

    args = parser.parse_args()

    if args.command == "play":
        play(args)
    elif args.command == "stats":
        stats(args)
    elif args.command == "reset-stats":
        reset_stats(args)
    elif args.command == "shapes":
        shapes(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
