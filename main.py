#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--width W] [--height H] [--difficulty {easy,medium,hard}]
"""
import argparse
import logging
from typing import Optional

from src.minefield.board import Board, BoardConfig
from src.minefield.cell import Mark
from src.minefield.difficulty import Difficulty
from src.minefield.render import describe, render_board, render_solution
from src.minefield.result import MoveResult


COMMANDS = {
    "r": None,
    "f": Mark.FLAGGED,
    "q": Mark.QUESTIONED,
    "u": Mark.NONE,
}

HELP = (
    "Commands: r X Y (reveal), f X Y (flag), q X Y (question), "
    "u X Y (clear mark), quit"
)


def make_config(args: argparse.Namespace) -> BoardConfig:
    """Build a board configuration from parsed arguments."""
    return BoardConfig(args.width, args.height, args.difficulty, args.seed)


def apply_command(board: Board, line: str) -> Optional[MoveResult]:
    """
    Apply one line of player input to the board.

    Returns:
        The move result, or None if the line was not a move.
    """
    parts = line.split()
    if len(parts) != 3 or parts[0] not in COMMANDS:
        return None
    try:
        x, y = int(parts[1]), int(parts[2])
    except ValueError:
        return None

    mark = COMMANDS[parts[0]]
    if mark is None:
        return board.reveal(x, y)
    return board.set_flag(x, y, mark)


def play(args: argparse.Namespace) -> None:
    """Play an interactive game in the terminal."""
    board = Board(make_config(args))
    print(f"{board.width}x{board.height} board, difficulty {board.config.difficulty.value}")
    print(HELP)

    while board.is_playing:
        print(render_board(board))
        try:
            line = input("> ").strip().lower()
        except EOFError:
            print()
            return
        if line == "quit":
            return

        result = apply_command(board, line)
        if result is None:
            print(HELP)
        elif not result:
            print(describe(result))

    print(render_board(board, show_mines=True))
    if board.is_won:
        print("\n*** WIN! ***")
    else:
        print("\n*** LOST (hit mine) ***")
    print(render_solution(board))


def add_board_arguments(parser: argparse.ArgumentParser) -> None:
    """Board options shared by every command."""
    parser.add_argument("--width", type=int, default=9, help="Number of columns")
    parser.add_argument("--height", type=int, default=9, help="Number of rows")
    parser.add_argument(
        "--difficulty",
        choices=[tier.value for tier in Difficulty],
        default=Difficulty.EASY.value,
        help="Mine density tier",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mine placement"
    )


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Minesweeper in the terminal")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play a game")
    add_board_arguments(play_parser)

    args = parser.parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "play":
            play(args)
        else:
            parser.print_help()
    except ValueError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
