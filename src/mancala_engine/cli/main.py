"""
Main CLI for the Mancala rules engine.
"""

import argparse
import logging
import sys

from ..core import (
    MancalaError,
    MancalaGame,
    apply_move,
    generate_legal_moves,
    get_game_result,
    history_string,
    is_terminal,
    string_to_action,
)
from ..simulation import RandomPlayoutRunner
from ..utils.rich_display import MancalaDisplay, setup_rich_logging

QUIT_COMMANDS = ("q", "quit", "exit")


def setup_logging(level: str = "INFO") -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def configure_logging(args) -> None:
    if args.rich_logging:
        setup_rich_logging(args.log_level)
    else:
        setup_logging(args.log_level)


def show_command(args):
    """Apply a move sequence from the start and show the board."""
    configure_logging(args)
    logger = logging.getLogger(__name__)
    display = MancalaDisplay()

    state = MancalaGame().new_initial_state()
    for move in args.moves:
        try:
            apply_move(state, move)
        except MancalaError as e:
            display.log_error(str(e))
            sys.exit(2)
    logger.debug(f"History: {history_string(state)}")

    if args.plain:
        print(state)
        return

    display.show_board(state)


def play_command(args):
    """Interactive hot-seat game on stdin."""
    configure_logging(args)
    logger = logging.getLogger(__name__)
    display = MancalaDisplay()

    state = MancalaGame().new_initial_state()
    display.show_header("Mancala")

    while not is_terminal(state):
        display.show_board(state)

        try:
            text = input(f"Player {state.current_player}> ")
        except EOFError:
            display.log_warning("Input closed, game abandoned")
            return

        if text.strip().lower() in QUIT_COMMANDS:
            display.log_warning("Game abandoned")
            return

        try:
            apply_move(state, string_to_action(text))
        except MancalaError as e:
            display.log_error(f"{e}; choose one of {generate_legal_moves(state)}")
            continue

    display.show_board(state)
    logger.info(f"Game over after {state.num_moves} moves: {get_game_result(state)}")


def simulate_command(args):
    """Play random games and summarize the results."""
    configure_logging(args)
    display = MancalaDisplay()

    display.show_header(f"Mancala random playouts ({args.games:,} games)")
    runner = RandomPlayoutRunner(
        num_games=args.games,
        seed=args.seed,
        show_progress=not args.no_progress,
    )
    stats = runner.run()
    display.show_summary(stats)
    display.log_success("Seed conservation held for every move")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Mancala (Kalah variant) rules engine")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    parser.add_argument(
        "--rich-logging", action="store_true", help="Route log records through rich"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Show command
    show_parser = subparsers.add_parser("show", help="Show the board after a move sequence")
    show_parser.add_argument(
        "--moves", type=int, nargs="*", default=[], help="Pit indices to play from the start"
    )
    show_parser.add_argument(
        "--plain", action="store_true", help="Print the plain three-line board string"
    )
    show_parser.set_defaults(func=show_command)

    # Play command
    play_parser = subparsers.add_parser("play", help="Play a hot-seat game")
    play_parser.set_defaults(func=play_command)

    # Simulate command
    simulate_parser = subparsers.add_parser("simulate", help="Play random games")
    simulate_parser.add_argument(
        "--games", type=int, default=1000, help="Number of games to play"
    )
    simulate_parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for reproducibility"
    )
    simulate_parser.add_argument(
        "--no-progress", action="store_true", help="Disable the progress bar"
    )
    simulate_parser.set_defaults(func=simulate_command)

    return parser


def main(argv=None):
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    args.func(args)


if __name__ == "__main__":
    main()
