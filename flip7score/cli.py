"""
Flip 7 Scoreboard CLI - Keep score from the terminal.

Usage:
    flip7score start "Alice, Bob, Charlie"     Start a game
    flip7score round Alice=5,3,x2 Bob=bust     Submit a round from cards
    flip7score points Alice=12 Bob=BUST        Submit a round from typed scores
    flip7score show                            Show the scoreboard
    flip7score restart                         Same players, new game (after a win)
    flip7score reset [--yes]                   Clear the scoreboard
    flip7score serve [--host H] [--port P]     Run the JSON API

The game is saved after every command, so each command picks up where
the last one left off. Players left out of a round bust.
"""

import argparse
import os
import sys

from .config import FLIP7_WIN_THRESHOLD, configure_logging, default_store
from .engine_core.scoring import parse_points_entry
from .engine_core.selection import RoundSelection
from .errors import Flip7Error
from .render import format_table
from .session import Scoreboard


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Flip 7 Scoreboard - score tracker for the Flip 7 card game",
        prog="flip7score",
    )
    parser.add_argument("--data-dir", help="Directory holding the saved game")
    parser.add_argument("--log-level", help="Logging level (default: FLIP7_LOG_LEVEL, else ERROR; INFO for serve)")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Start command
    start_parser = subparsers.add_parser("start", help="Start a game")
    start_parser.add_argument("names", nargs="+", help='Player names, e.g. "Alice, Bob"')

    # Round command
    round_parser = subparsers.add_parser("round", help="Submit a round from cards")
    round_parser.add_argument(
        "entries", nargs="*", metavar="NAME=CARDS",
        help="Cards in the order picked, e.g. Alice=5,3,x2 or Bob=bust",
    )

    # Points command
    points_parser = subparsers.add_parser("points", help="Submit a round from typed scores")
    points_parser.add_argument(
        "entries", nargs="*", metavar="NAME=POINTS",
        help="Typed score, e.g. Alice=12 or Bob=BUST",
    )

    subparsers.add_parser("show", help="Show the scoreboard")
    subparsers.add_parser("restart", help="Play again with the same players")

    reset_parser = subparsers.add_parser("reset", help="Clear the scoreboard")
    reset_parser.add_argument("--yes", "-y", action="store_true", help="Do not ask for confirmation")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the JSON API")
    serve_parser.add_argument("--host", default=os.getenv("HOST", "127.0.0.1"))
    serve_parser.add_argument("--port", type=int, default=int(os.getenv("PORT", 8000)))

    args = parser.parse_args(argv)

    if args.command == "serve":
        configure_logging(args.log_level)
        cmd_serve(args)
        return

    commands = {
        "start": cmd_start,
        "round": cmd_round,
        "points": cmd_points,
        "show": cmd_show,
        "restart": cmd_restart,
        "reset": cmd_reset,
    }
    command = commands.get(args.command)
    if command is None:
        parser.print_help()
        sys.exit(1)

    # Commands print their own results; only log errors unless asked
    configure_logging(args.log_level or os.getenv("FLIP7_LOG_LEVEL", "ERROR"))

    board = Scoreboard(store=default_store(args.data_dir), win_threshold=FLIP7_WIN_THRESHOLD)
    for warning in board.load_warnings:
        print(f"Warning: {warning}", file=sys.stderr)
    command(args, board)


def cmd_start(args, board):
    """Start a game."""
    _report(board.start_game(",".join(args.names)), board)


def cmd_round(args, board):
    """Submit a round from cards."""
    selections = {}
    for name, value in _split_entries(args.entries):
        tokens = [t.strip() for t in value.split(",") if t.strip()]
        try:
            selections[name] = RoundSelection.of(tokens)
        except Flip7Error as e:
            _fail(f"{name}: {e.message}")
    _report(board.submit_round(selections), board)


def cmd_points(args, board):
    """Submit a round from typed scores."""
    selections = {
        name: parse_points_entry(value) for name, value in _split_entries(args.entries)
    }
    _report(board.submit_round(selections), board)


def cmd_show(args, board):
    """Show the scoreboard."""
    if not board.state.started:
        print('No game in progress. Start one with: flip7score start "Alice, Bob"')
        return
    print(format_table(board.table()))


def cmd_restart(args, board):
    """Play again with the same players."""
    _report(board.restart_with_same_players(), board)


def cmd_reset(args, board):
    """Clear the scoreboard."""
    confirm = args.yes
    if not confirm:
        answer = input("Are you sure you want to reset the game? [y/N] ")
        confirm = answer.strip().lower() in {"y", "yes"}
    if not confirm:
        print("Reset cancelled")
        return
    result = board.reset_game(confirm=True)
    _report(result, board)


def cmd_serve(args):
    """Run the JSON API."""
    import uvicorn
    from .api import APIService, create_app

    board = Scoreboard(store=default_store(args.data_dir), win_threshold=FLIP7_WIN_THRESHOLD)
    app = create_app(APIService(scoreboard=board))

    print(f"Starting Flip 7 Scoreboard API on {args.host}:{args.port}")
    print(f"Docs available at: http://{args.host}:{args.port}/api/docs")
    uvicorn.run(app, host=args.host, port=args.port)


def _split_entries(entries):
    """Yield (name, value) from NAME=VALUE arguments."""
    for entry in entries:
        name, sep, value = entry.rpartition("=")
        if not sep or not name.strip():
            _fail(f"Expected NAME=VALUE, got {entry!r}")
        yield name.strip(), value.strip()


def _report(result, board):
    """Print the outcome of a transition and the scoreboard."""
    if not result.success:
        _fail(result.error)

    for change in result.state_changes:
        print(change)
    for warning in result.warnings:
        print(f"Warning: {warning}", file=sys.stderr)

    if board.state.started:
        print()
        print(format_table(board.table()))


def _fail(message):
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


if __name__ == "__main__":
    main()
