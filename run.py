"""Quinti-Maze CLI entry point.

Provides subcommands for running the Socket.IO web host, playing in the
terminal, and printing the exit path for a seed. Accepts configuration via
flags and environment variables, with optional .env loading.

Run `python run.py --help` for details.
"""

import argparse
import json
import os
import signal
import sys
from textwrap import dedent

from colorama import Fore, Style
from colorama import init as _color_init
from dotenv import load_dotenv

from quintimaze import __version__

# colorama strips ANSI codes itself when output is not a real terminal (e.g., during pytest capture)
_color_init()


def parse_args(argv: list) -> argparse.Namespace:
    description = """
    Quinti-Maze

    Find your way out of a 5x5x5 maze, one room at a time. Run the browser
    host (Flask-SocketIO), play in the terminal, or solve a seed. Flags take
    precedence over environment variables.
    """

    epilog = dedent(
        """
        Environment variables:
          HOST                     Bind address for the web server (default: 0.0.0.0)
          PORT                     Port for the web server (default: 5000)
          QUINTI_MAZE_SIZE         Maze size as WxHxD (default: 5x5x5)
          QUINTI_MAZE_FORCE_EXIT   0 to skip opening the far-corner exit (default: 1)
          QUINTI_LOG_LEVEL         debug | info | warn | error (default: info)

        Examples:
          # Run the server on the default host and port
          python run.py server

          # Bind to localhost on a custom port
          python run.py server --host 127.0.0.1 --port 8080

          # Load variables from .env then play in the terminal
          python run.py --env-file .env play

          # Print the exit path of seed 13 from the origin
          python run.py solve --seed 13
        """
    )

    parser = argparse.ArgumentParser(
        prog="Quinti-Maze",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )

    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Quinti-Maze {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    # server subcommand
    server_parser = subparsers.add_parser(
        "server",
        help="Run the Socket.IO web server",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Run the real-time Flask/Socket.IO host",
    )
    server_parser.add_argument(
        "--host",
        default=None,
        help="Host interface to bind (default: env HOST or 0.0.0.0)",
    )
    server_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to listen on (default: env PORT or 5000)",
    )
    server_parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable Flask debug mode with verbose error pages",
    )
    server_parser.set_defaults(command="server")

    # play subcommand (Textual)
    play_parser = subparsers.add_parser(
        "play",
        help="Play in the terminal (Textual)",
        formatter_class=argparse.RawTextHelpFormatter,
        description=dedent(
            """
            Play in the terminal.

            Keys:
              w / a / d      Move forward / left / right
              e / q          Move up / down
              Left / Right   Turn
              /              Toggle position readout
              =              Show a hint toward the exit
              Escape         Quit
            """
        ),
    )
    play_parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the first maze (default: derived from the clock)",
    )
    play_parser.set_defaults(command="play")

    # solve subcommand
    solve_parser = subparsers.add_parser(
        "solve",
        help="Print the exit path for a seed as JSON",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    solve_parser.add_argument("--seed", type=int, default=None, help="Maze seed (default: 12)")
    solve_parser.add_argument("--x", type=int, default=0, help="Start x (default: 0)")
    solve_parser.add_argument("--y", type=int, default=0, help="Start y (default: 0)")
    solve_parser.add_argument("--z", type=int, default=0, help="Start z (default: 0)")
    solve_parser.set_defaults(command="solve")

    # If no subcommand provided, default to server
    if len(argv) == 0:
        argv = ["server"]

    return parser.parse_args(argv)


def _banner(mode: str, rows: list) -> str:
    title = f"{Fore.CYAN}{Style.BRIGHT}Quinti-Maze{Style.RESET_ALL}"

    def label(text: str) -> str:
        return f"{Fore.YELLOW}{text}{Style.RESET_ALL}"

    def value(val) -> str:
        return f"{Fore.GREEN}{val}{Style.RESET_ALL}"

    divider = Fore.MAGENTA + "=" * 40 + Style.RESET_ALL
    lines = [divider, f"  {title}", divider, f"  {label('Mode:'):12} {value(mode.upper())}"]
    lines += [f"  {label(name + ':'):12} {value(val)}" for name, val in rows]
    lines += [divider, ""]
    return "\n".join(lines)


def _solve(args) -> int:
    from quintimaze.maze import DEFAULT_SEED, ContractViolation, Coord, MazeConfig, solve_report

    seed = DEFAULT_SEED if args.seed is None else args.seed
    try:
        report = solve_report(seed, Coord(args.x, args.y, args.z), MazeConfig.from_env())
    except (ContractViolation, ValueError) as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 1
    print(json.dumps(report))
    return 0 if report["found"] else 2


def main(argv: list) -> int:
    args = parse_args(argv)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        # Load default .env if present (no error if missing)
        load_dotenv()

    mode = (getattr(args, "command", None) or "server").lower()

    # solve prints machine-readable JSON only: no banner, no startup log
    if mode == "solve":
        return _solve(args)

    from quintimaze.logging_utils import log
    from quintimaze.maze import MazeConfig

    try:
        config = MazeConfig.from_env()
    except ValueError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 1

    if mode == "play":
        if args.seed is not None:
            config.seed = args.seed
        from quintimaze.tui import run_tui

        run_tui(config)
        return 0

    host = getattr(args, "host", None) or os.getenv("HOST", "0.0.0.0")
    port = int(getattr(args, "port", None) or os.getenv("PORT", "5000"))
    debug = bool(getattr(args, "debug", False)) or os.getenv("FLASK_DEBUG", "0") in ("1", "true", "yes")

    def handle_sigint(sig, frame):
        print("\n[INFO] Shutting down server...")
        sys.exit(0)

    signal.signal(signal.SIGINT, handle_sigint)

    # Import the server entrypoint only after the environment is ready
    from quintimaze.server import start_server

    size = "x".join(str(n) for n in config.dimensions)
    print(
        _banner(
            mode,
            [
                ("Host", host),
                ("Port", port),
                ("Maze", size),
                ("Exit", "forced" if config.force_exit else "none"),
                ("Debug", "YES" if debug else "NO"),
            ],
        )
    )
    log.info(event="startup", mode=mode, host=host, port=port, maze=size)
    start_server(host=host, port=port, debug=debug)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
