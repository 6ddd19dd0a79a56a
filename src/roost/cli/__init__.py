"""Roost CLI — print the route listing of a server from the command line.

Entry point registered as ``roost`` in ``pyproject.toml``::

    [project.scripts]
    roost = "roost.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``roost`` command."""
    parser = argparse.ArgumentParser(
        prog="roost",
        description="Roost — route table listings for running servers.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- roost routes -----------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument(
        "app",
        help="Import string (e.g. myapp:server)",
    )
    routes_parser.add_argument(
        "--auth",
        action="store_true",
        help="Show each route's effective auth strategy",
    )
    routes_parser.add_argument(
        "--scope",
        action="store_true",
        help="Show each route's required auth scope",
    )
    routes_parser.add_argument(
        "--json",
        action="store_true",
        help="Print structured route info as JSON",
    )
    routes_parser.add_argument(
        "--color",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Force colored output on or off (default: auto-detect)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from roost.cli._routes import run_routes
        from roost.ordering import use_environment_collation

        use_environment_collation()
        run_routes(args)
