"""``roost routes`` — list registered routes.

Resolves an import string to a roost Server and prints its route
listing, or the structured info as JSON.
"""

import argparse
import json
import sys

from roost.cli._resolve import resolve_server
from roost.config import ListingConfig
from roost.listing import RouteListing


def run_routes(args: argparse.Namespace) -> None:
    """List registered routes for a roost server.

    Builds a fresh listing from the command-line toggles rather than
    reusing a listing the server may already expose, so ``--auth`` and
    ``--scope`` always apply.
    """
    try:
        server = resolve_server(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    config = ListingConfig(show_auth=args.auth, show_scope=args.scope, show_start=False)
    listing = RouteListing(server.connections, config, stream=sys.stdout, color=args.color)

    if args.json:
        info = [connection.to_dict() for connection in listing.info()]
        print(json.dumps(info, indent=2))
        return

    if not any(connection.snapshot() for connection in server.connections):
        print("No routes registered.", file=sys.stderr)
    sys.stdout.write(listing.text())
