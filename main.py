#!/usr/bin/env python3
"""
Cyber Kittens -- authenticated kitten registry.

Usage:
  python main.py serve
  python main.py serve --host 0.0.0.0 --port 8080
  python main.py serve --reload
  python main.py init-db

Environment variables:
  JWT_SECRET     Token signing key, at least 32 characters. Required unless DEBUG=true.
  DATABASE_URL   SQLAlchemy URL (default: sqlite:///cyberkittens.db).
  DEBUG          Set to true for local development (auto-generates JWT_SECRET).
"""

import argparse
import sys

from pydantic import ValidationError


def _serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run("asgi:app", host=args.host, port=args.port, reload=args.reload)
    return 0


def _init_db(args: argparse.Namespace) -> int:
    """Create every table at DATABASE_URL. Safe to run repeatedly."""
    from core.config import get_settings
    from kittens.store import KittenStore

    url = get_settings().database_url
    # kittens and users share one MetaData, so this creates both tables
    KittenStore(url).close()
    print(f"  Schema ready at {url}")
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="cyberkittens",
        description="Register users and keep track of the kittens they own.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py serve
  python main.py serve --port 3000 --reload
  DATABASE_URL=postgresql://user:pw@localhost/kittens python main.py init-db
        """,
    )
    sub = parser.add_subparsers(dest="command", metavar="COMMAND")

    serve = sub.add_parser("serve", help="Run the HTTP API with uvicorn")
    serve.add_argument("--host", default="127.0.0.1", help="Bind address (default: 127.0.0.1)")
    serve.add_argument("--port", type=int, default=8000, help="Bind port (default: 8000)")
    serve.add_argument("--reload", action="store_true", help="Restart on code changes (development)")
    serve.set_defaults(func=_serve)

    init_db = sub.add_parser("init-db", help="Create the database schema")
    init_db.set_defaults(func=_init_db)

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        return

    try:
        code = args.func(args)
    except ValidationError as e:
        print(f"  [!] Invalid configuration:\n{e}", file=sys.stderr)
        code = 2
    sys.exit(code)


if __name__ == "__main__":
    main()
