from __future__ import annotations

import argparse
from typing import Sequence

from watchlayer.cli.discover import handle_discover_command, register_discover_parser
from watchlayer.config import get_settings
from watchlayer.logging import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="watchlayer", description="watchlayer CLI")
    parser.add_argument("--log-level", help="Log level (or set WATCHLAYER_LOG_LEVEL)")
    subparsers = parser.add_subparsers(dest="command")

    register_discover_parser(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level or get_settings().log_level)

    if args.command == "discover":
        return handle_discover_command(args)

    parser.print_help()
    return 1


if __name__ == "__main__":  # pragma: no cover - exercised via module entrypoint
    raise SystemExit(main())
