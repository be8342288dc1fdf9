"""CLI entrypoint for cachekey."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from cachekey import __version__
from cachekey.cli.handlers import handle_resolve, handle_restore, handle_save, handle_validate_config
from cachekey.constants.branding import CLI_DESCRIPTION
from cachekey.exceptions import CacheKeyError, ConfigError
from cachekey.exceptions.validation import format_errors
from cachekey.validation import preflight_validate


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="cachekey",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-r", "--root", type=Path, required=True, help="Workspace root path")
    common.add_argument("-c", "--config", type=Path, help="Explicit config file")
    common.add_argument("-v", "--verbose", action="store_true", help="Log per-file hashing and restore decisions")

    resolution = argparse.ArgumentParser(add_help=False)
    resolution.add_argument("-n", "--namespace", default=None, help="Key namespace (overrides config)")
    resolution.add_argument(
        "-f",
        "--file",
        action="append",
        default=None,
        help="Manifest path or glob relative to root (repeat for multiple; overrides config)",
    )
    resolution.add_argument(
        "-b",
        "--branch",
        default=None,
        help="Current branch (default: detected from CI environment variables)",
    )
    resolution.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format: text (default) or json",
    )

    index = argparse.ArgumentParser(add_help=False)
    index.add_argument("-i", "--index", type=Path, default=None, help="Key index file (overrides config)")

    subparsers.add_parser(
        "resolve",
        parents=[common, resolution],
        help="Print the primary cache key and fallback prefixes",
    )
    restore = subparsers.add_parser(
        "restore",
        parents=[common, resolution, index],
        help="Print the best key to restore from the key index",
    )
    restore.add_argument("--fail-on-miss", action="store_true", help="Exit 1 when no cached key matches")
    subparsers.add_parser(
        "save",
        parents=[common, resolution, index],
        help="Record the primary cache key in the key index",
    )
    validate = subparsers.add_parser(
        "validate-config",
        help="Validate configuration and manifest entries without resolving keys",
    )
    validate.add_argument("-r", "--root", type=Path, required=True, help="Workspace root path")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")
    validate.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format: text (default) or json",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if getattr(args, "verbose", False) else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    if args.command == "validate-config":
        return handle_validate_config(args)

    validation_errors = preflight_validate(root=args.root, config_path=args.config)
    if validation_errors:
        print(format_errors(validation_errors), file=sys.stderr)
        return 2

    handlers = {
        "resolve": handle_resolve,
        "restore": handle_restore,
        "save": handle_save,
    }
    handler = handlers.get(args.command)
    if handler is None:
        parser.error(f"Unsupported command: {args.command}")

    try:
        return handler(args)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except CacheKeyError as exc:
        print(f"Key resolution error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
