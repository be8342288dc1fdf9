"""CLI subcommand handlers."""

from __future__ import annotations

import argparse
import json
import os
import sys

from cachekey.config import CacheKeyConfig, load_config
from cachekey.constants.branding import COLD_CACHE_MESSAGE
from cachekey.exceptions.validation import format_errors
from cachekey.model import ResolvedKey
from cachekey.resolver import build_manifest, detect_branch, resolve_key, resolve_restore_target
from cachekey.store import JsonKeyIndex
from cachekey.validation import preflight_validate


def resolve_from_args(args: argparse.Namespace) -> tuple[CacheKeyConfig, ResolvedKey]:
    """Load config, apply CLI overrides, and resolve the key for the workspace."""
    root = args.root.resolve()
    config = load_config(root, args.config).with_overrides(
        namespace=args.namespace,
        files=tuple(args.file) if args.file else None,
        index_path=getattr(args, "index", None),
    )
    branch = args.branch or detect_branch(os.environ)
    manifest = build_manifest(root, config.files)
    resolved = resolve_key(
        manifest,
        config.namespace,
        branch=branch,
        default_branch=config.default_branch,
        extra=config.fallbacks,
        branch_in_key=config.branch_in_key,
    )
    return config, resolved


def handle_resolve(args: argparse.Namespace) -> int:
    """Print the primary key followed by fallback prefixes."""
    _, resolved = resolve_from_args(args)
    if args.format == "json":
        print(json.dumps(resolved.to_dict(), indent=2))
    else:
        print(resolved.primary_key)
        for prefix in resolved.fallback_prefixes:
            print(prefix)
    return 0


def handle_restore(args: argparse.Namespace) -> int:
    """Print the key to restore from, or report a cold cache."""
    config, resolved = resolve_from_args(args)
    store = JsonKeyIndex(config.resolve_index_path(args.root.resolve()))
    matched = resolve_restore_target(resolved.primary_key, store.available_keys(), resolved.fallback_prefixes)

    if args.format == "json":
        payload = {
            "requested_key": resolved.primary_key,
            "matched_key": matched,
            "exact": matched == resolved.primary_key,
        }
        print(json.dumps(payload, indent=2))
    elif matched is not None:
        print(matched)

    if matched is None:
        print(COLD_CACHE_MESSAGE, file=sys.stderr)
        return 1 if args.fail_on_miss else 0
    return 0


def handle_save(args: argparse.Namespace) -> int:
    """Record the resolved primary key in the key index."""
    config, resolved = resolve_from_args(args)
    index_path = config.resolve_index_path(args.root.resolve())
    JsonKeyIndex(index_path).record(resolved.primary_key, content_hash=resolved.content_hash)
    if args.format == "json":
        print(json.dumps({"saved_key": resolved.primary_key, "index": str(index_path)}, indent=2))
    else:
        print(resolved.primary_key)
    return 0


def handle_validate_config(args: argparse.Namespace) -> int:
    """Validate the root, config, and manifest entries and report results."""
    errors = preflight_validate(root=args.root, config_path=args.config, check_manifest=True)
    if args.format == "json":
        print(json.dumps({"valid": not errors, "errors": [error.to_dict() for error in errors]}, indent=2))
        return 2 if errors else 0

    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0
