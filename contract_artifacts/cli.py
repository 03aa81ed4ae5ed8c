#!/usr/bin/env python3
"""
contract-artifacts CLI

Inspect the contract artifacts the registry resolves.

Usage:
  contract-artifacts list
  contract-artifacts show [--build-dir <dir>] [--config <file>] [--json] [FIELD ...]
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .config import ArtifactsConfig
from .errors import ResolutionFailure
from .registry import ARTIFACT_PATHS, ArtifactRegistry

logger = logging.getLogger(__name__)


def describe(handle: Any) -> Dict[str, Any]:
    """Summary of a resolved handle for display."""
    if hasattr(handle, "contract_name"):
        return {
            "contract_name": handle.contract_name,
            "abi_entries": len(handle.abi),
            "bytecode_bytes": _hex_size(handle.bytecode),
            "path": str(handle.path) if handle.path else None,
        }
    return {"value": repr(handle)}


def _hex_size(code: str) -> int:
    if code.startswith("0x"):
        code = code[2:]
    return len(code) // 2


def cmd_list(args):
    """Print every artifact field and its logical path."""
    width = max(len(name) for name in ARTIFACT_PATHS)
    for name, path in ARTIFACT_PATHS.items():
        print(f"{name:<{width}}  {path}")


def cmd_show(args):
    """Resolve the registry and print the requested artifacts."""
    if args.config:
        try:
            config = ArtifactsConfig.from_file(args.config)
        except (OSError, ValueError, yaml.YAMLError) as e:
            print(f"Error: cannot load config {args.config}: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        config = ArtifactsConfig()
    if args.build_dir:
        config.build_dir = Path(args.build_dir)

    selected = args.fields or list(ArtifactRegistry.names())
    unknown = [name for name in selected if name not in ARTIFACT_PATHS]
    if unknown:
        print(f"Unknown artifact: {', '.join(unknown)}", file=sys.stderr)
        sys.exit(1)

    logger.info(f"Loading artifacts from {config.build_dir}")
    try:
        registry = ArtifactRegistry(config.make_loader())
    except ResolutionFailure as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    summary = {name: describe(getattr(registry, name)) for name in selected}
    if args.json:
        print(json.dumps(summary, indent=2))
        return

    for name, info in summary.items():
        if "contract_name" in info:
            print(f"{name}: {info['contract_name']} "
                  f"({info['abi_entries']} ABI entries, {info['bytecode_bytes']} bytes)")
        else:
            print(f"{name}: {info['value']}")


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        prog="contract-artifacts",
        description="Contract artifact registry",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    subparsers.add_parser("list", help="List artifact names and paths")

    show_parser = subparsers.add_parser("show", help="Resolve and describe artifacts")
    show_parser.add_argument("fields", nargs="*", help="Artifact fields (default: all)")
    show_parser.add_argument("--build-dir", help="Build directory (default: build/contracts)")
    show_parser.add_argument("--config", help="Config YAML file")
    show_parser.add_argument("--json", action="store_true", help="Print JSON")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "list":
        cmd_list(args)
    elif args.command == "show":
        cmd_show(args)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
