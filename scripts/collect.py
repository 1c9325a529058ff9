#!/usr/bin/env python3
"""Local CLI entrypoint to collect a Bun project's installed dependency graph.

Usage:
  python scripts/collect.py --root . [--config settings.json] [--summary]

Prints the JSON report, or the Markdown summary with --summary.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from bun_collector.base import CollectorError
from bun_collector.config import ConfigError, load_settings
from bun_collector.core import collect_node_modules
from bun_collector.summary import render_summary


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--root", type=Path, default=Path("."))
    parser.add_argument("--config", type=Path, default=None)
    parser.add_argument("--summary", action="store_true")
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.config)
    except ConfigError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        report = collect_node_modules(args.root, settings)
    except CollectorError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    if args.summary:
        print(render_summary(report), end="")
    else:
        print(json.dumps(report, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
