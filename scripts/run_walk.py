#!/usr/bin/env python3
"""
Walk execution script

Usage:
  python scripts/run_walk.py <walk-file> [--log-level LEVEL] [--json-logs]

Examples:
  python scripts/run_walk.py walks/login_then_account.yaml
  python scripts/run_walk.py walks/login_then_account.json --log-level DEBUG --json-logs
"""
from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any, List, Optional

import requests

from application.ports.logger import LoggerPort
from application.walker import SessionWalker
from infrastructure.bootstrap import build_default_deps
from infrastructure.logging.console_logger import ConsoleLogger
from infrastructure.logging.log_setup import setup_console_logging
from infrastructure.logging.loguru_logger import LoguruLogger
from infrastructure.settings import WalkSettings
from infrastructure.walk_config.base_loader import WalkConfigLoadError
from infrastructure.walk_config.loader_registry import WalkConfigLoaderRegistry


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run a scripted multi-step HTTP walk")
    parser.add_argument("walk_file", type=str, help="walk definition (.yaml, .yml or .json)")
    parser.add_argument("--log-level", type=str, default=None, help="overrides WEBWALK_LOG_LEVEL")
    parser.add_argument("--json-logs", action="store_true", help="one JSON line per event on stderr")
    return parser


def _format_output(output: Any) -> str:
    if output is None:
        return ""
    if isinstance(output, str):
        return output
    return json.dumps(output, indent=2, ensure_ascii=False, default=str)


def _build_logger(args: argparse.Namespace, settings: WalkSettings) -> LoggerPort:
    level = args.log_level or settings.log_level
    if args.json_logs:
        return ConsoleLogger(level=level, stream=sys.stderr)
    setup_console_logging(level=level)
    return LoguruLogger()


def run(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    settings = WalkSettings.from_env()

    walk_path = Path(args.walk_file)
    try:
        loader = WalkConfigLoaderRegistry().get_loader(walk_path)
        config = loader.load_from_file(walk_path)
    except WalkConfigLoadError as e:
        print(f"Failed to load walk: {e}", file=sys.stderr)
        return 1

    deps = build_default_deps(settings=settings, logger=_build_logger(args, settings))

    try:
        output = asyncio.run(SessionWalker(deps).walk(config))
    except requests.RequestException as e:
        print(f"Walk failed (transport): {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Walk failed: {type(e).__name__}: {e}", file=sys.stderr)
        return 1

    text = _format_output(output)
    if text:
        print(text)
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
