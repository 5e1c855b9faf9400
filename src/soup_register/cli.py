"""Command line entrypoint, also used by the GitHub Action.

Usage:
  soup-register [--path DIR] [--token TOKEN] [--output SOUP.md]

Exit codes: 0 on success, 1 when the register could not be generated.
"""

from __future__ import annotations

import argparse
import os
from collections.abc import Sequence

import structlog

from .config import load_settings
from .core import generate_register
from .errors import ConfigError, SoupRegisterError
from .logging import setup_logging

log = structlog.get_logger("soup_register.cli")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="soup-register",
        description="Generate a SOUP register (SOUP.md) for every package.json in a tree.",
    )
    parser.add_argument("--path", default=None, help="directory to scan, relative to cwd")
    parser.add_argument("--token", default=None, help="GitHub token for the languages API")
    parser.add_argument("--output", dest="output_filename", default=None)
    parser.add_argument("--registry-url", default=None)
    parser.add_argument("--github-api-url", default=None)
    parser.add_argument("--max-workers", type=int, default=None)
    parser.add_argument("--timeout", type=float, default=None)
    parser.add_argument("--log-level", default=None)
    parser.add_argument("--log-format", choices=("console", "json"), default=None)
    return parser


def _report_failure(message: str) -> None:
    """Mark the workflow step failed when running inside GitHub Actions."""
    if os.getenv("GITHUB_ACTIONS", "").lower() == "true":
        print(f"::error::{message}", flush=True)


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        settings = load_settings(
            path=args.path,
            token=args.token,
            output_filename=args.output_filename,
            registry_url=args.registry_url,
            github_api_url=args.github_api_url,
            max_workers=args.max_workers,
            timeout=args.timeout,
            log_level=args.log_level,
            log_format=args.log_format,
        )
    except ConfigError as exc:
        setup_logging()
        log.error("invalid_configuration", error=str(exc))
        _report_failure(str(exc))
        return 1

    setup_logging(settings.log_level, settings.log_format)

    try:
        generate_register(settings)
    except (SoupRegisterError, OSError) as exc:
        log.error("soup_generation_failed", error=str(exc))
        _report_failure(str(exc))
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
