from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from heyyy.config import ConfigError, RunConfig
from heyyy.loadgen.runner import run_load_test
from heyyy.report import format_config, format_report


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="heyyy", description="A simple HTTP load tester")
    parser.add_argument("-u", "--url", required=True, help="Target URL")
    parser.add_argument(
        "-c",
        "--concurrency",
        type=int,
        default=10,
        help="Requests per second, also the cap on in-flight requests",
    )
    parser.add_argument("-n", "--requests", type=int, default=100, help="Total requests to send")
    parser.add_argument("-v", "--verbose", action="count", default=0)
    return parser


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbosity >= 2 else logging.WARNING)


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    config = RunConfig(url=args.url, rate=args.concurrency, total_requests=args.requests)
    try:
        config.validate()
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    for line in format_config(config):
        print(line)
    report = asyncio.run(run_load_test(config))
    for line in format_report(report):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
