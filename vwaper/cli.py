from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

import httpx

from vwaper.config import get_settings
from vwaper.jobs.ingest import load_market
from vwaper.report.builder import build_report
from vwaper.report.render import render_text
from vwaper.sources.base import RecordSource
from vwaper.sources.file_source import FileSource
from vwaper.sources.http_source import HttpSource
from vwaper.sources.loader import get_source

log = logging.getLogger("vwaper")

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vwaper",
        description="Volume share per stock/interval and day high/low per stock.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Market file (symbol,interval,volume,high,low per line). "
        "Defaults to VWAPER_INPUT_PATH / the configured source.",
    )
    parser.add_argument("--url", default=None, help="Fetch the market file over HTTP instead")
    parser.add_argument("--delimiter", default=None, help="Separator line between the two tables")
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: LOG_LEVEL or INFO)",
    )
    return parser


def _pick_source(args: argparse.Namespace, settings) -> RecordSource:
    if args.url:
        return HttpSource(args.url, timeout=settings.http_timeout_seconds)
    if args.path:
        return FileSource(args.path)
    return get_source(settings)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings()
    except (RuntimeError, ValueError) as e:
        logging.basicConfig(level=logging.INFO, stream=sys.stderr)
        log.error("%s", e)
        return 1

    logging.basicConfig(
        level=(args.log_level or settings.log_level).upper(),
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    source = None
    try:
        source = _pick_source(args, settings)
        market = load_market(source)
    except (OSError, httpx.HTTPError, ValueError) as e:
        # Fatal input problem: no partial report.
        log.error("%s", e)
        return 1
    finally:
        close = getattr(source, "close", None)
        if callable(close):
            close()

    report = build_report(market, delimiter=args.delimiter or settings.delimiter)
    sys.stdout.write(render_text(report))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
