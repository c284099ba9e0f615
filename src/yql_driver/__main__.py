"""Command-line entry point: run one YQL query and print its rows."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import TextIO

import httpx

from yql_driver.config import get_dsn, get_log_level, get_timeout
from yql_driver.db.connection import open_connection
from yql_driver.errors import YQLError

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="yql-query", description="Run a YQL query and print one JSON line per row."
    )
    parser.add_argument("query", help="YQL query, with ? placeholders for --arg values")
    parser.add_argument(
        "--dsn",
        default=get_dsn(),
        help='Connection descriptor: "", "<env>", "<key>|<secret>" or "<key>|<secret>|<env>"',
    )
    parser.add_argument(
        "--arg",
        action="append",
        default=[],
        dest="args",
        help="Value bound to the next ? placeholder (repeatable)",
    )
    return parser.parse_args(argv)


def run(args: argparse.Namespace, http_client: httpx.Client, out: TextIO) -> int:
    """Execute the query described by ``args`` and write rows to ``out``."""
    with open_connection(args.dsn, http_client=http_client) as conn:
        try:
            with conn.prepare(args.query) as stmt, stmt.execute_read(args.args) as rows:
                for row in rows:
                    out.write(json.dumps(row["results"]) + "\n")
        except (YQLError, httpx.HTTPError) as e:
            logger.error("Query failed: %s", e)
            return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the YQL query given on the command line. Returns the exit status."""
    args = _parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, get_log_level()),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )
    with httpx.Client(timeout=get_timeout()) as client:
        return run(args, client, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())
