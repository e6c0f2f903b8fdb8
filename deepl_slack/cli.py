"""Command-line entry point: start the DeepL for Slack server.

WHY: The bot is a long-lived HTTP server. Operators start it with
``python -m deepl_slack`` or the ``deepl-slack`` console script, with the
listen port taken from PORT or --port.

HOW: Parses --host/--port, loads Settings from the environment, configures
logging from SLACK_LOG_LEVEL, builds the FastAPI app, and runs uvicorn.

RULES:
- --port overrides the PORT environment variable
- Missing configuration exits with status 1 and a one-line message
- argv=None means use sys.argv; explicit argv is for testing
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

import uvicorn

from deepl_slack.config import DEFAULT_HOST, load_settings
from deepl_slack.server.app import create_api

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser (--host, --port)."""
    parser = argparse.ArgumentParser(
        prog="deepl_slack",
        description="Run the DeepL for Slack bot (Slack Events API over HTTP).",
    )

    parser.add_argument(
        "--host",
        default=DEFAULT_HOST,
        help="Interface to bind (default: %(default)s).",
    )

    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to listen on (default: $PORT or 3000).",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Start the server; blocks until uvicorn exits."""
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
    except ValueError as exc:
        print("Error: {}".format(exc), file=sys.stderr)
        sys.exit(1)

    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)

    port = args.port if args.port is not None else settings.port
    api = create_api(settings)

    logger.info("Starting DeepL for Slack on %s:%d", args.host, port)
    logger.info("DeepL endpoint: %s", settings.deepl_api_url)
    if settings.oauth_enabled:
        logger.info("OAuth install flow enabled at /slack/install")

    uvicorn.run(
        api,
        host=args.host,
        port=port,
        log_level=logging.getLevelName(settings.log_level).lower(),
    )


if __name__ == "__main__":
    main()
