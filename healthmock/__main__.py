"""
Command-line runner.

Usage:
    python -m healthmock [--host HOST] [--port PORT]

Host and port default to the HOST and PORT settings.
"""

import argparse
import logging

import uvicorn

from healthmock.core.config import settings
from healthmock.shared.logging import configure_logging

logger = logging.getLogger(__name__)

# h11 refuses informational status lines; httptools sends any code in [100, 599].
HTTP_PROTOCOL = "httptools"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="health-mock", description="Health Mock API server"
    )
    parser.add_argument(
        "--host", default=settings.host, help="Interface to bind (default: %(default)s)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.port,
        help="Port to listen on (default: %(default)s)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    settings.port = args.port
    configure_logging(level=settings.log_level)
    logger.info("Starting server at http://%s:%d", args.host, args.port)
    uvicorn.run(
        "healthmock.main:app",
        host=args.host,
        port=args.port,
        http=HTTP_PROTOCOL,
        log_level=settings.log_level.lower(),
        reload=False,
    )


if __name__ == "__main__":
    main()
