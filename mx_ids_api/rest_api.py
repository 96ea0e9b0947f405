"""
Entry point for launching the mx-ids REST server.

Typical usage
---------------
>>> mx-ids-api                         # 0.0.0.0:8090, settings from MX_IDS_* variables
>>> mx-ids-api --port 9000 --debug
"""

import argparse
from typing import List, Optional

from mx_ids_api.app import create_app
from mx_ids_api.constants import (
    REST_API_LOG_LEVEL,
    SERVER_DEBUG,
    SERVER_HOST,
    SERVER_PORT,
)


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Start the mx-ids validation API (Flask development server)"
    )
    parser.add_argument(
        "--host",
        default=SERVER_HOST,
        help="Interface to bind to (default: %(default)s)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=SERVER_PORT,
        help="Port number (default: %(default)s)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=SERVER_DEBUG,
        help="Enable Flask debug mode and DEBUG logging",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    app = create_app(logger_level="DEBUG" if args.debug else REST_API_LOG_LEVEL)
    app.run(host=args.host, port=args.port, debug=args.debug)


if __name__ == "__main__":
    main()
