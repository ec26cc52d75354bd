"""
Launches the summary API under uvicorn.
"""

import os
import argparse
import uvicorn

from app.config import config
from app.utils.logger import logging, set_level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=f"{config.APP_NAME} server")
    parser.add_argument("--host", default="0.0.0.0", help="Interface to listen on")
    parser.add_argument("--port", type=int, default=int(os.getenv("PORT", "8000")),
                        help="Port to listen on (defaults to $PORT or 8000)")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes")
    parser.add_argument("--log-level", default=config.LOG_LEVEL,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        type=str.upper, help="Log level for the app and uvicorn")
    return parser


def main(argv=None):
    """Serve ``app.api.app:app`` with the selected options."""
    args = build_parser().parse_args(argv)
    set_level(args.log_level)

    logging.info(
        f"Serving {config.APP_NAME} v{config.APP_VERSION} on {args.host}:{args.port} "
        f"({os.getenv('ENVIRONMENT', 'development')})"
    )

    uvicorn.run(
        "app.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level.lower(),
    )


if __name__ == "__main__":
    main()
