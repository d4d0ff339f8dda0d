"""Main entry point for the API service"""

import argparse

import uvicorn
from dotenv import load_dotenv

# Load environment variables from .env file before settings are read
load_dotenv()

from backend.shared.config.settings import get_settings
from backend.shared.config.logging_config import get_logger


def parse_args(argv=None):
    """Parse command line arguments"""
    api_config = get_settings().api
    parser = argparse.ArgumentParser(description="Construction Marketplace API Service")
    parser.add_argument(
        "--host",
        help="Host to bind the server to",
        default=api_config.host
    )
    parser.add_argument(
        "--port",
        help="Port to bind the server to",
        type=int,
        default=api_config.port
    )
    parser.add_argument(
        "--reload",
        help="Enable auto-reload",
        action="store_true",
        default=api_config.debug
    )
    parser.add_argument(
        "--log-level",
        help="Logging level",
        default=get_settings().observability.log_level.lower(),
        choices=["debug", "info", "warning", "error", "critical"]
    )
    return parser.parse_args(argv)


def main():
    """Main entry point for the API service"""
    args = parse_args()
    logger = get_logger(__name__)

    logger.info(f"Starting API service on {args.host}:{args.port}")
    logger.info(f"Environment: {get_settings().environment}")

    uvicorn.run(
        "backend.services.api.src.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level,
        access_log=False
    )


if __name__ == "__main__":
    main()
