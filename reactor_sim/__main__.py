#!/usr/bin/env python3
"""
Reactor Control Room Server

Command line launcher: loads the configuration, sets up logging and serves
the FastAPI app with uvicorn.

Usage:
    python -m reactor_sim --port 8080
    python -m reactor_sim --config reactor.yaml --log-level DEBUG
"""

import argparse
import logging
import sys
from typing import List, Optional

import uvicorn

from reactor_sim.exceptions import ConfigError
from reactor_sim.server import ServerConfig, create_app

logger = logging.getLogger("reactor_sim")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Real-time nuclear reactor simulation server")
    parser.add_argument("--config", help="YAML configuration file")
    parser.add_argument("--host", help="Interface to bind")
    parser.add_argument("--port", type=int, help="Port to listen on")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    parser.add_argument("--seed", type=int, help="Random seed for the grid load")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> ServerConfig:
    """Configuration file values overridden by command line flags"""
    config = ServerConfig.from_yaml_file(args.config) if args.config else ServerConfig()

    if args.host is not None:
        config.host = args.host
    if args.port is not None:
        config.port = args.port
    if args.log_level is not None:
        config.log_level = args.log_level
    if args.seed is not None:
        config.seed = args.seed
    return config


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        config = build_config(args)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = create_app(config)
    logger.info(f"Server listening on {config.host}:{config.port}")
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())
    return 0


if __name__ == "__main__":
    sys.exit(main())
