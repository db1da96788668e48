#!/usr/bin/env python3
"""
Beadboard Application Starter
Builds the Application (town root, source registry, services) then starts the API server.
"""

from __future__ import annotations

import argparse
import logging
import os
import webbrowser

import uvicorn

from beadboard.app import Application
from beadboard.helpers.dto.board_config_dto import DEFAULT_HOST, DEFAULT_PORT
from beadboard.helpers.logging_helper import configure_logging
from beadboard.interfaces.api import create_api_app
from beadboard.interfaces.cli import print_error, print_info, show_startup_banner
from beadboard.services.config_svc import ConfigService

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="beadboard", description="Town-wide beads dashboard server")
    parser.add_argument("--port", type=int, default=0, help=f"Port to listen on (default: stored or {DEFAULT_PORT})")
    parser.add_argument("--host", default="", help=f"Host to bind (default: stored or {DEFAULT_HOST})")
    parser.add_argument("--town", default=None, help="Town root (default: discovered from the working directory)")
    parser.add_argument("--open", action="store_true", help="Open the dashboard in a browser")
    return parser


def resolve_bind(application: Application, port_flag: int = 0, host_flag: str = "") -> tuple[str, int]:
    """
    Pick the listen address: CLI flag, then stored board config, then defaults.

    Returns:
        (host, port)
    """
    stored = application.filter_config.get().server
    port = port_flag or stored.port or DEFAULT_PORT
    host = host_flag or stored.host or DEFAULT_HOST
    return host, port


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    if args.town and not os.path.isdir(args.town):
        print_error(f"Town root is not a directory: {args.town}")
        raise SystemExit(2)

    config_service = ConfigService(overrides={"town_root": args.town})
    configure_logging(config_service.log_level)

    logger.info("[Application] Starting Beadboard...")
    application = Application(config_service)
    host, port = resolve_bind(application, args.port, args.host)

    url = f"http://{host}:{port}/"
    show_startup_banner(url, application.town_root, len(application.registry.locations()))
    if args.open:
        print_info(f"Opening {url}")
        webbrowser.open(url)

    try:
        uvicorn.run(
            create_api_app(application),
            host=host,
            port=port,
            timeout_keep_alive=90,
            log_level=config_service.log_level.lower(),
        )
    finally:
        logger.info("API server stopped")


if __name__ == "__main__":
    main()
