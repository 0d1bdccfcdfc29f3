"""Command-line interface for neuralcore.

Provides the main entry point for serving the debug endpoint, calling a
running endpoint, or running the simulated vision loop.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="neuralcore",
        description="Linus Neural Project debug service and vision simulator",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="Path to YAML configuration file (default: config/neuralcore.yaml)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("serve", help="Start the HTTP debug endpoint")
    subparsers.add_parser("status", help="Print the status of a running endpoint")

    command_parser = subparsers.add_parser("command", help="Run a command on a running endpoint")
    command_parser.add_argument("name", help="Command name (reboot, analyze-memory, ping)")

    log_parser = subparsers.add_parser("log", help="Send a tagged log message to a running endpoint")
    log_parser.add_argument("tag")
    log_parser.add_argument("message")

    vision_parser = subparsers.add_parser("vision", help="Run the simulated vision loop")
    vision_parser.add_argument("--iterations", type=int, default=None)
    vision_parser.add_argument("--interval", type=float, default=None)
    vision_parser.add_argument("--seed", type=int, default=None)

    return parser.parse_args(argv)


def _run_client(settings, args) -> int:
    """Call a running debug endpoint and print the response."""
    from neuralcore.debug.client import DebugClientError, HttpDebugClient

    client = HttpDebugClient(
        base_url=settings.client.base_url,
        timeout=settings.client.timeout,
    )
    try:
        with client:
            if args.command == "status":
                print(client.get_system_status())
            elif args.command == "command":
                print(client.run_command(args.name))
            elif args.command == "log":
                client.log_message(args.tag, args.message)
    except DebugClientError as e:
        logger.error("%s", e)
        return 1
    return 0


def _run_vision(settings, args) -> None:
    """Run the simulated vision loop in the foreground."""
    from neuralcore.vision.loop import VisionLoop
    from neuralcore.vision.sampler import RandomSampler

    vision = settings.vision
    seed = args.seed if args.seed is not None else vision.seed
    loop = VisionLoop(
        sampler=RandomSampler(seed),
        iterations=args.iterations if args.iterations is not None else vision.iterations,
        interval=args.interval if args.interval is not None else vision.interval,
    )
    try:
        loop.start()
    except KeyboardInterrupt:
        loop.stop()


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the neuralcore CLI."""
    args = parse_args(argv)

    if args.command is None:
        parse_args(["--help"])
        return

    from neuralcore.config.settings import load_settings
    from neuralcore.utils.logging import setup_logging

    settings = load_settings(args.config)

    if args.verbose:
        settings.logging.level = "DEBUG"

    setup_logging(settings.logging)

    if args.command == "serve":
        logger.info("Starting debug endpoint")
        from neuralcore.debug.server import create_app
        import uvicorn
        uvicorn.run(
            create_app(),
            host=settings.endpoint.host,
            port=settings.endpoint.port,
        )

    elif args.command in ("status", "command", "log"):
        sys.exit(_run_client(settings, args))

    elif args.command == "vision":
        logger.info("Running simulated vision loop")
        _run_vision(settings, args)


if __name__ == "__main__":
    main()
