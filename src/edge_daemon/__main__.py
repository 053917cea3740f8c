from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from edge_daemon.config import ConfigLoadRequest, YamlConfigLoader, default_document, dump_settings
from edge_daemon.config.interfaces import ConfigLoader
from edge_daemon.config.models import Settings
from edge_daemon.docker import DockerConfig
from edge_daemon.errors import ConfigurationError, format_error_chain
from edge_daemon.logging import init_logging

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="edge-daemon", description="Edge daemon configuration tool")
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a YAML/JSON config file merged over the built-in defaults",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=_LOG_LEVELS,
        default="INFO",
        help="Log level (default: INFO)",
    )
    parser.add_argument("--log-file", default=None, help="Also write logs to this file, rotated daily")

    subparsers = parser.add_subparsers(dest="command", required=True, help="Command to run")

    # Command: check
    subparsers.add_parser("check", help="Load and validate the configuration")

    # Command: show
    show_parser = subparsers.add_parser("show", help="Print the effective configuration")
    show_parser.add_argument(
        "--format",
        choices=("yaml", "json"),
        default="yaml",
        help="Output format (default: yaml)",
    )

    # Command: defaults
    subparsers.add_parser("defaults", help="Print the built-in default configuration for this platform")

    return parser


def _load_settings(args: argparse.Namespace) -> Settings[DockerConfig]:
    request = ConfigLoadRequest(path=args.config)
    loader: ConfigLoader[DockerConfig] = YamlConfigLoader(DockerConfig)
    return loader.load(request)


def _check(args: argparse.Namespace) -> int:
    settings = _load_settings(args)
    logger.info(
        "Configuration is valid. workload_uri=%s management_uri=%s image=%s",
        settings.workload_uri,
        settings.management_uri,
        settings.runtime.config.image,
    )
    return 0


def _show(args: argparse.Namespace) -> int:
    settings = _load_settings(args)
    sys.stdout.write(dump_settings(settings, fmt=args.format))
    return 0


def _defaults(args: argparse.Namespace) -> int:
    sys.stdout.write(default_document())
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    init_logging(level=args.log_level, file_path=args.log_file)

    handlers = {
        "check": _check,
        "show": _show,
        "defaults": _defaults,
    }
    try:
        return handlers[args.command](args)
    except ConfigurationError as e:
        logger.error("Failed to load configuration: %s", format_error_chain(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
