"""Command-line entry point for CloudNav.

Resolves the connection context from flags and the environment, loads the
YAML settings, configures file logging and launches the Textual app.
"""

from __future__ import annotations

import argparse
import logging
import os
from collections.abc import Sequence
from pathlib import Path

from cloudnav import __version__
from cloudnav.app import CloudNavApp
from cloudnav.constants.values import LOG_FILE_NAME, PROFILE_ENV_VAR, REGION_ENV_VAR
from cloudnav.controllers.demo import build_demo_source
from cloudnav.models.core.resources import ConnectionContext
from cloudnav.models.state.app_settings import AppSettings, ConfigLoadError
from cloudnav.models.state.config_manager import ConfigManager, config_dir, default_session_dir
from cloudnav.utils.session_store import FileSessionBackend, SessionStore

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cloudnav",
        description="Keyboard-driven terminal browser for cloud resources.",
    )
    parser.add_argument(
        "--profile",
        help=f"credentials profile (default: ${PROFILE_ENV_VAR})",
    )
    parser.add_argument(
        "--region",
        help=f"region code (default: ${REGION_ENV_VAR}, then the configured default)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="settings file (default: the per-user config.yaml)",
    )
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
        help="override the configured log level",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def load_settings(path: Path | None) -> AppSettings:
    """Configured settings, or defaults when the file is unusable."""
    try:
        return ConfigManager.load(path)
    except ConfigLoadError as e:
        logger.warning("%s; using default settings", e)
        return AppSettings()


def resolve_context(
    args: argparse.Namespace, settings: AppSettings, parser: argparse.ArgumentParser
) -> ConnectionContext:
    """Connection context from flags, then environment, then settings.

    A missing profile is a usage error and exits with status 2.
    """
    profile = args.profile or os.environ.get(PROFILE_ENV_VAR, "")
    if not profile:
        parser.error(f"no profile given: pass --profile or set ${PROFILE_ENV_VAR}")
    region = args.region or os.environ.get(REGION_ENV_VAR) or settings.default_region
    return ConnectionContext(profile=profile, region=region)


def configure_logging(settings: AppSettings, level: str | None = None) -> Path:
    """Send log records to a file so they never draw over the terminal UI."""
    log_file = Path(settings.log_file) if settings.log_file else config_dir() / LOG_FILE_NAME
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=log_file,
        level=level or settings.log_level,
        format=_LOG_FORMAT,
        force=True,
    )
    return log_file


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments and run the browser until it exits."""
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = load_settings(args.config)
    context = resolve_context(args, settings, parser)

    log_file = configure_logging(settings, args.log_level)
    logger.info("Starting %s for %s (log file %s)", parser.prog, context.key, log_file)

    session_dir = Path(settings.session_dir) if settings.session_dir else default_session_dir()
    store = SessionStore(FileSessionBackend(session_dir))

    app = CloudNavApp(context, build_demo_source(), settings=settings, session_store=store)
    app.run()
    return 0


__all__ = ["build_parser", "configure_logging", "load_settings", "main", "resolve_context"]
