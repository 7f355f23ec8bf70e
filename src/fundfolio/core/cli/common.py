"""Shared setup logic for CLI commands."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import NoReturn

import click

from fundfolio.app import FundFolioApp
from fundfolio.core.config import Config
from fundfolio.core.exceptions import ConfigurationError
from fundfolio.core.utils.logging import resolve_log_file, setup_logging

FUNDFOLIO_DIR = Path.home() / ".fundfolio"
CONFIG_PATH = FUNDFOLIO_DIR / "config.yaml"


def load_config(ctx: click.Context) -> Config:
    """Load config from --config (or ~/.fundfolio/config.yaml) and --data-dir."""
    obj = ctx.find_root().obj or {}
    config_file = obj.get("config_file") or str(CONFIG_PATH)
    return Config(config_file=config_file, data_dir=obj.get("data_dir"))


def open_app(ctx: click.Context) -> FundFolioApp:
    """Configure logging and build the app, exiting with status 1 on bad config."""
    config = load_config(ctx)
    try:
        settings = config.validated()
    except ConfigurationError as e:
        click.echo(str(e), err=True)
        sys.exit(1)

    config.ensure_directories()
    log_file = resolve_log_file(settings.logging.file, settings.paths.log_dir)
    setup_logging(level=settings.logging.level, log_file=log_file)
    return FundFolioApp.from_config(config)


def fail(message: str) -> NoReturn:
    """Print *message* to stderr and exit with status 1."""
    click.echo(message, err=True)
    sys.exit(1)
