"""Shared setup logic for CLI commands."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import date

import click
from pydantic import ValidationError

from mizan.core.config import Config
from mizan.core.config_schema import MizanConfig
from mizan.core.exceptions import ConfigurationError, MizanError
from mizan.core.utils.logging import setup_logging
from mizan.zakat.hijri_calendar import HijriDate


def load_settings(config_file: str | None = None, log_level: str | None = None) -> MizanConfig:
    """Load and validate config, then configure logging from it."""
    try:
        config = Config(config_file=config_file)
        if log_level:
            config.set("logging.level", log_level)
        settings = config.validated()
    except (ConfigurationError, ValidationError) as e:
        raise click.ClickException(f"Invalid configuration: {e}") from e

    log = settings.logging
    setup_logging(level=log.level, log_file=log.file, rotation=log.rotation, retention=log.retention)
    return settings


@contextmanager
def reported_errors() -> Iterator[None]:
    """Turn engine errors into CLI errors with a non-zero exit code."""
    try:
        yield
    except MizanError as e:
        raise click.ClickException(f"[{e.kind}] {e}") from e


def parse_gregorian(text: str) -> date:
    try:
        return date.fromisoformat(text)
    except ValueError as e:
        raise click.BadParameter(f"expected a Gregorian date as YYYY-MM-DD, got {text!r}") from e


def parse_hijri(text: str) -> HijriDate:
    with reported_errors():
        return HijriDate.fromisoformat(text)
