"""Configuration and logging setup for the scan parser tools."""

from __future__ import annotations

import logging
import sys
from functools import lru_cache
from pathlib import Path

import structlog
from pydantic_settings import BaseSettings, SettingsConfigDict


class ScanParserSettings(BaseSettings):
    """Settings for the CLI and report writers. The parser itself takes none."""

    model_config = SettingsConfigDict(
        env_prefix="SCAN_PARSER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "WARNING"
    log_json: bool = False
    exports_dir: Path = Path("exports")
    report_title: str = "Jewellery Scan Report"


@lru_cache
def get_settings() -> ScanParserSettings:
    """Get cached settings instance."""
    return ScanParserSettings()


def configure_logging(level: str | None = None, json_output: bool | None = None) -> None:
    """Configure structlog to write to stderr.

    Args:
        level: Log level name. Defaults to settings.log_level.
        json_output: Render JSON lines instead of console output.
            Defaults to settings.log_json.
    """
    settings = get_settings()
    level_name = (level or settings.log_level).upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING

    use_json = settings.log_json if json_output is None else json_output
    renderer = (
        structlog.processors.JSONRenderer()
        if use_json
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
