from __future__ import annotations

import logging
from dataclasses import dataclass, field

import structlog

from official_status.shared.logging import (
    configure_logging,
    get_logger,
    select_renderer,
    update_logging_from_settings,
)


def test_configure_logging_sets_root_handlers(tmp_path) -> None:
    log_file = tmp_path / "probe.log"
    configure_logging(level="DEBUG", file_path=str(log_file), environment="development")

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert any(isinstance(handler, logging.FileHandler) for handler in root.handlers)

    get_logger(__name__).info("structured log test")


@dataclass
class _LoggingSettings:
    level: str = "WARNING"
    file_path: str | None = None
    format: str | None = None


@dataclass
class _Settings:
    logging: _LoggingSettings = field(default_factory=_LoggingSettings)
    environment: str = "production"


def test_update_logging_from_settings_applies_configuration() -> None:
    update_logging_from_settings(_Settings(logging=_LoggingSettings(level="ERROR")))

    assert logging.getLogger().level == logging.ERROR


def test_select_renderer_follows_environment_by_default() -> None:
    assert isinstance(
        select_renderer(None, "production"), structlog.processors.JSONRenderer
    )
    assert isinstance(
        select_renderer(None, "development"), structlog.dev.ConsoleRenderer
    )


def test_select_renderer_explicit_format_wins() -> None:
    assert isinstance(
        select_renderer("json", "development"), structlog.processors.JSONRenderer
    )
    assert isinstance(
        select_renderer("console", "production"), structlog.dev.ConsoleRenderer
    )


def test_update_logging_from_settings_passes_format(monkeypatch) -> None:
    captured: dict = {}
    monkeypatch.setattr(
        "official_status.shared.logging.configure_logging",
        lambda **kwargs: captured.update(kwargs),
    )

    update_logging_from_settings(
        _Settings(logging=_LoggingSettings(format="json"), environment="development")
    )

    assert captured["log_format"] == "json"
    assert captured["environment"] == "development"
