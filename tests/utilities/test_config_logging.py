# tests/utilities/test_config_logging.py
from __future__ import annotations

import logging.config

from qif_ledger.utilities import config_logging
from qif_ledger.utilities.config_logging import LOGGING, build_logging_config


def test_console_only_without_log_file():
    # Act
    cfg = build_logging_config("debug")

    # Assert
    assert "file" not in cfg["handlers"]
    assert cfg["loggers"][""]["handlers"] == ["console"]
    assert cfg["handlers"]["console"]["level"] == "DEBUG"
    assert "file" in LOGGING["handlers"], "The module-level dict is not modified."


def test_file_handler_uses_given_path(tmp_path):
    cfg = build_logging_config("INFO", tmp_path / "x.log")
    assert cfg["handlers"]["file"]["filename"] == str(tmp_path / "x.log")


def test_configure_logging_creates_directory(monkeypatch, tmp_path):
    # Arrange
    applied = {}
    monkeypatch.setattr(logging.config, "dictConfig", lambda cfg: applied.update(cfg))
    log_file = tmp_path / "logs" / "qif_ledger.log"

    # Act
    config_logging.configure_logging("WARNING", log_file)

    # Assert
    assert log_file.parent.is_dir()
    assert applied["handlers"]["console"]["level"] == "WARNING"
