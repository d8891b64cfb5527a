"""Tests for mizan.core.utils.logging."""

import os

from loguru import logger

from mizan.core.cli.common import load_settings
from mizan.core.utils.logging import setup_logging


class TestSetupLogging:
    def test_file_sink_receives_messages(self, tmp_dir):
        log_file = os.path.join(tmp_dir, "mizan.log")
        setup_logging(level="info", log_file=log_file)
        try:
            logger.info("hawl tracked")
            logger.debug("not written at INFO")
        finally:
            logger.remove()

        with open(log_file) as f:
            content = f.read()
        assert "hawl tracked" in content
        assert "not written" not in content

    def test_console_only(self, capsys):
        setup_logging(level="WARNING")
        try:
            logger.warning("price missing")
        finally:
            logger.remove()
        assert "price missing" in capsys.readouterr().err

    def test_settings_feed_the_file_sink(self, tmp_dir):
        log_file = os.path.join(tmp_dir, "zakat.log")
        config_file = os.path.join(tmp_dir, "config.yaml")
        with open(config_file, "w") as f:
            f.write(f"logging:\n  level: debug\n  file: {log_file}\n  rotation: 1 MB\n  retention: 3 days\n")

        try:
            settings = load_settings(config_file)
            logger.debug("nisab computed")
        finally:
            logger.remove()

        assert settings.logging.rotation == "1 MB"
        with open(log_file) as f:
            content = f.read()
        assert "rotation 1 MB, retention 3 days" in content
        assert "nisab computed" in content
