"""
Tests pour la configuration du logging loguru.
"""

import json

import pytest
from loguru import logger

from movie_catalog.logging_config import configure_logging, resolve_log_level


class TestResolveLogLevel:
    """Tests pour resolve_log_level."""

    @pytest.mark.parametrize(
        "verbose, quiet, expected",
        [
            (0, False, "WARNING"),
            (1, False, "INFO"),
            (2, False, "DEBUG"),
            (3, False, "DEBUG"),
            (2, True, "ERROR"),
        ],
    )
    def test_levels(self, verbose, quiet, expected):
        """Les options CLI priment sur le niveau configure."""
        assert resolve_log_level("WARNING", verbose=verbose, quiet=quiet) == expected


class TestConfigureLogging:
    """Tests pour configure_logging."""

    def test_writes_json_log_file(self, test_settings):
        """Le fichier de log est cree et contient du JSON."""
        try:
            configure_logging(
                log_level="ERROR",
                log_file=test_settings.log_file,
            )
            logger.info("Film ajoute: MV1")
            logger.complete()
        finally:
            logger.remove()

        lines = test_settings.log_file.read_text(encoding="utf-8").splitlines()
        records = [json.loads(line) for line in lines]
        assert any(r["record"]["message"] == "Film ajoute: MV1" for r in records)

    def test_setup_record_carries_console_level(self, test_settings):
        """Le message de configuration trace le fichier et le niveau console."""
        try:
            configure_logging(log_level="ERROR", log_file=test_settings.log_file)
        finally:
            logger.remove()

        records = [
            json.loads(line)["record"]
            for line in test_settings.log_file.read_text(encoding="utf-8").splitlines()
        ]
        setup = next(r for r in records if r["message"] == "Logging configuré")
        assert setup["extra"]["level"] == "ERROR"
        assert setup["extra"]["log_file"] == str(test_settings.log_file)
