"""
Tests for the library's loguru setup: it must leave the application's sinks alone.
"""

import importlib

from loguru import logger

import logs


class TestLogs:
    def test_application_sink_survives_import(self):
        """A sink added before the library is imported still gets messages."""
        seen = []
        sink_id = logger.add(seen.append, format="{message}")
        try:
            importlib.reload(logs)
            import client  # noqa: F401

            logger.info("host message")
        finally:
            logger.remove(sink_id)

        assert any("host message" in message for message in seen)

    def test_existing_levels_are_reused(self):
        """Reloading does not try to redefine IN and OUT."""
        importlib.reload(logs)
        importlib.reload(logs)

        assert logger.level("IN").no == 20
        assert logger.level("OUT").no == 20

    def test_library_file_sink_skips_foreign_records(self, tmp_path):
        log_file = tmp_path / "lib.log"
        logs.configure_logging(str(log_file))

        logs.logger.bind(context="Test").log("OUT", "library message")
        logger.info("host message")

        contents = log_file.read_text()
        assert "[Test] library message" in contents
        assert "host message" not in contents
