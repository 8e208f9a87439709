# tests/core/test_logging.py
"""Tests for log level selection."""

import logging

from snouty.core.logging import resolve_level


class TestResolveLevel:
    def test_default_is_warning(self) -> None:
        assert resolve_level(False) == logging.WARNING

    def test_verbose_is_debug(self) -> None:
        assert resolve_level(True, "error") == logging.DEBUG

    def test_environment_level(self) -> None:
        assert resolve_level(False, "info") == logging.INFO

    def test_unknown_environment_level_falls_back(self) -> None:
        assert resolve_level(False, "chatty") == logging.WARNING
