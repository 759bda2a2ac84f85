"""Tests for gateway middleware helpers and logging setup."""

import logging

import pytest

from src.cb_common.logging_config import configure_logging
from src.cb_gateway.middleware.strip_slashes import strip_trailing_slashes


class TestStripTrailingSlashes:
    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("/account/coins", "/account/coins"),
            ("/account/coins/", "/account/coins"),
            ("/account/coins///", "/account/coins"),
            ("/", "/"),
            ("//", "/"),
        ],
    )
    def test_paths(self, path: str, expected: str) -> None:
        assert strip_trailing_slashes(path) == expected


class TestConfigureLogging:
    def test_idempotent(self) -> None:
        root = logging.getLogger()
        configure_logging("INFO")
        before = len(root.handlers)
        configure_logging("DEBUG")
        assert len(root.handlers) == before
        assert root.level == logging.DEBUG
        configure_logging("INFO")
