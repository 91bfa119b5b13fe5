"""Tests for settings parsing and logging setup."""

import logging

import pytest
from pydantic import ValidationError

from product_board.core.config import DEFAULT_CORS_ORIGINS, Settings, configure_logging


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("PRODUCT_BOARD_API_BASE_URL", "PRODUCT_BOARD_ITEMS_PER_PAGE", "CORS_ORIGINS"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.api_base_url == "http://localhost:5000"
        assert settings.products_path == "/api/products"
        assert settings.items_per_page == 5
        assert settings.reset_page_on_search is False
        assert settings.cors_origins == DEFAULT_CORS_ORIGINS

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("PRODUCT_BOARD_API_BASE_URL", "https://inventory.example.com/")
        monkeypatch.setenv("PRODUCT_BOARD_PRODUCTS_PATH", "v2/products/")
        monkeypatch.setenv("PRODUCT_BOARD_ITEMS_PER_PAGE", "10")
        monkeypatch.setenv("CORS_ORIGINS", "https://a.example.com/, https://b.example.com")

        settings = Settings(_env_file=None)

        assert settings.api_base_url == "https://inventory.example.com"
        assert settings.products_path == "/v2/products"
        assert settings.items_per_page == 10
        assert settings.cors_origins == ["https://a.example.com", "https://b.example.com"]

    def test_rejects_zero_page_size(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, items_per_page=0)

    def test_rejects_unknown_log_level(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="chatty")


def test_configure_logging_applies_level(settings):
    root = logging.getLogger()
    previous = root.level
    try:
        configure_logging(settings.model_copy(update={"log_level": "WARNING"}))
        assert root.level == logging.WARNING
    finally:
        root.setLevel(previous)
