"""Unit tests for application settings"""

from config import Settings, get_settings
from domain.quote.delivery import IN_STORE_PICKUP_SHIPPING_METHOD


class TestSettings:
    """Test environment-driven configuration"""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("DEBUG", raising=False)
        monkeypatch.delenv("IN_STORE_PICKUP_SHIPPING_METHOD", raising=False)

        settings = Settings(_env_file=None)

        assert settings.DEBUG is False
        assert settings.IN_STORE_PICKUP_SHIPPING_METHOD == IN_STORE_PICKUP_SHIPPING_METHOD

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("DEBUG", "true")
        monkeypatch.setenv("IN_STORE_PICKUP_SHIPPING_METHOD", "clickcollect_store")

        settings = Settings(_env_file=None)

        assert settings.DEBUG is True
        assert settings.IN_STORE_PICKUP_SHIPPING_METHOD == "clickcollect_store"

    def test_app_debug_follows_settings(self):
        from main import app

        assert app.debug is get_settings().DEBUG
