"""
Tests for the configuration module.

This module tests the Settings class and configuration loading functionality.
"""

import os
from unittest.mock import patch

from autopay.core.config import Settings, get_settings


class TestSettings:
    """Test the Settings class and configuration loading."""

    def test_default_settings(self):
        """Test that default settings are properly initialized."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.app_name == "x402-auto-pay-app"
        assert settings.app_version == "1.0.0"
        assert settings.debug is False
        assert settings.port == 8787
        assert settings.resource_server_port == 4021
        assert settings.x402_server_base_url == "http://localhost:4021"
        assert settings.x402_server_timeout_ms == 8000
        assert settings.x402_network == "eip155:84532"
        assert settings.x402_price == "$0.001"
        assert settings.evm_address is None
        assert settings.facilitator_url is None
        assert settings.payment_provider_url is None

    def test_reads_environment(self):
        """Test that values come from the environment."""
        env = {
            "PORT": "9000",
            "X402_SERVER_BASE_URL": "http://weather.internal:4021/",
            "X402_SERVER_TIMEOUT_MS": "2500",
            "EVM_ADDRESS": "0xabc",
            "FACILITATOR_URL": "https://facilitator.example.com",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings(_env_file=None)

        assert settings.port == 9000
        assert settings.x402_server_base_url == "http://weather.internal:4021/"
        assert settings.x402_server_timeout_ms == 2500
        assert settings.evm_address == "0xabc"
        assert settings.facilitator_url == "https://facilitator.example.com"

    def test_invalid_port_falls_back_to_default(self):
        """Test that an unparsable PORT uses the default port."""
        with patch.dict(os.environ, {"PORT": "not-a-port", "RESOURCE_SERVER_PORT": "x"}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.port == 8787
        assert settings.resource_server_port == 4021

    def test_zero_or_invalid_timeout_falls_back_to_default(self):
        """Test that a zero or unparsable timeout uses the default."""
        assert Settings(_env_file=None, x402_server_timeout_ms="0").x402_server_timeout_ms == 8000
        assert Settings(_env_file=None, x402_server_timeout_ms="soon").x402_server_timeout_ms == 8000
        assert Settings(_env_file=None, x402_server_timeout_ms="").x402_server_timeout_ms == 8000

    def test_missing_payment_config_flags(self):
        """Test that missing paywall settings are reported per field."""
        settings = Settings(_env_file=None, evm_address=None, facilitator_url=None)
        assert settings.missing_payment_config == {"evmAddress": True, "facilitatorUrl": True}
        assert settings.paywall_configured is False

        settings = Settings(_env_file=None, evm_address="0xabc", facilitator_url=None)
        assert settings.missing_payment_config == {"evmAddress": False, "facilitatorUrl": True}
        assert settings.paywall_configured is False

    def test_blank_payment_config_counts_as_missing(self):
        """Test that blank strings are treated as unset."""
        settings = Settings(_env_file=None, evm_address="  ", facilitator_url="")
        assert settings.evm_address is None
        assert settings.facilitator_url is None
        assert settings.paywall_configured is False

    def test_paywall_configured(self):
        """Test that both settings present enables the paywall."""
        settings = Settings(
            _env_file=None,
            evm_address="0xabc",
            facilitator_url="https://facilitator.example.com",
        )
        assert settings.missing_payment_config == {"evmAddress": False, "facilitatorUrl": False}
        assert settings.paywall_configured is True

    def test_production_environment(self):
        """Test production environment detection."""
        assert Settings(_env_file=None, environment="production").is_production is True
        assert Settings(_env_file=None, environment="development").is_production is False

    def test_get_settings_is_cached(self):
        """Test that get_settings returns the same instance."""
        assert get_settings() is get_settings()
