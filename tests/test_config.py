"""Tests for Settings loading and StripeAPIClient.from_settings."""

import pytest

from stripe_subscriptions.config import DEFAULT_API_BASE, Settings
from stripe_subscriptions.services.stripe_api.client import StripeAPIClient


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for key in (
        "STRIPE_API_KEY",
        "STRIPE_ACCOUNT",
        "STRIPE_API_BASE",
        "STRIPE_API_VERSION",
        "REQUEST_TIMEOUT",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestSettings:
    def test_defaults(self, clean_env):
        settings = Settings()
        assert settings.stripe_api_key is None
        assert settings.stripe_api_base == DEFAULT_API_BASE
        assert settings.request_timeout == 60.0

    def test_env_var(self, clean_env, monkeypatch):
        monkeypatch.setenv("STRIPE_API_KEY", "sk_test_env")
        monkeypatch.setenv("STRIPE_API_VERSION", "2019-03-14")
        settings = Settings()
        assert settings.stripe_api_key == "sk_test_env"
        assert settings.stripe_api_version == "2019-03-14"

    def test_dotenv_file(self, clean_env):
        (clean_env / ".env").write_text("STRIPE_API_KEY=sk_test_file\n")
        assert Settings().stripe_api_key == "sk_test_file"

    def test_empty_env_var_falls_through_to_dotenv(self, clean_env, monkeypatch):
        (clean_env / ".env").write_text("STRIPE_API_KEY=sk_test_file\n")
        monkeypatch.setenv("STRIPE_API_KEY", "")
        assert Settings().stripe_api_key == "sk_test_file"


class TestFromSettings:
    async def test_client_from_settings(self, clean_env):
        settings = Settings(
            stripe_api_key="sk_test_cfg",
            stripe_api_base="http://localhost:12111/v1",
            stripe_account="acct_1",
            request_timeout=5.0,
        )
        async with StripeAPIClient.from_settings(settings) as c:
            assert c.base_url == "http://localhost:12111/v1/"
            assert c._prepare_headers()["Authorization"] == "Bearer sk_test_cfg"
            assert c._prepare_headers()["Stripe-Account"] == "acct_1"
            assert c._http.timeout.read == 5.0
