"""
Tests for environment-sourced settings.

Test plan:
- Defaults: port 3000, testnet endpoint, submit=True, expire=300
- Environment: PORT, XRPL_ENDPOINT, XUMM_* and SIGNING_* read by name
- Validation: non-positive expire rejected
- signing_options() mirrors the submit/expire fields
"""

import pytest
from pydantic import ValidationError

from xrpl_credentials.config import ALLOWED_ORIGINS, Settings
from xrpl_credentials.signing.gateway import SigningOptions

_ENV_VARS = [
    "PORT",
    "HOST",
    "XRPL_ENDPOINT",
    "XUMM_API_KEY",
    "XUMM_API_SECRET",
    "XUMM_API_URL",
    "SIGNING_SUBMIT",
    "SIGNING_EXPIRE",
    "SIGNING_TIMEOUT_SECONDS",
    "LOG_LEVEL",
]


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestDefaults:
    def test_defaults(self, clean_env: pytest.MonkeyPatch) -> None:
        settings = Settings(_env_file=None)
        assert settings.port == 3000
        assert settings.xrpl_endpoint == "wss://s.altnet.rippletest.net:51233"
        assert settings.xumm_api_url == "https://xumm.app/api/v1"
        assert settings.xumm_api_key == ""
        assert settings.signing_submit is True
        assert settings.signing_expire == 300
        assert settings.signing_timeout_seconds == 30.0

    def test_allowed_origins_are_local_dev(self) -> None:
        assert ALLOWED_ORIGINS == ["http://localhost:5173", "http://127.0.0.1:5173"]


class TestEnvironment:
    def test_reads_env(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("PORT", "8080")
        clean_env.setenv("XRPL_ENDPOINT", "wss://xrplcluster.com")
        clean_env.setenv("XUMM_API_KEY", "key")
        clean_env.setenv("XUMM_API_SECRET", "secret")
        clean_env.setenv("SIGNING_SUBMIT", "false")
        clean_env.setenv("SIGNING_EXPIRE", "60")
        settings = Settings(_env_file=None)
        assert settings.port == 8080
        assert settings.xrpl_endpoint == "wss://xrplcluster.com"
        assert settings.xumm_api_key == "key"
        assert settings.xumm_api_secret == "secret"
        assert settings.signing_submit is False
        assert settings.signing_expire == 60

    def test_rejects_non_positive_expire(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("SIGNING_EXPIRE", "0")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestSigningOptions:
    def test_mirrors_fields(self) -> None:
        settings = Settings(_env_file=None, signing_submit=False, signing_expire=15)
        assert settings.signing_options() == SigningOptions(submit=False, expire=15)
