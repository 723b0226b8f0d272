"""Testes dos provedores de secrets (env e Secret Manager mockado)."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from app.infra.secrets import gcp_secrets
from app.infra.secrets.env_secrets import EnvSecretProvider
from app.infra.secrets.gcp_secrets import GCPSecretProvider


class TestEnvSecretProvider:
    def test_reads_gemini_api_key(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GEMINI_API_KEY", "AIza-env")
        assert EnvSecretProvider().gemini_api_key == "AIza-env"

    def test_legacy_api_key_alias(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        monkeypatch.setenv("API_KEY", "AIza-legacy")
        assert EnvSecretProvider().gemini_api_key == "AIza-legacy"

    def test_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NETWORKAI_GEMINI_API_KEY", "AIza-prefixed")
        assert EnvSecretProvider("networkai").get("gemini-api-key") == "AIza-prefixed"

    def test_require_missing_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SOME_SECRET", raising=False)
        with pytest.raises(ValueError, match="SOME_SECRET"):
            EnvSecretProvider().require("some-secret")


class TestGCPSecretProvider:
    @pytest.fixture(autouse=True)
    def _clear_cache(self):
        gcp_secrets.get_secret.cache_clear()
        yield
        gcp_secrets.get_secret.cache_clear()

    def test_reads_secret_with_environment_suffix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        client = MagicMock()
        client.access_secret_version.return_value = SimpleNamespace(
            payload=SimpleNamespace(data=b"AIza-gcp\n")
        )
        monkeypatch.setattr(gcp_secrets, "_get_client", lambda: client)

        provider = GCPSecretProvider(project_id="proj", environment="production")

        assert provider.gemini_api_key == "AIza-gcp"
        client.access_secret_version.assert_called_once_with(
            request={"name": "projects/proj/secrets/gemini-api-key-production/versions/latest"}
        )

    def test_failure_returns_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        client = MagicMock()
        client.access_secret_version.side_effect = RuntimeError("permission denied")
        monkeypatch.setattr(gcp_secrets, "_get_client", lambda: client)

        provider = GCPSecretProvider(project_id="proj", environment="staging")

        assert provider.gemini_api_key is None

    def test_require_propagates_and_retries(self, monkeypatch: pytest.MonkeyPatch) -> None:
        client = MagicMock()
        client.access_secret_version.side_effect = [
            RuntimeError("unavailable"),
            SimpleNamespace(payload=SimpleNamespace(data=b"AIza-gcp")),
        ]
        monkeypatch.setattr(gcp_secrets, "_get_client", lambda: client)

        provider = GCPSecretProvider(project_id="proj", environment="staging")

        with pytest.raises(RuntimeError):
            provider.require("gemini-api-key")
        assert provider.require("gemini-api-key") == "AIza-gcp"

    def test_require_empty_secret_fails(self, monkeypatch: pytest.MonkeyPatch) -> None:
        client = MagicMock()
        client.access_secret_version.return_value = SimpleNamespace(
            payload=SimpleNamespace(data=b"  ")
        )
        monkeypatch.setattr(gcp_secrets, "_get_client", lambda: client)

        with pytest.raises(ValueError):
            GCPSecretProvider(project_id="proj", environment="staging").require("gemini-api-key")
