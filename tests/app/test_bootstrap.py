"""Testes do bootstrap e do escopo de correlation_id."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from app.bootstrap import (
    get_component,
    initialize_app,
    initialize_test_app,
    validate_runtime_settings,
)
from app.observability import correlation_scope, get_correlation_id
from app.use_cases.snapchat import SnapchatComponent
from config.logging import CorrelationIdFilter
from config.settings import get_base_settings, get_snapchat_api_settings


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Iterator[None]:
    get_base_settings.cache_clear()
    get_snapchat_api_settings.cache_clear()
    get_component.cache_clear()
    yield
    get_base_settings.cache_clear()
    get_snapchat_api_settings.cache_clear()
    get_component.cache_clear()


class TestCorrelationScope:
    """Testes para correlation_scope/get_correlation_id."""

    def test_default_is_empty(self) -> None:
        assert get_correlation_id() == ""

    def test_scope_sets_and_restores(self) -> None:
        """uuid do evento vale apenas dentro do bloco."""
        with correlation_scope("evt-1") as current:
            assert current == "evt-1"
            assert get_correlation_id() == "evt-1"
            with correlation_scope("evt-2"):
                assert get_correlation_id() == "evt-2"
            assert get_correlation_id() == "evt-1"
        assert get_correlation_id() == ""

    def test_scope_restores_on_exception(self) -> None:
        with pytest.raises(RuntimeError), correlation_scope("evt-1"):
            raise RuntimeError("boom")
        assert get_correlation_id() == ""

    def test_empty_uuid_is_kept(self) -> None:
        """Evento sem uuid não recebe id sintético."""
        with correlation_scope(""):
            assert get_correlation_id() == ""


class TestInitializeApp:
    """Testes para initialize_app/initialize_test_app."""

    def test_initialize_app_uses_env_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """LOG_LEVEL do env aplicado ao root logger."""
        monkeypatch.setenv("LOG_LEVEL", "warning")
        initialize_app()
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert any(isinstance(f, CorrelationIdFilter) for f in root.handlers[0].filters)

    def test_initialize_test_app_is_debug(self) -> None:
        initialize_test_app()
        assert logging.getLogger().level == logging.DEBUG


class TestValidateRuntimeSettings:
    """Testes para validate_runtime_settings."""

    def test_valid_settings_pass(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("SNAPCHAT_API_BASE_URL", raising=False)
        validate_runtime_settings()

    def test_invalid_settings_raise_in_production(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Produção falha rápido com lista de erros."""
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("LOG_LEVEL", "LOUD")
        with pytest.raises(RuntimeError, match="LOG_LEVEL inválido: LOUD"):
            validate_runtime_settings()

    def test_invalid_settings_only_warn_in_development(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Desenvolvimento apenas registra o alerta."""
        monkeypatch.setenv("ENVIRONMENT", "development")
        monkeypatch.setenv("LOG_LEVEL", "LOUD")
        caplog.set_level(logging.WARNING, logger="app.bootstrap")
        validate_runtime_settings()
        assert any(r.getMessage() == "settings_validation_failed" for r in caplog.records)


class TestGetComponent:
    """Testes para get_component."""

    def test_component_is_cached(self) -> None:
        component = get_component()
        assert isinstance(component, SnapchatComponent)
        assert component is get_component()
