"""Settings específicas do Snapchat Conversions API.

Dois níveis de configuração:
- SnapchatApiSettings: endpoint da API, carregado de env (cacheado).
- SnapchatCredentials: credenciais por invocação, vindas das settings do host.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING

from app.constants.snapchat import (
    ACCESS_TOKEN_KEYS,
    PIXEL_ID_KEYS,
    TEST_EVENT_CODE_KEYS,
)
from utils.errors import MissingCredentialError

if TYPE_CHECKING:
    from collections.abc import Iterable

# Constantes do CAPI
SNAPCHAT_API_BASE_URL: str = "https://tr.snapchat.com"
SNAPCHAT_API_VERSION: str = "v3"


@dataclass(frozen=True)
class SnapchatApiSettings:
    """Configurações de endpoint do CAPI.

    Attributes:
        api_base_url: URL base do CAPI
        api_version: Versão da API (ex: v3)
        forward_client_headers: Sinaliza ao transporte do host para
            repassar os headers do cliente original
    """

    api_base_url: str = SNAPCHAT_API_BASE_URL
    api_version: str = SNAPCHAT_API_VERSION
    forward_client_headers: bool = True

    @property
    def api_endpoint(self) -> str:
        """URL base completa da API com versão."""
        return f"{self.api_base_url}/{self.api_version}"

    def get_events_endpoint(self, pixel_id: str) -> str:
        """Retorna URL de envio de eventos (sem query string).

        pixel_id é inserido como recebido (inclusive vazio).

        Returns:
            URL completa no formato: https://tr.snapchat.com/v3/{pixel_id}/events
        """
        return f"{self.api_endpoint}/{pixel_id}/events"

    def validate(self) -> list[str]:
        """Valida configurações mínimas do CAPI.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_base_url.startswith(("https://", "http://")):
            errors.append("SNAPCHAT_API_BASE_URL deve começar com http(s)://")

        if not self.api_version:
            errors.append("SNAPCHAT_API_VERSION não pode ser vazio")

        return errors


def _load_from_env() -> SnapchatApiSettings:
    """Carrega SnapchatApiSettings a partir de variáveis de ambiente."""
    return SnapchatApiSettings(
        api_base_url=os.getenv("SNAPCHAT_API_BASE_URL", SNAPCHAT_API_BASE_URL).rstrip("/"),
        api_version=os.getenv("SNAPCHAT_API_VERSION", SNAPCHAT_API_VERSION),
        forward_client_headers=os.getenv(
            "SNAPCHAT_FORWARD_CLIENT_HEADERS", "true"
        ).lower() in ("true", "1", "yes"),
    )


@lru_cache(maxsize=1)
def get_snapchat_api_settings() -> SnapchatApiSettings:
    """Retorna instância cacheada de SnapchatApiSettings."""
    return _load_from_env()


@dataclass(frozen=True)
class SnapchatCredentials:
    """Credenciais resolvidas para uma única invocação.

    Attributes:
        access_token: Token de acesso ao CAPI
        pixel_id: ID do pixel (destino dos eventos)
        test_event_code: Código de teste opcional (eventos de validação)
    """

    access_token: str
    pixel_id: str
    test_event_code: str | None = None


def _lookup(settings: dict[str, str], keys: tuple[str, ...]) -> str | None:
    for key in keys:
        if key in settings:
            return settings[key]
    return None


def resolve_credentials(settings: Iterable[tuple[str, str]]) -> SnapchatCredentials:
    """Extrai credenciais das settings genéricas do host.

    Chaves repetidas: vale a última ocorrência. Valores não são validados.

    Args:
        settings: Pares (chave, valor) na ordem informada pelo host

    Returns:
        SnapchatCredentials

    Raises:
        MissingCredentialError: Se access token ou pixel id ausentes.
    """
    values = {str(key): str(value) for key, value in settings}

    access_token = _lookup(values, ACCESS_TOKEN_KEYS)
    if access_token is None:
        raise MissingCredentialError(
            f"Missing Snapchat Access Token ({' or '.join(ACCESS_TOKEN_KEYS)})",
            key=ACCESS_TOKEN_KEYS[0],
        )

    pixel_id = _lookup(values, PIXEL_ID_KEYS)
    if pixel_id is None:
        raise MissingCredentialError(
            f"Missing Snapchat Pixel ID ({' or '.join(PIXEL_ID_KEYS)})",
            key=PIXEL_ID_KEYS[0],
        )

    return SnapchatCredentials(
        access_token=access_token,
        pixel_id=pixel_id,
        test_event_code=_lookup(values, TEST_EVENT_CODE_KEYS),
    )
