"""Montagem do descritor de requisição HTTP para o CAPI."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from app.constants.snapchat import HttpMethod
from app.protocols.models import RequestDescriptor
from config.settings.snapchat import get_snapchat_api_settings

if TYPE_CHECKING:
    from app.domain.snapchat_event import SnapchatPayload
    from config.settings.snapchat import SnapchatApiSettings

# Headers calculados por esta camada (lista exaustiva)
REQUEST_HEADERS: tuple[tuple[str, str], ...] = (("content-type", "application/json"),)


def build_events_url(payload: SnapchatPayload, api_settings: SnapchatApiSettings) -> str:
    """Monta a URL de eventos com credenciais na query string.

    Valores são inseridos sem encoding adicional.
    """
    endpoint = api_settings.get_events_endpoint(payload.pixel_id)
    url = f"{endpoint}?access_token={payload.access_token}"
    if payload.test_event_code is not None:
        url = f"{url}&test_event_code={payload.test_event_code}"
    return url


def serialize_payload(payload: SnapchatPayload) -> str:
    """Serializa o corpo `{"data": [...]}` (credenciais excluídas)."""
    return json.dumps(payload.to_wire_dict(), separators=(",", ":"), ensure_ascii=False)


def build_request(
    payload: SnapchatPayload,
    api_settings: SnapchatApiSettings | None = None,
) -> RequestDescriptor:
    """Constrói o descritor de requisição POST para o CAPI.

    Função pura: nenhuma chamada de rede é feita aqui.

    Args:
        payload: Payload completo com eventos e credenciais
        api_settings: Endpoint do CAPI. Usa settings de env se None.

    Returns:
        RequestDescriptor pronto para o transporte do host
    """
    settings = api_settings or get_snapchat_api_settings()
    return RequestDescriptor(
        method=HttpMethod.POST,
        url=build_events_url(payload, settings),
        headers=list(REQUEST_HEADERS),
        body=serialize_payload(payload),
        forward_client_headers=settings.forward_client_headers,
    )
