"""Normalizer de eventos do protocolo de data collection do host.

Converte o documento JSON do evento (dict) no modelo interno Event.
Não faz validação de negócio - apenas extração estrutural.
"""

from __future__ import annotations

import logging
from typing import Any

from app.constants.snapchat import Consent, EventType
from app.protocols.models import (
    Campaign,
    Client,
    Context,
    Dict,
    Event,
    EventData,
    PageData,
    Session,
    TrackData,
    UserData,
)
from utils.errors import MissingPayloadError

logger = logging.getLogger(__name__)


def _as_str(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _block(source: dict[str, Any], key: str) -> dict[str, Any]:
    value = source.get(key) or {}
    return value if isinstance(value, dict) else {}


def normalize_pairs(raw: Any) -> Dict:
    """Aceita objeto JSON ou lista de pares e retorna lista (chave, valor)."""
    if not raw:
        return []
    if isinstance(raw, dict):
        items = raw.items()
    else:
        items = (tuple(pair) for pair in raw)
    return [(_as_str(key), _as_str(value)) for key, value in items]


def normalize_settings(raw: Any) -> Dict:
    """Normaliza settings do componente (objeto ou lista de pares)."""
    return normalize_pairs(raw)


def _extract_page(block: dict[str, Any]) -> PageData:
    return PageData(
        name=_as_str(block.get("name")),
        category=_as_str(block.get("category")),
        keywords=[_as_str(k) for k in block.get("keywords") or []],
        title=_as_str(block.get("title")),
        url=_as_str(block.get("url")),
        path=_as_str(block.get("path")),
        search=_as_str(block.get("search")),
        referrer=_as_str(block.get("referrer")),
        properties=normalize_pairs(block.get("properties")),
    )


def _extract_track(block: dict[str, Any]) -> TrackData:
    return TrackData(
        name=_as_str(block.get("name")),
        products=[normalize_pairs(p) for p in block.get("products") or []],
        properties=normalize_pairs(block.get("properties")),
    )


def _extract_user(block: dict[str, Any]) -> UserData:
    return UserData(
        user_id=_as_str(block.get("user_id")),
        anonymous_id=_as_str(block.get("anonymous_id")),
        edgee_id=_as_str(block.get("edgee_id")),
        properties=normalize_pairs(block.get("properties")),
    )


def _extract_client(block: dict[str, Any]) -> Client:
    return Client(
        ip=_as_str(block.get("ip")),
        locale=_as_str(block.get("locale")),
        timezone=_as_str(block.get("timezone")),
        user_agent=_as_str(block.get("user_agent")),
        os_name=_as_str(block.get("os_name")),
        os_version=_as_str(block.get("os_version")),
        screen_width=int(block.get("screen_width") or 0),
        screen_height=int(block.get("screen_height") or 0),
        screen_density=float(block.get("screen_density") or 0.0),
        continent=_as_str(block.get("continent")),
        country_code=_as_str(block.get("country_code")),
        country_name=_as_str(block.get("country_name")),
        region=_as_str(block.get("region")),
        city=_as_str(block.get("city")),
    )


def _extract_campaign(block: dict[str, Any]) -> Campaign:
    return Campaign(
        name=_as_str(block.get("name")),
        source=_as_str(block.get("source")),
        medium=_as_str(block.get("medium")),
        term=_as_str(block.get("term")),
        content=_as_str(block.get("content")),
        creative_format=_as_str(block.get("creative_format")),
        marketing_tactic=_as_str(block.get("marketing_tactic")),
    )


def _extract_session(block: dict[str, Any]) -> Session:
    return Session(
        session_id=_as_str(block.get("session_id")),
        previous_session_id=_as_str(block.get("previous_session_id")),
        session_count=int(block.get("session_count") or 0),
        session_start=bool(block.get("session_start")),
        first_seen=int(block.get("first_seen") or 0),
        last_seen=int(block.get("last_seen") or 0),
    )


def _extract_data(event_type: EventType, block: dict[str, Any]) -> EventData:
    if event_type == EventType.PAGE:
        return _extract_page(block)
    if event_type == EventType.TRACK:
        return _extract_track(block)
    return _extract_user(block)


def _parse_consent(raw: Any) -> Consent | None:
    if raw is None or raw == "":
        return None
    return Consent(_as_str(raw).lower())


def normalize_event(payload: dict[str, Any]) -> Event:
    """Converte o documento do host em Event.

    Args:
        payload: Evento no formato JSON do host

    Returns:
        Event normalizado

    Raises:
        MissingPayloadError: Se `type` ausente ou desconhecido
        ValueError: Se `consent` tiver valor desconhecido
    """
    raw_type = _as_str(payload.get("type") or payload.get("event_type")).lower()
    try:
        event_type = EventType(raw_type)
    except ValueError as exc:
        raise MissingPayloadError(f"Unsupported event type: {raw_type!r}") from exc

    context_block = _block(payload, "context")
    context = Context(
        page=_extract_page(_block(context_block, "page")),
        user=_extract_user(_block(context_block, "user")),
        client=_extract_client(_block(context_block, "client")),
        campaign=_extract_campaign(_block(context_block, "campaign")),
        session=_extract_session(_block(context_block, "session")),
    )

    event = Event(
        uuid=_as_str(payload.get("uuid")),
        timestamp=int(payload.get("timestamp") or 0),
        timestamp_millis=int(payload.get("timestamp_millis") or 0),
        timestamp_micros=int(payload.get("timestamp_micros") or 0),
        event_type=event_type,
        data=_extract_data(event_type, _block(payload, "data")),
        context=context,
        consent=_parse_consent(payload.get("consent")),
    )
    logger.debug(
        "host_event_normalized",
        extra={"event_id": event.uuid, "event_type": str(event_type)},
    )
    return event
