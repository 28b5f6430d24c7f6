"""Tradução de um evento genérico em SnapchatEvent.

Fluxo:
1. Campos base (nome, tempo, id, action_source)
2. URL de origem e contexto do cliente
3. Gates de consentimento e de propriedades
4. Mapeamento de propriedades de usuário (hash de PII)
5. Gate de identidade (email ou telefone)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.payload_builders.snapchat.values import hash_value
from api.validators.snapchat import (
    validate_consent,
    validate_identity,
    validate_user_properties,
)
from app.constants.snapchat import USER_PROPERTY_FIELDS
from app.domain.snapchat_event import SnapchatEvent, SnapchatUserData
from app.protocols.models import UserData

if TYPE_CHECKING:
    from app.protocols.models import Dict, Event

logger = logging.getLogger(__name__)


def _event_source_url(event: Event) -> str | None:
    page = event.context.page
    if not page.url:
        return None
    return f"{page.url}{page.search}"


def _effective_user_properties(event: Event) -> Dict:
    """Propriedades do payload user têm precedência sobre as do contexto."""
    if isinstance(event.data, UserData):
        return event.data.properties
    return event.context.user.properties


def map_user_properties(properties: Dict) -> dict[str, str]:
    """Mapeia propriedades de usuário para campos de SnapchatUserData.

    Chaves desconhecidas são descartadas (nunca causam falha).

    Args:
        properties: Pares (chave, valor) do usuário

    Returns:
        Dict campo → valor (com hash quando PII)
    """
    fields: dict[str, str] = {}
    for key, value in properties:
        target = USER_PROPERTY_FIELDS.get(key)
        if target is None:
            logger.debug("user_property_ignored", extra={"property_key": key})
            continue
        field_name, hashed = target
        fields[field_name] = hash_value(value) if hashed else value
    return fields


def build_user_data(event: Event, properties: Dict) -> SnapchatUserData:
    """Constrói SnapchatUserData a partir do contexto e das propriedades."""
    client = event.context.client
    fields: dict[str, str] = {
        "client_ip_address": client.ip,
        "client_user_agent": client.user_agent,
    }

    user_id = event.context.user.user_id
    if user_id:
        fields["external_id"] = hash_value(user_id)

    fields.update(map_user_properties(properties))
    return SnapchatUserData(**fields)


def build_snapchat_event(event: Event, event_name: str) -> SnapchatEvent:
    """Constrói o SnapchatEvent para o evento do host.

    custom_data começa vazio; cabe ao chamador preenchê-lo conforme o
    tipo de evento (page/track).

    Args:
        event: Evento genérico do host
        event_name: Nome do evento no CAPI (ex: PAGE_VIEW)

    Returns:
        SnapchatEvent pronto para compor o payload

    Raises:
        ConsentNotGrantedError: Consentimento explícito não concedido
        MissingUserPropertiesError: Sem propriedades de usuário
        InsufficientIdentityError: Sem email e sem telefone
    """
    properties = _effective_user_properties(event)

    validate_consent(event.consent)
    validate_user_properties(properties)

    user_data = build_user_data(event, properties)
    validate_identity(user_data)

    return SnapchatEvent(
        event_name=event_name,
        event_time=event.timestamp,
        event_id=event.uuid,
        event_source_url=_event_source_url(event),
        user_data=user_data,
        custom_data={},
    )
