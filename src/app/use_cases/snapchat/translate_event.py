"""Use cases de tradução de eventos do host para o Snapchat CAPI.

Entry points (um por tipo de evento):
- translate_page: page view → PAGE_VIEW
- translate_track: evento customizado → nome do track
- translate_user: não implementado (sempre falha)

Cada chamada resolve credenciais, traduz o evento e monta o descritor
de requisição do zero; nenhum estado é compartilhado entre chamadas.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from api.payload_builders.snapchat import (
    build_page_custom_data,
    build_request,
    build_snapchat_event,
    build_track_custom_data,
)
from api.validators.snapchat import validate_event_name
from app.constants.snapchat import PAGE_VIEW_EVENT_NAME, EventType
from app.domain.snapchat_event import SnapchatPayload
from app.observability import correlation_scope
from app.protocols.models import PageData, TrackData
from config.logging import log_rejection
from config.settings.snapchat import resolve_credentials
from utils.errors import MissingPayloadError, TranslationError, UnimplementedError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from app.domain.snapchat_event import SnapchatEvent
    from app.protocols.models import Event, RequestDescriptor
    from config.settings.snapchat import SnapchatApiSettings, SnapchatCredentials

logger = logging.getLogger(__name__)


def _single_event_request(
    snapchat_event: SnapchatEvent,
    credentials: SnapchatCredentials,
    api_settings: SnapchatApiSettings | None,
) -> RequestDescriptor:
    payload = SnapchatPayload(
        access_token=credentials.access_token,
        pixel_id=credentials.pixel_id,
        test_event_code=credentials.test_event_code,
    )
    payload.data.append(snapchat_event)
    return build_request(payload, api_settings)


def translate_page(
    event: Event,
    settings: Iterable[tuple[str, str]],
    api_settings: SnapchatApiSettings | None = None,
) -> RequestDescriptor:
    """Traduz um evento page em requisição PAGE_VIEW.

    Raises:
        MissingPayloadError: Evento sem dados de página
        MissingCredentialError: Settings sem access token ou pixel id
        ConsentNotGrantedError, MissingUserPropertiesError,
        InsufficientIdentityError: Gates de tradução
    """
    if not isinstance(event.data, PageData):
        raise MissingPayloadError("Missing page data")

    credentials = resolve_credentials(settings)
    snapchat_event = build_snapchat_event(event, PAGE_VIEW_EVENT_NAME)
    snapchat_event.custom_data = build_page_custom_data(event.data)
    return _single_event_request(snapchat_event, credentials, api_settings)


def translate_track(
    event: Event,
    settings: Iterable[tuple[str, str]],
    api_settings: SnapchatApiSettings | None = None,
) -> RequestDescriptor:
    """Traduz um evento track usando o nome do track como event_name.

    Raises:
        MissingPayloadError: Evento sem dados de track
        EmptyEventNameError: Nome do track vazio
        MissingCredentialError: Settings sem access token ou pixel id
        ConsentNotGrantedError, MissingUserPropertiesError,
        InsufficientIdentityError: Gates de tradução
    """
    if not isinstance(event.data, TrackData):
        raise MissingPayloadError("Missing track data")
    validate_event_name(event.data.name)

    credentials = resolve_credentials(settings)
    snapchat_event = build_snapchat_event(event, event.data.name)
    snapchat_event.custom_data = build_track_custom_data(event.data)
    return _single_event_request(snapchat_event, credentials, api_settings)


def translate_user(
    event: Event,
    settings: Iterable[tuple[str, str]],
    api_settings: SnapchatApiSettings | None = None,
) -> RequestDescriptor:
    """Eventos user não são suportados pelo CAPI neste componente.

    Raises:
        UnimplementedError: Sempre
    """
    raise UnimplementedError("User event not implemented for this component")


@dataclass(frozen=True)
class TranslationResult:
    """Resultado de uma tradução para consumo do host."""

    success: bool
    request: RequestDescriptor | None = None
    error_code: str | None = None
    error_message: str | None = None


class SnapchatComponent:
    """Componente de data collection exposto ao host.

    `page`, `track` e `user` levantam TranslationError; `dispatch` roteia
    pelo tipo do evento e devolve um TranslationResult.
    """

    def __init__(self, api_settings: SnapchatApiSettings | None = None) -> None:
        self._api_settings = api_settings
        self._handlers: dict[EventType, Callable[..., RequestDescriptor]] = {
            EventType.PAGE: translate_page,
            EventType.TRACK: translate_track,
            EventType.USER: translate_user,
        }

    def page(self, event: Event, settings: Iterable[tuple[str, str]]) -> RequestDescriptor:
        return translate_page(event, settings, self._api_settings)

    def track(self, event: Event, settings: Iterable[tuple[str, str]]) -> RequestDescriptor:
        return translate_track(event, settings, self._api_settings)

    def user(self, event: Event, settings: Iterable[tuple[str, str]]) -> RequestDescriptor:
        return translate_user(event, settings, self._api_settings)

    def dispatch(
        self,
        event: Event,
        settings: Iterable[tuple[str, str]],
    ) -> TranslationResult:
        """Traduz o evento conforme seu tipo, sem propagar exceções de domínio."""
        with correlation_scope(event.uuid):
            return self._dispatch(event, settings)

    def _dispatch(
        self,
        event: Event,
        settings: Iterable[tuple[str, str]],
    ) -> TranslationResult:
        event_type = EventType(event.event_type)
        try:
            request = self._handlers[event_type](event, settings, self._api_settings)
        except TranslationError as exc:
            log_rejection(logger, "snapchat", exc.code, event_type=str(event_type))
            return TranslationResult(
                success=False,
                error_code=exc.code,
                error_message=str(exc),
            )

        logger.info(
            "snapchat_translation_succeeded",
            extra={"event_type": str(event_type)},
        )
        return TranslationResult(success=True, request=request)
