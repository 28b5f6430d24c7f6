"""Constantes de domínio para o Conversions API do Snapchat."""

from __future__ import annotations

from enum import StrEnum
from typing import Final


class EventType(StrEnum):
    """Tipos de evento emitidos pelo pipeline de coleta."""

    PAGE = "page"
    TRACK = "track"
    USER = "user"


class Consent(StrEnum):
    """Estados de consentimento informados pelo host."""

    PENDING = "pending"
    GRANTED = "granted"
    DENIED = "denied"


class HttpMethod(StrEnum):
    """Métodos HTTP do descritor de requisição."""

    GET = "GET"
    PUT = "PUT"
    POST = "POST"
    DELETE = "DELETE"


# Nome do evento enviado para page views
PAGE_VIEW_EVENT_NAME: Final = "PAGE_VIEW"

# Única origem suportada (eventos web)
ACTION_SOURCE_WEB: Final = "WEB"

# Chaves de settings: (nome canônico, alias genérico)
ACCESS_TOKEN_KEYS: Final = ("snapchat_access_token", "access-token")
PIXEL_ID_KEYS: Final = ("snapchat_pixel_id", "destination-id")
TEST_EVENT_CODE_KEYS: Final = ("snapchat_test_event_code", "test-event-code")

# Propriedade de usuário → (campo em SnapchatUserData, aplicar hash?)
USER_PROPERTY_FIELDS: Final[dict[str, tuple[str, bool]]] = {
    "email": ("email", True),
    "phone_number": ("phone_number", True),
    "first_name": ("first_name", True),
    "last_name": ("last_name", True),
    "gender": ("gender", True),
    "date_of_birth": ("date_of_birth", True),
    "city": ("city", True),
    "state": ("state", True),
    "zip_code": ("zip_code", True),
    "country": ("country", True),
    "sc_click_id": ("sc_click_id", False),
    "sc_cookie1": ("sc_cookie1", False),
}

# Atributos de página injetados em custom_data (atributo → chave)
PAGE_CUSTOM_DATA_KEYS: Final = (
    ("name", "page_name"),
    ("category", "page_category"),
    ("title", "page_title"),
)
