"""Gates de validação aplicados durante a tradução de eventos.

Cada gate levanta uma TranslationError específica e aborta a tradução;
nenhum payload parcial é produzido.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.constants.snapchat import Consent
from utils.errors import (
    ConsentNotGrantedError,
    EmptyEventNameError,
    InsufficientIdentityError,
    MissingUserPropertiesError,
)

if TYPE_CHECKING:
    from app.domain.snapchat_event import SnapchatUserData
    from app.protocols.models import Dict


def validate_consent(consent: Consent | None) -> None:
    """Consentimento ausente equivale a permissão implícita.

    Raises:
        ConsentNotGrantedError: Se consentimento explícito != granted
    """
    if consent is not None and consent != Consent.GRANTED:
        raise ConsentNotGrantedError("Consent is not granted")


def validate_user_properties(properties: Dict) -> None:
    """Exige ao menos uma propriedade de usuário.

    Raises:
        MissingUserPropertiesError: Se a lista estiver vazia
    """
    if not properties:
        raise MissingUserPropertiesError("User properties are empty")


def validate_identity(user_data: SnapchatUserData) -> None:
    """PII diferente de email/telefone não basta para o matching.

    Raises:
        InsufficientIdentityError: Se email e telefone ausentes
    """
    if not user_data.has_identity():
        raise InsufficientIdentityError(
            "User properties must contain email or phone_number"
        )


def validate_event_name(name: str) -> None:
    """Valida nome de evento track.

    Raises:
        EmptyEventNameError: Se o nome estiver vazio
    """
    if not name:
        raise EmptyEventNameError("Track name is not set")
