"""Validadores de tradução para o Snapchat Conversions API.

Uso:
    from api.validators.snapchat import validate_consent

    validate_consent(event.consent)
"""

from api.validators.snapchat.gates import (
    validate_consent,
    validate_event_name,
    validate_identity,
    validate_user_properties,
)

__all__ = [
    "validate_consent",
    "validate_event_name",
    "validate_identity",
    "validate_user_properties",
]
