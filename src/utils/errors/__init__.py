"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ConsentNotGrantedError,
    EmptyEventNameError,
    InsufficientIdentityError,
    MissingCredentialError,
    MissingPayloadError,
    MissingUserPropertiesError,
    TranslationError,
    UnimplementedError,
)

__all__ = [
    "ConsentNotGrantedError",
    "EmptyEventNameError",
    "InsufficientIdentityError",
    "MissingCredentialError",
    "MissingPayloadError",
    "MissingUserPropertiesError",
    "TranslationError",
    "UnimplementedError",
]
