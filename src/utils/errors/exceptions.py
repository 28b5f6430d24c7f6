"""Exceções de domínio para falhas de tradução de eventos.

Todas as falhas são terminais para o evento em questão: o chamador
não deve reprocessar a mesma entrada. Mensagens sem PII.
"""

from __future__ import annotations


class TranslationError(ValueError):
    """Base para falhas de tradução evento → payload Snapchat."""

    code: str = "TRANSLATION_ERROR"


class MissingCredentialError(TranslationError):
    """Chave obrigatória ausente nas settings do componente."""

    code = "MISSING_CREDENTIAL"

    def __init__(self, message: str, key: str) -> None:
        super().__init__(message)
        self.key = key


class MissingPayloadError(TranslationError):
    """Dados do evento não correspondem ao entry point chamado."""

    code = "MISSING_PAYLOAD"


class EmptyEventNameError(TranslationError):
    """Nome do evento track vazio."""

    code = "EMPTY_EVENT_NAME"


class ConsentNotGrantedError(TranslationError):
    """Consentimento explícito diferente de granted."""

    code = "CONSENT_NOT_GRANTED"


class MissingUserPropertiesError(TranslationError):
    """Nenhuma propriedade de usuário disponível."""

    code = "MISSING_USER_PROPERTIES"


class InsufficientIdentityError(TranslationError):
    """Usuário sem email e sem telefone após o mapeamento."""

    code = "INSUFFICIENT_IDENTITY"


class UnimplementedError(TranslationError):
    """Capacidade não implementada pelo componente."""

    code = "UNIMPLEMENTED"
