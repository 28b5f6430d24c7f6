"""Agregador de settings do componente Snapchat CAPI.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Provider-specific settings
from config.settings.snapchat import (
    SNAPCHAT_API_BASE_URL,
    SNAPCHAT_API_VERSION,
    SnapchatApiSettings,
    SnapchatCredentials,
    get_snapchat_api_settings,
    resolve_credentials,
)

__all__ = [
    # Constants
    "SNAPCHAT_API_BASE_URL",
    "SNAPCHAT_API_VERSION",
    # Base
    "BaseSettings",
    "Environment",
    # Provider
    "SnapchatApiSettings",
    "SnapchatCredentials",
    "get_base_settings",
    "get_snapchat_api_settings",
    "resolve_credentials",
]
