"""Normalizers: conversão de payloads externos para modelos internos.

Estrutura:
- edgee/: eventos do protocolo de data collection do host
"""

from .edgee import normalize_event, normalize_pairs, normalize_settings

__all__ = [
    "normalize_event",
    "normalize_pairs",
    "normalize_settings",
]
