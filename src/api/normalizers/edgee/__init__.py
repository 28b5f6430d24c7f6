"""Normalizer de eventos do host (protocolo de data collection).

Responsabilidades:
- Converter o documento JSON do evento no modelo interno Event
- Normalizar settings e mapas de propriedades em listas de pares
"""

from .extractor import normalize_event, normalize_pairs, normalize_settings

__all__ = [
    "normalize_event",
    "normalize_pairs",
    "normalize_settings",
]
