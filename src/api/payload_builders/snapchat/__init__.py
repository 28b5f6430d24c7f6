"""Builders de payload para o Snapchat Conversions API.

Este pacote separa responsabilidades:
- event: tradução evento genérico → SnapchatEvent
- custom_data: custom_data por tipo de evento
- values: hash de PII e coerção de valores
- request: descritor de requisição HTTP
"""

from api.payload_builders.snapchat.custom_data import (
    build_page_custom_data,
    build_track_custom_data,
)
from api.payload_builders.snapchat.event import build_snapchat_event
from api.payload_builders.snapchat.request import build_request
from api.payload_builders.snapchat.values import hash_value, parse_value

__all__ = [
    "build_page_custom_data",
    "build_request",
    "build_snapchat_event",
    "build_track_custom_data",
    "hash_value",
    "parse_value",
]
