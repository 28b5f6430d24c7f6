"""Builders de custom_data por tipo de evento."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.snapchat.values import parse_properties, parse_value
from app.constants.snapchat import PAGE_CUSTOM_DATA_KEYS

if TYPE_CHECKING:
    from app.protocols.models import PageData, TrackData


def build_page_custom_data(page: PageData) -> dict[str, Any]:
    """Constrói custom_data de page view.

    Atributos conhecidos (page_name, page_category, page_title) entram
    primeiro quando não vazios; propriedades customizadas são aplicadas
    por cima e podem sobrescrevê-los.
    """
    custom_data: dict[str, Any] = {}
    for attribute, key in PAGE_CUSTOM_DATA_KEYS:
        value: str = getattr(page, attribute)
        if value:
            custom_data[key] = parse_value(value)

    custom_data.update(parse_properties(page.properties))
    return custom_data


def build_track_custom_data(track: TrackData) -> dict[str, Any]:
    """Constrói custom_data de track apenas com as propriedades do evento."""
    return parse_properties(track.properties)
