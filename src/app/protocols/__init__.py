"""Contratos do modelo de eventos do host e do descritor de requisição."""

from .models import (
    Campaign,
    Client,
    Context,
    Dict,
    Event,
    EventData,
    PageData,
    RequestDescriptor,
    Session,
    TrackData,
    UserData,
)

__all__ = [
    "Campaign",
    "Client",
    "Context",
    "Dict",
    "Event",
    "EventData",
    "PageData",
    "RequestDescriptor",
    "Session",
    "TrackData",
    "UserData",
]
