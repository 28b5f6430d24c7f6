"""Testes do normalizer de eventos do host."""

from __future__ import annotations

import pytest

from api.normalizers import normalize_event, normalize_pairs, normalize_settings
from app.constants.snapchat import Consent, EventType
from app.protocols.models import PageData, TrackData, UserData
from utils.errors import MissingPayloadError


def _page_document(**overrides: object) -> dict:
    document: dict = {
        "uuid": "evt-1",
        "timestamp": 123,
        "timestamp_millis": 123000,
        "type": "page",
        "data": {
            "name": "Home",
            "title": "Welcome",
            "url": "https://example.com/",
            "search": "?a=1",
            "keywords": ["k1", "k2"],
            "properties": {"currency": "USD", "value": 10, "vip": True},
        },
        "context": {
            "page": {"url": "https://example.com/", "search": "?a=1"},
            "user": {
                "user_id": "123",
                "properties": {"email": "test@test.com"},
            },
            "client": {
                "ip": "192.168.0.1",
                "user_agent": "Chrome",
                "screen_width": 1024,
                "screen_density": 2,
            },
            "session": {"session_id": "s1", "session_count": 3, "session_start": True},
        },
        "consent": "granted",
    }
    document.update(overrides)
    return document


class TestNormalizePairs:
    """Testes para normalize_pairs e normalize_settings."""

    def test_object_becomes_ordered_pairs(self) -> None:
        """Objeto JSON vira lista de pares na ordem de inserção."""
        assert normalize_pairs({"a": "1", "b": 2}) == [("a", "1"), ("b", "2")]

    def test_list_of_pairs_keeps_duplicates(self) -> None:
        """Lista de pares preserva chaves duplicadas."""
        raw = [["k", "1"], ["k", "2"]]
        assert normalize_pairs(raw) == [("k", "1"), ("k", "2")]

    @pytest.mark.parametrize("raw", [None, {}, []])
    def test_empty_inputs(self, raw: object) -> None:
        """Entradas vazias viram lista vazia."""
        assert normalize_pairs(raw) == []

    def test_scalar_values_become_strings(self) -> None:
        """Booleanos em minúsculas e None vira string vazia."""
        assert normalize_pairs({"t": True, "f": False, "n": None, "x": 1.5}) == [
            ("t", "true"),
            ("f", "false"),
            ("n", ""),
            ("x", "1.5"),
        ]

    def test_normalize_settings(self) -> None:
        """Settings aceitam o mesmo formato."""
        raw = {"snapchat_access_token": "abc", "snapchat_pixel_id": "px"}
        assert normalize_settings(raw) == [
            ("snapchat_access_token", "abc"),
            ("snapchat_pixel_id", "px"),
        ]


class TestNormalizeEvent:
    """Testes para normalize_event."""

    def test_page_event(self) -> None:
        """Documento page vira Event com PageData e contexto completo."""
        event = normalize_event(_page_document())
        assert event.uuid == "evt-1"
        assert event.timestamp == 123
        assert event.timestamp_millis == 123000
        assert event.event_type == EventType.PAGE
        assert event.consent == Consent.GRANTED
        assert isinstance(event.data, PageData)
        assert event.data.name == "Home"
        assert event.data.keywords == ["k1", "k2"]
        assert event.data.properties == [
            ("currency", "USD"),
            ("value", "10"),
            ("vip", "true"),
        ]
        assert event.context.user.user_id == "123"
        assert event.context.user.properties == [("email", "test@test.com")]
        assert event.context.client.ip == "192.168.0.1"
        assert event.context.client.screen_width == 1024
        assert event.context.client.screen_density == 2.0
        assert event.context.session.session_count == 3
        assert event.context.session.session_start is True

    def test_track_event(self) -> None:
        """Documento track vira TrackData."""
        event = normalize_event(
            {
                "uuid": "evt-2",
                "timestamp": 1,
                "type": "track",
                "data": {
                    "name": "Purchase",
                    "properties": {"value": "9.99"},
                    "products": [{"sku": "A1", "quantity": 2}],
                },
            }
        )
        assert event.event_type == EventType.TRACK
        assert isinstance(event.data, TrackData)
        assert event.data.name == "Purchase"
        assert event.data.products == [[("sku", "A1"), ("quantity", "2")]]

    def test_user_event(self) -> None:
        """Documento user vira UserData."""
        event = normalize_event(
            {"uuid": "evt-3", "event_type": "user", "data": {"user_id": "u1"}}
        )
        assert event.event_type == EventType.USER
        assert isinstance(event.data, UserData)
        assert event.data.user_id == "u1"

    def test_missing_context_uses_empty_blocks(self) -> None:
        """Contexto ausente gera blocos vazios."""
        event = normalize_event({"uuid": "evt-4", "type": "track", "data": {"name": "x"}})
        assert event.context.user.properties == []
        assert event.context.page.url == ""
        assert event.context.client.ip == ""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("granted", Consent.GRANTED),
            ("DENIED", Consent.DENIED),
            ("pending", Consent.PENDING),
            (None, None),
            ("", None),
        ],
    )
    def test_consent_parsing(self, raw: object, expected: Consent | None) -> None:
        """Consentimento é case insensitive; ausente vira None."""
        event = normalize_event(_page_document(consent=raw))
        assert event.consent == expected

    def test_unknown_consent_raises(self) -> None:
        """Valor de consentimento desconhecido levanta ValueError."""
        with pytest.raises(ValueError):
            normalize_event(_page_document(consent="maybe"))

    @pytest.mark.parametrize("raw_type", ["screen", "", None])
    def test_unknown_type_raises_missing_payload(self, raw_type: object) -> None:
        """Tipo ausente ou desconhecido levanta MissingPayloadError."""
        with pytest.raises(MissingPayloadError, match="Unsupported event type"):
            normalize_event(_page_document(type=raw_type))
