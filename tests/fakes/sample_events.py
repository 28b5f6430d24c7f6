"""Eventos e settings de exemplo para testes deterministas."""

from __future__ import annotations

from app.constants.snapchat import Consent, EventType
from app.protocols.models import (
    Campaign,
    Client,
    Context,
    Dict,
    Event,
    PageData,
    Session,
    TrackData,
    UserData,
)

SAMPLE_UUID = "4a1e6a56-3c8b-4bd0-9d53-2b5f1f6a1c11"

SAMPLE_USER_PROPERTIES: Dict = [
    ("email", "test@test.com"),
    ("phone_number", "+39 1231231231"),
    ("first_name", "John"),
    ("last_name", "Doe"),
    ("gender", "Male"),
    ("date_of_birth", "1979-12-31"),
    ("city", "Las Vegas"),
    ("state", "Nevada"),
    ("zip_code", "11111"),
    ("country", "USA"),
    ("random_property", "abc"),
]


def sample_settings(*, with_test_code: bool = False) -> Dict:
    settings: Dict = [
        ("snapchat_access_token", "token-abc"),
        ("snapchat_pixel_id", "pixel-123"),
    ]
    if with_test_code:
        settings.append(("snapchat_test_event_code", "TEST42"))
    return settings


def sample_user_data(properties: Dict | None = None, user_id: str = "123") -> UserData:
    return UserData(
        user_id=user_id,
        anonymous_id="456",
        edgee_id="abc",
        properties=list(SAMPLE_USER_PROPERTIES if properties is None else properties),
    )


def sample_page_data(**overrides: object) -> PageData:
    values: dict[str, object] = {
        "name": "page name",
        "category": "category",
        "keywords": ["value1", "value2"],
        "title": "page title",
        "url": "https://example.com/full-url",
        "path": "/full-path",
        "search": "?test=1",
        "referrer": "https://example.com/another-page",
        "properties": [
            ("prop1", "value1"),
            ("prop2", "10"),
            ("prop3", "true"),
            ("prop4", "false"),
            ("currency", "USD"),
        ],
    }
    values.update(overrides)
    return PageData(**values)  # type: ignore[arg-type]


def sample_track_data(name: str = "event-name", properties: Dict | None = None) -> TrackData:
    return TrackData(
        name=name,
        properties=list(
            [("prop1", "value1"), ("prop2", "10"), ("currency", "USD")]
            if properties is None
            else properties
        ),
    )


def sample_context(
    *,
    page: PageData | None = None,
    user: UserData | None = None,
) -> Context:
    return Context(
        page=page or sample_page_data(),
        user=user or sample_user_data(),
        client=Client(
            ip="192.168.0.1",
            locale="fr",
            timezone="CET",
            user_agent="Chrome",
            os_name="MacOS",
            screen_width=1024,
            screen_height=768,
            screen_density=2.0,
            continent="Europe",
            country_code="FR",
            country_name="France",
            region="West Europe",
            city="Paris",
        ),
        campaign=Campaign(name="random", source="random", medium="random"),
        session=Session(session_id="random", session_count=2, session_start=True),
    )


def sample_page_event(
    consent: Consent | None = Consent.GRANTED,
    *,
    page: PageData | None = None,
    user: UserData | None = None,
) -> Event:
    page_data = page or sample_page_data()
    return Event(
        uuid=SAMPLE_UUID,
        timestamp=123,
        timestamp_millis=123000,
        timestamp_micros=123000000,
        event_type=EventType.PAGE,
        data=page_data,
        context=sample_context(page=page_data, user=user),
        consent=consent,
    )


def sample_track_event(
    name: str = "event-name",
    consent: Consent | None = Consent.GRANTED,
    *,
    user: UserData | None = None,
) -> Event:
    return Event(
        uuid=SAMPLE_UUID,
        timestamp=123,
        event_type=EventType.TRACK,
        data=sample_track_data(name),
        context=sample_context(user=user),
        consent=consent,
    )


def sample_user_event(
    consent: Consent | None = Consent.GRANTED,
    *,
    properties: Dict | None = None,
) -> Event:
    return Event(
        uuid=SAMPLE_UUID,
        timestamp=123,
        event_type=EventType.USER,
        data=sample_user_data(properties),
        context=sample_context(user=UserData()),
        consent=consent,
    )
