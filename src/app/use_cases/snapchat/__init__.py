"""Use cases do Snapchat Conversions API."""

from app.use_cases.snapchat.translate_event import (
    SnapchatComponent,
    TranslationResult,
    translate_page,
    translate_track,
    translate_user,
)

__all__ = [
    "SnapchatComponent",
    "TranslationResult",
    "translate_page",
    "translate_track",
    "translate_user",
]
