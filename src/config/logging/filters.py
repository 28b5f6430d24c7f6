"""Filter que associa cada record ao evento em tradução."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class CorrelationIdFilter(logging.Filter):
    """Preenche `correlation_id` com o uuid do evento corrente.

    Fora de uma tradução o getter devolve "" e o campo sai vazio.
    Um `correlation_id` já presente no record (via `extra`) vence.
    """

    def __init__(self, correlation_id_getter: Callable[[], str] | None = None) -> None:
        super().__init__()
        self._getter = correlation_id_getter

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "correlation_id", ""):
            record.correlation_id = self._getter() if self._getter else ""
        return True
