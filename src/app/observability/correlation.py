"""correlation_id das traduções.

Durante uma tradução o correlation_id é o uuid do evento do host, de
modo que cada linha de log aponta para o evento que a originou. Fora
de uma tradução o valor é "".

Uso:
    from app.observability import correlation_scope

    with correlation_scope(event.uuid):
        ...
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o uuid do evento em tradução ou ""."""
    return _correlation_id.get()


@contextmanager
def correlation_scope(event_uuid: str) -> Iterator[str]:
    """Associa os logs do bloco ao evento informado.

    O valor anterior é restaurado na saída, inclusive em caso de exceção.
    """
    token = _correlation_id.set(event_uuid)
    try:
        yield event_uuid
    finally:
        _correlation_id.reset(token)
