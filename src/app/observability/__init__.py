"""Observabilidade: correlation_id para logs estruturados.

Uso:
    from app.observability import correlation_scope, get_correlation_id
"""

from app.observability.correlation import correlation_scope, get_correlation_id

__all__ = [
    "correlation_scope",
    "get_correlation_id",
]
