"""Configuração centralizada de logging.

Funções para configurar logging estruturado JSON com:
- Campos obrigatórios (correlation_id, service, level, logger, message)
- Formatação padronizada
- Níveis configuráveis por ambiente

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização do host (app/bootstrap/)
    configure_logging(level="INFO", service_name="snapchat_capi")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("Evento traduzido", extra={"event_type": "page"})

Logs nunca carregam PII nem credenciais (tokens, emails, telefones).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

# Níveis de log válidos
VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

# Nome padrão do serviço
DEFAULT_SERVICE_NAME = "snapchat_capi"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado para o componente.

    Deve ser chamada uma vez na inicialização (app/bootstrap/).

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função opcional que retorna o correlation_id
            do contexto atual (ex: de ContextVar).

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter(service_name))
    handler.addFilter(CorrelationIdFilter(correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado.

    O handler do root adiciona correlation_id e service a cada linha.
    """
    return logging.getLogger(name)


def log_rejection(
    logger: logging.Logger,
    component: str,
    error_code: str,
    event_type: str | None = None,
) -> None:
    """Log observável de evento rejeitado (sem PII).

    Args:
        logger: Logger instance.
        component: Nome do componente (ex: "snapchat").
        error_code: Código estável do erro (ex: "CONSENT_NOT_GRANTED").
        event_type: Tipo do evento do host (page|track|user), quando conhecido.

    Exemplo:
        log_rejection(logger, "snapchat", "MISSING_CREDENTIAL", event_type="page")
    """
    extra: dict[str, object] = {
        "rejected": True,
        "component": component,
        "error_code": error_code,
    }
    if event_type:
        extra["event_type"] = event_type

    logger.warning(
        "Event rejected by %s",
        component,
        extra=extra,
    )
