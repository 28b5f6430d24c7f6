"""Bootstrap do componente: inicialização e wiring.

Composition root: configura logging, valida settings de processo e
expõe o componente pronto para o host.

Uso:
    from app.bootstrap import initialize_app, get_component

    # Na inicialização do host
    initialize_app()

    result = get_component().dispatch(event, settings)
"""

from __future__ import annotations

import logging
from functools import lru_cache

from app.observability import get_correlation_id
from app.use_cases.snapchat import SnapchatComponent
from config.logging import configure_logging
from config.settings import get_base_settings, get_snapchat_api_settings

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa logging estruturado JSON com correlation_id.

    Deve ser chamada uma vez no início do processo host.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def initialize_test_app() -> None:
    """Inicializa logging em nível DEBUG para testes."""
    base = get_base_settings()
    configure_logging(
        level="DEBUG",
        service_name=f"{base.service_name}_test",
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings de processo no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.

    Raises:
        RuntimeError: Se houver erros em ambiente estrito.
    """
    base = get_base_settings()
    strict_mode = base.environment in STRICT_VALIDATION_ENVS
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"snapchat: {error}" for error in get_snapchat_api_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


@lru_cache(maxsize=1)
def get_component() -> SnapchatComponent:
    """Obtém o componente (singleton sem estado mutável).

    Returns:
        SnapchatComponent configurado com o endpoint do env
    """
    return SnapchatComponent(api_settings=get_snapchat_api_settings())
