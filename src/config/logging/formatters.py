"""Formatter JSON dos logs do componente.

Cada linha carrega os campos do record (asctime, level, logger,
message, correlation_id) e o nome do serviço como campo estático.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos lidos do LogRecord
RECORD_FIELDS = ("asctime", "levelname", "name", "message", "correlation_id")

# Campos presentes em toda linha emitida (record + estáticos)
REQUIRED_LOG_FIELDS = frozenset({*RECORD_FIELDS, "service"})

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter(service_name: str) -> JsonFormatter:
    """Cria o formatter JSON com `service` fixo.

    Exemplo de linha:
        {"asctime": "...", "level": "WARNING",
         "logger": "app.use_cases.snapchat.translate_event",
         "message": "Event rejected by snapchat",
         "correlation_id": "<uuid do evento>", "service": "snapchat_capi",
         "error_code": "CONSENT_NOT_GRANTED"}
    """
    return JsonFormatter(
        " ".join(f"%({field})s" for field in RECORD_FIELDS),
        rename_fields=FIELD_RENAME_MAP,
        static_fields={"service": service_name},
    )
