"""Formatter JSON para os logs do dispatcher (python-json-logger)."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

BASE_LOG_FIELDS = ("asctime", "levelname", "name", "message")

# Campos `extra` emitidos por loops_client.api.loops_logging
DISPATCH_LOG_FIELDS = ("method", "path", "status_code", "error_type")

CORRELATION_ID_FIELD = "correlation_id"

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter(*, with_correlation_id: bool = False) -> JsonFormatter:
    """Cria formatter JSON com os campos do dispatcher sempre presentes.

    Campos do dispatcher ausentes no record saem como null, então toda
    linha tem o mesmo conjunto de chaves.

    Exemplo de output:
        {"asctime": "...", "level": "DEBUG", "logger": "loops_client.api.loops_logging",
         "message": "loops_request_completed", "method": "POST",
         "path": "events/send", "status_code": 200, "error_type": null}
    """
    fields = BASE_LOG_FIELDS + DISPATCH_LOG_FIELDS
    if with_correlation_id:
        fields += (CORRELATION_ID_FIELD,)

    return JsonFormatter(
        " ".join(f"%({field})s" for field in fields),
        rename_fields=FIELD_RENAME_MAP,
    )
