"""Saída JSON opcional para os logs da biblioteca.

A biblioteca emite logs via `logging.getLogger(__name__)` sob o logger
`loops_client`, com os campos `method`, `path`, `status_code` e
`error_type` em `extra`. Nunca são logados API key, emails ou nomes.

Uso:
    from loops_client.config.logging import configure_logging

    configure_logging(level="DEBUG", correlation_id_getter=request_id_var.get)
"""

from loops_client.config.logging.config import (
    LIBRARY_LOGGER_NAME,
    LoopsJsonHandler,
    configure_logging,
)
from loops_client.config.logging.filters import CorrelationIdFilter
from loops_client.config.logging.formatters import (
    DISPATCH_LOG_FIELDS,
    FIELD_RENAME_MAP,
    create_json_formatter,
)

__all__ = [
    "DISPATCH_LOG_FIELDS",
    "FIELD_RENAME_MAP",
    "LIBRARY_LOGGER_NAME",
    "CorrelationIdFilter",
    "LoopsJsonHandler",
    "configure_logging",
    "create_json_formatter",
]
