"""Filter que anexa o correlation_id da aplicação aos logs da biblioteca."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class CorrelationIdFilter(logging.Filter):
    """Preenche `record.correlation_id` com o valor do getter da aplicação.

    Um correlation_id passado explicitamente via `extra` é preservado.
    """

    def __init__(self, correlation_id_getter: Callable[[], str | None]) -> None:
        super().__init__()
        self._get_correlation_id = correlation_id_getter

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "correlation_id", None):
            record.correlation_id = self._get_correlation_id() or ""
        return True
