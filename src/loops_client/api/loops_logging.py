"""Helpers de logging para chamadas à API Loops (sem PII).

Nunca logar API key, corpo da requisição ou query string (contém email).
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def redact_path(path: str) -> str:
    """Remove a query string do path (ex: contacts/find?email=...)."""
    return path.split("?", 1)[0]


def log_request_completed(method: str, path: str, status_code: int) -> None:
    """Loga requisição concluída, qualquer que seja o status HTTP."""
    logger.debug(
        "loops_request_completed",
        extra={
            "method": method,
            "path": redact_path(path),
            "status_code": status_code,
        },
    )


def log_transport_error(method: str, path: str, exc: BaseException) -> None:
    """Loga falha de transporte (DNS, conexão, timeout)."""
    logger.warning(
        "loops_transport_error",
        extra={
            "method": method,
            "path": redact_path(path),
            "error_type": type(exc).__name__,
        },
    )


def log_invalid_json(method: str, path: str, status_code: int) -> None:
    """Loga resposta cujo corpo não é JSON válido."""
    logger.warning(
        "loops_invalid_json",
        extra={
            "method": method,
            "path": redact_path(path),
            "status_code": status_code,
        },
    )
