"""Saída JSON opcional para os logs do logger `loops_client`.

Só o logger da biblioteca é tocado: handlers e nível do logger raiz da
aplicação ficam como estão, e os records continuam propagando para ele.
"""

from __future__ import annotations

import logging
from typing import IO, TYPE_CHECKING

from loops_client.config.logging.filters import CorrelationIdFilter
from loops_client.config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

LIBRARY_LOGGER_NAME = "loops_client"

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class LoopsJsonHandler(logging.StreamHandler):
    """StreamHandler instalado por configure_logging (identificável para troca)."""


def configure_logging(
    level: str = "INFO",
    correlation_id_getter: Callable[[], str | None] | None = None,
    stream: IO[str] | None = None,
) -> LoopsJsonHandler:
    """Instala um handler JSON no logger `loops_client`.

    Chamadas repetidas substituem o handler instalado anteriormente;
    handlers adicionados pela aplicação não são removidos.

    Args:
        level: Nível do logger da biblioteca (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        correlation_id_getter: Função da aplicação que retorna o id da
            requisição atual (ex: leitura de um ContextVar). Quando informada,
            cada linha ganha o campo correlation_id.
        stream: Destino das linhas JSON. Padrão: sys.stderr.

    Returns:
        O handler instalado.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = LoopsJsonHandler(stream)
    handler.setFormatter(
        create_json_formatter(with_correlation_id=correlation_id_getter is not None)
    )
    if correlation_id_getter is not None:
        handler.addFilter(CorrelationIdFilter(correlation_id_getter))

    logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    for previous in [h for h in logger.handlers if isinstance(h, LoopsJsonHandler)]:
        logger.removeHandler(previous)
        previous.close()
    logger.addHandler(handler)
    logger.setLevel(level_upper)
    return handler
