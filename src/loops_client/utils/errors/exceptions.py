"""Exceções do cliente Loops.

Erros de aplicação reportados pela API (email inválido, contato inexistente)
não viram exceção: chegam como JSON comum no retorno das operações.
"""

from __future__ import annotations


class LoopsError(Exception):
    """Base para erros do cliente Loops."""


class LoopsConfigurationError(LoopsError, ValueError):
    """API key ausente/vazia ou settings inválidas; levantado antes de qualquer IO."""


class LoopsTransportError(LoopsError):
    """Falha ao enviar a requisição ou ao decodificar a resposta como JSON.

    Nunca carrega a API key, o corpo da requisição ou a query string (`path` é redigido).
    """

    def __init__(
        self,
        message: str,
        *,
        method: str,
        path: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.method = method
        self.path = path
        self.status_code = status_code
