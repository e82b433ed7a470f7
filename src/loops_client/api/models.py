"""Tipos de requisição e resposta da API Loops."""

from __future__ import annotations

from enum import StrEnum
from typing import TypedDict


class HttpMethod(StrEnum):
    """Métodos HTTP usados pela API Loops."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"


class LoopsResponse(TypedDict, total=False):
    """Formato usual das respostas da API Loops.

    Apenas documental: o cliente não valida o schema e devolve o JSON
    recebido sem alteração.

    Attributes:
        success: Se a operação foi aceita pela API
        message: Descrição do resultado (geralmente presente em erros)
    """

    success: bool
    message: str


class ContactBody(TypedDict, total=False):
    """Corpo de contacts/create e contacts/update."""

    email: str
    firstName: str
    lastName: str
    userGroup: str
    source: str


class EventBody(TypedDict):
    """Corpo de events/send."""

    email: str
    eventName: str
