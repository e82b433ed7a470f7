"""Cliente da API Loops e montagem de requisições."""

from loops_client.api.client import LoopsClient
from loops_client.api.models import HttpMethod, LoopsResponse

__all__ = [
    "HttpMethod",
    "LoopsClient",
    "LoopsResponse",
]
