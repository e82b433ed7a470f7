"""Cliente Python assíncrono para a API Loops (app.loops.so).

Uso:
    from loops_client import LoopsClient

    async with LoopsClient("api-key") as client:
        await client.test_api_key()
        await client.create_contact("john@example.com", "John", "Doe")
        await client.send_event("john@example.com", "signup")
"""

from loops_client.api import HttpMethod, LoopsClient, LoopsResponse
from loops_client.config.settings import LoopsSettings, get_loops_settings
from loops_client.utils.errors import (
    LoopsConfigurationError,
    LoopsError,
    LoopsTransportError,
)
from loops_client.version import __version__

__all__ = [
    "HttpMethod",
    "LoopsClient",
    "LoopsConfigurationError",
    "LoopsError",
    "LoopsResponse",
    "LoopsSettings",
    "LoopsTransportError",
    "__version__",
    "get_loops_settings",
]
