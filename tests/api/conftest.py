"""Fixtures de transporte HTTP fake para o LoopsClient."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from loops_client import LoopsClient
from tests.fakes.http_transport import RecordingTransport


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def make_client() -> Callable[..., LoopsClient]:
    """Cria LoopsClient com httpx.AsyncClient sobre MockTransport."""

    def _make(
        recording: RecordingTransport,
        api_key: str = "abc123",
    ) -> LoopsClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(recording))
        return LoopsClient(api_key, http_client=http_client)

    return _make
