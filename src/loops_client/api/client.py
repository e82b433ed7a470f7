"""Cliente assíncrono da API Loops (app.loops.so).

Todas as operações passam por um único dispatcher (`_request`):
monta URL e headers, serializa o corpo em JSON, faz uma requisição
e devolve o JSON da resposta sem alteração.

O status HTTP não é interpretado: erros da API (401, 404, 429...) chegam
como JSON comum e o chamador deve inspecionar `success`/`message`.
Falhas de transporte e corpos não-JSON levantam LoopsTransportError.
Não há retry.

Uso:
    async with LoopsClient("api-key") as client:
        result = await client.send_event("john@example.com", "signup")
        if not result.get("success"):
            ...
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx

from loops_client.api.loops_logging import (
    log_invalid_json,
    log_request_completed,
    log_transport_error,
    redact_path,
)
from loops_client.api.models import HttpMethod
from loops_client.api.payloads import (
    API_KEY_PATH,
    CONTACTS_CREATE_PATH,
    CONTACTS_UPDATE_PATH,
    EVENTS_SEND_PATH,
    build_contact_body,
    build_event_body,
    build_find_contact_path,
)
from loops_client.config.settings import LOOPS_SETTINGS_URL, get_loops_settings
from loops_client.utils.errors import LoopsConfigurationError, LoopsTransportError

if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import TracebackType

    from loops_client.api.models import LoopsResponse
    from loops_client.config.settings import LoopsSettings


def _mask_api_key(api_key: str) -> str:
    if len(api_key) <= 8:
        return "***"
    return f"{api_key[:4]}***"


class LoopsClient:
    """Cliente da API Loops.

    A API key é fixada na construção e não muda durante a vida do cliente,
    então chamadas concorrentes (asyncio.gather) não precisam de lock.

    Args:
        api_key: API key da Loops (obrigatória, não vazia)
        settings: LoopsSettings opcional. Se None, usa os valores padrão.
        http_client: httpx.AsyncClient opcional. Quando informado, é usado
            como está e nunca fechado por este cliente.

    Raises:
        LoopsConfigurationError: API key ausente/vazia ou settings inválidas.
    """

    __slots__ = ("_api_key", "_http_client", "_owns_http_client", "_settings")

    def __init__(
        self,
        api_key: str | None,
        settings: LoopsSettings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        if not isinstance(api_key, str) or not api_key.strip():
            raise LoopsConfigurationError(
                f"Nenhuma API key informada. Gere uma em {LOOPS_SETTINGS_URL}"
            )

        self._settings = settings or get_loops_settings()
        errors = self._settings.validate()
        if errors:
            raise LoopsConfigurationError("; ".join(errors))

        self._api_key = api_key
        self._http_client = http_client
        self._owns_http_client = http_client is None

    def __repr__(self) -> str:
        return f"LoopsClient(api_key={_mask_api_key(self._api_key)!r})"

    @property
    def api_key(self) -> str:
        """API key usada no header Authorization."""
        return self._api_key

    @property
    def settings(self) -> LoopsSettings:
        return self._settings

    async def __aenter__(self) -> LoopsClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Fecha o httpx.AsyncClient criado internamente (se houver)."""
        if self._owns_http_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    def _get_http_client(self) -> httpx.AsyncClient:
        """Obtém ou cria cliente HTTP."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=self._settings.request_timeout_seconds,
            )
        return self._http_client

    def _build_headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._api_key}",
            "User-Agent": self._settings.user_agent,
        }

    async def _request(
        self,
        method: HttpMethod,
        path: str,
        body: Mapping[str, Any] | None = None,
    ) -> Any:
        """Envia uma requisição e devolve o JSON da resposta, seja qual for o status.

        Args:
            method: GET, POST ou PUT
            path: Path relativo à URL base (pode conter query string)
            body: Corpo serializado como JSON; None não envia corpo

        Returns:
            JSON decodificado da resposta, sem alteração.

        Raises:
            LoopsTransportError: Falha de rede/timeout ou corpo não-JSON.
        """
        url = self._settings.build_url(path)
        safe_path = redact_path(path)
        client = self._get_http_client()

        try:
            response = await client.request(
                method.value,
                url,
                json=dict(body) if body is not None else None,
                headers=self._build_headers(),
            )
        except httpx.HTTPError as exc:
            log_transport_error(method.value, path, exc)
            raise LoopsTransportError(
                f"Falha de transporte em {method.value} {safe_path}: {type(exc).__name__}",
                method=method.value,
                path=safe_path,
            ) from exc

        try:
            data = response.json()
        except ValueError as exc:
            log_invalid_json(method.value, path, response.status_code)
            raise LoopsTransportError(
                f"Resposta não-JSON em {method.value} {safe_path}",
                method=method.value,
                path=safe_path,
                status_code=response.status_code,
            ) from exc

        log_request_completed(method.value, path, response.status_code)
        return data

    async def test_api_key(self) -> LoopsResponse:
        """Verifica se a API key é válida (GET api-key)."""
        return await self._request(HttpMethod.GET, API_KEY_PATH)

    async def create_contact(
        self,
        email: str,
        first_name: str | None = None,
        last_name: str | None = None,
        user_group: str | None = None,
        source: str | None = None,
    ) -> LoopsResponse:
        """Cria um contato (POST contacts/create).

        Exemplo:
            await client.create_contact(
                "john.doe@example.com", "John", "Doe", "payingCustomer", "example.com"
            )
        """
        body = build_contact_body(email, first_name, last_name, user_group, source)
        return await self._request(HttpMethod.POST, CONTACTS_CREATE_PATH, body)

    async def update_contact(
        self,
        email: str,
        first_name: str | None = None,
        last_name: str | None = None,
        user_group: str | None = None,
        source: str | None = None,
    ) -> LoopsResponse:
        """Atualiza um contato existente (PUT contacts/update)."""
        body = build_contact_body(email, first_name, last_name, user_group, source)
        return await self._request(HttpMethod.PUT, CONTACTS_UPDATE_PATH, body)

    async def find_contact(self, email: str) -> Any:
        """Busca contato por email (GET contacts/find?email=...).

        Returns:
            JSON da API como recebido (normalmente uma lista de contatos).
        """
        return await self._request(HttpMethod.GET, build_find_contact_path(email))

    async def send_event(self, email: str, event_name: str) -> LoopsResponse:
        """Envia um evento para um contato (POST events/send)."""
        body = build_event_body(email, event_name)
        return await self._request(HttpMethod.POST, EVENTS_SEND_PATH, body)
