"""Settings da API Loops.

Valores fixos com override explícito por parâmetro; nenhuma variável de
ambiente é lida. A API key não faz parte das settings: ela é passada ao
construtor do LoopsClient.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from loops_client.version import __version__

LOOPS_API_BASE_URL: str = "https://app.loops.so/api/v1/"
LOOPS_SETTINGS_URL: str = "https://app.loops.so/settings#API"


@dataclass(frozen=True)
class LoopsSettings:
    """Configurações de acesso à API Loops.

    Attributes:
        api_base_url: URL base; os paths das operações são concatenados a ela
        request_timeout_seconds: Timeout do transporte HTTP
        user_agent_prefix: Identificador do cliente no header User-Agent
    """

    api_base_url: str = LOOPS_API_BASE_URL
    request_timeout_seconds: float = 30.0
    user_agent_prefix: str = "loops-py"

    @property
    def user_agent(self) -> str:
        """Valor do header User-Agent (ex: loops-py v0.1.0)."""
        return f"{self.user_agent_prefix} v{__version__}"

    def build_url(self, path: str) -> str:
        """Concatena o path relativo à URL base."""
        return f"{self.api_base_url}{path}"

    def validate(self) -> list[str]:
        """Valida configurações.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_base_url.startswith(("https://", "http://")):
            errors.append("api_base_url deve começar com http:// ou https://")
        elif not self.api_base_url.endswith("/"):
            errors.append("api_base_url deve terminar com '/'")

        if self.request_timeout_seconds <= 0:
            errors.append("request_timeout_seconds deve ser > 0")

        if not self.user_agent_prefix:
            errors.append("user_agent_prefix não pode ser vazio")

        return errors


@lru_cache(maxsize=1)
def get_loops_settings() -> LoopsSettings:
    """Retorna instância cacheada de LoopsSettings com os valores padrão."""
    return LoopsSettings()
