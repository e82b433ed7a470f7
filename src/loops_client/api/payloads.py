"""Montagem de paths e corpos JSON das operações da API Loops.

Funções puras: nenhuma validação de formato (ex: email) é feita aqui,
a API é a única fonte de erros de validação.
"""

from __future__ import annotations

from urllib.parse import quote

from loops_client.api.models import ContactBody, EventBody

API_KEY_PATH = "api-key"
CONTACTS_CREATE_PATH = "contacts/create"
CONTACTS_UPDATE_PATH = "contacts/update"
CONTACTS_FIND_PATH = "contacts/find"
EVENTS_SEND_PATH = "events/send"

# "@" fica literal; "+", espaço, "&", "=" e "/" são codificados
_EMAIL_SAFE_CHARS = "@"


def build_contact_body(
    email: str,
    first_name: str | None = None,
    last_name: str | None = None,
    user_group: str | None = None,
    source: str | None = None,
) -> ContactBody:
    """Mapeia argumentos Python para o corpo camelCase de contato.

    Campos opcionais com None são omitidos do corpo.
    """
    fields = {
        "email": email,
        "firstName": first_name,
        "lastName": last_name,
        "userGroup": user_group,
        "source": source,
    }
    body: ContactBody = {key: value for key, value in fields.items() if value is not None}  # type: ignore[assignment]
    return body


def build_event_body(email: str, event_name: str) -> EventBody:
    """Corpo de events/send."""
    return {"email": email, "eventName": event_name}


def build_find_contact_path(email: str) -> str:
    """Path de busca com o email percent-encoded na query string.

    Exemplo:
        >>> build_find_contact_path("john+test@example.com")
        'contacts/find?email=john%2Btest@example.com'
    """
    return f"{CONTACTS_FIND_PATH}?email={quote(email, safe=_EMAIL_SAFE_CHARS)}"
