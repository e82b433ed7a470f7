"""Settings da biblioteca.

Re-exporta as settings da API Loops.
"""

from __future__ import annotations

from loops_client.config.settings.loops import (
    LOOPS_API_BASE_URL,
    LOOPS_SETTINGS_URL,
    LoopsSettings,
    get_loops_settings,
)

__all__ = [
    "LOOPS_API_BASE_URL",
    "LOOPS_SETTINGS_URL",
    "LoopsSettings",
    "get_loops_settings",
]
