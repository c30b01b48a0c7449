"""Agregador de settings do conector Messenger.

Re-exporta settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.messenger import (
    GRAPH_API_BASE_URL,
    GRAPH_API_VERSION,
    DebugType,
    MessengerSettings,
    get_messenger_settings,
)

__all__ = [
    # Constants
    "GRAPH_API_BASE_URL",
    "GRAPH_API_VERSION",
    "DebugType",
    # Channels
    "MessengerSettings",
    "get_messenger_settings",
]
