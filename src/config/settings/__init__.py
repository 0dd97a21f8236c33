"""Agregador de settings do adapter de DMs do Twitter.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Channel-specific settings
from config.settings.twitter import (
    TWITTER_DM_EVENTS_ENDPOINT,
    TwitterSettings,
    get_twitter_settings,
)

__all__ = [
    # Constants
    "TWITTER_DM_EVENTS_ENDPOINT",
    # Base
    "BaseSettings",
    "Environment",
    # Channels
    "TwitterSettings",
    "get_base_settings",
    "get_twitter_settings",
]
