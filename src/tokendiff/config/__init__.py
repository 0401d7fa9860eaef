"""Config module exports."""

from tokendiff.config.loader import TokenDiffSettings, load_config
from tokendiff.config.models import (
    LoggingConfig,
    LogOutputConfig,
    SuggestionMatchingConfig,
    TokenDiffConfig,
    TokenFilters,
)

__all__ = [
    "load_config",
    "LoggingConfig",
    "LogOutputConfig",
    "SuggestionMatchingConfig",
    "TokenDiffConfig",
    "TokenDiffSettings",
    "TokenFilters",
]
