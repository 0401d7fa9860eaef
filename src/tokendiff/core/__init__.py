"""Core module exports."""

from tokendiff.core.errors import (
    CatalogError,
    ConfigError,
    ErrorCode,
    TokenDiffError,
)
from tokendiff.core.logging import (
    clear_run_id,
    configure_logging,
    get_run_id,
    log_file_path,
    set_run_id,
)

__all__ = [
    # Errors
    "CatalogError",
    "ConfigError",
    "ErrorCode",
    "TokenDiffError",
    # Logging
    "clear_run_id",
    "configure_logging",
    "get_run_id",
    "log_file_path",
    "set_run_id",
]
