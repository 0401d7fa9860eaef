"""tokendiff error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Catalog (loading / validation of token exports)

The comparison engine itself never raises these: it is total over
well-formed token trees. They are raised by the loader, the config layer
and surfaced by the CLI.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_FILE_NOT_FOUND = 2004

    # Catalog (3xxx)
    CATALOG_PARSE_ERROR = 3001
    CATALOG_INVALID_STRUCTURE = 3002
    CATALOG_FILE_NOT_FOUND = 3003


@dataclass(frozen=True, slots=True)
class TokenDiffError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'CATALOG_PARSE_ERROR')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(TokenDiffError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )

    @classmethod
    def file_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
            message=f"Config file not found: {path}",
            details={"path": path},
        )


class CatalogError(TokenDiffError):
    """Token catalog loading errors."""

    @classmethod
    def parse_error(cls, source: str, reason: str) -> "CatalogError":
        return cls(
            code=ErrorCode.CATALOG_PARSE_ERROR,
            message=f"Failed to parse token catalog {source}: {reason}",
            details={"source": source, "reason": reason},
        )

    @classmethod
    def invalid_structure(cls, source: str, location: str, reason: str) -> "CatalogError":
        return cls(
            code=ErrorCode.CATALOG_INVALID_STRUCTURE,
            message=f"Invalid token catalog {source} at '{location}': {reason}",
            details={"source": source, "location": location, "reason": reason},
        )

    @classmethod
    def file_not_found(cls, path: str) -> "CatalogError":
        return cls(
            code=ErrorCode.CATALOG_FILE_NOT_FOUND,
            message=f"Token catalog not found: {path}",
            details={"path": path},
        )
