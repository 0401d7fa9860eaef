"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (TOKENDIFF__SECTION__KEY)
3. Explicit YAML file passed to load_config()
4. Global YAML (~/.config/tokendiff/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    TOKENDIFF__<SECTION>__<KEY>=<VALUE>

Examples:
    TOKENDIFF__LOGGING__LEVEL=DEBUG
    TOKENDIFF__MATCHING__MINIMUM_CONFIDENCE_THRESHOLD=0.5
    TOKENDIFF__MATCHING__COLOR_WEIGHT=0.6
    TOKENDIFF__FILTERS__EXCLUDE_UTILITY_GROUP=true
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        TOKENDIFF__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Duplicate token keys are always reported at WARNING.
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. INFO adds a summary line per comparison; "
        "DEBUG also logs catalog loading and suggestion counts.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class SuggestionMatchingConfig(BaseModel):
    """Weights and threshold for replacement suggestions.

    confidence = color_weight * color
               + usage_context_weight * usage_context
               + structure_weight * structure

    Weights sum to 1.0 by convention. This is not enforced, so a caller
    may deliberately emphasise one factor; ``total_weight`` exposes the sum.

    Env vars:
        TOKENDIFF__MATCHING__MINIMUM_CONFIDENCE_THRESHOLD
        TOKENDIFF__MATCHING__COLOR_WEIGHT
        TOKENDIFF__MATCHING__USAGE_CONTEXT_WEIGHT
        TOKENDIFF__MATCHING__STRUCTURE_WEIGHT
    """

    minimum_confidence_threshold: float = Field(
        default=0.35,
        description="Best candidates scoring below this are not suggested. "
        "TRADEOFF: Higher values suggest less but with fewer false positives.",
    )
    color_weight: float = Field(
        default=0.50,
        description="Weight of color similarity across shared brand/appearance slots.",
    )
    usage_context_weight: float = Field(
        default=0.30,
        description="Weight of semantic role overlap (bg/fg/border, hover, solid...).",
    )
    structure_weight: float = Field(
        default=0.20,
        description="Weight of parent path similarity.",
    )

    @field_validator(
        "minimum_confidence_threshold",
        "color_weight",
        "usage_context_weight",
        "structure_weight",
    )
    @classmethod
    def validate_unit_interval(cls, v: float) -> float:
        if not (0.0 <= v <= 1.0):
            raise ValueError(f"Must be between 0.0 and 1.0, got {v}")
        return v

    @property
    def total_weight(self) -> float:
        return self.color_weight + self.usage_context_weight + self.structure_weight


class TokenFilters(BaseModel):
    """Inclusion filters applied to both catalogs before comparing.

    Env vars:
        TOKENDIFF__FILTERS__EXCLUDE_TOKENS_STARTING_WITH_HASH
        TOKENDIFF__FILTERS__EXCLUDE_TOKENS_ENDING_WITH_HOVER
        TOKENDIFF__FILTERS__EXCLUDE_UTILITY_GROUP
    """

    exclude_tokens_starting_with_hash: bool = Field(
        default=False,
        description="Drop tokens whose name starts with '#'.",
    )
    exclude_tokens_ending_with_hover: bool = Field(
        default=False,
        description="Drop tokens whose name ends with '_hover'.",
    )
    exclude_utility_group: bool = Field(
        default=False,
        description="Drop the 'Utility' group and everything below it.",
    )

    @property
    def is_active(self) -> bool:
        return (
            self.exclude_tokens_starting_with_hash
            or self.exclude_tokens_ending_with_hover
            or self.exclude_utility_group
        )


class TokenDiffConfig(BaseModel):
    """Root configuration for tokendiff."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    matching: SuggestionMatchingConfig = Field(default_factory=SuggestionMatchingConfig)
    filters: TokenFilters = Field(default_factory=TokenFilters)
