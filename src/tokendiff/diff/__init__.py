"""Catalog diff package: structural comparison and the result model.

Public API re-exports for the diff subpackage.
"""

from tokendiff.diff.engine import compare_tokens, find_color_changes
from tokendiff.diff.models import (
    AutoSuggestion,
    ColorChange,
    ComparisonChanges,
    MatchFactors,
    ReplacementSuggestion,
    TokenModification,
    TokenSummary,
)

__all__ = [
    "AutoSuggestion",
    "ColorChange",
    "ComparisonChanges",
    "MatchFactors",
    "ReplacementSuggestion",
    "TokenModification",
    "TokenSummary",
    "compare_tokens",
    "find_color_changes",
]
