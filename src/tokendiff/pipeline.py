"""Full comparison pipeline: filter, diff, then suggest replacements."""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from tokendiff.catalog.filters import filter_tokens
from tokendiff.catalog.models import TokenNode
from tokendiff.config.models import SuggestionMatchingConfig, TokenFilters
from tokendiff.diff.engine import compare_tokens
from tokendiff.diff.models import ComparisonChanges
from tokendiff.matching.suggestions import compute_suggestions

log = structlog.get_logger(__name__)


def compare_catalogs(
    old: Sequence[TokenNode],
    new: Sequence[TokenNode],
    *,
    config: SuggestionMatchingConfig | None = None,
    filters: TokenFilters | None = None,
    with_suggestions: bool = True,
) -> ComparisonChanges:
    """Compare two catalogs and attach auto suggestions for removed tokens."""
    old_tree = filter_tokens(old, filters)
    new_tree = filter_tokens(new, filters)

    changes = compare_tokens(old_tree, new_tree)
    if with_suggestions:
        changes.auto_suggestions = compute_suggestions(changes.removed, changes.added, config)

    log.info("comparison_complete", **changes.summary())
    return changes
