"""Replacement suggestions for removed tokens.

Every (removed, added) pair gets a weighted confidence score; each
removed token keeps its single best candidate when that score reaches
the configured threshold. Matching is greedy and local: one added token
may be the best match for several removed tokens.
"""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from tokendiff.config.models import SuggestionMatchingConfig
from tokendiff.diff.models import AutoSuggestion, MatchFactors, TokenSummary
from tokendiff.matching.similarity import (
    modes_color_similarity,
    name_similarity,
    path_similarity,
    structure_similarity,
    usage_context_similarity,
)

log = structlog.get_logger(__name__)


def score_pair(
    removed: TokenSummary,
    added: TokenSummary,
    config: SuggestionMatchingConfig,
) -> tuple[float, MatchFactors]:
    """Confidence of ``added`` replacing ``removed``, with the composing factors.

    Path and name similarity are left at 0.0 here; they are only filled in
    for the selected candidate.
    """
    color = modes_color_similarity(removed.modes, added.modes)
    usage = usage_context_similarity(removed.path, removed.name, added.path, added.name)
    structure = structure_similarity(removed.path, added.path)

    confidence = (
        config.color_weight * color
        + config.usage_context_weight * usage
        + config.structure_weight * structure
    )
    factors = MatchFactors(
        color_similarity=color,
        usage_context_similarity=usage,
        structure_similarity=structure,
    )
    return max(0.0, min(1.0, confidence)), factors


def best_candidate(
    removed: TokenSummary,
    added: Sequence[TokenSummary],
    config: SuggestionMatchingConfig,
) -> tuple[TokenSummary, float, MatchFactors] | None:
    """Highest-scoring added token. Ties keep the earliest candidate."""
    best: tuple[TokenSummary, float, MatchFactors] | None = None
    for candidate in added:
        confidence, factors = score_pair(removed, candidate, config)
        if best is None or confidence > best[1]:
            best = (candidate, confidence, factors)
    return best


def compute_suggestions(
    removed: Sequence[TokenSummary],
    added: Sequence[TokenSummary],
    config: SuggestionMatchingConfig | None = None,
) -> list[AutoSuggestion]:
    """Propose at most one replacement per removed token.

    Args:
        removed: tokens that disappeared from the catalog
        added: tokens that appeared in the catalog
        config: weights and threshold (defaults when None)

    Returns:
        AutoSuggestions in ``removed`` order, only for removed tokens whose
        best candidate reaches ``config.minimum_confidence_threshold``.
    """
    config = config or SuggestionMatchingConfig()
    if not removed or not added:
        return []

    suggestions: list[AutoSuggestion] = []
    for token in removed:
        best = best_candidate(token, added, config)
        if best is None:
            continue
        candidate, confidence, factors = best
        if confidence < config.minimum_confidence_threshold:
            continue
        suggestions.append(
            AutoSuggestion(
                removed_path=token.path,
                suggested_path=candidate.path,
                confidence=confidence,
                match_factors=MatchFactors(
                    color_similarity=factors.color_similarity,
                    usage_context_similarity=factors.usage_context_similarity,
                    structure_similarity=factors.structure_similarity,
                    path_similarity=path_similarity(token.path, candidate.path),
                    name_similarity=name_similarity(token.name, candidate.name),
                ),
            )
        )

    log.debug(
        "suggestions_computed",
        removed=len(removed),
        added=len(added),
        suggested=len(suggestions),
        threshold=config.minimum_confidence_threshold,
    )
    return suggestions
