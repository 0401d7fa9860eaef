"""Similarity metrics used to rank replacement candidates.

Every score is normalized to [0, 1] where 1.0 means identical. The
semantic heuristics (usage context in particular) are approximate by
nature; they only need to order candidates sensibly.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from difflib import SequenceMatcher
from functools import lru_cache

from tokendiff.catalog.models import APPEARANCES, Appearance, brand_order
from tokendiff.matching.colorspace import RGBA, parse_hex

# =============================================================================
# Strings
# =============================================================================


def levenshtein_distance(a: str, b: str) -> int:
    """Case-insensitive edit distance."""
    a = a.lower()
    b = b.lower()
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i]
        for j, cb in enumerate(b, start=1):
            cost = 0 if ca == cb else 1
            current.append(min(previous[j] + 1, current[j - 1] + 1, previous[j - 1] + cost))
        previous = current
    return previous[-1]


def levenshtein_similarity(a: str, b: str) -> float:
    # Measure lengths after lowercasing: some characters grow (e.g. "İ").
    a = a.lower()
    b = b.lower()
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return max(0.0, 1.0 - levenshtein_distance(a, b) / longest)


# =============================================================================
# Colors
# =============================================================================

# "Redmean" weighted RGB distance, on the 0-255 scale. The per-channel
# weights for red and blue always sum to 4 + 255/256, so black vs white
# is the largest possible distance.
_MAX_REDMEAN_DISTANCE = 255 * math.sqrt(8 + 255 / 256)


@lru_cache(maxsize=4096)
def _rgb(value: str) -> RGBA:
    return parse_hex(value)


def _redmean_distance(c1: RGBA, c2: RGBA) -> float:
    r_mean = (c1.r + c2.r) / 2 * 255
    dr = (c1.r - c2.r) * 255
    dg = (c1.g - c2.g) * 255
    db = (c1.b - c2.b) * 255
    return math.sqrt(
        (2 + r_mean / 256) * dr * dr + 4 * dg * dg + (2 + (255 - r_mean) / 256) * db * db
    )


def hex_color_similarity(hex_a: str, hex_b: str) -> float:
    """Perceptual similarity of two hex colors. Alpha is ignored."""
    distance = _redmean_distance(_rgb(hex_a), _rgb(hex_b))
    return max(0.0, min(1.0, 1.0 - distance / _MAX_REDMEAN_DISTANCE))


def modes_color_similarity(
    modes_a: Mapping[str, Appearance] | None,
    modes_b: Mapping[str, Appearance] | None,
) -> float:
    """Mean hex similarity over the brand/appearance slots both sides define.

    Returns 0.0 when either side has no modes or no slot is shared.
    """
    if not modes_a or not modes_b:
        return 0.0

    scores: list[float] = []
    for brand in brand_order(modes_a.keys() & modes_b.keys()):
        for appearance in APPEARANCES:
            color_a = modes_a[brand].color_for(appearance)
            color_b = modes_b[brand].color_for(appearance)
            if color_a is None or color_b is None:
                continue
            scores.append(hex_color_similarity(color_a.hex, color_b.hex))

    if not scores:
        return 0.0
    return sum(scores) / len(scores)


# =============================================================================
# Paths and names
# =============================================================================

PARENT_WEIGHT = 0.85
LEAF_WEIGHT = 0.15

COSMETIC_NAME_PREFIXES = ("legacy-", "legacy_", "deprecated-", "deprecated_")


def path_segments(path: str | None) -> list[str]:
    if not path:
        return []
    return [seg.strip().lower() for seg in path.split("/") if seg.strip()]


def _sequence_ratio(a: list[str], b: list[str]) -> float:
    return SequenceMatcher(None, a, b, autojunk=False).ratio()


def path_similarity(path_a: str, path_b: str) -> float:
    """Parent segments dominate; the leaf name only nudges the score."""
    segs_a = path_segments(path_a)
    segs_b = path_segments(path_b)
    if not segs_a or not segs_b:
        return 0.0
    if segs_a == segs_b:
        return 1.0

    parent_a, leaf_a = segs_a[:-1], segs_a[-1]
    parent_b, leaf_b = segs_b[:-1], segs_b[-1]
    leaf_score = levenshtein_similarity(leaf_a, leaf_b)
    if not parent_a and not parent_b:
        return leaf_score

    score = PARENT_WEIGHT * _sequence_ratio(parent_a, parent_b) + LEAF_WEIGHT * leaf_score
    return min(1.0, score)


def normalize_name(name: str) -> str:
    normalized = name.strip().lower()
    for prefix in COSMETIC_NAME_PREFIXES:
        if normalized.startswith(prefix):
            return normalized[len(prefix) :]
    return normalized


def name_similarity(name_a: str, name_b: str) -> float:
    norm_a = normalize_name(name_a)
    norm_b = normalize_name(name_b)
    if norm_a == norm_b:
        return 1.0
    return levenshtein_similarity(norm_a, norm_b)


def structure_similarity(path_a: str, path_b: str) -> float:
    """Similarity of the parent paths (every segment but the last)."""
    parent_a = path_segments(path_a)[:-1]
    parent_b = path_segments(path_b)[:-1]
    if parent_a == parent_b:
        return 1.0
    if not parent_a or not parent_b:
        return 0.0
    return _sequence_ratio(parent_a, parent_b)


# =============================================================================
# Usage context
# =============================================================================

_ROLE_SYNONYMS: dict[str, tuple[str, ...]] = {
    "background": ("bg", "background", "backgrounds", "surface", "fill", "canvas"),
    "foreground": ("fg", "foreground", "text", "icon", "content", "label"),
    "border": ("border", "borders", "stroke", "outline", "divider", "separator"),
}

_KEYWORD_SYNONYMS: dict[str, tuple[str, ...]] = {
    # interaction states
    "hover": ("hover", "hovered", "hovering"),
    "pressed": ("pressed", "press", "active"),
    "focus": ("focus", "focused"),
    "disabled": ("disabled", "disable", "inactive"),
    "selected": ("selected", "checked"),
    # emphasis
    "solid": ("solid",),
    "subtle": ("subtle", "soft"),
    "strong": ("strong", "bold"),
    "muted": ("muted",),
    "inverse": ("inverse", "inverted"),
    # intent
    "brand": ("brand",),
    "primary": ("primary",),
    "secondary": ("secondary",),
    "tertiary": ("tertiary",),
    "error": ("error", "danger", "critical", "negative"),
    "success": ("success", "positive"),
    "warning": ("warning", "caution"),
    "info": ("info", "informative"),
    "neutral": ("neutral", "gray", "grey"),
    # components
    "button": ("btn", "button"),
    "input": ("input", "field"),
    "link": ("link",),
}

_ROLE_LOOKUP = {word: role for role, words in _ROLE_SYNONYMS.items() for word in words}
_KEYWORD_LOOKUP = {word: kw for kw, words in _KEYWORD_SYNONYMS.items() for word in words}

_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_WORD_SPLIT = re.compile(r"[^a-z0-9]+")

ROLE_WEIGHT = 0.6
KEYWORD_WEIGHT = 0.4


@lru_cache(maxsize=8192)
def context_terms(path: str, name: str) -> tuple[frozenset[str], frozenset[str]]:
    """Semantic roles and other keywords found in a token's path and name."""
    text = _CAMEL_BOUNDARY.sub(r"\1 \2", f"{path} {name}").lower()
    roles: set[str] = set()
    keywords: set[str] = set()
    for word in _WORD_SPLIT.split(text):
        if word in _ROLE_LOOKUP:
            roles.add(_ROLE_LOOKUP[word])
        elif word in _KEYWORD_LOOKUP:
            keywords.add(_KEYWORD_LOOKUP[word])
    return frozenset(roles), frozenset(keywords)


def _jaccard(a: frozenset[str], b: frozenset[str]) -> float:
    union = a | b
    if not union:
        return 0.0
    return len(a & b) / len(union)


def usage_context_similarity(path_a: str, name_a: str, path_b: str, name_b: str) -> float:
    roles_a, keywords_a = context_terms(path_a or "", name_a or "")
    roles_b, keywords_b = context_terms(path_b or "", name_b or "")

    if not (roles_a or roles_b or keywords_a or keywords_b):
        # Nothing semantic to go on: fall back to plain name likeness.
        return name_similarity(name_a, name_b)

    keyword_score = _jaccard(keywords_a, keywords_b)

    if roles_a and roles_b:
        role_score = _jaccard(roles_a, roles_b)
        if not keywords_a and not keywords_b:
            return role_score
        return ROLE_WEIGHT * role_score + KEYWORD_WEIGHT * keyword_score

    if roles_a or roles_b:
        return KEYWORD_WEIGHT * keyword_score

    return keyword_score
