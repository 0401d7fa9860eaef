"""Color math, similarity metrics and the replacement suggestion engine."""

from tokendiff.matching.colorspace import (
    HSL,
    RGBA,
    TRANSPARENT,
    ColorClassification,
    ColorDelta,
    calculate_delta,
    classify_magnitude,
    hex_to_hsl,
    parse_hex,
    rgb_to_hsl,
)
from tokendiff.matching.similarity import (
    hex_color_similarity,
    levenshtein_distance,
    levenshtein_similarity,
    modes_color_similarity,
    name_similarity,
    path_similarity,
    structure_similarity,
    usage_context_similarity,
)
from tokendiff.matching.suggestions import compute_suggestions, score_pair

__all__ = [
    "HSL",
    "RGBA",
    "TRANSPARENT",
    "ColorClassification",
    "ColorDelta",
    "calculate_delta",
    "classify_magnitude",
    "compute_suggestions",
    "hex_color_similarity",
    "hex_to_hsl",
    "levenshtein_distance",
    "levenshtein_similarity",
    "modes_color_similarity",
    "name_similarity",
    "parse_hex",
    "path_similarity",
    "rgb_to_hsl",
    "score_pair",
    "structure_similarity",
    "usage_context_similarity",
]
