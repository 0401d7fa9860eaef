"""Data models for catalog comparison.

Results hold detached TokenSummary snapshots, never references into the
compared trees. ComparisonChanges is immutable apart from its two
suggestion overlays, which change only through the upsert/accept/reject
operations below.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from tokendiff.catalog.models import Appearance, TokenNode

if TYPE_CHECKING:
    from tokendiff.matching.colorspace import ColorDelta


@dataclass(frozen=True, slots=True)
class TokenSummary:
    """Detached snapshot of a leaf token.

    ``path`` is always resolved (falls back to the token name).
    """

    name: str
    path: str
    modes: Mapping[str, Appearance] | None = None

    @classmethod
    def from_node(cls, node: TokenNode) -> TokenSummary:
        return cls(name=node.name, path=node.key, modes=node.modes)

    def to_dict(self) -> dict[str, Any]:
        modes: dict[str, Any] | None = None
        if self.modes is not None:
            modes = {
                brand: appearance.model_dump(by_alias=True, exclude_none=True)
                for brand, appearance in self.modes.items()
            }
        return {"name": self.name, "path": self.path, "modes": modes}


@dataclass(frozen=True, slots=True)
class ColorChange:
    """One (brand, appearance) slot whose hex changed."""

    brand: str
    appearance: str  # "light" | "dark"
    old_hex: str
    new_hex: str

    @property
    def delta(self) -> ColorDelta:
        from tokendiff.matching.colorspace import calculate_delta

        return calculate_delta(self.old_hex, self.new_hex)

    def to_dict(self) -> dict[str, Any]:
        return {
            "brand": self.brand,
            "appearance": self.appearance,
            "old_hex": self.old_hex,
            "new_hex": self.new_hex,
        }


@dataclass(frozen=True, slots=True)
class TokenModification:
    """A token present in both catalogs whose colors changed.

    Only emitted with a non-empty ``color_changes``.
    """

    path: str
    name: str
    color_changes: tuple[ColorChange, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "name": self.name,
            "color_changes": [c.to_dict() for c in self.color_changes],
        }


@dataclass(frozen=True, slots=True)
class ReplacementSuggestion:
    """User-confirmed mapping from a removed token to its replacement."""

    removed_path: str
    suggested_path: str

    def to_dict(self) -> dict[str, Any]:
        return {"removed_path": self.removed_path, "suggested_path": self.suggested_path}


@dataclass(frozen=True, slots=True)
class MatchFactors:
    """Sub-scores behind a confidence value, each in [0, 1].

    color, usage_context and structure compose the confidence; path and
    name are informational.
    """

    color_similarity: float
    usage_context_similarity: float
    structure_similarity: float
    path_similarity: float = 0.0
    name_similarity: float = 0.0

    def to_dict(self) -> dict[str, float]:
        return {
            "color_similarity": round(self.color_similarity, 4),
            "usage_context_similarity": round(self.usage_context_similarity, 4),
            "structure_similarity": round(self.structure_similarity, 4),
            "path_similarity": round(self.path_similarity, 4),
            "name_similarity": round(self.name_similarity, 4),
        }


@dataclass(frozen=True, slots=True)
class AutoSuggestion:
    """Engine-proposed replacement, not yet endorsed by a user."""

    removed_path: str
    suggested_path: str
    confidence: float
    match_factors: MatchFactors

    def to_dict(self) -> dict[str, Any]:
        return {
            "removed_path": self.removed_path,
            "suggested_path": self.suggested_path,
            "confidence": round(self.confidence, 4),
            "match_factors": self.match_factors.to_dict(),
        }


@dataclass
class ComparisonChanges:
    """Aggregate result of comparing two catalogs."""

    added: tuple[TokenSummary, ...] = ()
    removed: tuple[TokenSummary, ...] = ()
    modified: tuple[TokenModification, ...] = ()
    manual_suggestions: list[ReplacementSuggestion] = field(default_factory=list)
    auto_suggestions: list[AutoSuggestion] = field(default_factory=list)

    @property
    def has_changes(self) -> bool:
        return bool(self.added or self.removed or self.modified)

    # -- manual suggestions ---------------------------------------------------

    def upsert_manual_suggestion(self, removed_path: str, suggested_path: str) -> None:
        """Set the replacement for ``removed_path``; last write wins."""
        self.remove_manual_suggestion(removed_path)
        self.manual_suggestions.append(
            ReplacementSuggestion(removed_path=removed_path, suggested_path=suggested_path)
        )

    def remove_manual_suggestion(self, removed_path: str) -> None:
        self.manual_suggestions = [
            s for s in self.manual_suggestions if s.removed_path != removed_path
        ]

    def get_manual_suggestion(self, removed_path: str) -> ReplacementSuggestion | None:
        return next((s for s in self.manual_suggestions if s.removed_path == removed_path), None)

    # -- auto suggestions -----------------------------------------------------

    def get_auto_suggestion(self, removed_path: str) -> AutoSuggestion | None:
        return next((s for s in self.auto_suggestions if s.removed_path == removed_path), None)

    def accept_auto_suggestion(self, removed_path: str) -> None:
        """Copy the auto suggestion into the manual overlay. The auto entry stays."""
        suggestion = self.get_auto_suggestion(removed_path)
        if suggestion is not None:
            self.upsert_manual_suggestion(suggestion.removed_path, suggestion.suggested_path)

    def reject_auto_suggestion(self, removed_path: str) -> None:
        self.auto_suggestions = [s for s in self.auto_suggestions if s.removed_path != removed_path]

    # -- serialization --------------------------------------------------------

    def summary(self) -> dict[str, int]:
        return {
            "added": len(self.added),
            "removed": len(self.removed),
            "modified": len(self.modified),
            "manual_suggestions": len(self.manual_suggestions),
            "auto_suggestions": len(self.auto_suggestions),
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "summary": self.summary(),
            "added": [t.to_dict() for t in self.added],
            "removed": [t.to_dict() for t in self.removed],
            "modified": [m.to_dict() for m in self.modified],
            "manual_suggestions": [s.to_dict() for s in self.manual_suggestions],
            "auto_suggestions": [s.to_dict() for s in self.auto_suggestions],
        }
