"""Tests for diff/models.py: ComparisonChanges and its suggestion overlays."""

from __future__ import annotations

from tokendiff.catalog.models import Appearance, ColorValue
from tokendiff.diff.models import (
    AutoSuggestion,
    ColorChange,
    ComparisonChanges,
    MatchFactors,
    ReplacementSuggestion,
    TokenModification,
    TokenSummary,
)


def _auto(removed: str, suggested: str, confidence: float = 0.8) -> AutoSuggestion:
    return AutoSuggestion(
        removed_path=removed,
        suggested_path=suggested,
        confidence=confidence,
        match_factors=MatchFactors(
            color_similarity=1.0, usage_context_similarity=0.6, structure_similarity=1.0
        ),
    )


class TestManualSuggestions:
    """Tests for the manual suggestion overlay."""

    def test_upsert_twice_keeps_last(self) -> None:
        changes = ComparisonChanges()

        changes.upsert_manual_suggestion("Old/a", "New/a")
        changes.upsert_manual_suggestion("Old/a", "New/b")

        assert changes.manual_suggestions == [
            ReplacementSuggestion(removed_path="Old/a", suggested_path="New/b")
        ]

    def test_upsert_keeps_other_paths(self) -> None:
        changes = ComparisonChanges()
        changes.upsert_manual_suggestion("Old/a", "New/a")
        changes.upsert_manual_suggestion("Old/b", "New/b")

        assert len(changes.manual_suggestions) == 2

    def test_remove(self) -> None:
        changes = ComparisonChanges()
        changes.upsert_manual_suggestion("Old/a", "New/a")

        changes.remove_manual_suggestion("Old/a")

        assert changes.get_manual_suggestion("Old/a") is None

    def test_remove_missing_is_noop(self) -> None:
        changes = ComparisonChanges()
        changes.upsert_manual_suggestion("Old/a", "New/a")

        changes.remove_manual_suggestion("Old/zzz")

        assert len(changes.manual_suggestions) == 1

    def test_get_missing(self) -> None:
        assert ComparisonChanges().get_manual_suggestion("Old/a") is None


class TestAutoSuggestions:
    """Tests for accepting and rejecting auto suggestions."""

    def test_accept_copies_to_manual_and_keeps_auto(self) -> None:
        # Given
        auto = _auto("Old/a", "New/a")
        changes = ComparisonChanges(auto_suggestions=[auto])

        # When
        changes.accept_auto_suggestion("Old/a")

        # Then
        manual = changes.get_manual_suggestion("Old/a")
        assert manual == ReplacementSuggestion(removed_path="Old/a", suggested_path="New/a")
        assert changes.get_auto_suggestion("Old/a") == auto

    def test_accept_overrides_previous_manual(self) -> None:
        changes = ComparisonChanges(auto_suggestions=[_auto("Old/a", "New/a")])
        changes.upsert_manual_suggestion("Old/a", "New/other")

        changes.accept_auto_suggestion("Old/a")

        assert len(changes.manual_suggestions) == 1
        manual = changes.get_manual_suggestion("Old/a")
        assert manual is not None
        assert manual.suggested_path == "New/a"

    def test_accept_unknown_is_noop(self) -> None:
        changes = ComparisonChanges(auto_suggestions=[_auto("Old/a", "New/a")])

        changes.accept_auto_suggestion("Old/zzz")

        assert changes.manual_suggestions == []

    def test_reject_removes_auto(self) -> None:
        changes = ComparisonChanges(
            auto_suggestions=[_auto("Old/a", "New/a"), _auto("Old/b", "New/b")]
        )

        changes.reject_auto_suggestion("Old/a")

        assert changes.get_auto_suggestion("Old/a") is None
        assert changes.get_auto_suggestion("Old/b") is not None

    def test_reject_leaves_manual(self) -> None:
        changes = ComparisonChanges(auto_suggestions=[_auto("Old/a", "New/a")])
        changes.accept_auto_suggestion("Old/a")

        changes.reject_auto_suggestion("Old/a")

        assert changes.get_manual_suggestion("Old/a") is not None


class TestSerialization:
    """Tests for summary() and to_dict()."""

    def test_summary_counts(self) -> None:
        changes = ComparisonChanges(
            added=(TokenSummary(name="a", path="A/a"),),
            removed=(TokenSummary(name="b", path="A/b"), TokenSummary(name="c", path="A/c")),
            auto_suggestions=[_auto("A/b", "A/a")],
        )

        assert changes.summary() == {
            "added": 1,
            "removed": 2,
            "modified": 0,
            "manual_suggestions": 0,
            "auto_suggestions": 1,
        }

    def test_to_dict(self) -> None:
        modes = {"Legacy": Appearance(light=ColorValue(hex="#FFFFFF", primitive_name="white"))}
        changes = ComparisonChanges(
            added=(TokenSummary(name="a", path="A/a", modes=modes),),
            modified=(
                TokenModification(
                    path="A/m",
                    name="m",
                    color_changes=(
                        ColorChange(
                            brand="Legacy", appearance="dark", old_hex="#000000", new_hex="#111111"
                        ),
                    ),
                ),
            ),
            auto_suggestions=[_auto("A/b", "A/a", confidence=0.123456)],
        )

        result = changes.to_dict()

        assert result["added"][0]["modes"] == {
            "Legacy": {"light": {"hex": "#FFFFFF", "primitiveName": "white"}}
        }
        assert result["modified"][0]["color_changes"][0]["new_hex"] == "#111111"
        assert result["auto_suggestions"][0]["confidence"] == 0.1235
        assert result["auto_suggestions"][0]["match_factors"]["path_similarity"] == 0.0

    def test_has_changes(self) -> None:
        assert not ComparisonChanges().has_changes
        assert ComparisonChanges(added=(TokenSummary(name="a", path="a"),)).has_changes
