"""Tests for catalog/filters.py module."""

from __future__ import annotations

from tokendiff.catalog.filters import filter_tokens, is_excluded
from tokendiff.catalog.flatten import flatten_tokens
from tokendiff.catalog.models import NodeKind, TokenNode
from tokendiff.config.models import TokenFilters


def _token(name: str, path: str) -> TokenNode:
    return TokenNode(name=name, kind=NodeKind.TOKEN, path=path)


def _group(name: str, *children: TokenNode) -> TokenNode:
    return TokenNode(name=name, kind=NodeKind.GROUP, children=list(children))


def _tree() -> list[TokenNode]:
    return [
        _group(
            "Background",
            _token("primary", "Background/primary"),
            _token("primary_hover", "Background/primary_hover"),
            _token("#internal", "Background/#internal"),
        ),
        _group("Utility", _token("focus-ring", "Utility/focus-ring")),
    ]


def _paths(tree: list[TokenNode]) -> list[str]:
    return [t.key for t in flatten_tokens(tree)]


class TestIsExcluded:
    """Tests for is_excluded."""

    def test_hash_prefix(self) -> None:
        filters = TokenFilters(exclude_tokens_starting_with_hash=True)
        assert is_excluded(_token("#x", "A/#x"), filters)
        assert not is_excluded(_token("x", "A/x"), filters)

    def test_hover_suffix(self) -> None:
        filters = TokenFilters(exclude_tokens_ending_with_hover=True)
        assert is_excluded(_token("bg_hover", "A/bg_hover"), filters)
        assert not is_excluded(_token("bg-hover", "A/bg-hover"), filters)

    def test_utility_group_is_case_insensitive(self) -> None:
        filters = TokenFilters(exclude_utility_group=True)
        assert is_excluded(_group("utility"), filters)
        assert is_excluded(_group(" UTILITY "), filters)

    def test_utility_token_is_not_a_group(self) -> None:
        """Only groups named Utility are dropped, not tokens with that name."""
        filters = TokenFilters(exclude_utility_group=True)
        assert not is_excluded(_token("Utility", "A/Utility"), filters)


class TestFilterTokens:
    """Tests for filter_tokens."""

    def test_no_filters_returns_everything(self) -> None:
        tree = _tree()
        assert _paths(filter_tokens(tree, None)) == _paths(tree)
        assert _paths(filter_tokens(tree, TokenFilters())) == _paths(tree)

    def test_all_filters(self) -> None:
        filters = TokenFilters(
            exclude_tokens_starting_with_hash=True,
            exclude_tokens_ending_with_hover=True,
            exclude_utility_group=True,
        )
        assert _paths(filter_tokens(_tree(), filters)) == ["Background/primary"]

    def test_utility_subtree_removed(self) -> None:
        filters = TokenFilters(exclude_utility_group=True)
        result = filter_tokens(_tree(), filters)
        assert [n.name for n in result] == ["Background"]

    def test_input_not_mutated(self) -> None:
        tree = _tree()
        before = _paths(tree)

        filter_tokens(tree, TokenFilters(exclude_tokens_ending_with_hover=True))

        assert _paths(tree) == before
