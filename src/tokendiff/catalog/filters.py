"""Catalog pruning driven by an explicit TokenFilters object."""

from __future__ import annotations

from collections.abc import Iterable

from tokendiff.catalog.models import TokenNode
from tokendiff.config.models import TokenFilters

UTILITY_GROUP_NAME = "utility"
HOVER_SUFFIX = "_hover"


def is_excluded(node: TokenNode, filters: TokenFilters) -> bool:
    """Whether a single node is dropped by the filters (its subtree with it)."""
    if node.is_token:
        if filters.exclude_tokens_starting_with_hash and node.name.startswith("#"):
            return True
        if filters.exclude_tokens_ending_with_hover and node.name.endswith(HOVER_SUFFIX):
            return True
        return False
    return filters.exclude_utility_group and node.name.strip().lower() == UTILITY_GROUP_NAME


def filter_tokens(tree: Iterable[TokenNode], filters: TokenFilters | None) -> list[TokenNode]:
    """Return a pruned copy of ``tree``. The input is left untouched."""
    nodes = list(tree)
    if filters is None or not filters.is_active:
        return nodes

    kept: list[TokenNode] = []
    for node in nodes:
        if is_excluded(node, filters):
            continue
        if node.children is not None:
            node = node.model_copy(update={"children": filter_tokens(node.children, filters)})
        kept.append(node)
    return kept
