"""Tree flattening and lookup helpers.

Catalog trees are plain owned values (no cycles), so traversal is a
direct pre-order recursion over ``children``.
"""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from tokendiff.catalog.models import TokenNode

log = structlog.get_logger(__name__)


def key_of(node: TokenNode) -> str:
    """Resolved identity of a token: its path, falling back to its name."""
    return node.key


def flatten_tokens(tree: Iterable[TokenNode]) -> list[TokenNode]:
    """Pre-order list of Token nodes. Groups are traversed but dropped."""
    result: list[TokenNode] = []
    _collect(tree, result, include_groups=False)
    return result


def flatten_all_nodes(tree: Iterable[TokenNode]) -> list[TokenNode]:
    """Pre-order list of every node, parents before their children."""
    result: list[TokenNode] = []
    _collect(tree, result, include_groups=True)
    return result


def _collect(nodes: Iterable[TokenNode], out: list[TokenNode], *, include_groups: bool) -> None:
    for node in nodes:
        if node.is_token or include_groups:
            out.append(node)
        if node.children:
            _collect(node.children, out, include_groups=include_groups)


def count_leaf_tokens(tree: Iterable[TokenNode]) -> int:
    return len(flatten_tokens(tree))


def find_token_by_path(path: str, tree: Iterable[TokenNode] | None) -> TokenNode | None:
    """First node (pre-order) whose resolved key equals ``path``."""
    if tree is None:
        return None
    for node in tree:
        if key_of(node) == path:
            return node
        if node.children:
            found = find_token_by_path(path, node.children)
            if found is not None:
                return found
    return None


def index_tokens(tokens: Iterable[TokenNode]) -> dict[str, TokenNode]:
    """Key tokens by resolved path.

    Duplicate keys keep the first occurrence; later ones are dropped and
    logged so a malformed catalog still compares.
    """
    index: dict[str, TokenNode] = {}
    for token in tokens:
        key = key_of(token)
        if key in index:
            log.warning("duplicate_token_key", key=key, kept="first")
            continue
        index[key] = token
    return index
