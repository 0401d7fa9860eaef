"""Pure structural diff of two token catalogs.

Tokens are matched by resolved path only. A token that keeps its path
but changes colors is a modification; a token whose path changes shows
up as one removal plus one addition (the suggestion engine proposes the
link between them). No I/O, no shared state.

Change types:
- added: key present only in the new catalog
- removed: key present only in the old catalog
- modified: key in both, at least one (brand, appearance) hex differs
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import structlog

from tokendiff.catalog.flatten import flatten_tokens, index_tokens
from tokendiff.catalog.models import APPEARANCES, Appearance, TokenNode, brand_order
from tokendiff.diff.models import (
    ColorChange,
    ComparisonChanges,
    TokenModification,
    TokenSummary,
)

log = structlog.get_logger(__name__)


def compare_tokens(old: Sequence[TokenNode], new: Sequence[TokenNode]) -> ComparisonChanges:
    """Compare two catalog trees.

    Args:
        old: root nodes of the previous catalog
        new: root nodes of the next catalog

    Returns:
        ComparisonChanges with added/removed/modified populated and both
        suggestion overlays empty. Lists follow pre-order of their source
        tree (``modified`` follows the old tree).
    """
    old_map = index_tokens(flatten_tokens(old))
    new_map = index_tokens(flatten_tokens(new))

    added = [TokenSummary.from_node(node) for key, node in new_map.items() if key not in old_map]
    removed = [TokenSummary.from_node(node) for key, node in old_map.items() if key not in new_map]

    modified: list[TokenModification] = []
    for key, old_node in old_map.items():
        new_node = new_map.get(key)
        if new_node is None or not old_node.modes or not new_node.modes:
            continue
        color_changes = find_color_changes(old_node.modes, new_node.modes)
        if color_changes:
            modified.append(
                TokenModification(path=key, name=old_node.name, color_changes=color_changes)
            )

    log.debug(
        "tokens_compared",
        old_tokens=len(old_map),
        new_tokens=len(new_map),
        added=len(added),
        removed=len(removed),
        modified=len(modified),
    )
    return ComparisonChanges(added=tuple(added), removed=tuple(removed), modified=tuple(modified))


def find_color_changes(
    old_modes: Mapping[str, Appearance],
    new_modes: Mapping[str, Appearance],
) -> tuple[ColorChange, ...]:
    """Slots defined on both sides whose hex strings differ.

    Hex values are compared as exact strings: ``#ff0000`` and ``#FF0000``
    count as a change.
    """
    changes: list[ColorChange] = []
    for brand in brand_order(old_modes.keys() & new_modes.keys()):
        old_appearance = old_modes[brand]
        new_appearance = new_modes[brand]
        for appearance in APPEARANCES:
            old_color = old_appearance.color_for(appearance)
            new_color = new_appearance.color_for(appearance)
            if old_color is None or new_color is None:
                continue
            if old_color.hex != new_color.hex:
                changes.append(
                    ColorChange(
                        brand=brand,
                        appearance=appearance,
                        old_hex=old_color.hex,
                        new_hex=new_color.hex,
                    )
                )
    return tuple(changes)
