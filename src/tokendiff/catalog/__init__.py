"""Token catalog package: models, flattening, filtering and loading."""

from tokendiff.catalog.filters import filter_tokens, is_excluded
from tokendiff.catalog.flatten import (
    count_leaf_tokens,
    find_token_by_path,
    flatten_all_nodes,
    flatten_tokens,
    index_tokens,
    key_of,
)
from tokendiff.catalog.loader import load_catalog, parse_catalog, parse_catalog_text
from tokendiff.catalog.models import (
    APPEARANCES,
    DARK,
    KNOWN_BRANDS,
    LEGACY_BRAND,
    LIGHT,
    NEW_BRAND,
    Appearance,
    ColorValue,
    NodeKind,
    TokenExport,
    TokenMetadata,
    TokenNode,
    brand_order,
)

__all__ = [
    "APPEARANCES",
    "DARK",
    "KNOWN_BRANDS",
    "LEGACY_BRAND",
    "LIGHT",
    "NEW_BRAND",
    "Appearance",
    "ColorValue",
    "NodeKind",
    "TokenExport",
    "TokenMetadata",
    "TokenNode",
    "brand_order",
    "count_leaf_tokens",
    "filter_tokens",
    "find_token_by_path",
    "flatten_all_nodes",
    "flatten_tokens",
    "index_tokens",
    "is_excluded",
    "key_of",
    "load_catalog",
    "parse_catalog",
    "parse_catalog_text",
]
