"""Load exported token catalogs from JSON.

Two document shapes are accepted:

- the current export: ``{"metadata": {...}, "tokens": [...]}``
- the legacy bare array of nodes, which gets placeholder metadata.

Every failure is reported as a CatalogError here, before anything reaches
the comparison engine.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import structlog
from pydantic import ValidationError

from tokendiff.catalog.models import TokenExport, TokenMetadata, TokenNode
from tokendiff.core.errors import CatalogError

log = structlog.get_logger(__name__)

LEGACY_METADATA = TokenMetadata(exported_at="", timestamp=0, version="unknown", generator="legacy")


def parse_catalog(data: Any, source: str = "<memory>") -> TokenExport:
    """Validate an already-decoded JSON value into a TokenExport."""
    try:
        if isinstance(data, list):
            tokens = [TokenNode.model_validate(item) for item in data]
            log.debug("legacy_catalog_format", source=source, roots=len(tokens))
            return TokenExport(metadata=LEGACY_METADATA, tokens=tokens)
        if isinstance(data, dict):
            return TokenExport.model_validate(data)
    except ValidationError as e:
        err = e.errors()[0]
        location = ".".join(str(loc) for loc in err["loc"]) or "<root>"
        raise CatalogError.invalid_structure(source, location, err["msg"]) from e

    raise CatalogError.invalid_structure(
        source, "<root>", f"expected an object or an array, got {type(data).__name__}"
    )


def parse_catalog_text(text: str, source: str = "<memory>") -> TokenExport:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise CatalogError.parse_error(source, str(e)) from e
    return parse_catalog(data, source)


def load_catalog(path: Path) -> TokenExport:
    """Read and validate a catalog file."""
    if not path.is_file():
        raise CatalogError.file_not_found(str(path))
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogError.parse_error(str(path), str(e)) from e

    catalog = parse_catalog_text(text, str(path))
    log.debug(
        "catalog_loaded",
        path=str(path),
        version=catalog.metadata.version,
        roots=len(catalog.tokens),
    )
    return catalog
