"""Pydantic models for exported token catalogs.

The JSON document produced by the exporter looks like::

    {
      "metadata": {"exportedAt": ..., "timestamp": ..., "version": ..., "generator": ...},
      "tokens": [TokenNode, ...]
    }

Nodes are either groups (``children``) or tokens (``modes``). The models
do not enforce that split; the flattener relies on ``kind`` alone.
"""

from collections.abc import Iterable
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

LEGACY_BRAND = "Legacy"
NEW_BRAND = "New Brand"
KNOWN_BRANDS: tuple[str, ...] = (LEGACY_BRAND, NEW_BRAND)

LIGHT = "light"
DARK = "dark"
APPEARANCES: tuple[str, ...] = (LIGHT, DARK)


class NodeKind(StrEnum):
    TOKEN = "token"
    GROUP = "group"


class ColorValue(BaseModel):
    """A resolved color: hex string plus the primitive it was taken from."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    hex: str
    primitive_name: str = Field(default="", alias="primitiveName")


class Appearance(BaseModel):
    """Light/dark pair for one brand."""

    model_config = ConfigDict(frozen=True)

    light: ColorValue | None = None
    dark: ColorValue | None = None

    def color_for(self, appearance: str) -> ColorValue | None:
        if appearance == LIGHT:
            return self.light
        if appearance == DARK:
            return self.dark
        return None


class TokenNode(BaseModel):
    """A node of the hierarchical catalog."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str
    kind: NodeKind = Field(alias="type")
    path: str | None = None
    modes: dict[str, Appearance] | None = None
    children: list["TokenNode"] | None = None

    @property
    def key(self) -> str:
        """Leaf key used to match tokens across two catalog versions."""
        return self.path if self.path is not None else self.name

    @property
    def is_token(self) -> bool:
        return self.kind == NodeKind.TOKEN


class TokenMetadata(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    exported_at: str = Field(default="", alias="exportedAt")
    timestamp: int = 0
    version: str = "unknown"
    generator: str = ""


class TokenExport(BaseModel):
    """A whole exported catalog document."""

    model_config = ConfigDict(frozen=True)

    metadata: TokenMetadata = Field(default_factory=TokenMetadata)
    tokens: list[TokenNode] = Field(default_factory=list)


def brand_order(brands: Iterable[str]) -> list[str]:
    """Stable iteration order: known brands first, then the rest alphabetically."""
    present = set(brands)
    known = [b for b in KNOWN_BRANDS if b in present]
    others = sorted(present.difference(KNOWN_BRANDS))
    return known + others
