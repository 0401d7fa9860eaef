"""Hex/RGB/HSL conversion and perceptual color deltas.

Every function here is total: malformed hex strings resolve to a fully
transparent black instead of raising, so delta and similarity scoring
never abort a comparison.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import StrEnum

_EDGE_JUNK = re.compile(r"^[^0-9A-Za-z]+|[^0-9A-Za-z]+$")
_HEX_DIGITS = re.compile(r"^[0-9A-Fa-f]+$")

# Magnitude weights: lightness is the most noticeable, then saturation, then hue.
LIGHTNESS_WEIGHT = 1.5
SATURATION_WEIGHT = 1.0
HUE_WEIGHT = 0.8
MAX_MAGNITUDE = 100.0


@dataclass(frozen=True, slots=True)
class RGBA:
    """Color channels normalized to [0, 1]."""

    r: float
    g: float
    b: float
    a: float = 1.0


@dataclass(frozen=True, slots=True)
class HSL:
    h: float  # degrees, [0, 360)
    s: float  # [0, 1]
    l: float  # noqa: E741  [0, 1]


TRANSPARENT = RGBA(0.0, 0.0, 0.0, 0.0)


def normalize_hex(value: str) -> str:
    """Strip '#' and any other non-alphanumeric edge characters."""
    return _EDGE_JUNK.sub("", value)


def parse_hex(value: str) -> RGBA:
    """Parse ``RGB``, ``RRGGBB`` or ``RRGGBBAA`` (with or without '#')."""
    digits = normalize_hex(value)
    if len(digits) not in (3, 6, 8) or not _HEX_DIGITS.match(digits):
        return TRANSPARENT

    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    channels = [int(digits[i : i + 2], 16) / 255 for i in range(0, len(digits), 2)]
    if len(channels) == 3:
        channels.append(1.0)
    return RGBA(*channels)


def rgb_to_hsl(color: RGBA) -> HSL:
    r, g, b = color.r, color.g, color.b
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    lightness = (max_c + min_c) / 2

    if max_c == min_c:
        return HSL(0.0, 0.0, lightness)  # achromatic

    d = max_c - min_c
    saturation = d / (2 - max_c - min_c) if lightness > 0.5 else d / (max_c + min_c)

    if max_c == r:
        hue = (g - b) / d + (6 if g < b else 0)
    elif max_c == g:
        hue = (b - r) / d + 2
    else:
        hue = (r - g) / d + 4

    return HSL(hue * 60, saturation, lightness)


def hex_to_hsl(value: str) -> HSL:
    return rgb_to_hsl(parse_hex(value))


class ColorClassification(StrEnum):
    MINIMAL = "minimal"
    SUBTLE = "subtle"
    MODERATE = "moderate"
    MAJOR = "major"

    @property
    def label(self) -> str:
        return self.value.capitalize()


def classify_magnitude(magnitude: float) -> ColorClassification:
    """Bucket a magnitude: <5 minimal, <15 subtle, <30 moderate, else major."""
    if magnitude < 5:
        return ColorClassification.MINIMAL
    if magnitude < 15:
        return ColorClassification.SUBTLE
    if magnitude < 30:
        return ColorClassification.MODERATE
    return ColorClassification.MAJOR


@dataclass(frozen=True, slots=True)
class ColorDelta:
    """Difference between two colors in HSL space."""

    hue_delta: float  # degrees, [-180, 180]
    saturation_delta: float  # percentage points
    lightness_delta: float  # percentage points
    magnitude: float  # [0, 100]

    @property
    def classification(self) -> ColorClassification:
        return classify_magnitude(self.magnitude)

    @property
    def description(self) -> str:
        """Human-readable summary of the noticeable components."""
        parts: list[str] = []
        if abs(self.lightness_delta) >= 5:
            parts.append(f"Lightness {_signed(self.lightness_delta)}%")
        if abs(self.saturation_delta) >= 5:
            parts.append(f"Saturation {_signed(self.saturation_delta)}%")
        if abs(self.hue_delta) >= 10:
            parts.append(f"Hue {_signed(self.hue_delta)}°")
        if not parts:
            return "Minimal change"
        return ", ".join(parts)

    def to_dict(self) -> dict[str, float | str]:
        return {
            "hue_delta": round(self.hue_delta, 2),
            "saturation_delta": round(self.saturation_delta, 2),
            "lightness_delta": round(self.lightness_delta, 2),
            "magnitude": round(self.magnitude, 2),
            "classification": self.classification.value,
            "description": self.description,
        }


def _signed(value: float) -> str:
    truncated = int(value)
    return f"+{truncated}" if value > 0 else str(truncated)


def wrap_hue(delta: float) -> float:
    """Wrap a hue difference into [-180, 180]."""
    if delta > 180:
        delta -= 360
    if delta < -180:
        delta += 360
    return delta


def calculate_delta(old_hex: str, new_hex: str) -> ColorDelta:
    old = hex_to_hsl(old_hex)
    new = hex_to_hsl(new_hex)

    hue_delta = wrap_hue(new.h - old.h)
    saturation_delta = (new.s - old.s) * 100
    lightness_delta = (new.l - old.l) * 100

    # Hue is rescaled from degrees to a 0-100 range before weighting.
    magnitude = math.sqrt(
        (lightness_delta * LIGHTNESS_WEIGHT) ** 2
        + (saturation_delta * SATURATION_WEIGHT) ** 2
        + (hue_delta / 3.6 * HUE_WEIGHT) ** 2
    )

    return ColorDelta(
        hue_delta=hue_delta,
        saturation_delta=saturation_delta,
        lightness_delta=lightness_delta,
        magnitude=min(magnitude, MAX_MAGNITUDE),
    )
