"""Decode and check the provider's completion text.

Decoding is strict: anything that is not a single JSON object is an
`InvalidOutputError`, and no attempt is made to dig JSON out of surrounding
prose. What happens after a successful decode depends on `ValidationMode`.
"""

from __future__ import annotations

import json
import re
from enum import Enum
from typing import Any, Dict

from ..models.exceptions import InvalidOutputError
from .guardrails import validate_contract
from .presentation import DEFAULT_BODY_FONT, DEFAULT_HEADING_FONT, DEFAULT_PERSONALITY

BRAND_KIT_CONTRACT = "brand_kit.json"
PALETTE_SIZE = 5

_HEX_COLOR = re.compile(r"^#(?:[0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})$")


class ValidationMode(str, Enum):
    """How strictly a decoded kit is checked."""
    PASS_THROUGH = "pass_through"
    COERCE = "coerce"
    REJECT = "reject"

    @classmethod
    def parse(cls, value: str | None) -> "ValidationMode":
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.PASS_THROUGH


def decode_output(raw: str) -> Dict[str, Any]:
    try:
        decoded = json.loads(raw)
    except json.JSONDecodeError as e:
        raise InvalidOutputError(
            message=f"Failed to parse AI JSON: {e}",
            details={"raw_content": raw},
        ) from e

    if not isinstance(decoded, dict):
        raise InvalidOutputError(
            message=f"AI JSON is a {type(decoded).__name__}, not an object",
            details={"raw_content": raw},
        )
    return decoded


def _non_blank_or(value: Any, default: str) -> str:
    if isinstance(value, str) and value.strip():
        return value
    return default


def coerce_brand_kit(decoded: Dict[str, Any]) -> Dict[str, Any]:
    colors = decoded.get("colors")
    if not isinstance(colors, list):
        colors = []
    palette = [c for c in colors if isinstance(c, str) and _HEX_COLOR.match(c)][:PALETTE_SIZE]

    return {
        "colors": palette,
        "headingFont": _non_blank_or(decoded.get("headingFont"), DEFAULT_HEADING_FONT),
        "bodyFont": _non_blank_or(decoded.get("bodyFont"), DEFAULT_BODY_FONT),
        "personality": _non_blank_or(decoded.get("personality"), DEFAULT_PERSONALITY),
    }


class ResponseValidator:
    """Turn raw completion text into a brand kit object."""

    def __init__(self, mode: ValidationMode = ValidationMode.PASS_THROUGH):
        self.mode = mode

    def validate(self, raw: str) -> Dict[str, Any]:
        decoded = decode_output(raw)

        if self.mode is ValidationMode.REJECT:
            validate_contract(BRAND_KIT_CONTRACT, decoded)
            return decoded
        if self.mode is ValidationMode.COERCE:
            return coerce_brand_kit(decoded)
        return decoded
