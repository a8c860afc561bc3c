"""Last-resort display defaults for a generated kit."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..models.schemas import BrandKitPreview

DEFAULT_BRAND_NAME = "Your Brand"
DEFAULT_HEADING_FONT = "Poppins"
DEFAULT_BODY_FONT = "Inter"
DEFAULT_PERSONALITY = "A distinctive brand with a clear personality and tone of voice."


def _text_or(value: Any, default: str) -> str:
    if isinstance(value, str) and value:
        return value
    return default


def apply_display_defaults(kit: Mapping[str, Any], brand_name: Optional[str] = None) -> BrandKitPreview:
    """Fill every field a renderer needs, keeping whatever the kit already has."""
    colors = kit.get("colors")
    return BrandKitPreview(
        brand_name=brand_name or DEFAULT_BRAND_NAME,
        colors=[c for c in colors if isinstance(c, str)] if isinstance(colors, list) else [],
        heading_font=_text_or(kit.get("headingFont"), DEFAULT_HEADING_FONT),
        body_font=_text_or(kit.get("bodyFont"), DEFAULT_BODY_FONT),
        personality=_text_or(kit.get("personality"), DEFAULT_PERSONALITY),
    )
