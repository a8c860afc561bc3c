"""Pydantic models for the brand kit API.

Field names follow the camelCase wire format used by the web client; Python
code uses the snake_case attribute names.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class BrandBrief(BaseModel):
    """Free-text description of a brand, every field optional."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
        frozen=True,
    )

    brand_name: Optional[str] = Field(
        None,
        alias="brandName",
        description="Name of the brand",
        examples=["Lunar Studio"],
    )
    industry: Optional[str] = Field(
        None,
        description="Industry or niche",
        examples=["fitness coaching"],
    )
    adjectives: Optional[str] = Field(
        None,
        description="Words describing the desired feel",
        examples=["bold, playful, modern"],
    )
    audience: Optional[str] = Field(
        None,
        description="Target audience",
        examples=["busy founders"],
    )


class BrandKit(BaseModel):
    """Shape the provider is asked to return."""

    model_config = ConfigDict(populate_by_name=True)

    colors: List[str] = Field(
        default_factory=list,
        description="Palette as hex color codes, five expected",
        examples=[["#111111", "#222222", "#333333", "#444444", "#555555"]],
    )
    heading_font: Optional[str] = Field(None, alias="headingFont", examples=["Poppins"])
    body_font: Optional[str] = Field(None, alias="bodyFont", examples=["Inter"])
    personality: Optional[str] = Field(None, examples=["Bold and modern."])


class BrandKitPreview(BaseModel):
    """Display-ready kit with every field filled in."""

    model_config = ConfigDict(populate_by_name=True)

    brand_name: str = Field(..., alias="brandName")
    colors: List[str]
    heading_font: str = Field(..., alias="headingFont")
    body_font: str = Field(..., alias="bodyFont")
    personality: str


class ErrorResponse(BaseModel):
    """Body of every failed generation request."""

    error: str = Field(..., examples=["Failed to generate brand kit"])
