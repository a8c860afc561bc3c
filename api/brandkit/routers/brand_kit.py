from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from ..core.config import load_settings
from ..models.schemas import BrandBrief, BrandKit, BrandKitPreview, ErrorResponse
from ..services.generation import GenerationService
from ..services.presentation import apply_display_defaults

router = APIRouter(prefix="/api/generate-brand-kit", tags=["brand-kit"])

_ERROR_RESPONSES: Dict[int, Dict[str, Any]] = {500: {"model": ErrorResponse}}


def get_generation_service() -> GenerationService:
    """Build the service from a fresh settings snapshot, once per request."""
    return GenerationService.from_settings(load_settings())


@router.post("", response_model=BrandKit, responses=_ERROR_RESPONSES)
async def generate_brand_kit(
    brief: BrandBrief = Body(...),
    service: GenerationService = Depends(get_generation_service),
):
    """
    Generate a brand kit from a free-text brief.

    The decoded provider object is returned as-is; failures become a 500
    with a fixed `{"error": ...}` message.
    """
    kit = await service.generate(brief)
    return JSONResponse(content=kit)


@router.post("/preview", response_model=BrandKitPreview, responses=_ERROR_RESPONSES)
async def preview_brand_kit(
    brief: BrandBrief = Body(...),
    service: GenerationService = Depends(get_generation_service),
):
    """Generate a kit and fill in display defaults for any missing field."""
    kit = await service.generate(brief)
    preview = apply_display_defaults(kit, brand_name=brief.brand_name)
    return JSONResponse(content=preview.model_dump(by_alias=True))
