"""
API route handlers for themed and color-relationship palettes.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from blockpalette import config
from blockpalette.api.dependencies import get_catalog
from blockpalette.api.models import FilterPreset, ThemeListResponse
from blockpalette.color.palettes import theme_gradient_names
from blockpalette.export.palette_export import PaletteDocument
from blockpalette.palette.themes import architectural_styles, natural_themes

# Set up logging
logger = logging.getLogger("blockpalette.api.routes.palettes")

router = APIRouter(prefix="/api/palettes", tags=["palettes"])


def palette_response(palette, what: str) -> PaletteDocument:
    if palette is None:
        raise HTTPException(status_code=404, detail=f"No palette available for {what}")
    return palette.to_document()


@router.get("/themes", response_model=ThemeListResponse)
async def list_themes() -> ThemeListResponse:
    """Names accepted by the natural, architectural and gradient endpoints."""
    return ThemeListResponse(
        natural=natural_themes(),
        architectural=architectural_styles(),
        gradients=theme_gradient_names(),
    )


@router.get("/natural/{theme}", response_model=PaletteDocument)
async def natural_palette(
    theme: str,
    filter: FilterPreset = Query(default=FilterPreset.NONE),
    catalog=Depends(get_catalog),
) -> PaletteDocument:
    palette = catalog.palettes().natural(theme, filter.to_filter())
    return palette_response(palette, f"natural theme '{theme}'")


@router.get("/architectural/{style}", response_model=PaletteDocument)
async def architectural_palette(
    style: str,
    filter: FilterPreset = Query(default=FilterPreset.NONE),
    catalog=Depends(get_catalog),
) -> PaletteDocument:
    palette = catalog.palettes().architectural(style, filter.to_filter())
    return palette_response(palette, f"architectural style '{style}'")


@router.get("/gradient/{theme}", response_model=PaletteDocument)
async def theme_gradient_palette(
    theme: str,
    steps: int = Query(default=config.DEFAULT_THEME_STEPS, ge=1, le=64),
    filter: FilterPreset = Query(default=FilterPreset.NONE),
    catalog=Depends(get_catalog),
) -> PaletteDocument:
    palette = catalog.palettes().theme_gradient(theme, steps, filter.to_filter())
    return palette_response(palette, f"gradient theme '{theme}'")


@router.get("/monochrome/{block_id:path}", response_model=PaletteDocument)
async def monochrome_palette(
    block_id: str,
    steps: int = Query(default=config.DEFAULT_MONOCHROME_STEPS, ge=1, le=64),
    filter: FilterPreset = Query(default=FilterPreset.NONE),
    catalog=Depends(get_catalog),
) -> PaletteDocument:
    """
    Tonal palette around a block.

    Returns 404 when the block is unknown or has no color.
    """
    palette = catalog.palettes().monochrome(block_id, steps, filter.to_filter())
    return palette_response(palette, f"block '{block_id}'")


@router.get("/complementary/{block_id:path}", response_model=PaletteDocument)
async def complementary_palette(
    block_id: str,
    filter: FilterPreset = Query(default=FilterPreset.NONE),
    catalog=Depends(get_catalog),
) -> PaletteDocument:
    palette = catalog.palettes().complementary(block_id, filter.to_filter())
    return palette_response(palette, f"block '{block_id}'")
