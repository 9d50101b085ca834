"""
API route handlers for block queries and gradients.

This module defines the FastAPI endpoints for:
- Listing and filtering catalog blocks
- Generating block gradients between blocks or colors
"""

import logging
from enum import Enum
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from blockpalette import config
from blockpalette.api.dependencies import get_catalog
from blockpalette.api.models import (
    BlockInfo,
    BlockListResponse,
    FilterPreset,
    GradientRequest,
    GradientResponse,
)
from blockpalette.block_utils.block_filters import block_family
from blockpalette.color.color import Color
from blockpalette.models import GradientConfig

# Set up logging
logger = logging.getLogger("blockpalette.api.routes.blocks")

router = APIRouter(prefix="/api", tags=["blocks"])


class BlockSort(str, Enum):
    """Orderings available for block listings."""

    CATALOG = "catalog"
    NAME = "name"
    HUE = "hue"
    LIGHTNESS = "lightness"
    GRADIENT = "gradient"


def block_info(block) -> BlockInfo:
    return BlockInfo(
        id=block.id,
        name=block.display_name,
        color=block.color.hex_string if block.color is not None else None,
        family=block_family(block),
    )


def parse_color(value: str, field: str) -> Color:
    try:
        return Color.from_hex(value)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Invalid {field}: {e}")


@router.get("/blocks", response_model=BlockListResponse)
async def list_blocks(
    pattern: Optional[str] = Query(default=None, description="Id substring or * wildcard"),
    family: Optional[str] = Query(default=None, description="Block family, e.g. wool"),
    colored: bool = Query(default=False, description="Only blocks with a color"),
    filter: FilterPreset = Query(default=FilterPreset.NONE, description="Block filter preset"),
    similar_to: Optional[str] = Query(default=None, description="Reference color #RRGGBB"),
    tolerance: float = Query(
        default=config.DEFAULT_COLOR_TOLERANCE, ge=0, description="Oklab distance tolerance"
    ),
    sort: BlockSort = Query(default=BlockSort.CATALOG, description="Result ordering"),
    limit: int = Query(default=100, ge=0, le=5000, description="Maximum number of blocks"),
    catalog=Depends(get_catalog),
) -> BlockListResponse:
    """
    List catalog blocks matching the given filters.

    Returns:
        Matching blocks in the requested order
    """
    query = catalog.query()
    if colored:
        query = query.with_color()
    if pattern:
        query = query.matching(pattern)
    if family:
        query = query.from_families(family)
    block_filter = filter.to_filter()
    if block_filter is not None:
        query = query.apply_filter(block_filter)
    if similar_to:
        reference = parse_color(similar_to, "similar_to")
        query = query.similar_to_color(reference, tolerance).sort_by_color_similarity(reference)

    if sort is BlockSort.NAME:
        query = query.sort_by_name()
    elif sort is BlockSort.HUE:
        query = query.sort_by_hue()
    elif sort is BlockSort.LIGHTNESS:
        query = query.sort_by_lightness()
    elif sort is BlockSort.GRADIENT:
        query = query.sort_by_color_gradient()

    blocks = [block_info(b) for b in query.limit(limit)]
    return BlockListResponse(blocks=blocks, count=len(blocks))


@router.post("/gradient", response_model=GradientResponse)
async def create_gradient(request: GradientRequest, catalog=Depends(get_catalog)) -> GradientResponse:
    """
    Generate a gradient of distinct blocks between two blocks or two colors.

    Returns:
        Resolved blocks, possibly fewer than the requested steps
    """
    gradient_config = GradientConfig(
        steps=request.steps, color_space=request.color_space, easing=request.easing
    )
    block_filter = request.filter.to_filter()
    query = catalog.query()

    if request.start_block and request.end_block:
        for block_id in (request.start_block, request.end_block):
            if block_id not in catalog:
                raise HTTPException(status_code=404, detail=f"Unknown block: {block_id}")
        result = query.generate_gradient_between_blocks(
            request.start_block, request.end_block, gradient_config, block_filter
        )
    elif request.start_color and request.end_color:
        start = parse_color(request.start_color, "start_color")
        end = parse_color(request.end_color, "end_color")
        result = query.generate_gradient_between_colors(start, end, gradient_config, block_filter)
    else:
        raise HTTPException(
            status_code=400,
            detail="Provide either start_block and end_block or start_color and end_color",
        )

    logger.info(f"Generated gradient with {len(result)} of {request.steps} steps")
    return GradientResponse(
        blocks=[block_info(b) for b in result], requested_steps=request.steps
    )
