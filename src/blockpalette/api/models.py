"""
Pydantic models for the Block Palette API.

These models define the data structures used for API requests and responses.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from blockpalette.block_utils.block_filters import BlockFilter
from blockpalette.models import ColorSpace, EasingFunction


class FilterPreset(str, Enum):
    """Named block filters selectable by API clients."""

    NONE = "none"
    SOLID = "solid"
    DECORATIVE = "decorative"
    STRUCTURAL = "structural"

    def to_filter(self) -> Optional[BlockFilter]:
        """Return the BlockFilter for this preset (None for no filtering)."""
        if self is FilterPreset.SOLID:
            return BlockFilter.solid_blocks_only()
        if self is FilterPreset.DECORATIVE:
            return BlockFilter.decorative_blocks()
        if self is FilterPreset.STRUCTURAL:
            return BlockFilter.structural_blocks_only()
        return None


class BlockInfo(BaseModel):
    """A block as returned by the API."""

    id: str = Field(..., description="Block identifier")
    name: str = Field(..., description="Display name")
    color: Optional[str] = Field(default=None, description="Block color as #RRGGBB")
    family: str = Field(..., description="Block family")


class BlockListResponse(BaseModel):
    """Response model for block listings."""

    blocks: List[BlockInfo]
    count: int = Field(..., description="Number of blocks returned")


class GradientRequest(BaseModel):
    """Request model for generating a block gradient."""

    start_block: Optional[str] = Field(default=None, description="Start block id")
    end_block: Optional[str] = Field(default=None, description="End block id")
    start_color: Optional[str] = Field(default=None, description="Start color as #RRGGBB")
    end_color: Optional[str] = Field(default=None, description="End color as #RRGGBB")
    steps: int = Field(default=10, ge=0, le=256, description="Number of gradient steps")
    color_space: ColorSpace = Field(default=ColorSpace.OKLAB, description="Interpolation space")
    easing: EasingFunction = Field(default=EasingFunction.LINEAR, description="Easing curve")
    filter: FilterPreset = Field(default=FilterPreset.NONE, description="Block filter preset")


class GradientResponse(BaseModel):
    """Response model for generated gradients."""

    blocks: List[BlockInfo]
    requested_steps: int = Field(..., description="Number of steps requested")


class ThemeListResponse(BaseModel):
    """Names accepted by the palette endpoints."""

    natural: List[str]
    architectural: List[str]
    gradients: List[str]
