"""
Block records and the read-only catalog that holds them.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional, Tuple

import numpy as np

from blockpalette.color.color import Color
from blockpalette.color.similarity import SimilarityMetric

logger = logging.getLogger("blockpalette.block_utils.catalog")


@dataclass(frozen=True)
class BlockRecord:
    """
    A single block: identifier, its state properties and an optional color.

    Properties are stored as an ordered tuple of (name, allowed values) pairs
    and the default state as (name, value) pairs so records stay hashable.
    """

    id: str
    properties: Tuple[Tuple[str, Tuple[str, ...]], ...] = ()
    default_state: Tuple[Tuple[str, str], ...] = ()
    color: Optional[Color] = None

    @classmethod
    def create(cls, block_id, properties=None, default_state=None, color=None):
        """
        Build a record from plain dicts.

        Args:
            block_id: Namespaced identifier such as "minecraft:stone"
            properties: Mapping of property name to list of allowed values
            default_state: Mapping of property name to its default value
            color: Color, RGB tuple or None

        Returns:
            BlockRecord
        """
        if color is not None and not isinstance(color, Color):
            color = Color(tuple(color))
        props = tuple((name, tuple(values)) for name, values in (properties or {}).items())
        state = tuple((name, str(value)) for name, value in (default_state or {}).items())
        return cls(block_id, props, state, color)

    @property
    def name(self) -> str:
        """Identifier without its namespace."""
        return self.id.split(":", 1)[-1]

    @property
    def display_name(self) -> str:
        """Human readable name, e.g. "minecraft:red_wool" -> "Red Wool"."""
        return " ".join(word.capitalize() for word in self.name.split("_") if word)

    @property
    def has_color(self) -> bool:
        return self.color is not None

    def has_property(self, name) -> bool:
        return any(prop == name for prop, _ in self.properties)

    def get_property_values(self, name):
        """Allowed values for a property, or None if the block lacks it."""
        for prop, values in self.properties:
            if prop == name:
                return list(values)
        return None

    def get_property(self, name):
        """Default value of a property, or None."""
        for prop, value in self.default_state:
            if prop == name:
                return value
        return None


class BlockCatalog:
    """
    Read-only, insertion-ordered collection of BlockRecord keyed by id.

    The catalog is built once and shared; queries and palette assembly only
    ever hold references to its records.
    """

    def __init__(self, records=()):
        blocks = {}
        for record in records:
            if record.id in blocks:
                logger.debug(f"Duplicate block id {record.id}, keeping the later record")
            blocks[record.id] = record
        self._blocks = MappingProxyType(blocks)
        self._colored = tuple(r for r in blocks.values() if r.color is not None)
        self._colored_index = {r.id: i for i, r in enumerate(self._colored)}
        self._vectors = {}
        for metric in (SimilarityMetric.OKLAB, SimilarityMetric.RGB, SimilarityMetric.LAB):
            matrix = np.array(
                [r.color.vector(metric) for r in self._colored], dtype=float
            ).reshape(-1, 3)
            matrix.setflags(write=False)
            self._vectors[metric] = matrix

    def __len__(self):
        return len(self._blocks)

    def __iter__(self):
        return iter(self._blocks.values())

    def __contains__(self, block_id):
        return block_id in self._blocks

    def __repr__(self):
        return f"BlockCatalog({len(self)} blocks, {len(self._colored)} colored)"

    @property
    def blocks(self):
        """Read-only mapping of id to BlockRecord."""
        return self._blocks

    def get(self, block_id) -> Optional[BlockRecord]:
        return self._blocks.get(block_id)

    def ids(self):
        return list(self._blocks)

    def colored_records(self):
        """Records carrying a color, in catalog order."""
        return self._colored

    def colored_position(self, block_id):
        """Row of a colored record in the vector matrices, or None."""
        return self._colored_index.get(block_id)

    def vectors(self, metric=SimilarityMetric.OKLAB):
        """
        (n, 3) matrix of the colored records' coordinates for a metric.

        Returns None for metrics that are not plain Euclidean distances.
        """
        return self._vectors.get(SimilarityMetric(metric))

    def query(self):
        """Start a BlockQuery over every block in the catalog."""
        from blockpalette.query_builder import BlockQuery

        return BlockQuery.all(self)

    def palettes(self):
        """PaletteAssembler bound to this catalog."""
        from blockpalette.palette.assembler import PaletteAssembler

        return PaletteAssembler(self)
