"""
Chainable block queries over a BlockCatalog.

A BlockQuery holds an ordered working set of catalog records. Every filter,
sort or gradient method returns a new BlockQuery and leaves the original
untouched, so partial queries can be shared and branched freely:

    stone = catalog.query().with_color().matching("stone")
    bright = stone.sort_by_lightness().collect()
"""

import logging

from blockpalette.block_utils import block_filters
from blockpalette.block_utils.color_chain import sort_by_color_chain
from blockpalette.block_utils.color_matcher import resolve_gradient
from blockpalette.color.gradients import gradient_from_config, multi_gradient_from_config
from blockpalette.color.similarity import SimilarityMetric, color_distance
from blockpalette.models import GradientConfig

logger = logging.getLogger("blockpalette.query_builder")


class BlockQuery:
    """Immutable working set of block records drawn from one catalog."""

    __slots__ = ("_catalog", "_blocks", "_metric")

    def __init__(self, catalog, blocks=None, metric=SimilarityMetric.OKLAB):
        """
        Args:
            catalog: BlockCatalog the query draws from
            blocks: Optional initial working set; records that are not the
                catalog's own record for their id are dropped
            metric: SimilarityMetric for similarity, sorting and gradients
        """
        self._catalog = catalog
        if blocks is None:
            self._blocks = tuple(catalog)
        else:
            self._blocks = tuple(b for b in blocks if catalog.get(b.id) is b)
        self._metric = SimilarityMetric(metric)

    @classmethod
    def all(cls, catalog):
        """Start a query with every block of the catalog."""
        return cls(catalog)

    def _derive(self, blocks):
        return BlockQuery(self._catalog, blocks, self._metric)

    @property
    def catalog(self):
        return self._catalog

    @property
    def metric(self):
        return self._metric

    def using_metric(self, metric):
        """Use another distance metric for similarity, sorting and gradients."""
        return BlockQuery(self._catalog, self._blocks, metric)

    # Filtering

    def where(self, predicate):
        """Keep blocks for which predicate(block) is true."""
        return self._derive(b for b in self._blocks if predicate(b))

    def only_solid(self):
        """Drop slabs, stairs, fences and other partial shapes."""
        return self.where(block_filters.is_full_block)

    def exclude_tile_entities(self):
        return self.where(lambda b: not block_filters.is_tile_entity(b))

    def exclude_falling(self):
        return self.where(lambda b: not block_filters.is_falling_block(b))

    def exclude_transparent(self):
        return self.where(lambda b: not block_filters.is_transparent(b))

    def exclude_light_sources(self):
        return self.where(lambda b: not block_filters.is_light_source(b))

    def exclude_needs_support(self):
        return self.where(lambda b: not block_filters.needs_support(b))

    def survival_only(self):
        return self.where(block_filters.is_survival_obtainable)

    def with_color(self):
        return self.where(lambda b: b.color is not None)

    def with_property(self, name):
        return self.where(lambda b: b.has_property(name))

    def with_property_value(self, name, value):
        """Keep blocks whose default state or allowed values include the value."""
        value = str(value)

        def has_value(block):
            if block.get_property(name) == value:
                return True
            return value in (block.get_property_values(name) or ())

        return self.where(has_value)

    def matching(self, pattern):
        """Keep blocks whose id contains the pattern ("*" acts as a wildcard)."""
        return self.where(lambda b: block_filters.matches_pattern(b.id, pattern))

    def from_families(self, *families):
        wanted = {f.lower() for f in families}
        return self.where(lambda b: block_filters.block_family(b) in wanted)

    def exclude_families(self, *families):
        unwanted = {f.lower() for f in families}
        return self.where(lambda b: block_filters.block_family(b) not in unwanted)

    def similar_to_color(self, target, tolerance):
        """
        Keep colored blocks within `tolerance` of the target color.

        The tolerance is in the units of the active metric (Oklab by default).
        """
        return self.where(
            lambda b: b.color is not None
            and color_distance(b.color, target, self._metric) <= tolerance
        )

    def apply_filter(self, block_filter):
        """Keep blocks allowed by a BlockFilter."""
        return self.where(block_filter.allows)

    def limit(self, count):
        return self._derive(self._blocks[: max(0, count)])

    # Sorting

    def sort_by_name(self):
        return self._derive(sorted(self._blocks, key=lambda b: b.id))

    def _sort_colored(self, key):
        # Blocks without a color keep their relative order at the end
        colored = [b for b in self._blocks if b.color is not None]
        uncolored = [b for b in self._blocks if b.color is None]
        return self._derive(sorted(colored, key=key) + uncolored)

    def sort_by_color_similarity(self, reference):
        """Nearest to the reference color first."""
        return self._sort_colored(lambda b: color_distance(b.color, reference, self._metric))

    def sort_by_hue(self):
        return self._sort_colored(lambda b: b.color.hue)

    def sort_by_lightness(self):
        return self._sort_colored(lambda b: b.color.lightness)

    def sort_by_color_gradient(self):
        """
        Reorder the colored blocks into a smooth chain of similar colors.

        Blocks without a color are dropped.
        """
        return self._derive(sort_by_color_chain(self._blocks, self._metric))

    # Gradients

    def _colored_blocks(self):
        return [b for b in self._blocks if b.color is not None]

    def _resolve(self, targets, block_filter=None):
        predicate = block_filter.allows if block_filter is not None else None
        blocks = resolve_gradient(
            targets, self._catalog, self._metric, unique=True, predicate=predicate
        )
        if len(blocks) < len(targets):
            logger.debug(f"Resolved {len(blocks)} of {len(targets)} gradient steps")
        return self._derive(blocks)

    def generate_gradient(self, config=None, block_filter=None):
        """
        Gradient between the first and last colored blocks of the working set.

        Each gradient color is resolved to the closest catalog block not used
        earlier in the same gradient.

        Args:
            config: GradientConfig (defaults to 10 Oklab steps)
            block_filter: Optional BlockFilter restricting the resolved blocks

        Returns:
            BlockQuery holding at most config.steps blocks
        """
        config = config or GradientConfig()
        colored = self._colored_blocks()
        if len(colored) < 2:
            return self._derive(colored[: min(config.steps, 1)])
        return self.generate_gradient_between_colors(
            colored[0].color, colored[-1].color, config, block_filter
        )

    def generate_gradient_between_colors(self, start, end, config=None, block_filter=None):
        """Gradient between two arbitrary colors, resolved to catalog blocks."""
        config = config or GradientConfig()
        return self._resolve(gradient_from_config(start, end, config), block_filter)

    def generate_gradient_between_blocks(self, start_id, end_id, config=None, block_filter=None):
        """
        Gradient between the colors of two catalog blocks.

        Returns an empty query when either block is unknown or has no color.
        """
        start = self._catalog.get(start_id)
        end = self._catalog.get(end_id)
        if start is None or end is None or start.color is None or end.color is None:
            return self._derive(())
        return self.generate_gradient_between_colors(start.color, end.color, config, block_filter)

    def generate_multi_gradient(self, config=None, block_filter=None):
        """
        Gradient passing through the color of every colored block in order.

        Returns:
            BlockQuery holding at most config.steps distinct blocks
        """
        config = config or GradientConfig()
        colored = self._colored_blocks()
        if len(colored) < 2:
            return self._derive(colored[: min(config.steps, 1)])
        targets = multi_gradient_from_config([b.color for b in colored], config)
        return self._resolve(targets, block_filter)

    # Terminals

    def collect(self):
        """The working set as a list of BlockRecord objects."""
        return list(self._blocks)

    def ids(self):
        return [b.id for b in self._blocks]

    def count(self):
        return len(self._blocks)

    def first(self):
        return self._blocks[0] if self._blocks else None

    def any(self):
        return bool(self._blocks)

    def is_empty(self):
        return not self._blocks

    def __len__(self):
        return len(self._blocks)

    def __iter__(self):
        return iter(self._blocks)

    def __repr__(self):
        return f"BlockQuery({len(self._blocks)} blocks, metric={self._metric.value})"
