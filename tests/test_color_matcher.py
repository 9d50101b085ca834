"""Tests for nearest-match resolution and color chain ordering."""

from blockpalette.block_utils.color_chain import sort_by_color_chain
from blockpalette.block_utils.color_matcher import (
    find_blocks_by_color_range,
    find_closest_block,
    resolve_gradient,
)
from blockpalette.color.color import Color
from blockpalette.color.similarity import SimilarityMetric

RED = Color((255, 0, 0))


class TestFindClosestBlock:
    def test_exact_match(self, catalog):
        target = catalog.get("minecraft:red_wool").color
        assert find_closest_block(target, catalog).id == "minecraft:red_wool"

    def test_ties_go_to_catalog_order(self, make_catalog):
        catalog = make_catalog(
            ("minecraft:first", (200, 0, 0)),
            ("minecraft:second", (200, 0, 0)),
        )
        assert find_closest_block(RED, catalog).id == "minecraft:first"

    def test_equidistant_colors_go_to_catalog_order(self, make_catalog):
        catalog = make_catalog(
            ("minecraft:darker", (90, 100, 100)),
            ("minecraft:lighter", (110, 100, 100)),
        )
        target = Color((100, 100, 100))
        assert find_closest_block(target, catalog, SimilarityMetric.RGB).id == "minecraft:darker"

    def test_skips_uncolored(self, make_catalog):
        catalog = make_catalog(("minecraft:air", None), ("minecraft:stone", (126, 126, 126)))
        assert find_closest_block(RED, catalog).id == "minecraft:stone"

    def test_nothing_colored(self, make_catalog, empty_catalog):
        assert find_closest_block(RED, empty_catalog) is None
        assert find_closest_block(RED, make_catalog(("minecraft:air", None))) is None

    def test_exclude_ids_and_predicate(self, make_catalog):
        catalog = make_catalog(
            ("minecraft:red", (250, 0, 0)),
            ("minecraft:dark_red", (150, 0, 0)),
            ("minecraft:blue", (0, 0, 250)),
        )
        assert find_closest_block(RED, catalog, exclude_ids=["minecraft:red"]).id == "minecraft:dark_red"
        only_blue = find_closest_block(RED, catalog, predicate=lambda b: "blue" in b.id)
        assert only_blue.id == "minecraft:blue"
        assert find_closest_block(RED, catalog, predicate=lambda b: False) is None

    def test_hsl_metric(self, make_catalog):
        catalog = make_catalog(("minecraft:green", (0, 200, 0)), ("minecraft:red", (200, 0, 0)))
        assert find_closest_block(RED, catalog, SimilarityMetric.HSL).id == "minecraft:red"


class TestFindBlocksByColorRange:
    def test_nearest_first_and_capped(self, make_catalog):
        catalog = make_catalog(
            ("minecraft:far", (200, 0, 0)),
            ("minecraft:exact", (255, 0, 0)),
            ("minecraft:near", (250, 0, 0)),
            ("minecraft:blue", (0, 0, 255)),
        )
        found = find_blocks_by_color_range(RED, catalog, tolerance=0.2, max_blocks=2)
        assert [b.id for b in found] == ["minecraft:exact", "minecraft:near"]

    def test_zero_tolerance(self, catalog):
        target = catalog.get("minecraft:red_wool").color
        found = find_blocks_by_color_range(target, catalog, tolerance=0.0, max_blocks=10)
        assert "minecraft:red_wool" in [b.id for b in found]
        assert all(b.color == target for b in found)

    def test_empty(self, empty_catalog):
        assert find_blocks_by_color_range(RED, empty_catalog, 1.0, 5) == []


class TestResolveGradient:
    def test_unique_blocks(self, make_catalog):
        catalog = make_catalog(
            ("minecraft:a", (250, 0, 0)),
            ("minecraft:b", (240, 0, 0)),
            ("minecraft:c", (230, 0, 0)),
        )
        resolved = resolve_gradient([RED] * 4, catalog)
        assert [b.id for b in resolved] == ["minecraft:a", "minecraft:b", "minecraft:c"]

    def test_repeats_allowed(self, make_catalog):
        catalog = make_catalog(("minecraft:a", (250, 0, 0)), ("minecraft:b", (0, 0, 250)))
        resolved = resolve_gradient([RED] * 3, catalog, unique=False)
        assert [b.id for b in resolved] == ["minecraft:a"] * 3

    def test_empty_targets(self, catalog):
        assert resolve_gradient([], catalog) == []


class TestColorChain:
    def test_greedy_chain(self, make_catalog):
        catalog = make_catalog(
            ("minecraft:black", (0, 0, 0)),
            ("minecraft:white", (255, 255, 255)),
            ("minecraft:dark", (60, 60, 60)),
            ("minecraft:air", None),
            ("minecraft:light", (200, 200, 200)),
        )
        ordered = sort_by_color_chain(list(catalog))
        assert [b.id for b in ordered] == [
            "minecraft:black",
            "minecraft:dark",
            "minecraft:light",
            "minecraft:white",
        ]

    def test_small_inputs(self, make_catalog):
        catalog = make_catalog(("minecraft:air", None), ("minecraft:stone", (1, 1, 1)))
        assert [b.id for b in sort_by_color_chain(list(catalog))] == ["minecraft:stone"]
        assert sort_by_color_chain([]) == []

    def test_hsl_metric(self, make_catalog):
        catalog = make_catalog(
            ("minecraft:red", (255, 0, 0)),
            ("minecraft:blue", (0, 0, 255)),
            ("minecraft:orange", (255, 128, 0)),
        )
        ordered = sort_by_color_chain(list(catalog), SimilarityMetric.HSL)
        assert [b.id for b in ordered] == ["minecraft:red", "minecraft:orange", "minecraft:blue"]
