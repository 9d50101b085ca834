import pytest

from blockpalette.block_utils.block_loader import load_catalog
from blockpalette.block_utils.catalog import BlockCatalog, BlockRecord
from blockpalette.config import BLOCK_COLORS_CSV, BLOCK_PROPERTIES_JSON


@pytest.fixture(scope="session")
def catalog():
    """The bundled catalog: ~200 colored blocks plus a few property-only ones."""
    return load_catalog(BLOCK_COLORS_CSV, BLOCK_PROPERTIES_JSON)


@pytest.fixture
def make_catalog():
    """Build a small catalog from (id, rgb) pairs; rgb may be None."""

    def _make(*blocks):
        return BlockCatalog(BlockRecord.create(block_id, color=rgb) for block_id, rgb in blocks)

    return _make


@pytest.fixture
def empty_catalog():
    return BlockCatalog([])
