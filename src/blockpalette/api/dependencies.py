"""
Shared FastAPI dependencies.
"""

import logging
from functools import lru_cache

from blockpalette.block_utils.block_loader import load_default_catalog

logger = logging.getLogger("blockpalette.api.dependencies")


@lru_cache(maxsize=1)
def get_catalog():
    """Load the block catalog once and share it between requests."""
    logger.info("Loading block catalog for the API")
    return load_default_catalog()
