"""
Functions for loading Minecraft block data into a BlockCatalog.

Block data can come from the semicolon separated color CSV
("Name;minecraft:id;#RRGGBB;(r, g, b)") or from a JSON file of records with
properties and default states. Each format is a data source; sources are
tried in order and the first one that produces valid entries wins.
"""

import csv
import io
import json
import logging
import os
from abc import ABC, abstractmethod

from blockpalette import config
from blockpalette.block_utils.catalog import BlockCatalog, BlockRecord
from blockpalette.color.spaces import hex_to_rgb

# Set up logging
logger = logging.getLogger("blockpalette.block_utils.block_loader")


class DataSource(ABC):
    """A way of turning a file into block entries."""

    name = "base"
    extensions = ()

    def __init__(self, path):
        self.path = path

    def fetch(self):
        """
        Read the raw text of the source.

        Returns:
            File contents, or None if the file could not be read
        """
        if not os.path.exists(self.path):
            logger.error(f"Block data file not found: {self.path}")
            return None
        try:
            with open(self.path, "r", encoding="utf-8") as file:
                return file.read()
        except OSError as e:
            logger.error(f"Error reading block data from {self.path}: {e}")
            return None

    @abstractmethod
    def parse(self, raw):
        """Turn raw text into a list of entry dicts (id, properties, default_state, color)."""

    def validate(self, entries):
        """Check that parsing produced at least one entry (malformed rows are already skipped)."""
        return bool(entries)


class CsvBlockSource(DataSource):
    """Semicolon separated block color rows."""

    name = "csv"
    extensions = (".csv",)

    def parse(self, raw):
        entries = []
        reader = csv.reader(io.StringIO(raw), delimiter=";")
        for line_number, row in enumerate(reader, start=1):
            if not row or not "".join(row).strip():
                continue
            if len(row) < 4:  # Ensure we have enough columns
                logger.warning(f"Skipping short row {line_number} in {self.path}")
                continue
            block_id = row[1].strip()
            if not block_id:
                logger.warning(f"Skipping row {line_number} in {self.path}: missing block id")
                continue
            hex_color = row[2].strip()
            try:
                rgb_str = row[3].strip().strip("()").split(",")
                rgb = tuple(int(value.strip()) for value in rgb_str)
                if len(rgb) != 3:
                    raise ValueError(f"expected 3 channels, got {len(rgb)}")
            except ValueError:
                try:
                    rgb = hex_to_rgb(hex_color)
                except ValueError as e:
                    logger.warning(f"Skipping row {line_number} in {self.path}: {e}")
                    continue
            entries.append(
                {
                    "id": block_id,
                    "properties": {},
                    "default_state": {},
                    "color": rgb,
                }
            )
        return entries


class JsonBlockSource(DataSource):
    """JSON document of block records: {"blocks": [{id, properties, default_state, color}]}."""

    name = "json"
    extensions = (".json",)

    def parse(self, raw):
        data = json.loads(raw)
        records = data.get("blocks", []) if isinstance(data, dict) else data
        entries = []
        for record in records:
            if not isinstance(record, dict) or not record.get("id"):
                logger.warning(f"Skipping malformed block record in {self.path}: {record!r}")
                continue
            color = record.get("color")
            if isinstance(color, str):
                try:
                    color = hex_to_rgb(color)
                except ValueError as e:
                    logger.warning(f"Ignoring color of {record['id']}: {e}")
                    color = None
            elif color is not None:
                try:
                    color = tuple(int(c) for c in color)
                    if len(color) != 3:
                        raise ValueError(f"expected 3 channels, got {len(color)}")
                except (ValueError, TypeError) as e:
                    logger.warning(f"Ignoring color of {record['id']}: {e}")
                    color = None
            entries.append(
                {
                    "id": record["id"],
                    "properties": dict(record.get("properties") or {}),
                    "default_state": dict(record.get("default_state") or {}),
                    "color": color,
                }
            )
        return entries


# Registered data sources, in fallback order
SOURCES = [CsvBlockSource, JsonBlockSource]


def get_source_by_name(name):
    """Get a data source class by its name, or None."""
    for source in SOURCES:
        if source.name == name:
            return source
    return None


def _ordered_sources(path, sources):
    # Sources claiming the file extension go first, the rest act as fallbacks
    extension = os.path.splitext(path)[1].lower()
    preferred = [s for s in sources if extension in s.extensions]
    return preferred + [s for s in sources if s not in preferred]


def load_block_entries(path, sources=None):
    """
    Load block entries from a file, trying each data source until one works.

    Args:
        path: Path to a block data file
        sources: Optional list of DataSource classes (defaults to SOURCES)

    Returns:
        List of entry dicts, empty if no source could read the file
    """
    logger.info(f"Loading block data from {path}")
    for source_class in _ordered_sources(path, sources or SOURCES):
        source = source_class(path)
        raw = source.fetch()
        if raw is None:
            return []
        try:
            entries = source.parse(raw)
        except (ValueError, TypeError, AttributeError, csv.Error) as e:
            logger.warning(f"{source.name} source could not parse {path}: {e}")
            continue
        if source.validate(entries):
            logger.info(f"Loaded {len(entries)} blocks from {path} using {source.name} source")
            return entries
        logger.warning(f"{source.name} source produced no valid blocks from {path}")
    logger.error(f"No data source could load {path}")
    return []


def _merge(existing, entry):
    # Later files fill in what earlier ones lacked; a later color wins
    return {
        "id": existing["id"],
        "properties": entry["properties"] or existing["properties"],
        "default_state": entry["default_state"] or existing["default_state"],
        "color": entry["color"] if entry["color"] is not None else existing["color"],
    }


def load_catalog(*paths, sources=None):
    """
    Build a BlockCatalog from one or more block data files.

    Entries with the same id are merged, so a color CSV and a properties
    JSON combine into one record per block.

    Returns:
        BlockCatalog

    Raises:
        ValueError: if none of the files yielded any block
    """
    merged = {}
    for path in paths:
        for entry in load_block_entries(path, sources):
            block_id = entry["id"]
            merged[block_id] = _merge(merged[block_id], entry) if block_id in merged else entry

    if not merged:
        raise ValueError(f"Failed to load block data from {', '.join(map(str, paths))}")

    records = [
        BlockRecord.create(e["id"], e["properties"], e["default_state"], e["color"])
        for e in merged.values()
    ]
    catalog = BlockCatalog(records)
    logger.info(f"Built {catalog!r}")
    return catalog


def load_default_catalog():
    """Load the catalog from the configured (or bundled) block data files."""
    return load_catalog(*config.CATALOG_PATHS)
