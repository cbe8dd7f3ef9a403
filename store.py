"""
Persistence for harvested places and the processed-region log.

Both files are JSON arrays rewritten in full on every commit.
"""

from config import PLACES_FILE, REGION_LOG_FILE
from models import PlaceRecord
from utils import read_json, write_json


def _as_dict(record):
    return record.to_dict() if isinstance(record, PlaceRecord) else record


def load_places(path=PLACES_FILE):
    return read_json(path, default=[])


def merge_places(existing, incoming):
    """
    Merge two place lists keyed by `link`.

    `incoming` is applied after `existing`, so a freshly scraped record
    replaces the stored one wholesale, empty fields included. Each link
    keeps the position where it was first seen.
    """
    merged = {}
    for record in list(existing) + list(incoming):
        record = _as_dict(record)
        merged[record["link"]] = record
    return list(merged.values())


def persist_places(path, records):
    write_json(path, [_as_dict(record) for record in records])


def load_region_log(path=REGION_LOG_FILE):
    return read_json(path, default=[])


def append_region_log(path, region):
    """Record `region` as done, most recent first."""
    log = [r for r in load_region_log(path) if r != region]
    write_json(path, [region] + log, indent=2)


def commit_region(region, batch, places_path=PLACES_FILE, log_path=REGION_LOG_FILE):
    """Merge a finished region's batch into the store, then log the region."""
    merged = merge_places(load_places(places_path), batch)
    persist_places(places_path, merged)
    append_region_log(log_path, region)
    return merged
