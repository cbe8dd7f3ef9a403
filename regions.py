"""
Region source: Indonesian kabupaten/kota labels still to be harvested.
"""

import csv
import io
import random
import requests

from config import REGION_CSV_URL, REGION_FETCH_TIMEOUT, REGION_LOG_FILE
from store import load_region_log


def fetch_region_csv(url=REGION_CSV_URL, timeout=REGION_FETCH_TIMEOUT):
    response = requests.get(url, timeout=timeout)
    response.raise_for_status()
    return response.text


def parse_region_rows(csv_text):
    """
    Build "<district>, PROVINSI <province>" labels from `code,name` rows.

    Province rows have a one-segment code ("32"), districts two ("32.15").
    Deeper codes (kecamatan, desa) are ignored.
    """
    rows = []
    for row in csv.reader(io.StringIO(csv_text)):
        if len(row) < 2:
            continue
        code, name = row[0].strip(), row[1].strip()
        if not name or len(code.split(".")) > 2:
            continue
        rows.append((code, name.replace("KAB.", "KABUPATEN", 1)))

    provinces = {code: name for code, name in rows if "." not in code}

    labels = []
    for code, name in rows:
        parts = code.split(".")
        if len(parts) != 2:
            continue
        province = provinces.get(parts[0])
        if province is None:
            continue
        labels.append(f"{name}, PROVINSI {province}")
    return labels


def pending_regions(all_regions, region_log, rng=random):
    """Regions not yet in the log, each once, in shuffled order."""
    done = set(region_log)
    pending = []
    seen = set()
    for region in all_regions:
        if region in done or region in seen:
            continue
        seen.add(region)
        pending.append(region)

    rng.shuffle(pending)
    return pending


def load_pending_regions(log_path=REGION_LOG_FILE, url=REGION_CSV_URL):
    all_regions = parse_region_rows(fetch_region_csv(url))
    return pending_regions(all_regions, load_region_log(log_path))
