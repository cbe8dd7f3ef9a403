import os
import json
import re
from datetime import datetime
from config import OUTPUT_DIR

def ensure_dirs():
    """Ensure output directories exist."""
    os.makedirs(OUTPUT_DIR, exist_ok=True)

def read_json(path, default=None):
    """Read a JSON document, returning `default` when the file is missing."""
    if not os.path.exists(path):
        return default
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)

def write_json(path, data, indent=None):
    """Write a JSON document, replacing the file."""
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=indent)

def timestamp():
    return datetime.now().strftime("%H:%M:%S")

def extract_coordinates_from_url(url: str):
    """
    Extract coordinates from a Google Maps place URL.
    Returns (lat, lon) or (None, None).
    """
    if not url:
        return None, None

    # Place data segment: ...!3d-6.3051!4d107.3001...
    m = re.search(r'!3d(-?\d+\.\d+)!4d(-?\d+\.\d+)', url)
    if m:
        return float(m.group(1)), float(m.group(2))

    # Viewport pattern: @lat,lon,...
    m = re.search(r'@(-?\d+\.\d+),(-?\d+\.\d+)', url)
    if m:
        return float(m.group(1)), float(m.group(2))

    return None, None
