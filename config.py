import os

# Paths
OUTPUT_DIR = "data"
PLACES_FILE = os.path.join(OUTPUT_DIR, "wisata-v2.json")
REGION_LOG_FILE = os.path.join(OUTPUT_DIR, "daerah-log.json")
CLEAN_DATA_FILE = os.path.join(OUTPUT_DIR, "wisata-clean.csv")

# Browser Settings
HEADLESS = False          # Set True to run without browser window
WINDOW_WIDTH = 1080
WINDOW_HEIGHT = 1024
MAPS_URL = "https://www.google.com/maps"

# Region Source (Permendagri 72/2019 region codes)
REGION_CSV_URL = "https://raw.githubusercontent.com/kodewilayah/permendagri-72-2019/main/dist/base.csv"
REGION_FETCH_TIMEOUT = 30

# Search (labels follow the Indonesian UI locale)
SEARCH_TEMPLATE = "Wisata {region}"
RESULTS_LABEL_TEMPLATE = "Hasil untuk {query}"
SEARCHBOX_TIMEOUT = 15    # Seconds; missing search box is fatal
RESULTS_TIMEOUT = 30      # Seconds; missing results list skips the region

# Infinite scroll
SCROLL_PAUSE = 2          # Seconds to settle after each scroll
SCROLL_MAX_ROUNDS = 200

# Admission filters
MIN_REVIEWERS = 10
MAX_RATING = 5
NO_THUMBNAIL_SRC = "//maps.gstatic.com/tactile/pane/result-no-thumbnail-1x.png"

# Detail view
NAV_TIMEOUT = 15          # Page load bound for a candidate link
FIELD_TIMEOUT = 2
ABOUT_LABEL_TEMPLATE = "Tentang {title}"
ADDRESS_TOOLTIP = "Salin alamat"

# Gallery
PHOTOS_LABEL_TEMPLATE = "Foto {title}"
GALLERY_TIMEOUT = 10
GALLERY_SETTLE = 1
IMAGE_LOADED_TIMEOUT = 1
ATTRIBUTION_TIMEOUT = 3
MAX_PHOTOS = 5
IMAGE_MARKER = "k-no"
CANONICAL_SIZE_TOKEN = "s1080-k-no"

# What to do with a place that has no photo gallery button:
#   "skip"   -> drop the place from the batch
#   "accept" -> keep it with an empty images list
MISSING_GALLERY_POLICY = "skip"

# Viewer
MAX_MARKERS = 1000
