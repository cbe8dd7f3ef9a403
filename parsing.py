"""
Extractors that turn rendered Google Maps markup into place data.

Everything here works on strings or parsed HTML, never on a live browser,
so the result list can be parsed from a saved `outerHTML` snapshot.
"""

import re
from bs4 import BeautifulSoup

from config import CANONICAL_SIZE_TOKEN, IMAGE_MARKER, MIN_REVIEWERS, NO_THUMBNAIL_SRC
from models import PlaceRecord

ANCHOR_SELECTOR = "div > a"
RATING_SELECTOR = 'span.fontBodyMedium span[role="img"] span:first-child'
REVIEWERS_SELECTOR = 'span.fontBodyMedium span[role="img"] span:last-child'

_BACKGROUND_URL_PREFIX = re.compile(r'^url\(["\']?')
_BACKGROUND_URL_SUFFIX = re.compile(r'["\']?\)$')


def parse_rating(text):
    """'4,5' -> 4.5 (the UI uses a comma decimal separator)."""
    return float(text.strip().replace(",", "."))


def parse_reviewer_count(text):
    """'(1.234)' -> 1234. Parentheses and thousands separators are dropped."""
    cleaned = text.strip().strip("()").replace(".", "").replace(",", "")
    return int(cleaned)


def clean_background_image_url(value):
    """Strip a CSS `url("...")` wrapper down to the bare URL."""
    if not value or value.strip() == "none":
        return ""
    value = _BACKGROUND_URL_PREFIX.sub("", value.strip())
    return _BACKGROUND_URL_SUFFIX.sub("", value)


def canonical_image_url(url, marker=IMAGE_MARKER, size_token=CANONICAL_SIZE_TOKEN):
    """
    Return the full-size variant of a photo URL, or None when the URL does
    not carry the photo format marker.

    ".../p/AF1Qip=w203-h152-k-no" -> ".../p/AF1Qip=s1080-k-no"
    """
    if not url or not url.endswith(marker):
        return None

    parts = url.split("=")
    if len(parts) < 2:
        return None
    parts[1] = size_token
    return "=".join(parts)


def _result_items(soup):
    """
    Return (anchor, item) pairs in document order.

    An item is the div wrapping the anchor's parent div. Anchors nested
    deeper in a card (website or directions buttons) resolve to a div that
    also holds the card's own anchor; such items are keyed by that first
    anchor and the innermost one is kept, so the badges read belong to
    that anchor's card.
    """
    items = {}
    for link_anchor in soup.select(ANCHOR_SELECTOR):
        item = link_anchor.parent.find_parent("div")
        if item is None:
            continue
        anchor = item.select_one(ANCHOR_SELECTOR)
        items[id(anchor)] = (anchor, item)
    return list(items.values())


def parse_result_list(html, region, min_reviewers=MIN_REVIEWERS, no_thumbnail_src=NO_THUMBNAIL_SRC):
    """
    Parse the search results container into provisional PlaceRecords.

    Items are read in document order. An item is skipped when it has no
    anchor, no rating badge, no reviewer badge, shows the "no thumbnail"
    placeholder, or has fewer than `min_reviewers` reviews.
    """
    soup = BeautifulSoup(html, "html.parser")
    candidates = []
    seen_links = set()

    for anchor, item in _result_items(soup):
        rating_tag = item.select_one(RATING_SELECTOR)
        reviewers_tag = item.select_one(REVIEWERS_SELECTOR)
        no_image = item.find("img", src=no_thumbnail_src)

        if anchor is None or not anchor.get("href") or rating_tag is None or reviewers_tag is None or no_image:
            continue

        link = anchor["href"]
        if link in seen_links:
            continue

        try:
            rating = parse_rating(rating_tag.get_text(strip=True))
            reviewers = parse_reviewer_count(reviewers_tag.get_text(strip=True))
        except ValueError:
            continue

        if reviewers < min_reviewers:
            continue

        try:
            place = PlaceRecord(
                title=anchor.get("aria-label", ""),
                rating=rating,
                reviewer_count=reviewers,
                link=link,
                region=region,
            )
        except ValueError:
            continue

        seen_links.add(link)
        candidates.append(place)

    return candidates
