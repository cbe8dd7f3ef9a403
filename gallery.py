"""
Photo gallery harvesting for a single place.

A place page exposes a photo gallery that mixes photos and videos. Each
photo is opened in the viewer, its rendered background image is checked
for the full-size format marker, and the byline above the viewer is read
for attribution. Two byline layouts exist:

  owner        the place owner posted the photo; the byline sits in the
               title card heading
  contributor  a Maps user posted it; the byline is a small body heading

Only one of them renders for a given photo. Both are polled in the same
wait and the first to appear wins; if both are present on the same poll,
owner is taken.
"""

from config import ATTRIBUTION_TIMEOUT, MAX_PHOTOS, MISSING_GALLERY_POLICY
from models import ImageRecord
from parsing import canonical_image_url

GALLERY_POLICIES = ("skip", "accept")

ATTRIBUTION_BYLINES = (
    ("owner", 'div#titlecard div[role="navigation"] h1>span:last-child:has(a)'),
    ("contributor", 'div[role="navigation"] h2.fontBodySmall>span:has(a)'),
)


def resolve_attribution(page, timeout=ATTRIBUTION_TIMEOUT, bylines=ATTRIBUTION_BYLINES):
    """Return (kind, Author) for the byline that renders first, or None."""
    found = page.wait_for_first([selector for _, selector in bylines], timeout)
    if found is None:
        return None

    index, byline = found
    return bylines[index][0], page.read_attribution(byline)


def harvest_photo(page, item):
    """Open one gallery item; return an ImageRecord or None if it doesn't qualify."""
    page.select_item(item)

    raw_url = page.loaded_image_url(item)
    if raw_url is None:
        return None

    url = canonical_image_url(raw_url)
    if url is None:
        return None

    attribution = resolve_attribution(page)
    if attribution is None:
        return None

    _, author = attribution
    if not author.name:
        return None
    return ImageRecord(url=url, author=author)


def harvest_gallery(page, candidate, max_photos=MAX_PHOTOS, policy=MISSING_GALLERY_POLICY):
    """
    Collect up to `max_photos` attributed photos for a place.

    Returns None when the candidate should be dropped: the gallery panel
    never rendered, or there is no gallery button and `policy` is "skip".
    An error part-way through keeps the photos gathered so far.
    """
    if policy not in GALLERY_POLICIES:
        raise ValueError(f"Unknown gallery policy {policy!r}, expected one of {GALLERY_POLICIES}")

    images = []
    try:
        entry = page.gallery_entry(candidate.title)
        if entry is None:
            return [] if policy == "accept" else None

        items = page.open_gallery(entry, candidate.title)
        if not items:
            return None

        photos = [item for item in items if not page.is_video(item)]
        for item in photos:
            if len(images) >= max_photos:
                break
            image = harvest_photo(page, item)
            if image is not None:
                images.append(image)
    except Exception as e:
        print(f"  Gallery stopped for {candidate.title} after {len(images)} photos: {e}")

    return images
