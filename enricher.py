from dataclasses import replace

from config import FIELD_TIMEOUT, NAV_TIMEOUT


def enrich_candidate(page, candidate, nav_timeout=NAV_TIMEOUT, field_timeout=FIELD_TIMEOUT):
    """
    Open the candidate's place page and fill in `about` and `address`.

    Returns None when the page cannot be loaded; missing fields are left
    as empty strings.
    """
    if not page.open_place(candidate.link, candidate.title, timeout=nav_timeout):
        return None

    about = page.about_text(candidate.title, timeout=field_timeout)
    address = page.address_text(candidate.title, timeout=field_timeout)
    return replace(candidate, about=about, address=address)
