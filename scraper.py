from dataclasses import replace
from selenium.common.exceptions import WebDriverException
from tqdm import tqdm

import config
import utils
from browser import MapsPage, create_driver
from collector import collect_candidates
from enricher import enrich_candidate
from gallery import harvest_gallery
from regions import load_pending_regions
from store import commit_region


def process_candidate(page, candidate, gallery_policy=config.MISSING_GALLERY_POLICY):
    """Enrich one candidate and attach its photos; None means leave it out."""
    enriched = enrich_candidate(page, candidate)
    if enriched is None:
        return None

    images = harvest_gallery(page, enriched, policy=gallery_policy)
    if images is None:
        return None
    return replace(enriched, images=images)


def scrape_region(page, region, gallery_policy=config.MISSING_GALLERY_POLICY):
    """
    Harvest one region in two phases: collect every candidate from the
    result list first, then visit each candidate for details and photos.
    """
    candidates = collect_candidates(page, region)
    if not candidates:
        return []

    print(f"Populating details and images for {len(candidates)} places...")
    batch = []
    for candidate in tqdm(candidates, desc="Progress", unit="place"):
        try:
            record = process_candidate(page, candidate, gallery_policy=gallery_policy)
        except WebDriverException as e:
            print(f"  Skipping {candidate.title}: {e.__class__.__name__}")
            continue
        if record is not None:
            batch.append(record)
    return batch


def run_scraper(regions=None, places_path=config.PLACES_FILE, log_path=config.REGION_LOG_FILE):
    print("Initializing Scraper...")
    utils.ensure_dirs()

    if regions is None:
        regions = load_pending_regions(log_path)
    print(f"Fetching data for {len(regions)} regions...")

    driver = create_driver()
    page = MapsPage(driver)

    try:
        for region in regions:
            print(f"\n[{utils.timestamp()}] Scraping data for: {region}")
            batch = scrape_region(page, region)

            merged = commit_region(region, batch, places_path, log_path)
            print(f"  -> Saved {len(batch)} places ({len(merged)} in dataset)")

        print("Scraping Completed!")

    finally:
        driver.quit()

if __name__ == "__main__":
    run_scraper()
