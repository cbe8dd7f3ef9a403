import sys
import subprocess

import config
from store import load_places, load_region_log


def dataset_summary(places_path=config.PLACES_FILE, log_path=config.REGION_LOG_FILE):
    """Counts shown by the status option, read straight from the data files."""
    places = load_places(places_path)
    regions = load_region_log(log_path)
    return {
        "regions_done": len(regions),
        "last_region": regions[0] if regions else None,
        "places": len(places),
        "places_with_photos": sum(1 for place in places if place.get("images")),
        "photos": sum(len(place.get("images", [])) for place in places),
    }


def print_summary(summary):
    print(f"Regions harvested : {summary['regions_done']}")
    if summary["last_region"]:
        print(f"Last region       : {summary['last_region']}")
    print(f"Places in dataset : {summary['places']}")
    print(f"Places with photos: {summary['places_with_photos']} ({summary['photos']} photos)")


def harvest_remaining():
    import scraper
    scraper.run_scraper()


def harvest_one_region():
    region = input("Region label (e.g. KABUPATEN KARAWANG, PROVINSI JAWA BARAT): ").strip().upper()
    if not region:
        print("No region given.")
        return
    import scraper
    scraper.run_scraper(regions=[region])


def export_csv():
    import cleaner
    cleaner.run_cleaner()


def launch_viewer():
    print("Launching Streamlit GUI...")
    # Streamlit needs to run as a subprocess command
    subprocess.run(["streamlit", "run", "gui.py"])


MENU = [
    ("Harvest remaining regions", harvest_remaining),
    ("Harvest a single region", harvest_one_region),
    ("Show dataset status", lambda: print_summary(dataset_summary())),
    ("Export dataset to CSV", export_csv),
    ("Open viewer (Streamlit + Folium)", launch_viewer),
]


def main():
    exit_choice = str(len(MENU) + 1)
    while True:
        print("\n=== Wisata Places Harvester ===")
        for number, (label, _) in enumerate(MENU, start=1):
            print(f"{number}. {label}")
        print(f"{exit_choice}. Exit")

        choice = input(f"Enter choice (1-{exit_choice}): ").strip()

        if choice == exit_choice:
            print("Exiting.")
            sys.exit(0)
        if choice.isdigit() and 1 <= int(choice) <= len(MENU):
            MENU[int(choice) - 1][1]()
        else:
            print("Invalid choice, please try again.")


if __name__ == "__main__":
    main()
