import pandas as pd
import config
import utils

CLEAN_COLUMNS = [
    "title", "region", "rating", "reviewerCount", "about", "address", "link",
    "latitude", "longitude", "image_count", "cover_image", "cover_author",
]

def build_clean_frame(records):
    """Flatten place records into one row per place, keyed by link."""
    df = pd.DataFrame(records)
    if df.empty:
        return pd.DataFrame(columns=CLEAN_COLUMNS)

    df = df.drop_duplicates(subset="link", keep="last")

    coords = [utils.extract_coordinates_from_url(link) for link in df["link"]]
    df["latitude"] = [lat for lat, _ in coords]
    df["longitude"] = [lon for _, lon in coords]

    images = df["images"] if "images" in df else pd.Series([[]] * len(df), index=df.index)
    images = images.apply(lambda imgs: imgs if isinstance(imgs, list) else [])
    df["image_count"] = images.apply(len)
    df["cover_image"] = images.apply(lambda imgs: imgs[0]["url"] if imgs else "")
    df["cover_author"] = images.apply(lambda imgs: imgs[0]["author"]["name"] if imgs else "")

    return df.reindex(columns=CLEAN_COLUMNS).reset_index(drop=True)

def run_cleaner(input_file=config.PLACES_FILE, output_file=config.CLEAN_DATA_FILE):
    print(f"Reading from {input_file}...")
    records = utils.read_json(input_file)
    if records is None:
        print(f"Error: {input_file} not found. Run the scraper first.")
        return None

    print("Removing duplicates...")
    df = build_clean_frame(records)
    print(f"Removed {len(records) - len(df)} duplicate rows.")

    missing = df["latitude"].isnull().sum()
    if missing:
        print(f"{missing} places have no coordinates in their link and won't be mapped.")

    print(f"Saving cleaned data to {output_file}...")
    df.to_csv(output_file, index=False)
    print("Cleaning Done.")
    return df

if __name__ == "__main__":
    run_cleaner()
