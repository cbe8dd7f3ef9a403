import streamlit as st
import pandas as pd
import folium
from streamlit_folium import st_folium
import os
import config

# Use the exported data file
DATA_FILE = config.CLEAN_DATA_FILE

def filter_places(df, search_term="", min_rating=0.0, min_reviewers=0):
    """Apply the sidebar filters to the exported places table."""
    filtered_df = df.copy()

    if search_term:
        mask = (
            filtered_df['title'].str.contains(search_term, case=False, na=False) |
            filtered_df['region'].str.contains(search_term, case=False, na=False)
        )
        filtered_df = filtered_df[mask]

    filtered_df['rating'] = pd.to_numeric(filtered_df['rating'], errors='coerce').fillna(0)
    filtered_df = filtered_df[filtered_df['rating'] >= min_rating]
    filtered_df = filtered_df[filtered_df['reviewerCount'] >= min_reviewers]
    return filtered_df

def popup_html(row):
    cover = ""
    if isinstance(row['cover_image'], str) and row['cover_image']:
        cover = f"""<img src="{row['cover_image']}" width="200"><br>
            <small>Foto: {row['cover_author']}</small><br>"""

    return f"""
    <div style="width:200px">
        {cover}
        <b>{row['title']}</b><br>
        ⭐ {row['rating']} ({row['reviewerCount']})<br>
        <i>{row['region']}</i><br>
        <a href="{row['link']}" target="_blank">Google Maps</a>
    </div>
    """

def run_gui():
    st.set_page_config(page_title="Wisata Explorer", layout="wide")
    st.title("🗺️ Wisata Explorer (Folium)")

    @st.cache_data
    def load_data():
        if not os.path.exists(DATA_FILE):
            return None
        return pd.read_csv(DATA_FILE)

    df = load_data()

    if df is None:
        st.error(f"Data file not found at {DATA_FILE}. Please run the Cleaner first.")
        return

    # Sidebar
    st.sidebar.header("Filter Options")
    search_term = st.sidebar.text_input("Search Title/Region", "")
    min_rating = st.sidebar.slider("Min Rating", 0.0, 5.0, 0.0, 0.1)
    min_reviewers = st.sidebar.number_input("Min Reviews", min_value=0, value=config.MIN_REVIEWERS, step=10)

    filtered_df = filter_places(df, search_term, min_rating, min_reviewers)

    st.sidebar.markdown(f"**Results:** {len(filtered_df)}")
    if st.sidebar.button("Reload Data"):
        st.cache_data.clear()
        st.rerun()

    mapped_df = filtered_df.dropna(subset=['latitude', 'longitude'])

    if not mapped_df.empty:
        m = folium.Map(location=[mapped_df['latitude'].mean(), mapped_df['longitude'].mean()], zoom_start=9)

        for _, row in mapped_df.head(config.MAX_MARKERS).iterrows():
            folium.Marker(
                [row['latitude'], row['longitude']],
                popup=folium.Popup(popup_html(row), max_width=250),
                tooltip=row['title']
            ).add_to(m)

        if len(mapped_df) > config.MAX_MARKERS:
            st.warning(f"Showing first {config.MAX_MARKERS} markers only (performance limit).")

        st_folium(m, width=1000, height=600)
    else:
        st.info("No places match your filters.")

    with st.expander("Show Raw Data"):
        st.dataframe(filtered_df)

if __name__ == "__main__":
    run_gui()
