"""
Catalog title display card component.
"""

import streamlit as st

TMDB_IMAGE_BASE_URL = "https://image.tmdb.org/t/p/w185"

PROVENANCE_LABELS = {
    "primary-generative": "AI pick",
    "secondary-generative": "AI pick (backup model)",
    "keyword": "Keyword match",
    "similar": "Similar to your favorites",
    "trending": "Trending",
}


def render_title_card(
    item: dict,
    on_favorite: callable = None,
    on_remove: callable = None,
    key_prefix: str = "card",
) -> None:
    """
    Render a catalog title or recommendation.

    Args:
        item: Recommendation, catalog item or favorite as returned by the API
        on_favorite: Callback(item) for the "add to favorites" button
        on_remove: Callback(item) for the "remove" button
        key_prefix: Prefix for widget keys (must be unique per list)
    """
    catalog_id = item.get("catalog_id", item.get("id"))
    media_kind = item.get("media_kind", "movie")

    with st.container():
        col1, col2, col3 = st.columns([1, 4, 1])
        with col1:
            if item.get("poster_ref"):
                st.image(f"{TMDB_IMAGE_BASE_URL}{item['poster_ref']}")
        with col2:
            st.markdown(f"**{item.get('title') or 'Untitled'}**")
            meta = ["Series" if media_kind == "series" else "Movie"]
            if item.get("provenance"):
                meta.append(PROVENANCE_LABELS.get(item["provenance"], item["provenance"]))
            st.caption(" | ".join(meta))
            if item.get("overview"):
                st.write(item["overview"])
            if item.get("justification"):
                st.caption(f"Why: {item['justification']}")
        with col3:
            if on_favorite and st.button("♥ Save", key=f"{key_prefix}_fav_{catalog_id}"):
                on_favorite(item)
            if on_remove and st.button("Remove", key=f"{key_prefix}_rm_{catalog_id}"):
                on_remove(item)
        st.divider()
