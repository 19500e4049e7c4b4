"""
Recommendations page - describe what you want, or go from your favorites.
"""

import streamlit as st
import sys
from pathlib import Path

# Ensure project root in path
sys.path.insert(0, str(Path(__file__).resolve().parents[3]))

import requests

from app.ui.utils.api_client import (
    add_favorite,
    error_detail,
    recommend_by_description,
    recommend_by_favorites,
)
from app.ui.utils.session_state import get_token, init_session_state
from app.ui.components.movie_card import render_title_card

init_session_state()

st.title("🎯 Recommendations")

token = get_token()

if not token:
    st.warning("Please sign in first.")
    if st.button("Sign in"):
        st.switch_page("pages/1_account.py")
    st.stop()

FALLBACK_NOTICES = {
    "secondary-generative": "The main AI service was unavailable, so a backup model picked these.",
    "keyword": "The AI services were unavailable, so these come from keyword matching.",
}


def handle_favorite(item: dict) -> None:
    """Callback when user saves a title."""
    try:
        add_favorite(
            token,
            catalog_id=item["catalog_id"],
            media_kind=item["media_kind"],
            title=item.get("title"),
            poster_ref=item.get("poster_ref"),
        )
        st.toast(f"Saved {item.get('title')}")
    except requests.RequestException as e:
        st.error(error_detail(e))


describe_tab, favorites_tab = st.tabs(["Describe it", "From my favorites"])

with describe_tab:
    with st.form("describe_form"):
        description = st.text_area(
            "What are you in the mood for?",
            placeholder="e.g. a feel-good bollywood comedy, or a korean revenge thriller",
        )
        submitted = st.form_submit_button("Find something")

    if submitted:
        if not description.strip():
            st.error("Description is required.")
        else:
            with st.spinner("Finding matches..."):
                try:
                    st.session_state["last_recommendations"] = recommend_by_description(token, description)
                except requests.RequestException as e:
                    st.error(f"Failed to load recommendations: {error_detail(e)}")

    data = st.session_state.get("last_recommendations")
    if data:
        if data.get("fallback"):
            st.info(FALLBACK_NOTICES.get(data.get("fallbackSource"), "Showing fallback results."))
        results = data.get("results", [])
        if results:
            for item in results:
                render_title_card(item, on_favorite=handle_favorite, key_prefix="desc")
        else:
            st.info("No matches found. Try describing it differently.")

with favorites_tab:
    try:
        results = recommend_by_favorites(token).get("results", [])
        if results:
            for item in results:
                render_title_card(item, on_favorite=handle_favorite, key_prefix="favs")
        else:
            st.info("No recommendations available right now.")
    except requests.RequestException as e:
        st.error(f"Failed to load recommendations: {error_detail(e)}")
        st.info("Make sure the API is running: uvicorn app.api.main:app --host 0.0.0.0 --port 8000")
