"""
Favorites page - saved titles with remove buttons.
"""

import streamlit as st
import sys
from pathlib import Path

# Ensure project root in path
sys.path.insert(0, str(Path(__file__).resolve().parents[3]))

import requests

from app.ui.utils.api_client import error_detail, get_favorites, remove_favorite
from app.ui.utils.session_state import get_token, init_session_state
from app.ui.components.movie_card import render_title_card

init_session_state()

st.title("♥ My Favorites")

token = get_token()

if not token:
    st.warning("Please sign in first.")
    if st.button("Sign in"):
        st.switch_page("pages/1_account.py")
    st.stop()


def handle_remove(item: dict) -> None:
    """Callback when user removes a favorite."""
    try:
        remove_favorite(token, item["catalog_id"])
        st.rerun()
    except requests.RequestException as e:
        st.error(error_detail(e))


try:
    favorites = get_favorites(token)
    if favorites:
        st.caption(f"{len(favorites)} saved titles")
        for item in favorites:
            render_title_card(item, on_remove=handle_remove, key_prefix="saved")
    else:
        st.info("No favorites yet. Save titles from the recommendations page.")
except requests.RequestException as e:
    st.error(f"Failed to load favorites: {error_detail(e)}")
