"""
Streamlit main app for ScreenScout.

Run: streamlit run app/ui/app.py --server.port 8501
"""

import sys
from pathlib import Path

import streamlit as st

# Ensure project root in path
sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from app.ui.utils.api_client import get_trending, health_check
from app.ui.utils.session_state import get_username, init_session_state
from app.ui.components.movie_card import render_title_card

st.set_page_config(
    page_title="ScreenScout",
    page_icon="🎬",
    layout="wide",
    initial_sidebar_state="expanded",
)

init_session_state()

st.title("🎬 ScreenScout")
st.markdown("Describe what you feel like watching and get movie and TV picks.")

# Check API health
try:
    health = health_check()
    if health.get("status") == "healthy":
        st.success("API connected")
    else:
        st.warning("API may not be fully ready")
except Exception as e:
    st.error(f"API not available: {e}")
    st.info("Start the API with: uvicorn app.api.main:app --host 0.0.0.0 --port 8000")

st.divider()

username = get_username()
if username:
    st.subheader(f"Welcome, {username}")
    col1, col2 = st.columns(2)
    with col1:
        if st.button("🎯 Get Recommendations", use_container_width=True):
            st.switch_page("pages/2_recommendations.py")
    with col2:
        if st.button("♥ My Favorites", use_container_width=True):
            st.switch_page("pages/3_favorites.py")
else:
    st.info("Sign in or create an account to get started.")
    if st.button("Sign in"):
        st.switch_page("pages/1_account.py")

st.subheader("Trending this week")
try:
    for item in get_trending().get("results", [])[:10]:
        render_title_card(item, key_prefix="trending")
except Exception as e:
    st.caption(f"Trending titles unavailable: {e}")
