"""
Session state helpers for Streamlit.
"""

import streamlit as st


def get_token() -> str | None:
    """Bearer token of the signed-in user, if any."""
    return st.session_state.get("token")


def get_username() -> str | None:
    return st.session_state.get("username")


def set_signed_in(token: str, username: str) -> None:
    """Remember the signed-in user."""
    st.session_state["token"] = token
    st.session_state["username"] = username


def sign_out() -> None:
    """Forget the signed-in user and anything cached for them."""
    for key in ("token", "username", "last_recommendations"):
        if key in st.session_state:
            del st.session_state[key]


def init_session_state() -> None:
    """Initialize session state keys if not present."""
    if "token" not in st.session_state:
        st.session_state["token"] = None
    if "username" not in st.session_state:
        st.session_state["username"] = None
    if "last_recommendations" not in st.session_state:
        st.session_state["last_recommendations"] = None
