"""
Account page - sign in, register, sign out.
"""

import streamlit as st
import sys
from pathlib import Path

# Ensure project root in path
sys.path.insert(0, str(Path(__file__).resolve().parents[3]))

import requests

from app.ui.utils.api_client import error_detail, get_me, login, register
from app.ui.utils.session_state import get_token, init_session_state, set_signed_in, sign_out
from app.ui.components.auth_form import render_auth_form

init_session_state()
st.title("👤 Account")

token = get_token()

if token:
    try:
        me = get_me(token)
        st.success(f"Signed in as **{me['username']}**")
        if me.get("created_at"):
            st.caption(f"Member since {me['created_at'][:10]}")
    except requests.RequestException as e:
        st.warning(f"Session expired or API unavailable: {error_detail(e)}")
    if st.button("Sign out"):
        sign_out()
        st.rerun()
    st.stop()

sign_in_tab, register_tab = st.tabs(["Sign in", "Create account"])

with sign_in_tab:
    form_data = render_auth_form(is_register=False)
    if form_data:
        try:
            set_signed_in(login(form_data["username"], form_data["password"]), form_data["username"])
            st.rerun()
        except requests.RequestException as e:
            st.error(f"Sign-in failed: {error_detail(e)}")

with register_tab:
    form_data = render_auth_form(is_register=True)
    if form_data:
        try:
            register(form_data["username"], form_data["password"])
            set_signed_in(login(form_data["username"], form_data["password"]), form_data["username"])
            st.success("Account created!")
            st.rerun()
        except requests.RequestException as e:
            st.error(f"Registration failed: {error_detail(e)}")
