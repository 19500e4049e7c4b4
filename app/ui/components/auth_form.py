"""
Sign-in / registration form component.
"""

import streamlit as st


def render_auth_form(is_register: bool = False) -> dict | None:
    """
    Render the sign-in or registration form.

    Args:
        is_register: If True, show "Create account"; else "Sign in"

    Returns:
        {'username', 'password'} if submitted and filled in, else None.
    """
    form_key = "register_form" if is_register else "login_form"
    with st.form(form_key):
        username = st.text_input("Username", max_chars=50)
        password = st.text_input("Password", type="password")
        if is_register:
            confirm = st.text_input("Confirm password", type="password")
        submitted = st.form_submit_button("Create account" if is_register else "Sign in")

    if not submitted:
        return None
    if not username.strip() or not password:
        st.error("Username and password are required.")
        return None
    if is_register and password != confirm:
        st.error("Passwords do not match.")
        return None
    return {"username": username.strip(), "password": password}
