# smartfin/views/profile.py
import streamlit as st

from smartfin.formatting import format_date


def render(session):
    st.header("👤 My Profile")
    user = session.user
    if user is None:
        st.warning("Could not load your profile.")
        return

    with st.container(border=True):
        st.subheader(user.username)
        st.write(f"📧 **Email:** {user.email}")
        st.write(f"📅 **Member since:** {format_date(user.member_since) or 'unknown'}")

    if st.button("🚪 Logout", key="profile_logout", type="primary"):
        session.logout()
