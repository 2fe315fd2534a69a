import logging
import os
from datetime import datetime

import streamlit as st

from frontend.client import GuestbookClient
from frontend.state import GuestbookViewState

# 백엔드 API 주소 (Streamlit은 서버에서 요청하므로 same-origin 이 없음, 로컬 백엔드 기본값)
API_URL = os.getenv("GUESTBOOK_API_URL", "http://localhost:3000/api/guestbook")

logging.basicConfig(level=logging.INFO)

st.set_page_config(page_title="My Guestbook", page_icon="📖", layout="centered")


def format_created_at(value) -> str:
    try:
        dt = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return str(value)
    return dt.strftime("%b %d, %Y, %I:%M %p")


# 세션당 한 번만 생성 + 최초 목록 로딩 (mount)
if "guestbook" not in st.session_state:
    st.session_state.guestbook = GuestbookViewState(GuestbookClient(API_URL))
    st.session_state.guestbook.fetch_entries()

state: GuestbookViewState = st.session_state.guestbook

st.title("📖 My Guestbook")
st.caption("Leave a message and sign my guestbook!")

if state.error:
    st.error(state.error)

# --- Form: Create / Update ---
st.subheader("✏️ Edit Entry" if state.is_editing else "✍️ Sign Guestbook")
with st.form("guestbook_form"):
    name = st.text_input(
        "Name",
        value=state.form_name,
        placeholder="Your name",
        key=f"name_{state.form_version}",
        disabled=state.loading,
    )
    message = st.text_area(
        "Message",
        value=state.form_message,
        placeholder="Your message...",
        height=120,
        key=f"message_{state.form_version}",
        disabled=state.loading,
    )

    c1, c2 = st.columns(2)
    with c1:
        submitted = st.form_submit_button(
            "💾 Update Entry" if state.is_editing else "📝 Sign Guestbook",
            type="primary",
            disabled=state.loading,
        )
    with c2:
        cancelled = st.form_submit_button("❌ Cancel", disabled=state.loading) if state.is_editing else False

    if submitted:
        with st.spinner("Saving..."):
            state.submit(name, message)
        st.rerun()
    if cancelled:
        state.cancel_edit()
        st.rerun()

# --- Entries ---
st.divider()
st.subheader(f"💬 Guestbook Entries ({len(state.entries)})")

if state.loading and not state.entries:
    st.info("Loading entries...")
elif not state.entries:
    st.write("No entries yet. Be the first to sign the guestbook! ✨")
else:
    for entry in state.entries:
        entry_id = str(entry["id"])
        with st.container(border=True):
            head_l, head_r = st.columns([3, 2])
            with head_l:
                st.markdown(f"**{entry['name']}**")
            with head_r:
                st.caption(format_created_at(entry.get("created_at")))
            st.write(entry["message"])

            if state.pending_delete_id == entry_id:
                st.warning("Are you sure you want to delete this entry?")
                y, n = st.columns(2)
                with y:
                    if st.button("🗑️ Yes, delete", key=f"confirm_{entry_id}", disabled=state.loading):
                        state.confirm_delete()
                        st.rerun()
                with n:
                    if st.button("Keep it", key=f"keep_{entry_id}", disabled=state.loading):
                        state.cancel_delete()
                        st.rerun()
            else:
                b1, b2 = st.columns(2)
                with b1:
                    if st.button("✏️ Edit", key=f"edit_{entry_id}", disabled=state.loading):
                        state.start_edit(entry)
                        st.rerun()
                with b2:
                    if st.button("🗑️ Delete", key=f"delete_{entry_id}", disabled=state.loading):
                        state.request_delete(entry_id)
                        st.rerun()

st.divider()
st.caption("Built with Streamlit, FastAPI, and Supabase 🚀")
