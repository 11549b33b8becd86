"""
Users directory: Streamlit UI entry point.
"""

import streamlit as st

# Load .env first so USERS_API_BASE_URL and timeouts are picked up
from users_app.utils.config import load_config, log_level
load_config()

from users_app.orchestration.dispatchers import AppDispatchers
from users_app.services.shared_module import SharedModule
from users_app.ui.users_view import render_user_detail, render_users_screen, wait_until_settled
from users_app.utils.logger import setup_logger, get_logger

setup_logger(level=log_level())
log = get_logger()

LOAD_WAIT_SECONDS = 45.0

st.set_page_config(page_title="Users", layout="centered")
st.title("Users")


@st.cache_resource
def get_shared_module() -> SharedModule:
    # One pair of thread pools for the whole process; session holders share it
    # and are never cleared, so they must not own executors.
    return SharedModule.from_env(dispatchers=AppDispatchers.default())


try:
    module = get_shared_module()
except ValueError as e:
    st.error(str(e))
    st.stop()

# One holder per browser session; load on first display.
if "users_holder" not in st.session_state:
    holder = module.provide_users_state_holder()
    st.session_state.users_holder = holder
    holder.load()
if "selected_user" not in st.session_state:
    st.session_state.selected_user = None

holder = st.session_state.users_holder


def _select(user) -> None:
    st.session_state.selected_user = user


def _back() -> None:
    st.session_state.selected_user = None


with st.sidebar:
    st.caption(f"API: `{module.base_url}`")
    if st.button("Reload"):
        holder.load()

if st.session_state.selected_user is not None:
    render_user_detail(st.session_state.selected_user, on_back=_back)
else:
    state = holder.current()
    if state.is_loading:
        with st.spinner("Loading users…"):
            state = wait_until_settled(holder, LOAD_WAIT_SECONDS)
    render_users_screen(state, on_retry=holder.load, on_select=_select)
