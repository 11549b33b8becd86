"""Streamlit rendering for the users list and user detail screens."""

from __future__ import annotations

import threading
from typing import Callable, Literal

import streamlit as st

from users_app.domains.user import User
from users_app.orchestration.users_state import UsersStateHolder, UsersUiState

Screen = Literal["loading", "error", "list"]


def screen_for(state: UsersUiState) -> Screen:
    """Pick which screen variant to show. Loading wins over a stale error or list."""
    if state.is_loading:
        return "loading"
    if state.error_message is not None:
        return "error"
    return "list"


def format_user_row(user: User) -> str:
    return f"**{user.name}**  \n{user.email}"


def wait_until_settled(holder: UsersStateHolder, timeout: float) -> UsersUiState:
    """
    Block until the holder leaves the loading state or `timeout` passes.

    Streamlit scripts do not rerun on background updates, so the page waits
    for the outcome before rendering.
    """
    settled = threading.Event()

    def on_state(state: UsersUiState) -> None:
        if not state.is_loading:
            settled.set()

    unsubscribe = holder.subscribe(on_state)
    try:
        if not holder.current().is_loading:
            return holder.current()
        settled.wait(timeout)
        return holder.current()
    finally:
        unsubscribe()


def render_users_screen(
    state: UsersUiState,
    on_retry: Callable[[], None],
    on_select: Callable[[User], None],
) -> None:
    screen = screen_for(state)
    if screen == "loading":
        st.info("Loading users…")
        return
    if screen == "error":
        st.error(f"Error: {state.error_message}")
        st.button("Retry", on_click=on_retry, key="users_retry")
        return

    if not state.users:
        st.caption("No users.")
        return
    for user in state.users:
        col1, col2 = st.columns([4, 1])
        with col1:
            st.markdown(format_user_row(user))
        with col2:
            st.button("Open", key=f"user_{user.id}", on_click=on_select, args=(user,))
        st.divider()


def render_user_detail(user: User, on_back: Callable[[], None]) -> None:
    st.button("← Back", on_click=on_back, key="user_detail_back")
    st.header(user.name)
    st.caption(user.email)


__all__ = [
    "format_user_row",
    "render_user_detail",
    "render_users_screen",
    "screen_for",
    "wait_until_settled",
]
