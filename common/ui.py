# common/ui.py
from __future__ import annotations
from pathlib import Path
from typing import Any, Callable
import streamlit as st

from common.constants import APP_NAME, MAIN_FEEDS
from controllers import view_controller as vc
from controllers.view_controller import AppState

# Project root = .../streamarena
APP_ROOT = Path(__file__).resolve().parents[1]

STATE_KEY = "app_state"
PLAYER_KEY = "player_session"


def app_state() -> AppState:
    """The single AppState of this browser session (created on first use)."""
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = AppState()
    return st.session_state[STATE_KEY]


def dispatch(action: Callable[..., AppState], *args: Any) -> AppState:
    """Apply a view_controller action to the stored state and store the result."""
    new_state = action(app_state(), *args)
    st.session_state[STATE_KEY] = new_state
    return new_state


def _link_if_exists(rel_path: str, label: str, icon: str = "📄"):
    """Safely add a page link if the target file exists."""
    target = (APP_ROOT / rel_path)
    if target.exists():
        # Streamlit expects an app-relative path with forward slashes
        st.sidebar.page_link(rel_path.replace("\\", "/"), label=label, icon=icon)


def apply_theme(state: AppState):
    """Focus ring for TV mode and optional removal of animations."""
    css = []
    if state.settings.tv_mode:
        css.append("button:focus, a:focus {outline: 4px solid #22d3ee !important; background:#27272a !important;}")
    else:
        css.append("button:focus, a:focus {outline: 2px solid rgba(6,182,212,.5) !important;}")
    if state.settings.reduce_motion:
        css.append("*, *::before, *::after {animation: none !important; transition: none !important;}")
    st.markdown(f"<style>{''.join(css)}</style>", unsafe_allow_html=True)


def sidebar_header(state: AppState, show_feeds: bool = True):
    # Hide the built-in pages nav so only our custom links appear
    st.markdown(
        "<style>[data-testid='stSidebarNav']{display:none !important;}</style>",
        unsafe_allow_html=True,
    )
    with st.sidebar:
        st.markdown(f"## ⚡ {APP_NAME}")

        st.page_link("main.py", label="Arena", icon="🏟️")
        _link_if_exists("pages/1_Settings.py", label="Settings", icon="⚙️")

        if not show_feeds:
            return

        st.divider()
        st.markdown("#### Main Feeds")
        for token, label, icon in MAIN_FEEDS:
            st.button(
                f"{icon} {label}",
                key=f"feed_{token}",
                type="primary" if state.active_category == token else "secondary",
                use_container_width=True,
                on_click=dispatch,
                args=(vc.change_category, token),
            )

        st.markdown("#### Leagues & Sports")
        if not state.sports:
            st.caption("No sports available.")
        for slot, sport in enumerate(state.sports):
            st.button(
                sport.name.title(),
                key=f"sport_{slot}_{sport.id}",
                type="primary" if state.active_category == sport.id else "secondary",
                use_container_width=True,
                on_click=dispatch,
                args=(vc.change_category, sport.id),
            )
