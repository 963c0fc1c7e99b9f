"""
Main application entry for the StreamArena Streamlit app.

This module defines the page users see when they open the app. It renders
one of two views, chosen by `AppState.view`:
    - the list view: sidebar feeds/sports, a search box, a featured "hero"
        match and the match grid (or table),
    - the player view: the stream candidates of the selected match, the
        active stream (native video or embedded player) and a channel switcher.

Most of the logic lives elsewhere: the state and its actions in
`controllers.view_controller`, the stream session in
`controllers.player_controller`, and network access in
`controllers.data_controller` / `common.utils`. This file wires them to
Streamlit widgets.

Notes:
    - Session state: `AppState` and the current `PlayerSession` live in
        `st.session_state` and are replaced (never mutated) by callbacks.
    - Navigation: entering the player writes `?view=player` to the URL. When
        the marker disappears (browser back), the next run returns to the list
        exactly as the in-app back button does.
"""

# Import libraries
import logging
from functools import partial
import streamlit as st
import streamlit.components.v1 as components
from dotenv import load_dotenv

# Project modules read the environment at import time.
load_dotenv(override=False)

from common.constants import APP_NAME, LOG_LEVEL
from common.images import badge_or_placeholder, fallback_image, poster_url
from common.tables import matches_frame, streams_frame
from common.timing import is_live_window, kickoff_day, kickoff_label, kickoff_time
from common.ui import PLAYER_KEY, app_state, apply_theme, dispatch, sidebar_header
from common.utils import now_ms
from controllers import player_controller as pc
from controllers import view_controller as vc
from controllers.data_controller import load_initial, load_matches
from models.match_model import Match, Stream

# Configure Streamlit page and logging.
st.set_page_config(page_title=f"{APP_NAME} — Arena", layout="wide")
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)

VIEW_PARAM = "view"
GRID_COLUMNS = 4
TABLE_KEY = "match_table"


# ---------- Navigation ----------
def _open_match(match: Match):
    dispatch(vc.select_match, match)
    st.query_params[VIEW_PARAM] = vc.PLAYER_VIEW
    st.query_params["match"] = match.id


def _close_player():
    dispatch(vc.back_to_list)
    st.session_state.pop(TABLE_KEY, None)
    session = st.session_state.get(PLAYER_KEY)
    if session is not None:
        st.session_state[PLAYER_KEY] = pc.close_session(session)


def _back_to_matches():
    st.query_params.clear()
    _close_player()


def _sync_navigation():
    # A player view without the URL marker means the user navigated back.
    state = app_state()
    if state.view == vc.PLAYER_VIEW and st.query_params.get(VIEW_PARAM) != vc.PLAYER_VIEW:
        logger.debug("Navigation marker gone; returning to list")
        _close_player()
    elif state.view == vc.LIST_VIEW and VIEW_PARAM in st.query_params:
        st.query_params.clear()


# ---------- Data ----------
def _ensure_data():
    if not st.session_state.get("initialized"):
        with st.spinner("Loading arena..."):
            sports, matches = load_initial()
        dispatch(vc.initial_loaded, sports, matches)
        st.session_state["initialized"] = True
        return

    state = app_state()
    if state.loading:
        category = state.active_category
        with st.spinner(f"Loading {vc.category_title(category, state.sports)}..."):
            matches = load_matches(category)
        dispatch(vc.matches_loaded, category, matches)


# ---------- List view ----------
def _on_search():
    dispatch(vc.set_search, st.session_state.get("search_query", ""))


def _badge(name: str, badge_id: str, show: bool):
    if show:
        st.image(badge_or_placeholder(badge_id), width=48)
    else:
        st.markdown(f"### {(name or '?')[:1].upper()}")
    st.caption(name)


def _match_card(match: Match, settings, now: int, slot: int):
    live = is_live_window(match.date, now)
    show_badges = bool(match.home_badge and match.away_badge) or settings.show_incomplete_badges
    with st.container(border=True):
        if match.poster:
            st.image(poster_url(match.poster), use_container_width=True)
        head_l, head_r = st.columns([3, 2])
        head_l.caption(match.category.upper())
        head_r.markdown("🔴 **LIVE**" if live else f"📅 {kickoff_day(match.date)}")

        home_col, vs_col, away_col = st.columns([2, 1, 2])
        with home_col:
            _badge(match.home_name or "Home", match.home_badge, show_badges)
        vs_col.markdown("**VS**")
        with away_col:
            _badge(match.away_name or "Away", match.away_badge, show_badges)

        st.markdown(f"**{match.title}**")
        st.button(
            "▶ Watch Stream" if live else f"🕒 {kickoff_time(match.date)}",
            key=f"card_{slot}_{match.id}",
            use_container_width=True,
            on_click=_open_match,
            args=(match,),
        )


def _hero(match: Match):
    with st.container(border=True):
        img_col, text_col = st.columns([2, 3])
        img_col.image(poster_url(match.poster) or fallback_image(match.category), use_container_width=True)
        with text_col:
            st.caption(f"FEATURED • {match.category.upper()}")
            st.header(match.title)
            st.caption(kickoff_label(match.date))
            st.button("⚡ WATCH NOW", key="hero_watch", type="primary", on_click=_open_match, args=(match,))


def _on_table_select(matches):
    rows = st.session_state[TABLE_KEY].selection.rows
    if rows:
        _open_match(matches[rows[0]])


def _match_table(matches, settings, now: int):
    df = matches_frame(matches, settings, now)
    st.dataframe(
        df.drop(columns=["MatchId"]),
        use_container_width=True,
        hide_index=True,
        key=TABLE_KEY,
        on_select=partial(_on_table_select, matches),
        selection_mode="single-row",
        column_config={
            "Poster": st.column_config.ImageColumn(" ", width="small"),
            "HomeBadge": st.column_config.ImageColumn(" ", width="small"),
            "AwayBadge": st.column_config.ImageColumn(" ", width="small"),
            "Kickoff": st.column_config.DatetimeColumn("Kickoff", format="ddd D MMM, HH:mm"),
        },
    )


def render_list():
    state = app_state()
    sidebar_header(state)

    title_col, search_col = st.columns([3, 2])
    with title_col:
        st.caption("Now Viewing")
        st.title(vc.category_title(state.active_category, state.sports))
    with search_col:
        if "search_query" not in st.session_state:
            st.session_state["search_query"] = state.search_query
        st.text_input(
            "Search",
            key="search_query",
            placeholder="Search teams, matches...",
            label_visibility="collapsed",
            on_change=_on_search,
        )
        layout = st.radio("Layout", ["Grid", "Table"], horizontal=True, key="layout", label_visibility="collapsed")

    now = now_ms()
    filtered = vc.visible_matches(state, now)
    hero = vc.pick_hero(filtered, state.loading, state.search_query)
    if hero is not None:
        _hero(hero)

    if not state.search_query:
        st.subheader("🗂️ Latest Matches")
    if not filtered:
        st.info("No events found. Try another category or clear the search.")
        return

    if layout == "Table":
        _match_table(filtered, state.settings, now)
        return

    for start in range(0, len(filtered), GRID_COLUMNS):
        cols = st.columns(GRID_COLUMNS)
        for offset, (col, match) in enumerate(zip(cols, filtered[start:start + GRID_COLUMNS])):
            with col:
                _match_card(match, state.settings, now, start + offset)


# ---------- Player view ----------
def _current_session() -> pc.PlayerSession:
    return st.session_state[PLAYER_KEY]


def _switch(stream: Stream):
    st.session_state[PLAYER_KEY] = pc.switch_stream(_current_session(), stream, app_state().settings.auto_play)


def _play():
    st.session_state[PLAYER_KEY] = pc.start_playback(_current_session())


def _player_area(session: pc.PlayerSession):
    if session.error:
        st.error(f"**Signal Lost** — {session.error}")
        st.button("Return to Arena", key="error_back", on_click=_back_to_matches)
        return
    stream = session.active
    if stream is None:
        return
    if not session.has_started:
        st.markdown(f"#### Channel {stream.stream_no} ready")
        st.button("▶ Start stream", key="play", type="primary", on_click=_play)
    elif pc.playback_medium(stream) == pc.VIDEO:
        st.video(stream.embed_url, autoplay=True)
    else:
        components.iframe(stream.embed_url, height=540, scrolling=False)
    st.link_button("↗ EXT. PLAYER", stream.embed_url)


def _stream_selector(session: pc.PlayerSession):
    st.markdown("#### Feed Sources")
    if not session.streams:
        st.caption("No feeds.")
        return
    active_key = pc.stream_key(session.active) if session.active else None
    for slot, stream in enumerate(session.streams):
        key = pc.stream_key(stream)
        label = f"CHANNEL {stream.stream_no}{' · HD' if stream.hd else ''} — {stream.language or '?'} · SRC: {stream.source}"
        st.button(
            label,
            key=f"stream_{slot}_{key}",
            type="primary" if key == active_key else "secondary",
            use_container_width=True,
            on_click=_switch,
            args=(stream,),
        )
    with st.expander("Details"):
        st.dataframe(streams_frame(session.streams), use_container_width=True, hide_index=True)
    st.caption("Streams provided by external partners. StreamArena does not host content. If playback fails, switch channels.")


def render_player():
    state = app_state()
    match = state.selected_match
    sidebar_header(state, show_feeds=False)

    session = st.session_state.get(PLAYER_KEY)
    if pc.needs_reload(session, match, state.settings.auto_play):
        session = pc.open_session(session, match, state.settings.auto_play)
        st.session_state[PLAYER_KEY] = session

    back_col, title_col = st.columns([1, 8])
    back_col.button("← Back", key="back", on_click=_back_to_matches, help="Back to matches")
    with title_col:
        st.title(match.title)
        st.caption(f"{match.category.upper()} • {kickoff_label(match.date)}")

    if session.loading:
        with st.spinner("Scanning frequencies..."):
            session = pc.load_session(session, match, current=_current_session)
        st.session_state[PLAYER_KEY] = session

    main_col, side_col = st.columns([3, 1])
    with main_col:
        _player_area(session)
    with side_col:
        _stream_selector(session)


def main():
    _sync_navigation()
    _ensure_data()
    state = app_state()
    apply_theme(state)

    if state.view == vc.PLAYER_VIEW and state.selected_match is not None:
        render_player()
    else:
        render_list()


if __name__ == "__main__":
    main()
