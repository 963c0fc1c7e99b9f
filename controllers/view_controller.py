"""
Application state for the list/player dashboard and the pure functions that
derive what the list view shows.

The whole UI state lives in one frozen `AppState`. Pages never mutate it;
they call an action (`change_category`, `select_match`, ...) that returns a
new state and store that back into `st.session_state`. This keeps every
change in one place and makes the logic testable without Streamlit.

Derived values (`filter_matches`, `pick_hero`) are recomputed from the raw
state on every rerun. The lists are small and the work is a linear scan, so
nothing here is cached.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Iterable, List, Optional, Sequence, Tuple

from common.constants import CATEGORY_TITLES, DEFAULT_CATEGORY
from common.timing import is_past
from models.match_model import AppSettings, Match, Sport

LIST_VIEW = "list"
PLAYER_VIEW = "player"


@dataclass(frozen=True)
class AppState:
    active_category: str = DEFAULT_CATEGORY
    search_query: str = ""
    matches: Tuple[Match, ...] = ()
    sports: Tuple[Sport, ...] = ()
    settings: AppSettings = field(default_factory=AppSettings)
    selected_match: Optional[Match] = None
    view: str = LIST_VIEW
    loading: bool = True


# ---------- Actions ----------
def initial_loaded(state: AppState, sports: Iterable[Sport], matches: Iterable[Match]) -> AppState:
    return replace(state, sports=tuple(sports), matches=tuple(matches), loading=False)


def change_category(state: AppState, category: str) -> AppState:
    if category == state.active_category and not state.loading:
        return state
    return replace(state, active_category=category, matches=(), loading=True)


def matches_loaded(state: AppState, category: str, matches: Iterable[Match]) -> AppState:
    # A response for a category the user already left is dropped.
    if category != state.active_category:
        return state
    return replace(state, matches=tuple(matches), loading=False)


def set_search(state: AppState, query: str) -> AppState:
    return replace(state, search_query=query or "")


def toggle_setting(state: AppState, key: str) -> AppState:
    return replace(state, settings=state.settings.toggled(key))


def select_match(state: AppState, match: Match) -> AppState:
    return replace(state, selected_match=match, view=PLAYER_VIEW)


def back_to_list(state: AppState) -> AppState:
    return replace(state, selected_match=None, view=LIST_VIEW)


# ---------- Derivations ----------
def matches_search(match: Match, query: str) -> bool:
    """Case-insensitive substring on title, home team or away team."""
    q = (query or "").lower()
    if not q:
        return True
    return (
        q in match.title.lower()
        or q in match.home_name.lower()
        or q in match.away_name.lower()
    )


def is_hidden_as_past(match: Match, settings: AppSettings, category: str, now_ms: int) -> bool:
    # The "live" feed is trusted even when the kickoff is long gone.
    if settings.show_past_games or category == "live":
        return False
    return is_past(match.date, now_ms)


def filter_matches(
    matches: Sequence[Match],
    query: str,
    settings: AppSettings,
    category: str,
    now_ms: int,
) -> List[Match]:
    return [
        m for m in matches
        if matches_search(m, query) and not is_hidden_as_past(m, settings, category, now_ms)
    ]


def pick_hero(filtered: Sequence[Match], loading: bool = False, query: str = "") -> Optional[Match]:
    """First popular match, else the first one; none while loading, empty or searching."""
    if loading or not filtered or query:
        return None
    return next((m for m in filtered if m.popular), filtered[0])


def visible_matches(state: AppState, now_ms: int) -> List[Match]:
    return filter_matches(state.matches, state.search_query, state.settings, state.active_category, now_ms)


def category_title(category: str, sports: Sequence[Sport] = ()) -> str:
    if category in CATEGORY_TITLES:
        return CATEGORY_TITLES[category]
    for s in sports:
        if s.id == category:
            return s.name
    return category
