"""
Time helpers for deciding whether a match is live or already over, and for
turning the API's epoch-millisecond kickoff into display labels.

Liveness is never stored on a `Match`; it is derived here from the kickoff
instant and the current time on every render.

Function notes:
    - `is_past` uses a fixed three-hour match duration (breaks included).
    - `is_live_window` is the narrower 2.5h window used for the card "LIVE"
        badge, so a match can be neither live nor past for the last half hour.
    - Label helpers go through pandas so the display timezone (`DISPLAY_TZ`)
        is applied consistently; a zero/invalid kickoff renders as ''.
"""

from __future__ import annotations
import os
import pandas as pd

from common.constants import LIVE_WINDOW_MS, MATCH_DURATION_MS

DISPLAY_TZ = os.getenv("DISPLAY_TZ", "UTC")


def is_past(match_date_ms: int, now_ms: int) -> bool:
    return now_ms > match_date_ms + MATCH_DURATION_MS


def is_live_window(match_date_ms: int, now_ms: int) -> bool:
    return match_date_ms <= now_ms <= match_date_ms + LIVE_WINDOW_MS


def kickoff_ts(match_date_ms: int):
    if not match_date_ms:
        return pd.NaT
    return pd.to_datetime(match_date_ms, unit="ms", utc=True).tz_convert(DISPLAY_TZ)


def _fmt(match_date_ms: int, pattern: str) -> str:
    ts = kickoff_ts(match_date_ms)
    return ts.strftime(pattern) if pd.notnull(ts) else ""


def kickoff_label(match_date_ms: int) -> str:
    """Full label, e.g. 'Sat 18 Oct 2026, 20:45'."""
    return _fmt(match_date_ms, "%a %d %b %Y, %H:%M")


def kickoff_day(match_date_ms: int) -> str:
    return _fmt(match_date_ms, "%b %d")


def kickoff_time(match_date_ms: int) -> str:
    return _fmt(match_date_ms, "%H:%M")
