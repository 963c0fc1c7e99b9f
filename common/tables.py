"""
Tabular views of matches and streams.

The list page can show matches as a compact table instead of cards, and the
player page lists the stream candidates. Both are rendered with
`st.dataframe`, so this module turns the model objects into pandas
DataFrames with the columns the UI shows (badges as image URLs for
`st.column_config.ImageColumn`).
"""

from __future__ import annotations
from typing import Sequence
import pandas as pd

from common.images import badge_url, fallback_image, poster_url
from common.timing import DISPLAY_TZ, is_live_window, kickoff_ts
from controllers.player_controller import playback_medium
from models.match_model import AppSettings, Match, Stream

MATCH_COLUMNS = ["Poster", "Live", "Category", "Kickoff", "HomeBadge", "Home", "Away", "AwayBadge", "Title", "MatchId"]
STREAM_COLUMNS = ["Channel", "HD", "Language", "Source", "Medium"]


def _badges(match: Match, settings: AppSettings) -> tuple[str, str]:
    # Badges only when both sides have one, unless incomplete badges are allowed.
    home, away = match.home_badge, match.away_badge
    if not (home and away) and not settings.show_incomplete_badges:
        return "", ""
    return badge_url(home), badge_url(away)


def matches_frame(matches: Sequence[Match], settings: AppSettings, now_ms: int) -> pd.DataFrame:
    rows = []
    for m in matches:
        home_badge, away_badge = _badges(m, settings)
        rows.append({
            "Poster": poster_url(m.poster) or fallback_image(m.category),
            "Live": is_live_window(m.date, now_ms),
            "Category": m.category,
            "Kickoff": kickoff_ts(m.date),
            "HomeBadge": home_badge,
            "Home": m.home_name or "Home",
            "Away": m.away_name or "Away",
            "AwayBadge": away_badge,
            "Title": m.title,
            "MatchId": m.id,
        })
    df = pd.DataFrame(rows, columns=MATCH_COLUMNS)
    # Keep Kickoff a datetime column even when every value is missing.
    df["Kickoff"] = pd.to_datetime(df["Kickoff"], errors="coerce", utc=True).dt.tz_convert(DISPLAY_TZ)
    return df


def streams_frame(streams: Sequence[Stream]) -> pd.DataFrame:
    rows = [{
        "Channel": s.stream_no,
        "HD": s.hd,
        "Language": s.language,
        "Source": s.source,
        "Medium": playback_medium(s),
    } for s in streams]
    return pd.DataFrame(rows, columns=STREAM_COLUMNS)
