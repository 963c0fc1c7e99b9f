"""
Small data models for the records returned by the streamed.pk API.

These lightweight dataclasses document the expected fields for each record.
They are frozen (immutable) so they can be stored in `st.session_state` and
passed between reruns without accidental modification; any "change" builds a
new instance instead.

Each model has a `from_api(...)` constructor that reads the raw JSON dict
defensively (`.get()` with defaults), because upstream payloads are often
missing optional keys such as `teams`, `poster` or a team `badge`.
"""

from __future__ import annotations
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class Sport:
        id: str
        name: str

        @classmethod
        def from_api(cls, data: Dict[str, Any]) -> "Sport":
                return cls(id=str(data.get("id", "")), name=str(data.get("name", "") or ""))


@dataclass(frozen=True)
class Team:
        name: str
        badge: str = ""

        @classmethod
        def from_api(cls, data: Optional[Dict[str, Any]]) -> Optional["Team"]:
                if not isinstance(data, dict) or not data:
                        return None
                return cls(name=str(data.get("name", "") or ""), badge=str(data.get("badge", "") or ""))


@dataclass(frozen=True)
class MatchTeams:
        home: Optional[Team] = None
        away: Optional[Team] = None


@dataclass(frozen=True)
class MatchSource:
        source: str
        id: str


@dataclass(frozen=True)
class Match:
        id: str
        title: str
        category: str
        date: int                       # kickoff, epoch milliseconds
        popular: bool = False
        poster: Optional[str] = None
        teams: Optional[MatchTeams] = None
        sources: Tuple[MatchSource, ...] = ()

        @classmethod
        def from_api(cls, data: Dict[str, Any]) -> "Match":
                teams_raw = data.get("teams") or None
                raw_sources = data.get("sources")
                teams = None
                if isinstance(teams_raw, dict):
                        teams = MatchTeams(home=Team.from_api(teams_raw.get("home")),
                                           away=Team.from_api(teams_raw.get("away")))
                sources = tuple(
                        MatchSource(source=str(s.get("source", "")), id=str(s.get("id", "")))
                        for s in (raw_sources if isinstance(raw_sources, list) else [])
                        if isinstance(s, dict)
                )
                try:
                        date = int(data.get("date") or 0)
                except (TypeError, ValueError):
                        date = 0
                return cls(
                        id=str(data.get("id", "")),
                        title=str(data.get("title", "") or ""),
                        category=str(data.get("category", "") or ""),
                        date=date,
                        popular=bool(data.get("popular", False)),
                        poster=data.get("poster") or None,
                        teams=teams,
                        sources=sources,
                )

        @property
        def home_name(self) -> str:
                return self.teams.home.name if self.teams and self.teams.home else ""

        @property
        def away_name(self) -> str:
                return self.teams.away.name if self.teams and self.teams.away else ""

        @property
        def home_badge(self) -> str:
                return self.teams.home.badge if self.teams and self.teams.home else ""

        @property
        def away_badge(self) -> str:
                return self.teams.away.badge if self.teams and self.teams.away else ""


@dataclass(frozen=True)
class Stream:
        id: str
        stream_no: int
        language: str
        hd: bool
        embed_url: str
        source: str

        @classmethod
        def from_api(cls, data: Dict[str, Any]) -> "Stream":
                try:
                        stream_no = int(data.get("streamNo") or 0)
                except (TypeError, ValueError):
                        stream_no = 0
                return cls(
                        id=str(data.get("id", "")),
                        stream_no=stream_no,
                        language=str(data.get("language", "") or ""),
                        hd=bool(data.get("hd", False)),
                        embed_url=str(data.get("embedUrl", "") or ""),
                        source=str(data.get("source", "") or ""),
                )


@dataclass(frozen=True)
class AppSettings:
        show_incomplete_badges: bool = False
        auto_play: bool = True
        reduce_motion: bool = False
        tv_mode: bool = False           # high contrast focus for TV remotes
        show_past_games: bool = False

        def toggled(self, key: str) -> "AppSettings":
                """Return a copy with the boolean flag `key` flipped."""
                if key not in {f.name for f in fields(self)}:
                        raise KeyError(key)
                return replace(self, **{key: not getattr(self, key)})
