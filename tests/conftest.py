import pytest
import requests

from models.match_model import Match, MatchSource, MatchTeams, Stream, Team

HOUR_MS = 60 * 60 * 1000
NOW_MS = 1_760_000_000_000


class FakeResponse:
    def __init__(self, payload=None, status=200):
        self._payload = payload
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


@pytest.fixture
def fake_api(monkeypatch):
    """Route SESSION.get to a {path suffix: FakeResponse | Exception} table; records URLs."""
    from common import utils

    routes = {}
    calls = []

    def fake_get(url, *args, **kwargs):
        calls.append(url)
        for suffix, answer in routes.items():
            if url.endswith(suffix):
                if isinstance(answer, Exception):
                    raise answer
                return answer
        return FakeResponse(status=404)

    monkeypatch.setattr(utils.SESSION, "get", fake_get)
    fake_get.routes = routes
    fake_get.calls = calls
    return fake_get


def make_match(id="1", title="Arsenal vs Chelsea", date=NOW_MS, popular=False,
               home="Arsenal", away="Chelsea", sources=(("alpha", "a1"),), category="football",
               home_badge="", away_badge="", poster=None):
    teams = MatchTeams(
        home=Team(home, home_badge) if home is not None else None,
        away=Team(away, away_badge) if away is not None else None,
    )
    return Match(
        id=id,
        title=title,
        category=category,
        date=date,
        popular=popular,
        poster=poster,
        teams=teams,
        sources=tuple(MatchSource(s, i) for s, i in sources),
    )


def make_stream(id="s1", no=1, source="alpha", url="https://embed.example/e/1", hd=True, language="English"):
    return Stream(id=id, stream_no=no, language=language, hd=hd, embed_url=url, source=source)
