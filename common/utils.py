"""
Network helpers for the streamed.pk API.

This module contains a small `requests.Session` wrapper (`streamed_get`) and
the three gateway calls used by the controllers: `list_sports`,
`list_matches` and `list_streams`.

The gateway is fail-soft: a non-success status, a transport error or an
unexpected payload never raises to the caller. Every call returns a
`FetchResult` whose `data` is always a list (possibly empty); when the call
failed, `cause` holds the logged reason so tests and the UI can tell an empty
feed apart from a broken one without changing what they render.

Responses are intentionally not cached and requests carry no timeout or
retry: the dashboard always shows whatever the API returns right now.
"""

# Import libraries
from __future__ import annotations
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, List, Optional, TypeVar
import requests
from .constants import BASE_URL, CATEGORY_ENDPOINTS, USER_AGENT
from models.match_model import Match, Sport, Stream

logger = logging.getLogger(__name__)

T = TypeVar("T")

SESSION = requests.Session()
SESSION.headers.update({"User-Agent": USER_AGENT, "Accept": "application/json"})


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    data: List[T] = field(default_factory=list)
    cause: Optional[str] = None

    @classmethod
    def success(cls, data: List[T]) -> "FetchResult[T]":
        return cls(data=list(data))

    @classmethod
    def empty(cls, cause: str) -> "FetchResult[T]":
        return cls(data=[], cause=cause)

    @property
    def ok(self) -> bool:
        return self.cause is None


def now_ms() -> int:
    return int(time.time() * 1000)


def streamed_get(path: str) -> Any:
    url = f"{BASE_URL.rstrip('/')}/{path.lstrip('/')}"
    resp = SESSION.get(url)
    resp.raise_for_status()
    return resp.json()


def _parse_items(payload: list, parse: Callable[[dict], T], what: str) -> List[T]:
    # A malformed record is skipped; the rest of the feed is kept.
    items = []
    for item in payload:
        if not isinstance(item, dict):
            continue
        try:
            items.append(parse(item))
        except (TypeError, AttributeError, ValueError) as exc:
            logger.warning("Skipping malformed record in %s: %s", what, exc)
    return items


def _fetch_list(path: str, parse: Callable[[dict], T], what: str) -> FetchResult[T]:
    # Any failure (HTTP status, transport, JSON, shape) degrades to an empty list.
    try:
        payload = streamed_get(path)
        if not isinstance(payload, list):
            raise ValueError(f"expected a JSON array, got {type(payload).__name__}")
        items = _parse_items(payload, parse, what)
    except (requests.RequestException, ValueError) as exc:
        cause = f"{what}: {exc}"
        logger.warning("Error fetching %s (%s): %s", what, path, exc)
        return FetchResult.empty(cause)
    return FetchResult.success(items)


def matches_endpoint(category: str) -> str:
    """Map a category token to its endpoint; unknown tokens are sport ids."""
    return CATEGORY_ENDPOINTS.get(category, f"/matches/{category}")


def list_sports() -> FetchResult[Sport]:
    return _fetch_list("/sports", Sport.from_api, "sports")


def list_matches(category: str = "live") -> FetchResult[Match]:
    return _fetch_list(matches_endpoint(category), Match.from_api, f"matches for {category}")


def list_streams(source: str, id: str) -> FetchResult[Stream]:
    return _fetch_list(f"/stream/{source}/{id}", Stream.from_api, f"streams for {source}/{id}")
