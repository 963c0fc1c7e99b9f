"""
Data controller helpers that glue the gateway calls in `common.utils` to the
Streamlit pages.

This module exposes the loads the pages need:
    - `load_initial()` fetches the sports catalog and the live feed at the
        same time and returns once both are done.
    - `load_matches(category)` fetches one category feed.
    - `fetch_streams(match)` asks every declared source of a match for its
        streams in parallel and flattens the answers in source order.

Every gateway call is fail-soft, so a worker never raises: a failing source
contributes an empty sub-list and the join still completes.
"""

from __future__ import annotations
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Tuple

from common.constants import DEFAULT_CATEGORY, STREAM_WORKERS
from common.utils import FetchResult, list_matches, list_sports, list_streams
from models.match_model import Match, Sport, Stream

logger = logging.getLogger(__name__)

StreamFetcher = Callable[[str, str], FetchResult[Stream]]


def load_initial() -> Tuple[List[Sport], List[Match]]:
    with ThreadPoolExecutor(max_workers=2) as executor:
        sports_future = executor.submit(list_sports)
        matches_future = executor.submit(list_matches, DEFAULT_CATEGORY)
        sports, matches = sports_future.result(), matches_future.result()
    return sports.data, matches.data


def load_matches(category: str) -> List[Match]:
    return list_matches(category).data


def fetch_streams(match: Match, fetch: StreamFetcher = list_streams) -> List[Stream]:
    if not match.sources:
        return []
    workers = max(1, min(STREAM_WORKERS, len(match.sources)))
    with ThreadPoolExecutor(max_workers=workers) as executor:
        # executor.map keeps the order of match.sources
        results = list(executor.map(lambda s: fetch(s.source, s.id), match.sources))
    failed = [r.cause for r in results if not r.ok]
    if failed:
        logger.info("%d of %d sources failed for match %s", len(failed), len(results), match.id)
    return [stream for r in results for stream in r.data]
