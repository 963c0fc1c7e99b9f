"""
Player session for the selected match.

A `PlayerSession` holds the streams found for one match, which of them is
active, and whether playback has started. Like `AppState`, it is a frozen
dataclass replaced wholesale by the functions below.

Lifecycle:
    1. `open_session(previous, match, auto_play)` bumps the generation
        `token` and resets everything. A match with no sources fails right
        away with the "no sources" message and never fetches.
    2. `load_session(session, match)` fetches every source in parallel and
        applies the result with `resolve` (or `fail` on an exception).
        Both ignore results whose token is no longer the session's token, so
        a late answer for a previously selected match is discarded.
    3. `switch_stream` / `start_playback` react to the stream selector and the
        play button.

`playback_medium` decides whether an address is a direct media file (played
with a native video element) or a third-party player page (embedded in an
iframe).
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, replace
from typing import Callable, Optional, Sequence, Tuple
from urllib.parse import urlsplit

from common.constants import (
    DIRECT_FILE_EXTENSIONS, NO_SIGNAL_MESSAGE, NO_SOURCES_MESSAGE, UNKNOWN_ERROR_MESSAGE,
)
from controllers.data_controller import StreamFetcher, fetch_streams
from common.utils import list_streams
from models.match_model import Match, Stream

logger = logging.getLogger(__name__)

_DIRECT_SUFFIXES = tuple(f".{ext}" for ext in DIRECT_FILE_EXTENSIONS)

VIDEO = "video"
EMBED = "embed"


@dataclass(frozen=True)
class PlayerSession:
    match_id: Optional[str] = None
    streams: Tuple[Stream, ...] = ()
    active: Optional[Stream] = None
    loading: bool = False
    error: Optional[str] = None
    has_started: bool = False
    auto_play: bool = True
    token: int = 0


def open_session(previous: Optional[PlayerSession], match: Match, auto_play: bool) -> PlayerSession:
    token = (previous.token if previous else 0) + 1
    if not match.sources:
        logger.info("Match %s declares no stream sources", match.id)
        return PlayerSession(match_id=match.id, error=NO_SOURCES_MESSAGE,
                             auto_play=auto_play, token=token)
    return PlayerSession(match_id=match.id, loading=True, auto_play=auto_play, token=token)


def needs_reload(session: Optional[PlayerSession], match: Match, auto_play: bool) -> bool:
    if session is None:
        return True
    return session.match_id != match.id or session.auto_play != auto_play


def close_session(session: PlayerSession) -> PlayerSession:
    """Forget the match but keep the token counting, so any late result is dropped."""
    return PlayerSession(auto_play=session.auto_play, token=session.token + 1)


def resolve(session: PlayerSession, token: int, streams: Sequence[Stream]) -> PlayerSession:
    if token != session.token:
        logger.debug("Discarding streams for superseded session token %s", token)
        return session
    if not streams:
        logger.info("No streams returned for match %s", session.match_id)
        return replace(session, streams=(), active=None, loading=False, error=NO_SIGNAL_MESSAGE)
    streams = tuple(streams)
    return replace(
        session,
        streams=streams,
        active=streams[0],
        loading=False,
        error=None,
        has_started=session.auto_play,
    )


def fail(session: PlayerSession, token: int, exc: BaseException) -> PlayerSession:
    if token != session.token:
        logger.debug("Discarding error for superseded session token %s", token)
        return session
    message = str(exc) or UNKNOWN_ERROR_MESSAGE
    logger.info("Stream lookup failed for match %s: %s", session.match_id, message)
    return replace(session, loading=False, error=message)


def load_session(
    session: PlayerSession,
    match: Match,
    fetch: StreamFetcher = list_streams,
    current: Optional[Callable[[], PlayerSession]] = None,
) -> PlayerSession:
    """
    Fetch and apply the streams for `match` if the session is still waiting.

    `current` returns the session that is live once the fetch is done (the
    one in `st.session_state`); results are applied to it, and dropped when it
    was reopened for another match in the meantime.
    """
    if not session.loading:
        return session
    token = session.token
    latest = current or (lambda: session)
    try:
        streams = fetch_streams(match, fetch)
    except Exception as exc:
        return fail(latest(), token, exc)
    return resolve(latest(), token, streams)


def switch_stream(session: PlayerSession, stream: Stream, auto_play: bool) -> PlayerSession:
    return replace(session, active=stream, has_started=bool(auto_play))


def start_playback(session: PlayerSession) -> PlayerSession:
    return replace(session, has_started=True)


def is_direct_file(url: Optional[str]) -> bool:
    # only the path counts; ?query and #hash are ignored
    return bool(url) and urlsplit(url).path.lower().endswith(_DIRECT_SUFFIXES)


def playback_medium(stream: Stream) -> str:
    return VIDEO if is_direct_file(stream.embed_url) else EMBED


def stream_key(stream: Stream) -> str:
    return f"{stream.source}-{stream.id}-{stream.stream_no}"
