import pytest

from common.constants import NO_SIGNAL_MESSAGE, NO_SOURCES_MESSAGE, UNKNOWN_ERROR_MESSAGE
from common.utils import FetchResult
from controllers import player_controller as pc
from conftest import make_match, make_stream


def fetcher(table):
    """Stream fetcher answering from {(source, id): [streams]}; records calls."""
    calls = []

    def fetch(source, id):
        calls.append((source, id))
        return FetchResult.success(table.get((source, id), []))

    fetch.calls = calls
    return fetch


def test_no_sources_fails_immediately_without_fetching():
    match = make_match(sources=())
    session = pc.open_session(None, match, auto_play=True)
    assert session.error == NO_SOURCES_MESSAGE
    assert session.streams == ()
    assert not session.loading

    fetch = fetcher({})
    assert pc.load_session(session, match, fetch) is session
    assert fetch.calls == []


def test_streams_are_combined_in_source_order():
    match = make_match(sources=(("alpha", "a"), ("bravo", "b")))
    first, second = make_stream(id="1", source="alpha"), make_stream(id="2", source="bravo")
    fetch = fetcher({("alpha", "a"): [first], ("bravo", "b"): [second]})

    session = pc.load_session(pc.open_session(None, match, auto_play=False), match, fetch)
    assert session.streams == (first, second)
    assert session.active == first
    assert session.error is None
    assert not session.loading
    assert sorted(fetch.calls) == [("alpha", "a"), ("bravo", "b")]


@pytest.mark.parametrize("auto_play", [True, False])
def test_has_started_follows_autoplay_after_load(auto_play):
    match = make_match()
    fetch = fetcher({("alpha", "a1"): [make_stream()]})
    session = pc.load_session(pc.open_session(None, match, auto_play), match, fetch)
    assert session.has_started is auto_play


def test_all_sources_empty_is_no_signal():
    match = make_match(sources=(("alpha", "a"), ("bravo", "b")))
    session = pc.load_session(pc.open_session(None, match, True), match, fetcher({}))
    assert session.error == NO_SIGNAL_MESSAGE
    assert session.error != NO_SOURCES_MESSAGE
    assert session.streams == ()
    assert session.active is None


def test_failing_source_only_drops_its_own_streams():
    match = make_match(sources=(("alpha", "a"), ("bravo", "b")))
    good = make_stream(id="2", source="bravo")

    def fetch(source, id):
        if source == "alpha":
            return FetchResult.empty("alpha: 503")
        return FetchResult.success([good])

    session = pc.load_session(pc.open_session(None, match, True), match, fetch)
    assert session.streams == (good,)


def test_exception_message_becomes_error():
    match = make_match()

    def boom(source, id):
        raise RuntimeError("socket closed")

    session = pc.load_session(pc.open_session(None, match, True), match, boom)
    assert session.error == "socket closed"
    assert not session.loading


def test_exception_without_message_uses_generic_error():
    match = make_match()

    def boom(source, id):
        raise RuntimeError()

    session = pc.load_session(pc.open_session(None, match, True), match, boom)
    assert session.error == UNKNOWN_ERROR_MESSAGE


def test_stale_results_are_discarded():
    first_match = make_match(id="1")
    second_match = make_match(id="2", sources=(("bravo", "b"),))
    stale = pc.open_session(None, first_match, True)
    # the user picked another match while the first fetch was in flight
    latest = pc.open_session(stale, second_match, True)
    fetch = fetcher({("alpha", "a1"): [make_stream()]})

    result = pc.load_session(stale, first_match, fetch, current=lambda: latest)
    assert result is latest
    assert result.streams == ()
    assert result.match_id == "2"


def test_resolve_and_fail_ignore_old_tokens():
    session = pc.open_session(None, make_match(), True)
    assert pc.resolve(session, session.token - 1, [make_stream()]) is session
    assert pc.fail(session, session.token - 1, RuntimeError("x")) is session


def test_tokens_increase_across_sessions():
    a = pc.open_session(None, make_match(id="1"), True)
    closed = pc.close_session(a)
    b = pc.open_session(closed, make_match(id="1"), True)
    assert a.token < closed.token < b.token
    assert closed.match_id is None


def test_needs_reload():
    match = make_match(id="1")
    session = pc.open_session(None, match, True)
    assert pc.needs_reload(None, match, True)
    assert not pc.needs_reload(session, match, True)
    assert pc.needs_reload(session, match, False)
    assert pc.needs_reload(session, make_match(id="2"), True)
    assert pc.needs_reload(pc.close_session(session), match, True)


@pytest.mark.parametrize("started", [True, False])
def test_switch_stream_respects_autoplay(started):
    session = pc.PlayerSession(match_id="1", streams=(make_stream(id="1"), make_stream(id="2")),
                               active=make_stream(id="1"), has_started=started)
    target = make_stream(id="2")
    off = pc.switch_stream(session, target, auto_play=False)
    on = pc.switch_stream(session, target, auto_play=True)
    assert off.active == target and off.has_started is False
    assert on.active == target and on.has_started is True


def test_start_playback():
    session = pc.PlayerSession(match_id="1", active=make_stream())
    assert pc.start_playback(session).has_started is True


@pytest.mark.parametrize("url", [
    "foo.m3u8",
    "bar.mp4",
    "https://cdn.example/live/INDEX.M3U8",
    "https://cdn.example/v/clip.Mp4?token=abc",
    "https://cdn.example/live/index.m3u8#t=10",
    "https://cdn.example/live/index.m3u8?a=1#frag",
])
def test_direct_files(url):
    assert pc.is_direct_file(url)
    assert pc.playback_medium(make_stream(url=url)) == pc.VIDEO


@pytest.mark.parametrize("url", [
    "https://embedsports.top/embed/alpha/abc/1",
    "https://cdn.example/watch?file=clip.mp4",
    "https://cdn.example/clip.mp4x",
    "",
    None,
])
def test_embeddable_addresses(url):
    assert not pc.is_direct_file(url)


def test_embed_medium_and_stream_key():
    stream = make_stream(id="abc", no=3, source="delta")
    assert pc.playback_medium(stream) == pc.EMBED
    assert pc.stream_key(stream) == "delta-abc-3"
