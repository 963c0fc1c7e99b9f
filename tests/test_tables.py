from common.images import SPORT_IMAGES, badge_url, poster_url
from common.tables import MATCH_COLUMNS, STREAM_COLUMNS, matches_frame, streams_frame
from models.match_model import AppSettings
from conftest import HOUR_MS, NOW_MS, make_match, make_stream


def test_matches_frame_columns_and_live_flag():
    matches = [
        make_match(id="live", date=NOW_MS - HOUR_MS, home_badge="h", away_badge="a", poster="/api/images/poster/p"),
        make_match(id="later", date=NOW_MS + 5 * HOUR_MS, category="basketball"),
    ]
    df = matches_frame(matches, AppSettings(), NOW_MS)
    assert list(df.columns) == MATCH_COLUMNS
    assert df["MatchId"].tolist() == ["live", "later"]
    assert df["Live"].tolist() == [True, False]
    assert df.loc[0, "Poster"] == poster_url("/api/images/poster/p")
    assert df.loc[1, "Poster"] == SPORT_IMAGES["basketball"]
    assert df.loc[0, "HomeBadge"] == badge_url("h")


def test_incomplete_badges_hidden_unless_enabled():
    match = make_match(home_badge="h", away_badge="")
    hidden = matches_frame([match], AppSettings(), NOW_MS)
    shown = matches_frame([match], AppSettings(show_incomplete_badges=True), NOW_MS)
    assert hidden.loc[0, "HomeBadge"] == ""
    assert shown.loc[0, "HomeBadge"] == badge_url("h")


def test_empty_frames_keep_columns():
    assert list(matches_frame([], AppSettings(), NOW_MS).columns) == MATCH_COLUMNS
    assert streams_frame([]).empty


def test_streams_frame():
    df = streams_frame([make_stream(no=1, url="https://x/a.m3u8"), make_stream(no=2, hd=False)])
    assert list(df.columns) == STREAM_COLUMNS
    assert df["Channel"].tolist() == [1, 2]
    assert df["Medium"].tolist() == ["video", "embed"]
    assert df["HD"].tolist() == [True, False]
