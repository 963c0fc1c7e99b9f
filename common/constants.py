import os

BASE_URL      = os.getenv("STREAMED_BASE_URL", "https://streamed.pk/api")
IMAGE_BASE    = os.getenv("STREAMED_IMAGE_BASE", "https://streamed.pk")
USER_AGENT    = os.getenv(
    "STREAMED_USER_AGENT",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/135.0.0.0 Safari/537.36",
)
STREAM_WORKERS = int(os.getenv("STREAM_WORKERS", "8"))
LOG_LEVEL     = os.getenv("LOG_LEVEL", "INFO").upper()

APP_NAME = "StreamArena"

# Category tokens with a dedicated endpoint; anything else is a sport id.
DEFAULT_CATEGORY  = "live"
CATEGORY_ENDPOINTS = {
    "live":  "/matches/live",
    "all":   "/matches/all",
    "today": "/matches/all-today",
}

# (token, label, icon) for the sidebar "Main Feeds"
MAIN_FEEDS = [
    ("live",        "Live Now",   "📡"),
    ("all/popular", "Trending",   "🔥"),
    ("today",       "Schedule",   "📅"),
    ("all",         "All Events", "🗂️"),
]

CATEGORY_TITLES = {
    "live":        "Live Action",
    "all/popular": "Trending Arena",
    "today":       "Today's Roster",
    "all":         "Global Events",
}

MATCH_DURATION_MS = 3 * 60 * 60 * 1000      # a match incl. breaks; older ones are "past"
LIVE_WINDOW_MS    = int(2.5 * 60 * 60 * 1000)  # card "LIVE" badge window

DIRECT_FILE_EXTENSIONS = ("m3u8", "mp4")

NO_SOURCES_MESSAGE    = "No stream sources available for this match."
NO_SIGNAL_MESSAGE     = "No signals detected for this event."
UNKNOWN_ERROR_MESSAGE = "Unknown connection error"

SETTINGS_LABELS = {
    "show_incomplete_badges": ("Show Missing Badges", "Display team logos even if one side is missing."),
    "auto_play":              ("Auto-Play Streams",   "Start video automatically when opening a match."),
    "show_past_games":        ("Show Past Games",     "Keep ended matches visible in the list."),
    "tv_mode":                ("TV Focus Mode",       "High contrast selection for TV remotes."),
    "reduce_motion":          ("Reduce Motion",       "Disable animations and transitions."),
}
