from __future__ import annotations
from typing import Optional

from common.constants import BASE_URL, IMAGE_BASE

# Team badge base (e.g., .../images/badge/<id>.webp)
BADGE_BASE = f"{BASE_URL}/images/badge"

# Generic placeholder shown when a badge id is missing
PLACEHOLDER_BADGE = "https://picsum.photos/60/60?blur=2"

_UNSPLASH = "https://images.unsplash.com/photo-{}?auto=format&fit=crop&q=80"

SPORT_IMAGES = {
    "football":          _UNSPLASH.format("1504305754058-2f08ccd89a0a"),
    "soccer":            _UNSPLASH.format("1504305754058-2f08ccd89a0a"),
    "basketball":        _UNSPLASH.format("1546519638-68e109498ffc"),
    "tennis":            _UNSPLASH.format("1595435934249-5df7ed86e1c0"),
    "cricket":           _UNSPLASH.format("1531415074968-036ba1b575da"),
    "rugby":             _UNSPLASH.format("1628891892233-358498af3e3c"),
    "baseball":          _UNSPLASH.format("1508344928928-716d86789702"),
    "american football": _UNSPLASH.format("1611371805429-87e227289d71"),
    "nfl":               _UNSPLASH.format("1611371805429-87e227289d71"),
    "hockey":            _UNSPLASH.format("1580748141549-71748dbe0bdc"),
    "ice hockey":        _UNSPLASH.format("1580748141549-71748dbe0bdc"),
    "motorsport":        _UNSPLASH.format("1568605117036-5fe5e7bab0b7"),
    "f1":                _UNSPLASH.format("1568605117036-5fe5e7bab0b7"),
    "boxing":            _UNSPLASH.format("1549719386-74dfcbf7dbed"),
    "mma":               _UNSPLASH.format("1549719386-74dfcbf7dbed"),
    "ufc":               _UNSPLASH.format("1549719386-74dfcbf7dbed"),
    "golf":              _UNSPLASH.format("1535131749006-b7f58c99034b"),
    "darts":             _UNSPLASH.format("1574700940428-c2b534e75459"),
    "snooker":           _UNSPLASH.format("1606596160913-7d833892795c"),
    "default":           _UNSPLASH.format("1471295253337-3ceaaedca402"),  # generic stadium
}

# (substring, SPORT_IMAGES key) checked in order when there is no direct hit
_PARTIAL_KEYS = [
    (("football", "soccer"), "football"),
    (("basket",), "basketball"),
    (("racing", "motor"), "motorsport"),
    (("fight", "boxing"), "boxing"),
    (("hockey",), "hockey"),
    (("rugby",), "rugby"),
]


def badge_url(badge_id: Optional[str]) -> str:
    """Build a team badge URL from its id ('' if no id)."""
    return f"{BADGE_BASE}/{badge_id}.webp" if badge_id else ""


def poster_url(poster_path: Optional[str]) -> str:
    """Build a poster URL from an API path like '/api/images/poster/x/y'."""
    return f"{IMAGE_BASE}{poster_path}.webp" if poster_path else ""


def badge_or_placeholder(badge_id: Optional[str]) -> str:
    return badge_url(badge_id) or PLACEHOLDER_BADGE


def fallback_image(category: Optional[str]) -> str:
    """
    Stock picture for a sport category, used when a match has no poster.
    Direct key first, then a few partial matches, then a generic stadium.
    """
    if not category:
        return SPORT_IMAGES["default"]
    key = category.lower()
    if key in SPORT_IMAGES:
        return SPORT_IMAGES[key]
    for needles, target in _PARTIAL_KEYS:
        if any(n in key for n in needles):
            return SPORT_IMAGES[target]
    return SPORT_IMAGES["default"]
