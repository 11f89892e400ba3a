"""Team name normalization between the odds feed and the season files.

The live odds feed and the scraped season files mostly agree on team
names, but not always (``LA Clippers`` vs ``Los Angeles Clippers``). Every
lookup of a feed team against season aggregates goes through
``normalize_team_name`` so both sides resolve to the season-file spelling.
"""

from __future__ import annotations

import html as _html
import re
import unicodedata
from typing import Mapping, Optional, TypeVar

T = TypeVar("T")

# Odds-feed spelling -> season-file spelling, keyed by ``team_key``.
TEAM_ALIASES = {
    "la clippers": "Los Angeles Clippers",
    "l a clippers": "Los Angeles Clippers",
}


def team_key(name: str) -> str:
    """Lowercase, accent-free, space-separated comparison key.

    Examples::

        >>> team_key("LA  Clippers")
        'la clippers'
        >>> team_key("Nikola Jokić")
        'nikola jokic'
    """
    if not name:
        return ""
    s = _html.unescape(str(name))
    # NFKD decomposition + strip combining characters (accents)
    s = unicodedata.normalize("NFKD", s)
    s = "".join(ch for ch in s if not unicodedata.combining(ch))
    s = s.lower().replace("&", " and ")
    s = re.sub(r"[^a-z0-9 ]", " ", s)
    return " ".join(s.split())


def normalize_team_name(name: str) -> str:
    """Map a feed team name onto the season-file spelling.

    Unknown names are returned with HTML entities decoded and whitespace
    collapsed, otherwise unchanged.
    """
    if not name:
        return ""
    alias = TEAM_ALIASES.get(team_key(name))
    if alias:
        return alias
    return " ".join(_html.unescape(str(name)).split())


def lookup_team(teams: Mapping[str, T], name: str) -> Optional[T]:
    """Find ``name`` in a name-keyed mapping, trying the normalized spelling first."""
    found = teams.get(normalize_team_name(name))
    if found is None:
        found = teams.get(name)
    return found
