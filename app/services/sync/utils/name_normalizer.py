"""Team name normalization for matching games across providers.

API-Sports and The Odds API spell team names differently:
- Abbreviated cities: "LA Lakers" → "los angeles lakers"
- Punctuation: "N.O. Pelicans" → "new orleans pelicans"
- Case and spacing: "BOSTON   Celtics" → "boston celtics"

Names are cleaned first and then looked up in a static alias table that
maps known variants to one canonical spelling per franchise.
"""
from types import MappingProxyType
from typing import Mapping, Optional


NBA_TEAMS = (
    "atlanta hawks",
    "boston celtics",
    "brooklyn nets",
    "charlotte hornets",
    "chicago bulls",
    "cleveland cavaliers",
    "dallas mavericks",
    "denver nuggets",
    "detroit pistons",
    "golden state warriors",
    "houston rockets",
    "indiana pacers",
    "los angeles clippers",
    "los angeles lakers",
    "memphis grizzlies",
    "miami heat",
    "milwaukee bucks",
    "minnesota timberwolves",
    "new orleans pelicans",
    "new york knicks",
    "oklahoma city thunder",
    "orlando magic",
    "philadelphia 76ers",
    "phoenix suns",
    "portland trail blazers",
    "sacramento kings",
    "san antonio spurs",
    "toronto raptors",
    "utah jazz",
    "washington wizards",
)

# Keys are already cleaned (lowercase, no periods, single spaces)
_VARIANTS = {
    "atl hawks": "atlanta hawks",
    "bos celtics": "boston celtics",
    "bkn nets": "brooklyn nets",
    "cha hornets": "charlotte hornets",
    "chi bulls": "chicago bulls",
    "cleveland cavs": "cleveland cavaliers",
    "dallas mavs": "dallas mavericks",
    "den nuggets": "denver nuggets",
    "det pistons": "detroit pistons",
    "gs warriors": "golden state warriors",
    "gsw warriors": "golden state warriors",
    "hou rockets": "houston rockets",
    "ind pacers": "indiana pacers",
    "la clippers": "los angeles clippers",
    "la lakers": "los angeles lakers",
    "memphis grizz": "memphis grizzlies",
    "mia heat": "miami heat",
    "mil bucks": "milwaukee bucks",
    "minnesota wolves": "minnesota timberwolves",
    "no pelicans": "new orleans pelicans",
    "nola pelicans": "new orleans pelicans",
    "ny knicks": "new york knicks",
    "okc thunder": "oklahoma city thunder",
    "orl magic": "orlando magic",
    "philadelphia sixers": "philadelphia 76ers",
    "phi 76ers": "philadelphia 76ers",
    "phx suns": "phoenix suns",
    "portland blazers": "portland trail blazers",
    "portland trailblazers": "portland trail blazers",
    "sac kings": "sacramento kings",
    "sa spurs": "san antonio spurs",
    "tor raptors": "toronto raptors",
    "uta jazz": "utah jazz",
    "was wizards": "washington wizards",
    "wsh wizards": "washington wizards",
}

TEAM_ALIASES: Mapping[str, str] = MappingProxyType({
    **{team: team for team in NBA_TEAMS},
    **_VARIANTS,
})


def clean_team_name(team_name: Optional[str]) -> str:
    """
    Lowercase, drop periods and collapse whitespace.

    Examples:
        >>> clean_team_name("  N.O.  Pelicans ")
        'no pelicans'
    """
    if not isinstance(team_name, str):
        return ""
    return " ".join(team_name.lower().replace(".", "").split())


def normalize_team_name(team_name: Optional[str]) -> str:
    """
    Normalize a team name to its canonical matching key.

    Unknown names are returned cleaned but otherwise unchanged, so two
    providers that agree on an unlisted spelling still match.

    Args:
        team_name: Free-text team name (may be None or empty)

    Returns:
        Canonical lowercase team name, or "" for empty input

    Examples:
        >>> normalize_team_name("LA Lakers")
        'los angeles lakers'
        >>> normalize_team_name("Los Angeles Lakers")
        'los angeles lakers'
        >>> normalize_team_name("Real Madrid")
        'real madrid'
    """
    cleaned = clean_team_name(team_name)
    return TEAM_ALIASES.get(cleaned, cleaned)
