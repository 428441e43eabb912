"""Game matcher for correlating API-Sports games with The Odds API events.

Matching is an exact join on a normalized matchup key:

    "<normalized away>@<normalized home>"

Odds records are indexed once per board build, then each live game looks
up its own key. Two odds records that normalize to the same key overwrite
each other (last one wins).
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from app.services.sync.utils.name_normalizer import normalize_team_name
from app.services.sync.utils.score_extractor import is_number

logger = logging.getLogger(__name__)

H2H_MARKET = "h2h"


@dataclass(frozen=True)
class MoneylinePrices:
    """Head-to-head prices in American format. Either side may be None."""
    away: Optional[float] = None
    home: Optional[float] = None


NO_MONEYLINE = MoneylinePrices()


def matchup_key(away_team: Optional[str], home_team: Optional[str]) -> str:
    """
    Build the join key for a matchup.

    Examples:
        >>> matchup_key("Boston Celtics", "Miami Heat")
        'boston celtics@miami heat'
        >>> matchup_key("LA Lakers", "Boston Celtics")
        'los angeles lakers@boston celtics'
    """
    return f"{normalize_team_name(away_team)}@{normalize_team_name(home_team)}"


def _as_list(value: Any) -> list:
    return value if isinstance(value, list) else []


def _listed_teams(odds_game: Any) -> Optional[List[str]]:
    """Return the ``teams`` pair, or None when the record is malformed."""
    if not isinstance(odds_game, dict):
        return None
    teams = odds_game.get("teams")
    if not isinstance(teams, list) or len(teams) != 2:
        return None
    return teams


def build_odds_index(odds_games: Iterable[Dict[str, Any]]) -> Dict[str, Dict[str, Any]]:
    """
    Index odds records by matchup key.

    The away team is whichever listed team is not ``home_team``. Records
    without exactly two listed teams are skipped.

    Args:
        odds_games: Raw event list from The Odds API

    Returns:
        Dict of matchup key → odds record
    """
    index: Dict[str, Dict[str, Any]] = {}
    skipped = 0

    for odds_game in odds_games:
        teams = _listed_teams(odds_game)
        if teams is None:
            skipped += 1
            continue

        team_a, team_b = teams
        home_team = odds_game.get("home_team")
        away_team = team_b if team_a == home_team else team_a

        index[matchup_key(away_team, home_team)] = odds_game

    if skipped:
        logger.debug(f"Skipped {skipped} odds records without a two-team list")

    return index


def extract_moneyline(odds_game: Optional[Dict[str, Any]]) -> MoneylinePrices:
    """
    Pull head-to-head prices from the first bookmaker of an odds record.

    Only the first bookmaker is consulted. Each side is matched by exact
    outcome name and is None independently when not found.

    Args:
        odds_game: One odds record (None yields no prices)

    Returns:
        MoneylinePrices
    """
    if not isinstance(odds_game, dict):
        return NO_MONEYLINE

    bookmakers = _as_list(odds_game.get("bookmakers"))
    if not bookmakers or not isinstance(bookmakers[0], dict):
        return NO_MONEYLINE

    market = next(
        (m for m in _as_list(bookmakers[0].get("markets"))
         if isinstance(m, dict) and m.get("key") == H2H_MARKET),
        None
    )
    if market is None:
        return NO_MONEYLINE

    outcomes = [o for o in _as_list(market.get("outcomes")) if isinstance(o, dict)]
    home_team = odds_game.get("home_team")
    away_team = next(
        (team for team in _as_list(odds_game.get("teams")) if team != home_team),
        None
    )

    def price_for(team: Optional[str]) -> Optional[float]:
        if team is None:
            return None
        outcome = next((o for o in outcomes if o.get("name") == team), None)
        price = outcome.get("price") if outcome else None
        return price if is_number(price) else None

    return MoneylinePrices(away=price_for(away_team), home=price_for(home_team))


class GameMatcher:
    """
    Match live games to odds records.

    Built once per board from the current odds list.

    Usage:
        matcher = GameMatcher(odds_games)
        odds_game = matcher.find_match("Boston Celtics", "Miami Heat")
    """

    def __init__(self, odds_games: Iterable[Dict[str, Any]]):
        self.index = build_odds_index(odds_games)

    def find_match(
        self,
        away_team: Optional[str],
        home_team: Optional[str]
    ) -> Optional[Dict[str, Any]]:
        """Return the odds record for this matchup, or None."""
        return self.index.get(matchup_key(away_team, home_team))
