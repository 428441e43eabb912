"""Board orchestrator: joins API-Sports live games with The Odds API moneylines.

Per board request:
1. Fetch live games and odds concurrently
2. Index odds by normalized "away@home" key
3. For each live game: look up odds, extract moneyline and score
4. Return the merged board envelope

Nothing is cached; every request rebuilds the index from fresh data.
"""
import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

import httpx

from app.core import metrics
from app.core.config import Settings, settings as default_settings
from app.models.board import (
    BoardResponse,
    MergedGame,
    MoneylineBlock,
    ScoreBlock,
    iso_timestamp,
)
from app.services.sync.adapters.api_sports_adapter import ApiSportsAdapter
from app.services.sync.adapters.odds_api_adapter import OddsApiAdapter
from app.services.sync.matchers.game_matcher import GameMatcher, extract_moneyline
from app.services.sync.utils.score_extractor import ScoreTotals, extract_score_totals

logger = logging.getLogger(__name__)


def score_label(totals: ScoreTotals) -> str:
    """Board label for a score: unavailable, estimated or live."""
    if not totals.available:
        return "Score unavailable"
    if totals.is_estimated:
        return "Estimated"
    return "Live"


def _field(record: Any, *path: str) -> Any:
    """Walk nested dict keys, returning None on any missing/non-dict step."""
    for key in path:
        if not isinstance(record, dict):
            return None
        record = record.get(key)
    return record


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def merge_game(game: Dict[str, Any], matcher: GameMatcher) -> Tuple[MergedGame, bool]:
    """
    Merge one API-Sports game with its odds.

    Returns:
        (MergedGame, whether an odds record matched)
    """
    away_name = _text(_field(game, "teams", "away", "name"))
    home_name = _text(_field(game, "teams", "home", "name"))

    odds_game = matcher.find_match(away_name, home_name)
    moneyline = extract_moneyline(odds_game)
    totals = extract_score_totals(_field(game, "scores"))

    game_id = _field(game, "id")
    if isinstance(game_id, bool) or not isinstance(game_id, (int, str)):
        game_id = None

    merged = MergedGame(
        id=game_id,
        away_team=away_name,
        home_team=home_name,
        score=ScoreBlock(away=totals.away, home=totals.home, label=score_label(totals)),
        status=_text(_field(game, "status", "long")),
        moneyline=MoneylineBlock(away=moneyline.away, home=moneyline.home),
    )
    return merged, odds_game is not None


def merge_board(
    stats_games: List[Dict[str, Any]],
    odds_games: List[Dict[str, Any]],
    generated_at: Optional[datetime] = None
) -> BoardResponse:
    """
    Join live games with odds into the board envelope.

    Args:
        stats_games: Raw API-Sports game records
        odds_games: Raw The Odds API records
        generated_at: Timestamp to stamp on the board (default: now, UTC)

    Returns:
        BoardResponse with one MergedGame per live game, in input order
    """
    matcher = GameMatcher(odds_games)

    games = []
    matched = 0
    for game in stats_games:
        merged, has_odds = merge_game(game, matcher)
        games.append(merged)
        matched += has_odds

    metrics.update_board_metrics(total=len(games), matched=matched)
    logger.info(
        f"Built board with {len(games)} games ({matched} matched to odds)",
        extra={"games": len(games), "matched": matched, "odds_records": len(matcher.index)},
    )

    moment = generated_at or datetime.now(timezone.utc)
    return BoardResponse(generated_at=iso_timestamp(moment), games=games)


class BoardOrchestrator:
    """
    Coordinates one board build across both providers.

    Provider credentials come from the Settings passed in; a provider
    without a key contributes an empty list.

    Usage:
        orchestrator = BoardOrchestrator(settings)
        board = await orchestrator.build_board()
    """

    def __init__(
        self,
        config: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Args:
            config: Settings carrying credentials and upstream URLs
            transport: Optional httpx transport (tests use MockTransport)
        """
        self.config = config or default_settings
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=httpx.Timeout(self.config.UPSTREAM_TIMEOUT),
            transport=self._transport,
            headers={"Accept": "application/json"},
        )

    async def fetch_sources(self) -> Tuple[List[Dict[str, Any]], List[Dict[str, Any]]]:
        """
        Fetch live games and odds concurrently.

        Raises:
            UpstreamError: If either provider fails; no partial result
        """
        async with self._client() as client:
            api_sports = ApiSportsAdapter(
                client,
                api_key=self.config.APISPORTS_KEY,
                base_url=self.config.APISPORTS_BASE_URL,
            )
            odds_api = OddsApiAdapter(
                client,
                api_key=self.config.ODDS_API_KEY,
                base_url=self.config.ODDS_API_BASE_URL,
                regions=self.config.ODDS_API_REGIONS,
            )
            fetches = [
                asyncio.ensure_future(api_sports.fetch_live_games()),
                asyncio.ensure_future(odds_api.fetch_odds()),
            ]
            try:
                stats_games, odds_games = await asyncio.gather(*fetches)
            except BaseException:
                # gather raises on the first failure; stop the sibling
                # request before the shared client is closed under it
                for fetch in fetches:
                    fetch.cancel()
                await asyncio.gather(*fetches, return_exceptions=True)
                raise
        return stats_games, odds_games

    async def build_board(self) -> BoardResponse:
        """Fetch both providers and return the merged board."""
        stats_games, odds_games = await self.fetch_sources()
        return merge_board(stats_games, odds_games)
