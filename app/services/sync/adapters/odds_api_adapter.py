"""Odds API adapter for NBA head-to-head moneylines.

Endpoint: GET {base}/sports/basketball_nba/odds
Params:   markets=h2h, oddsFormat=american, regions=us, apiKey=...
Payload:  top-level list of events, each with ``teams``, ``home_team`` and
          ``bookmakers[].markets[].outcomes[]``.
"""
from typing import Any, Dict, List, Optional

import httpx

from app.core.config import settings
from app.core.logging import get_logger
from app.services.sync.adapters.base import ProviderAdapter

logger = get_logger(__name__)

SPORT_KEY = "basketball_nba"


class OddsApiAdapter(ProviderAdapter):
    """
    Adapter for The Odds API.

    Usage:
        async with httpx.AsyncClient() as client:
            adapter = OddsApiAdapter(client, api_key="...")
            odds_games = await adapter.fetch_odds()
    """

    provider = "odds_api"
    label = "Odds API"

    def __init__(
        self,
        client: httpx.AsyncClient,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        regions: Optional[str] = None
    ):
        super().__init__(client, api_key)
        self.base_url = (base_url or settings.ODDS_API_BASE_URL).rstrip("/")
        self.regions = regions or settings.ODDS_API_REGIONS

    def _params(self) -> Dict[str, str]:
        return {
            "markets": "h2h",
            "oddsFormat": "american",
            "regions": self.regions,
            "apiKey": self.api_key,
        }

    async def fetch_odds(self) -> List[Dict[str, Any]]:
        """
        Fetch current NBA moneyline odds.

        Returns:
            Raw odds records; [] when no key is configured or the payload is
            not a list

        Raises:
            UpstreamError: When the provider call fails
        """
        if not self.enabled:
            logger.debug("ODDS_API_KEY not set - skipping odds fetch")
            return []

        data = await self._get_json(
            f"{self.base_url}/sports/{SPORT_KEY}/odds",
            params=self._params(),
        )

        if not isinstance(data, list):
            logger.warning("Odds API payload is not a list")
            return []

        logger.info(f"Fetched {len(data)} games from The Odds API")
        return data
