"""API-Sports adapter for live basketball games.

Endpoint: GET {base}/games?live=all with the ``x-apisports-key`` header.
Payload:  {"response": [RawGameRecord, ...], ...}

Records are returned as received; field access happens in the
orchestrator and the score extractor.
"""
from typing import Any, Dict, List, Optional

import httpx

from app.core.config import settings
from app.core.logging import get_logger
from app.services.sync.adapters.base import ProviderAdapter

logger = get_logger(__name__)


class ApiSportsAdapter(ProviderAdapter):
    """
    Adapter for the API-Sports basketball feed.

    Usage:
        async with httpx.AsyncClient() as client:
            adapter = ApiSportsAdapter(client, api_key="...")
            games = await adapter.fetch_live_games()
    """

    provider = "api_sports"
    label = "API-Sports"

    def __init__(
        self,
        client: httpx.AsyncClient,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None
    ):
        super().__init__(client, api_key)
        self.base_url = (base_url or settings.APISPORTS_BASE_URL).rstrip("/")

    async def fetch_live_games(self) -> List[Dict[str, Any]]:
        """
        Fetch every game currently in progress.

        Returns:
            Raw game records; [] when no key is configured or the payload
            has no ``response`` list

        Raises:
            UpstreamError: When the provider call fails
        """
        if not self.enabled:
            logger.debug("APISPORTS_KEY not set - skipping live games fetch")
            return []

        data = await self._get_json(
            f"{self.base_url}/games",
            params={"live": "all"},
            headers={"x-apisports-key": self.api_key},
        )

        games = data.get("response") if isinstance(data, dict) else None
        if not isinstance(games, list):
            logger.warning("API-Sports payload has no response list")
            return []

        logger.info(f"Fetched {len(games)} live games from API-Sports")
        return games
