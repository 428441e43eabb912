"""Upstream provider adapters.

Available adapters:
- api_sports_adapter: API-Sports live basketball games
- odds_api_adapter: The Odds API NBA moneylines
"""
from app.services.sync.adapters.base import ProviderAdapter, UpstreamError
from app.services.sync.adapters.api_sports_adapter import ApiSportsAdapter
from app.services.sync.adapters.odds_api_adapter import OddsApiAdapter

__all__ = [
    "ProviderAdapter",
    "UpstreamError",
    "ApiSportsAdapter",
    "OddsApiAdapter",
]
