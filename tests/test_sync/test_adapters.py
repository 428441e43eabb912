"""Tests for the API-Sports and Odds API adapters.

Test Strategy:
1. Test request shape (URL, query params, auth header)
2. Test payload unwrapping and non-list fallbacks
3. Test missing credential returns [] without a network call
4. Test non-2xx, transport and JSON failures raise UpstreamError
"""
import sys
from pathlib import Path

import httpx
import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))
from conftest import API_SPORTS_HOST, ODDS_API_HOST

from app.services.sync.adapters.api_sports_adapter import ApiSportsAdapter
from app.services.sync.adapters.base import UpstreamError
from app.services.sync.adapters.odds_api_adapter import OddsApiAdapter


def client_for(stub) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=stub.transport)


class TestApiSportsAdapter:
    """Test suite for ApiSportsAdapter.fetch_live_games."""

    @pytest.mark.asyncio
    async def test_fetches_live_games(self, upstream, sample_stats_games):
        async with client_for(upstream) as client:
            games = await ApiSportsAdapter(client, api_key="secret").fetch_live_games()

        assert games == sample_stats_games
        (request,) = upstream.requests_to(API_SPORTS_HOST)
        assert request.url.path == "/games"
        assert request.url.params["live"] == "all"
        assert request.headers["x-apisports-key"] == "secret"

    @pytest.mark.asyncio
    async def test_missing_key_skips_request(self, upstream):
        async with client_for(upstream) as client:
            games = await ApiSportsAdapter(client, api_key=None).fetch_live_games()

        assert games == []
        assert upstream.requests == []

    @pytest.mark.asyncio
    async def test_non_list_response_yields_empty(self, upstream):
        upstream.respond(API_SPORTS_HOST, 200, {"errors": {"token": "bad"}, "response": None})
        async with client_for(upstream) as client:
            assert await ApiSportsAdapter(client, api_key="k").fetch_live_games() == []

    @pytest.mark.asyncio
    async def test_http_error_raises(self, upstream):
        upstream.respond(API_SPORTS_HOST, 503, {"message": "down"})
        async with client_for(upstream) as client:
            with pytest.raises(UpstreamError) as exc_info:
                await ApiSportsAdapter(client, api_key="k").fetch_live_games()

        assert str(exc_info.value) == "API-Sports error: 503"
        assert exc_info.value.status_code == 503
        assert exc_info.value.provider == "api_sports"

    @pytest.mark.asyncio
    async def test_invalid_json_raises(self, upstream):
        upstream.respond(API_SPORTS_HOST, 200, b"<html>oops</html>")
        async with client_for(upstream) as client:
            with pytest.raises(UpstreamError, match="invalid JSON"):
                await ApiSportsAdapter(client, api_key="k").fetch_live_games()

    @pytest.mark.asyncio
    async def test_transport_error_raises(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(UpstreamError, match="request failed"):
                await ApiSportsAdapter(client, api_key="k").fetch_live_games()


class TestOddsApiAdapter:
    """Test suite for OddsApiAdapter.fetch_odds."""

    @pytest.mark.asyncio
    async def test_fetches_odds(self, upstream, sample_odds_games):
        async with client_for(upstream) as client:
            odds = await OddsApiAdapter(client, api_key="odds-secret").fetch_odds()

        assert odds == sample_odds_games
        (request,) = upstream.requests_to(ODDS_API_HOST)
        assert request.url.path == "/v4/sports/basketball_nba/odds"
        assert dict(request.url.params) == {
            "markets": "h2h",
            "oddsFormat": "american",
            "regions": "us",
            "apiKey": "odds-secret",
        }

    @pytest.mark.asyncio
    async def test_missing_key_skips_request(self, upstream):
        async with client_for(upstream) as client:
            assert await OddsApiAdapter(client, api_key="").fetch_odds() == []
        assert upstream.requests == []

    @pytest.mark.asyncio
    async def test_non_list_payload_yields_empty(self, upstream):
        upstream.respond(ODDS_API_HOST, 200, {"message": "unexpected"})
        async with client_for(upstream) as client:
            assert await OddsApiAdapter(client, api_key="k").fetch_odds() == []

    @pytest.mark.asyncio
    async def test_http_error_raises(self, upstream):
        upstream.respond(ODDS_API_HOST, 401, {"message": "Invalid API key"})
        async with client_for(upstream) as client:
            with pytest.raises(UpstreamError, match="Odds API error: 401"):
                await OddsApiAdapter(client, api_key="k").fetch_odds()
