"""Shared pytest fixtures for the board API tests."""
import json
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest

# Add project root to Python path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

API_SPORTS_HOST = "v1.basketball.api-sports.io"
ODDS_API_HOST = "api.the-odds-api.com"


def make_settings(apisports_key: Optional[str] = "test-apisports-key",
                  odds_api_key: Optional[str] = "test-odds-key"):
    """Settings isolated from the developer's .env and environment keys."""
    from app.core.config import Settings

    return Settings(
        _env_file=None,
        ENVIRONMENT="test",
        APISPORTS_KEY=apisports_key,
        ODDS_API_KEY=odds_api_key,
    )


class UpstreamStub:
    """
    httpx MockTransport handler standing in for both providers.

    Each provider answers with a configurable status and JSON body (or raw
    bytes). Every request is recorded for assertions.
    """

    def __init__(self, stats_games: List[Dict[str, Any]], odds_games: List[Dict[str, Any]]):
        self.responses = {
            API_SPORTS_HOST: (200, {"get": "games", "response": stats_games}),
            ODDS_API_HOST: (200, odds_games),
        }
        self.requests: List[httpx.Request] = []

    def respond(self, host: str, status_code: int, body: Any) -> None:
        self.responses[host] = (status_code, body)

    def requests_to(self, host: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.host == host]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status_code, body = self.responses[request.url.host]
        if isinstance(body, bytes):
            return httpx.Response(status_code, content=body)
        return httpx.Response(status_code, content=json.dumps(body).encode(),
                              headers={"content-type": "application/json"})

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def sample_stats_games() -> List[Dict[str, Any]]:
    """API-Sports live games: one finished with totals, one mid-game without totals."""
    return [
        {
            "id": 401001,
            "teams": {
                "away": {"id": 145, "name": "Los Angeles Lakers"},
                "home": {"id": 133, "name": "Boston Celtics"},
            },
            "scores": {
                "away": {"quarter_1": 28, "quarter_2": 27, "quarter_3": 30,
                         "quarter_4": 25, "over_time": None, "total": 110},
                "home": {"quarter_1": 26, "quarter_2": 30, "quarter_3": 24,
                         "quarter_4": 28, "over_time": None, "total": 108},
            },
            "status": {"long": "Finished", "short": "FT"},
        },
        {
            "id": 401002,
            "teams": {
                "away": {"id": 140, "name": "Golden State Warriors"},
                "home": {"id": 151, "name": "Phoenix Suns"},
            },
            "scores": {
                "away": {"quarter_1": 31, "quarter_2": 22, "total": None},
                "home": {"quarter_1": 25, "quarter_2": 29, "total": None},
            },
            "status": {"long": "Halftime", "short": "HT"},
        },
    ]


@pytest.fixture
def sample_odds_games() -> List[Dict[str, Any]]:
    """The Odds API events; only the Lakers/Celtics game is priced."""
    return [
        {
            "id": "odds_event_001",
            "sport_key": "basketball_nba",
            "teams": ["Boston Celtics", "Los Angeles Lakers"],
            "home_team": "Boston Celtics",
            "bookmakers": [
                {
                    "key": "draftkings",
                    "title": "DraftKings",
                    "markets": [
                        {
                            "key": "h2h",
                            "outcomes": [
                                {"name": "Boston Celtics", "price": -170},
                                {"name": "Los Angeles Lakers", "price": 150},
                            ],
                        }
                    ],
                },
                {
                    "key": "fanduel",
                    "title": "FanDuel",
                    "markets": [
                        {
                            "key": "h2h",
                            "outcomes": [
                                {"name": "Boston Celtics", "price": -180},
                                {"name": "Los Angeles Lakers", "price": 160},
                            ],
                        }
                    ],
                },
            ],
        },
        {
            "id": "odds_event_002",
            "sport_key": "basketball_nba",
            "teams": ["Miami Heat", "New York Knicks"],
            "home_team": "New York Knicks",
            "bookmakers": [],
        },
    ]


@pytest.fixture
def upstream(sample_stats_games, sample_odds_games) -> UpstreamStub:
    return UpstreamStub(sample_stats_games, sample_odds_games)


@pytest.fixture
def orchestrator_factory(upstream) -> Callable[..., Any]:
    """Build a BoardOrchestrator wired to the upstream stub."""
    from app.services.sync.orchestrator import BoardOrchestrator

    def factory(**settings_kwargs):
        return BoardOrchestrator(make_settings(**settings_kwargs), transport=upstream.transport)

    return factory


# =============================================================================
# FASTAPI TEST CLIENT FIXTURE
# =============================================================================

@pytest.fixture
def override_orchestrator(orchestrator_factory):
    """
    Swap the board route's orchestrator dependency.

    Usage:
        def test_x(test_client, override_orchestrator):
            override_orchestrator(odds_api_key=None)
    """
    from app.main import app
    from app.api.routes.board import get_board_orchestrator

    def apply(**settings_kwargs):
        app.dependency_overrides[get_board_orchestrator] = (
            lambda: orchestrator_factory(**settings_kwargs)
        )

    apply()
    yield apply
    app.dependency_overrides.clear()


@pytest.fixture
def test_client(override_orchestrator):
    """
    FastAPI TestClient with both providers stubbed.

    Usage:
        def test_endpoint(test_client):
            response = test_client.get("/api/board")
            assert response.status_code == 200
    """
    from fastapi.testclient import TestClient
    from app.main import app

    client = TestClient(app)
    yield client
