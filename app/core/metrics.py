"""
Prometheus metrics for the board service.

Metrics exposed:
- Upstream request counters per provider and outcome
- Upstream request latency histogram
- Size of the most recently built board
"""
from prometheus_client import Counter, Gauge, Histogram

upstream_requests_total = Counter(
    "board_upstream_requests_total",
    "Total upstream provider requests",
    ["provider", "outcome"]
)

upstream_request_duration_seconds = Histogram(
    "board_upstream_request_duration_seconds",
    "Upstream provider request latency in seconds",
    ["provider"]
)

board_games = Gauge(
    "board_games",
    "Number of games on the most recently built board"
)

board_games_with_odds = Gauge(
    "board_games_with_odds",
    "Number of games on the most recent board matched to an odds record"
)


def record_upstream_request(provider: str, outcome: str, duration: float) -> None:
    """
    Record one upstream call.

    Args:
        provider: "api_sports" or "odds_api"
        outcome: "success" or an error category such as "http_error"
        duration: Elapsed seconds
    """
    upstream_requests_total.labels(provider=provider, outcome=outcome).inc()
    upstream_request_duration_seconds.labels(provider=provider).observe(duration)


def update_board_metrics(total: int, matched: int) -> None:
    board_games.set(total)
    board_games_with_odds.set(matched)
