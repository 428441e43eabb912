"""Score extraction from API-Sports score payloads.

Live feeds sometimes omit the running ``total`` mid-game while still
reporting per-period values, so totals fall back to summing periods:

    {"home": {"quarter_1": 25, "quarter_2": 20, "total": None}, ...}
    → ScoreTotals(home=45, away=..., is_estimated=True)
"""
from dataclasses import dataclass
from numbers import Real
from typing import Any, Optional

# Summed in this order; both naming conventions are seen in the wild
PERIOD_KEYS = (
    "quarter_1",
    "quarter_2",
    "quarter_3",
    "quarter_4",
    "overtime",
    "ot",
    "over_time",
    "period_1",
    "period_2",
    "period_3",
    "period_4",
)


@dataclass(frozen=True)
class ScoreTotals:
    """Comparable (home, away) totals. Both are None or both are set."""
    home: Optional[float]
    away: Optional[float]
    is_estimated: bool = False

    @property
    def available(self) -> bool:
        return self.home is not None and self.away is not None


UNAVAILABLE = ScoreTotals(home=None, away=None, is_estimated=False)


def is_number(value: Any) -> bool:
    """True for ints and floats, False for bools and everything else."""
    return isinstance(value, Real) and not isinstance(value, bool)


def sum_period_scores(side: Any) -> Optional[float]:
    """
    Sum the numeric period values of one side's score block.

    Returns:
        The sum, or None when no period key held a number. A side
        whose periods are all zero returns 0, not None.
    """
    if not isinstance(side, dict):
        return None

    total = 0
    found = False
    for key in PERIOD_KEYS:
        value = side.get(key)
        if is_number(value):
            total += value
            found = True

    return total if found else None


def extract_score_totals(scores: Any) -> ScoreTotals:
    """
    Derive home/away totals from a provider ``scores`` structure.

    Priority:
    1. Both ``total`` values numeric → direct totals
    2. Both sides have at least one numeric period → summed periods (estimated)
    3. Otherwise → unavailable

    Args:
        scores: ``game["scores"]`` from API-Sports; anything that is not a
            dict is treated as empty

    Returns:
        ScoreTotals
    """
    if not isinstance(scores, dict):
        scores = {}

    home = scores.get("home")
    away = scores.get("away")
    home = home if isinstance(home, dict) else {}
    away = away if isinstance(away, dict) else {}

    home_total = home.get("total")
    away_total = away.get("total")
    if is_number(home_total) and is_number(away_total):
        return ScoreTotals(home=home_total, away=away_total, is_estimated=False)

    home_sum = sum_period_scores(home)
    away_sum = sum_period_scores(away)
    if home_sum is not None and away_sum is not None:
        return ScoreTotals(home=home_sum, away=away_sum, is_estimated=True)

    return UNAVAILABLE
