"""Dashboard summary and mental-state performance insights."""

from collections.abc import Callable, Iterable
from typing import Any

from puckmind.models.game import Game

RECENT_GAMES_LIMIT = 5

HIGH_CONFIDENCE = 8
LOW_CONFIDENCE = 5
WELL_RESTED_HOURS = 8
SHORT_SLEEP_HOURS = 7


def _average(values: Iterable[float]) -> float:
    values = list(values)
    if not values:
        return 0.0
    return round(sum(values) / len(values), 1)


def _points_where(games: list[Game], predicate: Callable[[Any], bool]) -> list[int]:
    return [g.points for g in games if g.mental_state is not None and predicate(g.mental_state)]


def confidence_insight(games: list[Game]) -> dict[str, str] | None:
    """Compare points at high (8+) versus low (5 or below) confidence."""
    high = _points_where(games, lambda m: m.confidence >= HIGH_CONFIDENCE)
    low = _points_where(games, lambda m: m.confidence <= LOW_CONFIDENCE)
    if not high or not low:
        return None
    return {
        "title": "High Confidence Impact",
        "description": (
            f"You average {_average(high)} points per game when confidence is "
            f"{HIGH_CONFIDENCE}+ vs {_average(low)} points when confidence is "
            f"{LOW_CONFIDENCE} or below"
        ),
    }


def sleep_insight(games: list[Game]) -> dict[str, str] | None:
    """Compare points after 8+ hours of sleep versus under 7 hours."""
    rested = _points_where(games, lambda m: m.sleep_hours >= WELL_RESTED_HOURS)
    short = _points_where(games, lambda m: m.sleep_hours < SHORT_SLEEP_HOURS)
    if not rested or not short:
        return None
    return {
        "title": "Sleep Impact",
        "description": (
            f"You average {_average(rested)} points per game with "
            f"{WELL_RESTED_HOURS}+ hours sleep vs {_average(short)} points with less "
            f"than {SHORT_SLEEP_HOURS} hours"
        ),
    }


def build_dashboard(games: list[Game]) -> dict[str, Any]:
    """Summarize a player's games; ``games`` must be most recent first."""
    checked_in = [g.mental_state for g in games if g.mental_state is not None]
    insights = [i for i in (confidence_insight(games), sleep_insight(games)) if i]

    return {
        "total_games": len(games),
        "avg_points": _average(g.points for g in games),
        "avg_confidence": _average(m.confidence for m in checked_in),
        "avg_sleep": _average(m.sleep_hours for m in checked_in),
        "insights": insights,
        "recent_games": [
            {
                "id": g.id,
                "date": g.date,
                "opponent": g.opponent,
                "result": g.result,
                "points": g.points,
                "plus_minus": g.plus_minus,
            }
            for g in games[:RECENT_GAMES_LIMIT]
        ],
    }
