"""Dashboard schemas."""

from datetime import datetime

from pydantic import BaseModel

from puckmind.schemas.base import CamelModel


class Insight(BaseModel):
    title: str
    description: str


class RecentGame(CamelModel):
    id: int
    date: datetime
    opponent: str
    result: str
    points: int
    plus_minus: int


class DashboardResponse(CamelModel):
    """Summary cards, insights and recent games for the dashboard."""

    total_games: int
    avg_points: float
    avg_confidence: float
    avg_sleep: float
    insights: list[Insight]
    recent_games: list[RecentGame]
