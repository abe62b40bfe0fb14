"""Mental state schemas."""

from datetime import datetime

from puckmind.schemas.base import CamelModel


class MentalStateResponse(CamelModel):
    """Mental state response."""

    id: int
    game_id: int
    confidence: int
    sleep_hours: float
    sleep_quality: int
    stress_level: int
    physical_energy: int
    notes: str | None
    created_at: datetime
    updated_at: datetime


class MentalStateMessageResponse(CamelModel):
    """Mental state saved."""

    message: str
    mental_state: MentalStateResponse
