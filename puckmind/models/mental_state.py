"""Post-game mental state check-in model."""

from sqlalchemy import Column, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from puckmind.database import Base
from puckmind.models.mixins import TimestampMixin


class MentalState(Base, TimestampMixin):
    """Mental state recorded for exactly one game."""

    __tablename__ = "mental_states"

    id = Column(Integer, primary_key=True, index=True)
    game_id = Column(
        Integer, ForeignKey("games.id", ondelete="CASCADE"), nullable=False, unique=True
    )
    confidence = Column(Integer, nullable=False)  # 1-10
    sleep_hours = Column(Float, nullable=False)  # 0-24
    sleep_quality = Column(Integer, nullable=False)  # 1-10
    stress_level = Column(Integer, nullable=False)  # 1-10
    physical_energy = Column(Integer, nullable=False)  # 1-10
    notes = Column(String(500), nullable=True)

    # Relationships
    game = relationship("Game", back_populates="mental_state")
