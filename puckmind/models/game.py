"""Game model."""

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from puckmind.database import Base
from puckmind.models.mixins import TimestampMixin


class Game(Base, TimestampMixin):
    """Per-game statistics logged by a player."""

    __tablename__ = "games"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    date = Column(DateTime(timezone=True), nullable=False, index=True)
    opponent = Column(String(255), nullable=False)
    home_away = Column(String(10), nullable=False)  # "home" | "away"
    result = Column(String(10), nullable=False)  # "win" | "loss"
    goals = Column(Integer, nullable=False, default=0)
    assists = Column(Integer, nullable=False, default=0)
    shots = Column(Integer, nullable=False, default=0)
    plus_minus = Column(Integer, nullable=False, default=0)
    ice_time = Column(Float, nullable=False, default=0)  # minutes

    # Relationships
    user = relationship("User", back_populates="games")
    mental_state = relationship(
        "MentalState",
        back_populates="game",
        uselist=False,
        cascade="all, delete-orphan",
    )

    @property
    def points(self) -> int:
        """Goals plus assists."""
        return (self.goals or 0) + (self.assists or 0)
