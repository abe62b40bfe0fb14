"""User model."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from puckmind.database import Base
from puckmind.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """Player account; owns games."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(255), nullable=False)
    team = Column(String(255), nullable=False)
    position = Column(String(20), nullable=False)  # see enums.Position

    # Relationships
    games = relationship(
        "Game", back_populates="user", cascade="all, delete-orphan"
    )
