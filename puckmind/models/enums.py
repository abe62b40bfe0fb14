"""Enums for model fields."""

from enum import Enum


class Position(str, Enum):
    """Playing position chosen at signup."""

    CENTER = "Center"
    LEFT_WING = "Left Wing"
    RIGHT_WING = "Right Wing"
    DEFENSEMAN = "Defenseman"
    GOALIE = "Goalie"


class HomeAway(str, Enum):
    """Where the game was played."""

    HOME = "home"
    AWAY = "away"


class GameResult(str, Enum):
    """Final outcome of a game for the player's team."""

    WIN = "win"
    LOSS = "loss"
