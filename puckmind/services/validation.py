"""Field validation for games, mental states and signups.

Each ``validate_*`` function takes the raw JSON body and returns a dict of
normalized values keyed by model attribute name. Validation is fail-fast:
the first failing field raises :class:`~puckmind.errors.ValidationError`
and nothing else is checked.

Pydantic does the per-field work. The ``mode="before"`` validators see the
raw JSON value, so ``"3"`` or ``true`` is rejected where a number is
expected instead of being coerced.
"""

import math
from datetime import UTC, datetime
from typing import Any, NoReturn

from pydantic import BaseModel, ConfigDict, EmailStr, ValidationInfo, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from puckmind.errors import ValidationError
from puckmind.models.enums import GameResult, HomeAway, Position

GAME_REQUIRED_FIELDS = ("date", "opponent", "homeAway", "result")
GAME_NUMERIC_FIELDS = ("goals", "assists", "shots", "plus_minus", "ice_time")

MENTAL_STATE_REQUIRED_FIELDS = (
    "confidence",
    "sleepHours",
    "sleepQuality",
    "stressLevel",
    "physicalEnergy",
)
NOTES_MAX_LENGTH = 500

SIGNUP_REQUIRED_FIELDS = ("email", "password", "name", "team", "position")
PASSWORD_MIN_LENGTH = 8

# Integer columns are 32-bit signed
INT_MAX = 2**31 - 1

_LABELS = {
    "goals": "Goals",
    "assists": "Assists",
    "shots": "Shots",
    "plus_minus": "Plus/Minus",
    "ice_time": "Ice time",
    "confidence": "Confidence",
    "sleep_quality": "Sleep quality",
    "stress_level": "Stress level",
    "physical_energy": "Physical energy",
}


def _is_number(value: Any) -> bool:
    """JSON numbers only; booleans, strings and NaN/inf are not numbers."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        return False
    return isinstance(value, int) or math.isfinite(value)


def _raise_first_error(
    exc: PydanticValidationError, fallback: dict[str, str] | None = None
) -> NoReturn:
    error = exc.errors()[0]
    field = str(error["loc"][0]) if error["loc"] else ""
    ctx = error.get("ctx") or {}
    if isinstance(ctx.get("error"), ValueError):
        message = str(ctx["error"])
    else:
        message = (fallback or {}).get(field, "Invalid value")
    raise ValidationError(field, message) from None


class _CamelFields(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        extra="ignore",
    )


class GameFields(_CamelFields):
    """Game payload; every field optional so it serves create and patch alike.

    Field order is validation order.
    """

    home_away: HomeAway | None = None
    result: GameResult | None = None
    goals: int | None = None
    assists: int | None = None
    shots: int | None = None
    plus_minus: int | None = None
    ice_time: float | None = None
    date: datetime | None = None
    opponent: str | None = None

    @field_validator("home_away", mode="before")
    @classmethod
    def check_home_away(cls, value: Any) -> Any:
        if not isinstance(value, str) or value not in {h.value for h in HomeAway}:
            raise ValueError("Location must be 'home' or 'away'")
        return value

    @field_validator("result", mode="before")
    @classmethod
    def check_result(cls, value: Any) -> Any:
        if not isinstance(value, str) or value not in {r.value for r in GameResult}:
            raise ValueError("Result must be 'win' or 'loss'")
        return value

    @field_validator("goals", "assists", "shots", mode="before")
    @classmethod
    def check_count(cls, value: Any, info: ValidationInfo) -> int:
        label = _LABELS[info.field_name]
        if not _is_number(value) or value < 0:
            raise ValueError(f"{label} must be a non-negative number")
        if value > INT_MAX:
            raise ValueError(f"{label} must be at most {INT_MAX}")
        if not float(value).is_integer():
            raise ValueError(f"{label} must be a whole number")
        return int(value)

    @field_validator("plus_minus", mode="before")
    @classmethod
    def check_plus_minus(cls, value: Any) -> int:
        if not _is_number(value):
            raise ValueError("Plus/Minus must be a number")
        if abs(value) > INT_MAX:
            raise ValueError(f"Plus/Minus must be between -{INT_MAX} and {INT_MAX}")
        if not float(value).is_integer():
            raise ValueError("Plus/Minus must be a whole number")
        return int(value)

    @field_validator("ice_time", mode="before")
    @classmethod
    def check_ice_time(cls, value: Any) -> float:
        if not _is_number(value) or value < 0:
            raise ValueError("Ice time must be a non-negative number")
        if value > INT_MAX:
            raise ValueError(f"Ice time must be at most {INT_MAX}")
        return float(value)

    @field_validator("date", mode="before")
    @classmethod
    def check_date_type(cls, value: Any) -> Any:
        if not isinstance(value, str | datetime):
            raise ValueError("Invalid date")
        return value

    @field_validator("date")
    @classmethod
    def check_date(cls, value: datetime) -> datetime:
        # Naive values are UTC
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        if value > datetime.now(UTC):
            raise ValueError("Game date cannot be in the future")
        return value

    @field_validator("opponent", mode="before")
    @classmethod
    def check_opponent(cls, value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValueError("Opponent must be a non-empty string")
        return value.strip()


class MentalStateFields(_CamelFields):
    """Mental state payload; field order is validation order."""

    confidence: int | None = None
    sleep_hours: float | None = None
    sleep_quality: int | None = None
    stress_level: int | None = None
    physical_energy: int | None = None
    notes: str | None = None

    @field_validator(
        "confidence", "sleep_quality", "stress_level", "physical_energy", mode="before"
    )
    @classmethod
    def check_rating(cls, value: Any, info: ValidationInfo) -> int:
        if not _is_number(value) or not 1 <= value <= 10 or not float(value).is_integer():
            raise ValueError(f"{_LABELS[info.field_name]} must be between 1 and 10")
        return int(value)

    @field_validator("sleep_hours", mode="before")
    @classmethod
    def check_sleep_hours(cls, value: Any) -> float:
        if not _is_number(value) or not 0 <= value <= 24:
            raise ValueError("Sleep hours must be between 0 and 24")
        return float(value)

    @field_validator("notes", mode="before")
    @classmethod
    def check_notes(cls, value: Any) -> str | None:
        if value is None or value == "":
            return None
        if not isinstance(value, str):
            raise ValueError("Notes must be text")
        if len(value) > NOTES_MAX_LENGTH:
            raise ValueError(f"Notes must be {NOTES_MAX_LENGTH} characters or less")
        return value


class SignupFields(BaseModel):
    """Signup payload; presence is checked before this model runs."""

    email: EmailStr
    password: str
    name: str
    team: str
    position: Position

    model_config = ConfigDict(use_enum_values=True, extra="ignore")

    @field_validator("password", mode="before")
    @classmethod
    def check_password(cls, value: Any) -> str:
        if len(value) < PASSWORD_MIN_LENGTH:
            raise ValueError(
                f"Password must be at least {PASSWORD_MIN_LENGTH} characters long"
            )
        return value

    @field_validator("position", mode="before")
    @classmethod
    def check_position(cls, value: Any) -> str:
        if not isinstance(value, str) or value not in {p.value for p in Position}:
            raise ValueError("Invalid position")
        return value

    @field_validator("name", "team", mode="before")
    @classmethod
    def strip_text(cls, value: Any) -> str:
        return value.strip()


def validate_game_fields(data: dict[str, Any], partial: bool = False) -> dict[str, Any]:
    """Validate a game payload.

    On create (``partial=False``) date, opponent, homeAway and result are
    required and the numeric fields default to 0. On patch only the supplied
    fields are checked and returned.
    """
    if not partial:
        for field in GAME_REQUIRED_FIELDS:
            if not data.get(field):
                raise ValidationError(field, "Date, opponent, location, and result are required")

    try:
        fields = GameFields.model_validate(data)
    except PydanticValidationError as exc:
        _raise_first_error(exc, fallback={"date": "Invalid date"})

    values = fields.model_dump(exclude_unset=True)
    if not partial:
        for name in GAME_NUMERIC_FIELDS:
            values.setdefault(name, 0)
    return values


def validate_mental_state_fields(data: dict[str, Any], partial: bool = False) -> dict[str, Any]:
    """Validate a mental state payload.

    On create all five numeric fields are required and ``notes`` is always
    present in the result (``None`` when omitted) so the record can be
    replaced wholesale.
    """
    if not partial:
        for field in MENTAL_STATE_REQUIRED_FIELDS:
            if data.get(field) is None:
                raise ValidationError(field, "All mental state fields except notes are required")

    try:
        fields = MentalStateFields.model_validate(data)
    except PydanticValidationError as exc:
        _raise_first_error(exc)

    values = fields.model_dump(exclude_unset=True)
    if not partial:
        values.setdefault("notes", None)
    return values


def validate_signup_fields(data: dict[str, Any]) -> dict[str, Any]:
    """Validate a signup payload and return the cleaned fields."""
    for field in SIGNUP_REQUIRED_FIELDS:
        value = data.get(field)
        if not isinstance(value, str) or not value.strip():
            raise ValidationError(field, "All fields are required")

    try:
        fields = SignupFields.model_validate(data)
    except PydanticValidationError as exc:
        _raise_first_error(exc, fallback={"email": "Invalid email format"})

    return fields.model_dump()
