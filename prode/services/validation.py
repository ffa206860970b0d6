"""
Validation of incoming prediction submissions.

Structural checks run on the raw request body before any lookup.
Business checks need the active settings and the match deadline, so
they run after those are resolved.
"""
from datetime import datetime
from decimal import Decimal
from typing import Annotated, Any, Literal, Optional
import pydantic
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..config import MAX_SCORE
from ..exceptions import CutoffPassed, LimitExceeded, ValidationError
from .cutoff import is_open
from .settings import ActiveSettings

Outcome = Literal["home", "draw", "away"]
Score = Annotated[int, Field(ge=0, le=MAX_SCORE)]

REQUIRED_FIELDS = ("user_id", "match_id", "predicted_outcome")

# Field -> error code, in the order errors are reported
ERROR_CODES = {
    "bet_amount": "invalid_bet_amount",
    "predicted_outcome": "invalid_outcome",
    "predicted_score_home": "invalid_score",
    "predicted_score_away": "invalid_score",
    "currency": "invalid_currency",
}


class PredictionSubmission(BaseModel):
    """A structurally valid submission."""
    model_config = ConfigDict(frozen=True)

    user_id: str
    match_id: str
    predicted_outcome: Outcome
    predicted_score_home: Optional[Score] = None
    predicted_score_away: Optional[Score] = None
    bet_amount: Decimal = Field(
        default=Decimal("0"), ge=0, max_digits=12, decimal_places=2, allow_inf_nan=False
    )
    currency: Optional[str] = Field(default=None, max_length=8)

    @field_validator("bet_amount", mode="before")
    @classmethod
    def empty_amount_is_zero(cls, value: Any) -> Any:
        if value is None or value == "":
            return Decimal("0")
        if isinstance(value, bool):
            raise ValueError("bet_amount must be a number")
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("predicted_score_home", "predicted_score_away", mode="before")
    @classmethod
    def empty_score_is_none(cls, value: Any) -> Any:
        if value is None or value == "":
            return None
        if isinstance(value, bool):
            raise ValueError("score must be an integer")
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("currency", mode="before")
    @classmethod
    def blank_currency_is_none(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip() or None
        return value


def _required_text(value: Any) -> Optional[str]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        value = str(value)
    if not isinstance(value, str):
        return None
    return value.strip() or None


def validate_submission(payload: dict) -> PredictionSubmission:
    """Structural validation of a raw submission body."""
    required = {field: _required_text(payload.get(field)) for field in REQUIRED_FIELDS}
    if not all(required.values()):
        raise ValidationError("missing_fields")

    try:
        return PredictionSubmission.model_validate({**payload, **required})
    except pydantic.ValidationError as e:
        failed = {error["loc"][0] for error in e.errors() if error["loc"]}
        for field, code in ERROR_CODES.items():
            if field in failed:
                raise ValidationError(code) from e
        raise ValidationError("invalid_request") from e


def check_business_rules(
    submission: PredictionSubmission,
    settings: ActiveSettings,
    deadline: datetime,
    now: datetime
) -> None:
    """Amount limit first, then the cutoff deadline."""
    if submission.bet_amount > settings.max_bet:
        raise LimitExceeded("bet_over_max")

    if not is_open(now, deadline):
        raise CutoffPassed("cutoff_passed")
