"""Data contracts for compound interest calculations."""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

RawValue = Optional[Union[float, str]]


class CalculationRequest(BaseModel):
    """Submitted calculator inputs, kept as given until validation."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    principal: RawValue = None
    annual_rate_percent: RawValue = Field(None, alias="rate")
    years: RawValue = Field(None, alias="time")
    frequency: Optional[str] = None
    currency: Optional[str] = None

    @classmethod
    def from_form(cls, form) -> "CalculationRequest":
        """Build a request from submitted form (or JSON) fields."""
        return cls.model_validate(
            {
                "principal": _as_raw(form.get("principal")),
                "rate": _as_raw(form.get("rate")),
                "time": _as_raw(form.get("time")),
                "frequency": _as_text(form.get("frequency")),
                "currency": _as_text(form.get("currency")),
            }
        )


class CalculationResult(BaseModel):
    """Final amount and interest earned, expressed in ``currency``."""

    model_config = ConfigDict(frozen=True, ser_json_inf_nan="null")

    principal: float
    final_amount: float = Field(..., serialization_alias="finalAmount")
    interest_earned: float = Field(..., serialization_alias="interestEarned")
    currency: str


class InputValidationError(BaseModel):
    """A single user-facing message explaining why the input was rejected."""

    model_config = ConfigDict(frozen=True)

    message: str


def _as_raw(value: object) -> RawValue:
    # ints (bool included) go through text so oversized ones fail parsing, not coercion
    if value is None or isinstance(value, (float, str)):
        return value
    return str(value)


def _as_text(value: object) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    return str(value)
