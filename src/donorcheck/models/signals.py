from __future__ import annotations
from typing import Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from donorcheck.models.types import InputField, ResultStatus

class EligibilityInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    age: int
    weight_kg: float
    is_healthy: bool
    slept_enough: bool

class Eligible(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal[ResultStatus.ELIGIBLE] = ResultStatus.ELIGIBLE
    donation_volume_ml: int = Field(gt=0)

class NotEligible(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal[ResultStatus.NOT_ELIGIBLE] = ResultStatus.NOT_ELIGIBLE
    reasons: Tuple[str, ...] = Field(min_length=1)  # in the order checked

class InputInvalid(BaseModel):
    # Only produced by intake parsing, never by the evaluator.
    model_config = ConfigDict(frozen=True)

    status: Literal[ResultStatus.INPUT_INVALID] = ResultStatus.INPUT_INVALID
    field: InputField
    message: str

EligibilityResult = Union[Eligible, NotEligible, InputInvalid]
