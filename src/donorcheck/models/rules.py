from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

class EligibilityRules(BaseModel):
    """
    Thresholds used by the evaluator.

    Bounds on age and minimum weight are inclusive. The high-volume weight
    threshold is strict: a donor must weigh more than it to give the larger volume.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    min_age: int = 18
    max_age: int = 60
    min_weight_kg: float = 45.0
    high_volume_weight_threshold_kg: float = 50.0
    standard_volume_ml: int = Field(default=350, gt=0)
    high_volume_ml: int = Field(default=450, gt=0)
    min_sleep_hours: int = Field(default=5, ge=0)
    info_url: str = "https://www.pdn.gov.my/"  # National Blood Centre (Malaysia)

    @model_validator(mode="after")
    def _check_ordering(self) -> "EligibilityRules":
        if self.min_age > self.max_age:
            raise ValueError(f"min_age ({self.min_age}) is above max_age ({self.max_age})")
        if self.min_weight_kg > self.high_volume_weight_threshold_kg:
            raise ValueError("min_weight_kg must not exceed high_volume_weight_threshold_kg")
        if self.standard_volume_ml > self.high_volume_ml:
            raise ValueError("standard_volume_ml must not exceed high_volume_ml")
        return self

DEFAULT_RULES = EligibilityRules()
