from __future__ import annotations

from typing import Callable, List, Optional

from donorcheck.models.rules import EligibilityRules
from donorcheck.models.signals import EligibilityInput

# Each check returns a human-readable reason when the criterion fails, else None.
Criterion = Callable[[EligibilityInput, EligibilityRules], Optional[str]]


def health_reason(inp: EligibilityInput, rules: EligibilityRules) -> Optional[str]:
    if not inp.is_healthy:
        return "Must be healthy and feeling well."
    return None


def age_reason(inp: EligibilityInput, rules: EligibilityRules) -> Optional[str]:
    if inp.age < rules.min_age or inp.age > rules.max_age:
        return f"Age must be between {rules.min_age} and {rules.max_age}."
    return None


def weight_reason(inp: EligibilityInput, rules: EligibilityRules) -> Optional[str]:
    if inp.weight_kg < rules.min_weight_kg:
        return f"Weight must be {rules.min_weight_kg} kg or more."
    return None


def sleep_reason(inp: EligibilityInput, rules: EligibilityRules) -> Optional[str]:
    if not inp.slept_enough:
        return f"Must have slept more than {rules.min_sleep_hours} hours."
    return None


# Order matters: reasons are reported in this order.
CRITERIA: List[Criterion] = [
    health_reason,
    age_reason,
    weight_reason,
    sleep_reason,
]


def collect_reasons(inp: EligibilityInput, rules: EligibilityRules) -> List[str]:
    """Run every criterion (no short-circuit) and return the failing reasons."""
    reasons: List[str] = []
    for check in CRITERIA:
        reason = check(inp, rules)
        if reason:
            reasons.append(reason)
    return reasons
