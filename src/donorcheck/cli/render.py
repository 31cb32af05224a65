from __future__ import annotations

import json
from typing import List, Optional

from donorcheck.models.signals import EligibilityResult, Eligible, InputInvalid, NotEligible

NOT_CHECKED_TEXT = "Please fill in the details and run a check."


def render(result: Optional[EligibilityResult]) -> str:
    if result is None:
        return NOT_CHECKED_TEXT

    lines: List[str] = []
    if isinstance(result, Eligible):
        lines.append("Result: Eligible to donate!")
        lines.append(f"Maximum donation amount: {result.donation_volume_ml} ml")
    elif isinstance(result, NotEligible):
        lines.append("Result: Not eligible to donate")
        lines.append("Reason(s):")
        lines.extend(f"- {r}" for r in result.reasons)
    elif isinstance(result, InputInvalid):
        lines.append("Input error")
        lines.append(result.message)
    else:
        raise TypeError(f"unknown result type: {type(result).__name__}")
    return "\n".join(lines)


def summary_line(result: EligibilityResult) -> str:
    """Single-line form used by batch output."""
    if isinstance(result, Eligible):
        return f"ELIGIBLE ({result.donation_volume_ml} ml)"
    if isinstance(result, NotEligible):
        return "NOT_ELIGIBLE: " + " ".join(result.reasons)
    return f"INPUT_INVALID [{result.field.value}]: {result.message}"


def to_json(result: EligibilityResult) -> str:
    return json.dumps(result.model_dump(mode="json"))


def exit_code(result: EligibilityResult) -> int:
    if isinstance(result, Eligible):
        return 0
    if isinstance(result, NotEligible):
        return 1
    return 2
