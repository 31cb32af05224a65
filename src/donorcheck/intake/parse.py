from __future__ import annotations

import re
from typing import Union

from donorcheck.models.rules import DEFAULT_RULES, EligibilityRules
from donorcheck.models.signals import EligibilityInput, EligibilityResult, InputInvalid
from donorcheck.models.types import InputField
from donorcheck.state.evaluator import evaluate

AGE_MESSAGE = "Please enter a valid age (whole number, like 25)."
WEIGHT_MESSAGE = "Please enter a valid weight (number, like 55.5)."

# Same shapes the entry fields accept: digits only for age, plain decimals for weight.
_AGE_RE = re.compile(r"^\d+$")
_WEIGHT_RE = re.compile(r"^\d*\.?\d*$")


def parse_age(text: str) -> Union[int, InputInvalid]:
    t = (text or "").strip()
    if not _AGE_RE.match(t):
        return InputInvalid(field=InputField.AGE, message=AGE_MESSAGE)
    return int(t)


def parse_weight(text: str) -> Union[float, InputInvalid]:
    t = (text or "").strip()
    if not _WEIGHT_RE.match(t) or not any(ch.isdigit() for ch in t):
        return InputInvalid(field=InputField.WEIGHT, message=WEIGHT_MESSAGE)
    return float(t)


def parse_input(
    age_text: str,
    weight_text: str,
    is_healthy: bool,
    slept_enough: bool,
) -> Union[EligibilityInput, InputInvalid]:
    """
    Turn raw form text into an EligibilityInput.

    Age is checked before weight; the first field that fails to parse is reported.
    No range checks happen here, those belong to the evaluator.
    """
    age = parse_age(age_text)
    if isinstance(age, InputInvalid):
        return age
    weight = parse_weight(weight_text)
    if isinstance(weight, InputInvalid):
        return weight

    return EligibilityInput(
        age=age,
        weight_kg=weight,
        is_healthy=is_healthy,
        slept_enough=slept_enough,
    )


def check(
    age_text: str,
    weight_text: str,
    is_healthy: bool,
    slept_enough: bool,
    rules: EligibilityRules = DEFAULT_RULES,
) -> EligibilityResult:
    parsed = parse_input(age_text, weight_text, is_healthy, slept_enough)
    if isinstance(parsed, InputInvalid):
        return parsed
    return evaluate(parsed, rules)
