from donorcheck.features.criteria import collect_reasons
from donorcheck.models.rules import DEFAULT_RULES, EligibilityRules
from donorcheck.models.signals import (
    EligibilityInput,
    EligibilityResult,
    Eligible,
    NotEligible,
)

def donation_volume_ml(weight_kg: float, rules: EligibilityRules = DEFAULT_RULES) -> int:
    # Strictly above the threshold; exactly at it still gets the standard volume.
    if weight_kg > rules.high_volume_weight_threshold_kg:
        return rules.high_volume_ml
    return rules.standard_volume_ml

def evaluate(inp: EligibilityInput, rules: EligibilityRules = DEFAULT_RULES) -> EligibilityResult:
    reasons = collect_reasons(inp, rules)
    if reasons:
        return NotEligible(reasons=tuple(reasons))
    return Eligible(donation_volume_ml=donation_volume_ml(inp.weight_kg, rules))
