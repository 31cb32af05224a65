from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

import yaml

from donorcheck.cli.render import summary_line
from donorcheck.intake.parse import check
from donorcheck.models.rules import EligibilityRules
from donorcheck.models.signals import EligibilityResult


def _as_bool(v: Any, default: bool = True) -> bool:
    # Checkboxes default to ticked, like the form.
    if v is None:
        return default
    if isinstance(v, str):
        return v.strip().lower() in ("1", "true", "yes", "y", "on")
    return bool(v)


def evaluate_applicant(a: Dict[str, Any], rules: EligibilityRules) -> EligibilityResult:
    # Ages and weights go through the same text parsing as interactive input.
    age = a.get("age")
    weight = a.get("weight")
    return check(
        age_text="" if age is None else str(age),
        weight_text="" if weight is None else str(weight),
        is_healthy=_as_bool(a.get("healthy")),
        slept_enough=_as_bool(a.get("slept_enough")),
        rules=rules,
    )


def run(applicants_path: str, rules: EligibilityRules, as_json: bool = False) -> List[EligibilityResult]:
    cfg = yaml.safe_load(Path(applicants_path).read_text()) or {}
    if not isinstance(cfg, dict):
        raise ValueError(f"applicants file must be a mapping, got {type(cfg).__name__}")
    applicants = cfg.get("applicants") or []
    if not isinstance(applicants, list):
        raise ValueError(f"'applicants' must be a list, got {type(applicants).__name__}")

    results: List[EligibilityResult] = []
    for i, a in enumerate(applicants, start=1):
        if not isinstance(a, dict):
            print(f"#{i} skipped (entry is not a mapping): {a!r}")
            continue

        name = a.get("name") or f"#{i}"
        result = evaluate_applicant(a, rules)
        results.append(result)

        if as_json:
            print(json.dumps({"name": name, **result.model_dump(mode="json")}))
        else:
            print(f"{name}: {summary_line(result)}")

    return results
