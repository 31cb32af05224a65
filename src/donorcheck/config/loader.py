from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from donorcheck.models.rules import EligibilityRules

DEFAULT_RULES_PATH = Path(__file__).resolve().parent / "rules.yaml"

RULES_ENV = "DONORCHECK_RULES"
INFO_URL_ENV = "DONORCHECK_INFO_URL"


def rules_path(explicit: Optional[str] = None) -> Path:
    # --rules beats the env var, which beats the packaged file.
    if explicit:
        return Path(explicit)
    env = os.getenv(RULES_ENV)
    if env:
        return Path(env)
    return DEFAULT_RULES_PATH


def rules_from_mapping(raw: Any) -> EligibilityRules:
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"rules config must be a mapping, got {type(raw).__name__}")

    if "rules" in raw:
        extra = sorted(str(k) for k in raw if k != "rules")
        if extra:
            raise ValueError(f"unexpected top-level keys next to 'rules': {', '.join(extra)}")
        data: Dict[str, Any] = raw["rules"]
    else:
        data = raw

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("'rules' must be a mapping of threshold names to values")
    return EligibilityRules(**data)


def load_rules(path: Optional[str] = None) -> EligibilityRules:
    p = rules_path(path)
    if not p.exists():
        raise FileNotFoundError(f"Rules file not found: {p}")
    try:
        raw = yaml.safe_load(p.read_text())
    except yaml.YAMLError as e:
        raise ValueError(f"{p} is not valid YAML: {e}") from e
    rules = rules_from_mapping(raw)

    url = os.getenv(INFO_URL_ENV)
    if url:
        rules = rules.model_copy(update={"info_url": url})
    return rules
