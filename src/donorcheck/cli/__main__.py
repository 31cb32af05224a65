from __future__ import annotations

import argparse
import sys

import yaml

from donorcheck.cli import check_batch
from donorcheck.cli.links import open_info_page
from donorcheck.cli.render import exit_code, render, to_json
from donorcheck.config.loader import load_rules
from donorcheck.intake.parse import check
from donorcheck.models.rules import EligibilityRules


def _rules(args: argparse.Namespace) -> EligibilityRules:
    try:
        return load_rules(args.rules)
    except (OSError, ValueError) as e:
        # pydantic ValidationError and malformed YAML both surface as ValueError
        print(f"Could not load rules: {type(e).__name__}: {e}", file=sys.stderr)
        raise SystemExit(2)


def _cmd_check(args: argparse.Namespace) -> int:
    rules = _rules(args)
    result = check(
        age_text=args.age,
        weight_text=args.weight,
        is_healthy=not args.unwell,
        slept_enough=not args.short_sleep,
        rules=rules,
    )
    print(to_json(result) if args.json else render(result))
    return exit_code(result)


def _cmd_batch(args: argparse.Namespace) -> int:
    rules = _rules(args)
    try:
        check_batch.run(args.file, rules=rules, as_json=args.json)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Could not read applicants: {type(e).__name__}: {e}", file=sys.stderr)
        return 2
    return 0


def _cmd_rules(args: argparse.Namespace) -> int:
    rules = _rules(args)
    print(yaml.safe_dump({"rules": rules.model_dump()}, sort_keys=False), end="")
    return 0


def _cmd_info(args: argparse.Namespace) -> int:
    url = _rules(args).info_url
    print(url)
    if not args.print_only:
        open_info_page(url)
    return 0


def main(argv: list[str] | None = None) -> int:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--rules", default=None, help="Rules YAML (default: $DONORCHECK_RULES or packaged rules)")

    p = argparse.ArgumentParser(prog="donorcheck")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_check = sub.add_parser("check", parents=[common], help="Check one donor's eligibility")
    p_check.add_argument("--age", required=True, help="Age in years")
    p_check.add_argument("--weight", required=True, help="Weight in kg")
    p_check.add_argument("--unwell", action="store_true", help="Not healthy or not feeling well")
    p_check.add_argument("--short-sleep", action="store_true", help="Slept 5 hours or less last night")
    p_check.add_argument("--json", action="store_true")
    p_check.set_defaults(func=_cmd_check)

    p_batch = sub.add_parser("batch", parents=[common], help="Check every applicant listed in a YAML file")
    p_batch.add_argument("file")
    p_batch.add_argument("--json", action="store_true")
    p_batch.set_defaults(func=_cmd_batch)

    p_rules = sub.add_parser("rules", parents=[common], help="Print the effective eligibility rules")
    p_rules.set_defaults(func=_cmd_rules)

    p_info = sub.add_parser("info", parents=[common], help="Open the blood donation information website")
    p_info.add_argument("--print-only", action="store_true", help="Print the URL without opening it")
    p_info.set_defaults(func=_cmd_info)

    args = p.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
