#!/usr/bin/env python3
"""
Business Plan Validation Script

Loads a template and a submission (JSON files), runs the scoring engine and
prints the readiness summary, per-section scores and every finding.

Run:
    python scripts/validate_plan.py tests/fixtures/lean_startup_template.json \
        tests/fixtures/lean_startup_submission.json --locale en
"""

import argparse
import json
import sys

from planscore.core.config import get_settings
from planscore.core.exceptions import PlanScoreError
from planscore.core.logging import configure_logging
from planscore.services.plan_validation_service import PlanValidationService
from planscore.services.scoring_weights import load_scoring_weights
from planscore.utils.template_loader import load_submission, load_template


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Validate and score a business plan submission.")
    parser.add_argument("template", help="Template JSON file")
    parser.add_argument("submission", help="Submission JSON file (field id -> value)")
    parser.add_argument("--locale", default=None, help="Message language (es, en)")
    parser.add_argument("--weights", default=None, help="Scoring weights JSON file")
    parser.add_argument("--lenient", action="store_true", help="Ignore submission keys not in the template")
    parser.add_argument("--json", action="store_true", help="Print the raw result as JSON")
    return parser


def print_report(result, summary) -> None:
    print(f"\n[{summary.status.value.upper()}] {summary.message}")
    print(f"    Score: {result.score}/{result.max_score} ({result.percentage:.1f}%)  valid={result.is_valid}")

    print("\nSections:")
    for section in result.section_scores:
        print(
            f"    {section.section_name or section.section_id:<30} "
            f"{section.percentage:5.1f}%  completeness {section.completeness:5.1f}%"
        )

    if result.errors:
        print("\nErrors:")
        for error in result.errors:
            print(f"    ❌ {error.section_id}/{error.field_id}: {error.message}")

    if result.warnings:
        print("\nWarnings:")
        for warning in result.warnings:
            print(f"    ⚠️  {warning.section_id}/{warning.field_id}: {warning.message}")

    print("\nNext steps:")
    for step in summary.next_steps:
        print(f"    - {step}")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings.effective_log_level)

    try:
        service = PlanValidationService(
            weights=load_scoring_weights(args.weights or settings.scoring_weights_file),
            locale=args.locale or settings.locale,
            strict=not args.lenient,
        )
        template = load_template(args.template)
        submission = load_submission(args.submission)
        result, summary = service.validate_and_summarize(template, submission)
    except (PlanScoreError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.json:
        payload = {"result": result.to_json_dict(), "summary": summary.to_json_dict()}
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        print_report(result, summary)

    return 0 if result.is_valid else 1


if __name__ == "__main__":
    sys.exit(main())
