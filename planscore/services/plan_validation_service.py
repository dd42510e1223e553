"""
Plan Validation Service - section scoring and plan aggregation.

PURPOSE:
Turn a Template + Submission into a ValidationResult the form layer can
render: inline field errors, section completeness bars, overall gauge.

HOW IT WORKS:
1. Every field of a section goes through the Field Validator
2. Section score = sum of field scores, max = max_field_score x field count
3. Plan score = sum over sections, percentage = score / max score
4. isValid = no error-severity entry anywhere (score does not gate it)

Two metrics that look alike but are NOT the same:
- percentage: quality score / max attainable score
- completeness: answered-and-valid fields / total fields

The functions here are pure: no I/O, no state kept between calls, same
input -> same output (including issue ordering).
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from planscore.core.config import get_settings
from planscore.core.exceptions import UnknownFieldError
from planscore.models.outcome import (
    FieldOutcome,
    SectionScoreResult,
    Severity,
    ValidationResult,
    ValidationSummary,
)
from planscore.models.template import BaseField, Section, Template
from planscore.services.field_validator import validate_field
from planscore.services.scoring_weights import (
    DEFAULT_WEIGHTS,
    ScoringWeights,
    load_scoring_weights,
)
from planscore.services.status_classifier import summarize

logger = logging.getLogger(__name__)


def _percent(part: float, whole: float) -> float:
    return (part / whole) * 100 if whole > 0 else 0.0


# ============================================================
# SECTION SCORER
# ============================================================

def score_section(
    section: Section,
    submission: Mapping[str, Any],
    weights: ScoringWeights = DEFAULT_WEIGHTS,
    locale: Optional[str] = None,
) -> SectionScoreResult:
    """
    Score every field in a section and tag their issues with the section id.
    """
    outcomes: List[FieldOutcome] = [
        validate_field(field, submission.get(field.id), weights, locale)
        for field in section.fields
    ]

    field_count = len(outcomes)
    score = sum(outcome.score for outcome in outcomes if outcome.is_valid)
    max_score = weights.max_field_score * field_count
    completed = sum(1 for outcome in outcomes if outcome.is_valid and outcome.is_present)

    return SectionScoreResult(
        section_id=section.id,
        section_name=section.title,
        score=score,
        max_score=max_score,
        percentage=_percent(score, max_score),
        completeness=_percent(completed, field_count),
        errors=[e.with_section(section.id) for o in outcomes for e in o.errors],
        warnings=[w.with_section(section.id) for o in outcomes for w in o.warnings],
        suggestions=[s.with_section(section.id) for o in outcomes for s in o.suggestions],
        field_outcomes=outcomes,
    )


# ============================================================
# PLAN AGGREGATOR
# ============================================================

def check_submission_keys(template: Template, submission: Mapping[str, Any]) -> Dict[str, BaseField]:
    """
    Index the template's fields and reject submission keys it doesn't declare.

    Raises:
        DuplicateFieldError, UnknownFieldError
    """
    index = template.field_index()
    unknown = set(submission) - set(index)
    if unknown:
        raise UnknownFieldError(unknown)
    return index


def validate_plan(
    template: Template,
    submission: Mapping[str, Any],
    weights: ScoringWeights = DEFAULT_WEIGHTS,
    locale: Optional[str] = None,
    strict: bool = True,
) -> ValidationResult:
    """
    Validate a complete business plan submission.

    Args:
        template: Document schema
        submission: field id -> value
        weights: Scoring heuristics
        locale: Message language
        strict: Raise on submission keys missing from the template

    Returns:
        ValidationResult with per-section scores in template order
    """
    if strict:
        check_submission_keys(template, submission)
    else:
        template.field_index()

    section_results = [
        score_section(section, submission, weights, locale)
        for section in template.sections
    ]

    total_score = sum(r.score for r in section_results)
    max_score = sum(r.max_score for r in section_results)
    errors = [e for r in section_results for e in r.errors]

    result = ValidationResult(
        is_valid=not any(e.severity == Severity.error for e in errors),
        score=total_score,
        max_score=max_score,
        percentage=_percent(total_score, max_score),
        errors=errors,
        warnings=[w for r in section_results for w in r.warnings],
        suggestions=[s for r in section_results for s in r.suggestions],
        section_scores=[r.to_section_score() for r in section_results],
    )

    logger.debug(
        "Validated template %s: %s/%s (%.1f%%), %d errors, %d warnings",
        template.id, result.score, result.max_score, result.percentage,
        result.error_count, result.warning_count,
    )
    return result


# ============================================================
# SERVICE
# ============================================================

class PlanValidationService:
    """
    Binds the engine to a set of weights and a locale.

    Holds no per-call state; caching repeated validations is the caller's
    business.
    """

    def __init__(
        self,
        weights: ScoringWeights = DEFAULT_WEIGHTS,
        locale: Optional[str] = None,
        strict: bool = True,
    ):
        self.weights = weights
        self.locale = locale
        self.strict = strict

    def validate_field(self, field: BaseField, value: Any) -> FieldOutcome:
        return validate_field(field, value, self.weights, self.locale)

    def score_section(self, section: Section, submission: Mapping[str, Any]) -> SectionScoreResult:
        return score_section(section, submission, self.weights, self.locale)

    def validate_plan(self, template: Template, submission: Mapping[str, Any]) -> ValidationResult:
        return validate_plan(template, submission, self.weights, self.locale, self.strict)

    def summarize(self, result: ValidationResult) -> ValidationSummary:
        return summarize(result, self.locale)

    def validate_and_summarize(self, template: Template, submission: Mapping[str, Any]):
        """Returns (ValidationResult, ValidationSummary)."""
        result = self.validate_plan(template, submission)
        return result, self.summarize(result)


# ============================================================
# CONVENIENCE FUNCTIONS
# ============================================================

def get_plan_validation_service() -> PlanValidationService:
    """Get a service instance configured from settings."""
    settings = get_settings()
    return PlanValidationService(
        weights=load_scoring_weights(settings.scoring_weights_file),
        locale=settings.locale,
        strict=settings.strict_submission_keys,
    )
