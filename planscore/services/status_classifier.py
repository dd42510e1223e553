"""
Status Classifier - readiness tier and next steps for a ValidationResult.

Tiers are checked top-down, first match wins:

    excellent   percentage >= 90 and errors == 0
    good        percentage >= 75 and errors <= 2
    fair        percentage >= 50 and errors <= 5
    poor        otherwise

Pure presentation logic on top of the numbers.
"""

from typing import Optional

from planscore.models.outcome import ReadinessStatus, ValidationResult, ValidationSummary
from planscore.services.messages import get_message, get_next_steps

# (status, minimum percentage, maximum error count)
TIER_RULES = (
    (ReadinessStatus.excellent, 90, 0),
    (ReadinessStatus.good, 75, 2),
    (ReadinessStatus.fair, 50, 5),
)


def classify(percentage: float, error_count: int) -> ReadinessStatus:
    for status, min_percentage, max_errors in TIER_RULES:
        if percentage >= min_percentage and error_count <= max_errors:
            return status
    return ReadinessStatus.poor


def summarize(result: ValidationResult, locale: Optional[str] = None) -> ValidationSummary:
    error_count = result.error_count
    warning_count = result.warning_count
    suggestion_count = result.suggestion_count

    status = classify(result.percentage, error_count)
    next_steps = get_next_steps(status.value, locale)

    if error_count > 0:
        next_steps.insert(0, get_message("fix_errors", locale, count=error_count))

    if warning_count > 0:
        next_steps.append(get_message("review_warnings", locale, count=warning_count))

    if suggestion_count > 0:
        next_steps.append(get_message("consider_suggestions", locale, count=suggestion_count))

    return ValidationSummary(
        status=status,
        message=get_message(f"status_{status.value}", locale),
        next_steps=next_steps,
    )
