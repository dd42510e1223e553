"""
Services module - the business plan scoring engine.

Template + Submission -> Field Validator -> Section Scorer
-> Plan Aggregator -> Status Classifier
"""

from planscore.services.field_validator import is_empty_value, validate_field
from planscore.services.plan_validation_service import (
    PlanValidationService,
    get_plan_validation_service,
    score_section,
    validate_plan,
)
from planscore.services.scoring_weights import (
    DEFAULT_WEIGHTS,
    ScoringWeights,
    load_scoring_weights,
)
from planscore.services.status_classifier import classify, summarize

__all__ = [
    "DEFAULT_WEIGHTS",
    "PlanValidationService",
    "ScoringWeights",
    "classify",
    "get_plan_validation_service",
    "is_empty_value",
    "load_scoring_weights",
    "score_section",
    "summarize",
    "validate_field",
    "validate_plan",
]
