"""
Validation Routes

POST /validation/plan - Validate and score a full business plan submission
POST /validation/field - Validate a single field value (inline, on blur)
POST /validation/summary - Readiness tier for an existing ValidationResult
GET /validation/weights - Active scoring heuristics
"""

import logging

from fastapi import APIRouter, Depends

from planscore.models.outcome import FieldOutcome, ValidationResult, ValidationSummary
from planscore.schemas.schemas import (
    ErrorResponse,
    ValidateFieldRequest,
    ValidatePlanRequest,
    ValidatePlanResponse,
)
from planscore.services.plan_validation_service import (
    PlanValidationService,
    get_plan_validation_service,
)
from planscore.services.scoring_weights import ScoringWeights

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/validation", tags=["Validation"])


@router.post(
    "/plan",
    response_model=ValidatePlanResponse,
    responses={400: {"model": ErrorResponse}},
)
async def validate_plan(
    request: ValidatePlanRequest,
    service: PlanValidationService = Depends(get_plan_validation_service)
):
    """
    Validate a business plan against its template.

    Returns:
    - result: scores, errors, warnings, suggestions, per-section scores
    - summary: readiness tier (excellent/good/fair/poor) and next steps

    A submission key that the template doesn't declare is a 400.
    """
    result, summary = service.validate_and_summarize(request.template, request.submission)

    logger.info(
        "Plan %s scored %.1f%% (%s, valid=%s)",
        request.template.id, result.percentage, summary.status.value, result.is_valid
    )
    return ValidatePlanResponse(result=result, summary=summary)


@router.post("/field", response_model=FieldOutcome)
async def validate_field(
    request: ValidateFieldRequest,
    service: PlanValidationService = Depends(get_plan_validation_service)
):
    """Validate one field value, e.g. when the user leaves an input."""
    return service.validate_field(request.field, request.value)


@router.post("/summary", response_model=ValidationSummary)
async def summarize_result(
    result: ValidationResult,
    service: PlanValidationService = Depends(get_plan_validation_service)
):
    """Classify a previously computed ValidationResult."""
    return service.summarize(result)


@router.get("/weights", response_model=ScoringWeights)
async def get_weights(service: PlanValidationService = Depends(get_plan_validation_service)):
    """Scoring heuristics currently in use."""
    return service.weights
