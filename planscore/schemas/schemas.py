"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
The engine's own models (Template, ValidationResult, ...) are reused as-is
inside them.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel

from planscore.models.base import CamelModel
from planscore.models.outcome import ValidationResult, ValidationSummary
from planscore.models.template import Template, TemplateField


# ============================================================
# VALIDATION SCHEMAS
# ============================================================

class ValidatePlanRequest(CamelModel):
    template: Template
    submission: Dict[str, Any] = {}


class ValidatePlanResponse(CamelModel):
    result: ValidationResult
    summary: ValidationSummary


class ValidateFieldRequest(CamelModel):
    field: TemplateField
    value: Any = None


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class HealthResponse(BaseModel):
    status: str
    app: str
    version: str


class ErrorResponse(BaseModel):
    detail: str
    code: Optional[str] = None
