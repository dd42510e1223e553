"""
Schemas module - Request/Response schemas for API endpoints.

Difference from models:
- Models: Internal data structures (template, results)
- Schemas: API contract (what client sends/receives)
"""

from planscore.schemas.schemas import (
    ErrorResponse,
    HealthResponse,
    ValidateFieldRequest,
    ValidatePlanRequest,
    ValidatePlanResponse,
)

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "ValidateFieldRequest",
    "ValidatePlanRequest",
    "ValidatePlanResponse",
]
