"""
Result value objects produced by the scoring engine.

FieldOutcome -> SectionScoreResult -> ValidationResult -> ValidationSummary

All models are frozen. Tagging an issue with its section returns a copy.
The machine-readable parts (ids, severity, priority, scores) are the stable
contract; ``message`` strings are presentation text.
"""

from enum import Enum
from typing import List, Optional

from pydantic import Field

from planscore.models.base import CamelModel


# ============================================================
# ENUMS
# ============================================================

class Severity(str, Enum):
    error = "error"
    warning = "warning"


class Priority(str, Enum):
    high = "high"
    medium = "medium"
    low = "low"


class ReadinessStatus(str, Enum):
    excellent = "excellent"
    good = "good"
    fair = "fair"
    poor = "poor"


# ============================================================
# ISSUES
# ============================================================

class ValidationIssue(CamelModel):
    field_id: str
    section_id: str = ""
    message: str
    severity: Severity = Severity.error

    def with_section(self, section_id: str) -> "ValidationIssue":
        return self.model_copy(update={"section_id": section_id})


class ValidationWarning(CamelModel):
    field_id: str
    section_id: str = ""
    message: str
    suggestion: Optional[str] = None

    def with_section(self, section_id: str) -> "ValidationWarning":
        return self.model_copy(update={"section_id": section_id})


class ValidationSuggestion(CamelModel):
    field_id: str
    section_id: str = ""
    message: str
    priority: Priority = Priority.medium

    def with_section(self, section_id: str) -> "ValidationSuggestion":
        return self.model_copy(update={"section_id": section_id})


# ============================================================
# FIELD / SECTION / PLAN
# ============================================================

class FieldOutcome(CamelModel):
    field_id: str
    is_valid: bool
    is_present: bool
    score: int = Field(0, ge=0)
    max_score: int = 10
    errors: List[ValidationIssue] = []
    warnings: List[ValidationWarning] = []
    suggestions: List[ValidationSuggestion] = []


class SectionScore(CamelModel):
    section_id: str
    section_name: str = ""
    score: int
    max_score: int
    percentage: float
    completeness: float


class SectionScoreResult(SectionScore):
    """SectionScore plus the section's issues, already tagged with section_id."""

    errors: List[ValidationIssue] = []
    warnings: List[ValidationWarning] = []
    suggestions: List[ValidationSuggestion] = []
    field_outcomes: List[FieldOutcome] = []

    def to_section_score(self) -> SectionScore:
        return SectionScore(
            section_id=self.section_id,
            section_name=self.section_name,
            score=self.score,
            max_score=self.max_score,
            percentage=self.percentage,
            completeness=self.completeness,
        )


class ValidationResult(CamelModel):
    is_valid: bool
    score: int
    max_score: int
    percentage: float
    errors: List[ValidationIssue] = []
    warnings: List[ValidationWarning] = []
    suggestions: List[ValidationSuggestion] = []
    section_scores: List[SectionScore] = []

    @property
    def error_count(self) -> int:
        """Only error-severity entries count."""
        return sum(1 for e in self.errors if e.severity == Severity.error)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    @property
    def suggestion_count(self) -> int:
        return len(self.suggestions)


class ValidationSummary(CamelModel):
    status: ReadinessStatus
    message: str
    next_steps: List[str] = []
