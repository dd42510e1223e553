"""
Models module - internal data structures of the scoring engine.

Difference from schemas:
- Models: Template input and result value objects used by the engine
- Schemas: API contract (what the HTTP client sends/receives)
"""

from planscore.models.outcome import (
    FieldOutcome,
    Priority,
    ReadinessStatus,
    SectionScore,
    SectionScoreResult,
    Severity,
    ValidationIssue,
    ValidationResult,
    ValidationSuggestion,
    ValidationSummary,
    ValidationWarning,
)
from planscore.models.template import (
    BaseField,
    ChartField,
    CurrencyField,
    DateField,
    FieldConstraints,
    FieldType,
    MultiselectField,
    NumberField,
    Section,
    SelectField,
    TableField,
    TableValue,
    Template,
    TemplateField,
    TextareaField,
    TextField,
)

__all__ = [
    "BaseField",
    "ChartField",
    "CurrencyField",
    "DateField",
    "FieldConstraints",
    "FieldOutcome",
    "FieldType",
    "MultiselectField",
    "NumberField",
    "Priority",
    "ReadinessStatus",
    "Section",
    "SectionScore",
    "SectionScoreResult",
    "SelectField",
    "Severity",
    "TableField",
    "TableValue",
    "Template",
    "TemplateField",
    "TextareaField",
    "TextField",
    "ValidationIssue",
    "ValidationResult",
    "ValidationSuggestion",
    "ValidationSummary",
    "ValidationWarning",
]
