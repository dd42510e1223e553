"""
Field Validator - scores one submitted value against one template field.

HOW IT WORKS:
1. Presence check: a required field with an empty value gets a single
   "required" error and score 0. An optional empty field is valid, score 0.
2. Dispatch on the field type (one validator per FieldType member).
3. Hard constraints (min_length, min, empty required table/multiselect,
   wrongly-shaped values) are ERRORS: the field becomes invalid, score 0.
4. Soft constraints (max_length, max, pattern, low table fill, unknown
   options, unparseable dates) are WARNINGS: quality signals only.
5. The score is clamped to [0, max_field_score].

The validator never raises for anything the user typed. All heuristics
come from ScoringWeights.
"""

import math
import re
from datetime import date, datetime
from typing import Any, Callable, Dict, List, Optional

from pydantic import ValidationError

from planscore.models.outcome import (
    FieldOutcome,
    Severity,
    ValidationIssue,
    ValidationSuggestion,
    ValidationWarning,
)
from planscore.models.template import BaseField, FieldType, TableValue
from planscore.services.messages import get_message
from planscore.services.scoring_weights import DEFAULT_WEIGHTS, ScoringWeights


# ============================================================
# EMPTINESS
# ============================================================

def is_empty_cell(cell: Any) -> bool:
    return cell is None or cell == ""


def is_empty_value(value: Any) -> bool:
    """
    None, "", [] and a table with zero rows (or no rows key) count as
    "not answered".
    """
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (list, tuple, set)):
        return len(value) == 0
    if isinstance(value, TableValue):
        return len(value.rows) == 0
    if isinstance(value, dict):
        if "rows" in value or "headers" in value:
            return not value.get("rows")
        return len(value) == 0
    return False


def _format_number(value: float) -> str:
    if isinstance(value, int):
        return str(value)
    if value.is_integer():
        return str(int(value))
    return str(value)


# ============================================================
# PER-FIELD ACCUMULATOR
# ============================================================

class FieldCheck:
    """Collects the findings for one field while its validator runs."""

    def __init__(self, field: BaseField, weights: ScoringWeights, locale: Optional[str]):
        self.field = field
        self.weights = weights
        self.locale = locale
        self.errors: List[ValidationIssue] = []
        self.warnings: List[ValidationWarning] = []
        self.suggestions: List[ValidationSuggestion] = []

    @property
    def constraints(self):
        return self.field.validation

    def message(self, key: str, **params) -> str:
        params.setdefault("label", self.field.display_label)
        return get_message(key, self.locale, **params)

    def error(self, key: str, **params) -> int:
        """Record an error. Returns 0 so validators can ``return check.error(...)``."""
        self.errors.append(ValidationIssue(
            field_id=self.field.id,
            message=self.message(key, **params),
            severity=Severity.error,
        ))
        return 0

    def warning(self, key: str, hint_key: Optional[str] = None, **params) -> None:
        self.warnings.append(ValidationWarning(
            field_id=self.field.id,
            message=self.message(key, **params),
            suggestion=self.message(hint_key, **params) if hint_key else None,
        ))

    def invalid_value(self, expected: str) -> int:
        return self.error("invalid_value", expected=expected)

    def outcome(self, score: int) -> FieldOutcome:
        is_valid = not self.errors
        if not is_valid:
            score = 0
        score = max(0, min(int(score), self.weights.max_field_score))

        return FieldOutcome(
            field_id=self.field.id,
            is_valid=is_valid,
            is_present=True,
            score=score,
            max_score=self.weights.max_field_score,
            errors=self.errors,
            warnings=self.warnings,
            suggestions=self.suggestions,
        )


# ============================================================
# TEXT / TEXTAREA
# ============================================================

def _text_quality_score(text: str, field_id: str, weights: ScoringWeights) -> int:
    """Extra content points for long-form answers."""
    score = 0

    if weights.contains_keywords(text, weights.generic_keyword_list):
        score += weights.quality_keyword_bonus

    if re.search(r"\d", text):
        score += weights.quality_digits_bonus

    for topic in weights.quality_topics:
        if topic in field_id and weights.contains_keywords(text, topic):
            score += weights.quality_topic_bonus

    return score


def _validate_text(check: FieldCheck, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        return check.invalid_value("string")
    if isinstance(value, str):
        text = value
    else:
        try:
            text = _format_number(value)
        except ValueError:
            # int longer than the interpreter's str conversion limit
            return check.invalid_value("string")

    weights = check.weights
    constraints = check.constraints
    if constraints is not None:
        if constraints.min_length is not None and len(text) < constraints.min_length:
            return check.error("min_length", min_length=constraints.min_length)

        if constraints.max_length is not None and len(text) > constraints.max_length:
            check.warning("max_length", "max_length_hint", max_length=constraints.max_length)

        if constraints.pattern and not re.search(constraints.pattern, text):
            check.warning("pattern", "pattern_hint")

    score = 0
    if len(text) >= weights.substantial_length:
        score += weights.substantial_bonus
    if len(text) >= weights.detailed_length:
        score += weights.detailed_bonus

    if weights.contains_keywords(text, weights.keyword_list_for(check.field.id)):
        score += weights.keyword_bonus

    if check.field.type == FieldType.textarea.value:
        score += _text_quality_score(text, check.field.id, weights)

    return score


# ============================================================
# NUMBER / CURRENCY
# ============================================================

def _coerce_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def _validate_number(check: FieldCheck, value: Any) -> int:
    number = _coerce_number(value)
    if number is None:
        return check.invalid_value("number")

    weights = check.weights
    constraints = check.constraints
    if constraints is not None:
        if constraints.min is not None and number < constraints.min:
            return check.error("min_value", min=_format_number(constraints.min))

        if constraints.max is not None and number > constraints.max:
            check.warning("max_value", "max_value_hint", max=_format_number(constraints.max))

    score = weights.number_base_score
    for rule in weights.magnitude_rules:
        if not any(fragment in check.field.id for fragment in rule.id_contains):
            continue
        if number > 0:
            score += rule.positive_bonus
            if number >= rule.threshold:
                score += rule.threshold_bonus

    return score


# ============================================================
# TABLE
# ============================================================

def _coerce_table(value: Any) -> Optional[TableValue]:
    if isinstance(value, TableValue):
        return value
    if isinstance(value, dict):
        try:
            return TableValue.model_validate(value)
        except ValidationError:
            return None
    return None


def _validate_table(check: FieldCheck, value: Any) -> int:
    table = _coerce_table(value)
    if table is None:
        return check.invalid_value("table")

    weights = check.weights
    required = check.field.required

    if not table.rows:
        return check.error("table_required") if required else 0

    has_data = any(
        not is_empty_cell(cell) for row in table.rows for cell in row.values()
    )
    if not has_data:
        return check.error("table_empty") if required else 0

    score = weights.table_base_score

    headers = table.headers or getattr(check.field, "columns", [])
    if headers:
        filled = sum(
            1 for row in table.rows for header in headers if not is_empty_cell(row.get(header))
        )
        total = len(table.rows) * len(headers)
    else:
        filled = sum(1 for row in table.rows for cell in row.values() if not is_empty_cell(cell))
        total = sum(len(row) for row in table.rows)

    fill = (filled * 100 / total) if total else 0

    if fill >= weights.table_high_fill:
        score += weights.table_high_fill_bonus
    elif fill >= weights.table_mid_fill:
        score += weights.table_mid_fill_bonus
    else:
        check.warning("table_low_fill", "table_low_fill_hint", percentage=f"{fill:.0f}")

    return score


# ============================================================
# SELECT / MULTISELECT
# ============================================================

def _validate_multiselect(check: FieldCheck, value: Any) -> int:
    if not isinstance(value, (list, tuple)):
        return check.invalid_value("list")

    selections = [item for item in value if not is_empty_cell(item)]
    if not selections:
        return check.error("multiselect_required") if check.field.required else 0

    options = getattr(check.field, "options", [])
    if options:
        for item in selections:
            if item not in options:
                check.warning("unknown_option", "unknown_option_hint", option=item)

    weights = check.weights
    score = weights.multiselect_base_score
    if len(selections) >= weights.multiselect_many:
        score += weights.multiselect_many_bonus
    if len(selections) >= weights.multiselect_comprehensive:
        score += weights.multiselect_comprehensive_bonus

    return score


def _validate_select(check: FieldCheck, value: Any) -> int:
    if isinstance(value, (list, tuple, dict)):
        return check.invalid_value("string")

    options = getattr(check.field, "options", [])
    if options and value not in options:
        check.warning("unknown_option", "unknown_option_hint", option=value)

    return check.weights.default_score


# ============================================================
# DATE / CHART
# ============================================================

def _parse_date(value: str) -> Optional[date]:
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def _validate_date(check: FieldCheck, value: Any) -> int:
    if isinstance(value, (date, datetime)):
        return check.weights.default_score
    if not isinstance(value, str):
        return check.invalid_value("date")

    if _parse_date(value.strip()) is None:
        check.warning("invalid_date", "invalid_date_hint", value=value)

    return check.weights.default_score


def _validate_chart(check: FieldCheck, value: Any) -> int:
    return check.weights.default_score


FIELD_VALIDATORS: Dict[FieldType, Callable[[FieldCheck, Any], int]] = {
    FieldType.text: _validate_text,
    FieldType.textarea: _validate_text,
    FieldType.number: _validate_number,
    FieldType.currency: _validate_number,
    FieldType.date: _validate_date,
    FieldType.select: _validate_select,
    FieldType.multiselect: _validate_multiselect,
    FieldType.table: _validate_table,
    FieldType.chart: _validate_chart,
}


# ============================================================
# ENTRY POINT
# ============================================================

def validate_field(
    field: BaseField,
    value: Any,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
    locale: Optional[str] = None,
) -> FieldOutcome:
    """
    Validate and score a single field value.

    Returns:
        FieldOutcome with score in [0, weights.max_field_score]
    """
    if is_empty_value(value):
        if field.required:
            return FieldOutcome(
                field_id=field.id,
                is_valid=False,
                is_present=False,
                score=0,
                max_score=weights.max_field_score,
                errors=[ValidationIssue(
                    field_id=field.id,
                    message=get_message("required", locale, label=field.display_label),
                    severity=Severity.error,
                )],
            )
        return FieldOutcome(
            field_id=field.id,
            is_valid=True,
            is_present=False,
            score=0,
            max_score=weights.max_field_score,
        )

    check = FieldCheck(field, weights, locale)
    validator = FIELD_VALIDATORS[FieldType(field.type)]
    return check.outcome(validator(check, value))
