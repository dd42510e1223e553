"""Unit tests for the field validator."""

import pytest
from pydantic import TypeAdapter

from planscore.models.outcome import Severity
from planscore.models.template import FieldType, TemplateField
from planscore.services.field_validator import (
    FIELD_VALIDATORS,
    is_empty_value,
    validate_field,
)
from planscore.services.scoring_weights import ScoringWeights

_field_adapter = TypeAdapter(TemplateField)


def make_field(field_type, field_id="field", required=False, **extra):
    return _field_adapter.validate_python(
        {"id": field_id, "type": field_type, "required": required, **extra}
    )


EMPTY_VALUES = [None, "", [], {"headers": ["a"], "rows": []}, {"headers": ["a"]}]


class TestPresence:
    """Required and optional empty values."""

    @pytest.mark.parametrize("field_type", [t.value for t in FieldType])
    @pytest.mark.parametrize("value", EMPTY_VALUES)
    def test_required_empty_is_single_error(self, field_type, value):
        field = make_field(field_type, field_id="req", required=True)
        outcome = validate_field(field, value)

        assert outcome.is_valid is False
        assert outcome.score == 0
        assert len(outcome.errors) == 1
        assert outcome.errors[0].field_id == "req"
        assert outcome.errors[0].severity == Severity.error

    @pytest.mark.parametrize("field_type", [t.value for t in FieldType])
    @pytest.mark.parametrize("value", EMPTY_VALUES)
    def test_optional_empty_is_valid_with_zero_score(self, field_type, value):
        field = make_field(field_type, field_id="opt")
        outcome = validate_field(field, value)

        assert outcome.is_valid is True
        assert outcome.is_present is False
        assert outcome.score == 0
        assert outcome.errors == []

    def test_required_message_uses_label(self):
        field = make_field("text", field_id="name", required=True, label="Company name")
        assert validate_field(field, None).errors[0].message == "Company name es requerido"
        assert validate_field(field, None, locale="en").errors[0].message == "Company name is required"

    def test_required_message_falls_back_to_id(self):
        field = make_field("text", field_id="name", required=True)
        assert validate_field(field, "", locale="en").errors[0].message == "name is required"

    def test_is_empty_value(self):
        assert is_empty_value(None)
        assert is_empty_value({})
        assert is_empty_value({"rows": []})
        assert is_empty_value({"headers": ["a"]})
        assert not is_empty_value({"label": "x"})
        assert not is_empty_value(0)
        assert not is_empty_value(" ")
        assert not is_empty_value({"rows": [{"a": ""}]})


class TestTextFields:

    def test_min_length_boundary(self):
        field = make_field("text", field_id="summary", validation={"minLength": 50})

        ok = validate_field(field, "a" * 50)
        assert ok.is_valid is True
        assert ok.errors == []

        short = validate_field(field, "a" * 49)
        assert short.is_valid is False
        assert short.score == 0
        assert len(short.errors) == 1

    def test_max_length_is_only_a_warning(self):
        field = make_field("text", field_id="summary", validation={"maxLength": 10})
        outcome = validate_field(field, "a" * 20)

        assert outcome.is_valid is True
        assert outcome.errors == []
        assert len(outcome.warnings) == 1
        assert outcome.warnings[0].suggestion

    def test_length_bonuses(self):
        field = make_field("text", field_id="headline")
        assert validate_field(field, "x" * 49).score == 0
        assert validate_field(field, "x" * 50).score == 2
        assert validate_field(field, "x" * 100).score == 4

    def test_generic_keyword_bonus(self):
        field = make_field("text", field_id="headline")
        assert validate_field(field, "x" * 100 + " market").score == 6

    def test_keyword_match_is_case_insensitive(self):
        field = make_field("text", field_id="headline")
        assert validate_field(field, "x" * 100 + " MARKET").score == 6

    def test_topic_keyword_list_chosen_by_field_id(self):
        # "market" fields use the market list, which has no "customer"
        field = make_field("text", field_id="market-notes")
        assert validate_field(field, "x" * 100 + " customer").score == 4
        assert validate_field(field, "x" * 100 + " demand").score == 6

    def test_textarea_quality_points(self):
        field = make_field("textarea", field_id="problem")
        # length (+4) and the "problem" topic list (+1) only
        assert validate_field(field, "problema " + "x" * 100).score == 5

    def test_score_is_capped(self):
        text = (
            "Our business solves a costly problem with a new solution for a growing "
            "market, reaching 1000 customers and steady revenue."
        )
        field = make_field("textarea", field_id="problem-solution-market-financial")
        assert len(text) >= 100
        assert validate_field(field, text).score == 10

    def test_pattern_mismatch_is_warning(self):
        field = make_field("text", field_id="code", validation={"pattern": r"^[A-Z]{3}$"})
        assert validate_field(field, "ABC").warnings == []

        outcome = validate_field(field, "abcd")
        assert outcome.is_valid is True
        assert len(outcome.warnings) == 1

    def test_numeric_value_accepted_as_text(self):
        field = make_field("text", field_id="year")
        assert validate_field(field, 2024).is_valid is True

    def test_huge_integer_accepted_as_text(self):
        outcome = validate_field(make_field("text", field_id="year"), 10 ** 400)
        assert outcome.is_valid is True
        assert outcome.score == 4

    def test_wrong_shape_is_error(self):
        field = make_field("text", field_id="headline")
        outcome = validate_field(field, {"not": "text"})
        assert outcome.is_valid is False
        assert outcome.score == 0


class TestNumberFields:

    def test_min_violation_is_error(self):
        field = make_field("number", field_id="units", validation={"min": 0})
        outcome = validate_field(field, -1)
        assert outcome.is_valid is False
        assert outcome.score == 0
        assert outcome.errors[0].message == "Valor mínimo: 0"

    def test_max_violation_is_warning(self):
        field = make_field("currency", field_id="price", validation={"max": 100})
        outcome = validate_field(field, 150)
        assert outcome.is_valid is True
        assert outcome.score == 5
        assert len(outcome.warnings) == 1

    def test_base_score_without_domain_bonus(self):
        assert validate_field(make_field("number", field_id="units"), 3).score == 5

    @pytest.mark.parametrize("field_id,value,expected", [
        ("monthly-revenue", 15000, 10),
        ("monthly-revenue", 10000, 10),
        ("monthly-revenue", 9999, 8),
        ("monthly-revenue", 0, 5),
        ("net_income", 500, 8),
        ("employees", 3, 8),
        ("team-size", 5, 10),
        ("seed-funding", 50000, 10),
        ("investment", 49999, 8),
    ])
    def test_domain_bonuses(self, field_id, value, expected):
        field = make_field("currency", field_id=field_id)
        assert validate_field(field, value).score == expected

    def test_numeric_string_is_parsed(self):
        assert validate_field(make_field("number", field_id="revenue"), "15000").score == 10

    @pytest.mark.parametrize("value", ["abc", True, [1], "nan"])
    def test_non_numeric_is_error(self, value):
        outcome = validate_field(make_field("number", field_id="units"), value)
        assert outcome.is_valid is False
        assert outcome.score == 0

    @pytest.mark.parametrize("value", [10 ** 400, -(10 ** 400), "1e999"])
    def test_out_of_float_range_is_error(self, value):
        outcome = validate_field(make_field("number", field_id="revenue"), value, locale="en")
        assert outcome.is_valid is False
        assert outcome.score == 0
        assert outcome.errors[0].message == "revenue has an invalid value (expected number)"


def table(headers, rows):
    return {"headers": headers, "rows": rows}


class TestTableFields:

    def test_all_cells_empty_required_is_error(self):
        field = make_field("table", field_id="t", required=True)
        outcome = validate_field(field, table(["a", "b"], [{"a": "", "b": None}]))
        assert outcome.is_valid is False
        assert len(outcome.errors) == 1

    def test_all_cells_empty_optional_is_valid(self):
        field = make_field("table", field_id="t")
        outcome = validate_field(field, table(["a"], [{"a": ""}]))
        assert outcome.is_valid is True
        assert outcome.is_present is True
        assert outcome.score == 0

    def test_fill_exactly_80_percent_gets_top_bonus(self):
        rows = [{"a": 1, "b": 2}] * 4 + [{"a": "", "b": ""}]
        outcome = validate_field(make_field("table", field_id="t"), table(["a", "b"], rows))
        assert outcome.score == 8
        assert outcome.warnings == []

    def test_fill_79_percent_gets_mid_bonus(self):
        rows = [{"a": "x"}] * 79 + [{"a": ""}] * 21
        outcome = validate_field(make_field("table", field_id="t"), table(["a"], rows))
        assert outcome.score == 7
        assert outcome.warnings == []

    def test_fill_exactly_50_percent_gets_mid_bonus(self):
        rows = [{"a": "x", "b": ""}]
        outcome = validate_field(make_field("table", field_id="t"), table(["a", "b"], rows))
        assert outcome.score == 7

    def test_low_fill_is_warning(self):
        rows = [{"a": "x", "b": "", "c": "", "d": ""}]
        outcome = validate_field(make_field("table", field_id="t"), table(["a", "b", "c", "d"], rows))
        assert outcome.is_valid is True
        assert outcome.score == 5
        assert outcome.warnings[0].message == "Solo 25% de las celdas están completas"

    def test_missing_cells_count_as_empty(self):
        rows = [{"a": "x"}]
        outcome = validate_field(make_field("table", field_id="t"), table(["a", "b"], rows))
        assert outcome.score == 7

    def test_field_columns_used_when_headers_missing(self):
        field = make_field("table", field_id="t", columns=["a", "b", "c", "d"])
        outcome = validate_field(field, {"rows": [{"a": "x"}]})
        assert len(outcome.warnings) == 1

    def test_non_table_value_is_error(self):
        outcome = validate_field(make_field("table", field_id="t"), "rows")
        assert outcome.is_valid is False


class TestSelectFields:

    @pytest.mark.parametrize("selected,expected", [
        (["a"], 3),
        (["a", "b"], 3),
        (["a", "b", "c"], 5),
        (["a", "b", "c", "d"], 5),
        (["a", "b", "c", "d", "e"], 7),
    ])
    def test_multiselect_tiers(self, selected, expected):
        assert validate_field(make_field("multiselect", field_id="m"), selected).score == expected

    def test_multiselect_blank_items_required_is_error(self):
        field = make_field("multiselect", field_id="m", required=True)
        outcome = validate_field(field, ["", None])
        assert outcome.is_valid is False
        assert outcome.errors[0].message == "Selecciona al menos una opción"

    def test_multiselect_unknown_option_is_warning(self):
        field = make_field("multiselect", field_id="m", options=["web", "retail"])
        outcome = validate_field(field, ["web", "tv"])
        assert outcome.is_valid is True
        assert len(outcome.warnings) == 1

    def test_multiselect_requires_list(self):
        assert validate_field(make_field("multiselect", field_id="m"), "web").is_valid is False

    def test_select_default_score(self):
        field = make_field("select", field_id="s", options=["idea", "mvp"])
        outcome = validate_field(field, "mvp")
        assert outcome.score == 5
        assert outcome.warnings == []

    def test_select_unknown_option_is_warning(self):
        field = make_field("select", field_id="s", options=["idea", "mvp"])
        outcome = validate_field(field, "scale")
        assert outcome.score == 5
        assert len(outcome.warnings) == 1


class TestDefaultScoredFields:

    def test_date(self):
        field = make_field("date", field_id="d")
        assert validate_field(field, "2026-01-31").warnings == []
        assert validate_field(field, "2026-01-31T10:00:00Z").warnings == []

        outcome = validate_field(field, "next spring")
        assert outcome.score == 5
        assert outcome.is_valid is True
        assert len(outcome.warnings) == 1

    def test_chart(self):
        chart = {"labels": ["Q1"], "datasets": [{"label": "sales", "data": [1]}]}
        assert validate_field(make_field("chart", field_id="c"), chart).score == 5


class TestDispatch:

    def test_every_field_type_has_a_validator(self):
        assert set(FIELD_VALIDATORS) == set(FieldType)

    @pytest.mark.parametrize("value", [
        "x" * 1000, -5, 10 ** 9, 10 ** 400, -(10 ** 400), ["a"] * 20,
        table(["a"], [{"a": 1}] * 10), "2026-01-01",
    ])
    @pytest.mark.parametrize("field_type", [t.value for t in FieldType])
    def test_score_bounds(self, field_type, value):
        outcome = validate_field(make_field(field_type, field_id="revenue-team-funding"), value)
        assert 0 <= outcome.score <= outcome.max_score == 10

    def test_custom_weights(self):
        weights = ScoringWeights(number_base_score=0)
        field = make_field("currency", field_id="revenue")
        assert validate_field(field, 15000, weights=weights).score == 5
