"""Shared fixtures for the scoring engine tests."""

from pathlib import Path

import pytest

from planscore.models.template import Template
from planscore.utils.template_loader import load_submission, load_template

FIXTURES = Path(__file__).parent / "fixtures"

# 121 characters: business + problem keywords and digits
BUSINESS_TEXT = (
    "Our business solves a costly problem for 500 small retail customers "
    "who lose sales and time to manual inventory tracking."
)


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES


@pytest.fixture
def lean_template() -> Template:
    return load_template(FIXTURES / "lean_startup_template.json")


@pytest.fixture
def lean_submission() -> dict:
    return load_submission(FIXTURES / "lean_startup_submission.json")


@pytest.fixture
def two_field_template() -> Template:
    """One required textarea (minLength 50) and one required number (min 0)."""
    return Template.model_validate({
        "id": "mini",
        "name": "Mini plan",
        "sections": [
            {
                "id": "core",
                "title": "Core",
                "fields": [
                    {
                        "id": "problem_statement",
                        "type": "textarea",
                        "label": "Problem",
                        "required": True,
                        "validation": {"minLength": 50},
                    },
                    {
                        "id": "projected_revenue",
                        "type": "number",
                        "label": "Revenue",
                        "required": True,
                        "validation": {"min": 0},
                    },
                ],
            }
        ],
    })


@pytest.fixture
def business_text() -> str:
    return BUSINESS_TEXT
