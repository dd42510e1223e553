"""
Template Model - the schema of a business plan document.

A Template is an ordered list of Sections, each holding ordered Fields.
Fields are a tagged union on ``type``: every field type has its own model,
so a template with an unknown type string is rejected when it is parsed.

The field ``id`` is the join key into the submission, so ids must be
unique across the WHOLE template, not just within a section.
"""

import re
from collections import defaultdict
from enum import Enum
from typing import Annotated, Any, Dict, Iterator, List, Literal, Optional, Union

from pydantic import Field, field_validator, model_validator

from planscore.core.exceptions import DuplicateFieldError
from planscore.models.base import CamelModel


# ============================================================
# ENUMS
# ============================================================

class FieldType(str, Enum):
    text = "text"
    textarea = "textarea"
    number = "number"
    currency = "currency"
    date = "date"
    select = "select"
    multiselect = "multiselect"
    table = "table"
    chart = "chart"


class Difficulty(str, Enum):
    beginner = "beginner"
    intermediate = "intermediate"
    advanced = "advanced"


# ============================================================
# FIELDS
# ============================================================

class FieldConstraints(CamelModel):
    """Optional hard/soft limits attached to a field."""

    min: Optional[float] = None
    max: Optional[float] = None
    min_length: Optional[int] = Field(None, ge=0)
    max_length: Optional[int] = Field(None, ge=0)
    pattern: Optional[str] = None

    @field_validator("pattern")
    @classmethod
    def pattern_must_compile(cls, v: Optional[str]) -> Optional[str]:
        if v is not None:
            try:
                re.compile(v)
            except re.error as e:
                raise ValueError(f"invalid regular expression: {e}")
        return v


class BaseField(CamelModel):
    id: str = Field(..., min_length=1)
    label: Optional[str] = None
    description: Optional[str] = None
    placeholder: Optional[str] = None
    required: bool = False
    validation: Optional[FieldConstraints] = None

    @property
    def display_label(self) -> str:
        return self.label or self.id


class TextField(BaseField):
    type: Literal["text"] = "text"


class TextareaField(BaseField):
    type: Literal["textarea"] = "textarea"


class NumberField(BaseField):
    type: Literal["number"] = "number"


class CurrencyField(BaseField):
    type: Literal["currency"] = "currency"
    currency: Optional[str] = None


class DateField(BaseField):
    type: Literal["date"] = "date"


class SelectField(BaseField):
    type: Literal["select"] = "select"
    options: List[str] = []


class MultiselectField(BaseField):
    type: Literal["multiselect"] = "multiselect"
    options: List[str] = []


class TableField(BaseField):
    type: Literal["table"] = "table"
    columns: List[str] = []


class ChartField(BaseField):
    type: Literal["chart"] = "chart"


TemplateField = Annotated[
    Union[
        TextField,
        TextareaField,
        NumberField,
        CurrencyField,
        DateField,
        SelectField,
        MultiselectField,
        TableField,
        ChartField,
    ],
    Field(discriminator="type"),
]


# ============================================================
# VALUES
# ============================================================

class TableValue(CamelModel):
    """Submission value of a ``table`` field."""

    headers: List[str] = []
    rows: List[Dict[str, Any]] = []


# ============================================================
# SECTIONS & TEMPLATE
# ============================================================

class Section(CamelModel):
    id: str = Field(..., min_length=1)
    title: str
    description: Optional[str] = None
    required: bool = False
    order: Optional[int] = None
    fields: List[TemplateField] = []
    tips: List[str] = []


class Template(CamelModel):
    id: str = Field(..., min_length=1)
    name: str
    description: Optional[str] = None
    category: Optional[str] = None
    difficulty: Optional[Difficulty] = None
    estimated_time: Optional[int] = Field(None, ge=0)
    sections: List[Section] = []
    tips: List[str] = []

    @model_validator(mode="after")
    def field_ids_must_be_unique(self) -> "Template":
        self.field_index()
        return self

    def iter_fields(self) -> Iterator[BaseField]:
        for section in self.sections:
            yield from section.fields

    def field_index(self) -> Dict[str, BaseField]:
        """
        Map field id -> field.

        Raises:
            DuplicateFieldError if an id appears in more than one place
        """
        owners = defaultdict(list)
        index = {}
        for section in self.sections:
            for field in section.fields:
                owners[field.id].append(section.id)
                index[field.id] = field

        for field_id, section_ids in owners.items():
            if len(section_ids) > 1:
                raise DuplicateFieldError(field_id, section_ids)

        return index

    def get_field(self, field_id: str) -> Optional[BaseField]:
        return self.field_index().get(field_id)

    @property
    def field_count(self) -> int:
        return sum(len(section.fields) for section in self.sections)
