"""
Shared pydantic base for internal models.

Attributes are snake_case in Python and camelCase on the wire
(``max_score`` <-> ``maxScore``), which is the shape the form layer sends
and expects back.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_json_dict(self) -> dict:
        """Dump with camelCase keys, ready for ``json.dumps``."""
        return self.model_dump(mode="json", by_alias=True)
