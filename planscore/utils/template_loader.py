"""
Template Loader Utility - read templates and submissions from JSON files.

Supported formats:
- JSON (.json), camelCase or snake_case keys

Max file size: 1MB
"""

import json
from pathlib import Path
from typing import Any, Dict, Union

from pydantic import ValidationError

from planscore.core.exceptions import TemplateContractError
from planscore.models.template import Template

MAX_FILE_SIZE_MB = 1
MAX_FILE_SIZE_BYTES = MAX_FILE_SIZE_MB * 1024 * 1024
ALLOWED_EXTENSIONS = {'.json'}


def _read_json(path: Union[str, Path]) -> Any:
    """
    Read and decode a JSON file.

    Raises:
        FileNotFoundError if the file does not exist
        TemplateContractError on wrong extension, size or invalid JSON
    """
    path = Path(path)

    if path.suffix.lower() not in ALLOWED_EXTENSIONS:
        raise TemplateContractError(f"Unsupported file type '{path.suffix}'. Allowed: JSON")

    if path.stat().st_size > MAX_FILE_SIZE_BYTES:
        raise TemplateContractError(f"File too large. Maximum size: {MAX_FILE_SIZE_MB}MB")

    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise TemplateContractError(f"{path.name} is not valid JSON: {e}") from e


def load_template(path: Union[str, Path]) -> Template:
    """Parse a template file. Duplicate field ids are rejected here."""
    data = _read_json(path)
    try:
        return Template.model_validate(data)
    except ValidationError as e:
        raise TemplateContractError(f"Invalid template {Path(path).name}: {e}") from e


def load_submission(path: Union[str, Path]) -> Dict[str, Any]:
    """Parse a submission file: a JSON object of field id -> value."""
    data = _read_json(path)
    if not isinstance(data, dict):
        raise TemplateContractError("A submission must be a JSON object of field id -> value")
    return data
