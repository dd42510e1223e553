"""
Exception types.

Only broken caller/template contracts raise. Problems with the user's
answers are never exceptions: they come back as entries in the
ValidationResult.
"""


class PlanScoreError(Exception):
    """Base class for all errors raised by planscore."""

    code = "PLANSCORE_ERROR"
    http_status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TemplateContractError(PlanScoreError, ValueError):
    """The template or submission breaks the data contract."""

    code = "TEMPLATE_CONTRACT_ERROR"
    http_status = 400


class DuplicateFieldError(TemplateContractError):
    code = "DUPLICATE_FIELD_ID"

    def __init__(self, field_id: str, sections):
        self.field_id = field_id
        self.sections = list(sections)
        super().__init__(
            f"Field id '{field_id}' is declared more than once "
            f"(sections: {', '.join(self.sections)})"
        )


class UnknownFieldError(TemplateContractError):
    code = "UNKNOWN_FIELD_ID"

    def __init__(self, field_ids):
        self.field_ids = sorted(field_ids)
        super().__init__(
            "Submission references fields not present in the template: "
            + ", ".join(self.field_ids)
        )


class ScoringWeightsError(PlanScoreError):
    """The scoring weights file could not be read or parsed."""

    code = "SCORING_WEIGHTS_ERROR"
    http_status = 500
