"""
Scoring Weights - every tunable heuristic of the engine, as data.

PURPOSE:
The keyword lists and magnitude thresholds are a proxy for "substantive
content". They are a default policy, not business rules, so they live here
instead of inside the validator's control flow.

HOW TO OVERRIDE:
- Pass ``weights=ScoringWeights(...)`` to any engine entry point, or
- Point the ``SCORING_WEIGHTS_FILE`` setting at a JSON file. Keys left out of
  the file keep their defaults.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from planscore.core.exceptions import ScoringWeightsError

logger = logging.getLogger(__name__)


# ============================================================
# DEFAULT KEYWORDS (Spanish + English, matched lowercase)
# ============================================================

BUSINESS_KEYWORDS = [
    "negocio", "empresa", "startup", "mercado", "cliente", "producto", "servicio",
    "ingresos", "ventas", "ganancias", "competencia", "estrategia", "objetivo",
    "business", "company", "market", "customer", "client", "product", "service",
    "revenue", "sales", "profit", "competition", "strategy", "goal",
]

PROBLEM_KEYWORDS = [
    "problema", "dificultad", "desafío", "necesidad", "dolor", "frustración",
    "ineficiencia", "costo", "tiempo", "calidad", "acceso", "disponibilidad",
    "problem", "difficulty", "challenge", "need", "pain", "frustration",
    "inefficien", "cost", "time", "quality", "access", "availability",
]

SOLUTION_KEYWORDS = [
    "solución", "innovación", "tecnología", "plataforma", "app", "software",
    "proceso", "método", "herramienta", "servicio", "producto", "mejora",
    "solution", "innovation", "technology", "platform", "process", "method",
    "tool", "service", "product", "improve",
]

MARKET_KEYWORDS = [
    "mercado", "industria", "sector", "competencia", "competidor", "tendencia",
    "crecimiento", "oportunidad", "demanda", "oferta", "precio", "valor",
    "market", "industry", "competition", "competitor", "trend", "growth",
    "opportunity", "demand", "supply", "price", "value",
]

FINANCIAL_KEYWORDS = [
    "ingresos", "gastos", "ganancias", "pérdidas", "inversión", "financiamiento",
    "presupuesto", "flujo", "caja", "rentabilidad", "margen", "retorno",
    "revenue", "income", "expense", "profit", "loss", "investment", "funding",
    "budget", "cash flow", "profitability", "margin", "return",
]


# ============================================================
# RULE MODELS
# ============================================================

class KeywordRule(BaseModel):
    """Field ids containing any of ``id_contains`` use ``keyword_list``."""

    model_config = ConfigDict(frozen=True)

    id_contains: List[str]
    keyword_list: str


class MagnitudeRule(BaseModel):
    """
    Domain bonus for numeric fields whose id contains any of ``id_contains``.

    value > 0          -> +positive_bonus
    value >= threshold -> +threshold_bonus (on top)
    """

    model_config = ConfigDict(frozen=True)

    id_contains: List[str]
    positive_bonus: int = 3
    threshold: float
    threshold_bonus: int = 2


def _default_keyword_lists() -> Dict[str, List[str]]:
    return {
        "business": list(BUSINESS_KEYWORDS),
        "problem": list(PROBLEM_KEYWORDS),
        "solution": list(SOLUTION_KEYWORDS),
        "market": list(MARKET_KEYWORDS),
        "financial": list(FINANCIAL_KEYWORDS),
    }


def _default_keyword_rules() -> List[KeywordRule]:
    return [
        KeywordRule(id_contains=["problem", "solution"], keyword_list="business"),
        KeywordRule(id_contains=["market", "competition"], keyword_list="market"),
        KeywordRule(id_contains=["financial", "revenue"], keyword_list="financial"),
    ]


def _default_magnitude_rules() -> List[MagnitudeRule]:
    return [
        MagnitudeRule(id_contains=["revenue", "income"], threshold=10000),
        MagnitudeRule(id_contains=["employees", "team"], threshold=5),
        MagnitudeRule(id_contains=["funding", "investment"], threshold=50000),
    ]


# ============================================================
# SCORING WEIGHTS
# ============================================================

class ScoringWeights(BaseModel):
    model_config = ConfigDict(frozen=True)

    max_field_score: int = Field(10, gt=0)

    # Score for select/date/chart: present and accepted
    default_score: int = 5

    # text / textarea
    substantial_length: int = 50
    substantial_bonus: int = 2
    detailed_length: int = 100
    detailed_bonus: int = 2
    keyword_bonus: int = 2
    keyword_lists: Dict[str, List[str]] = Field(default_factory=_default_keyword_lists)
    keyword_rules: List[KeywordRule] = Field(default_factory=_default_keyword_rules)
    generic_keyword_list: str = "business"

    # textarea content quality
    quality_keyword_bonus: int = 1
    quality_digits_bonus: int = 1
    quality_topic_bonus: int = 1
    quality_topics: List[str] = ["problem", "solution", "market", "financial"]

    # number / currency
    number_base_score: int = 5
    magnitude_rules: List[MagnitudeRule] = Field(default_factory=_default_magnitude_rules)

    # table
    table_base_score: int = 5
    table_high_fill: float = 80
    table_high_fill_bonus: int = 3
    table_mid_fill: float = 50
    table_mid_fill_bonus: int = 2

    # multiselect
    multiselect_base_score: int = 3
    multiselect_many: int = 3
    multiselect_many_bonus: int = 2
    multiselect_comprehensive: int = 5
    multiselect_comprehensive_bonus: int = 2

    @model_validator(mode="after")
    def keyword_lists_must_exist(self) -> "ScoringWeights":
        referenced = {rule.keyword_list for rule in self.keyword_rules}
        referenced.add(self.generic_keyword_list)
        referenced.update(self.quality_topics)
        missing = sorted(referenced - set(self.keyword_lists))
        if missing:
            raise ValueError(f"unknown keyword lists: {', '.join(missing)}")
        return self

    def keywords(self, name: str) -> List[str]:
        return self.keyword_lists.get(name, [])

    def contains_keywords(self, text: str, list_name: str) -> bool:
        """Case-insensitive substring match against a named keyword list."""
        lowered = text.lower()
        return any(keyword.lower() in lowered for keyword in self.keywords(list_name))

    def keyword_list_for(self, field_id: str) -> str:
        """First rule whose id fragment matches wins; otherwise the generic list."""
        for rule in self.keyword_rules:
            if any(fragment in field_id for fragment in rule.id_contains):
                return rule.keyword_list
        return self.generic_keyword_list


DEFAULT_WEIGHTS = ScoringWeights()


# ============================================================
# LOADING
# ============================================================

def load_scoring_weights(path: Optional[str]) -> ScoringWeights:
    """
    Load weights from a JSON file, falling back to DEFAULT_WEIGHTS when
    no path is configured.

    Raises:
        ScoringWeightsError if the file is missing or invalid
    """
    if not path:
        return DEFAULT_WEIGHTS

    return _load_from_file(str(Path(path).resolve()))


@lru_cache()
def _load_from_file(path: str) -> ScoringWeights:
    try:
        raw = Path(path).read_text(encoding="utf-8")
        data = json.loads(raw)
        weights = ScoringWeights.model_validate(data)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        raise ScoringWeightsError(f"Could not load scoring weights from {path}: {e}") from e

    logger.info("Loaded scoring weights from %s", path)
    return weights
