"""
Message catalog for result entries and readiness summaries.

Messages are presentation text only. Spanish is the default locale;
unknown locales fall back to it.
"""

from typing import Dict, List, Optional

DEFAULT_LOCALE = "es"


MESSAGES: Dict[str, Dict[str, str]] = {
    "es": {
        "required": "{label} es requerido",
        "invalid_value": "{label} tiene un valor inválido (se esperaba {expected})",
        "min_length": "Mínimo {min_length} caracteres requeridos",
        "max_length": "Máximo {max_length} caracteres recomendados",
        "max_length_hint": "Considera acortar el texto",
        "pattern": "El formato de {label} no es el esperado",
        "pattern_hint": "Revisa el formato del texto",
        "min_value": "Valor mínimo: {min}",
        "max_value": "Valor máximo recomendado: {max}",
        "max_value_hint": "Verifica que el valor sea realista",
        "table_required": "Tabla requerida con al menos una fila",
        "table_empty": "La tabla debe contener datos",
        "table_low_fill": "Solo {percentage}% de las celdas están completas",
        "table_low_fill_hint": "Completa más celdas para mejorar la calidad",
        "multiselect_required": "Selecciona al menos una opción",
        "unknown_option": "Opción no reconocida: {option}",
        "unknown_option_hint": "Elige una de las opciones disponibles",
        "invalid_date": "Fecha no reconocida: {value}",
        "invalid_date_hint": "Usa el formato AAAA-MM-DD",
        # summary
        "status_excellent": "¡Excelente! Tu plan de negocios está muy completo y bien estructurado.",
        "status_good": "Buen trabajo. Tu plan de negocios está bien desarrollado con algunas áreas de mejora.",
        "status_fair": "Tu plan de negocios tiene una base sólida pero necesita más desarrollo.",
        "status_poor": "Tu plan de negocios necesita trabajo significativo para ser efectivo.",
        "fix_errors_one": "Corrige {count} error crítico",
        "fix_errors_other": "Corrige {count} errores críticos",
        "review_warnings_one": "Revisa {count} advertencia",
        "review_warnings_other": "Revisa {count} advertencias",
        "consider_suggestions_one": "Considera {count} sugerencia de mejora",
        "consider_suggestions_other": "Considera {count} sugerencias de mejora",
    },
    "en": {
        "required": "{label} is required",
        "invalid_value": "{label} has an invalid value (expected {expected})",
        "min_length": "At least {min_length} characters required",
        "max_length": "At most {max_length} characters recommended",
        "max_length_hint": "Consider shortening the text",
        "pattern": "{label} does not have the expected format",
        "pattern_hint": "Check the format of the text",
        "min_value": "Minimum value: {min}",
        "max_value": "Recommended maximum value: {max}",
        "max_value_hint": "Check that the value is realistic",
        "table_required": "Table requires at least one row",
        "table_empty": "The table must contain data",
        "table_low_fill": "Only {percentage}% of the cells are filled in",
        "table_low_fill_hint": "Fill in more cells to improve quality",
        "multiselect_required": "Select at least one option",
        "unknown_option": "Unrecognized option: {option}",
        "unknown_option_hint": "Choose one of the available options",
        "invalid_date": "Unrecognized date: {value}",
        "invalid_date_hint": "Use the YYYY-MM-DD format",
        # summary
        "status_excellent": "Excellent! Your business plan is very complete and well structured.",
        "status_good": "Good work. Your business plan is well developed with some areas to improve.",
        "status_fair": "Your business plan has a solid base but needs more development.",
        "status_poor": "Your business plan needs significant work to be effective.",
        "fix_errors_one": "Fix {count} critical error",
        "fix_errors_other": "Fix {count} critical errors",
        "review_warnings_one": "Review {count} warning",
        "review_warnings_other": "Review {count} warnings",
        "consider_suggestions_one": "Consider {count} improvement suggestion",
        "consider_suggestions_other": "Consider {count} improvement suggestions",
    },
}


NEXT_STEPS: Dict[str, Dict[str, List[str]]] = {
    "es": {
        "excellent": [
            "Revisa las sugerencias para optimizar aún más tu plan",
            "Considera agregar más detalles en las secciones con menor puntuación",
            "Prepara una presentación ejecutiva basada en tu plan",
        ],
        "good": [
            "Corrige los errores identificados",
            "Completa las secciones con menor puntuación",
            "Agrega más detalles en las áreas sugeridas",
        ],
        "fair": [
            "Prioriza corregir los errores críticos",
            "Completa todas las secciones requeridas",
            "Agrega más contenido detallado en cada sección",
            "Considera buscar asesoramiento adicional",
        ],
        "poor": [
            "Completa todas las secciones requeridas",
            "Corrige todos los errores identificados",
            "Agrega contenido sustancial en cada sección",
            "Considera usar una plantilla más simple",
            "Busca asesoramiento profesional",
        ],
    },
    "en": {
        "excellent": [
            "Review the suggestions to optimize your plan further",
            "Consider adding more detail to the lowest-scoring sections",
            "Prepare an executive presentation based on your plan",
        ],
        "good": [
            "Fix the identified errors",
            "Complete the lowest-scoring sections",
            "Add more detail in the suggested areas",
        ],
        "fair": [
            "Prioritize fixing the critical errors",
            "Complete all required sections",
            "Add more detailed content to each section",
            "Consider seeking additional advice",
        ],
        "poor": [
            "Complete all required sections",
            "Fix all identified errors",
            "Add substantial content to each section",
            "Consider using a simpler template",
            "Seek professional advice",
        ],
    },
}


def resolve_locale(locale: Optional[str] = None) -> str:
    if locale and locale.lower() in MESSAGES:
        return locale.lower()
    return DEFAULT_LOCALE


def get_message(key: str, locale: Optional[str] = None, **params) -> str:
    """Format a catalog message. ``count`` picks the _one/_other variant."""
    catalog = MESSAGES[resolve_locale(locale)]

    if "count" in params and key not in catalog:
        key = f"{key}_one" if params["count"] == 1 else f"{key}_other"

    return catalog[key].format(**params)


def get_next_steps(status: str, locale: Optional[str] = None) -> List[str]:
    """Fresh copy of the canned next steps for a readiness tier."""
    return list(NEXT_STEPS[resolve_locale(locale)][status])
