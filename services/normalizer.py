"""
Recipe normalization.

Converts heterogeneous provider payloads into the canonical Recipe record.
Two upstream shapes are supported:

- the detailed nutrition-annotated shape (``title``, ``extendedIngredients``,
  ``analyzedInstructions``, ``readyInMinutes``, ``servings``, ``nutrition``)
- the simpler ingredient-line shape (``label``, ``ingredientLines``,
  ``totalTime``, ``yield``, ``digest``)

Nothing in here raises on bad input: numeric fields fall back to defaults,
single malformed ingredients are stringified, and structurally invalid
payloads return None so a batch can drop them and continue.
"""

import logging
import time
from collections.abc import Mapping
from typing import Any, List, Optional

from pydantic import ValidationError

from models.recipe import Recipe

logger = logging.getLogger(__name__)

DEFAULT_READY_IN_MINUTES = 0
DEFAULT_SERVINGS = 1
DEFAULT_CALORIES = 0.0

CALORIES_LABEL = "Calories"

# Ingredient-class hints for synthesized instructions: (keyword, step)
INGREDIENT_HINTS = [
    ("chicken", "Cook chicken thoroughly until it reaches an internal temperature of 165°F (74°C)."),
    ("beef", "Brown the beef over medium-high heat and drain excess fat."),
    ("pasta", "Cook pasta in salted boiling water until al dente, reserving some cooking water."),
]
CLOSING_STEP = "Season to taste and serve."


def safe_to_int(value: Any, default: int) -> int:
    """Coerce int, float or numeric string to int; anything else yields ``default``."""
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return default
        return int(round(value))
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            return safe_to_int(float(text), default)
        except ValueError:
            return default
    return default


def safe_to_double(value: Any, default: float) -> float:
    """Coerce int, float or numeric string to float; anything else yields ``default``."""
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        result = float(value)
    elif isinstance(value, str):
        try:
            result = float(value.strip())
        except ValueError:
            return default
    else:
        return default
    if result != result or result in (float("inf"), float("-inf")):
        return default
    return result


def _as_list(value: Any) -> list:
    return value if isinstance(value, list) else []


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _ingredient_text(entry: Any, field: str) -> str:
    if isinstance(entry, Mapping) and entry.get(field) is not None:
        return _as_text(entry[field])
    return _as_text(entry)


def extract_ingredients(payload: Mapping) -> List[str]:
    """Ingredient lines from either upstream shape, in order."""
    if "extendedIngredients" in payload:
        lines = [_ingredient_text(e, "original") for e in _as_list(payload.get("extendedIngredients"))]
    elif "ingredientLines" in payload:
        lines = [_as_text(line) for line in _as_list(payload.get("ingredientLines"))]
    else:
        lines = [_ingredient_text(e, "text") for e in _as_list(payload.get("ingredients"))]
    return [line.strip() for line in lines if line.strip()]


def extract_instructions(payload: Mapping) -> List[str]:
    """Flatten ``analyzedInstructions[].steps[].step`` into one ordered list."""
    steps: List[str] = []
    for group in _as_list(payload.get("analyzedInstructions")):
        if not isinstance(group, Mapping):
            continue
        for step in _as_list(group.get("steps")):
            text = _ingredient_text(step, "step").strip()
            if text:
                steps.append(text)
    return steps


def synthesize_instructions(ingredients: List[str]) -> List[str]:
    """Generic steps for payloads that carry no instructions."""
    steps = ["Gather all ingredients and measure them out."]
    steps.append("Prepare your cooking equipment and workspace.")
    lowered = [line.lower() for line in ingredients]
    for keyword, hint in INGREDIENT_HINTS:
        if any(keyword in line for line in lowered):
            steps.append(hint)
    steps.append(CLOSING_STEP)
    return steps


def extract_calories(payload: Mapping) -> float:
    """Amount of the first nutrient labelled "Calories"; 0.0 when absent."""
    nutrition = payload.get("nutrition")
    candidates = _as_list(nutrition.get("nutrients")) if isinstance(nutrition, Mapping) else []
    candidates = candidates + _as_list(payload.get("digest"))
    for nutrient in candidates:
        if not isinstance(nutrient, Mapping):
            continue
        name = nutrient.get("name", nutrient.get("label"))
        if name == CALORIES_LABEL:
            amount = nutrient.get("amount", nutrient.get("total"))
            return max(safe_to_double(amount, DEFAULT_CALORIES), 0.0)
    return DEFAULT_CALORIES


def extract_id(payload: Mapping, fallback_id: Optional[str] = None) -> str:
    raw_id = payload.get("id")
    if raw_id is not None and _as_text(raw_id).strip():
        return _as_text(raw_id).strip()
    uri = payload.get("uri")
    if isinstance(uri, str) and "#" in uri:
        fragment = uri.rsplit("#", 1)[1]
        if fragment.startswith("recipe_"):
            fragment = fragment[len("recipe_"):]
        if fragment:
            return fragment
    if fallback_id:
        return fallback_id
    # No natural key upstream
    return str(time.time_ns())


def normalize(payload: Any, fallback_id: Optional[str] = None) -> Optional[Recipe]:
    """Convert one upstream payload into a Recipe, or None if it is unusable."""
    if not isinstance(payload, Mapping):
        logger.debug(f"Dropping non-mapping payload of type {type(payload).__name__}")
        return None

    title = _as_text(payload.get("title") or payload.get("label")).strip()
    if not title:
        logger.debug("Dropping payload without title or label")
        return None

    ingredients = extract_ingredients(payload)
    instructions = extract_instructions(payload)
    if not instructions:
        instructions = synthesize_instructions(ingredients)

    if "readyInMinutes" in payload:
        minutes = payload.get("readyInMinutes")
    else:
        minutes = payload.get("totalTime")
    servings = payload.get("servings") if "servings" in payload else payload.get("yield")

    try:
        return Recipe(
            id=extract_id(payload, fallback_id),
            title=title,
            image=_as_text(payload.get("image")),
            ingredients=ingredients,
            instructions=instructions,
            ready_in_minutes=max(safe_to_int(minutes, DEFAULT_READY_IN_MINUTES), 0),
            servings=max(safe_to_int(servings, DEFAULT_SERVINGS), 1),
            calories=extract_calories(payload),
            summary=_as_text(payload.get("summary")),
        )
    except ValidationError as e:
        logger.debug(f"Dropping payload '{title}': {e}")
        return None
