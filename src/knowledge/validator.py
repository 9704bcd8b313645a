"""
Structural checks for knowledge records.

Every predicate accepts a mapping or a record model and answers with a bool;
none of them raise. ``validate_completeness`` reports problems as readable
strings instead.
"""
from typing import Any, Mapping, Optional

from pydantic import BaseModel

from .models import (
    BEST_TIMES,
    FORMALITY_LEVELS,
    HOME_OR_STREET,
    REQUIRED_CITIES,
    REQUIRED_MOODS,
    SPICE_LEVELS,
)


def _as_mapping(candidate: Any) -> Optional[Mapping]:
    if isinstance(candidate, BaseModel):
        return candidate.model_dump()
    if isinstance(candidate, Mapping):
        return candidate
    return None


def _non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def _has_required_strings(record: Mapping, fields: list[str]) -> bool:
    return all(_non_empty_string(record.get(field)) for field in fields)


def _valid_variations(variations: Any) -> bool:
    if not variations:
        return True
    if isinstance(variations, (str, bytes)) or not isinstance(variations, (list, tuple)):
        return False
    for variation in variations:
        pair = _as_mapping(variation)
        if pair is None or not pair.get("region") or not pair.get("variation"):
            return False
    return True


def is_valid_term(candidate: Any) -> bool:
    record = _as_mapping(candidate)
    if record is None:
        return False

    required = [
        "term", "literal_meaning", "emotional_intent",
        "social_appropriateness", "formality_level",
    ]
    if not _has_required_strings(record, required):
        return False
    if record["formality_level"] not in FORMALITY_LEVELS:
        return False

    return _valid_variations(record.get("regional_variations"))


def is_valid_dish(candidate: Any) -> bool:
    record = _as_mapping(candidate)
    if record is None:
        return False

    if not _has_required_strings(record, ["name", "city", "spice_level", "best_time", "description"]):
        return False
    if record["spice_level"] not in SPICE_LEVELS:
        return False

    return any(token in record["best_time"] for token in BEST_TIMES)


def is_valid_festival(candidate: Any) -> bool:
    record = _as_mapping(candidate)
    if record is None:
        return False

    required = ["name", "cultural_meaning", "food_symbolism", "emotional_tone"]
    if not _has_required_strings(record, required):
        return False

    foods = record.get("associated_foods")
    if not isinstance(foods, (list, tuple)) or len(foods) == 0:
        return False
    if not all(_non_empty_string(food) for food in foods):
        return False

    return _valid_variations(record.get("regional_variations"))


def is_valid_mood_mapping(candidate: Any) -> bool:
    record = _as_mapping(candidate)
    if record is None:
        return False

    if not _has_required_strings(record, ["mood", "recommended_food", "emotional_logic", "home_or_street"]):
        return False
    if record["home_or_street"] not in HOME_OR_STREET:
        return False

    return record["mood"] == record["mood"].lower()


def validate_completeness(collections: Any) -> list[str]:
    """
    Check that parsed collections cover what the guide needs.

    Parameters
    ----------
    collections : ParsedKnowledge or mapping
        Object exposing ``terms``, ``dishes``, ``festivals`` and ``mood_mappings``

    Returns
    -------
    list[str]
        Human-readable problems, empty when the data is complete
    """
    data = _as_mapping(collections) or {}
    terms = data.get("terms") or []
    dishes = data.get("dishes") or []
    festivals = data.get("festivals") or []
    mood_mappings = data.get("mood_mappings") or []

    errors = []
    if len(terms) == 0:
        errors.append("No slang data provided")
    if len(dishes) == 0:
        errors.append("No food data provided")
    if len(festivals) == 0:
        errors.append("No festival data provided")
    if len(mood_mappings) == 0:
        errors.append("No emotion-food mapping data provided")

    provided_moods = {
        str(_as_mapping(m).get("mood", "")).lower()
        for m in mood_mappings if _as_mapping(m) is not None
    }
    for mood in REQUIRED_MOODS:
        if mood not in provided_moods:
            errors.append(f"Missing required emotion mapping: {mood}")

    provided_cities = {
        str(_as_mapping(d).get("city", "")).lower()
        for d in dishes if _as_mapping(d) is not None
    }
    for city in REQUIRED_CITIES:
        if city not in provided_cities:
            errors.append(f"Missing food data for required city: {city}")

    return errors
