from .composer import CulturalResponse, NarrativeComposer
from .formatter import FormatValidation, OutputFormatter
from .mood_mapper import FoodRecommendation, MoodToDishMapper
from .regional import RegionalAdapter
from .selection import PhraseSelector, first_choice, get_phrase_selector, pick_distinct, random_choice
from .vocabulary import ALL_VOCABULARY, CATEGORY_VOCABULARY, vocabulary_for

__all__ = [
    "CulturalResponse",
    "NarrativeComposer",
    "FormatValidation",
    "OutputFormatter",
    "FoodRecommendation",
    "MoodToDishMapper",
    "RegionalAdapter",
    "PhraseSelector",
    "first_choice",
    "get_phrase_selector",
    "pick_distinct",
    "random_choice",
    "ALL_VOCABULARY",
    "CATEGORY_VOCABULARY",
    "vocabulary_for",
]
