from .errors import KnowledgeError, DocumentReadError
from .matching import StringMatcher, HeuristicMatcher, find_closest_match
from .models import (
    Approximation,
    Dish,
    Festival,
    MoodDishMapping,
    ParsedKnowledge,
    Preferences,
    RegionalVariation,
    UserSelection,
    VernacularTerm,
)
from .parser import KnowledgeDocumentParser, read_document
from .store import KnowledgeStore, get_knowledge_store, load_fallback_knowledge
from .validator import (
    is_valid_dish,
    is_valid_festival,
    is_valid_mood_mapping,
    is_valid_term,
    validate_completeness,
)

__all__ = [
    "KnowledgeError",
    "DocumentReadError",
    "StringMatcher",
    "HeuristicMatcher",
    "find_closest_match",
    "Approximation",
    "Dish",
    "Festival",
    "MoodDishMapping",
    "ParsedKnowledge",
    "Preferences",
    "RegionalVariation",
    "UserSelection",
    "VernacularTerm",
    "KnowledgeDocumentParser",
    "read_document",
    "KnowledgeStore",
    "get_knowledge_store",
    "load_fallback_knowledge",
    "is_valid_dish",
    "is_valid_festival",
    "is_valid_mood_mapping",
    "is_valid_term",
    "validate_completeness",
]
