import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

import httpx

from configs import get_settings
from .errors import KnowledgeError
from .matching import StringMatcher, HeuristicMatcher
from .models import (
    SPICE_RANK,
    Approximation,
    Dish,
    Festival,
    MoodDishMapping,
    ParsedKnowledge,
    Preferences,
    VernacularTerm,
)
from .parser import KnowledgeDocumentParser
from .validator import validate_completeness
from .data.fallback_knowledge import FALLBACK_KNOWLEDGE

logger = logging.getLogger(__name__)

MEAT_KEYWORDS = ("chicken",)

TIME_OF_DAY_TOKENS = {
    "morning": ["morning"],
    "afternoon": ["lunch"],
    "evening": ["evening"],
    "night": ["evening"],
}


def load_fallback_knowledge() -> ParsedKnowledge:
    """Build the fixed fallback record set."""
    return ParsedKnowledge(
        terms=[VernacularTerm(**t) for t in FALLBACK_KNOWLEDGE["terms"]],
        dishes=[Dish(**d) for d in FALLBACK_KNOWLEDGE["dishes"]],
        festivals=[Festival(**f) for f in FALLBACK_KNOWLEDGE["festivals"]],
        mood_mappings=[MoodDishMapping(**m) for m in FALLBACK_KNOWLEDGE["mood_mappings"]],
    )


class KnowledgeStore:
    """
    Read-only index of cultural knowledge records.

    On construction the store parses the knowledge document once. If the
    document cannot be read, or the parsed data misses a required mood or
    city, the parsed data is discarded and the fixed fallback set is loaded
    instead. Nothing is mutated after that.
    """

    SOURCE_DOCUMENT = "document"
    SOURCE_FALLBACK = "fallback"

    def __init__(
        self,
        source: Union[str, Path, None] = None,
        text: Optional[str] = None,
        parser: Optional[KnowledgeDocumentParser] = None,
        matcher: Optional[StringMatcher] = None,
        client: Optional[httpx.Client] = None,
    ):
        """
        Initialize the store.

        Parameters
        ----------
        source : str or Path, optional
            Document path or URL, the configured knowledge source by default
        text : str, optional
            Document text to parse directly instead of reading a source
        parser : KnowledgeDocumentParser, optional
            Parser instance
        matcher : StringMatcher, optional
            Closest-key heuristic for fallback messages
        client : httpx.Client, optional
            HTTP client for URL sources
        """
        settings = get_settings()
        self._source = str(source or settings.knowledge_source) if text is None else "<text>"
        self._parser = parser or KnowledgeDocumentParser()
        self._matcher = matcher or HeuristicMatcher()

        self._terms: dict[str, VernacularTerm] = {}
        self._dishes: dict[str, list[Dish]] = {}
        self._festivals: dict[str, Festival] = {}
        self._moods: dict[str, MoodDishMapping] = {}
        self._city_names: dict[str, str] = {}
        self.load_errors: list[str] = []
        self.loaded_from = self.SOURCE_FALLBACK

        self._load(text, settings.knowledge_fetch_timeout, client)

    def _load(self, text: Optional[str], timeout: float, client: Optional[httpx.Client]):
        """Parse the document, falling back to the fixed data set."""
        try:
            if text is not None:
                parsed = self._parser.parse(text)
            else:
                parsed = self._parser.parse_source(self._source, timeout=timeout, client=client)
        except (KnowledgeError, ValueError) as e:
            logger.warning(f"Failed to parse knowledge document, using fallback data: {e}")
            self.load_errors = [str(e)]
            self._index(load_fallback_knowledge())
            return

        errors = validate_completeness(parsed)
        if errors:
            logger.warning(f"Knowledge document incomplete, using fallback data: {errors}")
            self.load_errors = errors
            self._index(load_fallback_knowledge())
            return

        self._index(parsed)
        self.loaded_from = self.SOURCE_DOCUMENT
        logger.info(f"Loaded knowledge from {self._source}: {parsed.counts()}")

    def _index(self, knowledge: ParsedKnowledge):
        for term in knowledge.terms:
            self._terms[term.term.lower()] = term

        for dish in knowledge.dishes:
            city_key = dish.city.lower()
            self._dishes.setdefault(city_key, []).append(dish)
            self._city_names.setdefault(city_key, dish.city)

        for festival in knowledge.festivals:
            self._festivals[festival.name.lower()] = festival

        for mapping in knowledge.mood_mappings:
            self._moods[mapping.mood.lower()] = mapping

    def lookup_term(self, term: str) -> Optional[VernacularTerm]:
        return self._terms.get(term.lower())

    def lookup_dishes(self, city: str, preferences: Optional[Preferences] = None) -> list[Dish]:
        """
        Dishes of a city that fit the given preferences.

        Parameters
        ----------
        city : str
            City name, case-insensitive
        preferences : Preferences, optional
            Dietary, spice ceiling and time-of-day filters

        Returns
        -------
        list[Dish]
            Matching dishes in source order, empty for an unknown city
        """
        preferences = preferences or Preferences()
        return [
            dish for dish in self._dishes.get(city.lower(), [])
            if self._matches(dish, preferences)
        ]

    def _matches(self, dish: Dish, preferences: Preferences) -> bool:
        name = dish.name.lower()
        has_meat = any(kw in name for kw in MEAT_KEYWORDS)

        if preferences.dietary == "veg" and has_meat:
            return False
        if preferences.dietary == "non-veg" and not has_meat:
            return False

        if preferences.spice_level:
            if SPICE_RANK[dish.spice_level] > SPICE_RANK[preferences.spice_level]:
                return False

        if preferences.time_of_day:
            best_time = dish.best_time.lower()
            if "any" not in best_time:
                tokens = TIME_OF_DAY_TOKENS.get(preferences.time_of_day.lower(), [])
                if not any(token in best_time for token in tokens):
                    return False

        return True

    def lookup_festival(self, name: str) -> Optional[Festival]:
        return self._festivals.get(name.lower())

    def lookup_mood(self, mood: str) -> Optional[MoodDishMapping]:
        return self._moods.get(mood.lower())

    def lookup_term_with_fallback(self, term: str) -> Union[VernacularTerm, Approximation]:
        record = self.lookup_term(term)
        if record is not None:
            return record

        closest = self._matcher.closest(term, [t.term for t in self._terms.values()])
        content = f'I don\'t have specific information about "{term}" in my cultural knowledge, '
        if closest:
            content += f'but it sounds similar to "{closest}" which is authentic Andhra slang. '
        content += "These expressions usually carry deep emotional meaning in our culture. "
        content += 'Try asking about common terms like "Arey Baboi" or "Lite Teesko" for authentic examples!'

        return Approximation(
            content=content,
            original_query=term,
            fallback_reason="Slang term not found in cultural database",
        )

    def lookup_dishes_with_fallback(
        self,
        city: str,
        preferences: Optional[Preferences] = None
    ) -> Union[list[Dish], Approximation]:
        preferences = preferences or Preferences()
        dishes = self.lookup_dishes(city, preferences)
        if dishes:
            return dishes

        spice_level = preferences.spice_level or "medium"
        dietary = preferences.dietary or "any"

        if city.lower() in self._dishes:
            content = (
                f"I couldn't find a {city} dish for {dietary} preferences with {spice_level} "
                f"spice level right now. Try a different spice level or time of day, "
                f"{city} always has something delicious waiting!"
            )
            return Approximation(
                content=content,
                original_query=city,
                fallback_reason="No dish matched the requested preferences",
            )

        closest = self._matcher.closest(city, list(self._city_names.values()))
        content = f"I don't have specific food recommendations for {city} "
        if closest:
            content += f"but {closest} has similar Andhra cuisine! "
        content += f"For {dietary} preferences with {spice_level} spice level, "
        content += "Andhra cuisine always has something delicious. "
        content += "Try exploring popular cities like Visakhapatnam, Vijayawada, or Guntur for authentic recommendations!"

        return Approximation(
            content=content,
            original_query=city,
            fallback_reason="City not found in food database",
        )

    def lookup_festival_with_fallback(self, name: str) -> Union[Festival, Approximation]:
        record = self.lookup_festival(name)
        if record is not None:
            return record

        closest = self._matcher.closest(name, [f.name for f in self._festivals.values()])
        content = f'I don\'t have detailed information about "{name}", '
        if closest:
            content += f'but it might be similar to "{closest}" which is celebrated in Andhra. '
        content += "Andhra festivals are always rich in cultural meaning and food traditions! "
        content += "Each celebration brings families together with special preparations. "
        content += "Try asking about Sankranti, Ugadi, or Vinayaka Chavithi for detailed examples!"

        return Approximation(
            content=content,
            original_query=name,
            fallback_reason="Festival not found in cultural database",
        )

    def lookup_mood_with_fallback(self, mood: str) -> Union[MoodDishMapping, Approximation]:
        record = self.lookup_mood(mood)
        if record is not None:
            return record

        closest = self._matcher.closest(mood, list(self._moods.keys()))
        content = f'I don\'t have a specific food recommendation for "{mood}", '
        if closest:
            content += f'but it\'s similar to feeling "{closest}". '
        content += "In Andhra culture, we believe food can heal emotions. "
        content += "Generally, comfort foods like Pappu with Avakaya work for sadness, "
        content += "while cooling foods like Curd Rice help with anger. "
        content += "Try asking about common emotions like sad, happy, angry, or tired!"

        return Approximation(
            content=content,
            original_query=mood,
            fallback_reason="Emotion not found in mapping database",
        )

    def all_terms(self) -> list[str]:
        return list(self._terms.keys())

    def all_cities(self) -> list[str]:
        return list(self._dishes.keys())

    def all_festivals(self) -> list[str]:
        return list(self._festivals.keys())

    def all_moods(self) -> list[str]:
        return list(self._moods.keys())

    def get_stats(self) -> dict:
        """Get store statistics."""
        return {
            "source": self._source,
            "loaded_from": self.loaded_from,
            "terms": len(self._terms),
            "cities": len(self._dishes),
            "dishes": sum(len(d) for d in self._dishes.values()),
            "festivals": len(self._festivals),
            "moods": len(self._moods),
        }


@lru_cache
def get_knowledge_store() -> KnowledgeStore:
    """Get the shared knowledge store, loaded from the configured source."""
    return KnowledgeStore()
