import logging
import uuid
from datetime import datetime
from functools import lru_cache
from typing import Callable, Optional

from langsmith import traceable

from configs import get_settings
from src.api.schemas import PreferencesSchema
from src.api.services.menu import MenuService
from src.generation import (
    CulturalResponse,
    MoodToDishMapper,
    NarrativeComposer,
    OutputFormatter,
    RegionalAdapter,
    get_phrase_selector,
    pick_distinct,
    vocabulary_for,
)
from src.generation.selection import PhraseSelector
from src.knowledge import Approximation, KnowledgeStore, UserSelection, get_knowledge_store

logger = logging.getLogger(__name__)

CITY_ALIASES = {
    "visakhapatnam": "Visakhapatnam",
    "vijayawada": "Vijayawada",
    "guntur": "Guntur",
    "tirupati": "Tirupati",
    "vizag": "Visakhapatnam",
}
DEFAULT_CITY = "Visakhapatnam"


def infer_time_of_day(now: datetime) -> str:
    hour = now.hour
    if 6 <= hour < 10:
        return "morning"
    if 10 <= hour < 16:
        return "afternoon"
    if 16 <= hour < 20:
        return "evening"
    return "night"


def extract_city(selection: str) -> str:
    """Known city named in the selection, Visakhapatnam otherwise."""
    lowered = selection.lower()
    for alias, city in CITY_ALIASES.items():
        if alias in lowered:
            return city
    return DEFAULT_CITY


class CulturalGuide:
    """
    Answer one dropdown selection with formatted cultural guidance.

    The guide owns the knowledge store and the generation pipeline. It is
    stateless between requests, so one instance is shared by the API.
    """

    QUALITY_SUGGESTIONS = {
        OutputFormatter.ISSUE_NO_VOCABULARY: "Add Telugu words like babu, amma, arey, or pappu for authenticity",
        OutputFormatter.ISSUE_TECHNICAL: "Remove technical terms and focus on cultural content",
        OutputFormatter.ISSUE_NO_WARMTH: 'Add warm expressions like "Trust me" or "You know what"',
        OutputFormatter.ISSUE_NO_PUNCTUATION: "End sentences with proper punctuation (. ! ?)",
    }

    def __init__(
        self,
        store: Optional[KnowledgeStore] = None,
        menu: Optional[MenuService] = None,
        selector: Optional[PhraseSelector] = None,
        adapter: Optional[RegionalAdapter] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """
        Initialize the guide.

        Parameters
        ----------
        store : KnowledgeStore, optional
            Knowledge store, the shared one by default
        menu : MenuService, optional
            Input validation service
        selector : PhraseSelector, optional
            Phrase selection strategy for every generation step
        adapter : RegionalAdapter, optional
            Regional tone adapter
        clock : callable
            Current time, used to infer the time of day for food requests
        """
        self.settings = get_settings()
        self.store = store or get_knowledge_store()
        self.menu = menu or MenuService()
        self.selector = selector or get_phrase_selector(self.settings)
        self.mapper = MoodToDishMapper()
        self.composer = NarrativeComposer()
        self.adapter = adapter or RegionalAdapter(selector=self.selector)
        self.formatter = OutputFormatter(selector=self.selector)
        self.clock = clock

    @traceable(name="generate_cultural_response")
    def generate(self, selection: UserSelection) -> CulturalResponse:
        """
        Compose the unformatted response for a validated selection.

        Parameters
        ----------
        selection : UserSelection
            Sanitized selection from the menu service

        Returns
        -------
        CulturalResponse
            Content plus the Telugu words chosen for it
        """
        category = selection.category
        preferences = selection.preferences
        words = pick_distinct(
            vocabulary_for(category),
            self.settings.vocabulary_words_per_response,
            self.selector,
        )

        if category == "slang":
            subject = self.store.lookup_term_with_fallback(selection.selection)
            content = self.composer.compose(category, subject, preferences)

        elif category == "food":
            city = extract_city(selection.selection)
            food_preferences = preferences.model_copy(update={
                "spice_level": preferences.spice_level or "medium",
                "dietary": preferences.dietary or "any",
                "time_of_day": preferences.time_of_day or infer_time_of_day(self.clock()),
            })
            subject = self.store.lookup_dishes_with_fallback(city, food_preferences)
            content = self.composer.compose(category, subject, food_preferences)

        elif category == "festival":
            subject = self.store.lookup_festival_with_fallback(selection.selection)
            content = self.composer.compose(category, subject, preferences)

        else:
            content = self._compose_emotion(selection)

        content = self.composer.integrate_vocabulary(content, words)

        return CulturalResponse(
            content=content,
            vocabulary_words_used=words,
            region=preferences.region,
            category=category,
        )

    def _compose_emotion(self, selection: UserSelection) -> str:
        mood = selection.selection
        record = self.store.lookup_mood_with_fallback(mood)
        if isinstance(record, Approximation):
            return record.content

        if self.mapper.knows(mood):
            recommendation = self.mapper.map(mood)
        else:
            recommendation = self.mapper.from_mapping(record)

        recommendation = self.mapper.apply_preferences(recommendation, selection.preferences)
        explanation = self.mapper.explain(mood, recommendation.food)
        return self.composer.compose(
            "emotion",
            recommendation,
            selection.preferences,
            selection=mood,
            explanation=explanation,
        )

    def apply_regional_context(
        self,
        response: CulturalResponse,
        region: Optional[str] = None
    ) -> CulturalResponse:
        """Re-tone a response for a region and relabel its tone."""
        target = region or response.region
        if not target:
            return response

        return response.model_copy(update={
            "content": self.adapter.adapt_tone(response.content, target),
            "tone_label": self.adapter.regional_context(target)["tone"],
            "region": target,
        })

    @traceable(name="cultural_guidance")
    def guidance(
        self,
        category: str,
        selection: str,
        preferences: Optional[PreferencesSchema] = None,
        request_id: Optional[str] = None,
    ) -> str:
        """
        Validate a selection and return formatted guidance.

        Raises
        ------
        SelectionError
            If the selection fails validation
        """
        request_id = request_id or str(uuid.uuid4())
        user_selection = self.menu.build_selection(category, selection, preferences)
        logger.info(f"[{request_id}] Guidance for {category}/{user_selection.selection}")

        try:
            response = self.generate(user_selection)
            if user_selection.preferences.region:
                response = self.apply_regional_context(response, user_selection.preferences.region)
            return self.formatter.format(
                response.content,
                response.vocabulary_words_used,
                response.category,
                response.region,
            )
        except Exception as e:
            logger.error(f"[{request_id}] Generation failed: {e}", exc_info=True)
            return self.formatter.format_error(self.composer.error_response(category), category)

    def validate_response_quality(self, text: str) -> dict:
        validation = self.formatter.validate(text)
        return {
            "is_valid": validation.is_valid,
            "issues": validation.issues,
            "suggestions": [self.QUALITY_SUGGESTIONS[issue] for issue in validation.issues],
        }

    def format_custom(self, content: str, category: str, region: Optional[str] = None) -> str:
        return self.formatter.format(content, ["babu"], category, region)

    def status(self) -> dict:
        """Readiness and the data source the store loaded."""
        stats = self.store.get_stats()
        return {
            "ready": bool(self.menu.categories()) and stats["moods"] > 0,
            "knowledge": stats,
            "load_errors": list(self.store.load_errors),
        }


@lru_cache
def get_cultural_guide() -> CulturalGuide:
    """Get the shared guide instance."""
    return CulturalGuide()
