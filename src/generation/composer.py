import logging
from typing import Optional, Sequence, Union

from pydantic import BaseModel, Field

from src.knowledge.models import (
    Approximation,
    Dish,
    Festival,
    Preferences,
    Region,
    VernacularTerm,
)
from .mood_mapper import FoodRecommendation
from .vocabulary import INTERJECTIONS

logger = logging.getLogger(__name__)

Subject = Union[VernacularTerm, Dish, Sequence[Dish], Festival, FoodRecommendation, Approximation]


class CulturalResponse(BaseModel):
    """Composed response before regional re-tone and final formatting."""

    content: str
    vocabulary_words_used: list[str] = Field(default_factory=list)
    tone_label: str = "warm and friendly"
    region: Optional[Region] = None
    category: str


def _sentence(text: str) -> str:
    """Trimmed text ending in exactly one terminal mark."""
    text = text.strip()
    if not text:
        return ""
    if text[-1] in ".!?":
        return text
    return text.rstrip(",;:") + "."


class NarrativeComposer:
    """
    Turn a looked-up record into category prose.

    Every composer accepts an Approximation in place of the record and then
    returns the approximation text untouched.
    """

    GENERIC_FALLBACK = (
        "I'd love to help you learn about Andhra culture! Try asking about our slang, "
        "street food, festivals, or emotion-based food recommendations."
    )

    def compose(
        self,
        category: str,
        subject: Subject,
        preferences: Optional[Preferences] = None,
        selection: str = "",
        explanation: str = "",
    ) -> str:
        """
        Compose the prose for one category.

        Parameters
        ----------
        category : str
            One of slang, food, festival, emotion
        subject : Subject
            Record (or dish list, or mood recommendation) to describe
        preferences : Preferences, optional
            Request preferences
        selection : str
            Raw user selection, used by the emotion template
        explanation : str
            Vernacular explanation appended to emotion responses

        Returns
        -------
        str
            Composed content
        """
        if isinstance(subject, Approximation):
            return subject.content

        if category == "slang" and isinstance(subject, VernacularTerm):
            return self.compose_slang(subject)
        if category == "food":
            if isinstance(subject, Dish):
                return self.compose_food(subject)
            if isinstance(subject, (list, tuple)) and subject:
                return self.compose_food(subject[0])
        if category == "festival" and isinstance(subject, Festival):
            return self.compose_festival(subject)
        if category == "emotion" and isinstance(subject, FoodRecommendation):
            return self.compose_emotion(selection, subject, explanation)

        logger.warning(f"Nothing to compose for category '{category}'")
        return self.GENERIC_FALLBACK

    def compose_slang(self, term: VernacularTerm) -> str:
        parts = [
            f'"{term.term}" literally means "{term.literal_meaning}".',
            _sentence(f"The emotional intent is {term.emotional_intent.lower()}"),
            f"It's {term.social_appropriateness.lower()}, and it's definitely {term.formality_level} language.",
        ]

        if term.regional_variations:
            variations = ", ".join(
                f'in {v.region}, they say "{v.variation}"' for v in term.regional_variations
            )
            parts.append(f"Different regions have their own touch - {variations}.")

        parts.append("That's how we express ourselves in Andhra culture!")
        return " ".join(parts)

    def compose_food(self, dish: Dish) -> str:
        best_time = dish.best_time.lower()
        if best_time == "any":
            timing = "It's perfect for any time of day,"
        else:
            timing = f"It's best enjoyed during {best_time},"

        parts = [
            f"For {dish.city}, I'd recommend {dish.name}!",
            _sentence(dish.description),
            f"{timing} and the spice level is {dish.spice_level}.",
        ]
        if dish.cultural_significance:
            parts.append(_sentence(dish.cultural_significance))

        parts.append("This is authentic Andhra taste that locals love!")
        return " ".join(parts)

    def compose_festival(self, festival: Festival) -> str:
        parts = [
            _sentence(f"{festival.name} is all about {festival.cultural_meaning.lower()}"),
            _sentence(f"The emotional tone is {festival.emotional_tone.lower()}"),
        ]
        if festival.associated_foods:
            parts.append(f"We prepare special foods like {', '.join(festival.associated_foods)}.")
            parts.append(_sentence(festival.food_symbolism))

        if festival.regional_variations:
            variations = ", ".join(
                f"{v.region} region {v.variation.lower()}" for v in festival.regional_variations
            )
            parts.append(_sentence(f"Different regions celebrate it uniquely - {variations}"))

        parts.append("That's the beauty of Andhra festival traditions!")
        return " ".join(parts)

    def compose_emotion(
        self,
        selection: str,
        recommendation: FoodRecommendation,
        explanation: str = ""
    ) -> str:
        parts = [
            f"When you're feeling {selection}, {recommendation.food} is perfect!",
            _sentence(recommendation.reasoning),
            _sentence(recommendation.cultural_context),
        ]
        if explanation:
            parts.append(_sentence(explanation))
        return " ".join(parts)

    def integrate_vocabulary(self, content: str, words: Sequence[str]) -> str:
        """Make sure at least one of the words appears in the content."""
        if not words or any(word in content.lower() for word in words):
            return content

        word = words[0]
        if word in INTERJECTIONS:
            return f"{word.capitalize()}, {content[:1].lower()}{content[1:]}"
        return f"{_sentence(content)} That's how we say it, {word}!"

    def error_response(self, category: str) -> str:
        return (
            f"I'm having trouble processing your request about {category}. "
            "Let me try to help you with general Andhra cultural information instead!"
        )
