import logging
from typing import Optional

from pydantic import BaseModel, Field

from src.knowledge.models import MoodDishMapping, Preferences, SpiceLevel

logger = logging.getLogger(__name__)


class FoodRecommendation(BaseModel):
    """Dish recommended for a mood, with the reasoning shown to the user."""

    food: str
    reasoning: str
    cultural_context: str
    spice_level: SpiceLevel = Field(default="medium")


class MoodToDishMapper:
    """
    Map an emotional state to a comfort dish.

    The table is fixed. Unknown moods get the comfort-stew default instead of
    an error, and preferences adjust a recommendation one step at a time:
    vegetarian substitute, spice override, regional touch, home or street
    framing.
    """

    EMOTION_FOOD_MAP = {
        "sad": {
            "food": "Pappu with Avakaya",
            "reasoning": "Comfort food that brings nostalgia and warmth, like amma's cooking",
            "spice_level": "medium",
        },
        "sick": {
            "food": "Rasam",
            "reasoning": "Light, healing soup with pepper that soothes the body and aids digestion",
            "spice_level": "low",
        },
        "happy": {
            "food": "Biryani",
            "reasoning": "Celebratory feast food that matches the joy and festive mood",
            "spice_level": "high",
        },
        "angry": {
            "food": "Curd Rice",
            "reasoning": "Cooling effect that calms the mind and reduces body heat from anger",
            "spice_level": "low",
        },
        "tired": {
            "food": "Coffee with Punugulu",
            "reasoning": "Energy boost from caffeine paired with crispy snacks for quick satisfaction",
            "spice_level": "medium",
        },
    }

    DEFAULT_RECOMMENDATION = FoodRecommendation(
        food="Pappu with Avakaya",
        reasoning="When in doubt, comfort food like pappu always helps, ra!",
        cultural_context="In Andhra culture, pappu is the ultimate comfort food that soothes any emotion",
        spice_level="medium",
    )

    EXPLANATIONS = {
        "sad": (
            "Arey, when you're feeling low, nothing beats the comfort of pappu with avakaya. "
            "It's like amma's hug in food form - the tangy pickle cuts through sadness while "
            "the dal provides warmth and comfort."
        ),
        "sick": (
            "Baboi, when you're not well, rasam is like liquid medicine! The pepper and tamarind "
            "help clear your system, and it's light on the stomach. Our elders always say "
            "\"rasam tho everything will be fine.\""
        ),
        "happy": (
            "Chala scene undi! When you're happy, only biryani can match that energy. It's "
            "celebration food - rich, flavorful, and meant to be shared with loved ones. "
            "Perfect for your joyful mood!"
        ),
        "angry": (
            "Lite teesko, when anger heats up your body, curd rice is the perfect coolant. The "
            "yogurt literally cools your system down, and the simple taste helps calm your mind. "
            "Very effective, trust me!"
        ),
        "tired": (
            "Taggede le! When you're exhausted, you need both caffeine and carbs. Coffee gives "
            "instant energy while punugulu provides that satisfying crunch and quick fuel. "
            "Perfect evening combo!"
        ),
    }

    VEGETARIAN_SUBSTITUTES = {
        "Biryani": "Veg Biryani with paneer",
        "Coffee with Punugulu": "Coffee with Veg Punugulu",
    }

    SPICE_SUFFIXES = {
        "low": "with mild spicing",
        "medium": "with moderate spice level",
        "high": "with good spice kick",
        "extreme": "with maximum Guntur-style heat",
    }

    REGIONAL_TOUCHES = {
        "coastal": "with coastal Andhra style preparation",
        "guntur": "with extra Guntur mirchi for that authentic kick",
        "rayalaseema": "prepared in traditional Rayalaseema style",
    }

    HOME_MOODS = ("sad", "sick", "angry")
    STREET_MOODS = ("happy", "tired")

    def knows(self, mood: str) -> bool:
        return mood.strip().lower() in self.EMOTION_FOOD_MAP

    def map(self, mood: str) -> FoodRecommendation:
        """
        Recommend a dish for a mood.

        Parameters
        ----------
        mood : str
            Mood name, case and surrounding whitespace ignored

        Returns
        -------
        FoodRecommendation
            Table entry, or the comfort-food default for unknown moods
        """
        entry = self.EMOTION_FOOD_MAP.get(mood.strip().lower())
        if entry is None:
            logger.debug(f"No table entry for mood '{mood}', using default")
            return self.DEFAULT_RECOMMENDATION.model_copy()

        return FoodRecommendation(
            food=entry["food"],
            reasoning=entry["reasoning"],
            cultural_context=(
                f"In Andhra culture, food is emotional medicine - {entry['food']} "
                f"is perfect for when you're feeling {mood}"
            ),
            spice_level=entry["spice_level"],
        )

    def from_mapping(self, mapping: MoodDishMapping) -> FoodRecommendation:
        """Build a recommendation from a knowledge record the table does not cover."""
        return FoodRecommendation(
            food=mapping.recommended_food,
            reasoning=mapping.emotional_logic,
            cultural_context=(
                f"In Andhra culture, food is emotional medicine - {mapping.recommended_food} "
                f"is perfect for when you're feeling {mapping.mood}"
            ),
            spice_level="medium",
        )

    def explain(self, mood: str, food: str) -> str:
        """Vernacular explanation when the food is the table's pick for the mood."""
        entry = self.EMOTION_FOOD_MAP.get(mood.strip().lower())
        if entry is None or entry["food"].lower() != food.lower():
            return f"This food choice might help balance your {mood} mood through Andhra food wisdom"
        return self.EXPLANATIONS[mood.strip().lower()]

    def apply_preferences(
        self,
        recommendation: FoodRecommendation,
        preferences: Optional[Preferences] = None
    ) -> FoodRecommendation:
        """
        Adjust a recommendation to user preferences.

        Parameters
        ----------
        recommendation : FoodRecommendation
            Output of ``map``
        preferences : Preferences, optional
            Dietary, spice and region preferences

        Returns
        -------
        FoodRecommendation
            New recommendation, the input is left untouched
        """
        preferences = preferences or Preferences()
        adapted = recommendation

        if preferences.dietary == "veg":
            substitute = self.VEGETARIAN_SUBSTITUTES.get(adapted.food)
            if substitute:
                adapted = adapted.model_copy(update={
                    "food": substitute,
                    "reasoning": f"{adapted.reasoning} (adapted for vegetarian preference)",
                })

        if preferences.spice_level and preferences.spice_level != adapted.spice_level:
            spice = preferences.spice_level
            adapted = adapted.model_copy(update={
                "food": f"{adapted.food} {self.SPICE_SUFFIXES[spice]}",
                "spice_level": spice,
                "reasoning": f"{adapted.reasoning} (adjusted to your {spice} spice preference)",
            })

        if preferences.region in self.REGIONAL_TOUCHES:
            region = preferences.region
            adapted = adapted.model_copy(update={
                "food": f"{adapted.food} {self.REGIONAL_TOUCHES[region]}",
                "cultural_context": (
                    f"{adapted.cultural_context} This {region} region preparation adds authentic local flavor."
                ),
            })

        return self._frame_setting(adapted)

    def _frame_setting(self, recommendation: FoodRecommendation) -> FoodRecommendation:
        """Append home or street framing, detected from the accumulated text."""
        text = f"{recommendation.cultural_context} {recommendation.reasoning}".lower()

        if any(mood in text for mood in self.HOME_MOODS):
            return recommendation.model_copy(update={
                "reasoning": f"{recommendation.reasoning} Best enjoyed at home for that personal comfort.",
                "cultural_context": (
                    f"{recommendation.cultural_context} "
                    "Home-style preparation brings out the emotional healing aspect."
                ),
            })

        if any(mood in text for mood in self.STREET_MOODS):
            return recommendation.model_copy(update={
                "reasoning": f"{recommendation.reasoning} Perfect to grab from your favorite local spot!",
                "cultural_context": (
                    f"{recommendation.cultural_context} "
                    "Street-style preparation adds that authentic local flavor and social energy."
                ),
            })

        return recommendation
