import logging
import random
from typing import Callable, Optional

from configs import get_settings
from src.knowledge.models import Region, UserSelection
from .selection import PhraseSelector, get_phrase_selector

logger = logging.getLogger(__name__)


class RegionalAdapter:
    """
    Regional flavour for Coastal Andhra, Guntur and Rayalaseema.

    Coastal speech is soft, Guntur is bold and direct, Rayalaseema is rustic.
    ``adapt_tone`` sprinkles one regional phrase into a response with a fixed
    probability, so most responses pass through unchanged.
    """

    DEFAULT_REGION: Region = "coastal"

    REGIONAL_PHRASES = {
        "coastal": ["Babu, ", "Amma, ", ", kada?", ", le", "Chala bagundi, "],
        "guntur": ["Rey, ", "Mama, ", "! Pakka guarantee!", ", abba!", "Super spicy, "],
        "rayalaseema": ["Anna, ", "Ayya, ", ", chelli", ", simple ga", "Traditional ga, "],
    }

    REGIONAL_CONTEXT = {
        "coastal": {
            "tone": "gentle and soft",
            "characteristics": ["hospitable", "seafood-loving", "trade-oriented", "moderate"],
            "values": ["respect for elders", "family bonds", "cultural traditions", "education"],
        },
        "guntur": {
            "tone": "bold and direct",
            "characteristics": ["spice-loving", "energetic", "business-minded", "straightforward"],
            "values": ["honesty", "hard work", "entrepreneurship", "boldness"],
        },
        "rayalaseema": {
            "tone": "rustic and traditional",
            "characteristics": ["agriculture-focused", "simple", "traditional", "community-oriented"],
            "values": ["simplicity", "tradition", "community support", "agricultural heritage"],
        },
    }

    REGIONAL_SPECIALTIES = {
        "coastal": {
            "food": ["Pulihora", "Gongura Pachadi", "Royyala Curry", "Pesarattu", "Kakinada Kaja", "Bobbatlu"],
            "slang": ["Babu", "Amma", "Chinnodu", "Pedda", "Chinni"],
            "festival": ["Ugadi", "Sankranti", "Dussehra"],
            "emotion": ["comfort", "celebration", "healing"],
        },
        "guntur": {
            "food": ["Guntur Chicken", "Karam Dosa", "Mirchi Bajji", "Gongura Mutton", "Avakaya", "Kandi Pachadi"],
            "slang": ["Rey", "Mama", "Abba", "Boss", "Bhai"],
            "festival": ["Ugadi", "Sankranti", "Vinayaka Chavithi"],
            "emotion": ["energizing", "bold", "fiery"],
        },
        "rayalaseema": {
            "food": ["Ragi Sangati", "Natukodi Curry", "Peanut Chutney", "Jowar Roti", "Mutton Curry", "Bamboo Chicken"],
            "slang": ["Anna", "Ayya", "Chelli", "Tammudu", "Akka"],
            "festival": ["Ugadi", "Sankranti", "Rama Navami"],
            "emotion": ["traditional", "rustic", "simple"],
        },
    }

    REGIONAL_SLANG = {
        "coastal": {
            "greetings": ["Babu", "Amma", "Chinnodu"],
            "expressions": ["Chala bagundi", "Superb kada", "Emi chestunnav"],
            "relationships": ["Pedda", "Chinni", "Mama", "Mami"],
            "emotions": ["Santosham", "Badha", "Kopam"],
        },
        "guntur": {
            "greetings": ["Rey", "Mama", "Abba"],
            "expressions": ["Pakka guarantee", "Super spicy", "Emi ra"],
            "relationships": ["Boss", "Bhai", "Anna", "Thammudu"],
            "emotions": ["Josh", "Fire", "Kick"],
        },
        "rayalaseema": {
            "greetings": ["Anna", "Ayya", "Chelli"],
            "expressions": ["Simple ga", "Traditional ga", "Manchi vishayam"],
            "relationships": ["Tammudu", "Akka", "Vadina", "Babai"],
            "emotions": ["Shantham", "Goppa", "Manchidi"],
        },
    }

    SPICE_PREFERENCE = {
        "coastal": ["medium", "high"],
        "guntur": ["high", "extreme"],
        "rayalaseema": ["medium", "high"],
    }

    def __init__(
        self,
        selector: Optional[PhraseSelector] = None,
        probability: Optional[float] = None,
        chance: Callable[[], float] = random.random,
    ):
        """
        Initialize the adapter.

        Parameters
        ----------
        selector : PhraseSelector, optional
            Strategy picking a phrase, configured selector by default
        probability : float, optional
            Chance of injecting a phrase, from settings by default
        chance : callable
            Source of uniform numbers in [0, 1)
        """
        settings = get_settings()
        self.selector = selector or get_phrase_selector(settings)
        self.probability = settings.regional_tone_probability if probability is None else probability
        self.chance = chance
        self.default_region: Region = settings.default_region

    def detect_region(self, selection: UserSelection) -> Region:
        return selection.preferences.region or self.default_region

    def adapt_tone(self, content: str, region: str) -> str:
        """
        Maybe add one regional phrase to the content.

        Phrases ending in ``", "`` are prepended, the rest appended. Unknown
        regions pass the content through.
        """
        phrases = self.REGIONAL_PHRASES.get(region)
        if not phrases or self.chance() >= self.probability:
            return content

        phrase = self.selector(phrases)
        logger.debug(f"Adding {region} phrase '{phrase.strip()}'")
        if phrase.endswith(", "):
            return phrase + content
        return content + phrase

    def regional_context(self, region: str) -> dict:
        return self.REGIONAL_CONTEXT.get(region, self.REGIONAL_CONTEXT[self.DEFAULT_REGION])

    def regional_specialties(self, category: str, region: str) -> list[str]:
        if category == "spice":
            return self.regional_spice_preference(region)
        return list(self.REGIONAL_SPECIALTIES.get(region, {}).get(category, []))

    def regional_spice_preference(self, region: str) -> list[str]:
        return list(self.SPICE_PREFERENCE.get(region, ["medium"]))

    def regional_slang(self, region: str) -> list[str]:
        """All regional words: greetings, expressions, relationships, emotions."""
        slang = self.REGIONAL_SLANG.get(region, {})
        return [word for group in slang.values() for word in group]
