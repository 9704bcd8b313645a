from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

SpiceLevel = Literal["low", "medium", "high", "extreme"]
FormalityLevel = Literal["formal", "informal"]
HomeOrStreet = Literal["home", "street", "both"]
DietaryPreference = Literal["veg", "non-veg", "any"]
Region = Literal["coastal", "guntur", "rayalaseema"]
Category = Literal["slang", "food", "festival", "emotion"]

CATEGORIES = ["slang", "food", "festival", "emotion"]
SPICE_LEVELS = ["low", "medium", "high", "extreme"]
SPICE_RANK = {level: rank for rank, level in enumerate(SPICE_LEVELS, start=1)}
FORMALITY_LEVELS = ["formal", "informal"]
HOME_OR_STREET = ["home", "street", "both"]
DIETARY_PREFERENCES = ["veg", "non-veg", "any"]
REGIONS = ["coastal", "guntur", "rayalaseema"]
BEST_TIMES = ["Morning", "Lunch", "Evening", "Any"]

REQUIRED_MOODS = ["sad", "sick", "happy", "angry", "tired"]
REQUIRED_CITIES = ["visakhapatnam", "vijayawada", "guntur", "tirupati"]


class Record(BaseModel):
    """Immutable knowledge record."""

    model_config = ConfigDict(frozen=True)


class RegionalVariation(Record):
    region: str
    variation: str


class VernacularTerm(Record):
    """Slang or colloquial expression with its meaning and usage guidance."""

    term: str = Field(..., description="Expression as written, lookup key is case-insensitive")
    literal_meaning: str
    emotional_intent: str
    social_appropriateness: str
    formality_level: FormalityLevel
    regional_variations: tuple[RegionalVariation, ...] = ()


class Dish(Record):
    """Street food or home dish tied to a city."""

    name: str
    city: str
    spice_level: SpiceLevel
    best_time: str = Field(..., description="Contains one of Morning, Lunch, Evening, Any")
    description: str
    cultural_significance: Optional[str] = None


class Festival(Record):
    name: str
    cultural_meaning: str
    food_symbolism: str
    emotional_tone: str
    associated_foods: tuple[str, ...]
    regional_variations: tuple[RegionalVariation, ...] = ()


class MoodDishMapping(Record):
    """Association between an emotional state and a comfort dish."""

    mood: str = Field(..., description="Canonical lowercase mood key")
    recommended_food: str
    emotional_logic: str
    home_or_street: HomeOrStreet


class ParsedKnowledge(Record):
    """The four record collections extracted from one knowledge document."""

    terms: tuple[VernacularTerm, ...] = ()
    dishes: tuple[Dish, ...] = ()
    festivals: tuple[Festival, ...] = ()
    mood_mappings: tuple[MoodDishMapping, ...] = ()

    def counts(self) -> dict[str, int]:
        return {
            "terms": len(self.terms),
            "dishes": len(self.dishes),
            "festivals": len(self.festivals),
            "mood_mappings": len(self.mood_mappings),
        }


class Approximation(Record):
    """Stand-in returned by a lookup that found nothing."""

    content: str = Field(..., description="Apology text, mentions the original query")
    original_query: str
    fallback_reason: str
    is_approximation: bool = True


class Preferences(Record):
    """Optional user preferences, already validated by the menu layer."""

    spice_level: Optional[SpiceLevel] = None
    dietary: Optional[DietaryPreference] = None
    formality: Optional[FormalityLevel] = None
    region: Optional[Region] = None
    time_of_day: Optional[str] = None


class UserSelection(Record):
    """Transient request value, never persisted."""

    category: Category
    selection: str
    preferences: Preferences = Field(default_factory=Preferences)


TermResult = Union[VernacularTerm, Approximation]
FestivalResult = Union[Festival, Approximation]
MoodResult = Union[MoodDishMapping, Approximation]
