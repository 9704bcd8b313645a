import logging
from typing import Optional

from configs import get_settings
from src.api.schemas import PreferencesSchema
from src.knowledge.models import (
    CATEGORIES,
    DIETARY_PREFERENCES,
    FORMALITY_LEVELS,
    REGIONS,
    SPICE_LEVELS,
    Preferences,
    UserSelection,
)

logger = logging.getLogger(__name__)

TIMES_OF_DAY = ["morning", "afternoon", "evening", "night"]
COMMON_EMOTIONS = ["sad", "happy", "angry", "tired", "sick", "excited", "stressed", "lonely", "confused"]


class SelectionError(ValueError):
    """A dropdown selection that cannot be served."""

    def __init__(self, problems: list[str]):
        self.problems = problems
        super().__init__(" ".join(problems))


class MenuService:
    """
    Dropdown menus and input validation in front of the guide.

    Menus are advisory. Free-text selections pass validation as long as they
    are non-empty and short enough, lookups fall back for unknown keys.
    """

    SUBCATEGORIES = {
        "slang": [
            "greeting expressions",
            "emotional expressions",
            "casual conversation",
            "family terms",
            "food-related slang",
        ],
        "food": ["breakfast items", "street food", "main meals", "snacks", "beverages", "sweets"],
        "festival": ["Ugadi", "Sankranti", "Dussehra", "Diwali", "Vinayaka Chavithi", "Shivaratri"],
        "emotion": ["sad", "happy", "angry", "tired", "sick", "excited", "stressed"],
    }

    DESCRIPTIONS = {
        "slang": "Explore authentic Andhra slang expressions with their meanings, emotional context, and social appropriateness.",
        "food": "Discover Andhra street food and traditional dishes based on your city, spice preferences, and dietary needs.",
        "festival": "Learn about Andhra festivals, their cultural significance, associated foods, and regional celebrations.",
        "emotion": "Get food recommendations based on your emotional state, following traditional Andhra cultural wisdom.",
    }

    PREFERENCES_BY_CATEGORY = {
        "slang": ["formality", "region"],
        "food": ["spice_level", "dietary", "region", "time_of_day"],
        "festival": ["region"],
        "emotion": ["spice_level", "dietary", "region"],
    }

    POPULAR_OPTIONS = {
        "slang": ["greeting expressions", "emotional expressions", "casual conversation"],
        "food": ["street food", "breakfast items", "snacks"],
        "festival": ["Ugadi", "Sankranti", "Dussehra"],
        "emotion": ["happy", "sad", "tired"],
    }

    def __init__(self, max_length: Optional[int] = None):
        self.max_length = max_length or get_settings().selection_max_length

    def categories(self) -> list[str]:
        return list(CATEGORIES)

    def subcategories(self, category: str) -> list[str]:
        if category not in self.SUBCATEGORIES:
            raise SelectionError([self._category_problem(category)])
        return list(self.SUBCATEGORIES[category])

    def category_info(self, category: str) -> dict:
        subcategories = self.subcategories(category)
        return {
            "category": category,
            "description": self.DESCRIPTIONS[category],
            "subcategories": subcategories,
            "available_preferences": list(self.PREFERENCES_BY_CATEGORY.get(category, [])),
        }

    def suggestions(self, category: str, failed_selection: Optional[str] = None) -> list[str]:
        """Menu entries resembling a failed selection, else popular options."""
        options = self.SUBCATEGORIES.get(category, [])
        if failed_selection:
            lowered = failed_selection.lower()
            similar = [o for o in options if o.lower() in lowered or lowered in o.lower()]
            if similar:
                return similar[:3]
        return list(self.POPULAR_OPTIONS.get(category, options[:3]))

    def validate_selection(
        self,
        category: str,
        selection: str,
        preferences: Optional[PreferencesSchema] = None
    ) -> list[str]:
        """
        Check a selection before it reaches the guide.

        Parameters
        ----------
        category : str
            Requested category
        selection : str
            Raw selection text
        preferences : PreferencesSchema, optional
            Raw preference values

        Returns
        -------
        list[str]
            Human-readable problems, empty when the selection is valid
        """
        problems = []

        if category not in CATEGORIES:
            problems.append(self._category_problem(category))

        if not selection or not selection.strip():
            problems.append("Selection cannot be empty. Please provide a valid selection.")
        elif len(selection.strip()) > self.max_length:
            problems.append(f"Selection is too long. Please keep it under {self.max_length} characters.")

        if preferences is not None:
            problems.extend(self._preference_problems(preferences))

        return problems

    def selection_warnings(
        self,
        category: str,
        selection: str,
        preferences: Optional[PreferencesSchema] = None
    ) -> list[str]:
        """Non-blocking hints about a selection."""
        preferences = preferences or PreferencesSchema()
        warnings = []

        if preferences.spice_level == "extreme" and preferences.region != "guntur":
            warnings.append(
                "Extreme spice level is most authentic in Guntur region. "
                "Consider selecting Guntur for the most authentic experience."
            )
        if preferences.dietary == "non-veg" and preferences.formality == "formal":
            warnings.append(
                "Non-vegetarian options might be limited in formal settings. "
                "Consider vegetarian alternatives for formal occasions."
            )
        if category == "slang" and preferences.formality == "formal":
            warnings.append(
                "Slang expressions are typically informal. "
                "Consider setting formality to \"informal\" for better results."
            )
        if category == "emotion" and selection and selection.strip().lower() not in COMMON_EMOTIONS:
            warnings.append("Consider using common emotions like sad, happy, angry, tired, or sick for best results.")

        return warnings

    def sanitize(self, selection: str) -> str:
        return " ".join(selection.split())[:self.max_length]

    def build_selection(
        self,
        category: str,
        selection: str,
        preferences: Optional[PreferencesSchema] = None
    ) -> UserSelection:
        """
        Validate and sanitize a request into a UserSelection.

        Raises
        ------
        SelectionError
            If any validation problem is found
        """
        problems = self.validate_selection(category, selection, preferences)
        if problems:
            logger.info(f"Rejected selection {category}/{selection!r}: {problems}")
            raise SelectionError(problems)

        prefs = preferences or PreferencesSchema()
        return UserSelection(
            category=category,
            selection=self.sanitize(selection),
            preferences=Preferences(
                spice_level=prefs.spice_level or None,
                dietary=prefs.dietary or None,
                formality=prefs.formality or None,
                region=prefs.region or None,
                time_of_day=prefs.time_of_day.lower() if prefs.time_of_day else None,
            ),
        )

    def _category_problem(self, category: str) -> str:
        if not category or not category.strip():
            return "Category is required. Please select from: slang, food, festival, or emotion."
        return f'"{category}" is not a valid category. Please choose from: {", ".join(CATEGORIES)}.'

    @staticmethod
    def _preference_problems(preferences: PreferencesSchema) -> list[str]:
        problems = []
        checks = [
            ("Spice level", preferences.spice_level, SPICE_LEVELS),
            ("Dietary preference", preferences.dietary, DIETARY_PREFERENCES),
            ("Formality level", preferences.formality, FORMALITY_LEVELS),
            ("Region", preferences.region, REGIONS),
            ("Time of day", preferences.time_of_day.lower() if preferences.time_of_day else None, TIMES_OF_DAY),
        ]
        for label, value, allowed in checks:
            if value and value not in allowed:
                problems.append(f'{label} "{value}" is not valid. Choose from: {", ".join(allowed)}.')
        return problems
