import pytest
from datetime import datetime
from unittest.mock import patch

from src.api.schemas import PreferencesSchema
from src.api.services import CulturalGuide, SelectionError
from src.api.services.guide import extract_city, infer_time_of_day
from src.generation import CulturalResponse, OutputFormatter, RegionalAdapter, first_choice
from src.knowledge import KnowledgeStore


@pytest.fixture
def fallback_store():
    return KnowledgeStore(text="")


@pytest.fixture
def guide(fallback_store, evening_clock):
    return CulturalGuide(
        store=fallback_store,
        selector=first_choice,
        adapter=RegionalAdapter(selector=first_choice, probability=0.0),
        clock=evening_clock,
    )


class TestHelpers:

    @pytest.mark.parametrize("hour,expected", [
        (7, "morning"),
        (12, "afternoon"),
        (17, "evening"),
        (22, "night"),
        (3, "night"),
    ])
    def test_infer_time_of_day(self, hour, expected):
        assert infer_time_of_day(datetime(2024, 1, 1, hour)) == expected

    def test_extract_city(self):
        assert extract_city("Best food in VIZAG") == "Visakhapatnam"
        assert extract_city("guntur") == "Guntur"
        assert extract_city("Hyderabad") == "Visakhapatnam"


class TestCulturalGuide:

    @pytest.mark.parametrize("category,selection", [
        ("slang", "Arey Baboi"),
        ("slang", "Unknown Phrase"),
        ("food", "Vizag"),
        ("food", "Guntur"),
        ("festival", "Sankranti"),
        ("festival", "Holi"),
        ("emotion", "sad"),
        ("emotion", "bored"),
    ])
    def test_guidance_satisfies_output_policy(self, guide, category, selection):
        text = guide.guidance(category, selection)

        assert OutputFormatter(selector=first_choice).validate(text).is_valid

    def test_slang_guidance(self, guide):
        text = guide.guidance("slang", "arey baboi")

        assert '"Arey Baboi" literally means' in text
        assert text.startswith("Trust me,")

    def test_unknown_slang_mentions_query(self, guide):
        text = guide.guidance("slang", "Arey")

        assert '"Arey"' in text
        assert '"Arey Baboi"' in text

    def test_food_guidance_uses_clock(self, guide):
        text = guide.guidance("food", "Vizag beach")

        assert "I'd recommend Punugulu!" in text

    def test_food_guidance_explicit_time(self, guide):
        text = guide.guidance("food", "Tirupati", PreferencesSchema(time_of_day="morning"))

        assert "I'd recommend Dosa with Red Chutney!" in text

    def test_food_guidance_non_veg(self, guide):
        text = guide.guidance("food", "Vizag", PreferencesSchema(dietary="non-veg", spice_level="high"))

        assert "I'd recommend Bongulo Chicken!" in text

    def test_food_guidance_without_matching_dish(self, guide):
        text = guide.guidance("food", "Guntur")

        assert "couldn't find a Guntur dish" in text

    def test_festival_guidance(self, guide):
        text = guide.guidance("festival", "Sankranti")

        assert "Sankranti" in text
        assert "is all about" in text

    def test_emotion_guidance(self, guide):
        text = guide.guidance("emotion", "sad")

        assert "feeling sad, Pappu with Avakaya is perfect!" in text

    def test_emotion_guidance_with_preferences(self, guide):
        text = guide.guidance("emotion", "happy", PreferencesSchema(dietary="veg"))

        assert "Veg Biryani with paneer" in text

    def test_unknown_emotion(self, guide):
        text = guide.guidance("emotion", "bored")

        assert 'I don\'t have a specific food recommendation for "bored"' in text

    def test_document_only_emotion(self, bundled_document_path, evening_clock):
        guide = CulturalGuide(
            store=KnowledgeStore(source=bundled_document_path),
            selector=first_choice,
            adapter=RegionalAdapter(selector=first_choice, probability=0.0),
            clock=evening_clock,
        )
        text = guide.guidance("emotion", "lonely")

        assert "Pesarattu with Upma" in text

    def test_region_sets_opener(self, guide):
        text = guide.guidance("slang", "Lite Teesko", PreferencesSchema(region="guntur"))

        assert text.startswith("Pakka guarantee,")

    def test_invalid_selection_raises(self, guide):
        with pytest.raises(SelectionError) as exc_info:
            guide.guidance("music", "")

        assert len(exc_info.value.problems) == 2

    def test_generation_failure_returns_error_text(self, guide):
        with patch.object(guide, "generate", side_effect=RuntimeError("boom")):
            text = guide.guidance("food", "Guntur")

        assert text.startswith("Arey, I'm having trouble processing your request about food.")
        assert text.endswith("Try asking about street food, breakfast items, or snacks from different cities!")

    def test_generate_records_vocabulary(self, guide):
        selection = guide.menu.build_selection("festival", "Ugadi")
        response = guide.generate(selection)

        assert response.vocabulary_words_used == ["panduga", "prasadam"]
        assert response.category == "festival"
        assert response.tone_label == "warm and friendly"

    def test_apply_regional_context(self, fallback_store):
        guide = CulturalGuide(
            store=fallback_store,
            selector=first_choice,
            adapter=RegionalAdapter(selector=first_choice, probability=1.0),
        )
        response = CulturalResponse(content="Hello", category="slang")

        adapted = guide.apply_regional_context(response, "guntur")

        assert adapted.content == "Rey, Hello"
        assert adapted.tone_label == "bold and direct"
        assert adapted.region == "guntur"
        assert guide.apply_regional_context(response) is response

    def test_validate_response_quality(self, guide):
        result = guide.validate_response_quality("Hello")

        assert result["is_valid"] is False
        assert len(result["suggestions"]) == len(result["issues"]) == 3

    def test_format_custom(self, guide):
        text = guide.format_custom("Biryani time", "food")

        assert "babu" in text
        assert guide.validate_response_quality(text)["is_valid"]

    def test_status(self, guide):
        status = guide.status()

        assert status["ready"] is True
        assert status["knowledge"]["loaded_from"] == KnowledgeStore.SOURCE_FALLBACK
        assert status["load_errors"]
