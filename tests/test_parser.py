import httpx
import pytest

from src.knowledge import (
    DocumentReadError,
    KnowledgeDocumentParser,
    is_valid_dish,
    is_valid_festival,
    is_valid_mood_mapping,
    is_valid_term,
    read_document,
    validate_completeness,
)


class TestKnowledgeDocumentParser:

    def setup_method(self):
        self.parser = KnowledgeDocumentParser()

    def test_parse_slang_term(self, slang_section):
        parsed = self.parser.parse(slang_section)

        assert len(parsed.terms) == 1
        term = parsed.terms[0]
        assert term.term == "Arey Baboi"
        assert term.literal_meaning == "Oh my God"
        assert term.emotional_intent == "Shock / frustration / disbelief"
        assert term.social_appropriateness == "Informal; Avoid in formal settings"

    def test_emotional_meaning_label_not_taken_as_meaning(self):
        text = '🗣️ Andhra Slang Intelligence\n"Taggede Le"\nEmotional meaning: Swag\nMeaning: Will not back down\n'
        parsed = self.parser.parse(text)

        assert parsed.terms[0].literal_meaning == "Will not back down"
        assert parsed.terms[0].emotional_intent == "Swag"

    def test_informal_usage_is_not_formal(self):
        text = '🗣️ Andhra Slang Intelligence\n"Lite Teesko"\nLiteral: Take it light\nEmotion: Chill\nUsage: Informal\n'
        parsed = self.parser.parse(text)

        assert parsed.terms[0].formality_level == "informal"

    def test_formal_word_marks_term_formal(self):
        text = '🗣️ Andhra Slang Intelligence\n"Bagunnara"\nLiteral: Are you well?\nEmotion: Respect\nUsage: Formal greeting\n'
        parsed = self.parser.parse(text)

        assert parsed.terms[0].formality_level == "formal"

    def test_usage_defaults_to_general_use(self):
        text = '🗣️ Andhra Slang Intelligence\n"Lite Teesko"\nLiteral: Take it light\nEmotion: Chill\n'
        parsed = self.parser.parse(text)

        assert parsed.terms[0].social_appropriateness == "General use"

    def test_term_without_emotion_is_dropped(self):
        text = '🗣️ Andhra Slang Intelligence\n"Incomplete Entry"\nLiteral: Something\n'
        parsed = self.parser.parse(text)

        assert parsed.terms == ()

    def test_duplicate_terms_keep_first(self):
        text = (
            '🗣️ Andhra Slang Intelligence\n'
            '"Lite Teesko"\nLiteral: Take it light\nEmotion: Chill\n'
            '"lite teesko"\nLiteral: Other\nEmotion: Other\n'
        )
        parsed = self.parser.parse(text)

        assert len(parsed.terms) == 1
        assert parsed.terms[0].literal_meaning == "Take it light"

    def test_parse_dish_under_city_alias_header(self):
        text = "🍗 Andhra Street Food Culture\n\nVisakhapatnam (Vizag)\nPunugulu → medium spice\n"
        parsed = self.parser.parse(text)

        assert len(parsed.dishes) == 1
        dish = parsed.dishes[0]
        assert dish.name == "Punugulu"
        assert dish.city == "Visakhapatnam"
        assert dish.spice_level == "medium"
        assert dish.best_time == "Evening"
        assert dish.cultural_significance == "Traditional Visakhapatnam specialty"

    def test_dish_spice_and_time_inference(self):
        text = (
            "🍗 Andhra Street Food Culture\n"
            "Guntur\n"
            "Mirchi Bajji → extreme heat, evening\n"
            "Karam Dosa → spicy, breakfast\n"
            "Curd Rice → mild, lunch\n"
        )
        parsed = self.parser.parse(text)

        assert [(d.spice_level, d.best_time) for d in parsed.dishes] == [
            ("extreme", "Evening"),
            ("high", "Morning"),
            ("low", "Lunch"),
        ]

    def test_dish_without_city_is_skipped(self):
        text = "🍗 Andhra Street Food Culture\nPunugulu → medium spice\n"
        parsed = self.parser.parse(text)

        assert parsed.dishes == ()

    def test_ascii_arrow_is_accepted(self):
        text = "🍗 Andhra Street Food Culture\nTirupati\nLaddu -> mild sweet\n"
        parsed = self.parser.parse(text)

        assert parsed.dishes[0].name == "Laddu"

    def test_festival_defaults(self):
        text = "🎉 Festivals of Andhra Pradesh\n\nDussehra\nCelebration of good over evil\nFoods: Pulihora, Garelu\n"
        parsed = self.parser.parse(text)

        assert len(parsed.festivals) == 1
        festival = parsed.festivals[0]
        assert festival.emotional_tone == "Celebratory"
        assert festival.food_symbolism == "Traditional foods representing the spirit of Dussehra"
        assert festival.associated_foods == ("Pulihora", "Garelu")

    def test_festival_fields(self):
        text = (
            "🎉 Festivals of Andhra Pradesh\n"
            "Sankranti\n"
            "Harvest festival celebrating abundance\n"
            "Foods: Ariselu, Pongal\n"
            "Ariselu represents prosperity\n"
            "Emotional tone: Family bonding\n"
        )
        parsed = self.parser.parse(text)

        festival = parsed.festivals[0]
        assert festival.name == "Sankranti"
        assert festival.cultural_meaning == "Harvest festival celebrating abundance"
        assert festival.food_symbolism == "Ariselu represents prosperity"
        assert festival.emotional_tone == "Family bonding"
        assert "Ariselu" in festival.associated_foods

    def test_festival_without_foods_is_dropped(self):
        text = "🎉 Festivals of Andhra Pradesh\nDiwali\nFestival of lights\n"
        parsed = self.parser.parse(text)

        assert parsed.festivals == ()

    def test_mood_mappings(self):
        text = (
            "❤️ Emotional Food Mapping\n\n"
            "Sad → Pappu + Avakaya\n(Comfort, nostalgia)\n\n"
            "Happy → Biryani (Celebration)\n"
            "Tired → Filter Coffee\n"
        )
        parsed = self.parser.parse(text)

        assert len(parsed.mood_mappings) == 3
        sad, happy, tired = parsed.mood_mappings
        assert sad.mood == "sad"
        assert sad.recommended_food == "Pappu + Avakaya"
        assert sad.emotional_logic == "Comfort, nostalgia"
        assert happy.emotional_logic == "Celebration"
        assert tired.emotional_logic == "Filter Coffee is culturally appropriate for tired feelings"
        assert tired.home_or_street == "street"
        assert sad.home_or_street == "home"

    def test_missing_sections_yield_empty_collections(self):
        parsed = self.parser.parse("Nothing useful here")

        assert parsed.counts() == {"terms": 0, "dishes": 0, "festivals": 0, "mood_mappings": 0}

    def test_terminator_ends_last_section(self):
        text = (
            "❤️ Emotional Food Mapping\n"
            "Sad → Pappu (Comfort)\n"
            "🎛️ Dropdown Controls\n"
            "Spice → Low, Medium\n"
        )
        parsed = self.parser.parse(text)

        assert [m.mood for m in parsed.mood_mappings] == ["sad"]

    def test_every_parsed_record_is_valid(self, bundled_document_text):
        parsed = self.parser.parse(bundled_document_text)

        assert all(is_valid_term(t) for t in parsed.terms)
        assert all(is_valid_dish(d) for d in parsed.dishes)
        assert all(is_valid_festival(f) for f in parsed.festivals)
        assert all(is_valid_mood_mapping(m) for m in parsed.mood_mappings)

    def test_bundled_document_is_complete(self, bundled_document_text):
        parsed = self.parser.parse(bundled_document_text)

        assert validate_completeness(parsed) == []
        assert len(parsed.terms) == 6
        assert len(parsed.dishes) == 12
        assert len(parsed.festivals) == 6
        assert [f.name for f in parsed.festivals][:3] == ["Sankranti", "Ugadi", "Vinayaka Chavithi"]


class TestReadDocument:

    def test_read_missing_file(self, tmp_path):
        with pytest.raises(DocumentReadError):
            read_document(tmp_path / "missing.md")

    def test_read_file(self, tmp_path):
        path = tmp_path / "doc.md"
        path.write_text("hello", encoding="utf-8")

        assert read_document(path) == "hello"

    def test_read_url(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(200, text="remote doc"))
        with httpx.Client(transport=transport) as client:
            assert read_document("https://example.com/doc.md", client=client) == "remote doc"

    def test_read_url_http_error(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(404))
        with httpx.Client(transport=transport) as client:
            with pytest.raises(DocumentReadError) as exc_info:
                read_document("https://example.com/doc.md", client=client)

        assert exc_info.value.source == "https://example.com/doc.md"
