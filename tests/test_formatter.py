import pytest

from src.generation import OutputFormatter, first_choice


def nth_choice(index):
    return lambda options: options[index % len(options)]


class TestOutputFormatter:

    def setup_method(self):
        self.formatter = OutputFormatter(selector=first_choice)

    def test_format_adds_opener_vocabulary_and_closing(self):
        result = self.formatter.format("hello there", ["pappu"], category="food")

        assert result == (
            "Trust me, hello there. We call it pappu in Telugu. "
            "This is authentic Andhra taste that locals love!"
        )

    def test_existing_opener_is_kept(self):
        result = self.formatter.format("Arey, the biryani is great!", category="food")

        assert result.startswith("Arey, the biryani is great!")
        assert result.count("Arey") == 1

    def test_regional_opener(self):
        result = self.formatter.format("Mirchi bajji is hot.", ["karam"], category="food", region="guntur")

        assert result.startswith("Pakka guarantee, mirchi bajji is hot.")

    def test_pronoun_i_stays_capitalized(self):
        result = self.formatter.format("I love pappu.", category="food")

        assert result.startswith("Trust me, I love pappu.")

    def test_unknown_vocabulary_words_fall_back_to_category(self):
        result = self.formatter.format("Nice.", ["xyzzy"], category="festival")

        assert "We call it panduga in Telugu." in result

    def test_interjection_is_prepended(self):
        result = self.formatter.format("Nice.", ["arey"], category="slang")

        assert result.startswith("Arey, trust me, nice.")

    def test_technical_terms_are_stripped(self):
        result = self.formatter.format("The API returns a response from the database.", category="slang")

        assert self.formatter.TECHNICAL_PATTERN.search(result) is None
        assert "Returns" not in result

    def test_technical_terms_match_whole_words(self):
        assert self.formatter.strip_technical_terms("Classic modelling works.") == "Classic modelling works."

    def test_technical_terms_joined_by_stripping_are_stripped(self):
        assert self.formatter.strip_technical_terms("training API data") == ""

        result = self.formatter.format("We skip training API data here.", ["pappu"], category="food")

        assert self.formatter.TECHNICAL_PATTERN.search(result) is None
        assert result.startswith("Trust me, we skip here.")

    def test_stripping_does_not_leave_dangling_comma(self):
        assert self.formatter.strip_technical_terms("Call the API, then eat.") == "Call the, then eat."
        assert self.formatter.strip_technical_terms("Ask the server, .") == "Ask the."

    def test_closing_replaces_trailing_comma(self):
        result = self.formatter._add_closing("Eat the,", "food")

        assert result == "Eat the. This is authentic Andhra taste that locals love!"

    @pytest.mark.parametrize("region", ["coastal", "guntur", "rayalaseema"])
    def test_every_opener_is_recognized(self, region):
        for opener in OutputFormatter.REGIONAL_OPENERS[region]:
            assert self.formatter.OPENER_PATTERN.match(f"{opener}, biryani is great.")

        assert not self.formatter.OPENER_PATTERN.match("Simplest food is best.")

    def test_existing_closing_is_kept(self):
        result = self.formatter.format("Biryani is authentic celebration food!", category="food")

        assert result.endswith("celebration food!")
        assert "This is authentic Andhra taste" not in result

    @pytest.mark.parametrize("opener_index", range(4))
    @pytest.mark.parametrize("region", [None, "coastal", "guntur", "rayalaseema", "unknown"])
    @pytest.mark.parametrize("content", [
        "",
        "hello",
        "Biryani is served at the festival?",
        "I love the model of this server.",
        "Simple food heals the soul",
        "Trust me, nothing here",
    ])
    def test_formatted_output_satisfies_policy(self, content, region, opener_index):
        formatter = OutputFormatter(selector=nth_choice(opener_index))
        result = formatter.format(content, region=region)

        assert self.formatter.validate(result).is_valid
        assert self.formatter.OPENER_PATTERN.match(result)
        assert result.endswith((".", "!", "?"))

    @pytest.mark.parametrize("opener_index", range(4))
    @pytest.mark.parametrize("region", [None, "coastal", "guntur", "rayalaseema"])
    @pytest.mark.parametrize("category", ["slang", "food", "festival", "emotion"])
    @pytest.mark.parametrize("content", [
        "",
        "Biryani is great.",
        "Biryani is served at the festival?",
        "We skip training API data here,",
    ])
    def test_format_is_idempotent(self, content, category, region, opener_index):
        formatter = OutputFormatter(selector=nth_choice(opener_index))
        once = formatter.format(content, category=category, region=region)

        assert formatter.format(once, category=category, region=region) == once
        assert ",." not in once

    def test_validate_reports_every_issue(self):
        validation = self.formatter.validate("Hello")

        assert not validation.is_valid
        assert validation.issues == [
            OutputFormatter.ISSUE_NO_VOCABULARY,
            OutputFormatter.ISSUE_NO_WARMTH,
            OutputFormatter.ISSUE_NO_PUNCTUATION,
        ]

    def test_validate_technical_only(self):
        validation = self.formatter.validate("Trust me, the API is down, babu!")

        assert validation.issues == [OutputFormatter.ISSUE_TECHNICAL]

    def test_validate_vocabulary_is_whole_word(self):
        validation = self.formatter.validate("Trust me, Karamcheti is nice.")

        assert OutputFormatter.ISSUE_NO_VOCABULARY in validation.issues

    def test_format_error(self):
        result = self.formatter.format_error("Something went wrong.", "food")

        assert result == (
            "Arey, something went wrong. "
            "Try asking about street food, breakfast items, or snacks from different cities!"
        )

    def test_format_error_unknown_category(self):
        result = self.formatter.format_error("Something went wrong.")

        assert result.endswith("I'm here to help with Andhra culture!")

    def test_improve_flow(self):
        assert OutputFormatter.improve_flow("hello .world") == "Hello. World"
        assert OutputFormatter.improve_flow("  spaced   out ,text ") == "Spaced out,text"
