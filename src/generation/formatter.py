import re
import logging
from typing import Optional, Sequence

from pydantic import BaseModel, Field

from .selection import PhraseSelector, get_phrase_selector
from .vocabulary import ALL_VOCABULARY, INTERJECTIONS, KINSHIP_WORDS, vocabulary_for

logger = logging.getLogger(__name__)


class FormatValidation(BaseModel):
    """Result of checking a text against the output policy."""

    is_valid: bool
    issues: list[str] = Field(default_factory=list)


def _word_pattern(words: Sequence[str]) -> re.Pattern:
    alternatives = "|".join(re.escape(w) for w in words)
    return re.compile(rf"\b(?:{alternatives})\b", re.IGNORECASE)


def _opener_pattern(openers: dict[str, list[str]], extra: Sequence[str]) -> re.Pattern:
    phrases = {phrase.lower() for options in openers.values() for phrase in options} | set(extra)
    # Longest first so "honestly speaking" wins over "honestly"
    alternatives = "|".join(re.escape(p) for p in sorted(phrases, key=len, reverse=True))
    return re.compile(rf"^(?:{alternatives})\b", re.IGNORECASE)


class OutputFormatter:
    """
    Final pass over composed prose.

    Every formatted response starts with a regional opener, carries at least
    one Telugu word, has no technical jargon and ends with a cultural closing
    sentence. ``validate`` checks any text against the same policy.
    """

    REGIONAL_OPENERS = {
        "coastal": ["Trust me", "You know what", "Let me tell you", "Honestly speaking"],
        "guntur": ["Pakka guarantee", "Believe me", "No doubt about it", "Fire ga cheppali ante"],
        "rayalaseema": ["Simple ga cheppali ante", "Traditional ga", "Straight forward ga", "Honestly"],
    }
    OPENER_PATTERN = _opener_pattern(REGIONAL_OPENERS, ["arey", "baboi"])

    CLOSINGS = {
        "slang": [
            "That's how we express ourselves in Andhra culture!",
            "This is authentic Andhra way of speaking!",
            "That's the beauty of our Telugu expressions!",
        ],
        "food": [
            "This is authentic Andhra taste that locals love!",
            "That's real Andhra flavor for you!",
            "This is what makes Andhra cuisine special!",
        ],
        "festival": [
            "That's the beauty of Andhra festival traditions!",
            "This is how we celebrate in Andhra culture!",
            "That's the richness of our cultural heritage!",
        ],
        "emotion": [
            "That's the wisdom of Andhra food culture!",
            "This is how we heal through food in our tradition!",
            "That's the emotional connection we have with food!",
        ],
    }
    CLOSING_PATTERN = re.compile(
        r"\b(that's|this is|beauty|authentic|traditional|culture|heritage)\b.*[!.]$",
        re.IGNORECASE,
    )

    TECHNICAL_TERMS = [
        "API", "database", "dataset", "training data", "algorithm", "model",
        "implementation", "system", "interface", "component", "module",
        "configuration", "parameter", "function", "method", "class",
        "server", "client", "endpoint", "request", "response",
        "JSON", "XML", "HTTP", "REST", "GraphQL",
    ]
    TECHNICAL_PATTERN = _word_pattern(TECHNICAL_TERMS)
    VOCABULARY_PATTERN = _word_pattern(ALL_VOCABULARY)

    WARMTH_MARKERS = [
        "trust me", "you know", "let me tell", "pakka", "believe", "honestly",
        "no doubt", "fire ga", "simple", "traditional ga", "straight forward",
        "arey", "baboi",
    ]

    ERROR_OPENERS = ["Arey", "Baboi", "Sorry ra"]
    ERROR_SUGGESTIONS = {
        "slang": "Try asking about greeting expressions, emotional expressions, or casual conversation!",
        "food": "Try asking about street food, breakfast items, or snacks from different cities!",
        "festival": "Try asking about Ugadi, Sankranti, or Dussehra celebrations!",
        "emotion": "Try asking about food for when you're happy, sad, tired, or excited!",
    }

    ISSUE_NO_VOCABULARY = "Response should include Telugu vocabulary"
    ISSUE_TECHNICAL = "Response contains technical implementation details"
    ISSUE_NO_WARMTH = "Response should have warm, friendly tone"
    ISSUE_NO_PUNCTUATION = "Response should end with proper punctuation"

    def __init__(self, selector: Optional[PhraseSelector] = None):
        self.selector = selector or get_phrase_selector()

    def format(
        self,
        content: str,
        vocabulary_words: Sequence[str] = (),
        category: str = "slang",
        region: Optional[str] = None,
    ) -> str:
        """
        Apply the output policy to composed content.

        Parameters
        ----------
        content : str
            Composed prose
        vocabulary_words : Sequence[str]
            Telugu words chosen for this response, unknown words are ignored
        category : str
            Category whose closing sentences apply
        region : str, optional
            Region whose openers apply, coastal by default

        Returns
        -------
        str
            Formatted text
        """
        formatted = self._add_opening(content.strip(), region)
        formatted = self._ensure_vocabulary(formatted, vocabulary_words, category)
        formatted = self.strip_technical_terms(formatted)
        formatted = self._add_closing(formatted, category)
        return self.improve_flow(formatted)

    def validate(self, content: str) -> FormatValidation:
        """
        Check a text against the output policy.

        All failing checks are reported, not only the first.
        """
        issues = []
        lowered = content.lower()

        if not self.VOCABULARY_PATTERN.search(content):
            issues.append(self.ISSUE_NO_VOCABULARY)

        if self.TECHNICAL_PATTERN.search(content):
            issues.append(self.ISSUE_TECHNICAL)

        if not any(marker in lowered for marker in self.WARMTH_MARKERS):
            issues.append(self.ISSUE_NO_WARMTH)

        if not content.strip().endswith((".", "!", "?")):
            issues.append(self.ISSUE_NO_PUNCTUATION)

        return FormatValidation(is_valid=not issues, issues=issues)

    def format_error(self, message: str, category: Optional[str] = None) -> str:
        opener = self.selector(self.ERROR_OPENERS)
        formatted = f"{opener}, {self._lower_first(message.strip())}"
        suggestion = self.ERROR_SUGGESTIONS.get(
            category,
            "Try asking about slang, food, festivals, or emotions - I'm here to help with Andhra culture!",
        )
        return self.improve_flow(f"{formatted} {suggestion}")

    def _add_opening(self, content: str, region: Optional[str]) -> str:
        if self.OPENER_PATTERN.match(content):
            return content
        openers = self.REGIONAL_OPENERS.get(region or "coastal", self.REGIONAL_OPENERS["coastal"])
        return f"{self.selector(openers)}, {self._lower_first(content)}"

    def _ensure_vocabulary(self, content: str, words: Sequence[str], category: str) -> str:
        known = [w.lower() for w in words if w.lower() in ALL_VOCABULARY]
        if not known:
            known = vocabulary_for(category)

        if _word_pattern(known).search(content):
            return content

        word = known[0]
        if word in INTERJECTIONS:
            return f"{word.capitalize()}, {self._lower_first(content)}"
        if not content.endswith((".", "!", "?")):
            content = content.rstrip(" ,;:") + "."
        if word in KINSHIP_WORDS:
            return f"{content} That's what we call it, {word}!"
        return f"{content} We call it {word} in Telugu."

    def strip_technical_terms(self, content: str) -> str:
        cleaned = content
        # Removing a term can join its neighbours into another term
        while True:
            stripped = self.TECHNICAL_PATTERN.sub("", cleaned)
            stripped = re.sub(r"\s+", " ", stripped)
            stripped = re.sub(r"\s+([,.!?])", r"\1", stripped)
            stripped = re.sub(r"[,;:]+([.!?])", r"\1", stripped).strip()
            if stripped == cleaned:
                return stripped
            cleaned = stripped

    def _add_closing(self, content: str, category: str) -> str:
        if self.CLOSING_PATTERN.search(content):
            return content

        closing = self.selector(self.CLOSINGS.get(category, self.CLOSINGS["slang"]))
        if not content.endswith((".", "!", "?")):
            content = content.rstrip(" ,;:") + "."
        return f"{content} {closing}"

    @staticmethod
    def improve_flow(content: str) -> str:
        """Normalize spacing and sentence capitalization."""
        improved = re.sub(r"\s+", " ", content)
        improved = re.sub(r"\s+([,.!?])", r"\1", improved)
        improved = re.sub(r"([,.!?])([A-Z])", r"\1 \2", improved)
        improved = re.sub(r"([.!?])\s*([a-z])", lambda m: f"{m.group(1)} {m.group(2).upper()}", improved)
        improved = improved.strip()
        if improved:
            improved = improved[0].upper() + improved[1:]
        return improved

    @staticmethod
    def _lower_first(text: str) -> str:
        if not text or re.match(r"I\b", text):
            return text
        return text[0].lower() + text[1:]
