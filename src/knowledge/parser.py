import re
import logging
from pathlib import Path
from typing import Optional, Union

import httpx

from .errors import DocumentReadError
from .models import (
    Dish,
    Festival,
    MoodDishMapping,
    ParsedKnowledge,
    VernacularTerm,
)
from .validator import (
    is_valid_dish,
    is_valid_festival,
    is_valid_mood_mapping,
    is_valid_term,
)

logger = logging.getLogger(__name__)


def read_document(
    source: Union[str, Path],
    timeout: float = 10.0,
    client: Optional[httpx.Client] = None,
) -> str:
    """
    Read the full text of a knowledge document.

    Parameters
    ----------
    source : str or Path
        Filesystem path or http(s) URL
    timeout : float
        Request timeout for URL sources
    client : httpx.Client, optional
        Client to use for URL sources, a short-lived one is created otherwise

    Returns
    -------
    str
        Document text

    Raises
    ------
    DocumentReadError
        If the document cannot be obtained
    """
    source_str = str(source)

    if source_str.startswith(("http://", "https://")):
        try:
            if client is not None:
                response = client.get(source_str, timeout=timeout)
                response.raise_for_status()
                return response.text
            with httpx.Client(timeout=timeout) as http_client:
                response = http_client.get(source_str)
                response.raise_for_status()
                return response.text
        except httpx.HTTPError as e:
            raise DocumentReadError(source_str, str(e)) from e

    try:
        return Path(source_str).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentReadError(source_str, str(e)) from e


class KnowledgeDocumentParser:
    """
    Parse the semi-structured cultural knowledge document into records.

    Parsing is best effort: a section that is missing yields an empty
    collection and a record that cannot be fully extracted is skipped.
    """

    SECTION_MARKERS = {
        "terms": "Andhra Slang Intelligence",
        "dishes": "Andhra Street Food Culture",
        "festivals": "Festivals of Andhra Pradesh",
        "mood_mappings": "Emotional Food Mapping",
    }
    SECTION_TERMINATORS = ("🎛",)

    ARROW = re.compile(r"\s*(?:→|->|=>|\bmaps to\b)\s*", re.IGNORECASE)
    QUOTED = re.compile(r'"([^"\n]+)"')
    NEXT_QUOTED = re.compile(r'"[^"]*"')
    LABEL_PREFIX = r"^[ \t\-*•]*"
    MEANING = re.compile(LABEL_PREFIX + r"(?:Literal|Meaning)\s*:\s*(.+)$", re.IGNORECASE | re.MULTILINE)
    EMOTION = re.compile(LABEL_PREFIX + r"(?:Emotional meaning|Emotion)\s*:\s*(.+)$", re.IGNORECASE | re.MULTILINE)
    USAGE = re.compile(LABEL_PREFIX + r"(?:Usage|Use)\s*:\s*(.+)$", re.IGNORECASE | re.MULTILINE)
    AVOID = re.compile(LABEL_PREFIX + r"Avoid\s+(.+)$", re.IGNORECASE | re.MULTILINE)
    FORMAL = re.compile(r"\bformal\b")

    KNOWN_CITIES = ["Visakhapatnam", "Vijayawada", "Guntur", "Tirupati"]
    FESTIVAL_NAME = re.compile(r"^[A-Z][a-z]+(\s+[A-Z][a-z]+)*$")
    PARENTHETICAL = re.compile(r"\(([^)]+)\)")
    LEADING_PARENTHETICAL = re.compile(r"^\(([^)]+)\)")
    FOODS_PREFIX = re.compile(r"^foods?\s*:\s*", re.IGNORECASE)
    TONE_PREFIX = re.compile(r".*emotional tone\s*:\s*", re.IGNORECASE)

    STREET_FOOD_KEYWORDS = ("coffee", "punugulu")
    HOME_FOOD_KEYWORDS = ("pappu", "rasam", "curd rice")

    def parse(self, raw_text: str) -> ParsedKnowledge:
        """
        Extract all four record collections from document text.

        Parameters
        ----------
        raw_text : str
            Full text of the knowledge document

        Returns
        -------
        ParsedKnowledge
            Terms, dishes, festivals and mood mappings in document order
        """
        text = raw_text.replace("“", '"').replace("”", '"')
        sections = self._split_sections(text)

        parsed = ParsedKnowledge(
            terms=self._parse_terms(sections.get("terms", "")),
            dishes=self._parse_dishes(sections.get("dishes", "")),
            festivals=self._parse_festivals(sections.get("festivals", "")),
            mood_mappings=self._parse_mood_mappings(sections.get("mood_mappings", "")),
        )

        logger.info(f"Parsed knowledge document: {parsed.counts()}")
        return parsed

    def parse_source(
        self,
        source: Union[str, Path],
        timeout: float = 10.0,
        client: Optional[httpx.Client] = None,
    ) -> ParsedKnowledge:
        """Read a document from a path or URL and parse it."""
        return self.parse(read_document(source, timeout=timeout, client=client))

    def _split_sections(self, text: str) -> dict[str, str]:
        """
        Cut the document at its section marker phrases.

        Each section runs from the end of its marker line to the start of the
        next marker (of any kind) or the end of the document.
        """
        boundaries = []
        for key, phrase in self.SECTION_MARKERS.items():
            match = re.search(re.escape(phrase), text)
            if match:
                line_start = text.rfind("\n", 0, match.start()) + 1
                line_end = text.find("\n", match.end())
                boundaries.append((line_start, key, line_end if line_end != -1 else len(text)))

        for terminator in self.SECTION_TERMINATORS:
            for match in re.finditer(re.escape(terminator), text):
                line_start = text.rfind("\n", 0, match.start()) + 1
                boundaries.append((line_start, None, line_start))

        boundaries.sort(key=lambda b: b[0])

        sections = {}
        for i, (_, key, content_start) in enumerate(boundaries):
            if key is None:
                continue
            content_end = len(text)
            for next_start, _, _ in boundaries[i + 1:]:
                if next_start >= content_start:
                    content_end = next_start
                    break
            sections[key] = text[content_start:content_end]

        missing = [k for k in self.SECTION_MARKERS if k not in sections]
        if missing:
            logger.debug(f"Sections without a marker: {missing}")
        return sections

    def _parse_terms(self, content: str) -> list[VernacularTerm]:
        """Extract vernacular terms from the slang section."""
        terms = []
        seen = set()

        for match in self.QUOTED.finditer(content):
            term = match.group(1).strip()
            if not term or term.lower() in seen:
                continue

            candidate = self._parse_term_block(content, term)
            if candidate is None or not is_valid_term(candidate):
                logger.debug(f"Skipping incomplete slang entry: {term}")
                continue

            seen.add(term.lower())
            terms.append(VernacularTerm(**candidate))

        return terms

    def _parse_term_block(self, content: str, term: str) -> Optional[dict]:
        """
        Extract the fields that follow a quoted term.

        Parameters
        ----------
        content : str
            Slang section text
        term : str
            Term as it appears between quotes

        Returns
        -------
        Optional[dict]
            Candidate record or None when meaning or emotion is missing
        """
        anchor = re.search(f'"{re.escape(term)}"', content, re.IGNORECASE)
        if not anchor:
            return None

        block = content[anchor.end():]
        next_quote = self.NEXT_QUOTED.search(block)
        if next_quote:
            block = block[:next_quote.start()]

        meaning_match = self.MEANING.search(block)
        literal_meaning = meaning_match.group(1).strip() if meaning_match else ""

        emotion_match = self.EMOTION.search(block)
        emotional_intent = emotion_match.group(1).strip() if emotion_match else ""

        if not literal_meaning or not emotional_intent:
            return None

        usage_match = self.USAGE.search(block)
        appropriateness = usage_match.group(1).strip() if usage_match else ""

        avoid_match = self.AVOID.search(block)
        if avoid_match:
            avoid = "Avoid " + avoid_match.group(1).strip()
            appropriateness = f"{appropriateness}; {avoid}" if appropriateness else avoid

        formality = "formal" if self.FORMAL.search(block.lower()) else "informal"

        return {
            "term": term,
            "literal_meaning": literal_meaning,
            "emotional_intent": emotional_intent,
            "social_appropriateness": appropriateness or "General use",
            "formality_level": formality,
            "regional_variations": [],
        }

    def _parse_dishes(self, content: str) -> list[Dish]:
        """Extract dishes grouped under city header lines."""
        dishes = []
        current_city = ""

        for line in self._lines(content):
            if "🍗" in line or "Food Principles" in line or "City-wise" in line:
                continue

            has_arrow = bool(self.ARROW.search(line))
            if not has_arrow:
                city = self._match_city(line)
                if city:
                    current_city = city
                continue

            if not current_city:
                continue

            candidate = self._parse_dish_line(line, current_city)
            if candidate is not None and is_valid_dish(candidate):
                dishes.append(Dish(**candidate))
            else:
                logger.debug(f"Skipping unparseable dish line: {line}")

        return dishes

    def _match_city(self, line: str) -> Optional[str]:
        """Return the known city named by a header line, alias stripped."""
        header = self.PARENTHETICAL.sub("", line).strip().lower()
        for city in self.KNOWN_CITIES:
            if city.lower() in header:
                return city
        return None

    def _parse_dish_line(self, line: str, city: str) -> Optional[dict]:
        """
        Parse a ``name → description`` line.

        Parameters
        ----------
        line : str
            Line containing an arrow separator
        city : str
            City header the line sits under

        Returns
        -------
        Optional[dict]
            Candidate dish record
        """
        parts = self.ARROW.split(line)
        if len(parts) != 2:
            return None

        name = parts[0].strip()
        description = parts[1].strip()
        lowered = description.lower()

        spice_level = "medium"
        if "extreme" in lowered:
            spice_level = "extreme"
        elif "high" in lowered or "spicy" in lowered:
            spice_level = "high"
        elif "low" in lowered or "mild" in lowered:
            spice_level = "low"

        best_time = "Evening"
        if "breakfast" in lowered or "morning" in lowered:
            best_time = "Morning"
        elif "lunch" in lowered:
            best_time = "Lunch"
        elif "evening" in lowered:
            best_time = "Evening"

        return {
            "name": name,
            "city": city,
            "spice_level": spice_level,
            "best_time": best_time,
            "description": description,
            "cultural_significance": f"Traditional {city} specialty",
        }

    def _parse_festivals(self, content: str) -> list[Festival]:
        """Scan festival blocks, each opened by a capitalized name line."""
        festivals = []
        current_name = ""
        fields: dict = {}

        for line in self._lines(content):
            if "🎉" in line or "Festivals" in line:
                continue

            if ":" not in line and self.FESTIVAL_NAME.match(line):
                festival = self._flush_festival(current_name, fields)
                if festival is not None:
                    festivals.append(festival)
                current_name = line
                fields = {}
                continue

            if not current_name:
                continue

            lowered = line.lower()
            if self.FOODS_PREFIX.match(line):
                foods = self.FOODS_PREFIX.sub("", line).split(",")
                fields["associated_foods"] = [f.strip() for f in foods if f.strip()]
            elif "emotional tone:" in lowered:
                fields["emotional_tone"] = self.TONE_PREFIX.sub("", line).strip()
            elif "symbolizes" in lowered or "represents" in lowered:
                fields.setdefault("food_symbolism", line)
            elif "festival" in lowered or "worship" in lowered or "celebration" in lowered:
                fields.setdefault("cultural_meaning", line)

        festival = self._flush_festival(current_name, fields)
        if festival is not None:
            festivals.append(festival)

        return festivals

    def _flush_festival(self, name: str, fields: dict) -> Optional[Festival]:
        """Close a festival block, applying defaults for optional lines."""
        if not name or not fields.get("cultural_meaning") or not fields.get("associated_foods"):
            return None

        candidate = {
            "name": name,
            "cultural_meaning": fields["cultural_meaning"],
            "associated_foods": fields["associated_foods"],
            "food_symbolism": fields.get("food_symbolism")
            or f"Traditional foods representing the spirit of {name}",
            "emotional_tone": fields.get("emotional_tone") or "Celebratory",
        }
        if not is_valid_festival(candidate):
            logger.debug(f"Skipping invalid festival block: {name}")
            return None
        return Festival(**candidate)

    def _parse_mood_mappings(self, content: str) -> list[MoodDishMapping]:
        """Extract ``mood → food (logic)`` lines."""
        mappings = []
        lines = self._lines(content)

        for i, line in enumerate(lines):
            if "❤" in line or "Emotional" in line or "Core Belief" in line or "Mood" in line:
                continue
            if not self.ARROW.search(line):
                continue

            parts = self.ARROW.split(line)
            if len(parts) != 2:
                continue

            mood = parts[0].strip().lower()
            food_part = parts[1].strip()
            food = food_part.split("(")[0].strip()

            logic = ""
            inline = self.PARENTHETICAL.search(food_part)
            if inline:
                logic = inline.group(1).strip()
            elif i + 1 < len(lines):
                following = self.LEADING_PARENTHETICAL.match(lines[i + 1])
                if following:
                    logic = following.group(1).strip()
            if not logic:
                logic = f"{food} is culturally appropriate for {mood} feelings"

            candidate = {
                "mood": mood,
                "recommended_food": food,
                "emotional_logic": logic,
                "home_or_street": self._infer_home_or_street(food),
            }
            if is_valid_mood_mapping(candidate):
                mappings.append(MoodDishMapping(**candidate))

        return mappings

    def _infer_home_or_street(self, food: str) -> str:
        lowered = food.lower()
        if any(kw in lowered for kw in self.STREET_FOOD_KEYWORDS):
            return "street"
        if any(kw in lowered for kw in self.HOME_FOOD_KEYWORDS):
            return "home"
        return "both"

    @staticmethod
    def _lines(content: str) -> list[str]:
        return [line.strip() for line in content.split("\n") if line.strip()]
