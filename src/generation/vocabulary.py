"""Fixed Telugu vocabulary woven into generated responses."""

CATEGORY_VOCABULARY = {
    "slang": ["babu", "amma", "arey", "baboi", "chinnodu", "pedda", "mama", "mami"],
    "food": ["pappu", "avakaya", "rasam", "biryani", "punugulu", "karam", "pachadi", "gongura"],
    "festival": ["panduga", "prasadam", "pooja", "kalyanam", "sankranti", "ugadi"],
    "emotion": ["santosham", "badha", "kopam", "shantham", "josh", "lite"],
}

ALL_VOCABULARY = list(dict.fromkeys(
    word for words in CATEGORY_VOCABULARY.values() for word in words
))

# Integration style per word class
INTERJECTIONS = ("arey", "baboi")
KINSHIP_WORDS = ("babu", "amma")


def vocabulary_for(category: str) -> list[str]:
    """Vocabulary of a category, the slang list for unknown categories."""
    return CATEGORY_VOCABULARY.get(category, CATEGORY_VOCABULARY["slang"])
