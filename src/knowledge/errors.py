class KnowledgeError(Exception):
    """Base error for the knowledge layer."""


class DocumentReadError(KnowledgeError):
    """The knowledge document could not be obtained."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to read knowledge document {source}: {reason}")
