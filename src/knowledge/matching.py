import logging
from abc import ABC, abstractmethod
from typing import Optional, Sequence

logger = logging.getLogger(__name__)


class StringMatcher(ABC):
    """Base class for closest-key heuristics used in fallback messages."""

    @abstractmethod
    def closest(self, query: str, candidates: Sequence[str]) -> Optional[str]:
        """Return the candidate closest to the query, or None."""
        pass


class HeuristicMatcher(StringMatcher):
    """
    Cheap containment and prefix scorer.

    An exact case-insensitive match wins outright. Otherwise a candidate
    scores 0.8 when one string contains the other, +0.2 when the first
    characters agree and +0.1 when the lengths differ by at most 2. The first
    candidate to reach the best score keeps it; later candidates replace it
    only with a strictly higher score.
    """

    MIN_SCORE = 0.3

    def closest(self, query: str, candidates: Sequence[str]) -> Optional[str]:
        query_lower = query.lower()
        best_match = None
        best_score = 0.0

        for candidate in candidates:
            candidate_lower = candidate.lower()
            if candidate_lower == query_lower:
                return candidate

            score = self.score(query_lower, candidate_lower)
            if score > best_score and score >= self.MIN_SCORE:
                best_score = score
                best_match = candidate

        return best_match

    @staticmethod
    def score(query: str, candidate: str) -> float:
        score = 0.0
        if query in candidate or candidate in query:
            score = 0.8
        if query[:1] == candidate[:1]:
            score += 0.2
        if abs(len(query) - len(candidate)) <= 2:
            score += 0.1
        return round(score, 2)


def find_closest_match(
    query: str,
    candidates: Sequence[str],
    matcher: Optional[StringMatcher] = None
) -> Optional[str]:
    """
    Find the closest known key for a query.

    Parameters
    ----------
    query : str
        User-supplied key that missed
    candidates : Sequence[str]
        Known keys in scan order
    matcher : StringMatcher, optional
        Strategy to use, HeuristicMatcher by default

    Returns
    -------
    Optional[str]
        Best candidate or None when nothing scores high enough
    """
    return (matcher or HeuristicMatcher()).closest(query, candidates)
