import random
from typing import Callable, Optional, Sequence, TypeVar

from configs import Settings, get_settings

T = TypeVar("T")

PhraseSelector = Callable[[Sequence[T]], T]


def random_choice(options: Sequence[T]) -> T:
    return random.choice(options)


def first_choice(options: Sequence[T]) -> T:
    return options[0]


def get_phrase_selector(settings: Optional[Settings] = None) -> PhraseSelector:
    """Selector configured for the process, random unless deterministic output is set."""
    settings = settings or get_settings()
    return first_choice if settings.deterministic_phrases else random_choice


def pick_distinct(options: Sequence[T], count: int, selector: PhraseSelector) -> list[T]:
    """
    Pick up to ``count`` different options.

    Parameters
    ----------
    options : Sequence
        Candidates, picked without repetition
    count : int
        Maximum number of picks
    selector : PhraseSelector
        Strategy choosing one element of the remaining pool

    Returns
    -------
    list
        Picked options in pick order
    """
    pool = list(options)
    picked = []
    while pool and len(picked) < count:
        choice = selector(pool)
        pool.remove(choice)
        picked.append(choice)
    return picked
