"""
Uniform in-place shuffling of search results.
"""
import random
from typing import List, Optional, TypeVar

T = TypeVar("T")


def fisher_yates_shuffle(items: List[T], rng: Optional[random.Random] = None) -> List[T]:
    """
    Shuffle a list in place so every ordering is equally likely.

    Walks from the last index down to 1, swapping each slot with a uniformly
    drawn index in [0, i].

    Args:
        items: List to shuffle (mutated)
        rng: Random source; defaults to the module-level generator

    Returns:
        The same list, for chaining
    """
    source = rng if rng is not None else random
    for i in range(len(items) - 1, 0, -1):
        j = source.randint(0, i)
        items[i], items[j] = items[j], items[i]
    return items
