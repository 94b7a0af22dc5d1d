import logging
import random
from typing import Iterable, List, Optional

logger = logging.getLogger(__name__)

Group = List[str]

GROUP_SIZES = (1, 2, 3)


def shuffle_participants(identifiers: Iterable[str], rng=None) -> List[str]:
    """
    Return a shuffled copy of the identifiers (Fisher-Yates).

    Args:
        identifiers: Participant identifiers. Never modified.
        rng: Anything with randint(a, b), e.g. random.Random(seed).
            Defaults to the process-wide random module.
    """
    if rng is None:
        rng = random
    arr = list(identifiers)

    for i in range(len(arr) - 1, 0, -1):
        j = rng.randint(0, i)
        arr[i], arr[j] = arr[j], arr[i]

    return arr


def partition(ordered: List[str], allow_triple: bool = True) -> List[Group]:
    """Split an already-ordered list into groups, left to right."""
    groups = []
    n = len(ordered)
    i = 0
    while i < n:
        remaining = n - i
        if remaining == 3 and allow_triple:
            groups.append(ordered[i:i + 3])
            i += 3
        elif remaining == 1:
            # Last one left gets a bye
            groups.append([ordered[i]])
            i += 1
        else:
            groups.append(ordered[i:i + 2])
            i += 2
    return groups


def make_groups(
    identifiers: Iterable[str],
    allow_triple: bool = True,
    rng=None
) -> List[Group]:
    """
    Randomly pair up participants for one round.

    Every identifier lands in exactly one group of 2. The tail may instead
    be a group of 3 (only when allow_triple and exactly 3 remain) or a
    single-member bye.

    Returns:
        Groups in the order they were formed.
    """
    shuffled = shuffle_participants(identifiers, rng=rng)
    groups = partition(shuffled, allow_triple=allow_triple)
    logger.debug(f"Formed {len(groups)} groups from {len(shuffled)} participants")
    return groups


def find_bye(groups: List[Group]) -> Optional[str]:
    """Identifier of the participant sitting out, if any."""
    for group in groups:
        if len(group) == 1:
            return group[0]
    return None
