from typing import Sequence

KEY_SEPARATOR = "->"


def canonical_key(cycle: Sequence[str]) -> str:
    """Rotate the cycle to start at its smallest node id and join the ids.

    Direction is preserved: a cycle and its reverse get different keys.
    """
    best = 0
    for i in range(1, len(cycle)):
        if cycle[i] < cycle[best]:
            best = i
    rotated = list(cycle[best:]) + list(cycle[:best])
    return KEY_SEPARATOR.join(rotated)
