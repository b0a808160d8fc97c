"""
Shared helpers for the folding tests.

`enumerate_pairings` lists every set of disjoint Watson-Crick pairs of a short
sequence, so exhaustive optima can be compared with the DP results.
"""
import random
from typing import Iterator, List, Optional, Tuple

import pytest

from rnafoldml.rules import can_pair


def _enumerate_pairings(seq: str) -> Iterator[Tuple[Optional[int], ...]]:
    n = len(seq)
    pairing: List[Optional[int]] = [None] * n

    def rec(i: int):
        if i == n:
            yield tuple(pairing)
            return
        if pairing[i] is not None:
            yield from rec(i + 1)
            return

        yield from rec(i + 1)
        for j in range(i + 1, n):
            if pairing[j] is None and can_pair(seq[i], seq[j]):
                pairing[i], pairing[j] = j, i
                yield from rec(i + 1)
                pairing[i], pairing[j] = None, None

    yield from rec(0)


@pytest.fixture
def enumerate_pairings():
    return _enumerate_pairings


@pytest.fixture
def random_sequences():
    """
    Provides a factory of reproducible random RNA sequences.
    """
    def make(count: int, min_len: int, max_len: int, seed: int = 7) -> List[str]:
        rng = random.Random(seed)
        return [
            ''.join(rng.choices("ACGU", k=rng.randint(min_len, max_len)))
            for _ in range(count)
        ]

    return make
