"""
Minimal period of a finite sequence.

Only the periods that divide the length count: "ABAB" has period 2,
"ABA" has none (its period is its own length).
"""

from __future__ import annotations

from typing import List, Sequence


def prefix_function(seq: Sequence) -> List[int]:
    """
    pi[i] = length of the longest proper prefix of seq[: i + 1] that is also
    a suffix of it. Units are compared with == only.
    """
    pi = [0] * len(seq)
    for i in range(1, len(seq)):
        k = pi[i - 1]
        while k > 0 and seq[i] != seq[k]:
            k = pi[k - 1]
        if seq[i] == seq[k]:
            k += 1
        pi[i] = k
    return pi


def minimal_period(seq: Sequence) -> int:
    """
    Smallest p such that len(seq) % p == 0 and seq == seq[:p] * (len(seq) // p).

    Returns len(seq) when no shorter unit exists (0 for an empty sequence).
    """
    n = len(seq)
    if n == 0:
        return 0
    border = prefix_function(seq)[-1]
    p = n - border
    # longest border gives the smallest period; it only tiles when it divides n
    return p if n % p == 0 else n

