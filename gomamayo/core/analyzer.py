"""
Repetition analysis.

A sequence is a gomamayo when it is its minimal unit repeated two or more
times. The unit is then analyzed the same way:

  - unit does not repeat   -> Gomamayo(terms=reps, degree=1)
  - unit is Gomamayo(t, d) -> Gomamayo(terms=t, degree=d + 1)

so terms is the repetition count at the innermost level and degree counts
the levels. The smallest period is always taken, which keeps the result
canonical.

Pure, total over finite sequences (empty included). Units only need ==.
"""

from __future__ import annotations

from typing import List, Sequence

from gomamayo.core.classification import NOT_GOMAMAYO, Classification, Gomamayo
from gomamayo.core.period import minimal_period


def unwind(seq: Sequence) -> List[Sequence]:
    """
    Chain of minimal units: [seq, unit, unit_of_unit, ...].

    Stops at the first element that does not repeat, so the last element is
    never a repetition and len(result) - 1 is the nesting depth.
    """
    chain: List[Sequence] = [seq]
    cur = seq
    while len(cur) > 1:
        p = minimal_period(cur)
        if p == len(cur):
            break
        cur = cur[:p]
        chain.append(cur)
    return chain


def analyze(seq: Sequence) -> Classification:
    chain = unwind(seq)
    degree = len(chain) - 1
    if degree == 0:
        return NOT_GOMAMAYO

    innermost_parent, innermost = chain[-2], chain[-1]
    return Gomamayo(terms=len(innermost_parent) // len(innermost), degree=degree)
