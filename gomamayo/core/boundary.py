"""
Boundary analysis: the gomamayo of the word-play community.

A word is given as the readings of its morphemes, in order. It is a
gomamayo when the end of one reading is repeated at the start of the next:

  ゴマ|マヨ          -> one joint, overlap マ        -> 1項1次
  ギンコー|コーザ    -> one joint, overlap コ・ー    -> 1項2次
  タイコ|コーボ|ボシュー|シューリョー
                     -> three joints, longest シュ・ー -> 3項2次

terms (項) is the number of joints that overlap; degree (次) is the
longest overlap, counted in morae. Readings are split into morae before
comparison (see gomamayo.core.mora).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Sequence, Tuple

from gomamayo.core.classification import NOT_GOMAMAYO, Classification, Gomamayo
from gomamayo.core.mora import Reading, as_morae


@dataclass(frozen=True)
class Joint:
    index: int  # joint between readings[index] and readings[index + 1]
    left: Tuple[str, ...]
    right: Tuple[str, ...]
    overlap: Tuple[str, ...]

    @property
    def degree(self) -> int:
        return len(self.overlap)

    def to_json(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "left": "".join(self.left),
            "right": "".join(self.right),
            "overlap": list(self.overlap),
            "degree": self.degree,
        }


def longest_overlap(left: Sequence[str], right: Sequence[str]) -> int:
    """Largest d with left[-d:] == right[:d] (0 when none)."""
    for d in range(min(len(left), len(right)), 0, -1):
        if tuple(left[len(left) - d :]) == tuple(right[:d]):
            return d
    return 0


def find_joints(readings: Sequence[Reading]) -> List[Joint]:
    morae = [as_morae(r) for r in readings]
    joints: List[Joint] = []
    for i, (left, right) in enumerate(zip(morae, morae[1:])):
        d = longest_overlap(left, right)
        joints.append(Joint(index=i, left=left, right=right, overlap=right[:d]))
    return joints


def summarize_joints(joints: Sequence[Joint]) -> Classification:
    hits = [j for j in joints if j.overlap]
    if not hits:
        return NOT_GOMAMAYO
    return Gomamayo(terms=len(hits), degree=max(j.degree for j in hits))


def analyze_readings(readings: Sequence[Reading]) -> Classification:
    return summarize_joints(find_joints(readings))
