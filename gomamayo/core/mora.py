"""
Mora segmentation of a kana reading.

A small kana (ャ, ュ, ョ, ァ, ...) belongs to the kana before it, so
"シュー" is two morae (シュ, ー) and "ジュース" is three. The long vowel
mark, sokuon and ン count as morae on their own.

Anything that is not kana passes through one character per unit, which
makes the function usable on plain strings too.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple, Union

SMALL_KANA = frozenset("ァィゥェォャュョヮぁぃぅぇぉゃゅょゎ")

Reading = Union[str, Sequence[str]]


def split_mora(reading: str) -> Tuple[str, ...]:
    out: List[str] = []
    for ch in reading:
        if ch in SMALL_KANA and out and out[-1][-1] not in SMALL_KANA:
            out[-1] += ch
        else:
            out.append(ch)
    return tuple(out)


def as_morae(reading: Reading) -> Tuple[str, ...]:
    """
    Accept either a kana string (split here) or an already segmented
    sequence of morae (taken as is).
    """
    if isinstance(reading, str):
        return split_mora(reading)
    return tuple(reading)
