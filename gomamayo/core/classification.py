"""
Gomamayo classification result.

Two cases:
  Gomamayo(terms, degree)  -- matched; rendered as "<terms>項<degree>次"
  NotGomamayo()            -- no match (a normal outcome, not an error)

NOT_GOMAMAYO is the canonical negative instance. Every NotGomamayo compares
equal to it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Union


@dataclass(frozen=True)
class Gomamayo:
    terms: int  # 項
    degree: int  # 次

    def __post_init__(self) -> None:
        if isinstance(self.terms, bool) or not isinstance(self.terms, int):
            raise TypeError(f"terms must be int, got {type(self.terms).__name__}")
        if isinstance(self.degree, bool) or not isinstance(self.degree, int):
            raise TypeError(f"degree must be int, got {type(self.degree).__name__}")
        if self.terms < 1:
            raise ValueError(f"terms must be >= 1, got {self.terms}")
        if self.degree < 1:
            raise ValueError(f"degree must be >= 1, got {self.degree}")

    @property
    def is_gomamayo(self) -> bool:
        return True

    def to_json(self) -> Dict[str, Any]:
        return {"type": "gomamayo", "terms": self.terms, "degree": self.degree}


@dataclass(frozen=True)
class NotGomamayo:
    @property
    def is_gomamayo(self) -> bool:
        return False

    def to_json(self) -> Dict[str, Any]:
        return {"type": "not_gomamayo", "terms": None, "degree": None}


Classification = Union[Gomamayo, NotGomamayo]

NOT_GOMAMAYO = NotGomamayo()

