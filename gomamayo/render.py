"""
Human-readable sentences for a classification.

  Gomamayo(3, 2) -> "太鼓公募募集終了: 3項2次のゴママヨです。"
  NotGomamayo    -> "オレンジジュース: ゴママヨではありません。"
"""

from __future__ import annotations

from gomamayo.core.classification import Classification, Gomamayo


def describe(classification: Classification) -> str:
    if isinstance(classification, Gomamayo):
        return f"{classification.terms}項{classification.degree}次のゴママヨです。"
    return "ゴママヨではありません。"


def render_sentence(word: str, classification: Classification) -> str:
    return f"{word}: {describe(classification)}"
