"""
Analysis seam + JSON output contract (gomamayo-analysis.v1).

analyze_word() runs one WordSpec through the selected analysis;
analysis_payload() wraps a batch of results into the schema-tagged payload
that `gomamayo --json` prints. Schema: docs/schemas/analysis_schema.json.
"""

from __future__ import annotations

import datetime
import hashlib
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

from gomamayo.config import Settings
from gomamayo.core.analyzer import analyze
from gomamayo.core.boundary import Joint, find_joints, summarize_joints
from gomamayo.core.classification import Classification
from gomamayo.core.mora import split_mora
from gomamayo.core.word_spec import WordSpec
from gomamayo.render import render_sentence

logger = logging.getLogger(__name__)

SCHEMA_TAG = "gomamayo-analysis.v1"
SCHEMA_DOC = "docs/analysis_schema.md"
SCHEMA_JSON = "docs/schemas/analysis_schema.json"


@dataclass(frozen=True)
class WordResult:
    word: WordSpec
    mode: str
    units: Tuple[str, ...]
    classification: Classification
    joints: Tuple[Joint, ...] = field(default=())

    @property
    def sentence(self) -> str:
        return render_sentence(self.word.surface, self.classification)

    def to_json(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "word": self.word.surface,
            "readings": list(self.word.readings),
            "units": list(self.units),
            "classification": self.classification.to_json(),
            "sentence": self.sentence,
        }
        if self.mode == "boundary":
            out["joints"] = [j.to_json() for j in self.joints]
        return out


def _units_of(text: str, units: str) -> Tuple[str, ...]:
    return split_mora(text) if units == "mora" else tuple(text)


def analyze_word(word: WordSpec, *, mode: str = "boundary", units: str = "mora") -> WordResult:
    """
    boundary: joints between word.readings (always compared in morae)
    repeat:   repetition analysis over the joined reading, split by `units`
    """
    if mode == "boundary":
        if len(word.readings) < 2:
            logger.warning(
                "%s: readings are not segmented; boundary analysis needs ヨミ/ヨミ (e.g. ゴマ/マヨ)",
                word.surface,
            )
        joints = tuple(find_joints(word.readings))
        result = WordResult(
            word=word,
            mode=mode,
            units=tuple(u for r in word.readings for u in split_mora(r)),
            classification=summarize_joints(joints),
            joints=joints,
        )
    elif mode == "repeat":
        seq = _units_of(word.reading, units)
        result = WordResult(word=word, mode=mode, units=seq, classification=analyze(seq))
    else:
        raise ValueError(f"unknown mode: {mode!r}")

    logger.debug("%s [%s] units=%s -> %s", word.surface, mode, "・".join(result.units), result.classification)
    return result


def _utc_now_z() -> str:
    return datetime.datetime.now(datetime.timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")


def _inputs_hash(mode: str, units: str, words: Sequence[WordSpec]) -> str:
    blob = json.dumps(
        {"mode": mode, "units": units, "words": [[w.surface, list(w.readings)] for w in words]},
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )
    return hashlib.sha256(blob.encode("utf-8")).hexdigest()


def analysis_payload(
    results: Sequence[WordResult],
    *,
    mode: str,
    units: str,
    settings: Optional[Settings] = None,
) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "schema": SCHEMA_TAG,
        "schema_doc": SCHEMA_DOC,
        "mode": mode,
        "units": units,
        "results": [r.to_json() for r in results],
        "meta": {
            "tool": "gomamayo_cli",
            "generated_at": _utc_now_z(),
            "determinism": {
                "inputs_hash": _inputs_hash(mode, units, [r.word for r in results]),
            },
        },
    }
    if settings is not None and settings.add_schema_fields:
        # optional fields; never overwrite
        payload.setdefault("kind", "analysis")
        payload.setdefault("schema_version", settings.schema_version)
    return payload


def analyze_words(words: Sequence[WordSpec], *, mode: str, units: str) -> List[WordResult]:
    return [analyze_word(w, mode=mode, units=units) for w in words]
