"""
Environment configuration.

Read once per CLI invocation (not at import), so tests can monkeypatch the
environment:

  GOMAMAYO_MODE               default --mode   ("boundary" | "repeat")
  GOMAMAYO_UNITS              default --units  ("mora" | "char")
  GOMAMAYO_ADD_SCHEMA_FIELDS  inject kind/schema_version into JSON payloads
  GOMAMAYO_SCHEMA_VERSION     value for schema_version (default 1.0.0)

Unknown values are rejected with ValueError rather than silently ignored.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

MODES = ("boundary", "repeat")
UNITS = ("mora", "char")
DEFAULT_SCHEMA_VERSION = "1.0.0"

_TRUE = {"1", "true", "yes", "on"}


def _choice(env: Mapping[str, str], name: str, choices: Sequence[str], default: str) -> str:
    v = env.get(name, "").strip().lower()
    if not v:
        return default
    if v not in choices:
        raise ValueError(f"{name} must be one of {', '.join(choices)}; got {v!r}")
    return v


@dataclass(frozen=True)
class Settings:
    mode: str = "boundary"
    units: str = "mora"
    add_schema_fields: bool = False
    schema_version: str = DEFAULT_SCHEMA_VERSION

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if env is None else env
        return cls(
            mode=_choice(env, "GOMAMAYO_MODE", MODES, "boundary"),
            units=_choice(env, "GOMAMAYO_UNITS", UNITS, "mora"),
            add_schema_fields=env.get("GOMAMAYO_ADD_SCHEMA_FIELDS", "").strip().lower() in _TRUE,
            schema_version=env.get("GOMAMAYO_SCHEMA_VERSION", "").strip() or DEFAULT_SCHEMA_VERSION,
        )
