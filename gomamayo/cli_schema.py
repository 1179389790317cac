"""
`--schema` line: "<tag> <doc_md> <schema_json>", three single-space separated
tokens, printed with one trailing newline.

    gomamayo-analysis.v1 docs/analysis_schema.md docs/schemas/analysis_schema.json
"""

from __future__ import annotations

from dataclasses import dataclass


def _token(name: str, s: str) -> str:
    if not isinstance(s, str):
        raise TypeError(f"{name} must be str, got {type(s).__name__}")
    if s == "" or any(ch.isspace() for ch in s):
        raise ValueError(f"{name} must be a single non-empty token: {s!r}")
    return s


@dataclass(frozen=True)
class SchemaTriplet:
    tag: str
    doc_md: str
    schema_json: str

    def __post_init__(self) -> None:
        _token("tag", self.tag)
        _token("doc_md", self.doc_md)
        _token("schema_json", self.schema_json)

    def line(self) -> str:
        return f"{self.tag} {self.doc_md} {self.schema_json}"

    @classmethod
    def parse(cls, line: str) -> "SchemaTriplet":
        if not isinstance(line, str):
            raise TypeError(f"line must be str, got {type(line).__name__}")
        parts = line[:-1].split(" ") if line.endswith("\n") else line.split(" ")
        if len(parts) != 3:
            raise ValueError(f"expected exactly 3 fields separated by single spaces: {line!r}")
        return cls(*parts)


def print_schema_triplet(triplet: SchemaTriplet) -> None:
    print(triplet.line(), flush=True)
