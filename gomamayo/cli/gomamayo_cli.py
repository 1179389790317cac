"""
gomamayo CLI

Examples:
  python3 -m gomamayo.cli.gomamayo_cli ゴマ/マヨ
  python3 -m gomamayo.cli.gomamayo_cli 太鼓公募募集終了:タイコ/コーボ/ボシュー/シューリョー
  python3 -m gomamayo.cli.gomamayo_cli --mode repeat AAAA ABABAB
  printf 'ゴマ/マヨ\\nオレンジ/ジュース\\n' | python3 -m gomamayo.cli.gomamayo_cli --stdin --json

Output (one line per word):
  ゴママヨ: 1項1次のゴママヨです。
  オレンジジュース: ゴママヨではありません。

Exit codes: 0 ok, 2 usage / invalid input (message on stderr).
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from gomamayo.cli_schema import SchemaTriplet, print_schema_triplet
from gomamayo.config import MODES, UNITS, Settings
from gomamayo.core.word_spec import InvalidWordError, WordSpec, parse_word
from gomamayo.report import (
    SCHEMA_DOC,
    SCHEMA_JSON,
    SCHEMA_TAG,
    analysis_payload,
    analyze_words,
)

logger = logging.getLogger("gomamayo")


def _lines(text: str) -> List[str]:
    out: List[str] = []
    for line in text.splitlines():
        s = line.strip()
        if s and not s.startswith("#"):
            out.append(s)
    return out


def _resolve_inputs(args: argparse.Namespace) -> List[str]:
    if args.words:
        return [w.strip() for w in args.words]
    if args.stdin:
        return _lines(sys.stdin.read())
    return _lines(Path(args.file).read_text(encoding="utf-8"))


def _configure_logging(verbose: bool) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False


def _emit(payload: Dict[str, Any], pretty: bool) -> None:
    if pretty:
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        print(json.dumps(payload, ensure_ascii=False))


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="gomamayo",
        description="Classify words as ゴママヨ (項/次) from their readings.",
    )
    ap.add_argument("words", nargs="*", help="表記:ヨミ/ヨミ/... or ヨミ/ヨミ/...")
    ap.add_argument(
        "--mode",
        choices=MODES,
        default=settings.mode,
        help="boundary: overlaps between adjacent readings; repeat: nested repetition (default: %(default)s)",
    )
    ap.add_argument(
        "--units",
        choices=UNITS,
        default=settings.units,
        help="Unit used by --mode repeat (default: %(default)s)",
    )
    ap.add_argument("--stdin", action="store_true", help="Read words from stdin, one per line")
    ap.add_argument("--file", type=str, default=None, help="Read words from a file, one per line")
    ap.add_argument("--json", action="store_true", help="Emit JSON only (pipe-friendly)")
    ap.add_argument("--pretty", action="store_true", help="Pretty-print JSON output")
    ap.add_argument("--schema", action="store_true", help="Print schema tag + schema doc paths and exit")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        settings = Settings.from_env()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    ap = build_parser(settings)
    args = ap.parse_args(argv)
    _configure_logging(args.verbose)

    if args.schema:
        print_schema_triplet(SchemaTriplet(SCHEMA_TAG, SCHEMA_DOC, SCHEMA_JSON))
        return 0

    sources = sum([1 if args.words else 0, 1 if args.stdin else 0, 1 if args.file else 0])
    if sources == 0:
        ap.error("at least one word is required unless --stdin, --file or --schema is used")
    if sources > 1:
        ap.error("provide exactly one input source: WORD... OR --stdin OR --file")

    try:
        texts = _resolve_inputs(args)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: 入力を読み込めませんでした: {e}", file=sys.stderr)
        return 2
    logger.debug("mode=%s units=%s inputs=%d", args.mode, args.units, len(texts))

    words: List[WordSpec] = []
    for text in texts:
        try:
            words.append(parse_word(text))
        except InvalidWordError as e:
            print(f"Error: 単語の読み方を取得できませんでした: {e}", file=sys.stderr)
            return 2

    results = analyze_words(words, mode=args.mode, units=args.units)

    if args.json:
        _emit(analysis_payload(results, mode=args.mode, units=args.units, settings=settings), pretty=bool(args.pretty))
        return 0

    for r in results:
        print(r.sentence)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
