"""
gomamayo core: pure analyses, no I/O.

- classification : Gomamayo / NotGomamayo result type
- period         : minimal period of a sequence
- analyzer       : repetition analysis (analyze, unwind)
- mora           : kana reading -> morae
- boundary       : reading-boundary analysis (analyze_readings, find_joints)
- word_spec      : "表記:ヨミ/ヨミ" argument parser
"""

from gomamayo.core.analyzer import analyze, unwind  # noqa: F401
from gomamayo.core.boundary import Joint, analyze_readings, find_joints  # noqa: F401
from gomamayo.core.classification import (  # noqa: F401
    NOT_GOMAMAYO,
    Classification,
    Gomamayo,
    NotGomamayo,
)
from gomamayo.core.mora import split_mora  # noqa: F401
from gomamayo.core.period import minimal_period  # noqa: F401
from gomamayo.core.word_spec import InvalidWordError, WordSpec, parse_word  # noqa: F401
