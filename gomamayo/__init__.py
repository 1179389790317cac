"""
gomamayo: detect ゴママヨ word play.

Layout:
- gomamayo/core  : pure analyses (repetition, reading boundaries, morae)
- gomamayo/cli   : command line tool
- gomamayo/tests : tests

Two analyses share one result type:

    >>> from gomamayo import analyze, analyze_readings
    >>> analyze("ABABAB")
    Gomamayo(terms=3, degree=1)
    >>> analyze_readings(["ゴマ", "マヨ"])
    Gomamayo(terms=1, degree=1)
"""

__version__ = "0.1.0"

# Convenience re-exports:
from gomamayo.core.analyzer import analyze, unwind  # noqa: F401,E402
from gomamayo.core.boundary import analyze_readings, find_joints  # noqa: F401,E402
from gomamayo.core.classification import (  # noqa: F401,E402
    NOT_GOMAMAYO,
    Classification,
    Gomamayo,
    NotGomamayo,
)
from gomamayo.render import render_sentence  # noqa: F401,E402
