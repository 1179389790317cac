"""
Repetition analysis: fixed scenarios plus hypothesis properties.
"""

from math import prod

import pytest
from hypothesis import given, settings, strategies as st

from gomamayo.core.analyzer import analyze, unwind
from gomamayo.core.classification import NOT_GOMAMAYO, Gomamayo, NotGomamayo
from gomamayo.core.period import minimal_period

units = st.lists(st.sampled_from("ABC"), max_size=24)


@pytest.mark.parametrize(
    "seq, expected",
    [
        ("", NOT_GOMAMAYO),
        ("A", NOT_GOMAMAYO),
        ("AB", NOT_GOMAMAYO),
        ("AAAA", Gomamayo(terms=4, degree=1)),
        ("ABABAB", Gomamayo(terms=3, degree=1)),
        ("AABBAABB", Gomamayo(terms=2, degree=1)),
        ("ABA", NOT_GOMAMAYO),
        ("ママ", Gomamayo(terms=2, degree=1)),
    ],
)
def test_analyze_scenarios(seq, expected):
    assert analyze(seq) == expected


def test_analyze_accepts_lists_of_units():
    assert analyze(["シュ", "ー", "シュ", "ー"]) == Gomamayo(terms=2, degree=1)
    assert analyze([]) == NOT_GOMAMAYO


def test_unwind_chain():
    assert unwind("ABABAB") == ["ABABAB", "AB"]
    assert unwind("AAAA") == ["AAAA", "A"]
    assert unwind("ABC") == ["ABC"]
    assert unwind("") == [""]


@given(units)
def test_totality(seq):
    result = analyze(seq)
    assert isinstance(result, (Gomamayo, NotGomamayo))


@given(st.lists(st.sampled_from("ABC"), max_size=1))
def test_short_sequences_are_not_gomamayo(seq):
    assert analyze(seq) == NOT_GOMAMAYO


@given(units)
def test_unwind_is_consistent_with_classification(seq):
    result = analyze(seq)
    chain = unwind(seq)

    if result == NOT_GOMAMAYO:
        assert len(chain) == 1
        return

    assert result.degree == len(chain) - 1
    factors = [len(a) // len(b) for a, b in zip(chain, chain[1:])]
    assert all(f >= 2 for f in factors)
    assert len(seq) == len(chain[-1]) * prod(factors)
    assert result.terms == factors[-1]
    # the innermost unit does not repeat
    assert analyze(chain[-1]) == NOT_GOMAMAYO
    for parent, unit in zip(chain, chain[1:]):
        assert list(parent) == list(unit) * (len(parent) // len(unit))


@given(units)
def test_degree_is_sub_degree_plus_one(seq):
    result = analyze(seq)
    if result == NOT_GOMAMAYO:
        return
    unit = seq[: minimal_period(seq)]
    sub = analyze(unit)
    sub_degree = 0 if sub == NOT_GOMAMAYO else sub.degree
    assert result.degree == sub_degree + 1


@given(units)
def test_minimal_unit_is_primitive(seq):
    # a minimal unit never repeats itself, so one level is all there is
    result = analyze(seq)
    if result != NOT_GOMAMAYO:
        assert result.degree == 1


@given(st.lists(st.sampled_from("ABC"), min_size=1, max_size=6), st.integers(min_value=2, max_value=5))
@settings(max_examples=200)
def test_repeating_a_primitive_unit(unit, k):
    if minimal_period(unit) != len(unit):
        unit = unit[: minimal_period(unit)]
    assert analyze(unit * k) == Gomamayo(terms=k, degree=1)
