import json
from fractions import Fraction

import pytest

from polysecret.errors import (
    DuplicateAbscissa,
    InsufficientPoints,
    InvalidShareSet,
    InvalidThresholdParameters,
    SecretOverflow,
)
from polysecret.fixtures import LARGE, SIMPLE
from polysecret.lagrange import Point
from polysecret.policy import Settings
from polysecret.shareset import SkippedShare
from polysecret.solver import round_half_away, solve, solve_file, solve_text, to_secret


def _large_secret_closed_form():
    # Lagrange weights at 0 for x = 1..7 are the alternating binomials C(7, i).
    weights = [7, -21, 35, -35, 21, -7, 1]
    ys = [int(LARGE[str(i)]["value"], int(LARGE[str(i)]["base"])) for i in range(1, 8)]
    return sum(w * y for w, y in zip(weights, ys))


def test_simple_share_set():
    solution = solve(SIMPLE)
    assert solution.secret == 3
    assert solution.value == 3
    assert [p.x for p in solution.used] == [1, 2, 3]
    assert solution.points == (Point(1, 4), Point(2, 7), Point(3, 12))
    assert solution.skipped == (SkippedShare(key="6", reason="index exceeds n"),)


def test_shares_above_n_are_not_candidates(caplog):
    document = {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        "3": {"base": "8", "value": "9"},
        "6": {"base": "4", "value": "213"},
    }
    with pytest.raises(InsufficientPoints, match="2 found, 3 required"):
        solve(document)
    assert "Skipping share 6 - index exceeds n=4" in caplog.text


def test_large_share_set_exact():
    solution = solve(LARGE)
    expected = _large_secret_closed_form()
    assert expected == -6290016743746469796
    assert solution.value == expected
    assert solution.secret == expected
    assert [p.x for p in solution.used] == [1, 2, 3, 4, 5, 6, 7]
    assert len(solution.points) == 10


def test_large_share_set_float_delta_is_bounded():
    exact = _large_secret_closed_form()
    solution = solve(LARGE, settings=Settings(precision="float"))
    assert isinstance(solution.value, float)
    # binary64 keeps 53 bits; the shares reach ~2**65 and the weighted terms ~2**66
    assert abs(solution.secret - exact) < 2**22


def test_surplus_shares_are_not_checked():
    document = {
        "keys": {"n": 5, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "10", "value": "7"},
        "3": {"base": "10", "value": "12"},
        "4": {"base": "10", "value": "999"},
        "5": {"base": "10", "value": "0"},
    }
    assert solve(document).secret == 3


def test_bad_share_is_skipped_when_enough_remain():
    document = dict(SIMPLE)
    document["keys"] = {"n": 6, "k": 3}
    document["2"] = {"base": "2", "value": "121"}
    solution = solve(document)
    # remaining points (1,4), (3,12), (6,39) lie on x**2 + 3
    assert solution.secret == 3
    assert [p.x for p in solution.used] == [1, 3, 6]
    assert [s.key for s in solution.skipped] == ["2"]


def test_not_enough_valid_points():
    document = {
        "keys": {"n": 3, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "8", "value": "9"},
        "3": {"base": "10", "value": "12"},
    }
    with pytest.raises(InsufficientPoints, match="2 found, 3 required"):
        solve(document)


def test_threshold_validated_first():
    document = {"keys": {"n": 2, "k": 3}, "1": {"base": "99", "value": "1"}}
    with pytest.raises(InvalidThresholdParameters):
        solve(document)


def test_duplicate_abscissa_from_document():
    # "01" and "1" name the same share index
    document = {
        "keys": {"n": 2, "k": 2},
        "1": {"base": "10", "value": "4"},
        "01": {"base": "10", "value": "5"},
    }
    with pytest.raises(DuplicateAbscissa):
        solve(document)


def test_count_mismatch_is_only_a_warning(caplog):
    solution = solve({"keys": {"n": 3, "k": 1}, "1": {"base": "10", "value": "42"}})
    assert solution.secret == 42
    assert "Declared n=3" in caplog.text


def test_solve_text_and_file(tmp_path):
    text = json.dumps(SIMPLE)
    assert solve_text(text).secret == 3

    path = tmp_path / "shares.json"
    path.write_text(text, encoding="utf-8")
    assert solve_file(path).secret == 3

    with pytest.raises(InvalidShareSet):
        solve_text("")


def test_round_half_away():
    assert round_half_away(7) == 7
    assert round_half_away(Fraction(5, 2)) == 3
    assert round_half_away(Fraction(-5, 2)) == -3
    assert round_half_away(Fraction(7, 3)) == 2
    assert round_half_away(2.5) == 3
    assert round_half_away(-0.4) == 0


def test_to_secret_overflow():
    assert to_secret(2**63 - 1) == 2**63 - 1
    assert to_secret(-(2**63)) == -(2**63)
    with pytest.raises(SecretOverflow) as info:
        to_secret(2**63)
    assert info.value.value == 2**63
    assert info.value.bits == 64
    assert to_secret(2**63, bits=None) == 2**63
    with pytest.raises(SecretOverflow):
        to_secret(float("inf"))
    with pytest.raises(SecretOverflow):
        to_secret(200, bits=8)


def test_overflowing_secret_is_reported_not_zeroed():
    document = {"keys": {"n": 1, "k": 1}, "1": {"base": "16", "value": "1" + "0" * 20}}
    with pytest.raises(SecretOverflow):
        solve(document)
    assert solve(document, settings=Settings(secret_bits=None)).secret == 16**20


def test_to_secret_non_positive_bits_means_unbounded():
    assert to_secret(5, bits=0) == 5
    assert to_secret(2**80, bits=0) == 2**80
    assert to_secret(-(2**80), bits=-8) == -(2**80)


def test_solve_file_rejects_non_utf8(tmp_path):
    path = tmp_path / "shares.json"
    path.write_bytes(b'{"keys": {"n": 1, "k": 1}, "1": {"base": "10", "value": "\xff"}}')
    with pytest.raises(InvalidShareSet, match="not valid UTF-8"):
        solve_file(path)
