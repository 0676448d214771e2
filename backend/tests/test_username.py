"""
Username derivation tests.
"""
import pytest

from socialfeed.shared.utils.username import base_username, next_available_username


@pytest.mark.parametrize(
    "first_name,last_name,expected",
    [
        ("Ada", "Smith", "adasmith"),
        ("Mary Jane", "Watson-Parker", "maryjanewatsonparker"),
        ("R2", "D2", "r2d2"),
        ("Zoë", "O'Neil", "zooneil"),
        ("!!", "??", "user"),
    ],
)
def test_base_username(first_name, last_name, expected):
    assert base_username(first_name, last_name) == expected


def test_free_base_is_used_as_is():
    assert next_available_username("adasmith", set()) == "adasmith"
    assert next_available_username("adasmith", {"adasmithers"}) == "adasmith"


def test_taken_base_gets_smallest_free_suffix():
    assert next_available_username("adasmith", {"adasmith"}) == "adasmith1"
    assert next_available_username("adasmith", {"adasmith", "adasmith1"}) == "adasmith2"


def test_suffix_fills_gaps():
    taken = {"adasmith", "adasmith1", "adasmith3"}

    assert next_available_username("adasmith", taken) == "adasmith2"
