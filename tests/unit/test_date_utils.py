"""Unit tests for date utilities"""

from datetime import date
from loan_gateway.utils.date_utils import calculate_age


def test_calculate_age_before_and_after_birthday():
    birth = date(1990, 6, 15)
    assert calculate_age(birth, date(2024, 6, 14)) == 33
    assert calculate_age(birth, date(2024, 6, 15)) == 34
    assert calculate_age(birth, date(2024, 12, 31)) == 34


def test_calculate_age_leap_day():
    """Leap-day birthday counts from 1 March in non-leap years"""
    birth = date(2000, 2, 29)
    assert calculate_age(birth, date(2018, 2, 28)) == 17
    assert calculate_age(birth, date(2018, 3, 1)) == 18
    assert calculate_age(birth, date(2020, 2, 29)) == 20


def test_calculate_age_same_day():
    assert calculate_age(date(2024, 6, 1), date(2024, 6, 1)) == 0
