"""Unit tests for personal code decoding and checksum validation"""

import pytest
from datetime import date
from conftest import (
    BAD_CHECKSUM_CODE,
    ELDERLY_CODE,
    SEGMENT_1_CODE,
    SEGMENT_2_CODE,
    SEGMENT_3_CODE,
    UNDERAGE_CODE,
)
from loan_gateway.domain.exceptions import InvalidPersonalCodeError
from loan_gateway.domain.personal_code import (
    EstonianPersonalCodeValidator,
    calculate_check_digit,
    extract_birth_date,
)


@pytest.fixture
def validator() -> EstonianPersonalCodeValidator:
    return EstonianPersonalCodeValidator()


@pytest.mark.parametrize(
    "code",
    [
        SEGMENT_1_CODE,
        "49002010976",
        "49002010987",
        "49002010998",
        SEGMENT_2_CODE,
        SEGMENT_3_CODE,
        UNDERAGE_CODE,
        ELDERLY_CODE,
    ],
)
def test_valid_codes(validator: EstonianPersonalCodeValidator, code: str):
    assert validator.is_valid(code) is True


@pytest.mark.parametrize(
    "code",
    [
        BAD_CHECKSUM_CODE,
        "4900201096",  # too short
        "490020109655",  # too long
        "4900201096a",  # non-digit
        "09002010965",  # unknown century marker
        "99002010965",  # unknown century marker
        "49002300965",  # 30 February
        "",
    ],
)
def test_invalid_codes(validator: EstonianPersonalCodeValidator, code: str):
    assert validator.is_valid(code) is False


def test_non_string_is_invalid(validator: EstonianPersonalCodeValidator):
    assert validator.is_valid(None) is False
    assert validator.is_valid(49002010965) is False


def test_check_digit_first_pass():
    """Weights 1..9,1 over the first ten digits, modulo 11"""
    assert calculate_check_digit("4900201096") == 5


def test_check_digit_second_pass():
    """First pass remainder of 10 switches to weights 3..9,1,2,3"""
    assert calculate_check_digit("4900201004") == 6
    assert calculate_check_digit(ELDERLY_CODE) == 5


def test_extract_birth_date_centuries():
    assert extract_birth_date("19002010965") == date(1890, 2, 1)
    assert extract_birth_date("29912310965") == date(1899, 12, 31)
    assert extract_birth_date("39002010965") == date(1990, 2, 1)
    assert extract_birth_date("49002010965") == date(1990, 2, 1)
    assert extract_birth_date("50501010965") == date(2005, 1, 1)
    assert extract_birth_date("61003150965") == date(2010, 3, 15)
    assert extract_birth_date("70001010965") == date(2000, 1, 1)
    assert extract_birth_date("82402290965") == date(2024, 2, 29)


@pytest.mark.parametrize("code", ["", "49002", "49002x10965", "09002010965", "49013010965"])
def test_extract_birth_date_undecodable(code: str):
    with pytest.raises(InvalidPersonalCodeError):
        extract_birth_date(code)
