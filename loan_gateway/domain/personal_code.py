"""Estonian personal identification code (isikukood) decoding and validation

Format: GYYMMDDSSSC (11 digits)
- G: century and gender marker
- YYMMDD: birth date
- SSS: sequence number
- C: checksum digit
"""

from datetime import date
from typing import Protocol

from loan_gateway.domain.exceptions import InvalidPersonalCodeError

PERSONAL_CODE_LENGTH = 11

# Marker digit -> century prefix of the birth year
CENTURY_BY_MARKER = {
    1: 1800,
    2: 1800,
    3: 1900,
    4: 1900,
    5: 2000,
    6: 2000,
    7: 2000,
    8: 2000,
}

FIRST_PASS_WEIGHTS = (1, 2, 3, 4, 5, 6, 7, 8, 9, 1)
SECOND_PASS_WEIGHTS = (3, 4, 5, 6, 7, 8, 9, 1, 2, 3)


class PersonalCodeValidator(Protocol):
    """Checksum/format validator for a national identifier"""

    def is_valid(self, code: str) -> bool: ...


def extract_birth_date(personal_code: str) -> date:
    """
    Decode the birth date encoded in a personal code.

    Raises:
        InvalidPersonalCodeError: If the code is too short, non-numeric,
            has an unknown century marker or an impossible date
    """
    head = personal_code[:7]
    if len(head) < 7 or not (head.isascii() and head.isdigit()):
        raise InvalidPersonalCodeError("Cannot decode birth date from personal code")

    century = CENTURY_BY_MARKER.get(int(head[0]))
    if century is None:
        raise InvalidPersonalCodeError(f"Unknown century marker: {head[0]}")

    year = century + int(head[1:3])
    month = int(head[3:5])
    day = int(head[5:7])

    try:
        return date(year, month, day)
    except ValueError as e:
        raise InvalidPersonalCodeError(f"Invalid birth date in personal code: {e}") from e


def calculate_check_digit(digits: str) -> int:
    """
    Checksum over the first ten digits of a personal code.

    Weighted sum modulo 11; a remainder of 10 triggers a second pass with
    shifted weights, and a second remainder of 10 yields 0.
    """
    values = [int(d) for d in digits[:10]]

    remainder = sum(v * w for v, w in zip(values, FIRST_PASS_WEIGHTS)) % 11
    if remainder < 10:
        return remainder

    remainder = sum(v * w for v, w in zip(values, SECOND_PASS_WEIGHTS)) % 11
    return remainder if remainder < 10 else 0


class EstonianPersonalCodeValidator:
    """Validates Estonian personal codes: length, marker, birth date and checksum"""

    def is_valid(self, code: str) -> bool:
        if not isinstance(code, str):
            return False

        if len(code) != PERSONAL_CODE_LENGTH or not (code.isascii() and code.isdigit()):
            return False

        try:
            extract_birth_date(code)
        except InvalidPersonalCodeError:
            return False

        return calculate_check_digit(code) == int(code[10])
