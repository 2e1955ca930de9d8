"""Date manipulation utilities"""

from datetime import date


def calculate_age(birth_date: date, on_date: date) -> int:
    """Whole years elapsed between birth_date and on_date"""
    had_birthday = (on_date.month, on_date.day) >= (birth_date.month, birth_date.day)
    return on_date.year - birth_date.year - (0 if had_birthday else 1)
