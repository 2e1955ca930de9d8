"""Loan decision engine - core business logic for loan pre-approval"""

import logging
from datetime import date
from typing import Callable, Optional, Sequence, Tuple

from loan_gateway.domain import constants
from loan_gateway.domain.exceptions import (
    InvalidAgeError,
    InvalidCountryError,
    InvalidLoanAmountError,
    InvalidLoanPeriodError,
    InvalidPersonalCodeError,
    NoValidLoanError,
)
from loan_gateway.domain.models import Decision, LoanRequest
from loan_gateway.domain.personal_code import (
    EstonianPersonalCodeValidator,
    PersonalCodeValidator,
    extract_birth_date,
)
from loan_gateway.utils.date_utils import calculate_age

CreditSegments = Sequence[Tuple[int, int, int]]


def credit_modifier(personal_code: str, segments: CreditSegments = constants.CREDIT_SEGMENTS) -> int:
    """
    Map the last four digits of a personal code to a credit modifier.

    Default segments:
    - 0000 - 3000: 100 (segment 1)
    - 3001 - 6000: 300 (segment 2)
    - 6001 - 9999: 1000 (segment 3)
    - anything else: 0 (existing debt)
    """
    try:
        segment_id = int(personal_code[-4:])
    except ValueError as e:
        raise InvalidPersonalCodeError("Cannot derive credit segment from personal code") from e

    for low, high, modifier in segments:
        if low <= segment_id <= high:
            return modifier

    return constants.DEBT_CREDIT_MODIFIER


def life_expectancy(country: str) -> int:
    """Expected lifetime for a country, default when the country is unknown"""
    return constants.LIFE_EXPECTANCY.get(country, constants.DEFAULT_LIFE_EXPECTANCY)


def credit_score(credit_modifier: int, loan_amount: int, loan_period: int) -> float:
    """credit score = ((credit modifier / loan amount) * loan period) / 10"""
    return credit_modifier / loan_amount * loan_period / 10


def find_max_approved_amount(credit_modifier: int, loan_period: int) -> Optional[int]:
    """
    Largest amount whose credit score clears the threshold for the period.

    Scans from the maximum amount down in fixed steps, so the first hit is
    the maximum. Returns None when even the minimum amount is rejected.
    """
    for amount in range(
        constants.MAXIMUM_LOAN_AMOUNT,
        constants.MINIMUM_LOAN_AMOUNT - 1,
        -constants.LOAN_AMOUNT_STEP,
    ):
        if credit_score(credit_modifier, amount, loan_period) >= constants.CREDIT_SCORE_THRESHOLD:
            return amount

    return None


def find_alternative_period(credit_modifier: int, requested_period: int) -> Optional[int]:
    """Smallest period above the requested one that admits an approved amount"""
    for period in range(requested_period + 1, constants.MAXIMUM_LOAN_PERIOD + 1):
        if find_max_approved_amount(credit_modifier, period) is not None:
            return period

    return None


def verify_inputs(validator: PersonalCodeValidator, personal_code: str, loan_amount: int, loan_period: int) -> None:
    """
    Check personal code, amount and period, in that order.

    Raises:
        InvalidPersonalCodeError: Checksum validation failed
        InvalidLoanAmountError: Amount outside the allowed bounds
        InvalidLoanPeriodError: Period outside the allowed bounds
    """
    if not validator.is_valid(personal_code):
        raise InvalidPersonalCodeError("Invalid personal ID code!")

    if not constants.MINIMUM_LOAN_AMOUNT <= loan_amount <= constants.MAXIMUM_LOAN_AMOUNT:
        raise InvalidLoanAmountError(
            f"Invalid loan amount! Loan amount must be between "
            f"{constants.MINIMUM_LOAN_AMOUNT} and {constants.MAXIMUM_LOAN_AMOUNT}€"
        )

    if not constants.MINIMUM_LOAN_PERIOD <= loan_period <= constants.MAXIMUM_LOAN_PERIOD:
        raise InvalidLoanPeriodError(
            f"Invalid loan period! Loan period must be between "
            f"{constants.MINIMUM_LOAN_PERIOD} and {constants.MAXIMUM_LOAN_PERIOD} months"
        )


def verify_country(country: str) -> None:
    if country not in constants.VALID_COUNTRIES:
        allowed = ", ".join(sorted(constants.VALID_COUNTRIES))
        raise InvalidCountryError(f"Invalid country: {country}. Allowed countries are {allowed}.")


def check_age_restrictions(personal_code: str, loan_period: int, country: str, today: date) -> None:
    """
    Applicant must be of age and young enough to repay within life expectancy.

    max acceptable age = life expectancy - whole years of the loan period
    """
    age = calculate_age(extract_birth_date(personal_code), today)

    if age < constants.MINIMUM_AGE:
        raise InvalidAgeError("Customer is underage and cannot receive a loan.")

    max_acceptable_age = life_expectancy(country) - loan_period // 12
    if age > max_acceptable_age:
        raise InvalidAgeError("Customer is too old to receive a loan for this period.")


class DecisionEngine:
    """Calculates the maximum approvable loan amount and period for an applicant"""

    def __init__(
        self,
        validator: PersonalCodeValidator | None = None,
        today: Callable[[], date] | None = None,
        segments: CreditSegments = constants.CREDIT_SEGMENTS,
    ):
        self.validator = validator or EstonianPersonalCodeValidator()
        self.today = today or date.today
        self.segments = segments

    def calculate_approved_loan(
        self,
        personal_code: str,
        requested_amount: int,
        requested_period: int,
        country: str,
    ) -> Decision:
        """
        Main entry point: validate the request and search for the best offer.

        Flow:
        1. Verify personal code, amount and period
        2. Verify country
        3. Derive credit modifier, reject applicants with debt
        4. Check age against minimum age and country life expectancy
        5. Find max amount for the requested period
        6. Fall back to the shortest longer period that admits an amount

        Raises:
            LoanRejectedError subclass for the first violated rule
        """
        verify_inputs(self.validator, personal_code, requested_amount, requested_period)
        verify_country(country)

        modifier = credit_modifier(personal_code, self.segments)
        if modifier == constants.DEBT_CREDIT_MODIFIER:
            raise NoValidLoanError("No valid loan found due to existing debt!")

        check_age_restrictions(personal_code, requested_period, country, self.today())

        approved_amount = find_max_approved_amount(modifier, requested_period)
        if approved_amount is not None:
            return Decision(approved_amount=approved_amount, approved_period=requested_period)

        new_period = find_alternative_period(modifier, requested_period)
        if new_period is None:
            raise NoValidLoanError("No valid loan found!")

        logging.debug(
            "No amount approvable at requested period, extending",
            extra={"requested_period": requested_period, "approved_period": new_period},
        )
        return Decision(
            approved_amount=find_max_approved_amount(modifier, new_period),
            approved_period=new_period,
        )

    def evaluate(self, request: LoanRequest) -> Decision:
        """Run the decision for a LoanRequest"""
        return self.calculate_approved_loan(
            request.personal_code,
            request.requested_amount,
            request.requested_period,
            request.country,
        )
