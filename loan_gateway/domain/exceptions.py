"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class LoanRejectedError(DomainException):
    """Loan request was rejected - never transient, never retried"""

    pass


class InvalidPersonalCodeError(LoanRejectedError):
    """Personal code failed checksum validation or cannot be decoded"""

    pass


class InvalidLoanAmountError(LoanRejectedError):
    """Requested amount is outside the allowed bounds"""

    pass


class InvalidLoanPeriodError(LoanRejectedError):
    """Requested period is outside the allowed bounds"""

    pass


class InvalidCountryError(LoanRejectedError):
    """Country is not in the list of supported countries"""

    pass


class InvalidAgeError(LoanRejectedError):
    """Applicant is underage or too old for the requested period"""

    pass


class NoValidLoanError(LoanRejectedError):
    """Applicant has debt or no amount/period combination can be approved"""

    pass
