"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class LoanRequest:
    """Loan application as submitted by the applicant"""

    personal_code: str
    requested_amount: int  # EUR
    requested_period: int  # months
    country: str


@dataclass
class Decision:
    """Output of the decision engine"""

    approved_amount: Optional[int] = None
    approved_period: Optional[int] = None
    error_message: Optional[str] = None

    @property
    def approved(self) -> bool:
        return self.error_message is None and self.approved_amount is not None
