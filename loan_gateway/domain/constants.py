"""Business constants for the loan decision engine"""

from typing import Dict, FrozenSet, Tuple

# Loan bounds (EUR, months)
MINIMUM_LOAN_AMOUNT = 2000
MAXIMUM_LOAN_AMOUNT = 10000
LOAN_AMOUNT_STEP = 100
MINIMUM_LOAN_PERIOD = 12
MAXIMUM_LOAN_PERIOD = 48

# credit_score = ((credit_modifier / loan_amount) * loan_period) / 10
CREDIT_SCORE_THRESHOLD = 0.1

SEGMENT_1_CREDIT_MODIFIER = 100
SEGMENT_2_CREDIT_MODIFIER = 300
SEGMENT_3_CREDIT_MODIFIER = 1000
DEBT_CREDIT_MODIFIER = 0

# (low, high, modifier) - inclusive ranges over the last four digits of the
# personal code. Anything outside every tier is treated as existing debt.
CREDIT_SEGMENTS: Tuple[Tuple[int, int, int], ...] = (
    (0, 3000, SEGMENT_1_CREDIT_MODIFIER),
    (3001, 6000, SEGMENT_2_CREDIT_MODIFIER),
    (6001, 9999, SEGMENT_3_CREDIT_MODIFIER),
)

MINIMUM_AGE = 18

VALID_COUNTRIES: FrozenSet[str] = frozenset({"Estonia", "Latvia", "Lithuania"})

# Expected lifetime in years, bounds the age at which a loan may be extended
LIFE_EXPECTANCY: Dict[str, int] = {
    "Estonia": 78,
    "Latvia": 75,
    "Lithuania": 76,
}
DEFAULT_LIFE_EXPECTANCY = 82
