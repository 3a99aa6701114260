"""Domain models - immutable values for one amortization calculation"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class LoanRequest:
    """Normalized loan parameters handed to the calculator"""

    principal: float
    annual_rate_percent: float
    term_periods: int  # months


@dataclass(frozen=True)
class AmortizationEntry:
    """Single period of a repayment schedule, rounded for display"""

    period: int
    payment: float
    interest_portion: float
    principal_portion: float
    remaining_balance: float


@dataclass(frozen=True)
class AmortizationResult:
    """Output of the amortization engine"""

    payment: float
    total_interest: float
    schedule: Tuple[AmortizationEntry, ...]

    @property
    def total_paid(self) -> float:
        """Sum of the displayed periodic payments"""
        return round(sum(entry.payment for entry in self.schedule), 2)
