"""Validated loan objects over the amortization engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

import logging
import math

from apy.errors import DomainError
from apy.rates import validate_rate
from apy.utils.date import DateLike
from apy.utils.daycount import DEFAULT_DAYS_PER_TERM, DaysPerTerm
from . import amortization
from .amortization import DEFAULT_PAYMENTS_PER_TERM, AmortizationRow

logger = logging.getLogger(__name__)


def _validate_principal(principal: float) -> float:
    value = float(principal)
    if not math.isfinite(value) or value <= 0.0:
        raise DomainError(f"principal must be positive and finite, got {principal!r}")
    return value


@dataclass(frozen=True)
class LoanSpec:
    """A fixed-payment loan: principal, rate per term, payments per term, term count."""

    principal: float
    rate: float
    payout_frequency: int = DEFAULT_PAYMENTS_PER_TERM
    term_count: float = 1

    def __post_init__(self) -> None:
        validate_rate(self.rate)
        _validate_principal(self.principal)
        if self.payout_frequency <= 0 or int(self.payout_frequency) != self.payout_frequency:
            raise DomainError(
                f"payout_frequency must be a positive integer, got {self.payout_frequency!r}"
            )

    @property
    def payment(self) -> float:
        return amortization.amortized_payment_size(
            self.principal, self.rate, self.payout_frequency, self.term_count
        )

    @property
    def total_owed(self) -> float:
        return amortization.amortized_total_owed(
            self.principal, self.rate, self.payout_frequency, self.term_count
        )

    def schedule(self) -> List[AmortizationRow]:
        return amortization.amortization_schedule(
            self.principal, self.rate, self.payout_frequency, self.term_count
        )


class Loan:
    """A borrowed amount at a positive rate, with repayment helpers.

    Args:
        borrow: Amount of money borrowed.
        apy: Interest rate of the borrowed money, per term.

    Raises:
        InvalidRateError: if ``apy`` is not a positive finite number.
        DomainError: if ``borrow`` is not positive.
    """

    def __init__(self, borrow: float, apy: float):
        self.apy = validate_rate(apy)
        self.borrow = _validate_principal(borrow)

    def payment_size(
        self,
        days: float,
        times: int = 1,
        days_per_term: DaysPerTerm = DEFAULT_DAYS_PER_TERM,
        payments_per_term: Optional[int] = None,
    ) -> float:
        """Even payment covering principal plus flat-accrued interest over ``days``.

        Examples:
            >>> round(Loan(1200, apy=0.1).payment_size(days=365, payments_per_term=12), 2)
            110.0
        """
        return amortization.payment_size(
            self.borrow, self.apy, days, times, days_per_term, payments_per_term
        )

    def total_owed(
        self,
        days: float,
        times: int = 1,
        days_per_term: DaysPerTerm = DEFAULT_DAYS_PER_TERM,
    ) -> float:
        return amortization.total_owed(self.borrow, self.apy, days, times, days_per_term)

    def spec(self, terms: float, payments_per_term: int = DEFAULT_PAYMENTS_PER_TERM) -> LoanSpec:
        return LoanSpec(self.borrow, self.apy, payments_per_term, terms)

    def amortized_payment_size(
        self, terms: float, payments_per_term: int = DEFAULT_PAYMENTS_PER_TERM
    ) -> float:
        """Fixed payment where interest accrues on the remaining debt.

        Examples:
            >>> round(Loan(100_000, apy=0.1).amortized_payment_size(terms=20), 2)
            965.02
        """
        return self.spec(terms, payments_per_term).payment

    def amortized_total_owed(
        self, terms: float, payments_per_term: int = DEFAULT_PAYMENTS_PER_TERM
    ) -> float:
        return self.spec(terms, payments_per_term).total_owed

    def schedule(
        self, terms: float, payments_per_term: int = DEFAULT_PAYMENTS_PER_TERM
    ) -> List[AmortizationRow]:
        return self.spec(terms, payments_per_term).schedule()

    def amortized_payment_size_between(
        self,
        start: DateLike,
        end: DateLike,
        payments_per_term: int = DEFAULT_PAYMENTS_PER_TERM,
        days_per_term: DaysPerTerm = DEFAULT_DAYS_PER_TERM,
    ) -> float:
        return amortization.amortized_payment_size_between(
            self.borrow, self.apy, start, end, payments_per_term, days_per_term
        )

    def amortized_total_owed_between(
        self,
        start: DateLike,
        end: DateLike,
        payments_per_term: int = DEFAULT_PAYMENTS_PER_TERM,
        days_per_term: DaysPerTerm = DEFAULT_DAYS_PER_TERM,
    ) -> float:
        return amortization.amortized_total_owed_between(
            self.borrow, self.apy, start, end, payments_per_term, days_per_term
        )

    def __repr__(self) -> str:
        return f"Loan(borrow={self.borrow!r}, apy={self.apy!r})"
