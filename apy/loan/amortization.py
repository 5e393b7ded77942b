"""Loan repayment figures.

Two families live here:

* the flat path (``total_owed``/``payment_size``), where a term-quoted rate is
  rescaled to the loan's actual day span and compounded once over the whole
  balance, then split evenly across payments;
* standard fixed-payment amortization (``amortized_*``), where each payment
  covers interest on the remaining balance plus a slice of principal.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

import logging

from apy.errors import AmortizationNotImplementedError, DomainError
from apy.interest.compound import compound
from apy.rates import rescale_rate
from apy.utils.daycount import DEFAULT_DAYS_PER_TERM, DaysPerTerm, resolve_days_per_term
from apy.utils.term import term_size

logger = logging.getLogger(__name__)

DEFAULT_PAYMENTS_PER_TERM = 12


@dataclass(frozen=True)
class AmortizationRow:
    """A single scheduled payment and how it splits between interest and principal."""

    number: int
    payment: float
    interest: float
    principal: float
    balance: float


def total_owed(
    principal: float,
    rate: float,
    days: float,
    payout_frequency: int = 1,
    days_per_term: DaysPerTerm = DEFAULT_DAYS_PER_TERM,
) -> float:
    """Total repaid on a flat loan of ``principal`` running ``days`` days.

    The rate is quoted per ``days_per_term``; it is rescaled to the loan's
    actual span before compounding ``payout_frequency`` times per term.

    Args:
        principal: Amount borrowed.
        rate: Rate per term (e.g. an APY).
        days: Days until the loan is fully paid off.
        payout_frequency: Interest accruals per term. Defaults to 1 (flat rate).
        days_per_term: Days per interest term, or a convention name.

    Raises:
        DomainError: if ``days`` is zero, ``days_per_term`` is not positive or
            ``payout_frequency`` is zero.
    """
    term_days = resolve_days_per_term(days_per_term)
    adjusted = rescale_rate(rate, days, term_days)
    terms = term_size(0, days, term_days)
    return compound(principal, adjusted, payout_frequency, terms)


def payment_size(
    principal: float,
    rate: float,
    days: float,
    payout_frequency: int = 1,
    days_per_term: DaysPerTerm = DEFAULT_DAYS_PER_TERM,
    payments_per_term: Optional[int] = None,
) -> float:
    """Even payment that retires :func:`total_owed` over the loan's terms.

    ``payments_per_term`` defaults to ``payout_frequency``.

    Examples:
        >>> round(payment_size(1200, 0.1, days=365), 2)
        1320.0
        >>> round(payment_size(1200, 0.1, days=365, payments_per_term=12), 2)
        110.0
        >>> round(payment_size(1200, 0.1, days=365, payout_frequency=12), 2)
        110.47
    """
    if payments_per_term is None:
        payments_per_term = payout_frequency
    term_days = resolve_days_per_term(days_per_term)
    payment_count = payments_per_term * term_size(0, days, term_days)
    if payment_count == 0:
        raise DomainError("loan must span at least one payment")
    owed = total_owed(principal, rate, days, payout_frequency, term_days)
    return owed / payment_count


def amortized_payment_size(
    principal: float,
    rate: float,
    payments_per_term: int = DEFAULT_PAYMENTS_PER_TERM,
    year_count: float = 1,
) -> float:
    """Fixed payment that fully amortizes ``principal`` over ``year_count`` terms.

        (rate * P) / (n * (1 - (1 + rate / n) ** (-n * years)))

    Examples:
        >>> round(amortized_payment_size(100_000, 0.1, 12, 20), 2)
        965.02
    """
    if payments_per_term == 0:
        raise DomainError("payments_per_term must be non-zero")
    discount = compound(1.0, rate, payments_per_term, -year_count)
    denominator = payments_per_term * (1 - discount)
    if denominator == 0:
        raise DomainError(
            f"amortization undefined for rate={rate!r} over {year_count!r} terms"
        )
    payment = (rate * principal) / denominator
    logger.debug(
        "Amortized payment for %s at %s (%s/term, %s terms) -> %s",
        principal,
        rate,
        payments_per_term,
        year_count,
        payment,
    )
    return payment


def amortized_total_owed(
    principal: float,
    rate: float,
    payments_per_term: int = DEFAULT_PAYMENTS_PER_TERM,
    year_count: float = 1,
) -> float:
    """Sum of all amortized payments."""
    payment = amortized_payment_size(principal, rate, payments_per_term, year_count)
    return payments_per_term * payment * year_count


def amortization_schedule(
    principal: float,
    rate: float,
    payments_per_term: int = DEFAULT_PAYMENTS_PER_TERM,
    year_count: float = 1,
) -> List[AmortizationRow]:
    """Payment-by-payment breakdown of a fixed-payment loan.

    Interest on each payment accrues on the balance still outstanding, at
    ``rate / payments_per_term``. The balance after the last row is zero up
    to float rounding.
    """
    count = payments_per_term * year_count
    if count <= 0 or abs(count - round(count)) > 1e-9:
        raise DomainError(
            f"schedule needs a positive whole number of payments, got {count!r}"
        )
    payment = amortized_payment_size(principal, rate, payments_per_term, year_count)
    periodic_rate = rate / payments_per_term

    rows: List[AmortizationRow] = []
    balance = float(principal)
    for number in range(1, int(round(count)) + 1):
        interest = balance * periodic_rate
        repaid = payment - interest
        balance -= repaid
        rows.append(AmortizationRow(number, payment, interest, repaid, balance))
    return rows


def amortized_payment_size_between(
    principal: float,
    rate: float,
    start,
    end,
    payments_per_term: int = DEFAULT_PAYMENTS_PER_TERM,
    days_per_term: DaysPerTerm = DEFAULT_DAYS_PER_TERM,
) -> float:
    """Amortized payment derived straight from a start/end date pair.

    Not supported; derive a term count and use :func:`amortized_payment_size`.
    """
    raise AmortizationNotImplementedError(
        "date-range amortization is not supported; pass an explicit term count "
        "to amortized_payment_size"
    )


def amortized_total_owed_between(
    principal: float,
    rate: float,
    start,
    end,
    payments_per_term: int = DEFAULT_PAYMENTS_PER_TERM,
    days_per_term: DaysPerTerm = DEFAULT_DAYS_PER_TERM,
) -> float:
    raise AmortizationNotImplementedError(
        "date-range amortization is not supported; pass an explicit term count "
        "to amortized_total_owed"
    )
