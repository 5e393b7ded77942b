"""Rate-plus-date-range convenience object over the compounding engines."""

from __future__ import annotations

from datetime import date
from typing import Optional

from apy.errors import DomainError
from apy.utils.date import DateLike, add_terms, to_date
from apy.utils.daycount import DEFAULT_DAYS_PER_TERM, DaysPerTerm, resolve_days_per_term
from apy.utils.term import TermSpec
from .compound import compound
from .dca import Ledger, dca_ledger


class Interest:
    """An expected yield over a date window.

    Given an APY quoted per term (a year by default), exposes lump-sum and
    recurring-contribution growth over the window between ``start`` and
    ``end``. The rate is stored as given, so ``Interest(-0.1)`` models a
    loan.

    Args:
        apy: Expected fractional return over one term (0.1 for 10%).
        start: Window start. Defaults to today.
        end: Window end. Defaults to one term after ``start``.
        days_per_term: Days in one term, or a convention name.
    """

    def __init__(
        self,
        apy: float,
        start: Optional[DateLike] = None,
        end: Optional[DateLike] = None,
        days_per_term: DaysPerTerm = DEFAULT_DAYS_PER_TERM,
    ):
        days = resolve_days_per_term(days_per_term)
        start_date = to_date(start) if start is not None else date.today()
        end_date = to_date(end) if end is not None else add_terms(start_date, 1, days)
        self.apy = apy
        self.term = TermSpec(start_date, end_date, days)

    @property
    def days(self) -> float:
        return self.term.days

    @property
    def terms(self) -> int:
        return self.term.terms

    def total(self, principal: float, times: int = 1) -> float:
        """Value of ``principal`` at the end of the window, compounded ``times`` per term."""
        return compound(principal, self.apy, times, self.terms)

    def dca_ledger(self, amount: float, times: int = 1) -> Ledger:
        """Ledger for ``amount`` added at every payout across the window.

        Each payout period carries ``apy / times``; with ``times`` payouts per
        term there are ``times * terms`` periods. A window of zero or negative
        terms yields an empty ledger.
        """
        if times == 0:
            raise DomainError("times must be non-zero")
        periods = max(times * self.terms, 0)
        contributions = [(amount, self.apy / times)] * periods
        return dca_ledger(contributions, times)

    def dca(self, amount: float, times: int = 1) -> float:
        """Total of recurring contributions of ``amount`` across the window."""
        return self.dca_ledger(amount, times).total

    def __repr__(self) -> str:
        return f"Interest(apy={self.apy!r}, start={self.term.start}, end={self.term.end})"
