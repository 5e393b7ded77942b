"""Dollar-cost averaging: compounding a time series of contributions.

Each period adds its contribution to the running balance and then compounds
the whole balance for exactly one term at that period's own rate. The
per-period results are recorded in an immutable :class:`Ledger`.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import accumulate
from typing import Iterable, Iterator, Sequence, Tuple, Union

import logging
import math

import pandas as pd

from apy.errors import DomainError
from .compound import compound

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContributionRecord:
    """One DCA period: money added and the rate it compounds at."""

    amount: float
    rate: float

    @classmethod
    def coerce(cls, value: Union["ContributionRecord", Tuple[float, float]]) -> "ContributionRecord":
        if isinstance(value, cls):
            return value
        try:
            amount, rate = value
        except (TypeError, ValueError) as exc:
            raise ValueError(f"contribution must be an (amount, rate) pair, got {value!r}") from exc
        return cls(float(amount), float(rate))


Contribution = Union[ContributionRecord, Tuple[float, float]]


@dataclass(frozen=True)
class LedgerEntry:
    """Balance, contribution and interest for one period."""

    period: int
    ytd: float
    contribution: float
    interest: float


SEED = LedgerEntry(period=0, ytd=0.0, contribution=0.0, interest=0.0)


@dataclass(frozen=True)
class Ledger:
    """Per-period history of a DCA run. ``entries[0]`` is the zero-balance seed."""

    entries: Tuple[LedgerEntry, ...] = (SEED,)

    def __iter__(self) -> Iterator[LedgerEntry]:
        return iter(self.entries[1:])

    def __len__(self) -> int:
        return len(self.entries) - 1

    @property
    def final_balance(self) -> float:
        return self.entries[-1].ytd

    @property
    def total_contributed(self) -> float:
        return math.fsum(entry.contribution for entry in self)

    @property
    def total_interest(self) -> float:
        return math.fsum(entry.interest for entry in self)

    @property
    def total(self) -> float:
        """Σ (contribution + interest); agrees with :attr:`final_balance`."""
        return math.fsum(entry.contribution + entry.interest for entry in self)

    def to_frame(self) -> pd.DataFrame:
        frame = pd.DataFrame(
            [(e.period, e.ytd, e.contribution, e.interest) for e in self.entries],
            columns=["period", "ytd", "contribution", "interest"],
        )
        return frame.set_index("period")


def dca_step(previous: LedgerEntry, record: Contribution, payout_frequency: float) -> LedgerEntry:
    """Advance the ledger by one period."""
    record = ContributionRecord.coerce(record)
    base = previous.ytd + record.amount
    ytd = compound(base, record.rate, payout_frequency, 1)
    return LedgerEntry(
        period=previous.period + 1,
        ytd=ytd,
        contribution=record.amount,
        interest=ytd - base,
    )


def dca_ledger(contributions: Iterable[Contribution], payout_frequency: float) -> Ledger:
    """Fold the ordered contributions into a :class:`Ledger`.

    Order is significant: contributions are a time series and earlier money
    compounds for more periods.
    """
    if payout_frequency == 0:
        raise DomainError("payout_frequency must be non-zero")
    entries = tuple(
        accumulate(
            contributions,
            lambda previous, record: dca_step(previous, record, payout_frequency),
            initial=SEED,
        )
    )
    ledger = Ledger(entries)
    logger.debug("DCA over %s periods (times=%s) -> %s", len(ledger), payout_frequency, ledger.final_balance)
    return ledger


def dca_compound(contributions: Sequence[Contribution], payout_frequency: float) -> float:
    """Total value of a contribution schedule after its last period.

    Examples:
        >>> round(dca_compound([(1200, 0.1), (1200, 0.1)], payout_frequency=12), 2)
        2790.13
    """
    return dca_ledger(contributions, payout_frequency).total
