"""Term sizing: how many compounding terms fit between two dates."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Union

import logging

from apy.utils.date import DateLike, days_between
from apy.utils.daycount import DEFAULT_DAYS_PER_TERM, DaysPerTerm, resolve_days_per_term

logger = logging.getLogger(__name__)

Endpoint = Union[DateLike, int, float]


def term_fraction(
    start: Endpoint,
    end: Endpoint,
    days_per_term: DaysPerTerm = DEFAULT_DAYS_PER_TERM,
) -> float:
    """Return the unrounded number of terms between ``start`` and ``end``.

    Parameters
    ----------
    start, end : date-like or number
        Window endpoints. Numbers are read as day offsets.
    days_per_term : int or str
        Days in one term, or a registered convention name such as ``"ACT/360"``.

    Raises
    ------
    DomainError
        If ``days_per_term`` is not positive.
    """
    days = resolve_days_per_term(days_per_term)
    return days_between(start, end) / days


def term_size(
    start: Endpoint,
    end: Endpoint,
    days_per_term: DaysPerTerm = DEFAULT_DAYS_PER_TERM,
) -> int:
    """Return the whole number of terms between ``start`` and ``end``.

    Halves round to even (Python's ``round``), so 2.5 terms -> 2 and
    3.5 terms -> 4. Zero and negative counts are returned as-is.
    """
    fraction = term_fraction(start, end, days_per_term)
    terms = round(fraction)
    logger.debug("term_size(%s, %s, %s): %s -> %s", start, end, days_per_term, fraction, terms)
    return terms


@dataclass(frozen=True)
class TermSpec:
    start: Endpoint
    end: Endpoint
    days_per_term: DaysPerTerm = DEFAULT_DAYS_PER_TERM

    def __post_init__(self) -> None:
        resolve_days_per_term(self.days_per_term)

    @property
    def days(self) -> float:
        return days_between(self.start, self.end)

    @property
    def fraction(self) -> float:
        return term_fraction(self.start, self.end, self.days_per_term)

    @property
    def terms(self) -> int:
        return term_size(self.start, self.end, self.days_per_term)
