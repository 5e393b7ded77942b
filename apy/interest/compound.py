"""Closed-form compounding of a single principal."""

from __future__ import annotations

import logging

from apy.errors import DomainError

logger = logging.getLogger(__name__)


def compound(
    principal: float,
    rate: float,
    payout_frequency: float,
    term_count: float,
) -> float:
    """Grow ``principal`` at ``rate`` per term, paid out ``payout_frequency`` times a term.

        principal * (1 + rate / payout_frequency) ** (payout_frequency * term_count)

    The rate is not validated: a negative rate models decay or a loan and is
    handled exactly like a positive one. ``term_count`` may be zero or
    negative (real exponentiation).

    Raises:
        DomainError: if ``payout_frequency`` is zero, or the per-payout growth
            factor cannot be raised to the requested power over the reals.
    """
    if payout_frequency == 0:
        raise DomainError("payout_frequency must be non-zero")

    total_rate = 1 + (rate / payout_frequency)
    exponent = payout_frequency * term_count
    try:
        growth = total_rate**exponent
    except ZeroDivisionError as exc:
        raise DomainError(
            f"growth factor is zero and cannot take exponent {exponent!r}"
        ) from exc
    if isinstance(growth, complex):
        raise DomainError(
            f"growth factor {total_rate!r} is negative and cannot take exponent {exponent!r}"
        )

    amount = principal * growth
    logger.debug(
        "compound(%s, rate=%s, times=%s, terms=%s) -> %s",
        principal,
        rate,
        payout_frequency,
        term_count,
        amount,
    )
    return amount
