"""Rate validation and unit conversion."""

from __future__ import annotations

from numbers import Real

import logging
import math

from apy.errors import DomainError, InvalidRateError

logger = logging.getLogger(__name__)


def validate_rate(rate: object) -> float:
    """Return ``rate`` as a float, or raise if it cannot back a rate-bearing entity.

    The pure engines (``compound``, ``dca_compound``) never call this; negative
    rates are legitimate there for decay or loan modeling. Constructors of
    rate-bearing objects run it first.
    """
    if isinstance(rate, bool) or not isinstance(rate, Real):
        raise InvalidRateError(f"rate must be a real number, got {rate!r}")
    value = float(rate)
    if not math.isfinite(value):
        raise InvalidRateError(f"rate must be finite, got {rate!r}")
    if value <= 0.0:
        raise InvalidRateError(f"rate must be positive, got {rate!r}")
    return value


def is_valid_rate(rate: object) -> bool:
    try:
        validate_rate(rate)
    except InvalidRateError:
        return False
    return True


def rescale_rate(rate: float, actual_days: float, days_per_term: float = 365) -> float:
    """Re-express a rate quoted per ``days_per_term`` over a window of ``actual_days``.

        adjusted = rate / (actual_days / days_per_term)

    True division is used throughout, so windows shorter than one term scale
    the rate up rather than collapsing to zero.
    """
    if days_per_term <= 0:
        raise DomainError(f"days_per_term must be positive, got {days_per_term!r}")
    if actual_days == 0:
        raise DomainError("actual_days must be non-zero to rescale a rate")
    adjusted = rate / (actual_days / days_per_term)
    logger.debug(
        "Rescaled rate %s over %s days (term=%s days) -> %s",
        rate,
        actual_days,
        days_per_term,
        adjusted,
    )
    return adjusted
