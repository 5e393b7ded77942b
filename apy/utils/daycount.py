"""Day count conventions: how many days make up one compounding term."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Union

import logging
import math

from apy.errors import DomainError

logger = logging.getLogger(__name__)

DEFAULT_DAYS_PER_TERM = 365

DaysPerTerm = Union[int, float, str]

_REGISTRY: Mapping[str, int] = MappingProxyType(
    {
        "ACT/365": 365,
        "ACT/365F": 365,
        "ACT/360": 360,
        "ACT/364": 364,
        "WEEKLY": 7,
    }
)


def get_days_per_term(name: str) -> int:
    """Return the number of days per term for a named convention."""
    key = name.upper()
    try:
        return _REGISTRY[key]
    except KeyError as exc:
        raise ValueError(f"Unsupported day count convention: {name}") from exc


def resolve_days_per_term(days_per_term: DaysPerTerm) -> float:
    """Accept either a positive finite day count or a built-in convention name."""
    if isinstance(days_per_term, str):
        days = get_days_per_term(days_per_term)
        logger.debug("Resolved day count %s -> %s days", days_per_term, days)
        return days
    if not math.isfinite(days_per_term) or days_per_term <= 0:
        raise DomainError(f"days_per_term must be positive and finite, got {days_per_term!r}")
    return days_per_term
