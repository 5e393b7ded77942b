"""Numeric reductions used for cost-basis averaging."""

from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np

from apy.errors import DomainError

PriceLot = Tuple[float, float]


def weighted_harmonic_mean(lots: Sequence[PriceLot]) -> float:
    """
    Average unit price across purchases, weighted by the amount invested.

        (Σ w) / (Σ w / price),  w = amount / Σ amount

    Σ w is summed explicitly rather than taken as 1 so rounding matches the
    plain two-sum formulation. The reduction does not depend on lot order.

    Parameters
    ----------
    lots : Sequence[Tuple[float, float]]
        (amount_invested, unit_price) pairs

    Returns
    -------
    float
        The weighted harmonic mean price

    Raises
    ------
    DomainError
        If lots is empty, the amounts sum to zero or any price is zero

    Examples
    --------
    >>> dca = [(1000, 156.23), (1000, 156.30), (1000, 173.15),
    ...        (1000, 188.72), (1000, 204.61), (1000, 178.23)]
    >>> round(weighted_harmonic_mean(dca), 2)
    174.57
    """
    if len(lots) == 0:
        raise DomainError("weighted harmonic mean of an empty sequence is undefined")

    data = np.asarray(lots, dtype=float)
    if data.ndim != 2 or data.shape[1] != 2:
        raise ValueError("lots must be (amount, price) pairs")
    amounts = data[:, 0]
    prices = data[:, 1]

    if np.any(prices == 0.0):
        raise DomainError("unit price must be non-zero")
    invested = amounts.sum()
    if invested == 0.0:
        raise DomainError("total amount invested must be non-zero")

    weights = amounts / invested
    return float(weights.sum() / (weights / prices).sum())
