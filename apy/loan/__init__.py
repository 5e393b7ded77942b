"""Loan repayment: flat and amortized payment sizing."""

from .amortization import (
    AmortizationRow,
    amortization_schedule,
    amortized_payment_size,
    amortized_payment_size_between,
    amortized_total_owed,
    amortized_total_owed_between,
    payment_size,
    total_owed,
)
from .loan import Loan, LoanSpec

__all__ = [
    "AmortizationRow",
    "Loan",
    "LoanSpec",
    "amortization_schedule",
    "amortized_payment_size",
    "amortized_payment_size_between",
    "amortized_total_owed",
    "amortized_total_owed_between",
    "payment_size",
    "total_owed",
]
