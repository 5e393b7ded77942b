"""Financial arithmetic: compounding, dollar-cost averaging and loan repayment.

Key modules:
- interest: lump-sum and recurring-contribution compounding
- loan: flat and amortized repayment figures
- utils: term sizing, day counts and cost-basis averaging
- rates: rate validation and rescaling
"""

from .errors import AmortizationNotImplementedError, ApyError, DomainError, InvalidRateError
from .interest import ContributionRecord, Interest, Ledger, LedgerEntry, compound, dca_compound, dca_ledger
from .loan import (
    AmortizationRow,
    Loan,
    LoanSpec,
    amortization_schedule,
    amortized_payment_size,
    amortized_total_owed,
    payment_size,
    total_owed,
)
from .rates import is_valid_rate, rescale_rate, validate_rate
from .utils.mathutils import weighted_harmonic_mean
from .utils.term import TermSpec, term_fraction, term_size

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "AmortizationNotImplementedError",
    "AmortizationRow",
    "ApyError",
    "ContributionRecord",
    "DomainError",
    "Interest",
    "InvalidRateError",
    "Ledger",
    "LedgerEntry",
    "Loan",
    "LoanSpec",
    "TermSpec",
    "amortization_schedule",
    "amortized_payment_size",
    "amortized_total_owed",
    "compound",
    "dca_compound",
    "dca_ledger",
    "is_valid_rate",
    "payment_size",
    "rescale_rate",
    "term_fraction",
    "term_size",
    "total_owed",
    "validate_rate",
    "weighted_harmonic_mean",
]
