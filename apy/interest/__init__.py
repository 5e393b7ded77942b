"""Compounding engines: lump sum, recurring contributions and the Interest facade."""

from .compound import compound
from .dca import ContributionRecord, Ledger, LedgerEntry, dca_compound, dca_ledger, dca_step
from .facade import Interest

__all__ = [
    "compound",
    "ContributionRecord",
    "Ledger",
    "LedgerEntry",
    "dca_compound",
    "dca_ledger",
    "dca_step",
    "Interest",
]
