"""Exception types raised by the apy engines."""


class ApyError(Exception):
    """Base class for all apy errors."""

    pass


class InvalidRateError(ApyError, ValueError):
    """Raised when a rate is non-positive, non-finite or not numeric."""

    pass


class DomainError(ApyError, ValueError):
    """Raised when an input puts a computation outside its domain.

    Covers zero divisors (payout frequency, days per term, prices) and
    reductions over empty input.
    """

    pass


class AmortizationNotImplementedError(ApyError, NotImplementedError):
    """Raised by the date-range driven amortization entry points."""

    pass
