"""Tests for rate validation and rescaling."""

import math

import numpy as np
import pytest

from apy import DomainError, InvalidRateError, is_valid_rate, rescale_rate, validate_rate


class TestValidateRate:
    @pytest.mark.parametrize("rate", [0.1, 5, np.float64(0.03), 1e-9])
    def test_accepts_positive_finite(self, rate):
        assert validate_rate(rate) == pytest.approx(float(rate))
        assert isinstance(validate_rate(rate), float)

    @pytest.mark.parametrize("rate", [0, 0.0, -0.1, math.nan, math.inf, -math.inf, "0.1", None, True])
    def test_rejects(self, rate):
        with pytest.raises(InvalidRateError):
            validate_rate(rate)
        assert not is_valid_rate(rate)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            validate_rate(-1.0)


class TestRescaleRate:
    def test_same_window(self):
        assert rescale_rate(0.1, 365) == pytest.approx(0.1)

    def test_longer_window(self):
        assert rescale_rate(0.1, 730) == pytest.approx(0.05)

    def test_shorter_window(self):
        assert rescale_rate(0.1, 182.5) == pytest.approx(0.2)

    def test_custom_term(self):
        assert rescale_rate(0.06, 720, days_per_term=360) == pytest.approx(0.03)

    def test_zero_days(self):
        with pytest.raises(DomainError):
            rescale_rate(0.1, 0)

    def test_zero_days_per_term(self):
        with pytest.raises(DomainError):
            rescale_rate(0.1, 365, days_per_term=0)
