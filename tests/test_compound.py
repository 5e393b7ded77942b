"""Tests for lump-sum compounding."""

import pytest

from apy import DomainError, compound


class TestCompound:
    @pytest.mark.parametrize(
        "times, expected",
        [(1, 1320.0), (12, 1325.66), (52, 1326.07), (365, 1326.19)],
    )
    def test_payout_frequencies(self, times, expected):
        actual = compound(1200, rate=0.1, payout_frequency=times, term_count=1)
        assert actual == pytest.approx(expected, abs=0.01)

    def test_multiple_terms(self):
        assert compound(1000, 0.1, 1, 3) == pytest.approx(1331.0)

    def test_zero_terms_returns_principal(self):
        assert compound(1000, 0.1, 12, 0) == pytest.approx(1000.0)

    def test_negative_terms_discount(self):
        assert compound(1000, 0.1, 1, -2) == pytest.approx(1000 / 1.21)

    def test_negative_rate_decays(self):
        assert compound(1000, -0.1, 1, 1) == pytest.approx(900.0)
        assert compound(1000, -0.1, 1, 2) == pytest.approx(810.0)

    def test_zero_payout_frequency(self):
        with pytest.raises(DomainError, match="payout_frequency"):
            compound(1000, 0.1, 0, 1)

    def test_zero_growth_factor_with_negative_exponent(self):
        with pytest.raises(DomainError):
            compound(100, -1.0, 1, -1)

    def test_negative_growth_factor_with_fractional_exponent(self):
        with pytest.raises(DomainError):
            compound(100, -3.0, 1, 0.5)
