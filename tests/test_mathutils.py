"""Tests for the weighted harmonic mean."""

import pytest

from apy import DomainError, weighted_harmonic_mean


class TestWeightedHarmonicMean:
    def test_equal_purchases(self, dca_lots):
        assert weighted_harmonic_mean(dca_lots) == pytest.approx(174.57, abs=0.01)

    def test_order_independent(self, dca_lots):
        expected = weighted_harmonic_mean(dca_lots)
        permuted = [dca_lots[i] for i in (3, 0, 5, 2, 4, 1)]
        assert weighted_harmonic_mean(list(reversed(dca_lots))) == pytest.approx(expected, rel=1e-12)
        assert weighted_harmonic_mean(permuted) == pytest.approx(expected, rel=1e-12)

    def test_unequal_amounts(self):
        assert weighted_harmonic_mean([(3000, 100.0), (1000, 200.0)]) == pytest.approx(800 / 7)

    def test_single_lot_is_its_price(self):
        assert weighted_harmonic_mean([(500, 42.0)]) == pytest.approx(42.0)

    def test_empty(self):
        with pytest.raises(DomainError, match="empty"):
            weighted_harmonic_mean([])

    def test_zero_price(self):
        with pytest.raises(DomainError, match="price"):
            weighted_harmonic_mean([(1000, 10.0), (1000, 0.0)])

    def test_zero_total_invested(self):
        with pytest.raises(DomainError):
            weighted_harmonic_mean([(0, 10.0), (0, 20.0)])

    def test_malformed_lots(self):
        with pytest.raises(ValueError):
            weighted_harmonic_mean([(1000, 10.0, 1)])
