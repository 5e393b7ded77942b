"""Tests for the Interest facade."""

from datetime import date, timedelta

import pytest

from apy import DomainError, Interest, compound, dca_compound


class TestInterestWindow:
    def test_defaults_to_one_term_from_today(self):
        interest = Interest(0.1)
        assert interest.term.start == date.today()
        assert interest.days == 365
        assert interest.terms == 1

    def test_explicit_window(self, twenty_years):
        interest = Interest(0.05, *twenty_years)
        assert interest.terms == 20

    def test_end_defaults_from_start(self):
        interest = Interest(0.1, start="2020-01-01", days_per_term=360)
        assert interest.term.end == date(2020, 1, 1) + timedelta(days=360)
        assert interest.terms == 1

    def test_invalid_days_per_term(self):
        with pytest.raises(DomainError):
            Interest(0.1, days_per_term=0)


class TestInterestTotal:
    def test_total(self):
        interest = Interest(apy=0.1)
        assert interest.total(1200) == pytest.approx(1320.0, abs=0.01)
        assert interest.total(1200, times=12) == pytest.approx(1325.66, abs=0.01)

    def test_negative_window(self):
        interest = Interest(0.1, start=date(2001, 1, 1), end=date(1999, 1, 1))
        assert interest.terms == -2
        assert interest.total(1000) == pytest.approx(compound(1000, 0.1, 1, -2))

    def test_negative_rate_models_a_loan(self):
        assert Interest(-0.1).total(1000) == pytest.approx(900.0)


class TestInterestDca:
    def test_dca(self):
        interest = Interest(apy=0.1)
        assert interest.dca(1200) == pytest.approx(1320.0, abs=0.01)
        assert interest.dca(300, times=4) == pytest.approx(1277.64, abs=0.01)
        assert interest.dca(100, times=12) == pytest.approx(1267.29, abs=0.01)

    def test_dca_matches_engine(self):
        interest = Interest(0.08, start="2020-01-01", end="2022-01-01")
        expected = dca_compound([(50, 0.02)] * 8, 4)
        assert interest.dca(50, times=4) == pytest.approx(expected)

    def test_dca_ledger(self):
        ledger = Interest(0.1).dca_ledger(300, times=4)
        assert len(ledger) == 4
        assert ledger.total_contributed == pytest.approx(1200.0)
        assert ledger.final_balance == pytest.approx(ledger.total)

    def test_negative_window_has_no_contributions(self):
        interest = Interest(0.1, start=date(2001, 1, 1), end=date(1999, 1, 1))
        assert interest.dca(100, times=12) == 0.0

    def test_zero_times(self):
        with pytest.raises(DomainError):
            Interest(0.1).dca(100, times=0)
