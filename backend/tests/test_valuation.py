"""Tests for the per-ticker revenue / interest rate valuation."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from app.domains.market_data.models import EarningsReport
from app.domains.valuation.models import ExclusionReason
from app.domains.valuation.services import calculate_valuation, evaluate_valuation, ytd_reports

from .factories import make_earnings

NOW = date(2025, 8, 15)


class TestYtdReports:
    """Only current-year reports with an actual revenue figure count."""

    def test_filters_other_years(self):
        earnings = make_earnings("CAT", 2025, [100.0, 100.0]) + make_earnings("CAT", 2024, [90.0] * 4)
        assert len(ytd_reports(earnings, NOW)) == 2

    def test_skips_missing_revenue(self):
        earnings = make_earnings("CAT", 2025, [100.0, None, 120.0])
        assert [r.revenue_actual for r in ytd_reports(earnings, NOW)] == [120.0, 100.0]

    def test_zero_revenue_is_eligible(self):
        earnings = make_earnings("CAT", 2025, [0.0])
        assert len(ytd_reports(earnings, NOW)) == 1

    def test_unparseable_date_is_not_eligible(self):
        report = EarningsReport(symbol="CAT", date="not-a-date", revenue_actual=100.0)
        assert ytd_reports([report], NOW) == []

    def test_datetime_reference(self):
        earnings = make_earnings("CAT", 2025, [100.0])
        assert len(ytd_reports(earnings, datetime(2025, 1, 2, 9, 30))) == 1


class TestCalculateValuation:
    """my_value = (ytd_revenue / quarters) / shares * rate."""

    def test_worked_example(self):
        earnings = make_earnings("CAT", 2025, [100.0, 100.0, 100.0, 100.0])
        valuation = calculate_valuation("CAT", earnings, 0.05, 100.0, NOW)

        assert valuation is not None
        assert valuation.ytd_revenue == pytest.approx(400.0)
        assert valuation.quarters_reported == 4
        assert valuation.quarterly_revenue == pytest.approx(100.0)
        assert valuation.my_value == pytest.approx(0.05)
        assert valuation.interest_rate == 0.05
        assert valuation.outstanding_shares == 100.0

    def test_partial_year_is_pro_rated(self):
        earnings = make_earnings("GE", 2025, [300.0, 100.0])
        valuation = calculate_valuation("GE", earnings, 0.04, 10.0, NOW)
        assert valuation.quarterly_revenue == pytest.approx(200.0)
        assert valuation.my_value == pytest.approx(200.0 / 10.0 * 0.04)

    def test_zero_rate_gives_zero_value(self):
        earnings = make_earnings("CAT", 2025, [100.0])
        valuation = calculate_valuation("CAT", earnings, 0.0, 10.0, NOW)
        assert valuation.my_value == 0.0

    def test_no_ytd_revenue(self):
        earnings = make_earnings("CAT", 2024, [100.0] * 4)
        assert calculate_valuation("CAT", earnings, 0.05, 100.0, NOW) is None

    def test_empty_earnings(self):
        assert calculate_valuation("CAT", [], 0.05, 100.0, NOW) is None

    @pytest.mark.parametrize("shares", [None, 0, 0.0])
    def test_no_outstanding_shares(self, shares):
        earnings = make_earnings("CAT", 2025, [100.0])
        assert calculate_valuation("CAT", earnings, 0.05, shares, NOW) is None


class TestEvaluateValuation:
    """Exclusion reasons for tickers that cannot be valued."""

    def test_reports_missing_revenue_first(self):
        outcome = evaluate_valuation("CAT", [], 0.05, None, NOW)
        assert outcome.valuation is None
        assert outcome.exclusion == ExclusionReason.NO_YTD_REVENUE

    def test_reports_missing_shares(self):
        outcome = evaluate_valuation("CAT", make_earnings("CAT", 2025, [1.0]), 0.05, None, NOW)
        assert outcome.exclusion == ExclusionReason.NO_OUTSTANDING_SHARES

    def test_valued_outcome_has_no_exclusion(self):
        outcome = evaluate_valuation("CAT", make_earnings("CAT", 2025, [1.0]), 0.05, 1.0, NOW)
        assert outcome.valuation is not None
        assert outcome.exclusion is None
