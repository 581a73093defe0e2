"""
Tests for status metrics.
"""

import pytest

from cerebro.model import MetricsCalculator
from cerebro.model.metrics import DEFAULT_STATUS_ORDER
from tests.builders import typical_companies


class TestMetricsCalculator:
    """Tests for MetricsCalculator and MetricsData."""

    def test_counts_and_percentages(self):
        """Test counts per status and percentages of the total."""
        metrics = MetricsCalculator().calculate(typical_companies())
        assert metrics.total_companies == 4
        assert metrics.has_data()
        assert metrics.status_count("APPLIED") == 2
        assert metrics.status_count("OA") == 1
        assert metrics.status_count("REJECTED") == 1
        assert metrics.status_count("OFFERED") == 0
        assert metrics.status_percentage("APPLIED") == pytest.approx(50.0)
        assert metrics.status_percentage("OA") == pytest.approx(25.0)

    def test_empty_input(self):
        """Test empty and missing input yield zeroed metrics."""
        for companies in ([], None):
            metrics = MetricsCalculator().calculate(companies)
            assert metrics.total_companies == 0
            assert not metrics.has_data()
            assert metrics.status_percentage("APPLIED") == 0.0

    def test_rows_follow_status_order(self):
        """Test rows list every status in enumeration order."""
        rows = MetricsCalculator().calculate(typical_companies()).rows()
        assert [status for status, _, _ in rows] == DEFAULT_STATUS_ORDER
        assert DEFAULT_STATUS_ORDER[0] == "TO-APPLY"
        assert DEFAULT_STATUS_ORDER[-1] == "REJECTED"
        assert sum(count for _, count, _ in rows) == 4

    def test_custom_order(self):
        """Test a custom status order is respected."""
        rows = MetricsCalculator(["REJECTED", "APPLIED"]).calculate(typical_companies()).rows()
        assert rows == [("REJECTED", 1, 25.0), ("APPLIED", 2, 50.0)]
