"""
Status distribution metrics for the metrics view.
"""

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field

from cerebro.model.company import Company
from cerebro.model.status import Stage

DEFAULT_STATUS_ORDER = [stage.value.upper() for stage in Stage]


@dataclass
class MetricsData:
    """Totals and per-status counts keyed by upper-cased canonical status."""

    total_companies: int
    status_counts: dict[str, int]
    status_order: list[str] = field(default_factory=lambda: list(DEFAULT_STATUS_ORDER))

    def status_count(self, status: str) -> int:
        return self.status_counts.get(status, 0)

    def status_percentage(self, status: str) -> float:
        if self.total_companies == 0:
            return 0.0
        return self.status_count(status) * 100.0 / self.total_companies

    def has_data(self) -> bool:
        return self.total_companies > 0

    def rows(self) -> list[tuple[str, int, float]]:
        return [
            (status, self.status_count(status), self.status_percentage(status))
            for status in self.status_order
        ]


class MetricsCalculator:
    """Calculates status metrics over a set of companies.

    Params:
        status_order: Display order of statuses; defaults to stage order
    """

    def __init__(self, status_order: list[str] | None = None):
        self.status_order = list(status_order or DEFAULT_STATUS_ORDER)

    def calculate(self, companies: Iterable[Company] | None) -> MetricsData:
        companies = list(companies or [])
        counts = Counter(str(c.status).upper() for c in companies)
        return MetricsData(len(companies), dict(counts), self.status_order)
