"""
Cerebro domain model.

This package provides the company record, its validated field value objects,
the application status enumeration, edit descriptors, display predicates and
the in-memory record collection.
"""

from cerebro.model.book import CompanyBook, RecordCollection
from cerebro.model.company import Company
from cerebro.model.descriptor import EditCompanyDescriptor
from cerebro.model.fields import Address, Email, Name, Phone, Remark, Tag
from cerebro.model.metrics import MetricsCalculator, MetricsData
from cerebro.model.predicates import (
    FilterPredicate,
    NameContainsKeywordsPredicate,
    show_all_companies,
)
from cerebro.model.status import (
    Stage,
    Status,
    UnsupportedStatus,
    is_valid_status,
    normalize_status_token,
    resolve_status,
)

__all__ = [
    "Address",
    "Company",
    "CompanyBook",
    "EditCompanyDescriptor",
    "Email",
    "FilterPredicate",
    "MetricsCalculator",
    "MetricsData",
    "Name",
    "NameContainsKeywordsPredicate",
    "Phone",
    "RecordCollection",
    "Remark",
    "Stage",
    "Status",
    "Tag",
    "UnsupportedStatus",
    "is_valid_status",
    "normalize_status_token",
    "resolve_status",
    "show_all_companies",
]
