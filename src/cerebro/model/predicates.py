"""
Display-filter predicates over company records.
"""

from attrs import field, frozen

from cerebro.model.company import Company
from cerebro.model.status import Status


def show_all_companies(company: Company) -> bool:
    return True


@frozen
class FilterPredicate:
    """Matches companies by status and/or tag keywords.

    A company matches when the status is unspecified or equal to the company's
    status, AND no keywords were given or at least one keyword is a
    case-insensitive substring of at least one of the company's tags.
    """

    status: Status | None = None
    tag_keywords: tuple[str, ...] = field(default=(), converter=tuple)

    def __call__(self, company: Company) -> bool:
        status_match = self.status is None or company.status == self.status
        tags_match = not self.tag_keywords or any(
            keyword.lower() in tag.tag_name.lower()
            for keyword in self.tag_keywords
            for tag in company.tags
        )
        return status_match and tags_match


@frozen
class NameContainsKeywordsPredicate:
    """Matches companies whose name contains any keyword, ignoring case."""

    keywords: tuple[str, ...] = field(converter=tuple)

    def __call__(self, company: Company) -> bool:
        name = company.name.full_name.lower()
        return any(keyword.lower() in name for keyword in self.keywords)
