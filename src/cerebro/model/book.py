"""
The record collection that commands mutate.

RecordCollection is the surface commands depend on; CompanyBook is the
in-memory implementation used by the interactive shell and the tests.
Persistence is handled outside this package.
"""

import logging
from collections.abc import Callable, Iterable
from typing import Protocol

from cerebro.exceptions import DuplicateRecordError
from cerebro.model.company import Company
from cerebro.model.predicates import show_all_companies

logger = logging.getLogger(__name__)

CompanyPredicate = Callable[[Company], bool]


class RecordCollection(Protocol):
    """Mutation and display surface consumed by commands."""

    def exists(self, identity_key: str) -> bool: ...

    def insert(self, company: Company) -> None: ...

    def remove(self, company: Company) -> None: ...

    def replace(self, old: Company, new: Company) -> None: ...

    def current_displayed_list(self) -> list[Company]: ...

    def set_display_filter(self, predicate: CompanyPredicate) -> None: ...

    def all_companies(self) -> list[Company]: ...

    def clear(self) -> None: ...


class CompanyBook:
    """Ordered, identity-unique list of companies with a display filter.

    Params:
        companies: Initial records; duplicates by identity are rejected
    """

    def __init__(self, companies: Iterable[Company] = ()):
        self._companies: list[Company] = []
        self._display_filter: CompanyPredicate = show_all_companies
        for company in companies:
            self.insert(company)

    def exists(self, identity_key: str) -> bool:
        return any(c.identity_key == identity_key for c in self._companies)

    def has_company(self, company: Company) -> bool:
        return self.exists(company.identity_key)

    def insert(self, company: Company) -> None:
        if self.has_company(company):
            raise DuplicateRecordError(company.name.full_name)
        self._companies.append(company)
        logger.debug("Inserted %s", company.name)

    def remove(self, company: Company) -> None:
        position = self._position_of(company)
        del self._companies[position]
        logger.debug("Removed %s", company.name)

    def replace(self, old: Company, new: Company) -> None:
        """
        Replace a record in place, keeping its position.

        Raises:
            KeyError: If old is not in the book
            DuplicateRecordError: If new collides with a record other than old
        """
        position = self._position_of(old)
        if not old.is_same_company(new) and self.has_company(new):
            raise DuplicateRecordError(new.name.full_name)
        self._companies[position] = new

    def current_displayed_list(self) -> list[Company]:
        return [c for c in self._companies if self._display_filter(c)]

    def set_display_filter(self, predicate: CompanyPredicate) -> None:
        self._display_filter = predicate

    def all_companies(self) -> list[Company]:
        return list(self._companies)

    def clear(self) -> None:
        self._companies.clear()

    def __len__(self) -> int:
        return len(self._companies)

    def _position_of(self, company: Company) -> int:
        for position, existing in enumerate(self._companies):
            if existing is company or existing == company:
                return position
        raise KeyError(f"Company not found: {company.name}")
