"""
Shared test fixtures for the cerebro test suite.
"""

import pytest

from cerebro.model import CompanyBook
from cerebro.ui import StaticConfirmer
from tests.builders import typical_companies


@pytest.fixture
def book():
    """A book holding the typical companies, in order."""
    return CompanyBook(typical_companies())


@pytest.fixture
def empty_book():
    return CompanyBook()


@pytest.fixture
def approve():
    """Confirmer that approves every request and records it."""
    return StaticConfirmer(True)


@pytest.fixture
def decline():
    """Confirmer that declines every request and records it."""
    return StaticConfirmer(False)
