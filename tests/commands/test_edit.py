"""
Tests for EditCommand, single and batch.
"""

import pytest

from cerebro.commands import EditCommand
from cerebro.commands.messages import format_company
from cerebro.core import Index
from cerebro.exceptions import BatchEditError, DuplicateRecordError, IndexOutOfBoundsError
from cerebro.model import CompanyBook, EditCompanyDescriptor, FilterPredicate, Phone, Tag
from cerebro.model.fields import Name
from cerebro.model.status import Stage, Status
from tests.builders import ALICE, BENSON, CARL, DANIEL


def indices(*values: int) -> list[Index]:
    return [Index(value) for value in values]


class TestSingleEdit:
    """Tests for editing one company."""

    def test_edits_fields_in_place(self, book):
        """Test the company keeps its position and unedited fields."""
        descriptor = EditCompanyDescriptor(phone=Phone("91234567"))
        result = EditCommand(indices(2), descriptor).execute(book)
        edited = book.all_companies()[1]
        assert edited.phone == Phone("91234567")
        assert edited.email == BENSON.email
        assert result.feedback == f"Edited Company: {format_company(edited)}"

    def test_rename_to_existing_company_rejected(self, book):
        """Test renaming onto another company's identity fails."""
        descriptor = EditCompanyDescriptor(name=Name("carl kurz"))
        with pytest.raises(DuplicateRecordError):
            EditCommand(indices(1), descriptor).execute(book)
        assert book.all_companies() == [ALICE, BENSON, CARL, DANIEL]

    def test_rename_changing_case_allowed(self, book):
        """Test a company may be renamed to a case variant of itself."""
        descriptor = EditCompanyDescriptor(name=Name("ALICE PTE LTD"))
        EditCommand(indices(1), descriptor).execute(book)
        assert book.all_companies()[0].name.full_name == "ALICE PTE LTD"

    def test_resets_display_filter(self, book):
        """Test the full list is shown after an edit on a filtered list."""
        book.set_display_filter(FilterPredicate(Status(Stage.APPLIED)))
        descriptor = EditCompanyDescriptor(status=Status(Stage.OFFERED))
        EditCommand(indices(2), descriptor).execute(book)
        assert book.all_companies()[2].status == Status(Stage.OFFERED)
        assert len(book.current_displayed_list()) == 4

    def test_out_of_bounds(self, book):
        """Test an index past the end of the list."""
        with pytest.raises(IndexOutOfBoundsError, match="Valid range: 1 to 4"):
            EditCommand(indices(5), EditCompanyDescriptor(phone=Phone("911"))).execute(book)


class TestBatchEdit:
    """Tests for editing many companies at once."""

    def test_batch_status_and_tags(self, book):
        """Test the same edit applies to every addressed company."""
        descriptor = EditCompanyDescriptor(
            status=Status(Stage.APPLIED), tags=[Tag("FAANG")]
        )
        result = EditCommand(indices(2, 4), descriptor).execute(book)
        assert result.feedback == "Edited 2 companies successfully"
        companies = book.all_companies()
        for company in (companies[1], companies[3]):
            assert company.status == Status(Stage.APPLIED)
            assert company.tags == frozenset({Tag("FAANG")})
        assert companies[0] == ALICE
        assert companies[2] == CARL

    def test_batch_is_atomic_on_bounds(self):
        """Test one out-of-bounds index means no company is edited."""
        book = CompanyBook([ALICE, BENSON, CARL])
        descriptor = EditCompanyDescriptor(status=Status(Stage.REJECTED))
        with pytest.raises(IndexOutOfBoundsError) as exc_info:
            EditCommand(indices(1, 2, 4), descriptor).execute(book)
        assert exc_info.value.invalid_index == 4
        assert "4" in str(exc_info.value)
        assert book.all_companies() == [ALICE, BENSON, CARL]

    def test_bounds_reports_first_index_in_given_order(self, book):
        """Test the first out-of-bounds index as typed is the one reported."""
        descriptor = EditCompanyDescriptor(status=Status(Stage.APPLIED))
        with pytest.raises(IndexOutOfBoundsError) as exc_info:
            EditCommand(indices(6, 5), descriptor).execute(book)
        assert str(exc_info.value) == "Index out of bounds: 6. Valid range: 1 to 4."
        assert exc_info.value.invalid_index == 6

    def test_batch_name_edit_refused(self, book):
        """Test a batch edit may not change names."""
        descriptor = EditCompanyDescriptor(name=Name("Same Name"))
        with pytest.raises(BatchEditError, match="Batch editing is not allowed for Name"):
            EditCommand(indices(1, 2), descriptor).execute(book)
        assert book.all_companies() == [ALICE, BENSON, CARL, DANIEL]

    def test_bounds_checked_before_name_restriction(self, book):
        """Test bounds are reported ahead of the batch name restriction."""
        descriptor = EditCompanyDescriptor(name=Name("Same Name"))
        with pytest.raises(IndexOutOfBoundsError):
            EditCommand(indices(1, 9), descriptor).execute(book)

    def test_requires_an_index(self):
        """Test an edit with no indices cannot be built."""
        with pytest.raises(ValueError):
            EditCommand([], EditCompanyDescriptor(phone=Phone("911")))

    def test_is_batch(self):
        """Test batch detection."""
        descriptor = EditCompanyDescriptor(phone=Phone("911"))
        assert not EditCommand(indices(1), descriptor).is_batch
        assert EditCommand(indices(1, 2), descriptor).is_batch
