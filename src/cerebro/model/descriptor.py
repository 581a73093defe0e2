"""
Edit descriptors: sparse, immutable sets of per-field updates.

Each slot is either UNSET ("leave unchanged") or holds a replacement value.
A replacement value may itself be an absent field (e.g. ``Phone(None)``),
which clears the field; that is distinct from leaving the slot UNSET.
"""

from collections.abc import Iterable

import attrs
from attrs import field, frozen

from cerebro.core.types import UNSET, Settable
from cerebro.model.company import Company
from cerebro.model.fields import Address, Email, Name, Phone, Remark, Tag
from cerebro.model.status import Status


def _copy_tags(tags: "Iterable[Tag] | object") -> "frozenset[Tag] | object":
    if tags is UNSET:
        return UNSET
    return frozenset(tags)


@frozen
class EditCompanyDescriptor:
    """Stores the details to edit a company with.

    Slots that are set replace the corresponding field of the company; slots
    left UNSET keep the company's existing value. The tag slot always holds
    its own frozen copy of whatever iterable it was given.
    """

    name: Settable[Name] = UNSET
    phone: Settable[Phone] = UNSET
    email: Settable[Email] = UNSET
    address: Settable[Address] = UNSET
    tags: Settable[frozenset[Tag]] = field(default=UNSET, converter=_copy_tags)
    remark: Settable[Remark] = UNSET
    status: Settable[Status] = UNSET

    def with_changes(self, **changes) -> "EditCompanyDescriptor":
        """Return a copy with the given slots set."""
        return attrs.evolve(self, **changes)

    def edited_fields(self) -> list[str]:
        return [
            slot.name
            for slot in attrs.fields(type(self))
            if getattr(self, slot.name) is not UNSET
        ]

    def is_any_field_edited(self) -> bool:
        return bool(self.edited_fields())

    def edits_name(self) -> bool:
        return self.name is not UNSET

    def apply_to(self, company: Company) -> Company:
        """
        Merge the set slots over an existing company.

        Params:
            company: The record being edited

        Returns:
            A new Company; fields whose slot is UNSET keep their prior values
        """
        updates = {name: getattr(self, name) for name in self.edited_fields()}
        return attrs.evolve(company, **updates)
