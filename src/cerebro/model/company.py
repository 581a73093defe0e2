"""
The company record managed by Cerebro.
"""

from attrs import field, frozen

from cerebro.model.fields import Address, Email, Name, Phone, Remark, Tag
from cerebro.model.status import Status


@frozen
class Company:
    """An application-tracking record.

    Two companies share an identity when their names match case-insensitively;
    every other field may differ. Full equality (``==``) compares all fields.
    """

    name: Name
    phone: Phone = Phone(None)
    email: Email = Email(None)
    address: Address = Address(None)
    tags: frozenset[Tag] = field(factory=frozenset, converter=frozenset)
    remark: Remark = Remark(None)
    status: Status = Status()

    @property
    def identity_key(self) -> str:
        """Key used for duplicate detection (case-insensitive, whitespace-sensitive)."""
        return self.name.full_name.lower()

    def is_same_company(self, other: "Company | None") -> bool:
        if other is None:
            return False
        return other is self or self.identity_key == other.identity_key

    def sorted_tags(self) -> list[Tag]:
        return sorted(self.tags)
