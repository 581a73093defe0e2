"""
One-based positions into the displayed record list.
"""

from attrs import field, frozen


def _positive(instance, attribute, value: int) -> None:
    if value < 1:
        raise ValueError(f"{attribute.name} must be >= 1, got {value}")


@frozen(order=True)
class Index:
    """A 1-based position with a bijective mapping to its 0-based offset.

    Only positive values are representable; zero or negative user input is
    rejected by the index parsers before an Index is ever built.
    """

    one_based: int = field(validator=_positive)

    @classmethod
    def from_one_based(cls, one_based: int) -> "Index":
        return cls(one_based)

    @classmethod
    def from_zero_based(cls, zero_based: int) -> "Index":
        return cls(zero_based + 1)

    @property
    def zero_based(self) -> int:
        return self.one_based - 1

    def __str__(self) -> str:
        return str(self.one_based)
