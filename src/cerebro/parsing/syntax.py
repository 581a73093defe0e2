"""
Command-line prefixes recognised by the Cerebro command parsers.
"""

from attrs import frozen


@frozen
class Prefix:
    """A marker such as ``n/`` that introduces a field value in command text."""

    value: str

    def __str__(self) -> str:
        return self.value


PREFIX_NAME = Prefix("n/")
PREFIX_PHONE = Prefix("p/")
PREFIX_EMAIL = Prefix("e/")
PREFIX_ADDRESS = Prefix("a/")
PREFIX_REMARK = Prefix("r/")
PREFIX_STATUS = Prefix("s/")
PREFIX_TAG = Prefix("t/")

ALL_FIELD_PREFIXES = (
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_EMAIL,
    PREFIX_ADDRESS,
    PREFIX_REMARK,
    PREFIX_STATUS,
    PREFIX_TAG,
)

# Tags may repeat; every other field takes a single value
SINGLE_VALUED_PREFIXES = (
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_EMAIL,
    PREFIX_ADDRESS,
    PREFIX_REMARK,
    PREFIX_STATUS,
)
