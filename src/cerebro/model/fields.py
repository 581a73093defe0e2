"""
Validated field value objects for a company record.

Every value object is immutable and checks its constraint on construction,
raising ValueError with the constraint message. Phone, Email, Address and
Remark accept None as an explicit "absent" value, which is distinct from a
descriptor slot that was never set.
"""

import re

from attrs import field, frozen
from attrs.validators import instance_of

ALNUM = "[A-Za-z0-9]"


def _constraint(predicate, message: str):
    """Build an attrs validator that raises ValueError(message) when predicate fails."""

    def validate(instance, attribute, value) -> None:
        if not predicate(value):
            raise ValueError(message)

    return validate


def _optional(predicate):
    return lambda value: value is None or predicate(value)


def _is_valid_name(value: str) -> bool:
    return Name.VALIDATION_REGEX.fullmatch(value) is not None and value.isprintable()


@frozen(eq=False)
class Name:
    """A company name. Equality and hashing ignore case but not whitespace."""

    MESSAGE_CONSTRAINTS = (
        "Names should only contain printable characters, and it should not be blank"
    )
    VALIDATION_REGEX = re.compile(r".*\S.*")

    full_name: str = field(
        validator=[instance_of(str), _constraint(_is_valid_name, MESSAGE_CONSTRAINTS)]
    )

    @classmethod
    def is_valid(cls, test: str) -> bool:
        return _is_valid_name(test)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return self.full_name.lower() == other.full_name.lower()

    def __hash__(self) -> int:
        return hash(self.full_name.lower())

    def __str__(self) -> str:
        return self.full_name

    def __repr__(self) -> str:
        return f"Name({self.full_name!r})"


def _is_valid_phone(value: str) -> bool:
    return Phone.VALIDATION_REGEX.fullmatch(value) is not None


@frozen
class Phone:
    """A phone number with at least 3 digits, or None when not provided."""

    MESSAGE_CONSTRAINTS = (
        "Phone numbers must have at least 3 digits, may start with '+', and may contain "
        "single spaces between digits (e.g., '98765432', '+65 9123 4567')."
    )
    VALIDATION_REGEX = re.compile(r"\+?\d(?: ?\d){2,}", re.ASCII)

    value: str | None = field(
        validator=_constraint(_optional(_is_valid_phone), MESSAGE_CONSTRAINTS)
    )

    @classmethod
    def is_valid(cls, test: str | None) -> bool:
        return test is not None and _is_valid_phone(test)

    def __str__(self) -> str:
        return self.value or ""


def _is_valid_email(value: str) -> bool:
    return Email.VALIDATION_REGEX.fullmatch(value) is not None


@frozen
class Email:
    """An email address of the form local-part@domain, or None when not provided."""

    SPECIAL_CHARACTERS = "+_.-"
    MESSAGE_CONSTRAINTS = (
        "Emails should be of the format local-part@domain and adhere to the following constraints:\n"
        f"1. The local-part should only contain alphanumeric characters and these special characters, "
        f"excluding the parentheses, ({SPECIAL_CHARACTERS}). The local-part may not start or end with "
        "any special characters.\n"
        "2. This is followed by a '@' and then a domain name made up of domain labels separated by "
        "periods. The domain name must end with a label at least 2 characters long, and labels may "
        "only contain alphanumeric characters separated by hyphens."
    )
    LOCAL_PART_REGEX = rf"{ALNUM}+(?:[+_.\-]{ALNUM}+)*"
    DOMAIN_PART_REGEX = rf"{ALNUM}+(?:-{ALNUM}+)*"
    DOMAIN_LAST_PART_REGEX = rf"{ALNUM}{{2,}}(?:-{ALNUM}+)*"
    VALIDATION_REGEX = re.compile(
        rf"{LOCAL_PART_REGEX}@(?:{DOMAIN_PART_REGEX}\.)*{DOMAIN_LAST_PART_REGEX}"
    )

    value: str | None = field(
        validator=_constraint(_optional(_is_valid_email), MESSAGE_CONSTRAINTS)
    )

    @classmethod
    def is_valid(cls, test: str | None) -> bool:
        return test is not None and _is_valid_email(test)

    def __str__(self) -> str:
        return self.value or ""


def _is_valid_address(value: str) -> bool:
    return Address.VALIDATION_REGEX.fullmatch(value) is not None


@frozen
class Address:
    """A postal address that does not start with whitespace, or None."""

    MESSAGE_CONSTRAINTS = "Addresses can take any values, and it should not be blank"
    VALIDATION_REGEX = re.compile(r"[^\s].*", re.DOTALL)

    value: str | None = field(
        validator=_constraint(_optional(_is_valid_address), MESSAGE_CONSTRAINTS)
    )

    @classmethod
    def is_valid(cls, test: str | None) -> bool:
        return test is not None and _is_valid_address(test)

    def __str__(self) -> str:
        return self.value or ""


def _blank_to_none(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value


@frozen
class Remark:
    """Free-form notes. Blank text collapses to the absent value None."""

    value: str | None = field(default=None, converter=_blank_to_none)

    @property
    def is_absent(self) -> bool:
        return self.value is None

    def __str__(self) -> str:
        return self.value or ""


def _is_valid_tag_name(value: str) -> bool:
    return Tag.VALIDATION_REGEX.fullmatch(value) is not None


def _check_tag_length(instance, attribute, value: str) -> None:
    if not Tag.is_valid_length(value):
        raise ValueError(Tag.length_exceeded_message(value))


@frozen(order=True)
class Tag:
    """A label such as `remote-work`: alphanumeric words joined by single hyphens."""

    MESSAGE_CONSTRAINTS = (
        "Tag names should be alphanumeric and may contain hyphens to separate words. "
        "No whitespaces allowed."
    )
    MAX_TAG_LENGTH = 30
    MESSAGE_LENGTH_EXCEEDED_FORMAT = (
        "Tag names must not exceed {max} characters.\n"
        "Tag '{tag}' exceeds {max} character limit. ({length} characters)"
    )
    VALIDATION_REGEX = re.compile(rf"{ALNUM}+(?:-{ALNUM}+)*")

    tag_name: str = field(
        validator=[
            _constraint(_is_valid_tag_name, MESSAGE_CONSTRAINTS),
            _check_tag_length,
        ]
    )

    @classmethod
    def is_valid_name(cls, test: str) -> bool:
        return _is_valid_tag_name(test)

    @classmethod
    def is_valid_length(cls, test: str) -> bool:
        return len(test) <= cls.MAX_TAG_LENGTH

    @classmethod
    def length_exceeded_message(cls, tag_name: str) -> str:
        return cls.MESSAGE_LENGTH_EXCEEDED_FORMAT.format(
            max=cls.MAX_TAG_LENGTH, tag=tag_name, length=len(tag_name)
        )

    def __str__(self) -> str:
        return f"[{self.tag_name}]"
