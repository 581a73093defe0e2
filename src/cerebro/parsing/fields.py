"""
Field parsers: raw command text to validated value objects.

Each parser trims its input, checks the field's constraint and returns the
value object, or raises FieldValidationError carrying the constraint message.
The ``parse_optional_*`` variants are used by edit, where a prefix supplied
with blank text means "clear this field" rather than "leave it unchanged".
"""

from collections.abc import Iterable

from cerebro.exceptions import FieldValidationError
from cerebro.model.fields import Address, Email, Name, Phone, Remark, Tag
from cerebro.model.status import Status, UnsupportedStatus, resolve_status


def parse_name(name: str) -> Name:
    trimmed = name.strip()
    if not Name.is_valid(trimmed):
        raise FieldValidationError("name", Name.MESSAGE_CONSTRAINTS)
    return Name(trimmed)


def parse_phone(phone: str) -> Phone:
    trimmed = phone.strip()
    if not Phone.is_valid(trimmed):
        raise FieldValidationError("phone", Phone.MESSAGE_CONSTRAINTS)
    return Phone(trimmed)


def parse_email(email: str) -> Email:
    trimmed = email.strip()
    if not Email.is_valid(trimmed):
        raise FieldValidationError("email", Email.MESSAGE_CONSTRAINTS)
    return Email(trimmed)


def parse_address(address: str) -> Address:
    trimmed = address.strip()
    if not Address.is_valid(trimmed):
        raise FieldValidationError("address", Address.MESSAGE_CONSTRAINTS)
    return Address(trimmed)


def parse_remark(remark: str) -> Remark:
    """Remarks accept any text; blank text yields the absent remark."""
    return Remark(remark.strip())


def parse_optional_phone(phone: str) -> Phone:
    return Phone(None) if not phone.strip() else parse_phone(phone)


def parse_optional_email(email: str) -> Email:
    return Email(None) if not email.strip() else parse_email(email)


def parse_optional_address(address: str) -> Address:
    return Address(None) if not address.strip() else parse_address(address)


def parse_tag(tag: str) -> Tag:
    """
    Parse a single tag.

    Raises:
        FieldValidationError: With the format constraint, or with a length
            message citing the tag and its actual length
    """
    trimmed = tag.strip()
    if not Tag.is_valid_name(trimmed):
        raise FieldValidationError("tag", Tag.MESSAGE_CONSTRAINTS)
    if not Tag.is_valid_length(trimmed):
        raise FieldValidationError("tag", Tag.length_exceeded_message(trimmed))
    return Tag(trimmed)


def parse_tags(tags: Iterable[str]) -> frozenset[Tag]:
    return frozenset(parse_tag(tag) for tag in tags)


def parse_status(status: str) -> Status:
    """
    Parse a status token, accepting any case and underscores for hyphens.

    Raises:
        FieldValidationError: With the enumeration's constraint message
    """
    resolved = resolve_status(status)
    if isinstance(resolved, UnsupportedStatus):
        raise FieldValidationError("status", resolved.message)
    return resolved
