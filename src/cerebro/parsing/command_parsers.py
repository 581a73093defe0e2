"""
Parsers that turn the argument text of one command word into a Command.

Every parser runs the same pipeline: tokenize, reject duplicated
single-valued prefixes, validate fields, build the descriptor or record,
resolve the index expression from the preamble, and construct the command.
All failures are ParseError subclasses raised before any command exists.
"""

import logging

from cerebro.commands import (
    AddCommand,
    DeleteCommand,
    EditCommand,
    FilterCommand,
    FindCommand,
    RemarkCommand,
    StatusCommand,
)
from cerebro.commands.messages import invalid_format
from cerebro.exceptions import ParseError
from cerebro.model.company import Company
from cerebro.model.descriptor import EditCompanyDescriptor
from cerebro.model.fields import Address, Email, Name, Phone, Remark
from cerebro.model.status import Status
from cerebro.parsing.fields import (
    parse_address,
    parse_email,
    parse_name,
    parse_optional_address,
    parse_optional_email,
    parse_optional_phone,
    parse_phone,
    parse_remark,
    parse_status,
    parse_tag,
    parse_tags,
)
from cerebro.parsing.indices import (
    parse_index,
    resolve_comma_indices,
    resolve_whitespace_indices,
)
from cerebro.parsing.syntax import (
    ALL_FIELD_PREFIXES,
    PREFIX_ADDRESS,
    PREFIX_EMAIL,
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_REMARK,
    PREFIX_STATUS,
    PREFIX_TAG,
    SINGLE_VALUED_PREFIXES,
)
from cerebro.parsing.tokenizer import tokenize

logger = logging.getLogger(__name__)

PLACEHOLDER_PHONE = "000"
PLACEHOLDER_EMAIL = "noemail@placeholder.com"
PLACEHOLDER_ADDRESS = "No address provided"


class AddCommandParser:
    """Parses ``n/NAME [p/PHONE] [e/EMAIL] [a/ADDRESS] [r/REMARK] [s/STATUS] [t/TAG]...``."""

    def parse(self, args: str) -> AddCommand:
        arg_map = tokenize(args, ALL_FIELD_PREFIXES)
        if arg_map.preamble or not arg_map.is_present(PREFIX_NAME):
            raise ParseError(invalid_format(AddCommand.MESSAGE_USAGE))
        arg_map.verify_no_duplicate_prefixes_for(*SINGLE_VALUED_PREFIXES)

        name = parse_name(arg_map.get_value(PREFIX_NAME))
        if arg_map.present_prefixes() == [PREFIX_NAME]:
            logger.debug("Name-only add for %s, filling placeholders", name)
            return AddCommand(self._with_placeholders(name))

        phone = arg_map.get_value(PREFIX_PHONE)
        email = arg_map.get_value(PREFIX_EMAIL)
        address = arg_map.get_value(PREFIX_ADDRESS)
        remark = arg_map.get_value(PREFIX_REMARK)
        status = arg_map.get_value(PREFIX_STATUS)
        company = Company(
            name=name,
            phone=parse_phone(phone) if phone is not None else Phone(None),
            email=parse_email(email) if email is not None else Email(None),
            address=parse_address(address) if address is not None else Address(None),
            tags=parse_tags(arg_map.get_all_values(PREFIX_TAG)),
            remark=parse_remark(remark) if remark is not None else Remark(None),
            status=parse_status(status) if status is not None else Status(),
        )
        return AddCommand(company)

    @staticmethod
    def _with_placeholders(name: Name) -> Company:
        return Company(
            name=name,
            phone=Phone(PLACEHOLDER_PHONE),
            email=Email(PLACEHOLDER_EMAIL),
            address=Address(PLACEHOLDER_ADDRESS),
            tags=frozenset(),
            remark=Remark(None),
            status=Status(),
        )


class EditCommandParser:
    """Parses ``INDEX[,INDEX|START-END]... [n/NAME] [p/PHONE] ... [t/TAG]...``.

    Indices are comma-delimited and repeats are rejected. A blank phone,
    email, address or remark clears that field; a single blank ``t/`` clears
    all tags.
    """

    # (descriptor slot, prefix, value parser) for every single-valued field
    FIELD_PARSERS = (
        ("name", PREFIX_NAME, parse_name),
        ("phone", PREFIX_PHONE, parse_optional_phone),
        ("email", PREFIX_EMAIL, parse_optional_email),
        ("address", PREFIX_ADDRESS, parse_optional_address),
        ("remark", PREFIX_REMARK, parse_remark),
        ("status", PREFIX_STATUS, parse_status),
    )

    def parse(self, args: str) -> EditCommand:
        arg_map = tokenize(args, ALL_FIELD_PREFIXES)
        if not arg_map.preamble or "/" in arg_map.preamble:
            raise ParseError(invalid_format(EditCommand.MESSAGE_USAGE))

        indices = resolve_comma_indices(arg_map.preamble, duplicates="reject")
        arg_map.verify_no_duplicate_prefixes_for(*SINGLE_VALUED_PREFIXES)

        changes = {}
        for slot, prefix, parse in self.FIELD_PARSERS:
            value = arg_map.get_value(prefix)
            if value is not None:
                changes[slot] = parse(value)
        tags = arg_map.get_all_values(PREFIX_TAG)
        if tags:
            changes["tags"] = frozenset() if tags == [""] else parse_tags(tags)

        descriptor = EditCompanyDescriptor().with_changes(**changes)
        if not descriptor.is_any_field_edited():
            raise ParseError(EditCommand.MESSAGE_NOT_EDITED)
        return EditCommand(indices, descriptor)


class DeleteCommandParser:
    """Parses ``INDEX|START-END`` lists in either of two grammars.

    ``delete 1,3,5-8`` uses the comma grammar; ``delete 1 3 5-8`` uses the
    whitespace grammar. Both drop repeated indices.
    """

    def parse(self, args: str) -> DeleteCommand:
        text = args.strip()
        if not text:
            raise ParseError(invalid_format(DeleteCommand.MESSAGE_USAGE))
        if "," in text:
            indices = resolve_comma_indices(text, duplicates="drop")
        else:
            indices = resolve_whitespace_indices(text)
        return DeleteCommand(indices)


class FilterCommandParser:
    """Parses ``[s/STATUS] [t/TAG_KEYWORD]...`` with at least one criterion."""

    MESSAGE_NO_FILTERS = (
        "At least one filter criterion (s/STATUS or t/TAG) must be provided.\n"
        + FilterCommand.MESSAGE_USAGE
    )

    def parse(self, args: str) -> FilterCommand:
        arg_map = tokenize(args, [PREFIX_STATUS, PREFIX_TAG])
        if arg_map.preamble:
            raise ParseError(invalid_format(FilterCommand.MESSAGE_USAGE))
        if not arg_map.is_present(PREFIX_STATUS) and not arg_map.is_present(PREFIX_TAG):
            raise ParseError(self.MESSAGE_NO_FILTERS)
        arg_map.verify_no_duplicate_prefixes_for(PREFIX_STATUS)

        status_text = arg_map.get_value(PREFIX_STATUS)
        status = parse_status(status_text) if status_text is not None else None
        keywords = [parse_tag(k).tag_name for k in arg_map.get_all_values(PREFIX_TAG)]
        return FilterCommand(status, keywords)


class StatusCommandParser:
    """Parses ``INDEX s/STATUS``."""

    def parse(self, args: str) -> StatusCommand:
        arg_map = tokenize(args, [PREFIX_STATUS])
        if not arg_map.preamble or not arg_map.is_present(PREFIX_STATUS):
            raise ParseError(invalid_format(StatusCommand.MESSAGE_USAGE))
        arg_map.verify_no_duplicate_prefixes_for(PREFIX_STATUS)

        index = parse_index(arg_map.preamble)
        return StatusCommand(index, parse_status(arg_map.get_value(PREFIX_STATUS)))


class RemarkCommandParser:
    """Parses ``INDEX r/[REMARK]``."""

    def parse(self, args: str) -> RemarkCommand:
        arg_map = tokenize(args, [PREFIX_REMARK])
        if not arg_map.preamble or not arg_map.is_present(PREFIX_REMARK):
            raise ParseError(invalid_format(RemarkCommand.MESSAGE_USAGE))
        arg_map.verify_no_duplicate_prefixes_for(PREFIX_REMARK)

        index = parse_index(arg_map.preamble)
        return RemarkCommand(index, parse_remark(arg_map.get_value(PREFIX_REMARK)))


class FindCommandParser:
    """Parses ``KEYWORD [MORE_KEYWORDS]...`` separated by whitespace."""

    def parse(self, args: str) -> FindCommand:
        keywords = args.split()
        if not keywords:
            raise ParseError(invalid_format(FindCommand.MESSAGE_USAGE))
        return FindCommand(keywords)
