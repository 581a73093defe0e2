"""
Tokenizer for prefixed command arguments.

Splits an argument string such as ``1 n/Google t/faang t/remote`` into a
preamble (``1``) and an ordered multimap from prefix to the values supplied
for it. A prefix is only recognised at the start of the string or directly
after whitespace, so ``abc/n/def`` inside a value is left alone. No field
validation happens here.
"""

import logging
import re
from collections.abc import Iterable
from types import MappingProxyType

from cerebro.exceptions import DuplicatePrefixError
from cerebro.parsing.syntax import Prefix

logger = logging.getLogger(__name__)


class ArgumentMultimap:
    """
    Immutable result of tokenizing an argument string.

    Params:
        preamble: Trimmed text preceding the first recognised prefix
        values: Prefix -> values in input order
        first_positions: Prefix -> offset of its first occurrence
    """

    def __init__(
        self,
        preamble: str,
        values: dict[Prefix, list[str]],
        first_positions: dict[Prefix, int],
    ):
        self._preamble = preamble
        self._values = MappingProxyType(
            {prefix: tuple(found) for prefix, found in values.items()}
        )
        self._first_positions = MappingProxyType(dict(first_positions))

    @property
    def preamble(self) -> str:
        return self._preamble

    def get_value(self, prefix: Prefix) -> str | None:
        """Return the last value supplied for prefix, or None when absent."""
        found = self._values.get(prefix, ())
        return found[-1] if found else None

    def get_all_values(self, prefix: Prefix) -> list[str]:
        return list(self._values.get(prefix, ()))

    def is_present(self, prefix: Prefix) -> bool:
        return prefix in self._values

    def present_prefixes(self) -> list[Prefix]:
        return sorted(self._values, key=self._first_positions.__getitem__)

    def verify_no_duplicate_prefixes_for(self, *prefixes: Prefix) -> None:
        """
        Reject a parse in which any single-valued prefix occurs more than once.

        Params:
            prefixes: Prefixes that may appear at most once

        Raises:
            DuplicatePrefixError: Naming every offending prefix, ordered by first occurrence
        """
        duplicated = [p for p in set(prefixes) if len(self._values.get(p, ())) > 1]
        if duplicated:
            duplicated.sort(key=self._first_positions.__getitem__)
            raise DuplicatePrefixError([str(p) for p in duplicated])

    def __repr__(self) -> str:
        return f"ArgumentMultimap(preamble={self._preamble!r}, values={dict(self._values)!r})"


def _prefix_pattern(prefix: Prefix) -> re.Pattern[str]:
    return re.compile(r"(?:(?<=\s)|^)" + re.escape(prefix.value))


def tokenize(args: str, prefixes: Iterable[Prefix]) -> ArgumentMultimap:
    """
    Tokenize an argument string into a preamble and prefix values.

    Params:
        args: Argument text following the command word
        prefixes: Prefixes recognised for this command; others stay inside values

    Returns:
        ArgumentMultimap with values trimmed and kept in input order
    """
    occurrences: list[tuple[int, Prefix]] = []
    for prefix in dict.fromkeys(prefixes):
        for match in _prefix_pattern(prefix).finditer(args):
            occurrences.append((match.start(), prefix))
    occurrences.sort(key=lambda item: item[0])

    preamble_end = occurrences[0][0] if occurrences else len(args)
    values: dict[Prefix, list[str]] = {}
    first_positions: dict[Prefix, int] = {}
    for i, (start, prefix) in enumerate(occurrences):
        end = occurrences[i + 1][0] if i + 1 < len(occurrences) else len(args)
        value = args[start + len(prefix.value) : end].strip()
        values.setdefault(prefix, []).append(value)
        first_positions.setdefault(prefix, start)

    multimap = ArgumentMultimap(args[:preamble_end].strip(), values, first_positions)
    logger.debug("Tokenized %r -> %r", args, multimap)
    return multimap
