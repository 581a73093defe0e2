"""
Index expression resolution.

Two grammars coexist and are deliberately kept apart:

- ``resolve_whitespace_indices``: ``1 3-5 7``. Later repeats of an index are
  dropped silently.
- ``resolve_comma_indices``: ``1,3-5,7``. Repeats are rejected with one
  message listing every duplicate, unless the caller asks for them to be
  dropped.

Both accept single positive integers and inclusive ``A-B`` ranges with A <= B,
and both return Index values in first-occurrence order. Neither checks the
indices against a list size; commands do that at execution time.
"""

import logging
import re

from cerebro.core.index import Index
from cerebro.core.types import DuplicatePolicy
from cerebro.exceptions import ParseIndicesError

logger = logging.getLogger(__name__)

MAX_INDEX = 2**31 - 1
MAX_RANGE_SIZE = 100_000

MESSAGE_INVALID_INDEX = "Index must be a positive integer (1, 2, 3, ...)."
MESSAGE_NOT_A_NUMBER = "Index must be a positive integer (1, 2, 3, ...), got '{token}'."
MESSAGE_NOT_POSITIVE = "Index must be greater than 0, got {token}."
MESSAGE_TOO_LARGE = "Index {token} is too large. The largest supported index is {max}."
MESSAGE_INVALID_INDICES = (
    "Indices must be a comma-separated list of positive integers (1, 2, 3) "
    "or a range (1-3) or a combination of both (1, 2-4)."
)
MESSAGE_EMPTY_INDEX = "Empty index in '{text}'. " + MESSAGE_INVALID_INDICES
MESSAGE_INVALID_RANGE = "Invalid range '{token}'. Ranges are written START-END, e.g. 2-4."
MESSAGE_REVERSED_RANGE = (
    "Invalid range '{token}': the start of a range must not be greater than its end."
)
MESSAGE_RANGE_TOO_LARGE = (
    "Range '{token}' covers more than {max} indices."
)
MESSAGE_DUPLICATE_INDICES = (
    "Duplicate indices found: {duplicates}. Each index should appear only once."
)

_INTEGER = re.compile(r"-?\d+", re.ASCII)
_NEGATIVE = re.compile(r"-\s*\d+", re.ASCII)


def parse_index(token: str) -> Index:
    """
    Parse a single 1-based index.

    Params:
        token: Index text; surrounding whitespace is ignored

    Returns:
        The parsed Index

    Raises:
        ParseIndicesError: With a distinct message for empty, non-numeric,
            zero/negative and too-large input
    """
    text = token.strip()
    if not text:
        raise ParseIndicesError(MESSAGE_INVALID_INDEX)
    if _NEGATIVE.fullmatch(text):
        text = text.replace(" ", "")
    if not _INTEGER.fullmatch(text):
        raise ParseIndicesError(MESSAGE_NOT_A_NUMBER.format(token=text))
    value = int(text)
    if value <= 0:
        raise ParseIndicesError(MESSAGE_NOT_POSITIVE.format(token=value))
    if value > MAX_INDEX:
        raise ParseIndicesError(MESSAGE_TOO_LARGE.format(token=text, max=MAX_INDEX))
    return Index.from_one_based(value)


def _expand_token(token: str) -> list[int]:
    """Expand one ``N`` or ``A-B`` token into 1-based integers."""
    if _NEGATIVE.fullmatch(token):
        # "-3" is a negative index, not a range missing its start
        return [parse_index(token).one_based]

    if "-" in token:
        parts = token.split("-")
        if len(parts) != 2 or not parts[0].strip() or not parts[1].strip():
            raise ParseIndicesError(MESSAGE_INVALID_RANGE.format(token=token))
        start = parse_index(parts[0]).one_based
        end = parse_index(parts[1]).one_based
        if end < start:
            raise ParseIndicesError(MESSAGE_REVERSED_RANGE.format(token=token))
        if end - start >= MAX_RANGE_SIZE:
            raise ParseIndicesError(
                MESSAGE_RANGE_TOO_LARGE.format(token=token, max=MAX_RANGE_SIZE)
            )
        return list(range(start, end + 1))

    if any(ch.isspace() for ch in token):
        raise ParseIndicesError(MESSAGE_INVALID_INDICES)
    return [parse_index(token).one_based]


def resolve_whitespace_indices(text: str) -> list[Index]:
    """
    Resolve a whitespace-delimited index expression such as ``1 3-5 7``.

    Repeated indices are dropped, keeping the first occurrence.

    Params:
        text: The expression

    Returns:
        Unique indices in first-occurrence order

    Raises:
        ParseIndicesError: If the expression is empty or any token is invalid
    """
    tokens = text.split()
    if not tokens:
        raise ParseIndicesError(MESSAGE_INVALID_INDICES)

    seen: dict[int, None] = {}
    for token in tokens:
        for value in _expand_token(token):
            seen.setdefault(value, None)
    return [Index.from_one_based(value) for value in seen]


def resolve_comma_indices(
    text: str, *, duplicates: DuplicatePolicy = "reject"
) -> list[Index]:
    """
    Resolve a comma-delimited index expression such as ``1, 3-5, 7``.

    Params:
        text: The expression; whitespace around tokens is ignored
        duplicates: "reject" to fail on repeated indices, "drop" to keep only
            the first occurrence

    Returns:
        Unique indices in first-occurrence order

    Raises:
        ParseIndicesError: If the expression is empty, has an empty token, has
            an invalid token, or (when rejecting) repeats an index. Invalid
            tokens are reported ahead of duplicates.
    """
    if not text.strip():
        raise ParseIndicesError(MESSAGE_INVALID_INDICES)

    seen: dict[int, None] = {}
    repeated: set[int] = set()
    for raw_token in text.split(","):
        token = raw_token.strip()
        if not token:
            raise ParseIndicesError(MESSAGE_EMPTY_INDEX.format(text=text.strip()))
        for value in _expand_token(token):
            if value in seen:
                repeated.add(value)
            else:
                seen[value] = None

    if repeated and duplicates == "reject":
        listed = ", ".join(str(value) for value in sorted(repeated))
        raise ParseIndicesError(
            MESSAGE_DUPLICATE_INDICES.format(duplicates=listed),
            duplicates=[str(value) for value in sorted(repeated)],
        )
    if repeated:
        logger.debug("Dropped repeated indices %s", sorted(repeated))
    return [Index.from_one_based(value) for value in seen]
