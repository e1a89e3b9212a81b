"""
Field-table driven extraction of 2D-DOC message bodies

Every document type declares an ordered table of :class:`BodyField`. A body
is the concatenation, in table order, of ``TAG VALUE [GS]`` for every field.
Values are length and charset bounded; when a variable-length value is not
terminated by a group separator it ends where the next tag starts, so the
extractor backtracks over candidate value lengths, longest first.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Pattern, Sequence, Set, Tuple

from ..exceptions import MalformedBody
from .header import GS

logger = logging.getLogger(__name__)

TAG_LENGTH = 2

# Character classes shared by the document types
LETTERS = r"A-Z ./-"
ALNUM = r"A-Z0-9 ./-"
DIGITS = r"0-9"
UPPER = r"A-Z"


def verbatim(value: str) -> str:
    return value


@dataclass(frozen=True)
class BodyField:
    """
    One tagged field of a document body.

    Attributes:
        tag: Two character data identifier (e.g. "F0")
        name: Attribute name on the body record
        charset: Regular expression character class content (e.g. ``A-Z0-9``)
        min_length: Minimum value length
        max_length: Maximum value length
        decoder: Post-processor applied to the matched value
    """
    tag: str
    name: str
    charset: str
    min_length: int
    max_length: int
    decoder: Callable[[str], str] = verbatim
    pattern: Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        """Validate the field definition and compile its charset"""
        if len(self.tag) != TAG_LENGTH:
            raise ValueError(f"Tag must be {TAG_LENGTH} characters: {self.tag!r}")
        if self.min_length < 0 or self.max_length < self.min_length:
            raise ValueError(f"Invalid length bounds for {self.tag}")
        object.__setattr__(
            self, 'pattern', re.compile(f"[{self.charset}]*", re.ASCII | re.IGNORECASE)
        )

    def candidate_lengths(self, text: str, offset: int) -> range:
        """Value lengths that fit the charset at ``offset``, longest first"""
        run = self.pattern.match(text, offset, min(len(text), offset + self.max_length))
        longest = run.end() - offset
        return range(longest, self.min_length - 1, -1)


@dataclass
class _Failure:
    """Furthest point reached while matching a body"""
    offset: int = -1
    tag: Optional[str] = None
    reason: str = ""

    def record(self, offset: int, tag: Optional[str], reason: str) -> None:
        if offset > self.offset:
            self.offset = offset
            self.tag = tag
            self.reason = reason


def _match_fields(
    text: str,
    fields: Sequence[BodyField],
    index: int,
    offset: int,
    failed: Set[Tuple[int, int]],
    failure: _Failure,
) -> Optional[List[str]]:
    if index == len(fields):
        if offset == len(text):
            return []
        failure.record(offset, None, "unexpected data after the last field")
        return None

    if (index, offset) in failed:
        return None

    body_field = fields[index]
    tag = text[offset:offset + TAG_LENGTH]
    if tag.upper() != body_field.tag:
        failure.record(offset, body_field.tag, f"expected tag {body_field.tag}, found {tag!r}")
        failed.add((index, offset))
        return None

    value_start = offset + TAG_LENGTH
    lengths = body_field.candidate_lengths(text, value_start)
    if not lengths:
        failure.record(value_start, body_field.tag, f"value of {body_field.tag} does not match its pattern")

    for length in lengths:
        value_end = value_start + length
        next_offsets = [value_end + 1, value_end] if text.startswith(GS, value_end) else [value_end]
        for next_offset in next_offsets:
            rest = _match_fields(text, fields, index + 1, next_offset, failed, failure)
            if rest is not None:
                return [text[value_start:value_end]] + rest

    failed.add((index, offset))
    return None


def tokenize_body(text: str, fields: Sequence[BodyField]) -> Dict[str, str]:
    """
    Match a body against a field table and return the raw values.

    Args:
        text: Message body (message without its header)
        fields: Ordered field table

    Returns:
        Dict[str, str]: Raw values keyed by field name

    Raises:
        MalformedBody: If the body does not match the table
    """
    failure = _Failure()
    values = _match_fields(text, fields, 0, 0, set(), failure)
    if values is None:
        raise MalformedBody(
            "Malformed body, unable to parse data",
            details={'offset': failure.offset, 'tag': failure.tag, 'reason': failure.reason}
        )

    return {body_field.name: value for body_field, value in zip(fields, values)}


def extract_body(body_type, text: str):
    """
    Build a body record of ``body_type`` from body text.

    ``body_type`` is a class with a ``FIELDS`` table whose keyword arguments
    are the field names.

    Raises:
        MalformedBody: If the body does not match the table
    """
    raw_values = tokenize_body(text, body_type.FIELDS)
    decoded = {
        body_field.name: body_field.decoder(raw_values[body_field.name])
        for body_field in body_type.FIELDS
    }
    logger.debug("Extracted %d fields for %s", len(decoded), body_type.__name__)
    return body_type(**decoded)
