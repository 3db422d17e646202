"""Section tracking: which block of the input file is open on each line."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from elmerlint.models.sections import SECTION_NAMES, Section

# "Body Force" must be tried before "Body", "Boundary Condition" before "Boundary".
_BLOCK_HEADER_RE = re.compile(
    r"^\s*(Header|Simulation|Constants|Equation|Solver|Material|Body\s+Force|Body"
    r"|Boundary\s+Condition|Initial\s+Condition|Component|Boundary)(\s+[0-9]+)?\s*$",
    re.IGNORECASE,
)
_BLOCK_END_RE = re.compile(r"^\s*End\s*$", re.IGNORECASE)
_WHITESPACE_RE = re.compile(r"\s+")

COMMENT_PREFIX = "!"
BYTE_ORDER_MARK = "\ufeff"


def trim(text: str) -> str:
    """Strip whitespace and byte-order marks from both ends."""
    trimmed = text.strip()
    while trimmed.startswith(BYTE_ORDER_MARK) or trimmed.endswith(BYTE_ORDER_MARK):
        trimmed = trimmed.strip(BYTE_ORDER_MARK).strip()
    return trimmed


@dataclass(frozen=True, slots=True)
class SourceLine:
    """One line of a document."""

    index: int  # zero-based
    raw: str
    text: str  # trimmed

    @classmethod
    def from_raw(cls, index: int, raw: str) -> SourceLine:
        return cls(index=index, raw=raw, text=trim(raw))

    @property
    def is_blank_or_comment(self) -> bool:
        return not self.text or self.text.startswith(COMMENT_PREFIX)


def match_block_header(text: str) -> tuple[bool, Section | None]:
    """Return ``(matched, section)`` for a trimmed line.

    ``section`` is None when the header names a block without a section
    identifier.
    """
    match = _BLOCK_HEADER_RE.match(text)
    if match is None:
        return False, None
    name = _WHITESPACE_RE.sub(" ", match.group(1).lower())
    return True, SECTION_NAMES.get(name)


def is_block_end(text: str) -> bool:
    return _BLOCK_END_RE.match(text) is not None


class SectionTracker:
    """State machine over document lines.

    Starts with no open section. A block header opens (or replaces) the
    current section, ``End`` closes it, every other line leaves it alone.
    """

    def __init__(self) -> None:
        self.current: Section | None = None

    def feed(self, line: SourceLine) -> bool:
        """Advance on *line*; return True if it should be keyword-checked."""
        if line.is_blank_or_comment:
            return False

        matched, section = match_block_header(line.text)
        if matched:
            self.current = section
            return False

        if is_block_end(line.text):
            self.current = None
            return False

        return self.current is not None

    def scan(self, lines: Iterable[str]) -> Iterator[tuple[SourceLine, Section]]:
        """Yield each checkable line together with its active section."""
        for index, raw in enumerate(lines):
            line = SourceLine.from_raw(index, raw)
            if self.feed(line) and self.current is not None:
                yield line, self.current
