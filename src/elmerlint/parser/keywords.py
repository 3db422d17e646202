"""Keyword extraction and lookup for lines inside an open section."""

from __future__ import annotations

import re
from dataclasses import dataclass

from elmerlint.models.diagnostics import Diagnostic, DiagnosticSeverity, Range
from elmerlint.models.sections import Section
from elmerlint.parser.dictionary import KeywordDictionary, normalize_keyword
from elmerlint.parser.sections import SourceLine

# Keyword is everything before the first "(" or "=", starting with a letter.
# Case-sensitive; normalization folds case afterwards.
_KEYWORD_RE = re.compile(r"^\s*([A-Za-z][A-Za-z0-9\s\-{}]*+)[(=]")
_NUMBER_SUFFIX_RE = re.compile(r"\s+[0-9]+$")

COMMON_KEYWORDS = frozenset({"name", "end"})

DEFAULT_SOURCE = "elmer"


@dataclass(frozen=True, slots=True)
class KeywordToken:
    """A keyword as written on the line plus its lookup forms."""

    raw: str
    normalized: str

    @property
    def base(self) -> str:
        """Numbered variant collapsed onto its first member ("mask name 2" -> "mask name 1")."""
        return _NUMBER_SUFFIX_RE.sub(" 1", self.normalized)


def extract_keyword(raw_line: str) -> KeywordToken | None:
    match = _KEYWORD_RE.match(raw_line)
    if match is None:
        return None
    raw = match.group(1).strip()
    return KeywordToken(raw=raw, normalized=normalize_keyword(raw))


def unknown_keyword_message(raw: str, section: Section) -> str:
    return f'Unknown keyword "{raw}" in {section.value.upper()} section'


class KeywordChecker:
    """Decides whether a line's keyword is recognized in its section."""

    def __init__(self, dictionary: KeywordDictionary, source: str = DEFAULT_SOURCE) -> None:
        self._dictionary = dictionary
        self._source = source

    def is_known(self, token: KeywordToken, section: Section) -> bool:
        dictionary = self._dictionary
        base = token.base
        return (
            dictionary.contains(section, token.normalized)
            or dictionary.contains(section, base)
            or dictionary.contains_any(token.normalized)
            or dictionary.contains_any(base)
        )

    def check(self, line: SourceLine, section: Section) -> Diagnostic | None:
        """Return a warning for an unrecognized keyword, or None."""
        token = extract_keyword(line.raw)
        if token is None or token.normalized in COMMON_KEYWORDS:
            return None
        if not self._dictionary.has_section(section):
            return None
        if self.is_known(token, section):
            return None

        start = line.raw.find(token.raw)
        return Diagnostic(
            range=Range.on_line(line.index, start, start + len(token.raw)),
            message=unknown_keyword_message(token.raw, section),
            severity=DiagnosticSeverity.WARNING,
            source=self._source,
        )
