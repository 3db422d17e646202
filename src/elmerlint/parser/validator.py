"""Document validation: section tracking + keyword lookup over every line."""

from __future__ import annotations

from elmerlint.models.diagnostics import Diagnostic
from elmerlint.parser.dictionary import KeywordDictionary
from elmerlint.parser.keywords import DEFAULT_SOURCE, KeywordChecker
from elmerlint.parser.sections import SectionTracker


class SifValidator:
    """Validates solver input text against a reference keyword dictionary.

    Stateless between calls; every call re-scans the whole text with a fresh
    section tracker, so one instance can serve concurrent documents.
    """

    def __init__(self, dictionary: KeywordDictionary, source: str = DEFAULT_SOURCE) -> None:
        self._checker = KeywordChecker(dictionary, source=source)

    def validate(self, text: str) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        tracker = SectionTracker()
        for line, section in tracker.scan(text.split("\n")):
            diagnostic = self._checker.check(line, section)
            if diagnostic is not None:
                diagnostics.append(diagnostic)
        return diagnostics
