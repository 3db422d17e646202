"""Validation service: the host-facing ``validate(document)`` entry point."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from elmerlint.models.diagnostics import Diagnostic
from elmerlint.models.document import ELMER_LANGUAGE_ID, Document
from elmerlint.parser.dictionary import (
    DictionaryLoadError,
    KeywordDictionary,
    load_default_dictionary,
    load_dictionary,
)
from elmerlint.parser.keywords import DEFAULT_SOURCE
from elmerlint.parser.validator import SifValidator
from elmerlint.service.diagnostic_store import DiagnosticStore
from elmerlint.settings import Settings

logger = logging.getLogger(__name__)


class ValidationService:
    """Runs validation passes and publishes their findings to a store.

    The host calls :meth:`validate` on document open, save and change, and
    :meth:`validate_all` once at start-up for documents already open.
    """

    def __init__(
        self,
        dictionary: KeywordDictionary,
        store: DiagnosticStore | None = None,
        *,
        language_id: str = ELMER_LANGUAGE_ID,
        source: str = DEFAULT_SOURCE,
        dictionary_error: str | None = None,
    ) -> None:
        self._dictionary = dictionary
        self._store = store if store is not None else DiagnosticStore()
        self._language_id = language_id
        self._validator = SifValidator(dictionary, source=source)
        self._dictionary_error = dictionary_error

    @classmethod
    def from_settings(cls, settings: Settings) -> ValidationService:
        """Build a service from settings, degrading if the dictionary cannot be loaded."""
        dictionary_error: str | None = None
        try:
            if settings.keywords_file is not None:
                dictionary = load_dictionary(settings.keywords_file)
            else:
                dictionary = load_default_dictionary()
        except DictionaryLoadError as exc:
            logger.error("Keyword dictionary unavailable, keyword checks disabled: %s", exc)
            dictionary = KeywordDictionary.empty()
            dictionary_error = str(exc)
        return cls(
            dictionary,
            language_id=settings.language_id,
            source=settings.diagnostic_source,
            dictionary_error=dictionary_error,
        )

    # -- properties ----------------------------------------------------------

    @property
    def dictionary(self) -> KeywordDictionary:
        return self._dictionary

    @property
    def store(self) -> DiagnosticStore:
        return self._store

    @property
    def language_id(self) -> str:
        return self._language_id

    @property
    def degraded(self) -> bool:
        """True when running without a reference dictionary."""
        return self._dictionary_error is not None

    @property
    def dictionary_error(self) -> str | None:
        return self._dictionary_error

    # -- public API ----------------------------------------------------------

    def accepts(self, document: Document) -> bool:
        return document.language_id == self._language_id

    def validate(self, document: Document) -> list[Diagnostic] | None:
        """Validate *document* and replace its stored findings.

        Returns None (and leaves the store untouched) for documents of
        another language.
        """
        if not self.accepts(document):
            logger.debug(
                "Skipping %s: language '%s' is not '%s'",
                document.uri, document.language_id, self._language_id,
            )
            return None
        diagnostics = self._validator.validate(document.text)
        self._store.set(document.uri, diagnostics)
        logger.debug("Validated %s: %d finding(s)", document.uri, len(diagnostics))
        return diagnostics

    def validate_all(self, documents: Iterable[Document]) -> int:
        """Validate every accepted document; return how many were validated."""
        count = 0
        for document in documents:
            if self.validate(document) is not None:
                count += 1
        logger.info("Start-up validation covered %d document(s)", count)
        return count

    def diagnostics(self, uri: str) -> list[Diagnostic]:
        return self._store.get(uri)

    def close(self, uri: str) -> None:
        """Forget the findings of a closed document."""
        self._store.delete(uri)

    def dispose(self) -> None:
        """Release all findings (host shutdown)."""
        self._store.clear()
