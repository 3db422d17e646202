"""In-memory diagnostics registry keyed by document uri."""

from __future__ import annotations

import threading

from elmerlint.models.diagnostics import Diagnostic


class DiagnosticStore:
    """Latest findings per document.  Thread-safe via ``threading.Lock``.

    Every :meth:`set` replaces the whole entry for a document; findings are
    never merged across passes, so the last completed pass wins.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._diagnostics: dict[str, tuple[Diagnostic, ...]] = {}

    def set(self, uri: str, diagnostics: list[Diagnostic]) -> None:
        entry = tuple(diagnostics)
        with self._lock:
            self._diagnostics[uri] = entry

    def get(self, uri: str) -> list[Diagnostic]:
        """Return the findings for *uri* (empty if never validated)."""
        with self._lock:
            return list(self._diagnostics.get(uri, ()))

    def delete(self, uri: str) -> None:
        """Drop the findings for *uri*; unknown uris are ignored."""
        with self._lock:
            self._diagnostics.pop(uri, None)

    def clear(self) -> None:
        with self._lock:
            self._diagnostics.clear()

    def uris(self) -> list[str]:
        with self._lock:
            return list(self._diagnostics)

    def __contains__(self, uri: object) -> bool:
        with self._lock:
            return uri in self._diagnostics

    def __len__(self) -> int:
        with self._lock:
            return len(self._diagnostics)
