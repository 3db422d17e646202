"""Pydantic domain models for elmerlint."""

from elmerlint.models.diagnostics import Diagnostic, DiagnosticSeverity, Position, Range
from elmerlint.models.document import ELMER_LANGUAGE_ID, Document
from elmerlint.models.sections import SECTION_NAMES, Section

__all__ = [
    "Diagnostic",
    "DiagnosticSeverity",
    "Document",
    "ELMER_LANGUAGE_ID",
    "Position",
    "Range",
    "SECTION_NAMES",
    "Section",
]
