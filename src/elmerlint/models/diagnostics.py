"""Structured diagnostic models with exact text position tracking."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class DiagnosticSeverity(StrEnum):
    ERROR = "error"
    WARNING = "warning"
    INFORMATION = "information"
    HINT = "hint"


class Position(BaseModel):
    """Zero-based line and character offset into a document."""

    line: int
    character: int


class Range(BaseModel):
    """Half-open span between two positions."""

    start: Position
    end: Position

    @classmethod
    def on_line(cls, line: int, start: int, end: int) -> Range:
        return cls(
            start=Position(line=line, character=start),
            end=Position(line=line, character=end),
        )


class Diagnostic(BaseModel):
    """A single finding reported against a document."""

    range: Range
    message: str
    severity: DiagnosticSeverity = DiagnosticSeverity.WARNING
    source: str = "elmer"

    @property
    def line(self) -> int:
        return self.range.start.line
