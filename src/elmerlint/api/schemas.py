"""API request/response Pydantic schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field

from elmerlint.models.diagnostics import Diagnostic
from elmerlint.models.document import ELMER_LANGUAGE_ID


class DocumentValidateRequest(BaseModel):
    """Request body for POST /documents/validate."""

    uri: str = Field(description="Document identifier used to key its findings")
    text: str = Field(description="Full document text")
    language_id: str = ELMER_LANGUAGE_ID
    version: int | None = None


class DiagnosticsResponse(BaseModel):
    """Findings for one document."""

    uri: str
    validated: bool = True
    diagnostics: list[Diagnostic] = []


class SectionInfo(BaseModel):
    """A dictionary section and the size of its keyword set."""

    name: str
    keyword_count: int


class SectionListResponse(BaseModel):
    """Response for GET /reference/sections."""

    sections: list[SectionInfo] = []


class SectionKeywordsResponse(BaseModel):
    """Response for GET /reference/sections/{section}."""

    name: str
    keywords: list[str] = []


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "ok"
    version: str = ""
    dictionary_loaded: bool = True
