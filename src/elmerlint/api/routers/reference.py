"""Reference endpoints: GET /reference/sections[/{section}]."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from elmerlint.api.deps import get_validation_service
from elmerlint.api.schemas import SectionInfo, SectionKeywordsResponse, SectionListResponse
from elmerlint.service.validation_service import ValidationService

router = APIRouter()


@router.get("/sections", response_model=SectionListResponse)
async def list_sections(
    service: ValidationService = Depends(get_validation_service),  # noqa: B008
) -> SectionListResponse:
    """List the sections known to the reference dictionary."""
    dictionary = service.dictionary
    return SectionListResponse(
        sections=[
            SectionInfo(name=name, keyword_count=len(dictionary.keywords(name)))
            for name in dictionary.sections
        ]
    )


@router.get("/sections/{section}", response_model=SectionKeywordsResponse)
async def get_section_keywords(
    section: str,
    service: ValidationService = Depends(get_validation_service),  # noqa: B008
) -> SectionKeywordsResponse:
    """Return the recognized keywords of one section."""
    dictionary = service.dictionary
    if not dictionary.has_section(section):
        raise HTTPException(status_code=404, detail=f"Section '{section}' not found")
    return SectionKeywordsResponse(name=section, keywords=sorted(dictionary.keywords(section)))
