"""Document endpoints: validate, read and drop findings."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from elmerlint.api.deps import get_validation_service
from elmerlint.api.schemas import DiagnosticsResponse, DocumentValidateRequest
from elmerlint.models.document import Document
from elmerlint.service.validation_service import ValidationService

router = APIRouter()


@router.post("/validate", response_model=DiagnosticsResponse)
async def validate_document(
    body: DocumentValidateRequest,
    service: ValidationService = Depends(get_validation_service),  # noqa: B008
) -> DiagnosticsResponse:
    """Validate a document snapshot and replace its stored findings."""
    document = Document(
        uri=body.uri,
        text=body.text,
        language_id=body.language_id,
        version=body.version,
    )
    diagnostics = service.validate(document)
    if diagnostics is None:
        return DiagnosticsResponse(uri=body.uri, validated=False)
    return DiagnosticsResponse(uri=body.uri, diagnostics=diagnostics)


@router.get("/diagnostics", response_model=DiagnosticsResponse)
async def get_diagnostics(
    uri: str = Query(description="Document identifier"),
    service: ValidationService = Depends(get_validation_service),  # noqa: B008
) -> DiagnosticsResponse:
    """Return the findings of the last pass over a document."""
    if uri not in service.store:
        raise HTTPException(status_code=404, detail=f"Document '{uri}' has not been validated")
    return DiagnosticsResponse(uri=uri, diagnostics=service.diagnostics(uri))


@router.delete("", status_code=204)
async def close_document(
    uri: str = Query(description="Document identifier"),
    service: ValidationService = Depends(get_validation_service),  # noqa: B008
) -> None:
    """Forget a closed document's findings."""
    service.close(uri)
