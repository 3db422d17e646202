"""Service layer shared by the CLI and the REST API."""

from elmerlint.service.diagnostic_store import DiagnosticStore
from elmerlint.service.validation_service import ValidationService

__all__ = ["DiagnosticStore", "ValidationService"]
