"""Dependency injection for FastAPI: ValidationService singleton."""

from __future__ import annotations

from elmerlint.service.validation_service import ValidationService

_validation_service: ValidationService | None = None


def init_validation_service(service: ValidationService) -> None:
    """Set the global ValidationService (called at app startup)."""
    global _validation_service  # noqa: PLW0603
    _validation_service = service


def get_validation_service() -> ValidationService:
    """FastAPI ``Depends`` provider for ValidationService."""
    if _validation_service is None:
        raise RuntimeError(
            "ValidationService not initialised; call init_validation_service() first"
        )
    return _validation_service


def reset_validation_service() -> None:
    """Clear the global ValidationService (for tests)."""
    global _validation_service  # noqa: PLW0603
    _validation_service = None
