"""Input documents as handed over by the host."""

from __future__ import annotations

from pydantic import BaseModel

ELMER_LANGUAGE_ID = "elmer"


class Document(BaseModel):
    """A snapshot of one open document."""

    uri: str
    text: str
    language_id: str = ELMER_LANGUAGE_ID
    version: int | None = None
