"""
DocumentStack: Generate request/response contracts.

Template data stays an open mapping of JSON values: the API applies no
schema of its own, so neither do we.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, JsonValue


class GenerateOptions(BaseModel):
    filename: str | None = Field(
        default=None,
        description="Output filename, without the .pdf extension",
    )


class GenerateRequest(BaseModel):
    data: dict[str, JsonValue] | None = Field(
        default=None,
        description="Template data for variable substitution",
    )
    options: GenerateOptions | None = None

    def to_payload(self) -> dict[str, Any]:
        """Wire body for POST /api/v1/generate. Empty fields are left out."""
        payload: dict[str, Any] = {}
        if self.data:
            payload["data"] = self.data
        if self.options is not None and self.options.filename:
            payload["options"] = {"filename": self.options.filename}
        return payload


class GenerateResponse(BaseModel):
    """A generated PDF plus the metadata the API returned in headers."""

    model_config = ConfigDict(frozen=True)

    pdf: bytes = Field(repr=False)
    filename: str
    generation_time_ms: int = 0
    content_length: int = 0

    def save(self, path: str | Path | None = None) -> Path:
        """Write the PDF to `path` (default: the server filename in the cwd)."""
        target = Path(path) if path is not None else Path(Path(self.filename).name)
        target.write_bytes(self.pdf)
        return target


class APIErrorBody(BaseModel):
    error: str = ""
    message: str = ""
    details: Any = None
