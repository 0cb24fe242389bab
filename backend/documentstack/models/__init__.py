"""DocumentStack data models: typed contracts for the generate endpoint."""

from documentstack.models.generate import (
    APIErrorBody,
    GenerateOptions,
    GenerateRequest,
    GenerateResponse,
)

__all__ = [
    "APIErrorBody",
    "GenerateOptions",
    "GenerateRequest",
    "GenerateResponse",
]
