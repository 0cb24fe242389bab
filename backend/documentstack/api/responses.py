"""
DocumentStack: Response decoding.

Turns a 200 response into a GenerateResponse and any other status into
an APIError or RateLimitError. None of these helpers raise on malformed
headers or bodies; they fall back to defaults instead.
"""

from __future__ import annotations

import re
from typing import Mapping

from pydantic import ValidationError as PydanticValidationError

from documentstack.errors import APIError, RateLimitError, is_rate_limit_status
from documentstack.models.generate import APIErrorBody, GenerateResponse

DEFAULT_FILENAME = "document.pdf"
UNKNOWN_ERROR_CODE = "Unknown Error"

_FILENAME_RE = re.compile(r'filename="?([^";\n]+)"?')
_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_int_header(headers: Mapping[str, str], name: str) -> int:
    """Integer value of a header; 0 when missing or not a plain integer."""
    value = headers.get(name)
    if not value or not _INT_RE.fullmatch(value):
        return 0
    return int(value)


def parse_filename(headers: Mapping[str, str]) -> str:
    match = _FILENAME_RE.search(headers.get("Content-Disposition") or "")
    if match:
        return match.group(1)
    return DEFAULT_FILENAME


def build_generate_response(headers: Mapping[str, str], pdf: bytes) -> GenerateResponse:
    content_length = parse_int_header(headers, "Content-Length")
    # A compressed body's Content-Length does not describe the decoded PDF.
    if (headers.get("Content-Encoding") or "identity").strip().lower() != "identity":
        content_length = 0
    # Only an exact zero falls back; negative values are passed through.
    if content_length == 0:
        content_length = len(pdf)

    return GenerateResponse(
        pdf=pdf,
        filename=parse_filename(headers),
        generation_time_ms=parse_int_header(headers, "X-Generation-Time-Ms"),
        content_length=content_length,
    )


def parse_error_body(status_code: int, reason_phrase: str, body: bytes) -> APIErrorBody:
    """Decode the JSON error object, or synthesize one from the status line."""
    try:
        return APIErrorBody.model_validate_json(body)
    except PydanticValidationError:
        return APIErrorBody(
            error=UNKNOWN_ERROR_CODE,
            message=f"{status_code} {reason_phrase}".strip(),
        )


def classify_error(
    status_code: int,
    reason_phrase: str,
    headers: Mapping[str, str],
    body: bytes,
) -> APIError | RateLimitError:
    error_body = parse_error_body(status_code, reason_phrase, body)

    if is_rate_limit_status(status_code):
        return RateLimitError(
            error_code=error_body.error,
            message=error_body.message,
            retry_after=parse_int_header(headers, "Retry-After"),
            details=error_body.details,
            status_code=status_code,
        )

    return APIError(
        status_code=status_code,
        error_code=error_body.error,
        message=error_body.message,
        details=error_body.details,
    )
