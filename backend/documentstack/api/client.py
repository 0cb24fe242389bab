"""
DocumentStack: Generate API client.

One endpoint:
  POST {base_url}/api/v1/generate/{templateId}

Auth: Bearer API key on every request.
The request body is JSON; a 200 response body is the raw PDF, with metadata
in the Content-Disposition, X-Generation-Time-Ms and Content-Length headers.
Any other status is decoded into an APIError (or RateLimitError for 429).
No retries: a failed attempt is final for that call.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any, Mapping
from urllib.parse import quote

import httpx
from pydantic import ValidationError as PydanticValidationError

from documentstack.api.auth import BearerCredentials
from documentstack.api.responses import build_generate_response, classify_error
from documentstack.core.config import ClientConfig, load_config
from documentstack.errors import NetworkError, RequestTimeoutError, ValidationError
from documentstack.models.generate import GenerateRequest, GenerateResponse
from documentstack.utils.debug import DebugObserver, LoggingDebugObserver


class DocumentStackClient:
    """
    Thin async wrapper around the DocumentStack generate endpoint.

    The client keeps only resolved configuration and one httpx.AsyncClient,
    so a single instance can serve concurrent generate() calls.

    Example:

        async with DocumentStackClient(ClientConfig(api_key="...")) as client:
            result = await client.generate(
                "template-id",
                GenerateRequest(data={"name": "John Doe", "amount": 100},
                                options=GenerateOptions(filename="invoice")),
            )
            result.save("invoice.pdf")
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        observer: DebugObserver | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config.resolve()
        self.credentials = BearerCredentials(self.config.api_key)
        self.observer: DebugObserver = observer or LoggingDebugObserver()
        self._http = httpx.AsyncClient(
            timeout=httpx.Timeout(float(self.config.timeout)),
            transport=transport,
        )

    @classmethod
    def from_env(
        cls,
        env_file: str | Path | None = None,
        *,
        observer: DebugObserver | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        **overrides: Any,
    ) -> "DocumentStackClient":
        """Build a client from DOCUMENTSTACK_* environment variables."""
        return cls(load_config(env_file, **overrides), observer=observer, transport=transport)

    async def __aenter__(self) -> "DocumentStackClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    def _endpoint(self, template_id: str) -> str:
        escaped = quote(template_id, safe="")
        # "." and ".." would be collapsed as dot segments by URL normalisation.
        if set(template_id) == {"."}:
            escaped = template_id.replace(".", "%2E")
        return f"{self.config.base_url}/api/v1/generate/{escaped}"

    def _headers(self) -> httpx.Headers:
        h = httpx.Headers({"Content-Type": "application/json"})
        h.update(self.credentials.as_headers())
        # Configured headers replace the defaults case-insensitively.
        for key, value in self.config.headers.items():
            h[key] = value
        return h

    @staticmethod
    def _coerce_request(
        request: GenerateRequest | Mapping[str, Any] | None,
    ) -> GenerateRequest:
        if request is None:
            return GenerateRequest()
        if isinstance(request, GenerateRequest):
            return request
        try:
            return GenerateRequest.model_validate(request)
        except PydanticValidationError as exc:
            raise ValidationError(
                "Invalid generate request",
                details=exc.errors(include_url=False),
            ) from exc

    async def generate(
        self,
        template_id: str,
        request: GenerateRequest | Mapping[str, Any] | None = None,
        *,
        deadline: float | None = None,
    ) -> GenerateResponse:
        """
        Generate a PDF from a template.

        `deadline` is an absolute event-loop time (see asyncio.timeout_at)
        bounding both the send and the body read; passing it raises
        RequestTimeoutError. The configured transport timeout still applies
        and surfaces as NetworkError. Cancelling the calling task cancels
        the request.

        Raises ValidationError, NetworkError, RequestTimeoutError, APIError
        or RateLimitError.
        """
        if not template_id:
            raise ValidationError("Template ID is required")

        generate_request = self._coerce_request(request)
        endpoint = self._endpoint(template_id)

        try:
            body = json.dumps(generate_request.to_payload(), allow_nan=False)
        except (TypeError, ValueError) as exc:
            raise NetworkError("failed to marshal request body", exc) from exc

        if self.config.debug:
            self.observer.on_request("POST", endpoint, body)

        try:
            http_request = self._http.build_request(
                "POST", endpoint, content=body.encode("utf-8"), headers=self._headers()
            )
        except httpx.InvalidURL as exc:
            raise NetworkError("failed to create request", exc) from exc

        response, response_body = await self._dispatch(http_request, deadline)

        if response.status_code != httpx.codes.OK:
            raise classify_error(
                response.status_code,
                response.reason_phrase,
                response.headers,
                response_body,
            )

        result = build_generate_response(response.headers, response_body)

        if self.config.debug:
            self.observer.on_response(
                result.filename, result.generation_time_ms, result.content_length
            )

        return result

    async def _dispatch(
        self, request: httpx.Request, deadline: float | None
    ) -> tuple[httpx.Response, bytes]:
        """Send and read the body, both bounded by the caller's deadline."""
        if deadline is not None and deadline <= asyncio.get_running_loop().time():
            raise RequestTimeoutError(self.config.timeout)

        scope = asyncio.timeout_at(deadline)
        try:
            async with scope:
                return await self._exchange(request)
        except TimeoutError as exc:
            if scope.expired():
                raise RequestTimeoutError(self.config.timeout) from exc
            raise NetworkError("request failed", exc) from exc

    async def _exchange(self, request: httpx.Request) -> tuple[httpx.Response, bytes]:
        try:
            response = await self._http.send(request, stream=True)
        except httpx.HTTPError as exc:
            raise NetworkError("request failed", exc) from exc

        try:
            if response.status_code != httpx.codes.OK:
                try:
                    return response, await response.aread()
                except httpx.HTTPError:
                    # An unreadable error body is decoded like an invalid one.
                    return response, b""

            try:
                return response, await response.aread()
            except httpx.HTTPError as exc:
                raise NetworkError("failed to read response body", exc) from exc
        finally:
            await response.aclose()
