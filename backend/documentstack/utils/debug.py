"""
DocumentStack: Debug trace observers.

The client reports each request and successful response to a DebugObserver
when debug mode is on. The default observer logs; tests inject their own.
"""

from typing import Protocol

from documentstack.utils.logging import logger


class DebugObserver(Protocol):
    def on_request(self, method: str, url: str, body: str) -> None: ...

    def on_response(self, filename: str, generation_time_ms: int, content_length: int) -> None: ...


class LoggingDebugObserver:
    """Writes debug traces to the `documentstack` logger."""

    def on_request(self, method: str, url: str, body: str) -> None:
        logger.info("[DocumentStack] Request: %s %s", method, url)
        logger.info("[DocumentStack] Body: %s", body)

    def on_response(self, filename: str, generation_time_ms: int, content_length: int) -> None:
        logger.info(
            "[DocumentStack] Response: filename=%s, time=%dms, size=%d",
            filename, generation_time_ms, content_length,
        )
