"""
DocumentStack: API authentication helpers.

The generate endpoint authenticates with a Bearer token on every request.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class BearerCredentials:
    api_key: str

    def as_headers(self) -> dict[str, str]:
        """Return the auth headers required by the DocumentStack API."""
        return {"Authorization": f"Bearer {self.api_key}"}

    def __repr__(self) -> str:
        return "BearerCredentials(api_key='***')"
