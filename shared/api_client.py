"""Typed HTTP request helper used by API tests."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar
from urllib.parse import urlsplit

import requests

logger = logging.getLogger(__name__)

T = TypeVar("T")


class HttpMethod(str, Enum):
    """HTTP verbs accepted by ``api_request``."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"

    @classmethod
    def values(cls) -> list[str]:
        """Return list of valid method values."""
        return [member.value for member in cls]


@dataclass(frozen=True)
class ApiRequestParams:
    """
    Parameters for a single API call.

    Attributes:
        method: HTTP verb (case-insensitive on input).
        url: Path relative to ``base_url``, or an absolute URL.
        base_url: Origin the relative ``url`` is resolved against.
        body: JSON-serialisable payload. ``None`` sends no body.
        headers: Extra request headers. Nothing is added automatically.
    """

    method: HttpMethod | str
    url: str
    base_url: str | None = None
    body: Any = None
    headers: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        method = self.method.value if isinstance(self.method, HttpMethod) else str(self.method)
        method = method.upper()
        if method not in HttpMethod.values():
            raise ValueError(
                f"Unsupported HTTP method {self.method!r}. "
                f"Must be one of: {', '.join(HttpMethod.values())}"
            )
        object.__setattr__(self, "method", HttpMethod(method))
        object.__setattr__(self, "headers", dict(self.headers or {}))

    @property
    def target_url(self) -> str:
        """
        Compose ``base_url`` and ``url`` into an absolute request target.

        Raises:
            ValueError: If neither value yields an absolute http(s) URL.
        """
        if _is_absolute(self.url):
            return self.url
        if not self.base_url:
            raise ValueError(f"Relative url {self.url!r} requires a base_url")
        target = f"{self.base_url.rstrip('/')}/{self.url.lstrip('/')}"
        if not _is_absolute(target):
            raise ValueError(f"Could not build an absolute URL from {self.base_url!r}")
        return target


@dataclass(frozen=True)
class ApiRequestResponse(Generic[T]):
    """
    Normalised API response.

    ``body`` is typed by the caller but never checked here; run it through
    a schema validator to assert its shape.
    """

    status: int
    body: T


def _is_absolute(url: str) -> bool:
    parts = urlsplit(url)
    return parts.scheme in ("http", "https") and bool(parts.netloc)


def _parse_body(response: requests.Response) -> Any:
    # Empty bodies (e.g. 204) have nothing to parse
    if not response.content:
        return None
    return response.json()


def api_request(session: requests.Session, params: ApiRequestParams) -> ApiRequestResponse[Any]:
    """
    Issue exactly one HTTP request and normalise the result.

    There is no retry, no status checking and no auth injection. Network
    errors and undecodable JSON bodies propagate to the caller unchanged.

    Args:
        session: Shared requests session executing the call.
        params: Request description.

    Returns:
        ``ApiRequestResponse`` with the status code and parsed JSON body.
    """
    target = params.target_url
    request_kwargs: dict[str, Any] = {"headers": params.headers}
    if params.body is not None:
        request_kwargs["json"] = params.body

    logger.info("%s %s", params.method.value, target)
    response = session.request(params.method.value, target, **request_kwargs)
    logger.info("%s %s -> %s", params.method.value, target, response.status_code)

    return ApiRequestResponse(status=response.status_code, body=_parse_body(response))


def auth_headers(token: str, scheme: str = "Token") -> dict[str, str]:
    """Build JSON API headers with an explicit authorization token."""
    return {
        "Authorization": f"{scheme} {token}",
        "Content-Type": "application/json",
        "Accept": "application/json",
    }
