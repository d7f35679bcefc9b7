"""Outbound calls and response checks shared by providers."""

from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from ddnsync._logging import get_logger
from ddnsync._version import __version__
from ddnsync.exceptions import TransportFailure, UnparseableResponse

logger = get_logger(__name__)

USER_AGENT = f"ddnsync/{__version__}"

# Maximum length of a response body excerpt in error messages
MAX_BODY_EXCERPT = 200

ModelT = TypeVar("ModelT", bound=BaseModel)


def body_to_single_line(body: str, limit: int = MAX_BODY_EXCERPT) -> str:
    """Collapse a response body to one bounded line for diagnostics."""
    line = " ".join(body.split())
    if len(line) > limit:
        return line[:limit] + "..."
    return line


def default_headers(content_type: str | None = None) -> dict[str, str]:
    """Headers sent with every provider request."""
    headers = {
        "User-Agent": USER_AGENT,
        "Accept": "application/json",
    }
    if content_type:
        headers["Content-Type"] = content_type
    return headers


def send(
    client: httpx.Client,
    method: str,
    url: str,
    *,
    timeout: float | None = None,
    **kwargs: Any,
) -> httpx.Response:
    """Send a request through the injected client.

    Args:
        client: HTTP client owned by the caller.
        method: HTTP method.
        url: Request URL.
        timeout: Per-call deadline in seconds; None keeps the client's own.
        **kwargs: Passed to ``httpx.Client.build_request`` (params, data, headers).

    Returns:
        The HTTP response, body fully read.

    Raises:
        TransportFailure: If the request could not be completed.
    """
    request = client.build_request(
        method,
        url,
        timeout=httpx.USE_CLIENT_DEFAULT if timeout is None else timeout,
        **kwargs,
    )

    try:
        return client.send(request)
    except httpx.TimeoutException as e:
        logger.warning(
            "Request timed out",
            extra={"method": request.method, "host": request.url.host},
        )
        raise TransportFailure(str(e) or type(e).__name__, timed_out=True) from e
    except httpx.HTTPError as e:
        logger.warning(
            "Request failed",
            extra={"method": request.method, "host": request.url.host, "error": str(e)},
        )
        raise TransportFailure(str(e) or type(e).__name__) from e


def check_status(response: httpx.Response, expected: int = httpx.codes.OK) -> None:
    """Fail on any HTTP status other than the expected one.

    Raises:
        TransportFailure: Carrying the status code and a one-line body excerpt.
    """
    if response.status_code != expected:
        raise TransportFailure(
            body_to_single_line(response.text),
            status_code=response.status_code,
        )


def decode(response: httpx.Response, model: type[ModelT]) -> ModelT:
    """Decode a JSON response body against a provider schema.

    Raises:
        UnparseableResponse: If the body is not JSON or does not match the model.
    """
    try:
        return model.model_validate_json(response.content)
    except ValidationError as e:
        raise UnparseableResponse(
            f"{e.error_count()} error(s): {body_to_single_line(str(e))}"
        ) from e
