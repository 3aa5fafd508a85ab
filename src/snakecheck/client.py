# Copyright (c) Syntropy Systems
"""HTTP client for asking a snake agent for its move."""
from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, ClassVar

import httpx
from pydantic import ValidationError
from typing_extensions import Self

from snakecheck.models.base import describe_validation_error
from snakecheck.models.fixture import MoveResponse
from snakecheck.models.result import ErrorKind

if TYPE_CHECKING:
    from types import TracebackType

    from snakecheck.models.base import JSONObject

logger = logging.getLogger(__name__)

DEFAULT_URL = "http://localhost:8000"
DEFAULT_MOVE_PATH = "/move"
DEFAULT_TIMEOUT = 5.0


class AgentClientError(Exception):
    """Error from talking to the agent endpoint."""

    kind: ClassVar[ErrorKind]


class UnreachableEndpoint(AgentClientError):
    """The agent could not be connected to."""

    kind = ErrorKind.UNREACHABLE_ENDPOINT


class Timeout(AgentClientError):
    """The agent did not answer within the configured timeout."""

    kind = ErrorKind.TIMEOUT


class InvalidResponse(AgentClientError):
    """The agent answered, but not with a single recognized move."""

    kind = ErrorKind.INVALID_RESPONSE


class AgentClient:
    """HTTP client that posts board states to an agent's move endpoint."""

    base_url: str
    move_path: str
    timeout: float
    _client: httpx.Client

    def __init__(
        self,
        base_url: str = DEFAULT_URL,
        move_path: str = DEFAULT_MOVE_PATH,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Base URL of the agent (e.g., "http://localhost:8000")
            move_path: Path of the move endpoint, appended to base_url
            timeout: Request timeout in seconds
            transport: Optional httpx transport, mainly for tests

        """
        self.base_url = base_url.rstrip("/")
        self.move_path = "/" + move_path.lstrip("/")
        self.timeout = timeout
        self._client = httpx.Client(timeout=timeout, transport=transport)

    @property
    def move_url(self) -> str:
        return f"{self.base_url}{self.move_path}"

    def close(self) -> None:
        """Close the HTTP client and its connection pool."""
        self._client.close()

    def __enter__(self) -> Self:
        """Enter the client context and return self."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit the client context and close the HTTP client."""
        self.close()

    def request_move(self, state: JSONObject) -> MoveResponse:
        """Send a board state and return the agent's move.

        Args:
            state: Board state, sent verbatim as the JSON request body

        Returns:
            The parsed move response

        Raises:
            UnreachableEndpoint: On connection failure
            Timeout: If no response arrives within the timeout
            InvalidResponse: On a non-2xx status, a body that cannot be
                decoded, too many redirects, or no recognized move

        """
        url = self.move_url
        try:
            response = self._client.post(url, json=state)
            _ = response.raise_for_status()
        except httpx.TimeoutException as e:
            msg = f"No response from {url} within {self.timeout}s"
            raise Timeout(msg) from e
        except httpx.HTTPStatusError as e:
            msg = f"Agent returned HTTP {e.response.status_code}"
            raise InvalidResponse(msg) from e
        except (httpx.DecodingError, httpx.TooManyRedirects) as e:
            msg = f"Unreadable response from agent: {e}"
            raise InvalidResponse(msg) from e
        except httpx.TransportError as e:
            msg = f"Connection error: {e}"
            raise UnreachableEndpoint(msg) from e

        return parse_move_response(response.content)


def parse_move_response(body: bytes) -> MoveResponse:
    """Parse a move endpoint reply.

    Accepts ``{"move": "up", "shout": "..."}`` or a bare JSON string.

    Raises:
        InvalidResponse: If the body does not hold exactly one known move

    """
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        msg = f"Response is not JSON: {body[:80]!r}"
        raise InvalidResponse(msg) from e

    try:
        parsed = MoveResponse.model_validate(data)
    except ValidationError as e:
        msg = f"Unrecognized move response: {describe_validation_error(e)}"
        raise InvalidResponse(msg) from e

    logger.debug("Agent moved %s", parsed.move)
    return parsed
