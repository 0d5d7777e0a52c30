"""
HTTP Client for the Gabi query endpoint.

Sends one query per call as `POST <base>/query` with the kubeconfig bearer
token. Status 200 and 400 are both protocol-level answers whose body is
decoded; 400 carries an application error inside the body. Anything else
is a transport failure.
"""

from typing import Any

import httpx
from pydantic import ValidationError

from gabi_cli.core.exceptions import MalformedResponseError, RequestBuildError, TransportError
from gabi_cli.core.logging import get_logger, log_with_source
from gabi_cli.schemas import QueryRequest, QueryResponse
from gabi_cli.session import Session

logger = get_logger(__name__)

VALID_STATUS_CODES = frozenset({httpx.codes.OK, httpx.codes.BAD_REQUEST})


class GabiClient:
    """
    Synchronous client bound to one Gabi endpoint and token.

    Failures raise a QueryError subclass:
    - RequestBuildError: the request could not be built
    - TransportError: network failure or unexpected HTTP status
    - MalformedResponseError: a 200/400 body that does not decode

    Usage:
        with GabiClient("https://gabi.example.com", token) as client:
            response = client.query("select 1;")
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        *,
        query_path: str = "/query",
        timeout: float | None = None,
        verify: bool = True,
        transport: httpx.BaseTransport | None = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: Gabi base URL (scheme, host and route path)
            token: Bearer token presented on every request
            query_path: Path of the query endpoint below base_url
            timeout: Request timeout in seconds. None waits forever.
            verify: Verify the server TLS certificate
            transport: Custom httpx transport (tests)
        """
        self.base_url = base_url.rstrip("/")
        self.query_path = query_path
        self.timeout = timeout
        self._token = token
        self._verify = verify
        self._transport = transport
        self._client: httpx.Client | None = None

    @classmethod
    def for_session(cls, session: Session, **kwargs: Any) -> "GabiClient":
        """Create a client for the session's endpoint and token."""
        return cls(session.base_url, session.token, **kwargs)

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            kwargs: dict[str, Any] = {
                "base_url": self.base_url,
                "timeout": self.timeout,
                "verify": self._verify,
                "headers": {"Authorization": f"Bearer {self._token}"},
            }
            if self._transport is not None:
                kwargs["transport"] = self._transport
            self._client = httpx.Client(**kwargs)
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            self._client.close()
            self._client = None

    def __enter__(self) -> "GabiClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def build_request(self, query: str) -> httpx.Request:
        """Build the POST request for a query."""
        try:
            body = QueryRequest(query=query).model_dump_json()
            return self._get_client().build_request(
                "POST",
                self.query_path,
                content=body,
                headers={"Content-Type": "application/json"},
            )
        except (httpx.InvalidURL, ValidationError, TypeError, ValueError) as e:
            raise RequestBuildError(f"request build failed: {e}") from e

    def query(self, query: str) -> QueryResponse:
        """
        Send a query and decode the response.

        Args:
            query: Query text, including the trailing delimiter

        Returns:
            QueryResponse. Its ``error`` may be non-empty (HTTP 400).
        """
        request = self.build_request(query)

        log_with_source(logger, "http", "debug", "Query request", url=str(request.url))

        try:
            response = self._get_client().send(request)
        except httpx.HTTPError as e:
            log_with_source(logger, "http", "debug", "Query request failed", error=str(e))
            raise TransportError(f"gabi request failed: {e}") from e

        try:
            log_with_source(
                logger,
                "http",
                "debug",
                "Query response",
                status_code=response.status_code,
            )

            if response.status_code not in VALID_STATUS_CODES:
                raise TransportError(
                    f"http status: {response.status_code} {response.reason_phrase}",
                    status_code=response.status_code,
                )

            try:
                return QueryResponse.model_validate_json(response.content)
            except ValidationError as e:
                raise MalformedResponseError(f"malformed result {e}") from e
        finally:
            response.close()
