"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.

Two tiers:
    Fatal       - CredentialsError, EndpointLookupError (and subclasses),
                  ConsoleReadError. The entry point logs and exits.
    Per-query   - QueryError subclasses. The shell prints them and keeps reading.
"""


class GabiError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class NotFoundError(GabiError):
    """Raised when a resource cannot be found."""

    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(message, code="RES_NOT_FOUND")


class CredentialsError(GabiError):
    """Raised when cluster credentials cannot be loaded or have no token."""

    def __init__(self, message: str = "Cluster credentials unavailable") -> None:
        super().__init__(message, code="AUTH_CREDENTIALS")


class EndpointLookupError(GabiError):
    """Raised when the Gabi route lookup fails."""

    def __init__(self, message: str = "Couldn't find Gabi instance", code: str = "SYS_LOOKUP_FAILED") -> None:
        super().__init__(message, code=code)


class UnauthorizedError(EndpointLookupError):
    """Raised when the cluster API rejects the bearer token."""

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(f"{message}, please login with oc login", code="AUTH_UNAUTHORIZED")


class RouteNotFoundError(NotFoundError):
    """Raised when no route in the namespace carries the Gabi prefix."""

    def __init__(self, namespace: str) -> None:
        self.namespace = namespace
        super().__init__(f"no gabi route found in namespace {namespace}")


class ConsoleReadError(GabiError):
    """Raised when reading the console fails for a reason other than end of input."""

    def __init__(self, message: str = "Console read failed") -> None:
        super().__init__(message, code="SYS_CONSOLE_READ")


class QueryError(GabiError):
    """Base for failures of a single query. Never fatal."""


class RequestBuildError(QueryError):
    """Raised when the HTTP request cannot be built."""

    def __init__(self, message: str = "Request build failed") -> None:
        super().__init__(message, code="QRY_BUILD_FAILED")


class TransportError(QueryError):
    """Raised on network failure or an HTTP status other than 200/400."""

    def __init__(self, message: str = "Gabi request failed", status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message, code="QRY_TRANSPORT")


class MalformedResponseError(QueryError):
    """Raised when a 200/400 response body cannot be decoded."""

    def __init__(self, message: str = "Malformed result") -> None:
        super().__init__(message, code="QRY_MALFORMED_RESPONSE")
