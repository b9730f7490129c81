"""
Error taxonomy for the Ergo node client.

Every failure raised by this package derives from NodeError. Nothing here is
retried automatically; callers decide whether a TransportError or RequestError
is worth another attempt.
"""

from __future__ import annotations


class NodeError(Exception):
    """Base class for all errors raised by the node client."""
    pass


class ConfigError(NodeError):
    """Raised at construction time for a malformed base URL or API key."""
    pass


class TransportError(NodeError):
    """Raised when the request never produced an HTTP response (connect, timeout, DNS)."""
    pass


class RequestError(NodeError):
    """Raised when the node answers with a non-2xx status."""

    def __init__(self, status_code: int, message: str | None = None) -> None:
        self.status_code = status_code
        self.message = message
        text = f"Node returned HTTP {status_code}"
        if message:
            text += f": {message}"
        super().__init__(text)


class DecodeError(NodeError):
    """Raised when a 2xx response body does not match the expected shape."""
    pass


class DomainError(NodeError):
    """A business rule failed after the node answered successfully."""
    pass


class InsufficientFunds(DomainError):
    """The wallet's boxes do not add up to the requested nanoERG amount."""

    def __init__(self, requested: int, found: int) -> None:
        self.requested = requested
        self.found = found
        super().__init__(
            f"Node's wallet doesn't hold enough nanoERG, {found} < {requested}"
        )


class NonScriptAddress(DomainError):
    """The node returned an address that does not carry a script."""

    def __init__(self, address: str, address_type: str) -> None:
        self.address = address
        self.address_type = address_type
        super().__init__(f"Expected a P2S address, got {address_type}: {address}")


class PaginationLimitExceeded(DomainError):
    """A paginated listing needed more requests than the caller allowed."""

    def __init__(self, max_pages: int, collected: int) -> None:
        self.max_pages = max_pages
        self.collected = collected
        super().__init__(
            f"Listing still returning boxes after {max_pages} pages ({collected} collected)"
        )
