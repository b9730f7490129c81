"""
Connection settings for a node client.

The configuration is validated once, when it is created. A bad URL or an API
key that cannot be sent as an HTTP header is a ConfigError and never reaches
the network.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

import httpx

from ergo_node.core.errors import ConfigError

DEFAULT_TIMEOUT = 15.0

# Visible ASCII plus space and horizontal tab, i.e. what an HTTP header value may hold
_HEADER_VALUE_RE = re.compile(r"[\t\x20-\x7e]*")


@dataclass(frozen=True)
class NodeConfig:
    """
    Settings shared by every request a NodeClient makes.

    Args:
        base_url: node REST root, e.g. "http://127.0.0.1:9053"
        api_key:  value sent in the `api_key` header; wallet and scan
                  endpoints reject requests without it
        timeout:  per-request timeout in seconds
    """
    base_url: str
    api_key: str | None = None
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))
        self.validate()

    def validate(self) -> None:
        """Raise ConfigError if any setting is unusable."""
        try:
            url = httpx.URL(self.base_url)
        except (httpx.InvalidURL, TypeError) as e:
            raise ConfigError(f"Invalid node URL {self.base_url!r}: {e}") from e
        if url.scheme not in ("http", "https"):
            raise ConfigError(f"Node URL must use http or https, got {self.base_url!r}")
        if not url.host:
            raise ConfigError(f"Node URL has no host: {self.base_url!r}")
        if url.query or url.fragment:
            raise ConfigError(f"Node URL must not carry a query or fragment: {self.base_url!r}")

        if self.api_key is not None and not _HEADER_VALUE_RE.fullmatch(self.api_key):
            raise ConfigError("Specified API key is not a valid header value")

        if self.timeout <= 0:
            raise ConfigError(f"Timeout must be positive, got {self.timeout}")

    @property
    def headers(self) -> dict[str, str]:
        headers: dict[str, str] = {}
        if self.api_key:
            headers["api_key"] = self.api_key
        return headers
