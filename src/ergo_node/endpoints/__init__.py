"""
Endpoint handles, one per node resource.

Each handle holds the shared httpx.AsyncClient and its own resource-scoped
URL. Handles are cheap and stateless; create them per call site:

    boxes = await client.endpoints().wallet().boxes().unspent()
"""

from __future__ import annotations

import httpx

from ergo_node.endpoints.blockchain import BlockchainEndpoint, IndexQuery
from ergo_node.endpoints.blocks import BlocksEndpoint
from ergo_node.endpoints.root import NodeInfo, RootEndpoint
from ergo_node.endpoints.scan import (
    AndRule,
    ContainsAssetRule,
    ContainsRule,
    EqualsRule,
    OrRule,
    RegisteredScan,
    Scan,
    ScanBox,
    ScanEndpoint,
    ScanQuery,
    TrackingRule,
)
from ergo_node.endpoints.script import ScriptEndpoint
from ergo_node.endpoints.transactions import TransactionsEndpoint
from ergo_node.endpoints.utils import UtilsEndpoint
from ergo_node.endpoints.wallet import (
    WalletBox,
    WalletBoxQuery,
    WalletEndpoint,
    WalletStatus,
)


class NodeEndpoint:
    """Entry point handing out a handle per node resource."""

    def __init__(self, client: httpx.AsyncClient, url: str) -> None:
        self._client = client
        self.url = url

    def root(self) -> RootEndpoint:
        return RootEndpoint(self._client, self.url)

    def blocks(self) -> BlocksEndpoint:
        return BlocksEndpoint(self._client, self.url)

    def blockchain(self) -> BlockchainEndpoint:
        return BlockchainEndpoint(self._client, self.url)

    def wallet(self) -> WalletEndpoint:
        return WalletEndpoint(self._client, self.url)

    def transactions(self) -> TransactionsEndpoint:
        return TransactionsEndpoint(self._client, self.url)

    def script(self) -> ScriptEndpoint:
        return ScriptEndpoint(self._client, self.url)

    def scan(self) -> ScanEndpoint:
        return ScanEndpoint(self._client, self.url)

    def utils(self) -> UtilsEndpoint:
        return UtilsEndpoint(self._client, self.url)


__all__ = [
    "AndRule",
    "BlockchainEndpoint",
    "BlocksEndpoint",
    "ContainsAssetRule",
    "ContainsRule",
    "EqualsRule",
    "IndexQuery",
    "NodeEndpoint",
    "NodeInfo",
    "OrRule",
    "RegisteredScan",
    "RootEndpoint",
    "Scan",
    "ScanBox",
    "ScanEndpoint",
    "ScanQuery",
    "ScriptEndpoint",
    "TrackingRule",
    "TransactionsEndpoint",
    "UtilsEndpoint",
    "WalletBox",
    "WalletBoxQuery",
    "WalletEndpoint",
    "WalletStatus",
]
