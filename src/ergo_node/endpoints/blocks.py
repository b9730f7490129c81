"""Block lookups: /blocks/*."""

from __future__ import annotations

import httpx

from ergo_node.core.http import join_url, process_response, send
from ergo_node.core.models import BlockHeader, NodeModel, PaginationQuery, Transaction


class _BlockTransactions(NodeModel):
    header_id: str | None = None
    transactions: list[Transaction]


class BlocksEndpoint:
    def __init__(self, client: httpx.AsyncClient, url: str) -> None:
        self._client = client
        self.url = join_url(url, "blocks")

    async def list_ids(self, query: PaginationQuery | None = None) -> list[str]:
        """Header ids of the best chain, oldest first (/blocks?limit&offset)."""
        query = query or PaginationQuery()
        response = await send(self._client, "GET", self.url, params=query.to_json_dict())
        return process_response(response, list[str])

    async def block_at_height(self, block_height: int) -> str | None:
        """Header id at the given height (/blocks/at/{blockHeight}), None past the tip."""
        response = await send(self._client, "GET", join_url(self.url, "at", block_height))
        ids = process_response(response, list[str])
        return ids[0] if ids else None

    async def transactions(self, block_id: str) -> list[Transaction]:
        response = await send(
            self._client, "GET", join_url(self.url, block_id, "transactions")
        )
        return process_response(response, _BlockTransactions).transactions

    async def last_headers(self, count: int) -> list[BlockHeader]:
        response = await send(self._client, "GET", join_url(self.url, "lastHeaders", count))
        return process_response(response, list[BlockHeader])
