"""Mempool submission: /transactions."""

from __future__ import annotations

import httpx

from ergo_node.core.http import join_url, process_response, send
from ergo_node.core.models import Transaction


class TransactionsEndpoint:
    def __init__(self, client: httpx.AsyncClient, url: str) -> None:
        self._client = client
        self.url = join_url(url, "transactions")

    async def submit(self, signed_tx: Transaction) -> str:
        """Submit a signed transaction to the mempool. Returns its id."""
        response = await send(self._client, "POST", self.url, json=signed_tx.to_json_dict())
        return process_response(response, str)

    async def check(self, signed_tx: Transaction) -> str:
        """Validate a signed transaction against the node's state without broadcasting it."""
        response = await send(
            self._client, "POST", join_url(self.url, "check"), json=signed_tx.to_json_dict()
        )
        return process_response(response, str)
