"""
Node wallet: /wallet/*.

The node keeps the keys; these calls only ask it to unlock, report, export or
sign. All of them require the api_key header.
"""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import Field

from ergo_node.core.http import join_url, process_response, send
from ergo_node.core.models import ErgoBox, NodeModel, Transaction, UnsignedTransaction


class WalletStatus(NodeModel):
    is_initialized: bool
    is_unlocked: bool
    change_address: str = ""
    wallet_height: int
    error: str = ""


class WalletBoxQuery(NodeModel):
    """Confirmation and inclusion-height bounds; -1 means unbounded."""
    min_confirmations: int = 0
    max_confirmations: int = -1
    min_inclusion_height: int = 0
    max_inclusion_height: int = -1


class WalletBox(NodeModel):
    """A box tracked by the wallet, with its confirmation metadata."""
    box: ErgoBox
    confirmations_num: int | None = None
    address: str | None = None
    creation_transaction: str | None = None
    spending_transaction: str | None = None
    spending_height: int | None = None
    inclusion_height: int | None = None
    onchain: bool = True
    spent: bool = False
    creation_out_index: int | None = None
    scans: list[int] = Field(default_factory=list)


class WalletEndpoint:
    def __init__(self, client: httpx.AsyncClient, url: str) -> None:
        self._client = client
        self.url = join_url(url, "wallet")

    def boxes(self) -> WalletBoxesEndpoint:
        return WalletBoxesEndpoint(self._client, self.url)

    def transaction(self) -> WalletTransactionEndpoint:
        return WalletTransactionEndpoint(self._client, self.url)

    async def status(self) -> WalletStatus:
        response = await send(self._client, "GET", join_url(self.url, "status"))
        return process_response(response, WalletStatus)

    async def get_addresses(self) -> list[str]:
        response = await send(self._client, "GET", join_url(self.url, "addresses"))
        return process_response(response, list[str])

    async def rescan(self, from_height: int) -> None:
        response = await send(
            self._client,
            "POST",
            join_url(self.url, "rescan"),
            json={"fromHeight": from_height},
        )
        process_response(response, Any)

    async def unlock(self, password: str) -> None:
        # responds with the string "OK"
        response = await send(
            self._client, "POST", join_url(self.url, "unlock"), json={"pass": password}
        )
        process_response(response, str)

    async def lock(self) -> None:
        response = await send(self._client, "GET", join_url(self.url, "lock"))
        process_response(response, str)

    async def get_private_key(self, address: str) -> str:
        """
        Export the secret exponent (hex) behind a wallet address.

        Raises:
            RequestError: the address has no key in the wallet's key store
        """
        response = await send(
            self._client,
            "POST",
            join_url(self.url, "getPrivateKey"),
            json={"address": address},
        )
        return process_response(response, str)


class WalletBoxesEndpoint:
    def __init__(self, client: httpx.AsyncClient, url: str) -> None:
        self._client = client
        self.url = join_url(url, "boxes")

    async def unspent(self, query: WalletBoxQuery | None = None) -> list[WalletBox]:
        query = query or WalletBoxQuery()
        response = await send(
            self._client,
            "GET",
            join_url(self.url, "unspent"),
            params=query.to_json_dict(),
        )
        return process_response(response, list[WalletBox])


class WalletTransactionEndpoint:
    def __init__(self, client: httpx.AsyncClient, url: str) -> None:
        self._client = client
        self.url = join_url(url, "transaction")

    async def sign(
        self,
        unsigned_tx: UnsignedTransaction,
        inputs_raw: list[str] | None = None,
        data_inputs_raw: list[str] | None = None,
    ) -> Transaction:
        """
        Ask the node's wallet to sign a transaction.

        Args:
            unsigned_tx: transaction to sign
            inputs_raw: serialized input boxes (hex), for boxes the node's UTXO
                        set does not know yet (e.g. unconfirmed chains)
            data_inputs_raw: serialized data-input boxes (hex), same purpose
        """
        payload: dict[str, Any] = {"tx": unsigned_tx.to_json_dict()}
        if inputs_raw is not None:
            payload["inputsRaw"] = inputs_raw
        if data_inputs_raw is not None:
            payload["dataInputsRaw"] = data_inputs_raw
        response = await send(self._client, "POST", join_url(self.url, "sign"), json=payload)
        return process_response(response, Transaction)
