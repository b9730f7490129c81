"""
Multi-call workflows built on the endpoint handles.

Every workflow runs its node calls one after another; a failing step stops
the workflow and its error propagates unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ergo_node.core.address import (
    get_address_type,
    network_prefix,
    p2pk_address,
    script_from_address,
)
from ergo_node.core.errors import InsufficientFunds, NonScriptAddress, PaginationLimitExceeded
from ergo_node.core.models import ErgoBox, Transaction, UnsignedTransaction
from ergo_node.endpoints import NodeEndpoint
from ergo_node.endpoints.scan import ScanBox, ScanQuery

logger = logging.getLogger("ergo_node.extensions")

# Largest page /scan/unspentBoxes serves in one call
SCAN_PAGE_SIZE = 2500


def take_until_amount(nano_erg_amount: int, boxes: Iterable[ErgoBox]) -> list[ErgoBox]:
    """
    Greedy first-fit selection: take boxes in the given order until their
    values reach `nano_erg_amount`.

    The result is the shortest prefix of `boxes` whose sum is >= the amount.
    No attempt is made to minimise box count or change.

    Raises:
        InsufficientFunds: all boxes together fall short; nothing is returned
    """
    running_total = 0
    selected: list[ErgoBox] = []
    for box in boxes:
        if running_total >= nano_erg_amount:
            break
        selected.append(box)
        running_total += box.value
    if running_total < nano_erg_amount:
        raise InsufficientFunds(requested=nano_erg_amount, found=running_total)
    return selected


class NodeExtension:
    """
    Higher-level operations composed from several endpoint calls.

    Usage:
        async with NodeClient.from_url("http://127.0.0.1:9053", api_key="...") as client:
            utxos = await client.extensions().get_utxos_summing_amount(1_000_000_000)
    """

    def __init__(self, endpoints: NodeEndpoint) -> None:
        self.endpoints = endpoints

    # ------------------------------------------------------------------
    # Wallet boxes
    # ------------------------------------------------------------------

    async def get_utxos(self) -> list[ErgoBox]:
        """Unspent boxes of the node's wallet, in the order the node lists them."""
        wallet_boxes = await self.endpoints.wallet().boxes().unspent()
        return [wb.box for wb in wallet_boxes]

    async def get_utxos_summing_amount(self, nano_erg_amount: int) -> list[ErgoBox]:
        """Wallet boxes covering `nano_erg_amount`, see take_until_amount()."""
        return take_until_amount(nano_erg_amount, await self.get_utxos())

    # ------------------------------------------------------------------
    # Transactions
    # ------------------------------------------------------------------

    async def sign_and_submit(
        self,
        unsigned_tx: UnsignedTransaction,
        inputs_raw: list[str] | None = None,
        data_inputs_raw: list[str] | None = None,
    ) -> Transaction:
        """
        Sign a transaction with the node's wallet, then submit it.

        Returns:
            Transaction: the signed transaction that was submitted

        If signing fails nothing is submitted. If submission fails the error
        propagates and the transaction must be treated as not submitted.
        """
        signed_tx = await self.endpoints.wallet().transaction().sign(
            unsigned_tx, inputs_raw, data_inputs_raw
        )
        try:
            await self.endpoints.transactions().submit(signed_tx)
        except Exception:
            logger.warning(f"Signed transaction {signed_tx.id} was not submitted")
            raise
        logger.info(f"Submitted transaction {signed_tx.id}")
        return signed_tx

    # ------------------------------------------------------------------
    # Scripts & keys
    # ------------------------------------------------------------------

    async def compile_contract(self, source: str) -> str:
        """
        Compile ErgoScript source into an ErgoTree (hex).

        Raises:
            NonScriptAddress: the node's compiler returned an address that
                              does not embed a script
        """
        address = await self.endpoints.script().p2s_address(source)
        tree = script_from_address(address)
        if tree is None:
            raise NonScriptAddress(address, get_address_type(address))
        return tree

    async def get_private_key(self, public_key: str, derive_locally: bool = False) -> str:
        """
        Export the wallet's secret for a public key.

        Args:
            public_key: compressed public key, hex
            derive_locally: encode the P2PK address here using the network the
                            node reports in /info, instead of asking
                            /utils/rawToAddress

        Raises:
            RequestError: the wallet holds no key for the resulting address
        """
        if derive_locally:
            info = await self.endpoints.root().info()
            address = p2pk_address(public_key, network_prefix(info.network))
        else:
            address = await self.endpoints.utils().raw_to_address(public_key)
        return await self.endpoints.wallet().get_private_key(address)

    # ------------------------------------------------------------------
    # Scans
    # ------------------------------------------------------------------

    async def get_all_unspent_boxes(
        self,
        scan_id: int,
        include_unconfirmed: bool = False,
        max_pages: int | None = None,
    ) -> list[ScanBox]:
        """
        Every unspent box of a scan.

        /scan/unspentBoxes serves at most 2500 boxes per call, so this keeps
        requesting the next page until the node returns an empty one.

        Args:
            scan_id: registered scan id
            include_unconfirmed: also return boxes from the mempool
            max_pages: request at most this many pages; None means no bound

        Raises:
            PaginationLimitExceeded: `max_pages` requests were made and the
                                     last one was not empty
        """
        query = ScanQuery(
            min_confirmations=-1 if include_unconfirmed else 0,
            max_confirmations=-1,
            min_inclusion_height=0,
            max_inclusion_height=-1,
            limit=SCAN_PAGE_SIZE,
            offset=0,
        )
        scan_endpoint = self.endpoints.scan()
        boxes: list[ScanBox] = []
        pages = 0
        while True:
            if max_pages is not None and pages >= max_pages:
                raise PaginationLimitExceeded(max_pages, len(boxes))
            new_boxes = await scan_endpoint.unspent_boxes(scan_id, query)
            pages += 1
            boxes.extend(new_boxes)
            if not new_boxes:
                break
            query = query.model_copy(update={"offset": query.offset + len(new_boxes)})
        logger.debug(f"Scan {scan_id}: {len(boxes)} unspent boxes in {pages} pages")
        return boxes
