"""
Scans: server-side box filters, /scan/*.

A scan is registered once with a tracking rule; the node then indexes every
box matching the rule and serves them via unspentBoxes/spentBoxes.

Tracking rules are a tree. Leaves match a register value (`equals`,
`contains`) or an asset (`containsAsset`); inner nodes combine children with
`and`/`or`:

    AndRule(args=[
        ContainsAssetRule(asset_id="03fa..."),
        EqualsRule(register_id=4, value=bytes.fromhex("0e20...")),
    ])
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

import httpx
from pydantic import Field, field_serializer, field_validator

from ergo_node.core.codec import (
    decode_constant,
    decode_register_id,
    encode_constant,
    encode_register_id,
)
from ergo_node.core.http import join_url, process_response, send
from ergo_node.core.models import ErgoBox, NodeModel


class _RegisterRule(NodeModel):
    """Shared shape of `equals` and `contains`: an optional register and a constant."""
    register_id: int | None = Field(default=None, alias="register")
    value: bytes

    @field_validator("register_id", mode="before")
    @classmethod
    def parse_register(cls, v: Any) -> Any:
        return decode_register_id(v) if isinstance(v, str) else v

    @field_validator("value", mode="before")
    @classmethod
    def parse_value(cls, v: Any) -> Any:
        return decode_constant(v) if isinstance(v, str) else v

    @field_serializer("register_id")
    def dump_register(self, register_id: int | None) -> str | None:
        return None if register_id is None else encode_register_id(register_id)

    @field_serializer("value")
    def dump_value(self, value: bytes) -> str:
        return encode_constant(value)


class EqualsRule(_RegisterRule):
    """Register (R1, the script, when unset) equals the given constant."""
    predicate: Literal["equals"] = "equals"


class ContainsRule(_RegisterRule):
    """Register (R1, the script, when unset) contains the given bytes."""
    predicate: Literal["contains"] = "contains"


class ContainsAssetRule(NodeModel):
    predicate: Literal["containsAsset"] = "containsAsset"
    asset_id: str


class AndRule(NodeModel):
    predicate: Literal["and"] = "and"
    args: list[TrackingRule]


class OrRule(NodeModel):
    predicate: Literal["or"] = "or"
    args: list[TrackingRule]


TrackingRule = Annotated[
    Union[EqualsRule, ContainsRule, ContainsAssetRule, AndRule, OrRule],
    Field(discriminator="predicate"),
]

AndRule.model_rebuild()
OrRule.model_rebuild()


class Scan(NodeModel):
    """
    Scan registration payload.

    `wallet_interaction` is passed through as-is; the node accepts "off",
    "shared" and "forced".
    """
    scan_name: str
    wallet_interaction: str = "off"
    tracking_rule: TrackingRule
    remove_offchain: bool = True


class RegisteredScan(Scan):
    scan_id: int


class ScanQuery(NodeModel):
    """Which of a scan's boxes to return; -1 means unbounded."""
    min_confirmations: int = 0
    max_confirmations: int = -1
    min_inclusion_height: int = 0
    max_inclusion_height: int = -1
    limit: int = Field(default=50, ge=0)
    offset: int = Field(default=0, ge=0)


class ScanBox(NodeModel):
    confirmations: int = Field(alias="confirmationsNum")
    spending_transaction: str | None = None
    spending_height: int | None = None
    inclusion_height: int | None = None
    box: ErgoBox


class _ScanIdResponse(NodeModel):
    scan_id: int


class ScanEndpoint:
    def __init__(self, client: httpx.AsyncClient, url: str) -> None:
        self._client = client
        self.url = join_url(url, "scan")

    async def register(self, scan: Scan) -> int:
        """Register a scan. Returns the id the node assigned to it."""
        response = await send(
            self._client, "POST", join_url(self.url, "register"), json=scan.to_json_dict()
        )
        return process_response(response, _ScanIdResponse).scan_id

    async def deregister(self, scan_id: int) -> None:
        response = await send(
            self._client,
            "POST",
            join_url(self.url, "deregister"),
            json={"scanId": scan_id},
        )
        process_response(response, _ScanIdResponse)

    async def list_all(self) -> list[RegisteredScan]:
        response = await send(self._client, "GET", join_url(self.url, "listAll"))
        return process_response(response, list[RegisteredScan])

    async def unspent_boxes(
        self, scan_id: int, query: ScanQuery | None = None
    ) -> list[ScanBox]:
        return await self._boxes("unspentBoxes", scan_id, query)

    async def spent_boxes(
        self, scan_id: int, query: ScanQuery | None = None
    ) -> list[ScanBox]:
        return await self._boxes("spentBoxes", scan_id, query)

    async def _boxes(
        self, route: str, scan_id: int, query: ScanQuery | None
    ) -> list[ScanBox]:
        query = query or ScanQuery()
        response = await send(
            self._client,
            "GET",
            join_url(self.url, route, scan_id),
            params=query.to_json_dict(),
        )
        return process_response(response, list[ScanBox])
