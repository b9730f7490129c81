"""
Core data models for the Ergo blockchain, as the node's REST API returns them.
All amounts are in nanoERG (1 ERG = 1,000,000,000 nanoERG) internally.

Field names are snake_case in Python and camelCase on the wire; records
returned by the node are immutable.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ergo_node.core.codec import decode_constant, encode_register_id
from ergo_node.core.errors import DecodeError

NANOERG_PER_ERG = 1_000_000_000
U64_MAX = 2**64 - 1


class NodeModel(BaseModel):
    """Base for records (de)serialized with the node's camelCase field names."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_json_dict(self) -> dict[str, Any]:
        """Request body form: camelCase keys, unset optionals omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Token(NodeModel):
    """A token held in an Ergo box."""
    token_id: str
    amount: int = Field(ge=0, le=U64_MAX)
    name: str | None = None
    decimals: int | None = None


class ErgoBoxCandidate(NodeModel):
    """A box that is not yet part of the chain (an unsigned transaction output)."""
    value: int = Field(ge=0, le=U64_MAX)  # nanoERG
    ergo_tree: str
    creation_height: int
    assets: list[Token] = Field(default_factory=list)
    additional_registers: dict[str, str] = Field(default_factory=dict)

    @property
    def value_erg(self) -> float:
        """ERG value (human-readable)."""
        return self.value / NANOERG_PER_ERG

    @property
    def tokens(self) -> dict[str, int]:
        """token id -> total amount held by this box."""
        held: dict[str, int] = {}
        for asset in self.assets:
            held[asset.token_id] = held.get(asset.token_id, 0) + asset.amount
        return held

    def register_bytes(self, register: int) -> bytes | None:
        """Raw serialized constant stored in a register, or None if unset."""
        raw_val = self.additional_registers.get(encode_register_id(register))
        if raw_val is None:
            return None
        try:
            return decode_constant(raw_val)
        except ValueError as e:
            raise DecodeError(f"Register R{register} is not base16: {e}") from e

    def decode_register(self, register: int) -> Any | None:
        """
        Decode a register's serialized constant into its Python value using
        ergo-lib-python's `Constant.from_bytes`.

        Args:
            register: register number, 4..9

        Returns:
            The parsed value, or None if the register is not set.

        Raises:
            DecodeError: the register does not hold a valid sigma constant
        """
        raw = self.register_bytes(register)
        if raw is None:
            return None
        # imported lazily, the native bindings are only needed for register decoding
        from ergo_lib_python.chain import Constant

        try:
            return Constant.from_bytes(raw).value
        except Exception as e:
            raise DecodeError(f"Register R{register} is not a sigma constant: {e}") from e


class ErgoBox(ErgoBoxCandidate):
    """An Ergo box (UTXO) as stored on chain."""
    box_id: str
    transaction_id: str
    index: int


class IndexedBox(ErgoBox):
    """A box returned by the node's blockchain index (/blockchain/*)."""
    global_index: int
    inclusion_height: int | None = None
    address: str | None = None
    spent_transaction_id: str | None = None


class SpendingProof(NodeModel):
    proof_bytes: str
    extension: dict[str, str] = Field(default_factory=dict)


class Input(NodeModel):
    """A signed transaction input."""
    box_id: str
    spending_proof: SpendingProof


class UnsignedInput(NodeModel):
    """An input awaiting a proof; `extension` holds context variables."""
    box_id: str
    extension: dict[str, str] = Field(default_factory=dict)


class DataInput(NodeModel):
    box_id: str


class UnsignedTransaction(NodeModel):
    """An unsigned Ergo transaction ready to be signed by the node's wallet."""
    inputs: list[UnsignedInput]
    data_inputs: list[DataInput] = Field(default_factory=list)
    outputs: list[ErgoBoxCandidate]


class Transaction(NodeModel):
    """A signed transaction, ready for submission or already on chain."""
    id: str
    inputs: list[Input]
    data_inputs: list[DataInput] = Field(default_factory=list)
    outputs: list[ErgoBox]
    size: int | None = None


class IndexedTransaction(NodeModel):
    """A transaction returned by the blockchain index, inputs resolved to boxes."""
    id: str
    block_id: str
    inclusion_height: int | None = None
    num_confirmations: int | None = None
    inputs: list[ErgoBox]
    outputs: list[ErgoBox]
    data_inputs: list[DataInput] = Field(default_factory=list)


class BlockHeader(NodeModel):
    id: str
    parent_id: str
    height: int
    timestamp: int
    version: int | None = None


class PaginationQuery(NodeModel):
    """Plain offset/limit paging; the node caps `limit` per endpoint."""
    limit: int = Field(default=50, ge=0)
    offset: int = Field(default=0, ge=0)
