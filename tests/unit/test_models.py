"""
Unit tests for core data models.
"""

import pytest
from pydantic import ValidationError

from ergo_node.core.errors import DecodeError
from ergo_node.core.models import (
    ErgoBox,
    IndexedBox,
    Token,
    Transaction,
    UnsignedTransaction,
)


def test_box_from_node_json(make_box):
    box = ErgoBox.model_validate(make_box(0, 2_000_000_000))
    assert box.box_id == f"{1:064x}"
    assert box.value == 2_000_000_000
    assert box.creation_height == 1_000_000
    assert box.value_erg == pytest.approx(2.0)


def test_box_is_immutable(make_box):
    box = ErgoBox.model_validate(make_box())
    with pytest.raises(ValidationError):
        box.value = 1


def test_box_value_must_fit_u64(make_box):
    with pytest.raises(ValidationError):
        ErgoBox.model_validate(make_box(value=2**64))
    with pytest.raises(ValidationError):
        ErgoBox.model_validate(make_box(value=-1))


def test_box_tokens_mapping(make_box):
    box = ErgoBox.model_validate(make_box(assets=[
        {"tokenId": "aa" * 32, "amount": 5},
        {"tokenId": "bb" * 32, "amount": 7},
        {"tokenId": "aa" * 32, "amount": 1},
    ]))
    assert box.tokens == {"aa" * 32: 6, "bb" * 32: 7}


def test_register_bytes(make_box):
    box = ErgoBox.model_validate(make_box(additionalRegisters={"R4": "0e0101"}))
    assert box.register_bytes(4) == bytes.fromhex("0e0101")
    assert box.register_bytes(5) is None
    assert box.decode_register(5) is None


def test_register_bytes_rejects_bad_hex(make_box):
    box = ErgoBox.model_validate(make_box(additionalRegisters={"R4": "zz"}))
    with pytest.raises(DecodeError, match="R4"):
        box.register_bytes(4)


def test_indexed_box_extra_metadata(make_box):
    box = IndexedBox.model_validate(make_box(globalIndex=42, spentTransactionId=None, inclusionHeight=7))
    assert box.global_index == 42
    assert box.spent_transaction_id is None
    assert box.inclusion_height == 7


def test_unknown_fields_are_ignored(make_box):
    box = ErgoBox.model_validate(make_box(somethingNew=True))
    assert box.index == 0


def test_token_optional_metadata():
    t = Token(token_id="abc", amount=100)
    assert t.name is None
    assert t.to_json_dict() == {"tokenId": "abc", "amount": 100}


def test_signed_transaction_roundtrip(signed_tx):
    tx = Transaction.model_validate(signed_tx)
    assert tx.id == "cd" * 32
    assert tx.inputs[0].spending_proof.proof_bytes == "beef"
    body = tx.to_json_dict()
    assert body["inputs"][0]["spendingProof"]["proofBytes"] == "beef"
    assert body["outputs"][0]["ergoTree"].startswith("0008cd")


def test_unsigned_transaction_body(unsigned_tx):
    tx = UnsignedTransaction.model_validate(unsigned_tx)
    body = tx.to_json_dict()
    assert body["inputs"] == [{"boxId": "01" * 32, "extension": {}}]
    assert body["outputs"][0]["creationHeight"] == 1_000_000
    assert "boxId" not in body["outputs"][0]
