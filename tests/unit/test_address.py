"""
Unit tests for ergo_node.core.address: P2PK encoding, decoding, network prefixes.
These run without network access.
"""

import pytest

from ergo_node.core.address import (
    MAINNET_PREFIX,
    P2PK_TYPE,
    P2S_TYPE,
    P2SH_TYPE,
    TESTNET_PREFIX,
    AddressError,
    _base58_encode,
    _blake2b256,
    address_to_ergo_tree,
    decode_address,
    get_address_type,
    is_mainnet_address,
    is_valid_address,
    network_prefix,
    p2pk_address,
    script_from_address,
)

PUBKEY = "02" + "a1" * 32
TREE = "100204a00b08cd0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798ea02d192a39a8cc7a70173007301"


def _encode(prefix_byte: int, content: bytes) -> str:
    body = bytes([prefix_byte]) + content
    return _base58_encode(body + _blake2b256(body)[:4])


class TestNetworkPrefix:

    def test_mainnet(self):
        assert network_prefix("mainnet") == MAINNET_PREFIX
        assert network_prefix("Mainnet") == MAINNET_PREFIX

    @pytest.mark.parametrize("name", ["testnet", "devnet", "", "main"])
    def test_anything_else_is_testnet(self, name):
        assert network_prefix(name) == TESTNET_PREFIX


class TestP2PK:

    def test_mainnet_p2pk(self):
        addr = p2pk_address(PUBKEY, MAINNET_PREFIX)
        assert addr.startswith("9")
        assert decode_address(addr) == (MAINNET_PREFIX, P2PK_TYPE, bytes.fromhex(PUBKEY))
        assert get_address_type(addr) == "mainnet-P2PK"
        assert is_mainnet_address(addr)

    def test_testnet_p2pk(self):
        addr = p2pk_address(PUBKEY, TESTNET_PREFIX)
        assert addr.startswith("3")
        assert get_address_type(addr) == "testnet-P2PK"
        assert not is_mainnet_address(addr)

    def test_p2pk_tree(self):
        addr = p2pk_address(PUBKEY, MAINNET_PREFIX)
        assert address_to_ergo_tree(addr) == "0008cd" + PUBKEY
        assert script_from_address(addr) is None

    @pytest.mark.parametrize("key", ["zz", "02" + "a1" * 31, "04" + "a1" * 32])
    def test_rejects_bad_keys(self, key):
        with pytest.raises(AddressError):
            p2pk_address(key, MAINNET_PREFIX)


class TestDecode:

    def test_p2s_script(self):
        addr = _encode(MAINNET_PREFIX | P2S_TYPE, bytes.fromhex(TREE))
        assert script_from_address(addr) == TREE
        assert address_to_ergo_tree(addr) == TREE
        assert get_address_type(addr) == "mainnet-P2S"

    def test_p2sh_has_no_tree(self):
        addr = _encode(TESTNET_PREFIX | P2SH_TYPE, b"\x01" * 24)
        assert script_from_address(addr) is None
        with pytest.raises(AddressError, match="P2SH"):
            address_to_ergo_tree(addr)

    def test_checksum_mismatch(self):
        addr = p2pk_address(PUBKEY, MAINNET_PREFIX)
        tampered = addr[:-1] + ("2" if addr[-1] != "2" else "3")
        with pytest.raises(AddressError):
            decode_address(tampered)
        assert not is_valid_address(tampered)

    def test_unknown_prefix(self):
        addr = _encode(0x25, bytes.fromhex(PUBKEY))
        with pytest.raises(AddressError, match="prefix"):
            decode_address(addr)

    @pytest.mark.parametrize("addr", ["", "0OIl", "1111"])
    def test_garbage(self, addr):
        assert not is_valid_address(addr)
