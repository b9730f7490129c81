"""
Ergo address utilities: validation, P2PK encoding, ErgoTree resolution.

Ergo uses a custom Base58 encoding with Blake2b-256 checksums.
Address format: prefix_byte + content_bytes + checksum (4 bytes)

The prefix byte is network_prefix + address_type:
  - network: 0x00 = mainnet, 0x10 = testnet
  - type:    0x01 = P2PK, 0x02 = P2SH, 0x03 = P2S

Only the prefix is ever chosen locally; everything else about an address is
what the node reports.

Reference: https://docs.ergoplatform.com/dev/wallet/address/
"""

from __future__ import annotations

import hashlib

from ergo_node.core.errors import NodeError

MAINNET_PREFIX = 0x00
TESTNET_PREFIX = 0x10

P2PK_TYPE = 0x01
P2SH_TYPE = 0x02
P2S_TYPE = 0x03

# P2PK ErgoTree format: 0008cd{33-byte-pubkey}
P2PK_TREE_PREFIX = "0008cd"

_CHECKSUM_LEN = 4
_PUBKEY_LEN = 33

# Base58 alphabet (same as Bitcoin)
_ALPHABET = b"123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_ALPHABET_MAP = {char: i for i, char in enumerate(_ALPHABET)}

_TYPE_NAMES = {P2PK_TYPE: "P2PK", P2SH_TYPE: "P2SH", P2S_TYPE: "P2S"}


class AddressError(NodeError):
    """Raised for invalid Ergo addresses or public keys."""

    pass


def network_prefix(network: str) -> int:
    """
    Map the network name a node reports in /info to an address prefix.

    "mainnet" selects the mainnet prefix; any other value is treated as testnet.
    """
    return MAINNET_PREFIX if network.strip().lower() == "mainnet" else TESTNET_PREFIX


def decode_address(address: str) -> tuple[int, int, bytes]:
    """
    Validate an address and split it into its parts.

    Returns:
        (network_prefix, address_type, content_bytes)

    Raises:
        AddressError: bad Base58, bad checksum or unknown prefix byte
    """
    try:
        raw = _base58_decode(address)
    except (KeyError, ValueError) as e:
        raise AddressError(f"Invalid Base58 encoding: {e}") from None

    if len(raw) < 1 + _CHECKSUM_LEN:
        raise AddressError(f"Address too short: {len(raw)} bytes (minimum 5)")

    # Split into body + checksum
    body = raw[:-_CHECKSUM_LEN]
    checksum = raw[-_CHECKSUM_LEN:]

    # Verify checksum: Blake2b-256 of body, first 4 bytes
    expected = _blake2b256(body)[:_CHECKSUM_LEN]
    if checksum != expected:
        raise AddressError(
            f"Checksum mismatch: got {checksum.hex()}, expected {expected.hex()}"
        )

    prefix_byte = raw[0]
    network, address_type = prefix_byte & 0xF0, prefix_byte & 0x0F
    if network not in (MAINNET_PREFIX, TESTNET_PREFIX) or address_type not in _TYPE_NAMES:
        raise AddressError(f"Unknown prefix byte: 0x{prefix_byte:02x}")

    return network, address_type, body[1:]


def is_valid_address(address: str) -> bool:
    """Check if an Ergo address is valid without raising exceptions."""
    try:
        decode_address(address)
    except AddressError:
        return False
    return True


def is_mainnet_address(address: str) -> bool:
    """Check if address is a mainnet address."""
    network, _, _ = decode_address(address)
    return network == MAINNET_PREFIX


def get_address_type(address: str) -> str:
    """Return a human-readable address type, e.g. "mainnet-P2PK"."""
    network, address_type, _ = decode_address(address)
    net = "mainnet" if network == MAINNET_PREFIX else "testnet"
    return f"{net}-{_TYPE_NAMES[address_type]}"


def p2pk_address(public_key: str, prefix: int) -> str:
    """
    Encode a compressed secp256k1 public key as a P2PK address.

    Args:
        public_key: 33-byte compressed point, hex
        prefix: MAINNET_PREFIX or TESTNET_PREFIX
    """
    try:
        key = bytes.fromhex(public_key)
    except ValueError as e:
        raise AddressError(f"Public key is not hex: {e}") from None
    if len(key) != _PUBKEY_LEN or key[0] not in (0x02, 0x03):
        raise AddressError(
            f"Expected a 33-byte compressed public key, got {len(key)} bytes"
        )
    body = bytes([prefix | P2PK_TYPE]) + key
    return _base58_encode(body + _blake2b256(body)[:_CHECKSUM_LEN])


def script_from_address(address: str) -> str | None:
    """
    Return the ErgoTree (hex) carried by a P2S address, or None if the
    address does not embed a script (P2PK, P2SH).
    """
    _, address_type, content = decode_address(address)
    if address_type != P2S_TYPE:
        return None
    return content.hex()


def address_to_ergo_tree(address: str) -> str:
    """
    Convert an address to its ErgoTree hex, for the address types where the
    tree is derivable from the address alone.

    Raises:
        AddressError: for P2SH, which only carries a script hash
    """
    _, address_type, content = decode_address(address)
    if address_type == P2PK_TYPE:
        return P2PK_TREE_PREFIX + content.hex()
    if address_type == P2S_TYPE:
        return content.hex()
    raise AddressError(f"Cannot derive an ErgoTree from a P2SH address: {address}")


# ------------------------------------------------------------------
# Internal helpers
# ------------------------------------------------------------------


def _blake2b256(data: bytes) -> bytes:
    """Compute Blake2b-256 hash."""
    return hashlib.blake2b(data, digest_size=32).digest()


def _base58_decode(s: str) -> bytes:
    """Decode a Base58-encoded string to bytes."""
    n = 0
    for char in s.encode("ascii"):
        n = n * 58 + _ALPHABET_MAP[char]

    if n == 0:
        result = b""
    else:
        byte_length = (n.bit_length() + 7) // 8
        result = n.to_bytes(byte_length, "big")

    # Preserve leading zeros (each leading '1' in Base58 = 0x00 byte)
    pad_size = 0
    for char in s.encode("ascii"):
        if char == _ALPHABET[0]:
            pad_size += 1
        else:
            break

    return b"\x00" * pad_size + result


def _base58_encode(data: bytes) -> str:
    """Encode bytes to a Base58 string."""
    n = int.from_bytes(data, "big")
    result = []
    while n > 0:
        n, remainder = divmod(n, 58)
        result.append(_ALPHABET[remainder:remainder + 1])
    result.reverse()

    # Preserve leading zeros
    pad_size = 0
    for byte in data:
        if byte == 0:
            pad_size += 1
        else:
            break

    return (b"1" * pad_size + b"".join(result)).decode("ascii")
