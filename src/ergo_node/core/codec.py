"""
Wire codecs for values the node exchanges as strings.

Register ids travel as "R4".."R9" (R0-R3 are the mandatory box registers) and
sigma constants travel as base16-encoded serialized bytes. In memory a
register id is an int and a constant is raw bytes.
"""

from __future__ import annotations

MAX_REGISTER_ID = 9


def encode_register_id(register: int) -> str:
    """4 -> "R4"."""
    if not 0 <= register <= MAX_REGISTER_ID:
        raise ValueError(f"Register id out of range: {register}")
    return f"R{register}"


def decode_register_id(value: str) -> int:
    """ "R4" -> 4. Raises ValueError for anything else."""
    if len(value) < 2 or value[0] != "R" or not value[1:].isdigit():
        raise ValueError(f"Failed to parse register id: {value!r}")
    register = int(value[1:])
    if register > MAX_REGISTER_ID:
        raise ValueError(f"Register id out of range: {value!r}")
    return register


def encode_constant(value: bytes) -> str:
    return value.hex()


def decode_constant(value: str) -> bytes:
    """Decode a base16 serialized constant. Raises ValueError on bad hex."""
    if not value:
        raise ValueError("Empty constant")
    return bytes.fromhex(value)
