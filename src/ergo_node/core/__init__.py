"""core module init"""
from ergo_node.core.address import (
    AddressError,
    address_to_ergo_tree,
    decode_address,
    get_address_type,
    is_mainnet_address,
    is_valid_address,
    network_prefix,
    p2pk_address,
    script_from_address,
)
from ergo_node.core.client import NodeClient
from ergo_node.core.config import NodeConfig
from ergo_node.core.errors import (
    ConfigError,
    DecodeError,
    DomainError,
    InsufficientFunds,
    NodeError,
    NonScriptAddress,
    PaginationLimitExceeded,
    RequestError,
    TransportError,
)
from ergo_node.core.models import (
    ErgoBox,
    ErgoBoxCandidate,
    IndexedBox,
    IndexedTransaction,
    PaginationQuery,
    Token,
    Transaction,
    UnsignedTransaction,
)

__all__ = [
    "AddressError",
    "ConfigError",
    "DecodeError",
    "DomainError",
    "ErgoBox",
    "ErgoBoxCandidate",
    "IndexedBox",
    "IndexedTransaction",
    "InsufficientFunds",
    "NodeClient",
    "NodeConfig",
    "NodeError",
    "NonScriptAddress",
    "PaginationLimitExceeded",
    "PaginationQuery",
    "RequestError",
    "Token",
    "Transaction",
    "TransportError",
    "UnsignedTransaction",
    "address_to_ergo_tree",
    "decode_address",
    "get_address_type",
    "is_mainnet_address",
    "is_valid_address",
    "network_prefix",
    "p2pk_address",
    "script_from_address",
]
