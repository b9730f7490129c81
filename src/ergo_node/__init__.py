"""
ergo-node-client: typed async client for the Ergo full node REST API.

Usage:
    from ergo_node import NodeClient
    from ergo_node.endpoints import Scan, ContainsAssetRule
"""

from ergo_node.core.client import NodeClient
from ergo_node.core.config import NodeConfig
from ergo_node.core.errors import (
    ConfigError,
    DecodeError,
    DomainError,
    InsufficientFunds,
    NodeError,
    RequestError,
    TransportError,
)
from ergo_node.core.models import ErgoBox, Token, Transaction, UnsignedTransaction
from ergo_node.extensions import NodeExtension, take_until_amount

__version__ = "0.1.0"
__all__ = [
    "ConfigError",
    "DecodeError",
    "DomainError",
    "ErgoBox",
    "InsufficientFunds",
    "NodeClient",
    "NodeConfig",
    "NodeError",
    "NodeExtension",
    "RequestError",
    "Token",
    "Transaction",
    "TransportError",
    "UnsignedTransaction",
    "take_until_amount",
]
