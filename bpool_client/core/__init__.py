"""Core module - configuration, networks, connection and exceptions"""

from .config import Config
from .connection import Web3Manager
from .networks import NetworkConfig, NetworkConfigResolver, get_config
from .exceptions import (
    BPoolError,
    ConfigError,
    ConnectionError,
    TransactionError,
    AbiError,
    ConversionError,
    NotMarketFeeCollectorError,
)

__all__ = [
    "Config",
    "Web3Manager",
    "NetworkConfig",
    "NetworkConfigResolver",
    "get_config",
    "BPoolError",
    "ConfigError",
    "ConnectionError",
    "TransactionError",
    "AbiError",
    "ConversionError",
    "NotMarketFeeCollectorError",
]
