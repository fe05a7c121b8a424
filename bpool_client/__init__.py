"""
bpool-client - client SDK for two-token weighted AMM pools
"""

from .core.connection import Web3Manager
from .core.config import Config
from .core.networks import NetworkConfig, NetworkConfigResolver, get_config
from .core.exceptions import (
    BPoolError,
    ConfigError,
    ConnectionError,
    TransactionError,
    NotMarketFeeCollectorError,
)
from .pools.executor import CallResult, ErrorKind
from .pools.balancer import (
    Pool,
    TokenInOutMarket,
    AmountsInMaxFee,
    AmountsOutMaxFee,
    PoolPriceAndFees,
    CurrentFees,
)

__version__ = "0.1.0"
__all__ = [
    "Web3Manager",
    "Config",
    "NetworkConfig",
    "NetworkConfigResolver",
    "get_config",
    "BPoolError",
    "ConfigError",
    "ConnectionError",
    "TransactionError",
    "NotMarketFeeCollectorError",
    "CallResult",
    "ErrorKind",
    "Pool",
    "TokenInOutMarket",
    "AmountsInMaxFee",
    "AmountsOutMaxFee",
    "PoolPriceAndFees",
    "CurrentFees",
]
