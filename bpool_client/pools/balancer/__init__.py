"""Two-token weighted pool (Balancer BPool fork)"""

from .pool import Pool, scale_spot_price
from .types import (
    TokenInOutMarket,
    AmountsInMaxFee,
    AmountsOutMaxFee,
    PoolPriceAndFees,
    CurrentFees,
)

__all__ = [
    "Pool",
    "scale_spot_price",
    "TokenInOutMarket",
    "AmountsInMaxFee",
    "AmountsOutMaxFee",
    "PoolPriceAndFees",
    "CurrentFees",
]
