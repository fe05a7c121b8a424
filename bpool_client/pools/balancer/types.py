"""Parameter and result records for pool operations"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class TokenInOutMarket:
    """
    Token pair of a swap plus the address that receives the consume market fee.

    Attributes:
        token_in: Address of the token sent to the pool
        token_out: Address of the token received from the pool
        market_fee_address: Consume market fee recipient
    """

    token_in: str
    token_out: str
    market_fee_address: str

    def to_list(self) -> list:
        return [self.token_in, self.token_out, self.market_fee_address]


@dataclass
class AmountsInMaxFee:
    """Amounts for swapExactAmountIn, in human units"""

    token_amount_in: str
    min_amount_out: str
    swap_market_fee: str
    max_price: Optional[str] = None


@dataclass
class AmountsOutMaxFee:
    """Amounts for swapExactAmountOut, in human units"""

    max_amount_in: str
    token_amount_out: str
    swap_market_fee: str
    max_price: Optional[str] = None


@dataclass(frozen=True)
class PoolPriceAndFees:
    """Swap quote: principal amount plus itemised fees, in human units"""

    token_amount: str
    liquidity_provider_swap_fee_amount: str
    ocean_fee_amount: str
    publish_market_swap_fee_amount: str
    consume_market_swap_fee_amount: str


@dataclass(frozen=True)
class CurrentFees:
    """Collectible fees per token, in human units"""

    tokens: List[str] = field(default_factory=list)
    amounts: List[str] = field(default_factory=list)
