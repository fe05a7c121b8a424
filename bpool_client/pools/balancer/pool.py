"""Client for the two-token weighted pool (Ocean fork of Balancer BPool)"""

from ...core.config import Config
from ...core.exceptions import ConversionError, NotMarketFeeCollectorError
from ...core.networks import default_resolver
from ...contracts.erc20 import ERC20, amount_to_units, units_to_amount
from ...utils.gas import GasManager
from ...utils.units import to_base_units, from_base_units, rescale, format_amount
from ..executor import CallExecutor
from .types import CurrentFees, PoolPriceAndFees


def scale_spot_price(raw_price, decimals_in, decimals_out):
    """
    Turn the pool's raw spot price into a human price of token_out in token_in.

    The pool reports an 18-decimal fixed-point ratio of base-unit balances,
    so the decimals difference between the tokens is applied before
    dropping the fixed-point scale.
    """
    if decimals_in > decimals_out:
        price = rescale(raw_price, -(decimals_in - decimals_out))
    else:
        price = rescale(raw_price, decimals_out - decimals_in)
    return format_amount(rescale(price, -18))


class Pool:
    """Interface to a deployed two-token weighted pool"""

    GASLIMIT_DEFAULT = Config.GASLIMIT_DEFAULT
    MAX_PRICE = Config.MAX_PRICE

    def __init__(self, manager, pool_abi=None, config=None, return_results=False,
                 gas_manager=None):
        """
        Args:
            manager: Web3Manager instance (shared connection)
            pool_abi: Pool ABI list (packaged BPool ABI if None)
            config: NetworkConfig (first configured network if None)
            return_results: Return CallResult objects instead of value-or-None
            gas_manager: GasManager instance (created if None)
        """
        self.manager = manager
        self.pool_abi = pool_abi or Config().get_abi("bpool")
        self.config = config or getattr(manager, "network_config", None) or default_resolver().default()
        gas_manager = gas_manager or GasManager(manager, network_config=self.config)
        self.executor = CallExecutor(manager, gas_manager=gas_manager, return_results=return_results)

    def _pool(self, pool_address):
        return self.manager.get_contract(pool_address, self.pool_abi)

    def _read(self, description, fetch):
        return self.executor.read(description, fetch)

    def _estimate(self, build, account, operation_type):
        return self.executor.estimate(build, account, operation_type)

    def _transact(self, description, build, account, operation_type):
        return self.executor.transact(description, build, account, operation_type)

    def _max_price(self, max_price):
        if max_price is None or max_price == "":
            return self.MAX_PRICE
        return to_base_units(max_price)

    def _two_token_units(self, pool_address, amounts):
        """Convert two human amounts to base units, by position over the pool's final tokens"""
        tokens = self._pool(pool_address).functions.getFinalTokens().call()
        if len(tokens) < 2 or len(amounts) < 2:
            raise ConversionError(
                f"Expected two tokens and two amounts, got {len(tokens)} tokens and {len(amounts)} amounts"
            )
        return [amount_to_units(self.manager, tokens[i], amounts[i]) for i in range(2)]

    def _fees(self, tokens, amounts):
        return CurrentFees(
            tokens=list(tokens),
            amounts=[units_to_amount(self.manager, t, a) for t, a in zip(tokens, amounts)],
        )

    # ── Pool shares ─────────────────────────────────────────────────────

    def shares_balance(self, account, pool_address):
        """
        Get user shares of pool tokens.

        Args:
            account: Holder address
            pool_address: Pool contract address

        Returns:
            Share balance in human units, or None on failure
        """
        return self._read(
            "get shares of pool",
            lambda: from_base_units(self._pool(pool_address).functions.balanceOf(account).call()),
        )

    def get_pool_shares_total_supply(self, pool_address):
        """Total supply of pool shares"""
        return self._read(
            "get total supply of pool shares",
            lambda: from_base_units(self._pool(pool_address).functions.totalSupply().call()),
        )

    # ── Pool state ──────────────────────────────────────────────────────

    def get_num_tokens(self, pool_address):
        """Number of tokens bound to the pool"""
        return self._read(
            "get number of tokens",
            lambda: int(self._pool(pool_address).functions.getNumTokens().call()),
        )

    def get_current_tokens(self, pool_address):
        """Tokens bound to the pool before it was finalized"""
        return self._read(
            "get tokens composing this pool",
            lambda: list(self._pool(pool_address).functions.getCurrentTokens().call()),
        )

    def get_final_tokens(self, pool_address):
        """Tokens bound to the pool after it was finalized"""
        return self._read(
            "get the final tokens composing this pool",
            lambda: list(self._pool(pool_address).functions.getFinalTokens().call()),
        )

    def get_controller(self, pool_address):
        """Current controller address (the staking bot)"""
        return self._read(
            "get pool controller address",
            lambda: self._pool(pool_address).functions.getController().call(),
        )

    def get_base_token(self, pool_address):
        return self._read(
            "get baseToken address",
            lambda: self._pool(pool_address).functions.getBaseTokenAddress().call(),
        )

    def get_datatoken(self, pool_address):
        return self._read(
            "get datatoken address",
            lambda: self._pool(pool_address).functions.getDatatokenAddress().call(),
        )

    def get_market_fee_collector(self, pool_address):
        return self._read(
            "get marketFeeCollector address",
            lambda: self._pool(pool_address).functions._publishMarketCollector().call(),
        )

    def get_opc_collector(self, pool_address):
        return self._read(
            "get OPC Collector address",
            lambda: self._pool(pool_address).functions._opcCollector().call(),
        )

    def is_bound(self, pool_address, token):
        """True if `token` is bound to the pool"""
        return self._read(
            "check whether a token is bounded to a pool",
            lambda: bool(self._pool(pool_address).functions.isBound(token).call()),
        )

    def is_finalized(self, pool_address):
        return self._read(
            "check whether pool is finalized",
            lambda: bool(self._pool(pool_address).functions.isFinalized().call()),
        )

    def get_reserve(self, pool_address, token):
        """
        Amount of `token` held by the pool.

        Args:
            pool_address: Pool contract address
            token: Token address

        Returns:
            Reserve in the token's human units, or None on failure
        """
        def fetch():
            balance = self._pool(pool_address).functions.getBalance(token).call()
            return units_to_amount(self.manager, token, balance)

        return self._read("get how many tokens are in the pool", fetch)

    # ── Fees and weights ────────────────────────────────────────────────

    def get_swap_fee(self, pool_address):
        """Liquidity providers swap fee as a fraction (0.001 = 0.1%)"""
        return self._read(
            "get pool fee",
            lambda: from_base_units(self._pool(pool_address).functions.getSwapFee().call()),
        )

    def get_market_fee(self, pool_address):
        """Publish market swap fee as a fraction"""
        return self._read(
            "get getMarketFee",
            lambda: from_base_units(self._pool(pool_address).functions.getMarketFee().call()),
        )

    def get_normalized_weight(self, pool_address, token):
        return self._read(
            "get normalized weight of a token",
            lambda: from_base_units(self._pool(pool_address).functions.getNormalizedWeight(token).call()),
        )

    def get_denormalized_weight(self, pool_address, token):
        return self._read(
            "get denormalized weight of a token in pool",
            lambda: from_base_units(self._pool(pool_address).functions.getDenormalizedWeight(token).call()),
        )

    def get_total_denormalized_weight(self, pool_address):
        return self._read(
            "get total denormalized weight in pool",
            lambda: from_base_units(self._pool(pool_address).functions.getTotalDenormalizedWeight().call()),
        )

    def get_market_fees(self, pool_address, token):
        """Publish market fees accrued in `token`, in the token's human units"""
        def fetch():
            fees = self._pool(pool_address).functions.publishMarketFees(token).call()
            return units_to_amount(self.manager, token, fees)

        return self._read("get market fees for a token", fetch)

    def get_community_fees(self, pool_address, token):
        """Protocol (OPC) fees accrued in `token`, in the token's human units"""
        def fetch():
            fees = self._pool(pool_address).functions.communityFees(token).call()
            return units_to_amount(self.manager, token, fees)

        return self._read("get community fees for a token", fetch)

    def get_current_market_fees(self, pool_address):
        """
        Publish market fees the collector can withdraw now.

        Returns:
            CurrentFees, or None on failure
        """
        def fetch():
            tokens, amounts = self._pool(pool_address).functions.getCurrentMarketFees().call()
            return self._fees(tokens, amounts)

        return self._read("get current market fees", fetch)

    def get_current_opc_fees(self, pool_address):
        """
        Protocol fees the OPC collector can withdraw now.

        Returns:
            CurrentFees, or None on failure
        """
        def fetch():
            tokens, amounts = self._pool(pool_address).functions.getCurrentOPCFees().call()
            return self._fees(tokens, amounts)

        return self._read("get current OPC fees", fetch)

    # ── setSwapFee ──────────────────────────────────────────────────────

    def _set_swap_fee_func(self, pool_address, fee, contract_instance=None):
        pool = contract_instance or self._pool(pool_address)
        return pool.functions.setSwapFee(to_base_units(fee))

    def estimate_set_swap_fee(self, account, pool_address, fee, contract_instance=None):
        """Gas estimate for set_swap_fee (fallback limit on failure)"""
        return self._estimate(
            lambda: self._set_swap_fee_func(pool_address, fee, contract_instance),
            account, "setSwapFee",
        )

    def set_swap_fee(self, account, pool_address, fee):
        """
        Allows controller to change the swap fee.

        Args:
            account: Controller address
            pool_address: Pool contract address
            fee: Fee as a fraction ("0.1" = 10%, "0.01" = 1%, "0.001" = 0.1%)

        Returns:
            Transaction receipt, or None on failure
        """
        return self._transact(
            "set pool swap fee",
            lambda: self._set_swap_fee_func(pool_address, fee),
            account, "setSwapFee",
        )

    # ── Fee collection ──────────────────────────────────────────────────

    def _check_market_fee_collector(self, account, pool_address):
        collector = self.executor.run_read(
            "get marketFeeCollector address",
            lambda: self._pool(pool_address).functions._publishMarketCollector().call(),
        ).value
        if collector is None or collector.lower() != account.lower():
            raise NotMarketFeeCollectorError(caller=account, collector=collector)

    def estimate_collect_opc(self, account, pool_address, contract_instance=None):
        return self._estimate(
            lambda: (contract_instance or self._pool(pool_address)).functions.collectOPC(),
            account, "collectOPC",
        )

    def collect_opc(self, account, pool_address):
        """Send accrued protocol fees to the OPC collector"""
        return self._transact(
            "collect OPC fees",
            lambda: self._pool(pool_address).functions.collectOPC(),
            account, "collectOPC",
        )

    def estimate_collect_market_fee(self, account, pool_address, contract_instance=None):
        return self._estimate(
            lambda: (contract_instance or self._pool(pool_address)).functions.collectMarketFee(),
            account, "collectMarketFee",
        )

    def collect_market_fee(self, account, pool_address):
        """
        Send accrued publish market fees to the market fee collector.

        Raises:
            NotMarketFeeCollectorError: If `account` is not the pool's collector
        """
        self._check_market_fee_collector(account, pool_address)
        return self._transact(
            "collect market fee",
            lambda: self._pool(pool_address).functions.collectMarketFee(),
            account, "collectMarketFee",
        )

    def _update_publish_market_fee_func(self, pool_address, new_collector, new_fee,
                                        contract_instance=None):
        pool = contract_instance or self._pool(pool_address)
        return pool.functions.updatePublishMarketFee(new_collector, to_base_units(new_fee))

    def estimate_update_publish_market_fee(self, account, pool_address, new_collector, new_fee,
                                           contract_instance=None):
        return self._estimate(
            lambda: self._update_publish_market_fee_func(
                pool_address, new_collector, new_fee, contract_instance
            ),
            account, "updatePublishMarketFee",
        )

    def update_publish_market_fee(self, account, pool_address, new_collector, new_fee):
        """
        Change the publish market fee collector and fee.

        Args:
            account: Current market fee collector
            pool_address: Pool contract address
            new_collector: New collector address
            new_fee: New publish market swap fee as a fraction

        Raises:
            NotMarketFeeCollectorError: If `account` is not the pool's collector
        """
        self._check_market_fee_collector(account, pool_address)
        return self._transact(
            "updatePublishMarketFee",
            lambda: self._update_publish_market_fee_func(pool_address, new_collector, new_fee),
            account, "updatePublishMarketFee",
        )

    # ── Swaps ───────────────────────────────────────────────────────────

    def _swap_exact_amount_in_func(self, pool_address, token_in_out_market, amounts,
                                   contract_instance=None):
        pool = contract_instance or self._pool(pool_address)
        return pool.functions.swapExactAmountIn(
            token_in_out_market.to_list(),
            [
                amount_to_units(self.manager, token_in_out_market.token_in, amounts.token_amount_in),
                amount_to_units(self.manager, token_in_out_market.token_out, amounts.min_amount_out),
                self._max_price(amounts.max_price),
                to_base_units(amounts.swap_market_fee),
            ],
        )

    def estimate_swap_exact_amount_in(self, account, pool_address, token_in_out_market, amounts,
                                      contract_instance=None):
        return self._estimate(
            lambda: self._swap_exact_amount_in_func(
                pool_address, token_in_out_market, amounts, contract_instance
            ),
            account, "swapExactAmountIn",
        )

    def swap_exact_amount_in(self, account, pool_address, token_in_out_market, amounts):
        """
        Swap an exact amount of token_in for at least min_amount_out of token_out.

        Args:
            account: Trader address
            pool_address: Pool contract address
            token_in_out_market: TokenInOutMarket
            amounts: AmountsInMaxFee in human units; max_price None means no limit

        Returns:
            Transaction receipt, or None on failure
        """
        return self._transact(
            "swap exact amount in",
            lambda: self._swap_exact_amount_in_func(pool_address, token_in_out_market, amounts),
            account, "swapExactAmountIn",
        )

    def _swap_exact_amount_out_func(self, pool_address, token_in_out_market, amounts,
                                    contract_instance=None):
        pool = contract_instance or self._pool(pool_address)
        return pool.functions.swapExactAmountOut(
            token_in_out_market.to_list(),
            [
                amount_to_units(self.manager, token_in_out_market.token_in, amounts.max_amount_in),
                amount_to_units(self.manager, token_in_out_market.token_out, amounts.token_amount_out),
                self._max_price(amounts.max_price),
                to_base_units(amounts.swap_market_fee),
            ],
        )

    def estimate_swap_exact_amount_out(self, account, pool_address, token_in_out_market, amounts,
                                       contract_instance=None):
        return self._estimate(
            lambda: self._swap_exact_amount_out_func(
                pool_address, token_in_out_market, amounts, contract_instance
            ),
            account, "swapExactAmountOut",
        )

    def swap_exact_amount_out(self, account, pool_address, token_in_out_market, amounts):
        """
        Swap at most max_amount_in of token_in for an exact amount of token_out.

        Args:
            account: Trader address
            pool_address: Pool contract address
            token_in_out_market: TokenInOutMarket
            amounts: AmountsOutMaxFee in human units; max_price None means no limit

        Returns:
            Transaction receipt, or None on failure
        """
        return self._transact(
            "swap exact amount out",
            lambda: self._swap_exact_amount_out_func(pool_address, token_in_out_market, amounts),
            account, "swapExactAmountOut",
        )

    # ── Liquidity ───────────────────────────────────────────────────────

    def _join_pool_func(self, pool_address, pool_amount_out, max_amounts_in, contract_instance=None):
        pool = contract_instance or self._pool(pool_address)
        return pool.functions.joinPool(
            to_base_units(pool_amount_out),
            self._two_token_units(pool_address, max_amounts_in),
        )

    def estimate_join_pool(self, account, pool_address, pool_amount_out, max_amounts_in,
                           contract_instance=None):
        return self._estimate(
            lambda: self._join_pool_func(pool_address, pool_amount_out, max_amounts_in, contract_instance),
            account, "joinPool",
        )

    def join_pool(self, account, pool_address, pool_amount_out, max_amounts_in):
        """
        Add liquidity on both sides and receive an exact amount of pool shares.

        Args:
            account: Liquidity provider address
            pool_address: Pool contract address
            pool_amount_out: Pool shares to receive
            max_amounts_in: Two human amounts, in the order of get_final_tokens

        Returns:
            Transaction receipt, or None on failure
        """
        return self._transact(
            "join pool",
            lambda: self._join_pool_func(pool_address, pool_amount_out, max_amounts_in),
            account, "joinPool",
        )

    def _exit_pool_func(self, pool_address, pool_amount_in, min_amounts_out, contract_instance=None):
        pool = contract_instance or self._pool(pool_address)
        return pool.functions.exitPool(
            to_base_units(pool_amount_in),
            self._two_token_units(pool_address, min_amounts_out),
        )

    def estimate_exit_pool(self, account, pool_address, pool_amount_in, min_amounts_out,
                           contract_instance=None):
        return self._estimate(
            lambda: self._exit_pool_func(pool_address, pool_amount_in, min_amounts_out, contract_instance),
            account, "exitPool",
        )

    def exit_pool(self, account, pool_address, pool_amount_in, min_amounts_out):
        """
        Burn an exact amount of pool shares and withdraw both tokens.

        Args:
            account: Liquidity provider address
            pool_address: Pool contract address
            pool_amount_in: Pool shares to burn
            min_amounts_out: Two human amounts, in the order of get_final_tokens

        Returns:
            Transaction receipt, or None on failure
        """
        return self._transact(
            "exit pool",
            lambda: self._exit_pool_func(pool_address, pool_amount_in, min_amounts_out),
            account, "exitPool",
        )

    def _joinswap_extern_amount_in_func(self, pool_address, token_amount_in, min_pool_amount_out,
                                        contract_instance=None):
        pool = contract_instance or self._pool(pool_address)
        base_token = pool.functions.getBaseTokenAddress().call()
        return pool.functions.joinswapExternAmountIn(
            amount_to_units(self.manager, base_token, token_amount_in),
            to_base_units(min_pool_amount_out),
        )

    def estimate_joinswap_extern_amount_in(self, account, pool_address, token_amount_in,
                                           min_pool_amount_out, contract_instance=None):
        return self._estimate(
            lambda: self._joinswap_extern_amount_in_func(
                pool_address, token_amount_in, min_pool_amount_out, contract_instance
            ),
            account, "joinswapExternAmountIn",
        )

    def joinswap_extern_amount_in(self, account, pool_address, token_amount_in, min_pool_amount_out):
        """
        Add base token only and receive at least min_pool_amount_out shares.

        Returns:
            Transaction receipt, or None on failure
        """
        return self._transact(
            "pay tokens in order to join the pool",
            lambda: self._joinswap_extern_amount_in_func(pool_address, token_amount_in, min_pool_amount_out),
            account, "joinswapExternAmountIn",
        )

    def _exitswap_pool_amount_in_func(self, pool_address, pool_amount_in, min_token_amount_out,
                                      contract_instance=None):
        pool = contract_instance or self._pool(pool_address)
        base_token = pool.functions.getBaseTokenAddress().call()
        return pool.functions.exitswapPoolAmountIn(
            to_base_units(pool_amount_in),
            amount_to_units(self.manager, base_token, min_token_amount_out),
        )

    def estimate_exitswap_pool_amount_in(self, account, pool_address, pool_amount_in,
                                         min_token_amount_out, contract_instance=None):
        return self._estimate(
            lambda: self._exitswap_pool_amount_in_func(
                pool_address, pool_amount_in, min_token_amount_out, contract_instance
            ),
            account, "exitswapPoolAmountIn",
        )

    def exitswap_pool_amount_in(self, account, pool_address, pool_amount_in, min_token_amount_out):
        """
        Burn pool shares and withdraw base token only.

        Returns:
            Transaction receipt, or None on failure
        """
        return self._transact(
            "pay pool shares into the pool",
            lambda: self._exitswap_pool_amount_in_func(pool_address, pool_amount_in, min_token_amount_out),
            account, "exitswapPoolAmountIn",
        )

    # ── Prices and quotes ───────────────────────────────────────────────

    def get_spot_price(self, pool_address, token_in, token_out, swap_market_fee):
        """
        Marginal price of token_out in token_in at current reserves.

        Args:
            pool_address: Pool contract address
            token_in: Token paid
            token_out: Token bought
            swap_market_fee: Consume market fee as a fraction

        Returns:
            Price string in human units, or None on failure
        """
        def fetch():
            decimals_in = ERC20(self.manager, token_in).decimals
            decimals_out = ERC20(self.manager, token_out).decimals
            raw_price = self._pool(pool_address).functions.getSpotPrice(
                token_in, token_out, to_base_units(swap_market_fee)
            ).call()
            return scale_spot_price(raw_price, decimals_in, decimals_out)

        return self._read("get spot price of swapping tokenIn to tokenOut", fetch)

    def _quote(self, token_in, amount_token, decimals_amount, fees):
        decimals_in = ERC20(self.manager, token_in).decimals
        lp_fee, ocean_fee, publish_fee, consume_fee = fees
        return PoolPriceAndFees(
            token_amount=from_base_units(amount_token, decimals_amount),
            liquidity_provider_swap_fee_amount=from_base_units(lp_fee, decimals_in),
            ocean_fee_amount=from_base_units(ocean_fee, decimals_in),
            publish_market_swap_fee_amount=from_base_units(publish_fee, decimals_in),
            consume_market_swap_fee_amount=from_base_units(consume_fee, decimals_in),
        )

    def get_amount_in_exact_out(self, pool_address, token_in, token_out, token_amount_out,
                                swap_market_fee):
        """
        Quote how much token_in buys exactly token_amount_out of token_out.

        Returns:
            PoolPriceAndFees (token_amount in token_in units), or None on failure
        """
        def fetch():
            result = self._pool(pool_address).functions.getAmountInExactOut(
                token_in,
                token_out,
                amount_to_units(self.manager, token_out, token_amount_out),
                to_base_units(swap_market_fee),
            ).call()
            decimals_in = ERC20(self.manager, token_in).decimals
            return self._quote(token_in, result[0], decimals_in, result[1:5])

        return self._read("calcInGivenOut", fetch)

    def get_amount_out_exact_in(self, pool_address, token_in, token_out, token_amount_in,
                                swap_market_fee):
        """
        Quote how much token_out exactly token_amount_in of token_in buys.

        Returns:
            PoolPriceAndFees (token_amount in token_out units), or None on failure
        """
        def fetch():
            result = self._pool(pool_address).functions.getAmountOutExactIn(
                token_in,
                token_out,
                amount_to_units(self.manager, token_in, token_amount_in),
                to_base_units(swap_market_fee),
            ).call()
            decimals_out = ERC20(self.manager, token_out).decimals
            return self._quote(token_in, result[0], decimals_out, result[1:5])

        return self._read("calcOutGivenIn", fetch)

    def calc_pool_out_given_single_in(self, pool_address, token_in, token_amount_in):
        """Pool shares received for adding token_amount_in of token_in only"""
        def fetch():
            result = self._pool(pool_address).functions.calcPoolOutSingleIn(
                token_in, amount_to_units(self.manager, token_in, token_amount_in)
            ).call()
            return units_to_amount(self.manager, pool_address, result)

        return self._read("calculate PoolOutGivenSingleIn", fetch)

    def calc_single_in_given_pool_out(self, pool_address, token_in, pool_amount_out):
        """Amount of token_in needed to receive pool_amount_out shares"""
        def fetch():
            result = self._pool(pool_address).functions.calcSingleInPoolOut(
                token_in, amount_to_units(self.manager, pool_address, pool_amount_out)
            ).call()
            return units_to_amount(self.manager, token_in, result)

        return self._read("calculate SingleInGivenPoolOut", fetch)

    def calc_single_out_given_pool_in(self, pool_address, token_out, pool_amount_in):
        """Amount of token_out received for burning pool_amount_in shares"""
        def fetch():
            result = self._pool(pool_address).functions.calcSingleOutPoolIn(
                token_out, amount_to_units(self.manager, pool_address, pool_amount_in)
            ).call()
            return units_to_amount(self.manager, token_out, result)

        return self._read("calculate SingleOutGivenPoolIn", fetch)

    def calc_pool_in_given_single_out(self, pool_address, token_out, token_amount_out):
        """Pool shares burned to withdraw token_amount_out of token_out"""
        def fetch():
            result = self._pool(pool_address).functions.calcPoolInSingleOut(
                token_out, amount_to_units(self.manager, token_out, token_amount_out)
            ).call()
            return units_to_amount(self.manager, pool_address, result)

        return self._read("calculate PoolInGivenSingleOut", fetch)

    # ── Event topics ────────────────────────────────────────────────────

    def _event_signature(self, name):
        return self.manager.encode_event_signature(Config.find_event(self.pool_abi, name))

    def get_swap_event_signature(self):
        """Log topic of LOG_SWAP"""
        return self._event_signature("LOG_SWAP")

    def get_join_event_signature(self):
        """Log topic of LOG_JOIN"""
        return self._event_signature("LOG_JOIN")

    def get_exit_event_signature(self):
        """Log topic of LOG_EXIT"""
        return self._event_signature("LOG_EXIT")
