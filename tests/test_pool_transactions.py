"""State-changing pool calls: conversion, gas estimation with fallback, submission"""

import logging
from unittest.mock import MagicMock

import pytest

from bpool_client.core.config import Config
from bpool_client.pools.balancer import (
    Pool,
    TokenInOutMarket,
    AmountsInMaxFee,
    AmountsOutMaxFee,
)
from bpool_client.core.exceptions import TransactionError
from bpool_client.pools.executor import ErrorKind

from conftest import (
    POOL, ACCOUNT, BASE_TOKEN, DATATOKEN, MARKET, USDC, WBTC, GAS_PRICE,
    set_call, fail_call,
)

RECEIPT = {"status": 1, "transactionHash": "0xabc"}
MAX_PRICE = 115792089237316195423570985008687907853269984665640564039457584007913129639934


def sent_tx(contract, method):
    return getattr(contract.functions, method).return_value.transact.call_args[0][0]


def test_sentinel_is_max_uint256_minus_one():
    assert Config.MAX_PRICE == MAX_PRICE == 2 ** 256 - 2


def test_set_swap_fee(pool, pool_contract):
    pool_contract.functions.setSwapFee.return_value.estimate_gas.return_value = 45000

    assert pool.set_swap_fee(ACCOUNT, POOL, "0.001") == RECEIPT

    pool_contract.functions.setSwapFee.assert_called_once_with(10 ** 15)
    pool_contract.functions.setSwapFee.return_value.estimate_gas.assert_called_once_with({"from": ACCOUNT})
    assert sent_tx(pool_contract, "setSwapFee") == {"from": ACCOUNT, "gas": 45000, "gasPrice": GAS_PRICE}


def test_estimate_falls_back_to_default_limit(pool, pool_contract):
    pool_contract.functions.setSwapFee.return_value.estimate_gas.side_effect = Exception("out of gas")

    assert pool.estimate_set_swap_fee(ACCOUNT, POOL, "0.001") == Pool.GASLIMIT_DEFAULT == 1000000


def test_estimate_never_raises_on_bad_amount(pool, pool_contract):
    assert pool.estimate_set_swap_fee(ACCOUNT, POOL, "not a fee") == Pool.GASLIMIT_DEFAULT


def test_estimate_uses_given_contract_instance(pool, pool_contract):
    other = MagicMock()
    other.functions.collectOPC.return_value.estimate_gas.return_value = 1234

    assert pool.estimate_collect_opc(ACCOUNT, POOL, contract_instance=other) == 1234
    pool_contract.functions.collectOPC.assert_not_called()


def test_transaction_sent_with_fallback_gas_when_estimate_fails(pool, pool_contract):
    pool_contract.functions.collectOPC.return_value.estimate_gas.side_effect = Exception("revert")

    assert pool.collect_opc(ACCOUNT, POOL) == RECEIPT
    assert sent_tx(pool_contract, "collectOPC")["gas"] == Pool.GASLIMIT_DEFAULT


def test_failed_transaction_returns_none_and_logs(pool, pool_contract, caplog):
    caplog.set_level(logging.ERROR)
    pool_contract.functions.collectOPC.return_value.transact.side_effect = Exception("nonce too low")

    assert pool.collect_opc(ACCOUNT, POOL) is None
    assert "ERROR: Failed to collect OPC fees: nonce too low" in caplog.text


def test_result_mode_reports_transaction_failure(result_pool, pool_contract):
    pool_contract.functions.collectOPC.return_value.transact.side_effect = Exception("nonce too low")

    result = result_pool.collect_opc(ACCOUNT, POOL)

    assert not result.ok
    assert result.kind is ErrorKind.TRANSACTION


def test_swap_exact_amount_in_without_max_price_sends_sentinel(pool, pool_contract, usdc, datatoken):
    market = TokenInOutMarket(USDC, DATATOKEN, MARKET)
    amounts = AmountsInMaxFee(token_amount_in="10.5", min_amount_out="1", swap_market_fee="0.001")

    assert pool.swap_exact_amount_in(ACCOUNT, POOL, market, amounts) == RECEIPT

    pool_contract.functions.swapExactAmountIn.assert_called_once_with(
        [USDC, DATATOKEN, MARKET],
        [10_500_000, 10 ** 18, MAX_PRICE, 10 ** 15],
    )


def test_swap_exact_amount_in_with_max_price(pool, pool_contract, usdc, datatoken):
    market = TokenInOutMarket(USDC, DATATOKEN, MARKET)
    amounts = AmountsInMaxFee("10", "1", "0", max_price="2.5")

    pool.swap_exact_amount_in(ACCOUNT, POOL, market, amounts)

    args = pool_contract.functions.swapExactAmountIn.call_args[0]
    assert args[1] == [10_000_000, 10 ** 18, 25 * 10 ** 17, 0]


def test_swap_does_not_mutate_amounts(pool, pool_contract, usdc, datatoken):
    amounts = AmountsInMaxFee("10", "1", "0.001")
    pool.swap_exact_amount_in(ACCOUNT, POOL, TokenInOutMarket(USDC, DATATOKEN, MARKET), amounts)
    assert amounts == AmountsInMaxFee("10", "1", "0.001")


def test_swap_exact_amount_out(pool, pool_contract, wbtc, usdc):
    market = TokenInOutMarket(WBTC, USDC, MARKET)
    amounts = AmountsOutMaxFee(max_amount_in="0.5", token_amount_out="1000", swap_market_fee="0.01")

    assert pool.swap_exact_amount_out(ACCOUNT, POOL, market, amounts) == RECEIPT

    pool_contract.functions.swapExactAmountOut.assert_called_once_with(
        [WBTC, USDC, MARKET],
        [50_000_000, 1_000_000_000, MAX_PRICE, 10 ** 16],
    )


def test_swap_with_bad_amount_is_not_sent(result_pool, pool_contract, usdc, datatoken, caplog):
    caplog.set_level(logging.ERROR)
    amounts = AmountsInMaxFee("ten", "1", "0")

    result = result_pool.swap_exact_amount_in(ACCOUNT, POOL, TokenInOutMarket(USDC, DATATOKEN, MARKET), amounts)

    assert result.kind is ErrorKind.CONVERSION
    pool_contract.functions.swapExactAmountIn.assert_not_called()
    assert "ERROR: Failed to swap exact amount in" in caplog.text


def test_negative_swap_amount_is_not_sent(result_pool, pool_contract, usdc, datatoken):
    amounts = AmountsInMaxFee("-10", "1", "0")

    result = result_pool.swap_exact_amount_in(ACCOUNT, POOL, TokenInOutMarket(USDC, DATATOKEN, MARKET), amounts)

    assert result.kind is ErrorKind.CONVERSION
    pool_contract.functions.swapExactAmountIn.assert_not_called()


def test_reverted_swap_is_a_transaction_failure(result_pool, pool_contract, usdc, datatoken, w3):
    w3.eth.wait_for_transaction_receipt.return_value = {"status": 0, "transactionHash": "0xdead"}
    amounts = AmountsInMaxFee("10", "1", "0")

    result = result_pool.swap_exact_amount_in(ACCOUNT, POOL, TokenInOutMarket(USDC, DATATOKEN, MARKET), amounts)

    assert result.kind is ErrorKind.TRANSACTION
    assert isinstance(result.error, TransactionError)


def test_estimate_swap_exact_amount_in(pool, pool_contract, usdc, datatoken):
    pool_contract.functions.swapExactAmountIn.return_value.estimate_gas.return_value = 180000
    market = TokenInOutMarket(USDC, DATATOKEN, MARKET)

    assert pool.estimate_swap_exact_amount_in(ACCOUNT, POOL, market, AmountsInMaxFee("1", "1", "0")) == 180000


def test_join_pool_converts_by_position(pool, pool_contract, usdc, datatoken):
    set_call(pool_contract, "getFinalTokens", [USDC, DATATOKEN])

    assert pool.join_pool(ACCOUNT, POOL, "0.5", ["1.5", "2"]) == RECEIPT

    pool_contract.functions.joinPool.assert_called_once_with(5 * 10 ** 17, [1_500_000, 2 * 10 ** 18])


def test_exit_pool_converts_by_position(pool, pool_contract, usdc, datatoken):
    set_call(pool_contract, "getFinalTokens", [DATATOKEN, USDC])

    assert pool.exit_pool(ACCOUNT, POOL, "3", ["1.5", "2"]) == RECEIPT

    pool_contract.functions.exitPool.assert_called_once_with(3 * 10 ** 18, [15 * 10 ** 17, 2_000_000])


def test_join_pool_uses_only_first_two_amounts(pool, pool_contract, usdc, datatoken):
    set_call(pool_contract, "getFinalTokens", [USDC, DATATOKEN])

    pool.join_pool(ACCOUNT, POOL, "1", ["1", "2", "3"])

    assert pool_contract.functions.joinPool.call_args[0][1] == [1_000_000, 2 * 10 ** 18]


def test_join_pool_with_one_amount_fails(result_pool, pool_contract, usdc, datatoken):
    set_call(pool_contract, "getFinalTokens", [USDC, DATATOKEN])

    result = result_pool.join_pool(ACCOUNT, POOL, "1", ["1"])

    assert result.kind is ErrorKind.CONVERSION
    pool_contract.functions.joinPool.assert_not_called()


def test_join_pool_fails_when_tokens_unavailable(pool, pool_contract, caplog):
    caplog.set_level(logging.ERROR)
    fail_call(pool_contract, "getFinalTokens")

    assert pool.join_pool(ACCOUNT, POOL, "1", ["1", "1"]) is None
    assert "ERROR: Failed to join pool" in caplog.text


def test_joinswap_extern_amount_in_uses_base_token(pool, pool_contract, usdc):
    set_call(pool_contract, "getBaseTokenAddress", USDC)

    assert pool.joinswap_extern_amount_in(ACCOUNT, POOL, "25", "0.1") == RECEIPT

    pool_contract.functions.joinswapExternAmountIn.assert_called_once_with(25_000_000, 10 ** 17)


def test_exitswap_pool_amount_in_uses_base_token(pool, pool_contract, usdc):
    set_call(pool_contract, "getBaseTokenAddress", USDC)

    assert pool.exitswap_pool_amount_in(ACCOUNT, POOL, "0.1", "24.9") == RECEIPT

    pool_contract.functions.exitswapPoolAmountIn.assert_called_once_with(10 ** 17, 24_900_000)


@pytest.mark.parametrize("estimate, args", [
    ("estimate_join_pool", (ACCOUNT, POOL, "1", ["1", "1"])),
    ("estimate_exit_pool", (ACCOUNT, POOL, "1", ["1", "1"])),
    ("estimate_joinswap_extern_amount_in", (ACCOUNT, POOL, "1", "1")),
    ("estimate_exitswap_pool_amount_in", (ACCOUNT, POOL, "1", "1")),
    ("estimate_collect_market_fee", (ACCOUNT, POOL)),
    ("estimate_update_publish_market_fee", (ACCOUNT, POOL, MARKET, "0.01")),
    ("estimate_swap_exact_amount_out", (ACCOUNT, POOL, TokenInOutMarket(BASE_TOKEN, DATATOKEN, MARKET),
                                        AmountsOutMaxFee("1", "1", "0"))),
])
def test_estimates_fall_back_on_failure(pool, pool_contract, estimate, args):
    fail_call(pool_contract, "getFinalTokens")
    fail_call(pool_contract, "getBaseTokenAddress")
    for method in ("collectMarketFee", "updatePublishMarketFee"):
        getattr(pool_contract.functions, method).return_value.estimate_gas.side_effect = Exception("revert")

    assert getattr(pool, estimate)(*args) == Pool.GASLIMIT_DEFAULT


@pytest.mark.parametrize("estimate, method, args, expected_args", [
    ("estimate_joinswap_extern_amount_in", "joinswapExternAmountIn", ("25", "0.1"), (25_000_000, 10 ** 17)),
    ("estimate_exitswap_pool_amount_in", "exitswapPoolAmountIn", ("0.1", "25"), (10 ** 17, 25_000_000)),
])
def test_single_sided_estimates_use_given_contract_instance(pool, pool_contract, usdc, estimate, method, args,
                                                            expected_args):
    other = MagicMock()
    set_call(other, "getBaseTokenAddress", USDC)
    getattr(other.functions, method).return_value.estimate_gas.return_value = 150000

    assert getattr(pool, estimate)(ACCOUNT, POOL, *args, contract_instance=other) == 150000

    pool_contract.functions.getBaseTokenAddress.assert_not_called()
    getattr(other.functions, method).assert_called_once_with(*expected_args)
