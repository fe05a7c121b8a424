"""Spot price rescaling by the decimals difference of the two tokens"""

import logging

import pytest

from bpool_client.pools.balancer import scale_spot_price

from conftest import POOL, USDC, WBTC, DATATOKEN, set_call, fail_call


def raw_spot_price(balance_in, balance_out):
    """What the pool reports for equal weights and no fees: 18-decimal ratio of base units"""
    return balance_in * 10 ** 18 // balance_out


@pytest.mark.parametrize("decimals_in, decimals_out, human_in, human_out, expected", [
    # token_in has fewer decimals: multiply branch
    (6, 18, 1000, 100, "10"),
    (8, 18, 1000, 100, "10"),
    (6, 8, 1000, 100, "10"),
    # token_in has more decimals: divide branch
    (18, 6, 100, 1000, "0.1"),
    (18, 8, 100, 1000, "0.1"),
    (8, 6, 100, 1000, "0.1"),
    # same decimals
    (18, 18, 300, 100, "3"),
    (6, 6, 50, 200, "0.25"),
])
def test_price_in_human_units(decimals_in, decimals_out, human_in, human_out, expected):
    raw = raw_spot_price(human_in * 10 ** decimals_in, human_out * 10 ** decimals_out)

    assert scale_spot_price(raw, decimals_in, decimals_out) == expected


@pytest.mark.parametrize("low, high", [(6, 18), (8, 18), (6, 8)])
def test_swapping_tokens_gives_reciprocal_prices(low, high):
    reserve_low = 2500 * 10 ** low
    reserve_high = 100 * 10 ** high

    forward = scale_spot_price(raw_spot_price(reserve_low, reserve_high), low, high)
    backward = scale_spot_price(raw_spot_price(reserve_high, reserve_low), high, low)

    assert forward == "25"
    assert backward == "0.04"


def test_get_spot_price(pool, pool_contract, usdc, datatoken):
    set_call(pool_contract, "getSpotPrice", 10 ** 7)

    assert pool.get_spot_price(POOL, USDC, DATATOKEN, "0.001") == "10"
    pool_contract.functions.getSpotPrice.assert_called_once_with(USDC, DATATOKEN, 10 ** 15)


def test_get_spot_price_other_direction(pool, pool_contract, wbtc, datatoken):
    set_call(pool_contract, "getSpotPrice", 10 ** 27)

    assert pool.get_spot_price(POOL, DATATOKEN, WBTC, "0") == "0.1"


def test_decimals_failure_assumes_18(pool, pool_contract, usdc, datatoken, caplog):
    caplog.set_level(logging.ERROR)
    fail_call(usdc, "decimals")
    set_call(pool_contract, "getSpotPrice", 3 * 10 ** 18)

    assert pool.get_spot_price(POOL, USDC, DATATOKEN, "0") == "3"
    assert "decimals()" in caplog.text


def test_failed_spot_price_returns_none(pool, pool_contract, usdc, datatoken, caplog):
    caplog.set_level(logging.ERROR)
    fail_call(pool_contract, "getSpotPrice")

    assert pool.get_spot_price(POOL, USDC, DATATOKEN, "0") is None
    assert "ERROR: Failed to get spot price" in caplog.text
