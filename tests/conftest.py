"""Shared fixtures: a Web3Manager over a mocked Web3 and mocked contracts"""

from unittest.mock import MagicMock

import pytest

from bpool_client.core.connection import Web3Manager
from bpool_client.pools.balancer import Pool

POOL = "0x" + "aa" * 20
BASE_TOKEN = "0x" + "11" * 20
DATATOKEN = "0x" + "22" * 20
MARKET = "0x" + "33" * 20
ACCOUNT = "0x" + "44" * 20
USDC = "0x" + "66" * 20
WBTC = "0x" + "88" * 20

GAS_PRICE = 10 ** 9


def make_token(decimals):
    """Mock ERC20 contract reporting `decimals`"""
    token = MagicMock()
    token.functions.decimals.return_value.call.return_value = decimals
    return token


def set_call(contract, method, value):
    """Make contract.functions.<method>(...).call() return `value`"""
    getattr(contract.functions, method).return_value.call.return_value = value


def fail_call(contract, method, error=None):
    """Make contract.functions.<method>(...).call() raise"""
    getattr(contract.functions, method).return_value.call.side_effect = error or Exception("execution reverted")


@pytest.fixture
def w3():
    w3 = MagicMock()
    w3.eth.gas_price = GAS_PRICE
    w3.eth.chain_id = 1337
    w3.eth.get_transaction_count.return_value = 7
    w3.eth.wait_for_transaction_receipt.return_value = {"status": 1, "transactionHash": "0xabc"}
    return w3


@pytest.fixture
def contracts():
    """Lower-case address -> mocked contract"""
    return {}


@pytest.fixture
def manager(w3, contracts, monkeypatch):
    monkeypatch.delenv("PUBLIC_KEY", raising=False)
    manager = Web3Manager(w3=w3, network="development")

    def get_contract(address, abi):
        return contracts[address.lower()]

    manager.get_contract = get_contract
    return manager


@pytest.fixture
def pool_contract(contracts):
    contract = make_token(18)
    contracts[POOL] = contract
    return contract


@pytest.fixture
def base_token(contracts):
    token = make_token(18)
    contracts[BASE_TOKEN] = token
    return token


@pytest.fixture
def datatoken(contracts):
    token = make_token(18)
    contracts[DATATOKEN] = token
    return token


@pytest.fixture
def usdc(contracts):
    token = make_token(6)
    contracts[USDC] = token
    return token


@pytest.fixture
def wbtc(contracts):
    token = make_token(8)
    contracts[WBTC] = token
    return token


@pytest.fixture
def pool(manager, pool_contract):
    return Pool(manager)


@pytest.fixture
def result_pool(manager, pool_contract):
    return Pool(manager, return_results=True)
