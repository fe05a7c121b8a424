"""Command-line interface"""

import json

import pytest
from web3 import Web3

from bpool_client.cli.main import main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("NETWORK", raising=False)
    monkeypatch.delenv("RPC_URL", raising=False)


def run(capsys, *argv):
    main(list(argv))
    return json.loads(capsys.readouterr().out)


def test_network(capsys):
    record = run(capsys, "network", "rinkeby")

    assert record["network"] == "rinkeby"
    assert record["factory_address"] == "0xcDfEe5D80041224cDCe9AE2334E85B3236385EA3"


def test_unknown_network(capsys):
    record = run(capsys, "network", "nowhere")

    assert record["network"] == "nowhere"
    assert record["url"] is None


def test_networks(capsys):
    names = run(capsys, "networks")

    assert names[:4] == ["development", "pacific", "rinkeby", "mainnet"]


def test_events(capsys):
    topics = run(capsys, "--network", "development", "pool", "events")

    assert topics["LOG_JOIN"] == Web3.to_hex(Web3.keccak(text="LOG_JOIN(address,address,uint256,uint256)"))
    assert set(topics) == {"LOG_SWAP", "LOG_JOIN", "LOG_EXIT"}


def test_no_command_exits():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 1


def test_pool_without_subcommand_exits():
    with pytest.raises(SystemExit) as excinfo:
        main(["pool"])
    assert excinfo.value.code == 1
