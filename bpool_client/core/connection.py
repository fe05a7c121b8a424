"""Web3 connection management"""

import os
from web3 import Web3
from dotenv import load_dotenv
from .config import Config
from .exceptions import ConnectionError, ConfigError
from .networks import default_resolver
from ..utils.units import to_base_units, from_base_units


class Web3Manager:
    """Manages Web3 connection and account"""

    def __init__(self, w3=None, network=None, require_signer=False, check_connection=True):
        """
        Initialize Web3 connection.

        Args:
            w3: Existing Web3 instance to wrap (built from RPC_URL or the
                network's url if None)
            network: Network name or NetworkConfig (NETWORK env var, then
                the first configured network if None)
            require_signer: If True, loads private key for signing transactions
            check_connection: If True, fail fast when the node is unreachable
        """
        load_dotenv()
        load_dotenv("wallet.env")

        self.config = Config()
        if network is None or isinstance(network, str):
            resolver = default_resolver()
            name = network or os.getenv("NETWORK")
            self.network_config = resolver.get_config(name) if name else resolver.default()
        else:
            self.network_config = network

        if w3 is not None:
            self.w3 = w3
        else:
            self._setup_web3(check_connection)

        self.account = None
        if require_signer:
            self._setup_account()

    def _setup_web3(self, check_connection):
        """Connect to RPC_URL, falling back to the network record url"""
        rpc_url = os.getenv("RPC_URL") or self.network_config.url
        if not rpc_url:
            raise ConfigError(
                f"No RPC URL: set RPC_URL or configure a url for network '{self.network_config.network}'"
            )

        self.w3 = Web3(Web3.HTTPProvider(rpc_url))

        if check_connection and not self.w3.is_connected():
            raise ConnectionError(f"Failed to connect to {rpc_url}")

    def _setup_account(self):
        """Load the local signing account from PRIVATE_KEY"""
        private_key = os.getenv("PRIVATE_KEY")
        if not private_key:
            raise ConfigError("require_signer set but PRIVATE_KEY is not configured (.env or wallet.env)")

        self.account = self.w3.eth.account.from_key(private_key)

    @property
    def address(self):
        """Default sender: the signing account, else PUBLIC_KEY, else None"""
        if self.account is not None:
            return self.account.address
        return os.getenv("PUBLIC_KEY") or None

    @property
    def chain_id(self):
        """Chain id reported by the node"""
        return self.w3.eth.chain_id

    def get_nonce(self, address=None):
        """Next nonce for `address` (the default sender if None)"""
        sender = address or self.address
        if not sender:
            raise ConfigError("No sender address: pass one or set PRIVATE_KEY / PUBLIC_KEY")
        return self.w3.eth.get_transaction_count(sender)

    def get_gas_price(self):
        """Node gas price in wei, before any multiplier"""
        return self.w3.eth.gas_price

    def get_contract(self, address, abi):
        """
        Create contract instance.

        Args:
            address: Contract address
            abi: ABI name in the packaged abis.json, or an ABI list
        """
        if isinstance(abi, str):
            abi = self.config.get_abi(abi)
        return self.w3.eth.contract(
            address=Web3.to_checksum_address(address),
            abi=abi
        )

    def checksum(self, address):
        """EIP-55 checksum form of `address`"""
        return Web3.to_checksum_address(address)

    def to_wei(self, amount, decimals=18):
        """Human amount -> integer base units"""
        return to_base_units(amount, decimals)

    def from_wei(self, amount_wei, decimals=18):
        """Integer base units -> human amount string"""
        return from_base_units(amount_wei, decimals)

    def encode_event_signature(self, event_abi):
        """Log topic (0x-prefixed keccak of the canonical signature) for an event ABI entry"""
        types = ",".join(_canonical_type(arg) for arg in event_abi.get("inputs", []))
        signature = f"{event_abi['name']}({types})"
        return Web3.to_hex(Web3.keccak(text=signature))


def _canonical_type(arg):
    """ABI type string, expanding tuples to their component types"""
    abi_type = arg["type"]
    if abi_type.startswith("tuple"):
        inner = ",".join(_canonical_type(c) for c in arg.get("components", []))
        return f"({inner}){abi_type[len('tuple'):]}"
    return abi_type
