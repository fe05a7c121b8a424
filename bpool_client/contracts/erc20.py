"""ERC20 token contract wrapper"""

import logging

from ..core.config import Config
from ..utils.units import to_base_units, from_base_units

logger = logging.getLogger(__name__)


class ERC20:
    """Wrapper for the ERC20 calls the pool client needs"""

    def __init__(self, manager, address):
        """
        Args:
            manager: Web3Manager instance
            address: Token contract address
        """
        self.manager = manager
        self.address = manager.checksum(address)
        self.contract = manager.get_contract(address, "erc20")

    @property
    def decimals(self):
        """Token decimals, queried on every access; 18 when the call fails"""
        try:
            return int(self.contract.functions.decimals().call())
        except Exception as e:
            logger.error(
                "ERROR: Failed to call decimals() on %s, using %d: %s",
                self.address, Config.DEFAULT_DECIMALS, e,
            )
            return Config.DEFAULT_DECIMALS

    def to_wei(self, amount):
        """Convert human amount to base units"""
        return to_base_units(amount, self.decimals)

    def from_wei(self, amount):
        """Convert base units to human amount string"""
        return from_base_units(amount, self.decimals)


def amount_to_units(manager, token, amount):
    """Human amount of `token` -> base units using the token's decimals"""
    return ERC20(manager, token).to_wei(amount)


def units_to_amount(manager, token, units):
    """Base units of `token` -> human amount string using the token's decimals"""
    return ERC20(manager, token).from_wei(units)
