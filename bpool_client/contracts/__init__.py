"""Contract wrappers"""

from .erc20 import ERC20, amount_to_units, units_to_amount

__all__ = ["ERC20", "amount_to_units", "units_to_amount"]
