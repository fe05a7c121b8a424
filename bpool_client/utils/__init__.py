"""Unit conversion, gas and transaction helpers"""

from .units import to_base_units, from_base_units, format_amount
from .gas import GasConfig, GasManager
from .transactions import TransactionBuilder

__all__ = [
    "to_base_units",
    "from_base_units",
    "format_amount",
    "GasConfig",
    "GasManager",
    "TransactionBuilder",
]
