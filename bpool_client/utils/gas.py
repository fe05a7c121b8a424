"""Gas estimation with fallback limits, and fair gas price"""

import json
import logging
from pathlib import Path

from ..core.config import Config

logger = logging.getLogger(__name__)


class GasConfig:
    """Load and manage gas configuration from JSON file"""

    # Every pool operation falls back to the same limit unless gas_config.json
    # names a limit for that operation.
    DEFAULT_GAS_LIMITS = {
        "default": Config.GASLIMIT_DEFAULT,
    }

    def __init__(self, config_path=None):
        """
        Load gas configuration from JSON file.

        Args:
            config_path: Path to gas_config.json (searches default locations if None)
        """
        self._config = self._load_config(config_path)

    def _load_config(self, config_path=None):
        """Load config from file or return defaults"""
        config_dir = Config.find_config_dir()
        search_paths = [
            config_path,
            config_dir / "gas_config.json" if config_dir else None,
            Path.cwd() / "gas_config.json",
        ]

        for path in search_paths:
            if path and Path(path).exists():
                with open(path) as f:
                    return json.load(f)

        return {
            "gasFeeMultiplier": None,
            "gasLimit": self.DEFAULT_GAS_LIMITS.copy(),
        }

    @property
    def gasFeeMultiplier(self):
        """Multiplier applied to the node's gas price (None = not set)"""
        return self._config.get("gasFeeMultiplier")

    def getGasLimit(self, operation_type):
        """
        Get fallback gas limit for operation type.

        Args:
            operation_type: Contract method name (e.g., "swapExactAmountIn")

        Returns:
            Gas limit in units
        """
        gas_limits = self._config.get("gasLimit", self.DEFAULT_GAS_LIMITS)
        return gas_limits.get(operation_type, gas_limits.get("default", Config.GASLIMIT_DEFAULT))


class GasManager:
    """Gas estimation and pricing for pool transactions"""

    def __init__(self, manager, config=None, network_config=None):
        """
        Args:
            manager: Web3Manager instance
            config: GasConfig instance (created if None)
            network_config: NetworkConfig whose gas_fee_multiplier applies
                (the manager's network if None)
        """
        self.manager = manager
        self.config = config or GasConfig()
        self.network_config = network_config

    def getGasLimit(self, operation_type=None):
        """Get fallback gas limit for operation type"""
        return self.config.getGasLimit(operation_type or "default")

    @property
    def gasFeeMultiplier(self):
        """Network setting first, then gas config, then 1.0"""
        network_config = self.network_config or getattr(self.manager, "network_config", None)
        network_multiplier = getattr(network_config, "gas_fee_multiplier", None)
        if network_multiplier is not None:
            return network_multiplier
        if self.config.gasFeeMultiplier is not None:
            return self.config.gasFeeMultiplier
        return 1.0

    def estimateGas(self, contract_func, from_address, operation_type=None):
        """
        Estimate gas for a contract function call.

        Never raises: any estimation failure returns the fallback limit.

        Args:
            contract_func: Contract function to estimate
            from_address: Address to estimate from
            operation_type: Type of operation for fallback

        Returns:
            Estimated gas amount
        """
        fallback = self.getGasLimit(operation_type)

        try:
            return contract_func.estimate_gas({"from": from_address})
        except Exception as e:
            logger.debug("Gas estimation for %s failed, using %d: %s", operation_type, fallback, e)
            return fallback

    def getFairGasPrice(self):
        """
        Node gas price scaled by the configured multiplier.

        Returns:
            Gas price in Wei
        """
        gas_price = self.manager.get_gas_price()
        multiplier = self.gasFeeMultiplier
        if multiplier == 1:
            return int(gas_price)
        return int(gas_price * multiplier)
