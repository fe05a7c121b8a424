"""Configuration loading and management"""

import os
import json
from pathlib import Path
from .exceptions import ConfigError, AbiError


class Config:
    """Centralized configuration manager for shared settings"""

    _instance = None
    _abis = None

    # ABIs ship inside the package (not user-configurable)
    PACKAGE_ABIS = Path(__file__).parent.parent / "abis.json"

    # Constants
    BONE = 10 ** 18
    MAX_UINT256 = 2 ** 256 - 1
    # Sentinel sent as maxPrice when the caller sets no price limit
    MAX_PRICE = MAX_UINT256 - 1
    GASLIMIT_DEFAULT = 1000000
    DEFAULT_DECIMALS = 18

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if Config._abis is None:
            self._load()

    @staticmethod
    def find_config_dir():
        """Find user config directory, or None when there is none"""
        env_path = os.getenv("BPOOL_CONFIG_DIR")
        if env_path:
            path = Path(env_path)
            if path.exists():
                return path

        locations = [
            Path.cwd() / "config",
            Path.home() / ".bpool-client" / "config",
        ]

        for path in locations:
            if path.exists():
                return path

        return None

    def _load(self):
        """Load packaged ABIs"""
        if not self.PACKAGE_ABIS.exists():
            raise ConfigError(f"Shared ABIs not found: {self.PACKAGE_ABIS}")
        with open(self.PACKAGE_ABIS) as f:
            Config._abis = json.load(f)

    def get_abi(self, name):
        """Get ABI by name ("bpool", "erc20")"""
        if name in Config._abis:
            return Config._abis[name]
        raise ConfigError(f"ABI not found: {name}")

    @staticmethod
    def find_event(abi, name):
        """Return the event entry called `name` from an ABI list"""
        for entry in abi:
            if entry.get("type") == "event" and entry.get("name") == name:
                return entry
        raise AbiError(f"Event not found in ABI: {name}")
