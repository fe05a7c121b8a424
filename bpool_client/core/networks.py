"""Network name -> deployment endpoints lookup"""

from __future__ import annotations

import json
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Union

from .config import Config
from .exceptions import ConfigError


@dataclass(frozen=True)
class NetworkConfig:
    """
    Deployment endpoints for one network.

    A network missing from the table resolves to a record where every
    field except `network` is None; callers detect missing configuration
    by inspecting the fields.
    """

    network: str
    url: Optional[str] = None
    factory_address: Optional[str] = None
    ocean_token_address: Optional[str] = None
    metadata_store_uri: Optional[str] = None
    provider_uri: Optional[str] = None
    gas_fee_multiplier: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Mapping) -> "NetworkConfig":
        """Build from a table entry, accepting camelCase or snake_case keys"""
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in data.items():
            name = _KEY_ALIASES.get(key, key)
            if name not in known:
                raise ConfigError(f"Unknown network config field: {key}")
            kwargs[name] = value
        if not kwargs.get("network"):
            raise ConfigError(f"Network config entry without a network name: {dict(data)}")
        return cls(**kwargs)

    def to_dict(self) -> dict:
        return asdict(self)


_KEY_ALIASES = {
    "factoryAddress": "factory_address",
    "oceanTokenAddress": "ocean_token_address",
    "metadataStoreUri": "metadata_store_uri",
    "providerUri": "provider_uri",
    "gasFeeMultiplier": "gas_fee_multiplier",
}

TableLike = Union[Mapping[str, Mapping], Iterable[Mapping]]


class NetworkConfigResolver:
    """Resolve a network name to its NetworkConfig"""

    PACKAGE_NETWORKS = Path(__file__).parent.parent / "networks.json"

    def __init__(self, table: Optional[TableLike] = None, path=None):
        """
        Args:
            table: Network records, either a list of records or a
                   name -> record mapping. Replaces the packaged table.
            path: JSON file with network records. Replaces the packaged table.

        With neither argument, the packaged table is loaded and then
        overridden per network by `networks.json` in the user config dir.
        """
        if table is not None:
            self._configs = self._parse(table)
        elif path is not None:
            self._configs = self._parse(self._read(Path(path)))
        else:
            self._configs = self._parse(self._read(self.PACKAGE_NETWORKS))
            config_dir = Config.find_config_dir()
            if config_dir:
                user_file = config_dir / "networks.json"
                if user_file.exists():
                    self._configs.update(self._parse(self._read(user_file)))

    @staticmethod
    def _read(path: Path):
        if not path.exists():
            raise ConfigError(f"Network table not found: {path}")
        try:
            with open(path) as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Malformed network table {path}: {e}")

    @staticmethod
    def _parse(table: TableLike) -> Dict[str, NetworkConfig]:
        if isinstance(table, Mapping):
            entries = []
            for name, record in table.items():
                entry = dict(record)
                entry.setdefault("network", name)
                entries.append(entry)
        elif isinstance(table, (list, tuple)):
            entries = table
        else:
            raise ConfigError(f"Network table must be a list or mapping, got {type(table).__name__}")

        configs = {}
        for entry in entries:
            if not isinstance(entry, Mapping):
                raise ConfigError(f"Network config entry must be a mapping: {entry!r}")
            config = NetworkConfig.from_dict(entry)
            configs[config.network] = config
        return configs

    def networks(self) -> List[str]:
        """Known network names, in table order"""
        return list(self._configs)

    def get_config(self, network: str) -> NetworkConfig:
        """Exact-name lookup; unknown names echo the network with all else None"""
        config = self._configs.get(network)
        if config is None:
            return NetworkConfig(network=network)
        return config

    def default(self) -> NetworkConfig:
        """First network in the table"""
        if not self._configs:
            raise ConfigError("Network table is empty")
        return next(iter(self._configs.values()))


_default_resolver = None


def default_resolver() -> NetworkConfigResolver:
    global _default_resolver
    if _default_resolver is None:
        _default_resolver = NetworkConfigResolver()
    return _default_resolver


def get_config(network: str) -> NetworkConfig:
    """Resolve `network` with the default (packaged + user) table"""
    return default_resolver().get_config(network)
