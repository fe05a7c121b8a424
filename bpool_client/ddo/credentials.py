"""Access credentials carried by an asset's DDO"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

CREDENTIAL_ACTIONS = ("allow", "deny")


class CredentialType(str, Enum):
    address = "address"
    credential3Box = "credential3Box"


@dataclass
class Credential:
    type: CredentialType
    values: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data) -> "Credential":
        return cls(type=CredentialType(data["type"]), values=list(data.get("values", [])))

    def to_dict(self) -> dict:
        return {"type": self.type.value, "values": list(self.values)}


@dataclass
class Credentials:
    """Allow and deny lists; either may be absent"""

    allow: Optional[List[Credential]] = None
    deny: Optional[List[Credential]] = None

    @classmethod
    def from_dict(cls, data) -> "Credentials":
        kwargs = {}
        for action in CREDENTIAL_ACTIONS:
            if data.get(action) is not None:
                kwargs[action] = [Credential.from_dict(c) for c in data[action]]
        return cls(**kwargs)

    def to_dict(self) -> dict:
        out = {}
        for action in CREDENTIAL_ACTIONS:
            entries = getattr(self, action)
            if entries is not None:
                out[action] = [c.to_dict() for c in entries]
        return out

    def values_for(self, action, credential_type=CredentialType.address) -> List[str]:
        """All values listed under `action` ("allow" or "deny") for one credential type"""
        if action not in CREDENTIAL_ACTIONS:
            raise ValueError(f"Unknown credential action: {action}")
        entries = getattr(self, action) or []
        return [v for c in entries if c.type == credential_type for v in c.values]
