"""DDO (asset description) types"""

from .credentials import Credential, Credentials, CredentialType

__all__ = ["Credential", "Credentials", "CredentialType"]
