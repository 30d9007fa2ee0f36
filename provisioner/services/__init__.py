"""Service layer exports."""

from .directory import UserDirectory
from .provisioner import AccountProvisioner, ProvisioningResult, ProvisioningState
from .secret_entry import SecretEntryPort
from .store import InMemoryKeyValueStore, KeyValueStore, SqlKeyValueStore
from .terminal import Terminal

__all__ = [
    "AccountProvisioner",
    "InMemoryKeyValueStore",
    "KeyValueStore",
    "ProvisioningResult",
    "ProvisioningState",
    "SecretEntryPort",
    "SqlKeyValueStore",
    "Terminal",
    "UserDirectory",
]
