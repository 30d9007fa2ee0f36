"""Exceptions raised while provisioning administrator accounts."""

from __future__ import annotations


class ProvisioningError(Exception):
    """Base exception for every provisioning failure."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(ProvisioningError):
    """Raised when interactively collected input is malformed."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class MismatchError(ProvisioningError):
    """Raised when a secret and its confirmation differ."""

    def __init__(self) -> None:
        super().__init__("Passwords do not match! Please try again.")


class DuplicateAccountError(ProvisioningError):
    """Raised when the username or email already belongs to an account."""

    def __init__(self, field: str, value: str) -> None:
        super().__init__(f"An account with {field} {value!r} already exists")
        self.field = field
        self.value = value


class HashingError(ProvisioningError):
    """Raised when the password hashing backend rejects its input."""


class PersistenceError(ProvisioningError):
    """Raised when the user store cannot be read or written."""

    def __init__(self, operation: str, key: str, reason: str) -> None:
        super().__init__(f"Store {operation} failed for '{key}': {reason}")
        self.operation = operation
        self.key = key
        self.reason = reason
