"""Administrator provisioning workflow.

A run moves through four steps: collect inputs, check uniqueness, persist
and report. Each run ends in exactly one terminal state and never retries.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from provisioner.core.errors import (
    DuplicateAccountError,
    HashingError,
    PersistenceError,
    ProvisioningError,
    ValidationError,
)
from provisioner.core.security import CredentialPolicy
from provisioner.models.account import Account
from provisioner.services.directory import UserDirectory
from provisioner.services.secret_entry import SecretEntryPort
from provisioner.services.terminal import Terminal

logger = logging.getLogger(__name__)

BANNER_LINES = (
    "Create a new *admin* user for the panel:",
    "You can make regular users from the admin -> users page.",
)


class ProvisioningState(str, Enum):
    """Terminal states of a provisioning run."""

    COMPLETED = "completed"
    FAILED_VALIDATION = "failed_validation"
    FAILED_DUPLICATE = "failed_duplicate"
    FAILED_PERSISTENCE = "failed_persistence"


@dataclass(frozen=True)
class ProvisioningRequest:
    """Raw inputs for one run."""

    username: str
    email: str
    password: str
    interactive: bool = False


@dataclass(frozen=True)
class ProvisioningResult:
    """Outcome of a provisioning run."""

    state: ProvisioningState
    account: Account | None = None
    error: ProvisioningError | None = None

    @property
    def succeeded(self) -> bool:
        return self.state is ProvisioningState.COMPLETED


class AccountProvisioner:
    """Orchestrates input collection, uniqueness checks, hashing and persistence."""

    def __init__(
        self,
        directory: UserDirectory,
        policy: CredentialPolicy,
        *,
        terminal: Terminal | None = None,
        secret_port: SecretEntryPort | None = None,
    ) -> None:
        self._directory = directory
        self._policy = policy
        self._terminal = terminal or Terminal()
        self._secret_port = secret_port or SecretEntryPort(self._terminal)

    def collect_inputs(
        self,
        username: str | None = None,
        email: str | None = None,
        password: str | None = None,
    ) -> ProvisioningRequest:
        """Use the supplied values when all three are present, otherwise prompt for everything.

        Only interactively entered emails are shape-checked; supplied values
        go straight to the uniqueness checks.
        """

        if username and email and password:
            return ProvisioningRequest(username=username, email=email, password=password)

        for line in BANNER_LINES:
            logger.info(line)

        username = self._terminal.read_line("Username: ")
        email = self._terminal.read_line("Email: ")

        if not username:
            raise ValidationError("username", "Username must not be empty!")
        if not self._policy.validate_email(email):
            raise ValidationError("email", "Invalid email!")

        password = self._secret_port.acquire()
        return ProvisioningRequest(username=username, email=email, password=password, interactive=True)

    def check_uniqueness(self, username: str, email: str) -> None:
        if self._directory.username_taken(username):
            raise DuplicateAccountError("username", username)
        if self._directory.email_taken(email):
            raise DuplicateAccountError("email", email)

    def persist(self, request: ProvisioningRequest) -> Account:
        """Hash the password and write a new admin account to the directory."""

        credential_hash = self._policy.hash(request.password)
        account = Account.new_admin(
            username=request.username,
            email=request.email,
            credential_hash=credential_hash,
        )
        self._directory.upsert_append(account)
        return account

    def provision(self, username: str, email: str, password: str) -> Account:
        """Create an admin account or raise the first ``ProvisioningError`` encountered."""

        self.check_uniqueness(username, email)
        return self.persist(ProvisioningRequest(username=username, email=email, password=password))

    def run(
        self,
        username: str | None = None,
        email: str | None = None,
        password: str | None = None,
    ) -> ProvisioningResult:
        """Execute one single-shot run and report its terminal state."""

        try:
            request = self.collect_inputs(username, email, password)
        except ValidationError as exc:
            logger.error(exc.message)
            return ProvisioningResult(ProvisioningState.FAILED_VALIDATION, error=exc)

        try:
            self.check_uniqueness(request.username, request.email)
        except DuplicateAccountError as exc:
            logger.error("User already exists!")
            logger.debug("Duplicate %s: %s", exc.field, exc.value)
            return ProvisioningResult(ProvisioningState.FAILED_DUPLICATE, error=exc)
        except PersistenceError as exc:
            logger.error("Error creating user: %s", exc)
            return ProvisioningResult(ProvisioningState.FAILED_PERSISTENCE, error=exc)

        try:
            account = self.persist(request)
        except (HashingError, PersistenceError) as exc:
            logger.error("Error creating user: %s", exc)
            return ProvisioningResult(ProvisioningState.FAILED_PERSISTENCE, error=exc)

        logger.info("Done! User created.")
        return ProvisioningResult(ProvisioningState.COMPLETED, account=account)
