"""
Employee Account Repository

Defines the contract for employee account storage together with the
in-memory implementation used for the lifetime of the process.
"""

import threading
from abc import ABC, abstractmethod
from uuid import UUID

from ..entities.employee_account import EmployeeAccount


class AccountRepository(ABC):
    """
    Abstract repository interface for EmployeeAccount entities.

    Accounts are keyed by their own id; saving an account whose id is
    already present replaces the stored account.
    """

    @abstractmethod
    def save(self, account: EmployeeAccount) -> EmployeeAccount:
        """
        Save an account to the repository.

        Args:
            account: Account entity to save

        Returns:
            Saved account entity
        """
        pass

    @abstractmethod
    def get_by_id(self, account_id: UUID) -> EmployeeAccount | None:
        """
        Retrieve an account by its ID.

        Args:
            account_id: Unique account identifier

        Returns:
            Account entity or None if not found
        """
        pass

    @abstractmethod
    def get_all(self) -> list[EmployeeAccount]:
        """
        Retrieve all accounts.

        Returns:
            New list of all account entities
        """
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of stored accounts."""
        pass


class InMemoryAccountRepository(AccountRepository):
    """Dictionary backed repository; contents live only as long as the process."""

    def __init__(self) -> None:
        self._accounts: dict[UUID, EmployeeAccount] = {}
        self._lock = threading.RLock()

    def save(self, account: EmployeeAccount) -> EmployeeAccount:
        with self._lock:
            self._accounts[account.id] = account
        return account

    def get_by_id(self, account_id: UUID) -> EmployeeAccount | None:
        with self._lock:
            return self._accounts.get(account_id)

    def get_all(self) -> list[EmployeeAccount]:
        with self._lock:
            return list(self._accounts.values())

    def count(self) -> int:
        with self._lock:
            return len(self._accounts)
