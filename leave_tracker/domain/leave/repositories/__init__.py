"""Repository interfaces and implementations for the leave domain."""

from .account_repository import AccountRepository, InMemoryAccountRepository

__all__ = [
    "AccountRepository",
    "InMemoryAccountRepository",
]
