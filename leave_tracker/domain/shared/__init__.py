"""Shared domain building blocks."""

from .base import AggregateRoot, DomainEvent, Entity, ValueObject
from .exceptions import (
    DomainError,
    EmployeeNotFoundError,
    ErrorType,
    InvalidArgumentError,
    InvalidLeaveDateError,
    LeaveLimitExceededError,
    LeaveRuleError,
    NotFoundError,
)

__all__ = [
    # Base classes
    "AggregateRoot",
    "DomainEvent",
    "Entity",
    "ValueObject",
    # Errors
    "DomainError",
    "ErrorType",
    "InvalidArgumentError",
    "NotFoundError",
    "EmployeeNotFoundError",
    "LeaveRuleError",
    "LeaveLimitExceededError",
    "InvalidLeaveDateError",
]
