"""
LeaveDirectory Domain Service

Registry of employee accounts. Looks accounts up by id, routes leave
applications to the owning account and reports accounts running low on leave.
"""

from uuid import UUID

from ....core.config import settings
from ....core.observability import get_logger
from ...shared.exceptions import (
    EmployeeNotFoundError,
    InvalidArgumentError,
    LeaveRuleError,
)
from ...shared.validation import BusinessRuleValidators
from ..entities.employee_account import EmployeeAccount
from ..repositories.account_repository import (
    AccountRepository,
    InMemoryAccountRepository,
)
from ..value_objects.leave_record import LeaveRecord

logger = get_logger(__name__)


def _coerce_account_id(account_id: UUID | str) -> UUID | None:
    if isinstance(account_id, UUID):
        return account_id
    try:
        return UUID(str(account_id))
    except ValueError:
        return None


class LeaveDirectory:
    """
    Domain service holding every registered employee account.

    The directory never changes account state itself; leave applications are
    forwarded to the account, which enforces the balance and overlap rules.
    """

    def __init__(self, repository: AccountRepository | None = None) -> None:
        self._repository = repository or InMemoryAccountRepository()

    def register(self, account: EmployeeAccount) -> EmployeeAccount:
        """
        Register an account, replacing any account stored under the same id.

        Raises:
            InvalidArgumentError: If account is None or not an EmployeeAccount
        """
        if account is None:
            raise InvalidArgumentError(
                "account", account, "Employee cannot be null", "REQUIRED_FIELD"
            )
        if not isinstance(account, EmployeeAccount):
            raise InvalidArgumentError(
                "account", account, "must be an EmployeeAccount", "INVALID_TYPE"
            )

        self._repository.save(account)
        logger.info(
            "employee_registered",
            account_id=str(account.id),
            employee_name=account.name,
            total_allotment=account.total_allotment,
        )
        return account

    def find_by_id(self, account_id: UUID | str) -> EmployeeAccount | None:
        """Find an account by id; string ids are accepted in their UUID form."""
        key = _coerce_account_id(account_id)
        if key is None:
            return None
        return self._repository.get_by_id(key)

    def get_account(self, account_id: UUID | str) -> EmployeeAccount:
        """
        Get an account by id.

        Raises:
            EmployeeNotFoundError: If no account is registered under the id
        """
        account = self.find_by_id(account_id)
        if account is None:
            raise EmployeeNotFoundError(account_id)
        return account

    def apply_leave(self, account_id: UUID | str, record: LeaveRecord) -> None:
        """
        Apply leave for a specific employee.

        Args:
            account_id: Id of the employee account
            record: Leave to apply for

        Raises:
            EmployeeNotFoundError: If the account does not exist
            LeaveLimitExceededError: If the leave exceeds the remaining balance
            InvalidLeaveDateError: If the leave overlaps an accepted record
        """
        account = self.get_account(account_id)

        try:
            account.apply(record)
        except LeaveRuleError as e:
            logger.warning(
                "leave_rejected",
                account_id=str(account.id),
                employee_name=account.name,
                reason=e.message,
                **e.details,
            )
            raise

        logger.info(
            "leave_applied",
            account_id=str(account.id),
            employee_name=account.name,
            category=record.category.value,
            leave_range=record.describe_range(),
            duration_days=record.duration_days,
            remaining_days=account.remaining_days,
        )

    def accounts_below_threshold(self, threshold: int | None = None) -> list[EmployeeAccount]:
        """
        Get accounts whose remaining balance is strictly below a threshold.

        Args:
            threshold: Balance threshold; defaults to the configured
                LOW_BALANCE_THRESHOLD

        Returns:
            Matching accounts in no particular order

        Raises:
            InvalidArgumentError: If threshold is negative
        """
        if threshold is None:
            threshold = settings.LOW_BALANCE_THRESHOLD
        BusinessRuleValidators.validate_range("threshold", threshold, 0, None)

        return [
            account
            for account in self._repository.get_all()
            if account.remaining_days < threshold
        ]

    def all_accounts(self) -> list[EmployeeAccount]:
        """All registered accounts as a new list."""
        return self._repository.get_all()

    def __len__(self) -> int:
        return self._repository.count()

    def __contains__(self, account_id: object) -> bool:
        if not isinstance(account_id, (UUID, str)):
            return False
        return self.find_by_id(account_id) is not None
