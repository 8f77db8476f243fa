"""In-memory account registry."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterator

from securebank.exceptions import (
    AccountNotFoundError,
    DuplicateAccountError,
    InvalidAmountError,
)
from securebank.logging import get_logger, log_fields
from securebank.models import Account

logger = get_logger(__name__)


@dataclass
class AccountRegistry:
    """Ordered in-memory collection of accounts.

    Lookups scan in creation order and return the first match, so when
    duplicate account numbers are allowed the oldest account wins.

    Parameters
    ----------
    unique_account_numbers : bool
        Reject a new account whose number is already registered.
    """

    unique_account_numbers: bool = False
    accounts: list[Account] = field(default_factory=list)

    def create_account(
        self,
        username: str,
        account_number: str,
        pin: str,
        initial_balance: Decimal,
    ) -> Account:
        """Create an account and append it to the registry.

        Raises
        ------
        InvalidAmountError
            If ``initial_balance`` is negative.
        DuplicateAccountError
            If uniqueness is enforced and ``account_number`` exists.
        """
        if initial_balance < 0:
            raise InvalidAmountError(
                f"Initial balance cannot be negative, got {initial_balance}"
            )
        if self.unique_account_numbers and account_number in self:
            raise DuplicateAccountError(f"Account {account_number} already exists")

        account = Account(
            username=username,
            account_number=account_number,
            pin=pin,
            balance=initial_balance,
        )
        self.accounts.append(account)
        logger.info(
            "Created account %s (%d in registry)",
            account_number,
            len(self),
            extra=log_fields(account_number=account_number, registry_size=len(self)),
        )
        return account

    def find_index(self, account_number: str) -> int | None:
        """Return the position of the first matching account, or None."""
        for position, account in enumerate(self.accounts):
            if account.account_number == account_number:
                return position
        return None

    def find(self, account_number: str) -> Account | None:
        """Return the first account with ``account_number``, or None."""
        position = self.find_index(account_number)
        if position is None:
            return None
        return self.accounts[position]

    def remove_at(self, position: int) -> Account:
        """Remove and return the account at ``position``."""
        account = self.accounts.pop(position)
        logger.info(
            "Removed account %s (%d in registry)",
            account.account_number,
            len(self),
            extra=log_fields(account_number=account.account_number, registry_size=len(self)),
        )
        return account

    def remove(self, account_number: str, account: Account | None = None) -> Account:
        """Remove and return an account with ``account_number``.

        Without ``account`` the first match is removed. With ``account``
        only that exact record is removed, even if an earlier record shares
        its number.

        Raises
        ------
        AccountNotFoundError
            If no record matches.
        """
        for position, candidate in enumerate(self.accounts):
            if candidate.account_number != account_number:
                continue
            if account is None or candidate is account:
                return self.remove_at(position)
        raise AccountNotFoundError(f"Account {account_number} not found")

    def __len__(self) -> int:
        return len(self.accounts)

    def __iter__(self) -> Iterator[Account]:
        return iter(self.accounts)

    def __contains__(self, account_number: object) -> bool:
        return any(a.account_number == account_number for a in self.accounts)

    def summary(self) -> dict[str, int | str]:
        """Return counts and totals for logging."""
        return {
            "accounts": len(self.accounts),
            "distinct_account_numbers": len({a.account_number for a in self.accounts}),
            "total_balance": str(sum((a.balance for a in self.accounts), Decimal("0"))),
        }
