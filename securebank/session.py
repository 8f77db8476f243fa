"""Login and the operations bound to an authenticated account."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Callable

from securebank.exceptions import AccountNotFoundError, InvalidPinError, SessionClosedError
from securebank.logging import get_logger, log_fields
from securebank.models import Account
from securebank.store import AccountRegistry

logger = get_logger(__name__)


@dataclass
class Session:
    """An authenticated account bound to the registry it came from.

    ``position`` records where the account sat in the registry at login.
    Logout removes this session's own record by account number, so the
    position is informational.
    """

    registry: AccountRegistry
    account: Account
    position: int
    active: bool = True

    def _require_active(self) -> None:
        if not self.active:
            raise SessionClosedError(
                f"Session for account {self.account.account_number} is logged out"
            )

    def deposit(self, amount: Decimal) -> Decimal:
        """Deposit ``amount`` and return the new balance."""
        self._require_active()
        self.account.deposit(amount)
        logger.info(
            "Deposit to account %s",
            self.account.account_number,
            extra=log_fields(account_number=self.account.account_number, amount=amount),
        )
        return self.account.check_balance()

    def withdraw(self, amount: Decimal) -> Decimal:
        """Withdraw ``amount`` and return the new balance."""
        self._require_active()
        self.account.withdraw(amount)
        logger.info(
            "Withdrawal from account %s",
            self.account.account_number,
            extra=log_fields(account_number=self.account.account_number, amount=amount),
        )
        return self.account.check_balance()

    def check_balance(self) -> Decimal:
        self._require_active()
        return self.account.check_balance()

    def logout(self) -> Account:
        """End the session and remove its account from the registry."""
        self._require_active()
        removed = self.registry.remove(self.account.account_number, account=self.account)
        self.active = False
        logger.info(
            "Logged out of account %s",
            self.account.account_number,
            extra=log_fields(account_number=self.account.account_number),
        )
        return removed


def login(
    registry: AccountRegistry,
    account_number: str,
    pin: str | Callable[[], str],
) -> Session:
    """Authenticate against the first account matching ``account_number``.

    Parameters
    ----------
    registry : AccountRegistry
        Registry to search.
    account_number : str
        Account number to look up.
    pin : str | Callable[[], str]
        The PIN, or a callable that reads it. A callable is only invoked
        once the account has been found.

    Raises
    ------
    AccountNotFoundError
        If no account has ``account_number``.
    InvalidPinError
        If the account exists but the PIN does not match.
    """
    position = registry.find_index(account_number)
    if position is None:
        logger.warning(
            "Login failed: account %s not found",
            account_number,
            extra=log_fields(account_number=account_number, reason="not_found"),
        )
        raise AccountNotFoundError(f"Account {account_number} not found")

    account = registry.accounts[position]
    supplied = pin() if callable(pin) else pin
    if not account.verify_pin(supplied):
        logger.warning(
            "Login failed: incorrect PIN for account %s",
            account_number,
            extra=log_fields(account_number=account_number, reason="invalid_pin"),
        )
        raise InvalidPinError(f"Incorrect PIN for account {account_number}")

    logger.info(
        "Logged in to account %s",
        account_number,
        extra=log_fields(account_number=account_number, position=position),
    )
    return Session(registry=registry, account=account, position=position)
