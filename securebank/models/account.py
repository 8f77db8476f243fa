"""Account model for the banking simulator."""

import operator
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, Inexact, localcontext
from typing import Callable

from securebank.exceptions import InsufficientBalanceError, InvalidAmountError


def _exact(
    op: Callable[[Decimal, Decimal], Decimal], balance: Decimal, amount: Decimal
) -> Decimal:
    """Apply ``op`` to the balance, refusing any result that would be rounded."""
    with localcontext() as ctx:
        ctx.traps[Inexact] = True
        try:
            return op(balance, amount)
        except Inexact:
            raise InvalidAmountError(
                f"Balance {balance} with change {amount} exceeds decimal precision"
            ) from None


@dataclass
class Account:
    """Bank account held in memory for the lifetime of the process.

    ``username``, ``account_number`` and ``pin`` are fixed at creation.
    ``balance`` changes only through :meth:`deposit` and :meth:`withdraw`.
    The PIN is plain text and is kept out of ``repr`` so it does not end up
    in log output.
    """

    username: str
    account_number: str
    pin: str = field(repr=False)
    balance: Decimal = Decimal("0.00")
    created_at: datetime = field(default_factory=datetime.now)

    def deposit(self, amount: Decimal) -> None:
        """Add ``amount`` to the balance.

        Raises
        ------
        InvalidAmountError
            If ``amount`` is zero or negative, or the new balance
            cannot be represented exactly.
        """
        if amount <= 0:
            raise InvalidAmountError(f"Deposit amount must be positive, got {amount}")
        self.balance = _exact(operator.add, self.balance, amount)

    def withdraw(self, amount: Decimal) -> None:
        """Subtract ``amount`` from the balance.

        Withdrawing the full balance is allowed and leaves it at zero.

        Raises
        ------
        InvalidAmountError
            If ``amount`` is zero or negative, or the new balance
            cannot be represented exactly.
        InsufficientBalanceError
            If ``amount`` exceeds the balance. The balance is left unchanged.
        """
        if amount <= 0:
            raise InvalidAmountError(f"Withdrawal amount must be positive, got {amount}")
        if amount > self.balance:
            raise InsufficientBalanceError(
                f"Cannot withdraw {amount} from account {self.account_number} "
                f"with balance {self.balance}"
            )
        self.balance = _exact(operator.sub, self.balance, amount)

    def check_balance(self) -> Decimal:
        """Return the current balance."""
        return self.balance

    def verify_pin(self, pin: str) -> bool:
        """Compare ``pin`` with the stored PIN."""
        return pin == self.pin
