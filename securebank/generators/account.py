"""Demo account generator."""

import random
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterator

from securebank.generators.base import BaseGenerator
from securebank.logging import get_logger
from securebank.models import Account
from securebank.store import AccountRegistry

logger = get_logger(__name__)


@dataclass
class DemoCredentials:
    """Login details of a generated account, shown once at start-up."""

    username: str
    account_number: str
    pin: str
    balance: Decimal


class DemoAccountGenerator(BaseGenerator):
    """Generate demo accounts to pre-populate a registry.

    Account numbers are 8 digits and unique within one generator.
    PINs are 4 digits. Opening balances range from 50 to 5 000.
    """

    ACCOUNT_NUMBER_FORMAT = "########"
    PIN_FORMAT = "####"
    BALANCE_RANGE = (50, 5000)

    def generate(self) -> DemoCredentials:
        """Generate credentials for a single account.

        Returns
        -------
        DemoCredentials
            Generated username, account number, PIN and opening balance.
        """
        low, high = self.BALANCE_RANGE
        balance = Decimal(str(round(random.uniform(low, high), 2)))
        return DemoCredentials(
            username=self.fake.user_name(),
            account_number=self.fake.unique.numerify(self.ACCOUNT_NUMBER_FORMAT),
            pin=self.fake.numerify(self.PIN_FORMAT),
            balance=balance.quantize(Decimal("0.01")),
        )

    def generate_batch(self, count: int) -> Iterator[DemoCredentials]:
        """Generate credentials for ``count`` accounts."""
        for _ in range(count):
            yield self.generate()

    def populate(self, registry: AccountRegistry, count: int) -> list[Account]:
        """Create ``count`` generated accounts in ``registry``.

        Numbers already present in the registry are skipped and regenerated.
        """
        created: list[Account] = []
        while len(created) < count:
            for creds in self.generate_batch(count - len(created)):
                if creds.account_number in registry:
                    continue
                created.append(
                    registry.create_account(
                        creds.username, creds.account_number, creds.pin, creds.balance
                    )
                )
        logger.info("Generated %d demo accounts", len(created))
        return created
