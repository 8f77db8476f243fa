"""Interactive menus and command-line entry point for SecureBank CLI."""

import argparse
import sys
from dataclasses import replace

from securebank import __version__
from securebank.config import LOG_FORMATS, LOG_LEVELS, SecureBankConfig
from securebank.console import ConsoleIO
from securebank.exceptions import (
    AccountNotFoundError,
    ConfigurationError,
    DuplicateAccountError,
    InsufficientBalanceError,
    InvalidAmountError,
    InvalidMenuChoiceError,
    InvalidPinError,
    MalformedAmountError,
)
from securebank.generators import DemoAccountGenerator
from securebank.logging import get_logger, setup_logging
from securebank.models import MainMenuChoice, SessionMenuChoice
from securebank.parsing import parse_amount, parse_menu_choice
from securebank.session import Session, login
from securebank.store import AccountRegistry

logger = get_logger(__name__)

MAIN_MENU = ["Create Account", "Login", "Exit"]
SESSION_MENU = ["Deposit", "Withdraw", "Check Balance", "Logout"]


class ATM:
    """Top-level menu loop and the transaction loop of a logged-in session.

    The ATM owns the registry; login and session operations receive it
    explicitly.
    """

    def __init__(self, registry: AccountRegistry, console: ConsoleIO) -> None:
        self.registry = registry
        self.console = console

    def run(self) -> int:
        """Show the main menu until the user exits. Returns the exit status."""
        try:
            while True:
                self.console.show_menu("🏦 Welcome to SecureBank CLI 🏦", MAIN_MENU)
                try:
                    choice = parse_menu_choice(
                        self.console.prompt("Enter your choice: "), MainMenuChoice
                    )
                except InvalidMenuChoiceError:
                    self.console.show("\n❗ Invalid choice. Please try again.")
                    continue

                if choice is MainMenuChoice.CREATE_ACCOUNT:
                    self.create_account()
                elif choice is MainMenuChoice.LOGIN:
                    session = self.login()
                    if session is not None:
                        self.run_session(session)
                else:
                    break
        except (EOFError, KeyboardInterrupt):
            logger.info("Input closed, exiting")

        self.console.show("\n👋 Thank you for using SecureBank CLI. Goodbye!")
        return 0

    def create_account(self) -> None:
        self.console.show("\nWelcome to SecureBank CLI - Create Account")
        username = self.console.prompt("Enter your username: ")
        account_number = self.console.prompt("Enter account number: ")
        pin = self.console.prompt_secret("Set your 4-digit PIN: ")
        raw_balance = self.console.prompt("Enter initial balance: $")

        try:
            initial_balance = parse_amount(raw_balance)
            self.registry.create_account(username, account_number, pin, initial_balance)
        except MalformedAmountError:
            self.console.show("\n❗ Invalid amount. Account was not created.")
            return
        except InvalidAmountError:
            self.console.show("\n❗ Initial balance cannot be negative. Account was not created.")
            return
        except DuplicateAccountError:
            self.console.show(
                f"\n❗ Account number {account_number} is already in use. "
                "Account was not created."
            )
            return

        self.console.show(
            f"\n🎉 Congratulations, {username}! "
            "Your account has been created successfully!"
        )

    def login(self) -> Session | None:
        """Prompt for credentials. Returns None when login fails."""
        self.console.show("\nWelcome to SecureBank CLI - Login")
        account_number = self.console.prompt("Enter account number: ")
        try:
            session = login(
                self.registry,
                account_number,
                lambda: self.console.prompt_secret("Enter PIN: "),
            )
        except AccountNotFoundError:
            self.console.show("\n🚫 Account not found. Please try again.")
            return None
        except InvalidPinError:
            self.console.show("\n🔒 Incorrect PIN. Please try again.")
            return None

        self.console.show(f"\n🔓 Login successful, {session.account.username}!")
        return session

    def run_session(self, session: Session) -> None:
        """Show the transaction menu until the session logs out."""
        while session.active:
            self.console.show_menu("SecureBank CLI - Main Menu", SESSION_MENU)
            try:
                choice = parse_menu_choice(
                    self.console.prompt("Enter your choice: "), SessionMenuChoice
                )
            except InvalidMenuChoiceError:
                self.console.show("\n❗ Invalid choice. Please try again.")
                continue

            if choice is SessionMenuChoice.DEPOSIT:
                self._deposit(session)
            elif choice is SessionMenuChoice.WITHDRAW:
                self._withdraw(session)
            elif choice is SessionMenuChoice.CHECK_BALANCE:
                balance = self.console.money(session.check_balance())
                self.console.show(f"\n💳 Current balance: {balance}")
            else:
                session.logout()
                self.console.show("\n👋 Logged out successfully.")

    def _deposit(self, session: Session) -> None:
        try:
            amount = parse_amount(self.console.prompt("Enter amount to deposit: $"))
            balance = session.deposit(amount)
        except MalformedAmountError:
            self.console.show("\n❗ Invalid amount. Please enter a number like 25.00.")
            return
        except InvalidAmountError:
            self.console.show("\n❗ Deposit amount must be greater than zero.")
            return
        self.console.show(
            f"\n💰 Deposit successful. Current balance: {self.console.money(balance)}"
        )

    def _withdraw(self, session: Session) -> None:
        try:
            amount = parse_amount(self.console.prompt("Enter amount to withdraw: $"))
            balance = session.withdraw(amount)
        except MalformedAmountError:
            self.console.show("\n❗ Invalid amount. Please enter a number like 25.00.")
            return
        except InvalidAmountError:
            self.console.show("\n❗ Withdrawal amount must be greater than zero.")
            return
        except InsufficientBalanceError:
            self.console.show("\n❌ Insufficient balance. Withdrawal failed.")
            return
        self.console.show(
            f"\n💸 Withdrawal successful. Current balance: {self.console.money(balance)}"
        )


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="securebank",
        description="In-memory interactive banking simulator",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Log level for stderr output (default: WARNING)",
    )
    parser.add_argument(
        "--log-format",
        choices=LOG_FORMATS,
        default=None,
        help="Log format (default: standard)",
    )
    parser.add_argument(
        "--demo-accounts",
        type=int,
        default=None,
        help="Number of generated accounts to start with (default: 0)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for demo accounts",
    )
    parser.add_argument(
        "--unique-account-numbers",
        action="store_true",
        default=None,
        help="Reject new accounts whose number is already registered",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def load_config(args: argparse.Namespace) -> SecureBankConfig:
    """Merge command-line flags over environment configuration."""
    overrides = {
        "log_level": args.log_level,
        "log_format": args.log_format,
        "demo_accounts": args.demo_accounts,
        "seed": args.seed,
        "unique_account_numbers": args.unique_account_numbers,
    }
    return replace(
        SecureBankConfig.from_env(),
        **{name: value for name, value in overrides.items() if value is not None},
    )


def seed_demo_accounts(
    registry: AccountRegistry, config: SecureBankConfig, console: ConsoleIO
) -> None:
    """Pre-populate the registry and print the generated credentials."""
    generator = DemoAccountGenerator(seed=config.seed)
    accounts = generator.populate(registry, config.demo_accounts)
    console.show("\nDemo accounts:")
    for account in accounts:
        console.show(
            f"  {account.username}: account {account.account_number}, "
            f"PIN {account.pin}, balance {console.money(account.balance)}"
        )


def main(argv: list[str] | None = None, console: ConsoleIO | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = load_config(args)
    except ConfigurationError as e:
        parser.error(str(e))

    setup_logging(level=config.log_level, format_type=config.log_format)

    console = console or ConsoleIO(currency_symbol=config.currency_symbol)
    registry = AccountRegistry(unique_account_numbers=config.unique_account_numbers)
    if config.demo_accounts:
        seed_demo_accounts(registry, config, console)

    logger.info("Starting SecureBank CLI %s", __version__)
    status = ATM(registry, console).run()
    logger.info("Registry at exit: %s", registry.summary())
    return status


if __name__ == "__main__":
    sys.exit(main())
