"""Terminal input/output for the interaction loops."""

import getpass
import sys
from decimal import Decimal
from typing import Callable, TextIO


class ConsoleIO:
    """Line-oriented prompts on a text stream.

    The input callables are injectable so the loops can be driven by a
    script of answers in tests.
    """

    def __init__(
        self,
        input_func: Callable[[str], str] | None = None,
        secret_func: Callable[[str], str] | None = None,
        output: TextIO | None = None,
        currency_symbol: str = "$",
    ) -> None:
        """Initialize console I/O.

        Parameters
        ----------
        input_func : Callable[[str], str] | None
            Reads a visible answer after writing a prompt (default ``input``).
        secret_func : Callable[[str], str] | None
            Reads a masked answer such as a PIN (default ``getpass.getpass``).
        output : TextIO | None
            Stream for messages (default ``sys.stdout``).
        currency_symbol : str
            Prefix for rendered amounts.
        """
        self._input = input_func or input
        self._secret = secret_func or getpass.getpass
        self.output = output or sys.stdout
        self.currency_symbol = currency_symbol

    def show(self, message: str = "") -> None:
        print(message, file=self.output)

    def show_menu(self, title: str, options: list[str]) -> None:
        """Print a numbered menu under a blank line and a title."""
        self.show(f"\n{title}")
        for number, label in enumerate(options, start=1):
            self.show(f"{number}. {label}")

    def prompt(self, text: str) -> str:
        return self._input(text)

    def prompt_secret(self, text: str) -> str:
        return self._secret(text)

    def money(self, amount: Decimal) -> str:
        """Render ``amount`` with the currency symbol and two decimals."""
        return f"{self.currency_symbol}{amount:,.2f}"
