"""Pytest configuration and fixtures."""

import io
from decimal import Decimal
from typing import Callable

import pytest

from securebank.console import ConsoleIO
from securebank.models import Account
from securebank.store import AccountRegistry


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def registry() -> AccountRegistry:
    """Create a fresh registry for each test."""
    return AccountRegistry()


@pytest.fixture
def alice(registry: AccountRegistry) -> Account:
    """Register alice with account 123, PIN 1111 and $100."""
    return registry.create_account("alice", "123", "1111", Decimal("100"))


@pytest.fixture
def make_console() -> Callable[[list[str]], ConsoleIO]:
    """Build a console that answers prompts from a script.

    Visible and masked prompts share one script. Running out of answers
    behaves like end of input.
    """

    def factory(answers: list[str]) -> ConsoleIO:
        remaining = list(answers)

        def read(prompt: str) -> str:
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        return ConsoleIO(input_func=read, secret_func=read, output=io.StringIO())

    return factory



@pytest.fixture(autouse=True)
def restore_logging():
    """Undo global logging changes (e.g. from setup_logging) after each test."""
    import logging

    root = logging.getLogger()
    saved_root = (root.level, root.handlers[:])
    saved_levels = {name: logging.getLogger(name).level for name in ("securebank", "faker")}
    yield
    root.setLevel(saved_root[0])
    root.handlers[:] = saved_root[1]
    for name, level in saved_levels.items():
        logging.getLogger(name).setLevel(level)
