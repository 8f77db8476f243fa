"""Domain models for the banking simulator."""

from securebank.models.account import Account
from securebank.models.enums import MainMenuChoice, SessionMenuChoice

__all__ = ["Account", "MainMenuChoice", "SessionMenuChoice"]
