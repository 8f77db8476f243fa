"""Menu options for the interaction loops."""

from enum import Enum


class MainMenuChoice(str, Enum):
    CREATE_ACCOUNT = "1"
    LOGIN = "2"
    EXIT = "3"


class SessionMenuChoice(str, Enum):
    DEPOSIT = "1"
    WITHDRAW = "2"
    CHECK_BALANCE = "3"
    LOGOUT = "4"
