"""Custom exception hierarchy for securebank."""


class SecureBankError(Exception):
    """Base exception for all securebank errors."""


class AccountNotFoundError(SecureBankError):
    """Raised when no account matches the given account number."""


class DuplicateAccountError(SecureBankError):
    """Raised when an account number is already registered."""


class InvalidPinError(SecureBankError):
    """Raised when the supplied PIN does not match the account PIN."""


class InsufficientBalanceError(SecureBankError):
    """Raised when a withdrawal exceeds the available balance."""


class InvalidAmountError(SecureBankError):
    """Raised when an amount is out of range for the operation."""


class InvalidMenuChoiceError(SecureBankError):
    """Raised when menu input matches no option."""


class MalformedInputError(SecureBankError):
    """Raised when user input cannot be parsed."""


class MalformedAmountError(MalformedInputError):
    """Raised when an amount is not a finite decimal number of cents."""


class SessionClosedError(SecureBankError):
    """Raised when a logged-out session is used."""


class ConfigurationError(SecureBankError):
    """Raised when configuration is invalid or missing."""
