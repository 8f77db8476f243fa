"""Parsing of raw terminal input into typed values."""

from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import TypeVar

from securebank.exceptions import InvalidMenuChoiceError, MalformedAmountError

CENT = Decimal("0.01")
# 15 integer digits plus cents
MAX_AMOUNT = Decimal("999999999999999.99")

E = TypeVar("E", bound=Enum)


def parse_amount(text: str) -> Decimal:
    """Parse a money amount typed by the user.

    Leading/trailing whitespace and a single leading ``$`` are ignored.
    Digit-group commas are not accepted.

    Parameters
    ----------
    text : str
        Raw input, e.g. ``"150"``, ``"$12.50"``.

    Returns
    -------
    Decimal
        The amount, quantized to cents.

    Raises
    ------
    MalformedAmountError
        If the input is empty, not a number, not finite, larger than
        ``MAX_AMOUNT`` in magnitude, or has more than two decimal places.
    """
    cleaned = text.strip()
    if cleaned.startswith("$"):
        cleaned = cleaned[1:].strip()
    if not cleaned:
        raise MalformedAmountError("Amount is empty")

    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        raise MalformedAmountError(f"Not a number: {text!r}") from None

    if not amount.is_finite():
        raise MalformedAmountError(f"Amount must be finite: {text!r}")
    if abs(amount) > MAX_AMOUNT:
        raise MalformedAmountError(f"Amount exceeds {MAX_AMOUNT}: {text!r}")
    quantized = amount.quantize(CENT)
    if quantized != amount:
        raise MalformedAmountError(f"Amount has more than two decimal places: {text!r}")
    return quantized


def parse_menu_choice(text: str, choices: type[E]) -> E:
    """Map menu input onto a member of the ``choices`` enum.

    Raises
    ------
    InvalidMenuChoiceError
        If the input matches no member value.
    """
    try:
        return choices(text.strip())
    except ValueError:
        raise InvalidMenuChoiceError(f"Invalid choice: {text!r}") from None
