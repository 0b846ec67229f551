"""Exact-pence money parsing and formatting."""
from __future__ import annotations

CURRENCY_SYMBOL = "£"
MAX_PENNIES = 2**31 - 1

_DIGITS = frozenset("0123456789")
_MAX_DIGITS = len(str(MAX_PENNIES))


class MoneyParseError(ValueError):
    """Raised when text cannot be read as a non-negative amount."""


def _all_digits(text: str) -> bool:
    return bool(text) and all(ch in _DIGITS for ch in text)


def _to_int(digits: str) -> int:
    significant = digits.lstrip("0")
    if len(significant) > _MAX_DIGITS:
        raise MoneyParseError("amount too large")
    return int(significant or "0")


def parse_pennies(text: str) -> int:
    """Parse a free-form amount such as ``"1.50"`` or ``"£2"`` into pence.

    Whitespace anywhere in the text is ignored and a single leading currency
    symbol is dropped. Signed amounts are rejected. A single fractional digit
    counts as tenths, so ``"1.5"`` is 150 pence.
    """
    cleaned = "".join(ch for ch in text if not ch.isspace())
    if not cleaned:
        raise MoneyParseError("empty amount")

    first = cleaned[0]
    if first not in _DIGITS and first not in ".+-":
        cleaned = cleaned[1:]

    if cleaned[:1] in ("+", "-"):
        raise MoneyParseError(f"signed amounts are not accepted: {text!r}")

    dots = cleaned.count(".")
    if dots > 1:
        raise MoneyParseError(f"more than one decimal point: {text!r}")

    if dots == 0:
        if not _all_digits(cleaned):
            raise MoneyParseError(f"not a number: {text!r}")
        total = _to_int(cleaned) * 100
    else:
        whole, frac = cleaned.split(".")
        whole = whole or "0"
        if not 1 <= len(frac) <= 2:
            raise MoneyParseError(f"expected one or two decimal places: {text!r}")
        if not _all_digits(whole) or not _all_digits(frac):
            raise MoneyParseError(f"not a number: {text!r}")
        pence = int(frac)
        if len(frac) == 1:
            pence *= 10
        total = _to_int(whole) * 100 + pence

    if total > MAX_PENNIES:
        raise MoneyParseError(f"amount too large: {text!r}")
    return total


def format_pennies(pennies: int) -> str:
    sign = "-" if pennies < 0 else ""
    pounds, pence = divmod(abs(pennies), 100)
    return f"{sign}{CURRENCY_SYMBOL}{pounds}.{pence:02d}"
