"""Check-digit validation for Brazilian individual taxpayer ids (CPF)."""

from __future__ import annotations

import re

_NON_DIGITS_RE = re.compile(r"\D")


def normalize_cpf(raw: str) -> str:
    """Strip punctuation such as `123.456.789-09` down to its 11 digits."""

    return _NON_DIGITS_RE.sub("", raw)


def _check_digit(digits: str) -> int:
    weight = len(digits) + 1
    total = sum(int(digit) * (weight - index) for index, digit in enumerate(digits))
    remainder = (total * 10) % 11
    return 0 if remainder == 10 else remainder


def is_valid_cpf(raw: str) -> bool:
    digits = normalize_cpf(raw)
    if len(digits) != 11:
        return False
    # 000.000.000-00, 111.111.111-11, ... pass the checksum but are never issued
    if digits == digits[0] * 11:
        return False
    if _check_digit(digits[:9]) != int(digits[9]):
        return False
    return _check_digit(digits[:10]) == int(digits[10])
