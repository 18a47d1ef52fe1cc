#!/usr/bin/env python3

import re
from decimal import Decimal

DEBIT = "1"


class FieldCursor:
    """Sequential reader over a fixed-width string."""

    def __init__(self, text: str, pos: int = 0) -> None:
        self.text = text
        self.pos = pos

    def skip(self, n: int) -> "FieldCursor":
        self.pos += n
        return self

    def take(self, n: int) -> str:
        taken = self.text[self.pos : self.pos + n]
        self.pos += n
        return taken

    def take_text(self, n: int) -> str:
        return self.take(n).strip()

    def take_int(self, n: int) -> int:
        return to_int(self.take(n))

    def take_decimal(self, n: int, decimals: int) -> Decimal:
        return to_decimal(self.take(n), decimals)


def to_int(raw: str) -> int:
    """Zero padded numeric field, blanks count as zero."""
    raw = raw.strip()
    return int(raw) if raw else 0


def to_decimal(raw: str, decimals: int) -> Decimal:
    """Fixed point field with `decimals` implied decimal positions."""
    return Decimal(to_int(raw)).scaleb(-decimals)


def to_amount(sign: str, raw: str) -> Decimal:
    """Signed 12+3 amount, the sign code is `0` for credit and `1` for debit."""
    amount = to_decimal(raw, 3)
    return -amount if sign == DEBIT else amount


def normalize_whitespace(text: str) -> str:
    return re.sub(r"\s{2,}", " ", text.strip())
