"""Reading order-book datasets from comma-separated files."""

from __future__ import annotations

import math
import re
from collections.abc import Sequence
from os import PathLike
from typing import Union

from exchangesim.order_book_entry import (
    OrderBookEntry,
    OrderBookType,
    string_to_order_book_type,
)

StrPath = Union[str, "PathLike[str]"]

FIELD_COUNT = 5

_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


class BadDataError(ValueError):
    """A line or field of a dataset could not be turned into an entry."""


def _parse_float(text: str) -> float:
    """Read the leading floating-point number of text, ignoring what follows."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise BadDataError(f"Bad float! {text}")
    literal = match.group(1)
    value = float(literal)
    if math.isinf(value) and "inf" not in literal.lower():
        raise BadDataError(f"Float out of range! {text}")
    return value


def tokenise(csv_line: str, separator: str) -> list[str]:
    """Split a line on a single separator character.

    Leading separators are skipped and a trailing separator ends the line.
    Two separators in a row stop the split: only the tokens before them
    are returned.
    """
    start = len(csv_line) - len(csv_line.lstrip(separator))
    tokens: list[str] = []
    while start < len(csv_line):
        end = csv_line.find(separator, start)
        if end == start:
            break
        if end < 0:
            tokens.append(csv_line[start:])
            break
        tokens.append(csv_line[start:end])
        start = end + 1
    return tokens


def strings_to_entry(
    price: str,
    amount: str,
    timestamp: str,
    product: str,
    order_type: OrderBookType,
) -> OrderBookEntry:
    """Build an entry from text price and amount.

    Raises BadDataError when either number cannot be read.
    """
    try:
        price_value = _parse_float(price)
        amount_value = _parse_float(amount)
    except BadDataError:
        print(f"Bad float! {price}")
        print(f"Bad float! {amount}")
        raise
    return OrderBookEntry(
        price=price_value,
        amount=amount_value,
        timestamp=timestamp,
        product=product,
        order_type=order_type,
    )


def tokens_to_entry(tokens: Sequence[str]) -> OrderBookEntry:
    """Build an entry from timestamp, product, type, price and amount tokens.

    Raises BadDataError when there are not exactly five tokens or a number
    cannot be read.
    """
    if len(tokens) != FIELD_COUNT:
        print("Bad line")
        raise BadDataError(f"expected {FIELD_COUNT} fields, got {len(tokens)}")
    timestamp, product, order_type, price, amount = tokens
    return strings_to_entry(
        price, amount, timestamp, product, string_to_order_book_type(order_type)
    )


def read_csv(path: StrPath) -> list[OrderBookEntry]:
    """Read every well-formed line of a dataset file into entries.

    Bad lines are reported and skipped. A file that cannot be opened
    yields no entries.
    """
    entries: list[OrderBookEntry] = []
    try:
        with open(path) as source:
            for raw in source:
                line = raw.rstrip("\r\n")
                try:
                    entries.append(tokens_to_entry(tokenise(line, ",")))
                except BadDataError:
                    print("read_csv bad data")
    except OSError:
        pass
    print(f"read_csv read {len(entries)} entries")
    return entries