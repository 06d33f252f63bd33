"""Entries of a timestamped order-book dataset."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class OrderBookType(enum.Enum):
    """Kind of an order-book entry."""

    BID = "bid"
    ASK = "ask"
    UNKNOWN = "unknown"
    ASKSALE = "asksale"
    BIDSALE = "bidsale"


def string_to_order_book_type(s: str) -> OrderBookType:
    """Map "ask" and "bid" to their types; anything else is UNKNOWN."""
    if s == "ask":
        return OrderBookType.ASK
    if s == "bid":
        return OrderBookType.BID
    return OrderBookType.UNKNOWN


@dataclass
class OrderBookEntry:
    """One bid, ask or sale for a product at a moment in time."""

    price: float
    amount: float
    timestamp: str
    product: str
    order_type: OrderBookType
    username: str = "dataset"


def compare_by_timestamp(e1: OrderBookEntry, e2: OrderBookEntry) -> bool:
    """True when the first entry's timestamp sorts before the second's."""
    return e1.timestamp < e2.timestamp


def compare_by_price_asc(e1: OrderBookEntry, e2: OrderBookEntry) -> bool:
    """True when the first entry is cheaper than the second."""
    return e1.price < e2.price


def compare_by_price_desc(e1: OrderBookEntry, e2: OrderBookEntry) -> bool:
    """True when the first entry is dearer than the second."""
    return e1.price > e2.price