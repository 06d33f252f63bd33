"""A wallet of currency balances for trading on the simulated exchange."""

from __future__ import annotations

from exchangesim.csv_reader import tokenise
from exchangesim.order_book_entry import OrderBookEntry, OrderBookType


def _currencies(product: str) -> list[str]:
    return tokenise(product, "/")


def _quote_currency(product: str) -> str:
    parts = _currencies(product)
    if len(parts) < 2:
        raise ValueError(f"product has no quote currency: {product!r}")
    return parts[1]


def _base_currency(product: str) -> str:
    parts = _currencies(product)
    if not parts:
        raise ValueError(f"product has no base currency: {product!r}")
    return parts[0]


class Wallet:
    """Balances held per currency."""

    def __init__(self) -> None:
        self._currencies: dict[str, float] = {}

    def insert_currency(self, currency: str, amount: float) -> None:
        """Add an amount of a currency. Raises ValueError for negative amounts."""
        if amount < 0:
            raise ValueError(f"cannot insert a negative amount: {amount}")
        self._currencies[currency] = self._currencies.get(currency, 0.0) + amount

    def remove_currency(self, currency: str, amount: float) -> bool:
        """Take an amount of a currency out if the wallet holds enough.

        Returns False, leaving the wallet unchanged, when the amount is
        negative or the balance is too small.
        """
        if amount < 0 or not self.contains_currency(currency, amount):
            return False
        self._currencies[currency] -= amount
        return True

    def contains_currency(self, currency: str, amount: float) -> bool:
        """Whether the wallet holds at least this much of a currency."""
        return currency in self._currencies and self._currencies[currency] >= amount

    def can_fulfill_order(self, order: OrderBookEntry) -> bool:
        """Whether the wallet can cover an ask or a bid.

        An ask needs the amount of the base currency; a bid needs amount
        times price of the quote currency. Other entry types cannot be
        fulfilled.
        """
        if order.order_type is OrderBookType.ASK:
            return self.contains_currency(_base_currency(order.product), order.amount)
        if order.order_type is OrderBookType.BID:
            return self.contains_currency(
                _quote_currency(order.product), order.amount * order.price
            )
        return False

    def process_sale(self, sale: OrderBookEntry) -> None:
        """Apply a completed sale made by the wallet's owner to the balances."""
        if sale.order_type is OrderBookType.ASKSALE:
            incoming = _quote_currency(sale.product)
            outgoing = _base_currency(sale.product)
            self._adjust(incoming, sale.amount * sale.price)
            self._adjust(outgoing, -sale.amount)
        elif sale.order_type is OrderBookType.BIDSALE:
            incoming = _base_currency(sale.product)
            outgoing = _quote_currency(sale.product)
            self._adjust(incoming, sale.amount)
            self._adjust(outgoing, -sale.amount * sale.price)

    def _adjust(self, currency: str, delta: float) -> None:
        self._currencies[currency] = self._currencies.get(currency, 0.0) + delta

    def __str__(self) -> str:
        return "".join(
            f"{currency} : {amount:f}\n"
            for currency, amount in sorted(self._currencies.items())
        )