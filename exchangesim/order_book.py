"""Per-instrument order book with price-priority matching."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace

from exchangesim.order import BUY, SELL, Order, Status


def _add_buy(book: list[Order], order: Order) -> None:
    """Place a buy order ahead of the first resting order it prices at or above."""
    index = next(
        (i for i, resting in enumerate(book) if order.price >= resting.price),
        len(book),
    )
    book.insert(index, order)


def _add_sell(book: list[Order], order: Order) -> None:
    """Place a sell order ahead of the first resting order priced at or above it."""
    index = next(
        (i for i, resting in enumerate(book) if resting.price >= order.price),
        len(book),
    )
    book.insert(index, order)


@dataclass
class OrderBook:
    """Resting buy and sell orders for one instrument.

    The buy side is kept with the highest price first and the sell side with
    the lowest price first; a new order goes ahead of resting orders at its
    own price.
    """

    buy_side: list[Order] = field(default_factory=list)
    sell_side: list[Order] = field(default_factory=list)

    def insert(self, order: Order) -> list[Order]:
        """Match an order against the opposite side and return the trade records.

        Each match yields a record for the incoming order followed by one for
        the resting order, both at the resting order's price. Whatever is left
        of the incoming order rests in the book; if nothing matched at all, a
        record with status New is returned for it. The order passed in is not
        changed.
        """
        incoming = replace(order)
        if incoming.side == BUY:
            trades = self._match(
                incoming, self.sell_side, lambda resting: resting.price <= incoming.price
            )
            add = _add_buy
            book = self.buy_side
        elif incoming.side == SELL:
            trades = self._match(
                incoming, self.buy_side, lambda resting: incoming.price <= resting.price
            )
            add = _add_sell
            book = self.sell_side
        else:
            return []

        incoming.stamp()
        if incoming.status not in (Status.REJECTED, Status.FILL):
            add(book, incoming)
        if incoming.status == Status.NEW:
            trades.append(replace(incoming))
        return trades

    @staticmethod
    def _match(incoming: Order, opposite: list[Order], crosses) -> list[Order]:
        trades: list[Order] = []
        for resting in opposite:
            if not crosses(resting):
                break
            incoming_before = replace(incoming)
            resting_before = replace(resting)

            if incoming.quantity >= resting.quantity:
                filled = resting.quantity
                incoming.quantity -= filled
                resting.quantity = 0
            else:
                filled = incoming.quantity
                # A resting sell partly taken by a buy is left holding the
                # quantity that was taken; a resting buy keeps the remainder.
                if incoming.side == BUY:
                    resting.quantity = filled
                else:
                    resting.quantity -= filled
                incoming.quantity = 0

            resting.update()
            incoming.update()

            incoming_trade = replace(
                incoming_before,
                status=incoming.status,
                price=resting.price,
                quantity=filled,
            )
            incoming_trade.stamp()
            resting_trade = replace(
                resting_before,
                status=resting.status,
                price=resting.price,
                quantity=filled,
            )
            resting_trade.stamp()
            trades.extend((incoming_trade, resting_trade))

            if incoming.quantity == 0:
                break

        opposite[:] = [resting for resting in opposite if resting.status != Status.FILL]
        return trades

    def display(self) -> None:
        """Print both sides of the book."""
        out = sys.stdout
        out.write("=== Buy Side ===\n\n")
        for order in self.buy_side:
            order.display()
        out.write("\n")
        out.write("=== Sell Side ===\n\n")
        for order in self.sell_side:
            order.display()
        out.write("\n")