"""Orders accepted by the exchange, their validation and fill status."""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass, field
from datetime import datetime

INSTRUMENTS = ("Rose", "Lavender", "Lotus", "Tulip", "Orchid")

BUY = 1
SELL = 2

MAX_QUANTITY = 1000
QUANTITY_STEP = 10


class Status(enum.IntEnum):
    """Execution status of an order, as written to execution reports."""

    NEW = 0
    REJECTED = 1
    FILL = 2
    PFILL = 3

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]

    def __str__(self) -> str:
        return self.label


_STATUS_LABELS = {
    Status.NEW: "New",
    Status.REJECTED: "Rejected",
    Status.FILL: "Fill",
    Status.PFILL: "Pfill",
}


def transaction_timestamp(now: datetime) -> str:
    """Format a moment as an execution-report transaction time.

    The layout is date, dash, compact time, the colon-separated time again,
    then a dot and three digits of milliseconds.
    """
    millis = now.microsecond // 1000
    return f"{now:%Y%m%d-%H%M%S}{now:%H:%M:%S}.{millis:03d}"


def _now_timestamp() -> str:
    return transaction_timestamp(datetime.now())


def _format_number(value: float) -> str:
    """Render a number the way a default-precision stream would."""
    return f"{value:g}"


@dataclass
class Order:
    """A single order or trade record for one instrument."""

    client_id: str = ""
    order_id: str = ""
    instrument: str = ""
    side: int = 0
    price: float = 0.0
    quantity: int = 0
    status: Status = Status.NEW
    reason: str = ""
    transaction_time: str = field(default_factory=_now_timestamp)

    @property
    def rejected(self) -> bool:
        return self.status is Status.REJECTED

    def validate(self) -> bool:
        """Check the order's fields, rejecting it if any is invalid.

        When several checks fail, the reason of the last one is kept.
        Returns True when the order was accepted.
        """
        if not self.client_id:
            self.reason = "Client ID not defined"
        if self.instrument not in INSTRUMENTS:
            self.reason = "Invalid instrument type!"
        if self.side not in (BUY, SELL):
            self.reason = "Invalid side value!"
        if self.price <= 0:
            self.reason = "Invalid price value!"
        if (
            self.quantity % QUANTITY_STEP != 0
            or self.quantity > MAX_QUANTITY
            or self.quantity <= 0
        ):
            self.reason = "Invalid quantity value!"
        if self.reason:
            self.status = Status.REJECTED
        return not self.rejected

    def update(self) -> None:
        """Set the fill status from the remaining quantity."""
        if self.quantity > 0:
            self.status = Status.PFILL
        if self.quantity == 0:
            self.status = Status.FILL

    def stamp(self) -> None:
        """Set the transaction time to the current moment."""
        self.transaction_time = _now_timestamp()

    def display(self) -> None:
        """Print the order's fields, one per line, followed by a blank line."""
        lines = [
            f"Client ID: {self.client_id}",
            f"Order ID: {self.order_id}",
            f"Instrument: {self.instrument}",
            f"Side: {self.side}",
            f"Price: {_format_number(self.price)}",
            f"Quantity: {self.quantity}",
            f"Status: {Status(self.status).label}",
            f"Reason: {self.reason}",
            f"Transaction Time: {self.transaction_time}",
            "",
        ]
        sys.stdout.write("\n".join(lines) + "\n")