"""Running order files through the exchange and writing execution reports."""

from __future__ import annotations

import argparse
import re
import sys
import time
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Union

from exchangesim.order import INSTRUMENTS, Order, Status
from exchangesim.order_book import OrderBook

StrPath = Union[str, "PathLike[str]"]

REPORT_HEADER = (
    "Client Order ID,Order ID,Instrument,Side,Price,Quantity,"
    "Exec Status,Reason,Transaction Time"
)
DEFAULT_OUTPUT = Path("OutputFiles") / "execution_rep.csv"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    """Read a leading integer from text, giving 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _book_factory() -> dict[str, OrderBook]:
    return {name: OrderBook() for name in INSTRUMENTS}


@dataclass
class Exchange:
    """One order book per instrument."""

    books: dict[str, OrderBook] = field(default_factory=_book_factory)

    def execute(self, order: Order) -> list[Order]:
        """Send an order to its instrument's book and return the trade records."""
        book = self.books.setdefault(order.instrument, OrderBook())
        return book.insert(order)


def parse_order(line: str, order_id: str) -> Order:
    """Build an order from a CSV line of client id, instrument, side, quantity, price.

    Numeric fields are read as leading integers; missing or malformed ones
    become 0, and missing text fields stay empty.
    """
    fields = line.split(",")
    fields += [""] * (5 - len(fields))
    client_id, instrument, side, quantity, price = fields[:5]
    return Order(
        client_id=client_id,
        order_id=order_id,
        instrument=instrument,
        side=_atoi(side),
        quantity=_atoi(quantity),
        price=float(_atoi(price)),
    )


def format_report_row(order: Order) -> str:
    """Render an order or trade as one execution-report line, without newline."""
    return ",".join(
        (
            order.client_id,
            order.order_id,
            order.instrument,
            str(order.side),
            f"{order.price:g}",
            str(order.quantity),
            Status(order.status).label,
            order.reason,
            order.transaction_time,
        )
    )


def process_file(
    input_path: StrPath, output_path: StrPath, exchange: Exchange | None = None
) -> int:
    """Execute every order in the input file and write the report.

    The first input line is a header and is skipped. Rejected orders are
    reported as they are; accepted ones are reported through the trades
    they produce. Returns the number of report rows written.

    Raises FileNotFoundError if the input file does not exist; the report
    then holds only its header.
    """
    if exchange is None:
        exchange = Exchange()
    rows = 0
    with open(output_path, "w", newline="") as out:
        out.write(REPORT_HEADER + "\n")
        with open(input_path) as source:
            print("Executing...")
            next(source, None)
            for number, raw in enumerate(source, start=1):
                order = parse_order(raw.rstrip("\n"), f"ord{number}")
                records = [order] if not order.validate() else exchange.execute(order)
                for record in records:
                    out.write(format_report_row(record) + "\n")
                    rows += 1
    return rows


def _ask_input_path() -> str:
    try:
        tokens = input("Enter input file path: ").split()
    except EOFError:
        return ""
    return tokens[0] if tokens else ""


def main(argv: list[str] | None = None) -> int:
    """Run an order file through a fresh exchange and report the timing."""
    parser = argparse.ArgumentParser(
        prog="exchangesim", description="Execute an order file and write a report."
    )
    parser.add_argument("input", nargs="?", help="order CSV file")
    parser.add_argument(
        "-o", "--output", default=str(DEFAULT_OUTPUT), help="execution report path"
    )
    args = parser.parse_args(argv)

    input_path = args.input if args.input is not None else _ask_input_path()
    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    begin = time.perf_counter()
    try:
        process_file(input_path, output_path)
    except FileNotFoundError:
        sys.stdout.write("Input data file not found")
        return 0
    elapsed = time.perf_counter() - begin

    print()
    print(f"Finished in: {elapsed:g}s")
    sys.stdout.write(f"Output file: {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())