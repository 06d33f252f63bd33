# exchangesim

A small exchange simulator. It keeps a price-ordered book of buy and sell
orders for each flower instrument (Rose, Lavender, Lotus, Tulip, Orchid),
matches incoming orders against the opposite side, and writes an execution
report as CSV. Alongside it sit a simple model of timestamped market-data
entries, a reader for market-data CSV files, and a wallet that checks
whether it can cover an order and settles completed sales.

## Installing

```
pip install .
```

## Running the matching engine

```
exchangesim [INPUT] [-o OUTPUT]
```

`INPUT` is the order file. When it is left out, the command asks for it
with `Enter input file path:`. The report is written to `OUTPUT`, by
default `OutputFiles/execution_rep.csv`; its directory is created if
needed. When the run finishes, the elapsed time and the report path are
printed. If the input file does not exist, the command prints
`Input data file not found` and the report holds only its header.

The first line of the input is a header and is skipped. Each further line
holds:

```
client_id,instrument,side,quantity,price
```

`side` is `1` for buy and `2` for sell. Numeric fields are read as leading
integers; missing or malformed ones count as 0. An order is rejected when
the client id is empty, the instrument is not one of the five, the side is
not 1 or 2, the price is not positive, or the quantity is not a positive
multiple of 10 no larger than 1000. When several checks fail, the reason
of the last one is reported.

Each input line gets an order id `ord1`, `ord2`, … in file order. The
report has the columns

```
Client Order ID,Order ID,Instrument,Side,Price,Quantity,Exec Status,Reason,Transaction Time
```

and the status is one of `New`, `Rejected`, `Fill` or `Pfill`.

### Matching

- The buy side is kept highest price first and the sell side lowest price
  first; a new order goes ahead of resting orders at its own price.
- An incoming order matches resting orders on the other side while the
  prices cross. Each match writes a row for the incoming order followed by
  one for the resting order, both at the resting order's price and for the
  matched quantity.
- Fully filled resting orders leave the book. Whatever is left of the
  incoming order rests in the book; if it matched nothing at all, a single
  `New` row is written for it.

## Using it as a library

```python
from exchangesim.execution import Exchange, parse_order, format_report_row

exchange = Exchange()
order = parse_order("aa13,Rose,1,100,55", "ord1")
if order.validate():
    for trade in exchange.execute(order):
        print(format_report_row(trade))
```

- `exchangesim.order`: `Order` (a dataclass with `validate()`, which
  returns whether the order was accepted, `update()`, `stamp()` and
  `display()`), the `Status` enum, and `transaction_timestamp(now)`, which
  formats a `datetime` as a report transaction time.
- `exchangesim.order_book`: `OrderBook` with `insert(order)`, which returns
  the trade records and leaves the order passed in unchanged, and
  `display()`, which prints both sides.
- `exchangesim.execution`: `Exchange` (one `OrderBook` per instrument, with
  `execute(order)`), `parse_order(line, order_id)`,
  `format_report_row(order)`, and
  `process_file(input_path, output_path, exchange=None)`, which runs a
  whole file and returns the number of report rows written.

### Market data and the wallet

- `exchangesim.order_book_entry`: `OrderBookEntry` (price, amount,
  timestamp, product, order type, username defaulting to `dataset`),
  `OrderBookType` (`BID`, `ASK`, `UNKNOWN`, `ASKSALE`, `BIDSALE`),
  `string_to_order_book_type(s)`, and the comparisons
  `compare_by_timestamp`, `compare_by_price_asc` and
  `compare_by_price_desc`.
- `exchangesim.csv_reader`: `tokenise(csv_line, separator)`,
  `strings_to_entry(price, amount, timestamp, product, order_type)`,
  `tokens_to_entry(tokens)` for `timestamp,product,type,price,amount`
  lines, and `read_csv(path)`, which skips bad lines and returns no entries
  for a file it cannot open. Bad data raises `BadDataError`, a
  `ValueError`.
- `exchangesim.wallet`: `Wallet` with `insert_currency` (negative amounts
  raise `ValueError`), `remove_currency` and `contains_currency`, which
  return booleans, `can_fulfill_order(entry)` for asks and bids on a
  product such as `ETH/BTC`, `process_sale(entry)` for `ASKSALE` and
  `BIDSALE` entries, and `str(wallet)` listing balances sorted by currency.

## What it does not do

- There is no order book over market-data entries and no trading session:
  entries can be read and checked against a wallet, but nothing matches
  them, steps through their timestamps or reports market statistics, and
  there is no interactive menu for placing bids and asks.
- The flower order books live in memory only; nothing is kept between runs.

## Running the tests

```
pip install .[test]
pytest
```