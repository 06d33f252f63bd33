"""Order-matching exchange simulator with CSV execution reports, market-data entries and a wallet."""

__version__ = "0.1.0"
__all__ = ["csv_reader", "execution", "order", "order_book", "order_book_entry", "wallet"]