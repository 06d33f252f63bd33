import pytest

from exchangesim.order import BUY, SELL, Order, Status
from exchangesim.order_book import OrderBook


def make(client_id, side, price, quantity, instrument="Rose"):
    return Order(
        client_id=client_id,
        order_id="ord-" + client_id,
        instrument=instrument,
        side=side,
        price=float(price),
        quantity=quantity,
    )


def test_buy_into_empty_book_rests_and_reports_new():
    book = OrderBook()
    order = make("aa1", BUY, 55, 100)
    trades = book.insert(order)
    assert len(trades) == 1
    assert trades[0].status == Status.NEW
    assert trades[0].client_id == "aa1"
    assert trades[0].quantity == 100
    assert [o.client_id for o in book.buy_side] == ["aa1"]
    assert book.sell_side == []


def test_insert_does_not_change_the_given_order():
    book = OrderBook()
    book.insert(make("s1", SELL, 45, 100))
    order = make("b1", BUY, 55, 100)
    book.insert(order)
    assert order.quantity == 100
    assert order.status == Status.NEW


def test_full_fill_clears_both_sides():
    book = OrderBook()
    book.insert(make("s1", SELL, 45, 100))
    trades = book.insert(make("b1", BUY, 55, 100))
    assert [t.client_id for t in trades] == ["b1", "s1"]
    assert all(t.status == Status.FILL for t in trades)
    assert all(t.quantity == 100 for t in trades)
    assert all(t.price == 45.0 for t in trades)
    assert book.buy_side == []
    assert book.sell_side == []


def test_buy_partly_taking_a_larger_sell():
    book = OrderBook()
    book.insert(make("s1", SELL, 45, 100))
    trades = book.insert(make("b1", BUY, 55, 30))
    assert [(t.client_id, t.status, t.quantity) for t in trades] == [
        ("b1", Status.FILL, 30),
        ("s1", Status.PFILL, 30),
    ]
    assert book.buy_side == []
    assert len(book.sell_side) == 1
    assert book.sell_side[0].status == Status.PFILL
    assert book.sell_side[0].quantity == 30


def test_sell_partly_taking_a_larger_buy():
    book = OrderBook()
    book.insert(make("b1", BUY, 55, 100))
    trades = book.insert(make("s1", SELL, 45, 30))
    assert [(t.client_id, t.status, t.quantity) for t in trades] == [
        ("s1", Status.FILL, 30),
        ("b1", Status.PFILL, 30),
    ]
    assert all(t.price == 55.0 for t in trades)
    assert book.sell_side == []
    assert len(book.buy_side) == 1
    assert book.buy_side[0].quantity + 30 == 100
    assert book.buy_side[0].status == Status.PFILL


def test_prices_that_do_not_cross_both_rest():
    book = OrderBook()
    first = book.insert(make("b1", BUY, 1, 50))
    second = book.insert(make("s1", SELL, 2, 50))
    assert [t.status for t in first + second] == [Status.NEW, Status.NEW]
    assert len(book.buy_side) == 1
    assert len(book.sell_side) == 1


def test_buy_sweeps_several_levels_and_rests_remainder():
    book = OrderBook()
    book.insert(make("s1", SELL, 1, 30))
    book.insert(make("s2", SELL, 2, 40))
    trades = book.insert(make("b1", BUY, 3, 100))
    assert [(t.client_id, t.status, t.quantity, t.price) for t in trades] == [
        ("b1", Status.PFILL, 30, 1.0),
        ("s1", Status.FILL, 30, 1.0),
        ("b1", Status.PFILL, 40, 2.0),
        ("s2", Status.FILL, 40, 2.0),
    ]
    assert book.sell_side == []
    assert len(book.buy_side) == 1
    resting = book.buy_side[0]
    assert resting.status == Status.PFILL
    assert resting.quantity + 30 + 40 == 100


def test_matching_stops_at_level_that_does_not_cross():
    book = OrderBook()
    book.insert(make("s1", SELL, 1, 50))
    book.insert(make("s2", SELL, 5, 50))
    trades = book.insert(make("b1", BUY, 3, 100))
    assert [t.client_id for t in trades] == ["b1", "s1"]
    assert [o.client_id for o in book.sell_side] == ["s2"]
    assert [o.client_id for o in book.buy_side] == ["b1"]


def test_buy_side_sorted_highest_first_new_ahead_of_equal():
    book = OrderBook()
    book.insert(make("b1", BUY, 10, 10))
    book.insert(make("b2", BUY, 30, 10))
    book.insert(make("b3", BUY, 20, 10))
    book.insert(make("b4", BUY, 20, 10))
    assert [o.client_id for o in book.buy_side] == ["b2", "b4", "b3", "b1"]
    prices = [o.price for o in book.buy_side]
    assert prices == sorted(prices, reverse=True)


def test_sell_side_sorted_lowest_first_new_ahead_of_equal():
    book = OrderBook()
    book.insert(make("s1", SELL, 30, 10))
    book.insert(make("s2", SELL, 10, 10))
    book.insert(make("s3", SELL, 20, 10))
    book.insert(make("s4", SELL, 20, 10))
    assert [o.client_id for o in book.sell_side] == ["s2", "s4", "s3", "s1"]
    prices = [o.price for o in book.sell_side]
    assert prices == sorted(prices)


def test_sell_matches_highest_buy_first():
    book = OrderBook()
    book.insert(make("b1", BUY, 10, 10))
    book.insert(make("b2", BUY, 30, 10))
    trades = book.insert(make("s1", SELL, 5, 10))
    assert [t.client_id for t in trades] == ["s1", "b2"]
    assert trades[0].price == 30.0
    assert [o.client_id for o in book.buy_side] == ["b1"]


@pytest.mark.parametrize("side", [0, 3])
def test_unknown_side_yields_no_trades(side):
    book = OrderBook()
    assert book.insert(make("x1", side, 10, 10)) == []
    assert book.buy_side == []
    assert book.sell_side == []


def test_display_prints_both_sides(capsys):
    book = OrderBook()
    book.insert(make("b1", BUY, 10, 10))
    book.insert(make("s1", SELL, 20, 10))
    book.display()
    out = capsys.readouterr().out
    assert out.startswith("=== Buy Side ===\n\n")
    assert "=== Sell Side ===\n\n" in out
    buy_part, sell_part = out.split("=== Sell Side ===")
    assert "Client ID: b1" in buy_part
    assert "Client ID: s1" in sell_part
    assert out.endswith("\n\n")


def test_display_empty_book(capsys):
    OrderBook().display()
    assert capsys.readouterr().out == "=== Buy Side ===\n\n\n=== Sell Side ===\n\n\n"