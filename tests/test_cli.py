# tests/test_cli.py
import pytest

from cli import describe_filters, format_price, format_stock


def test_format_price():
    assert format_price(89.99) == "$89.99"
    assert format_price(1249.5) == "$1,249.50"


def test_format_stock():
    assert format_stock(3) == "3 in stock"
    assert "Out of stock" in format_stock(0)


def test_describe_filters():
    assert describe_filters({"category": None, "search": None, "is_active": None}) == "none"
    assert describe_filters({"category": "Books", "search": "habit", "is_active": False}) == (
        "category=Books, search='habit', inactive only"
    )


def test_main_exits_cleanly_on_ctrl_c(monkeypatch):
    import cli

    def interrupted():
        raise KeyboardInterrupt

    monkeypatch.setattr(cli, "menu", interrupted)
    with pytest.raises(SystemExit) as exc:
        cli.main()
    assert exc.value.code == 1
