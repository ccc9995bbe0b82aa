# test_formatting.py
import pytest

from app.schemas.simulate import NO_PAYBACK, FinitePayback
from app.services.formatting import (
    format_currency,
    format_number,
    format_payback,
    format_percent,
)


def test_format_number():
    assert format_number(1234567) == "1,234,567"
    assert format_number(1234.5) == "1,235"
    assert format_number(1234.5678, 2) == "1,234.57"
    assert format_number(None) == ""
    assert format_number("") == ""
    assert format_number("n/a") == "n/a"


@pytest.mark.parametrize(
    "amount, language, expected",
    [
        (1234.4, "en", "¥ 1,234"),
        (1234.4, "ja", "1,234円"),
        (0, "en", "¥ 0"),
        (0, "ja", "0円"),
        (-2500, "en", "¥ -2,500"),
        (None, "en", ""),
        ("abc", "en", "N/A"),
    ],
)
def test_format_currency(amount, language, expected):
    assert format_currency(amount, language) == expected


def test_format_currency_estimate_and_symbol():
    assert format_currency(3780000, "ja", is_estimate=True) == "約3,780,000円"
    assert format_currency(3780000, "en", symbol="$") == "$ 3,780,000"
    assert format_currency(10, "ja", symbol="$") == "10$"


def test_format_percent():
    assert format_percent(76.8412) == "76.84%"
    assert format_percent(-5, 1) == "-5.0%"
    assert format_percent("abc") == "0.00%"
    assert format_percent(None) == ""


def test_format_payback():
    assert format_payback(NO_PAYBACK) == "-"
    assert format_payback(FinitePayback(months=16.398)) == "16.4 months"
    assert format_payback(FinitePayback(months=16.398), "ja") == "16.4ヶ月"
