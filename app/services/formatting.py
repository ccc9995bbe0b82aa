# app/services/formatting.py
# -----------------------------------------------------------------------------
# Display formatting for results (summary view / export templates)
# - ja: "1,234円", "約1,234円"; other languages: "¥ 1,234"
# -----------------------------------------------------------------------------
import math
from typing import Any, Optional

from app.core.config import settings
from app.schemas.simulate import NoPayback, PaybackPeriod


def _round_half_up(value: float, decimals: int = 0) -> float:
    factor = 10**decimals
    return math.floor(value * factor + 0.5) / factor


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def format_number(num: Any, decimals: int = 0) -> str:
    """Thousands separators with a fixed number of decimals; text passes through."""
    if _is_blank(num):
        return ""
    try:
        value = float(num)
    except (TypeError, ValueError):
        return str(num)
    if not math.isfinite(value):
        return str(num)
    return f"{_round_half_up(value, decimals):,.{decimals}f}"


def format_currency(
    amount: Any,
    language: str = "en",
    symbol: Optional[str] = None,
    is_estimate: bool = False,
) -> str:
    if _is_blank(amount):
        return ""
    symbol = symbol or settings.CURRENCY_SYMBOL
    # Japanese text uses 円 after the number instead of the yen sign
    if language == "ja" and symbol == "¥":
        symbol = "円"
    try:
        value = float(amount)
    except (TypeError, ValueError):
        return "N/A"
    if not math.isfinite(value):
        return "N/A"

    if value == 0:
        return f"0{symbol}" if language == "ja" else f"{symbol} 0"

    text = format_number(value, 0)
    if language == "ja":
        return f"約{text}{symbol}" if is_estimate else f"{text}{symbol}"
    return f"{symbol} {text}"


def format_percent(value: Any, decimals: int = 2) -> str:
    if _is_blank(value):
        return ""
    try:
        num = float(value)
    except (TypeError, ValueError):
        num = float("nan")
    if math.isnan(num):
        return f"{0:.{decimals}f}%"
    return f"{num:.{decimals}f}%"


def format_payback(period: PaybackPeriod, language: str = "en") -> str:
    if isinstance(period, NoPayback):
        return "-"
    if language == "ja":
        return f"{period.months:.1f}ヶ月"
    return f"{period.months:.1f} months"
