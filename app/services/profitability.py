# app/services/profitability.py
# -----------------------------------------------------------------------------
# Profitability: sales, gross profit, margin, payback period and its tier
# -----------------------------------------------------------------------------
from typing import Any, Optional

from app.core.config import PaybackThresholds, default_config
from app.schemas.simulate import (
    NO_PAYBACK,
    FinitePayback,
    NoPayback,
    PaybackPeriod,
    PaybackStatus,
)
from app.services.numeric import to_safe_number


def monthly_sales(sales_price_per_unit: Any, monthly_sales_volume: Any) -> float:
    return to_safe_number(sales_price_per_unit) * to_safe_number(monthly_sales_volume)


def monthly_gross_profit(
    sales_price_per_unit: Any, cost_per_unit: Any, monthly_sales_volume: Any
) -> float:
    unit_profit = to_safe_number(sales_price_per_unit) - to_safe_number(cost_per_unit)
    return unit_profit * to_safe_number(monthly_sales_volume)


def gross_profit_margin(sales_price_per_unit: Any, cost_per_unit: Any) -> float:
    """Margin in percent; 0 when there is no positive sales price."""
    price = to_safe_number(sales_price_per_unit)
    if price <= 0:
        return 0.0
    return ((price - to_safe_number(cost_per_unit)) / price) * 100


def payback_period(monthly_gross_profit: Any, initial_investment: Any) -> PaybackPeriod:
    """
    Months until cumulative gross profit covers the investment.

    Not rounded. A non-positive monthly profit never pays back and yields
    NO_PAYBACK rather than 0 / inf.
    """
    profit = to_safe_number(monthly_gross_profit)
    if profit <= 0:
        return NO_PAYBACK
    return FinitePayback(months=to_safe_number(initial_investment) / profit)


def payback_status(
    period: PaybackPeriod, thresholds: Optional[PaybackThresholds] = None
) -> PaybackStatus:
    thresholds = thresholds or default_config().payback
    if isinstance(period, NoPayback):
        return PaybackStatus.NO_PROFIT
    if period.months <= thresholds.good:
        return PaybackStatus.GOOD
    if period.months <= thresholds.average:
        return PaybackStatus.AVERAGE
    return PaybackStatus.WARNING
