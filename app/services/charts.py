# app/services/charts.py
# -----------------------------------------------------------------------------
# Chart data builders
# - cost donut: material / ink / labor shares of the unit cost
# - profit line: monthly profit over a 0..max volume sweep (pandas frame)
# - payback gauge: needle position and tier
# -----------------------------------------------------------------------------
from __future__ import annotations

import math
from typing import Any, Optional

import numpy as np
import pandas as pd

from app.core.config import PaybackThresholds, SimulationConfig, default_config
from app.schemas.charts import AxisBounds, CostBreakdown, CostShare, PaybackGauge
from app.schemas.simulate import NoPayback, PaybackPeriod, SimulationResults
from app.services.formatting import format_payback
from app.services.numeric import safe_divide, to_safe_number
from app.services.profitability import payback_status

# axis default when there is no profit to scale against
DEFAULT_PROFIT_SPAN = 100_000


def cost_breakdown(results: SimulationResults) -> CostBreakdown:
    material = to_safe_number(results.material_cost_per_unit)
    ink = to_safe_number(results.ink_cost_per_unit)
    labor = to_safe_number(results.labor_cost_per_unit)
    total = material + ink + labor

    def share(label: str, amount: float) -> CostShare:
        return CostShare(label=label, amount=amount, percentage=safe_divide(amount, total) * 100)

    return CostBreakdown(
        material=share("material", material),
        ink=share("ink", ink),
        labor=share("labor", labor),
        total=total,
    )


def profit_volume_series(
    sales_price_per_unit: Any,
    cost_per_unit: Any,
    max_volume: Optional[int] = None,
    step: int = 10,
    config: Optional[SimulationConfig] = None,
) -> pd.DataFrame:
    """
    Monthly sales / cost / profit for volumes 0, step, ... max_volume.

    Profit is linear in volume (price - unit cost per item), so the frame is
    what the profit-vs-volume line chart plots.
    """
    config = config or default_config()
    if max_volume is None:
        max_volume = config.max_monthly_sales_volume
    max_volume = max(0, int(to_safe_number(max_volume)))
    step = max(1, int(to_safe_number(step, fallback=1)))

    price = to_safe_number(sales_price_per_unit)
    unit_cost = to_safe_number(cost_per_unit)

    volume = np.arange(0, max_volume + 1, step, dtype=int)
    if volume[-1] != max_volume:
        volume = np.append(volume, max_volume)

    df = pd.DataFrame({"volume": volume})
    df["sales"] = df["volume"] * price
    df["cost"] = df["volume"] * unit_cost
    df["profit"] = df["sales"] - df["cost"]
    return df


def nice_step(max_value: float, target_steps: int = 5) -> float:
    """Round an axis step to 1/2/5/10 x 10^n."""
    if max_value <= 0:
        return 10_000
    raw = max_value / target_steps
    magnitude = 10 ** math.floor(math.log10(raw))
    mantissa = raw / magnitude
    if mantissa < 1.5:
        nice = 1
    elif mantissa < 3:
        nice = 2
    elif mantissa < 7:
        nice = 5
    else:
        nice = 10
    return max(1, nice * magnitude)


def profit_axis_bounds(
    profit_per_unit: Any, max_volume: Optional[int] = None, target_steps: int = 5
) -> AxisBounds:
    """Y-axis range for the profit line, padded 10% and snapped to nice steps."""
    if max_volume is None:
        max_volume = default_config().max_monthly_sales_volume
    per_unit = to_safe_number(profit_per_unit)
    default_step = nice_step(DEFAULT_PROFIT_SPAN)

    if per_unit > 0:
        padded = max_volume * per_unit * 1.1
        step = nice_step(padded)
        max_profit = math.ceil(padded / step) * step
        min_profit = 0.0
        if max_profit <= 0:
            max_profit = default_step
    else:
        # flat or falling line: the whole range sits at or below zero
        padded = abs(max_volume * per_unit * 1.1)
        max_profit = default_step
        min_profit = 0.0
        if padded > 0:
            step = nice_step(padded)
            min_profit = -math.ceil(padded / step) * step
        if per_unit < 0 and min_profit >= 0:
            min_profit = -default_step

    if max_profit <= min_profit:
        max_profit = min_profit + nice_step(abs(min_profit) or DEFAULT_PROFIT_SPAN)

    step = nice_step(max_profit - min_profit, target_steps)
    return AxisBounds(min_profit=float(min_profit), max_profit=float(max_profit), step=float(step))


def payback_gauge(
    period: PaybackPeriod, thresholds: Optional[PaybackThresholds] = None
) -> PaybackGauge:
    thresholds = thresholds or default_config().payback
    ceiling = thresholds.warning
    if isinstance(period, NoPayback):
        needle = ceiling
    else:
        needle = min(max(period.months, 0.0), ceiling)
    return PaybackGauge(
        status=payback_status(period, thresholds),
        needle=needle,
        ceiling=ceiling,
        label=format_payback(period),
    )
