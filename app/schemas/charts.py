# app/schemas/charts.py
# -----------------------------------------------------------------------------
# Chart-ready data (donut / gauge / profit line)
# -----------------------------------------------------------------------------
from pydantic import BaseModel

from app.schemas.simulate import PaybackStatus


class CostShare(BaseModel):
    label: str
    amount: float
    percentage: float


class CostBreakdown(BaseModel):
    material: CostShare
    ink: CostShare
    labor: CostShare
    total: float


class AxisBounds(BaseModel):
    min_profit: float
    max_profit: float
    step: float


class PaybackGauge(BaseModel):
    status: PaybackStatus
    needle: float  # months, clamped to the gauge ceiling
    ceiling: float
    label: str
