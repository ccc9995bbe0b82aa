# app/schemas/simulate.py
# -----------------------------------------------------------------------------
# Simulation input/result schemas
# - Python attributes are snake_case, the flat record uses camelCase aliases
#   (model_dump(by_alias=True) is what charts / report templates read)
# -----------------------------------------------------------------------------
from enum import Enum
from typing import Annotated, Any, Dict, Literal, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.core.config import default_config


class _Record(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SimulationInputs(_Record):
    short_edge: float = 90
    long_edge: float = 90
    sales_price_per_unit: float = 2500
    monthly_sales_volume: float = 300
    material_cost_per_unit: float = 200
    labor_cost_per_hour: float = 2000
    ink_price_per_cc: float = Field(default=18, alias="inkPricePerCC")
    initial_investment: float = Field(
        default_factory=lambda: default_config().printer.initial_investment
    )


def default_inputs() -> Dict[str, Any]:
    """Product defaults as a camelCase record."""
    return SimulationInputs().model_dump(by_alias=True)


class InkUsage(_Record):
    model_config = ConfigDict(frozen=True)

    white: float = 0.0
    cmyk: float = 0.0
    primer: float = 0.0

    @property
    def total(self) -> float:
        return self.white + self.cmyk + self.primer


# ── payback period: tagged union instead of a '-' string ────────────────────
class FinitePayback(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["finite"] = "finite"
    months: float


class NoPayback(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["no-payback"] = "no-payback"


PaybackPeriod = Annotated[Union[FinitePayback, NoPayback], Field(discriminator="kind")]

NO_PAYBACK = NoPayback()


class PaybackStatus(str, Enum):
    NO_PROFIT = "no-profit"
    GOOD = "good"
    AVERAGE = "average"
    WARNING = "warning"


class SimulationResults(_Record):
    model_config = ConfigDict(frozen=True)

    items_per_print_job: int
    monthly_print_jobs: int
    operating_hours: float
    ink_usage: InkUsage
    ink_cost_per_unit: float
    labor_cost_per_unit: float
    material_cost_per_unit: float
    cost_per_unit: float
    monthly_sales: float
    monthly_gross_profit: float
    gross_profit_margin: float
    payback_period: PaybackPeriod
    initial_investment: float
    inputs: Dict[str, Any]
