# app/services/costs.py
# -----------------------------------------------------------------------------
# Cost composer: ink + labor + material cost per unit
# -----------------------------------------------------------------------------
from typing import Any, Mapping, Optional, Union

from app.core.config import default_config
from app.schemas.simulate import InkUsage
from app.services.numeric import to_safe_number


def _usage_total(usage: Union[InkUsage, Mapping[str, Any], None]) -> float:
    if usage is None:
        return 0.0
    if isinstance(usage, InkUsage):
        return usage.total
    if not isinstance(usage, Mapping):
        return 0.0
    return sum(to_safe_number(usage.get(k)) for k in ("white", "cmyk", "primer"))


def ink_cost_per_unit(
    usage: Union[InkUsage, Mapping[str, Any], None], ink_price_per_cc: Any
) -> float:
    """A missing or malformed usage record counts as zero ink."""
    return _usage_total(usage) * to_safe_number(ink_price_per_cc)


def labor_cost_per_unit(
    labor_cost_per_hour: Any,
    items_per_print_job: Any,
    print_speed: Optional[float] = None,
) -> float:
    speed = to_safe_number(
        default_config().printer.print_speed if print_speed is None else print_speed
    )
    items = to_safe_number(items_per_print_job)
    if speed <= 0 or items <= 0:
        return 0.0
    # cost of one print job, spread over the items on the bed
    return (to_safe_number(labor_cost_per_hour) / speed) / items


def cost_per_unit(
    material_cost_per_unit: Any, ink_cost_per_unit: Any, labor_cost_per_unit: Any
) -> float:
    return (
        to_safe_number(material_cost_per_unit)
        + to_safe_number(ink_cost_per_unit)
        + to_safe_number(labor_cost_per_unit)
    )
