# app/services/simulator.py
# -----------------------------------------------------------------------------
# Orchestrator: flat input record -> SimulationResults
#   packing -> throughput -> ink -> costs -> profitability -> assemble
# - never raises: None input -> None, unexpected errors -> zeroed fallback
# -----------------------------------------------------------------------------
from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from app.core.config import SimulationConfig, default_config
from app.core.logging import logger
from app.schemas.simulate import (
    NO_PAYBACK,
    InkUsage,
    SimulationInputs,
    SimulationResults,
)
from app.services.costs import cost_per_unit, ink_cost_per_unit, labor_cost_per_unit
from app.services.ink import ink_usage
from app.services.numeric import to_safe_number
from app.services.packing import items_per_print_job
from app.services.profitability import (
    gross_profit_margin,
    monthly_gross_profit,
    monthly_sales,
    payback_period,
)
from app.services.throughput import monthly_print_jobs, operating_hours

InputsLike = Union[SimulationInputs, Mapping[str, Any]]

# snake_case attribute -> camelCase key used by the form layer
_INPUT_KEYS = {
    name: (field.alias or to_camel(name))
    for name, field in SimulationInputs.model_fields.items()
}


def _as_record(inputs: InputsLike) -> dict:
    if isinstance(inputs, BaseModel):
        return inputs.model_dump(by_alias=True)
    return dict(inputs)


def _pick(record: Mapping[str, Any], name: str) -> Any:
    """Read a field by its camelCase key, falling back to the snake_case name."""
    key = _INPUT_KEYS[name]
    if key in record:
        return record[key]
    return record.get(name)


def resolve_initial_investment(value: Any, config: SimulationConfig) -> float:
    """Missing, non-numeric or non-positive investments use the printer price."""
    investment = to_safe_number(value)
    if investment <= 0:
        return float(config.printer.initial_investment)
    return investment


def calculate_results(
    inputs: Optional[InputsLike], config: Optional[SimulationConfig] = None
) -> Optional[SimulationResults]:
    """
    Run the whole pipeline for one set of form values.

    Returns None for a None record. Any exception raised inside the pipeline
    is logged and turned into `fallback_results`, so callers only ever see a
    renderable result or None. The caller's record is never mutated; it is
    echoed back (as a copy) in `results.inputs`.
    """
    if inputs is None:
        logger.warning("calculate_results called without inputs")
        return None

    config = config or default_config()
    try:
        return _run_pipeline(_as_record(inputs), config)
    except Exception:
        logger.exception("simulation failed, returning fallback result")
        return fallback_results(inputs, config)


def _run_pipeline(record: dict, config: SimulationConfig) -> SimulationResults:
    printer = config.printer

    short_edge = _pick(record, "short_edge")
    long_edge = _pick(record, "long_edge")
    sales_price = to_safe_number(_pick(record, "sales_price_per_unit"))
    volume = to_safe_number(_pick(record, "monthly_sales_volume"))
    material = to_safe_number(_pick(record, "material_cost_per_unit"))
    labor_rate = to_safe_number(_pick(record, "labor_cost_per_hour"))
    ink_price = to_safe_number(_pick(record, "ink_price_per_cc"))
    investment = resolve_initial_investment(_pick(record, "initial_investment"), config)

    items = items_per_print_job(short_edge, long_edge, printer.bed_width, printer.bed_height)
    jobs = monthly_print_jobs(volume, items)
    hours = operating_hours(jobs, printer.print_speed)

    usage = ink_usage(short_edge, config.ink)
    ink_cost = ink_cost_per_unit(usage, ink_price)
    labor_cost = labor_cost_per_unit(labor_rate, items, printer.print_speed)
    unit_cost = cost_per_unit(material, ink_cost, labor_cost)

    sales = monthly_sales(sales_price, volume)
    profit = monthly_gross_profit(sales_price, unit_cost, volume)
    margin = gross_profit_margin(sales_price, unit_cost)
    payback = payback_period(profit, investment)

    logger.debug(
        "simulation items={} jobs={} cost={:.2f} profit={:.0f} payback={}",
        items,
        jobs,
        unit_cost,
        profit,
        payback.kind,
    )

    return SimulationResults(
        items_per_print_job=items,
        monthly_print_jobs=jobs,
        operating_hours=hours,
        ink_usage=InkUsage(
            white=round(usage.white, 2),
            cmyk=round(usage.cmyk, 2),
            primer=round(usage.primer, 2),
        ),
        ink_cost_per_unit=ink_cost,
        labor_cost_per_unit=labor_cost,
        material_cost_per_unit=material,
        cost_per_unit=unit_cost,
        monthly_sales=sales,
        monthly_gross_profit=profit,
        gross_profit_margin=margin,
        payback_period=payback,
        initial_investment=investment,
        inputs=record,
    )


def fallback_results(
    inputs: Optional[InputsLike] = None, config: Optional[SimulationConfig] = None
) -> SimulationResults:
    """Zeroed, renderable result used when the pipeline blows up."""
    config = config or default_config()
    try:
        record = _as_record(inputs) if inputs is not None else {}
    except (TypeError, ValueError):
        record = {}
    investment = resolve_initial_investment(_pick(record, "initial_investment"), config)
    return SimulationResults(
        items_per_print_job=0,
        monthly_print_jobs=0,
        operating_hours=0.0,
        ink_usage=InkUsage(),
        ink_cost_per_unit=0.0,
        labor_cost_per_unit=0.0,
        material_cost_per_unit=0.0,
        cost_per_unit=0.0,
        monthly_sales=0.0,
        monthly_gross_profit=0.0,
        gross_profit_margin=0.0,
        payback_period=NO_PAYBACK,
        initial_investment=investment,
        inputs=record,
    )


def apply_input_change(
    inputs: InputsLike,
    name: str,
    value: Any,
    config: Optional[SimulationConfig] = None,
) -> tuple[dict, Optional[SimulationResults]]:
    """Copy of `inputs` with one field replaced, plus results for the new record."""
    updated = _as_record(inputs)
    updated[name] = value
    return updated, calculate_results(updated, config)
