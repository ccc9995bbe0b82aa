# test_simulator.py
import copy

import pytest

from app.core.config import PrinterSpecification, SimulationConfig
from app.schemas.simulate import (
    NO_PAYBACK,
    FinitePayback,
    SimulationInputs,
    SimulationResults,
    default_inputs,
)
from app.services import simulator
from app.services.simulator import apply_input_change, calculate_results, fallback_results

SAMPLE_INPUTS = {
    "shortEdge": 100,
    "longEdge": 100,
    "salesPricePerUnit": 1000,
    "monthlySalesVolume": 300,
    "materialCostPerUnit": 200,
    "laborCostPerHour": 2000,
    "inkPricePerCC": 18,
    "initialInvestment": 3780000,
}

RESULT_FIELDS = [
    "itemsPerPrintJob",
    "monthlyPrintJobs",
    "operatingHours",
    "inkUsage",
    "inkCostPerUnit",
    "laborCostPerUnit",
    "materialCostPerUnit",
    "costPerUnit",
    "monthlySales",
    "monthlyGrossProfit",
    "grossProfitMargin",
    "paybackPeriod",
    "initialInvestment",
    "inputs",
]


def test_returns_complete_record():
    results = calculate_results(SAMPLE_INPUTS)
    assert isinstance(results, SimulationResults)

    record = results.model_dump(by_alias=True)
    for name in RESULT_FIELDS:
        assert name in record
    assert record["inputs"] == SAMPLE_INPUTS
    assert results.items_per_print_job > 0


def test_sample_values():
    results = calculate_results(SAMPLE_INPUTS)
    scale = (100 / 65) ** 2
    ink_cost = (0.04 + 0.04 + 0.01) * scale * 18
    labor_cost = 2000 / 6 / 12
    unit_cost = 200 + ink_cost + labor_cost
    profit = (1000 - unit_cost) * 300

    assert results.items_per_print_job == 12
    assert results.monthly_print_jobs == 25
    assert results.operating_hours == pytest.approx(25 / 6)
    assert results.ink_usage.white == 0.09
    assert results.ink_usage.cmyk == 0.09
    assert results.ink_usage.primer == 0.02
    # costs use unrounded ink usage
    assert results.ink_cost_per_unit == pytest.approx(ink_cost)
    assert results.labor_cost_per_unit == pytest.approx(labor_cost)
    assert results.cost_per_unit == pytest.approx(unit_cost)
    assert results.monthly_sales == 300000
    assert results.monthly_gross_profit == pytest.approx(profit)
    assert results.gross_profit_margin == pytest.approx((1000 - unit_cost) / 1000 * 100)
    assert isinstance(results.payback_period, FinitePayback)
    assert results.payback_period.months == pytest.approx(3780000 / profit)


def test_none_input_returns_none():
    assert calculate_results(None) is None


def test_malformed_short_edge_falls_back_to_zero_items():
    bad = {**SAMPLE_INPUTS, "shortEdge": "abc"}
    results = calculate_results(bad)
    assert results.items_per_print_job == 0
    assert results.monthly_print_jobs == 0
    assert results.operating_hours == 0
    assert results.labor_cost_per_unit == 0
    assert results.inputs == bad


def test_empty_record_is_renderable():
    results = calculate_results({})
    assert results.items_per_print_job == 0
    assert results.monthly_sales == 0
    assert results.payback_period == NO_PAYBACK
    assert results.initial_investment == 3_780_000


def test_identical_inputs_give_identical_results():
    assert calculate_results(SAMPLE_INPUTS) == calculate_results(SAMPLE_INPUTS)


def test_inputs_are_not_mutated():
    original = copy.deepcopy(SAMPLE_INPUTS)
    calculate_results(SAMPLE_INPUTS)
    assert SAMPLE_INPUTS == original


def test_accepts_model_and_snake_case_keys():
    from_model = calculate_results(SimulationInputs(**SAMPLE_INPUTS))
    snake = {
        "short_edge": 100,
        "long_edge": 100,
        "sales_price_per_unit": 1000,
        "monthly_sales_volume": 300,
        "material_cost_per_unit": 200,
        "labor_cost_per_hour": 2000,
        "ink_price_per_cc": 18,
        "initial_investment": 3780000,
    }
    from_snake = calculate_results(snake)
    from_dict = calculate_results(SAMPLE_INPUTS)
    assert from_model.cost_per_unit == from_dict.cost_per_unit
    assert from_snake.payback_period == from_dict.payback_period


@pytest.mark.parametrize("investment", [None, "", "abc", 0, -10])
def test_missing_investment_uses_printer_price(investment):
    inputs = {**SAMPLE_INPUTS, "initialInvestment": investment}
    results = calculate_results(inputs)
    assert results.initial_investment == 3_780_000


def test_no_profit_gives_sentinel():
    results = calculate_results({**SAMPLE_INPUTS, "salesPricePerUnit": 100})
    assert results.monthly_gross_profit < 0
    assert results.gross_profit_margin < 0
    assert results.payback_period == NO_PAYBACK
    assert results.model_dump(by_alias=True)["paybackPeriod"] == {"kind": "no-payback"}


def test_injected_printer_profile():
    big_bed = SimulationConfig(
        printer=PrinterSpecification(name="XL", bed_width=610, bed_height=916, print_speed=3)
    )
    results = calculate_results(SAMPLE_INPUTS, big_bed)
    assert results.items_per_print_job == 6 * 9
    assert results.labor_cost_per_unit == pytest.approx(2000 / 3 / 54)


def test_internal_error_returns_fallback(monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("packing exploded")

    monkeypatch.setattr(simulator, "items_per_print_job", boom)
    results = calculate_results(SAMPLE_INPUTS)

    assert results.items_per_print_job == 0
    assert results.cost_per_unit == 0
    assert results.payback_period == NO_PAYBACK
    assert results.inputs == SAMPLE_INPUTS
    assert results.initial_investment == 3780000


def test_unusable_record_returns_fallback():
    results = calculate_results("not a record")
    assert results == fallback_results()


def test_apply_input_change():
    inputs = default_inputs()
    before = dict(inputs)
    updated, results = apply_input_change(inputs, "monthlySalesVolume", 600)

    assert inputs == before
    assert updated["monthlySalesVolume"] == 600
    assert results.inputs == updated
    assert results.monthly_sales == 600 * inputs["salesPricePerUnit"]


def test_default_inputs():
    inputs = default_inputs()
    assert inputs["shortEdge"] == 90
    assert inputs["inkPricePerCC"] == 18
    assert inputs["initialInvestment"] == 3_780_000


def test_logging_sink_configures_on_import():
    import importlib

    module = importlib.import_module("app.core.logging")
    assert module.logger is simulator.logger


def test_microscopic_items_compute_real_result():
    inputs = {**SAMPLE_INPUTS, "shortEdge": 1e-200, "longEdge": 1e-200}
    results = calculate_results(inputs)

    assert results != fallback_results(inputs)
    assert results.items_per_print_job > 0
    assert results.monthly_print_jobs == 1
    assert results.cost_per_unit == pytest.approx(200)
    assert isinstance(results.payback_period, FinitePayback)


def test_huge_values_do_not_fall_back():
    inputs = {**SAMPLE_INPUTS, "shortEdge": 1e200, "monthlySalesVolume": 10**400}
    results = calculate_results(inputs)

    assert results.items_per_print_job == 0
    assert results.monthly_sales == 0
    assert results.ink_cost_per_unit == 0
    assert results.inputs == inputs
