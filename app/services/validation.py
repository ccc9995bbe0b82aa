# app/services/validation.py
# -----------------------------------------------------------------------------
# Form input validation (advisory only: the engine computes regardless)
# - ranges follow the printer profile, so a bigger bed widens the edge limits
# -----------------------------------------------------------------------------
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from app.core.config import SimulationConfig, default_config
from app.schemas.validation import ValidationResult


@dataclass(frozen=True, slots=True)
class FieldRule:
    label: str
    required: bool = True
    min: Optional[float] = None
    max: Optional[float] = None
    unit: str = ""
    messages: Dict[str, str] = field(default_factory=dict)

    def message(self, kind: str) -> str:
        if kind in self.messages:
            return self.messages[kind]
        if kind == "required":
            return f"{self.label} is required"
        if kind == "type":
            return f"{self.label} must be a number"
        if kind == "min":
            return f"{self.label} must be at least {self.min:g}{self.unit}"
        return f"{self.label} must be at most {self.max:g}{self.unit}"


def build_schema(config: Optional[SimulationConfig] = None) -> Dict[str, FieldRule]:
    config = config or default_config()
    printer = config.printer
    return {
        "shortEdge": FieldRule(
            "Short edge", min=config.min_edge, max=printer.bed_width, unit="mm"
        ),
        "longEdge": FieldRule(
            "Long edge", min=config.min_edge, max=printer.bed_height, unit="mm"
        ),
        "salesPricePerUnit": FieldRule(
            "Sales price", min=0, messages={"min": "Sales price cannot be negative"}
        ),
        "monthlySalesVolume": FieldRule(
            "Monthly sales volume",
            min=0,
            max=config.max_monthly_sales_volume,
            messages={
                "min": "Monthly sales volume cannot be negative",
                "max": (
                    "Monthly sales volume cannot exceed "
                    f"{config.max_monthly_sales_volume} units"
                ),
            },
        ),
        "materialCostPerUnit": FieldRule(
            "Material cost", min=0, messages={"min": "Material cost cannot be negative"}
        ),
        "laborCostPerHour": FieldRule(
            "Labor cost", min=0, messages={"min": "Labor cost cannot be negative"}
        ),
        "inkPricePerCC": FieldRule(
            "Ink price", min=0, messages={"min": "Ink price cannot be negative"}
        ),
        "initialInvestment": FieldRule(
            "Initial investment",
            min=1,
            messages={"min": "Initial investment must be greater than zero"},
        ),
    }


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _as_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def validate_input(
    name: str, value: Any, schema: Optional[Dict[str, FieldRule]] = None
) -> ValidationResult:
    """Check one field. Names without a rule are always valid."""
    schema = schema if schema is not None else build_schema()
    rule = schema.get(name)
    if rule is None:
        return ValidationResult()

    errors: list[str] = []
    if _is_empty(value):
        if rule.required:
            errors.append(rule.message("required"))
        return ValidationResult(valid=not errors, errors=errors)

    num = _as_number(value)
    if num is None or num != num:  # NaN
        errors.append(rule.message("type"))
    else:
        if rule.min is not None and num < rule.min:
            errors.append(rule.message("min"))
        if rule.max is not None and num > rule.max:
            errors.append(rule.message("max"))

    return ValidationResult(valid=not errors, errors=errors)


def validate_all_inputs(
    inputs: Mapping[str, Any], schema: Optional[Dict[str, FieldRule]] = None
) -> Dict[str, ValidationResult]:
    schema = schema if schema is not None else build_schema()
    return {name: validate_input(name, inputs.get(name), schema) for name in schema}


def are_all_inputs_valid(results: Mapping[str, ValidationResult]) -> bool:
    return all(r.valid for r in results.values())
