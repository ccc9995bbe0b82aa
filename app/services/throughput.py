# app/services/throughput.py
# -----------------------------------------------------------------------------
# Throughput estimator: monthly print jobs and machine hours
# -----------------------------------------------------------------------------
import math
from typing import Any, Optional

from app.core.config import default_config
from app.services.numeric import to_safe_number


def monthly_print_jobs(monthly_sales_volume: Any, items_per_print_job: Any) -> int:
    """Print jobs needed per month, rounded up; 0 when nothing fits on the bed."""
    volume = to_safe_number(monthly_sales_volume)
    per_job = to_safe_number(items_per_print_job)
    if per_job <= 0 or volume <= 0:
        return 0
    return int(math.ceil(volume / per_job))


def operating_hours(monthly_print_jobs: Any, print_speed: Optional[float] = None) -> float:
    speed = to_safe_number(
        default_config().printer.print_speed if print_speed is None else print_speed
    )
    if speed <= 0:
        return 0.0
    return to_safe_number(monthly_print_jobs) / speed
