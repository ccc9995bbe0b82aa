# app/services/packing.py
# -----------------------------------------------------------------------------
# Geometry packer: how many items fit on the printer bed in one print job
# - plain grid packing, both orientations tried, no mixed layouts
# -----------------------------------------------------------------------------
import math
import sys
from typing import Any, Optional

from app.core.config import default_config
from app.services.numeric import to_safe_number

# upper bound for microscopic items, keeps the count a float-convertible int
MAX_ITEMS_PER_PRINT_JOB = sys.maxsize


def _fit(bed_side: float, edge: float) -> int:
    quotient = bed_side / edge
    if not math.isfinite(quotient):
        return MAX_ITEMS_PER_PRINT_JOB
    return min(math.floor(quotient), MAX_ITEMS_PER_PRINT_JOB)


def items_per_print_job(
    short_edge: Any,
    long_edge: Any,
    bed_width: Optional[float] = None,
    bed_height: Optional[float] = None,
) -> int:
    """
    Maximum number of short x long items tiled on a bed_width x bed_height bed.

    orientation 1: short edge along the bed width, long edge along the height
    orientation 2: long edge along the bed width, short edge along the height
    Degenerate (<= 0, non-numeric) or oversized items yield 0. The count is
    capped at MAX_ITEMS_PER_PRINT_JOB.
    """
    printer = default_config().printer
    width = to_safe_number(printer.bed_width if bed_width is None else bed_width)
    height = to_safe_number(printer.bed_height if bed_height is None else bed_height)
    short = to_safe_number(short_edge)
    long = to_safe_number(long_edge)

    if short <= 0 or long <= 0 or width <= 0 or height <= 0:
        return 0
    # an edge longer than both bed sides cannot be placed in any orientation
    if short > width and short > height:
        return 0
    if long > width and long > height:
        return 0

    orientation1 = _fit(width, short) * _fit(height, long)
    orientation2 = _fit(width, long) * _fit(height, short)
    return min(max(orientation1, orientation2), MAX_ITEMS_PER_PRINT_JOB)
