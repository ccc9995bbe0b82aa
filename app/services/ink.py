# app/services/ink.py
# -----------------------------------------------------------------------------
# Ink usage model: reference consumption scaled by (short_edge / 65mm)^2
# -----------------------------------------------------------------------------
import math
from typing import Any, Optional

from app.core.config import InkProfile, default_config
from app.schemas.simulate import InkUsage
from app.services.numeric import to_safe_number

# substituted for a zero / missing / non-numeric short edge
INK_EDGE_FALLBACK = 1.0


def ink_scale(short_edge: Any, profile: Optional[InkProfile] = None) -> float:
    profile = profile or default_config().ink
    edge = to_safe_number(short_edge, fallback=INK_EDGE_FALLBACK)
    if edge == 0:
        edge = INK_EDGE_FALLBACK
    reference = to_safe_number(profile.reference_edge)
    if reference <= 0:
        return 0.0
    ratio = edge / reference
    scale = ratio * ratio
    # an edge too large to square is treated like an item that cannot be printed
    if not math.isfinite(scale):
        return 0.0
    return scale


def ink_usage(short_edge: Any, profile: Optional[InkProfile] = None) -> InkUsage:
    """Ink per item in cc, unrounded (rounding happens when results are assembled)."""
    profile = profile or default_config().ink
    scale = ink_scale(short_edge, profile)
    return InkUsage(
        white=profile.white * scale,
        cmyk=profile.cmyk * scale,
        primer=profile.primer * scale,
    )
