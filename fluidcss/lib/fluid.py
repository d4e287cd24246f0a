"""
Fluid interpolation into clamp().

Given two sizes and the two viewport widths at which they apply (all in rem),
computes the line through (minBreakpoint, minSize) and (maxBreakpoint,
maxSize) and expresses it as `clamp(min, intercept + slope*100vw, max)`.

When minSize is larger than maxSize the sizes and the breakpoints are both
swapped, so the bounds stay ascending while the slope turns negative and the
value shrinks as the viewport grows.
"""

import math
from fluidcss.models.dataModel import ClampResult


class DegenerateBreakpointsError(ValueError):
    """Raised when both breakpoints are equal and no slope exists."""


def value_round(value: float, precision: int = 4) -> float:
    """Round half up to `precision` decimals, as Math.round does."""
    scale: float = 10**precision
    return math.floor(value * scale + 0.5) / scale


def fluid_interpolate(
    min_size: float,
    max_size: float,
    min_breakpoint: float,
    max_breakpoint: float,
    precision: int = 4,
) -> ClampResult:
    """Compute the clamp() interpolating between two sizes.

    Args:
        min_size: Size at min_breakpoint, in rem
        max_size: Size at max_breakpoint, in rem
        min_breakpoint: Viewport width where interpolation starts, in rem
        max_breakpoint: Viewport width where interpolation ends, in rem
        precision: Decimal places for rounding and rendering

    Returns:
        ClampResult with ascending bounds

    Raises:
        DegenerateBreakpointsError: If the breakpoints round to the same value
    """
    low: float = value_round(min_size, precision)
    high: float = value_round(max_size, precision)
    start: float = value_round(min_breakpoint, precision)
    end: float = value_round(max_breakpoint, precision)

    if start == end:
        raise DegenerateBreakpointsError(
            f"Breakpoints must differ, got {min_breakpoint} and {max_breakpoint}"
        )

    if low > high:
        low, high = high, low
        start, end = end, start

    slope: float = (high - low) / (end - start)
    intercept: float = -start * slope + low

    return ClampResult(
        minimum=low,
        intercept=intercept,
        slope=slope,
        maximum=high,
        precision=precision,
    )
