"""
Dimensions — raw vs. effective (billable beyond minimum) window dimensions.

Two conversions exist and call sites must pick the right one:
  - effective_width()/effective_height(): mm beyond the model minimum, clamped at 0
    (drives the per-mm profile cost)
  - to_meters(): the RAW size in meters (drives service area/perimeter)
Glass area uses neither; see GlassCalculator.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import NamedTuple

from .errors import InvalidDimensions
from .money import DECIMAL_CONTEXT, to_decimal

MILLIMETERS_PER_METER = Decimal(1000)


class Meters(NamedTuple):
    width_m: Decimal
    height_m: Decimal


@dataclass(frozen=True)
class Dimensions:
    """
    Entered width/height plus the model's minimum billable width/height, in mm.

    Only types are validated. Negative sizes are accepted and simply clamp to
    zero in the effective dimensions.
    """

    width_mm: Decimal
    height_mm: Decimal
    min_width_mm: Decimal = Decimal(0)
    min_height_mm: Decimal = Decimal(0)

    def __post_init__(self):
        for name in ("width_mm", "height_mm", "min_width_mm", "min_height_mm"):
            value = to_decimal(getattr(self, name), error=InvalidDimensions)
            object.__setattr__(self, name, value)

    def effective_width(self) -> Decimal:
        return max(DECIMAL_CONTEXT.subtract(self.width_mm, self.min_width_mm), Decimal(0))

    def effective_height(self) -> Decimal:
        return max(DECIMAL_CONTEXT.subtract(self.height_mm, self.min_height_mm), Decimal(0))

    def to_meters(self) -> Meters:
        return Meters(
            width_m=DECIMAL_CONTEXT.divide(self.width_mm, MILLIMETERS_PER_METER),
            height_m=DECIMAL_CONTEXT.divide(self.height_mm, MILLIMETERS_PER_METER),
        )
