"""
Glass Calculator — billable glass area and glass cost.

A 1000mm x 1000mm frame does not hold 1 m² of glass: the profiles overlap the
pane. The model's profile discount (mm per side) is subtracted from the RAW
width/height before computing area. The model minimum dimension plays no part
here; it only affects the per-mm profile cost.

  billable_w = max(width_mm - discount_w, 0)
  billable_h = max(height_mm - discount_h, 0)
  area_m2    = (billable_w / 1000) × (billable_h / 1000)
  cost       = price_per_m2 × area_m2

Area is exact (Decimal, never rounded). Cost keeps full Money precision.
"""

from decimal import Decimal

from .dimensions import MILLIMETERS_PER_METER, Dimensions
from .errors import InvalidDimensions
from .money import DECIMAL_CONTEXT, Money, to_decimal


class GlassCalculator:
    """Stateless. Methods are plain functions grouped on a class."""

    @staticmethod
    def billable_side_mm(raw_mm, discount_mm) -> Decimal:
        """Raw side minus discount, clamped at 0. Negative discounts count as 0."""
        discount = max(to_decimal(discount_mm, error=InvalidDimensions), Decimal(0))
        raw = to_decimal(raw_mm, error=InvalidDimensions)
        return max(DECIMAL_CONTEXT.subtract(raw, discount), Decimal(0))

    @classmethod
    def calculate_billable_area(cls, dimensions: Dimensions,
                                discount_width_mm=0, discount_height_mm=0) -> Decimal:
        """Billable glass area in m²."""
        width_mm = cls.billable_side_mm(dimensions.width_mm, discount_width_mm)
        height_mm = cls.billable_side_mm(dimensions.height_mm, discount_height_mm)
        return DECIMAL_CONTEXT.multiply(
            DECIMAL_CONTEXT.divide(width_mm, MILLIMETERS_PER_METER),
            DECIMAL_CONTEXT.divide(height_mm, MILLIMETERS_PER_METER),
        )

    @classmethod
    def calculate_glass_cost(cls, price_per_m2, dimensions: Dimensions,
                             profile_discount_width_mm=0,
                             profile_discount_height_mm=0) -> Money:
        """price_per_m2 × billable area. Accepts Money or anything Money() accepts."""
        area = cls.calculate_billable_area(
            dimensions, profile_discount_width_mm, profile_discount_height_mm,
        )
        return Money(price_per_m2).multiply(area)
