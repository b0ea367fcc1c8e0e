"""
Profile Calculator — aluminium/PVC frame cost.

Linear model: the base price covers the model up to its minimum size, every
extra millimeter beyond the minimum costs cost_per_mm.

  profile = base + cost_per_mm_width × effective_width + cost_per_mm_height × effective_height
"""

from .dimensions import Dimensions
from .money import Money


class ProfileCalculator:

    @staticmethod
    def calculate_width_cost(cost_per_mm_width, extra_width_mm) -> Money:
        return Money(cost_per_mm_width).multiply(extra_width_mm)

    @staticmethod
    def calculate_height_cost(cost_per_mm_height, extra_height_mm) -> Money:
        return Money(cost_per_mm_height).multiply(extra_height_mm)

    @classmethod
    def calculate_profile_cost(cls, base_price, cost_per_mm_width, cost_per_mm_height,
                               dimensions: Dimensions) -> Money:
        width_cost = cls.calculate_width_cost(cost_per_mm_width, dimensions.effective_width())
        height_cost = cls.calculate_height_cost(cost_per_mm_height, dimensions.effective_height())
        return Money(base_price).add(width_cost).add(height_cost)

    @staticmethod
    def calculate_accessory_cost(accessory_price=None) -> Money:
        """Accessory kit (handles, locks). Missing price → 0."""
        if accessory_price is None:
            return Money.zero()
        return Money(accessory_price)
