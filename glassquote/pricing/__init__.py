"""
Pricing core — deterministic price calculation for glass/window line items.

Pure Python math on Decimal. No I/O, no settings, no shared state.
Given model configuration, glass pricing and the entered dimensions,
produce the glass area, the model cost and the margin-adjusted sales price.
"""

from .dimensions import Dimensions, Meters
from .errors import (
    InvalidDimensions,
    InvalidMarginError,
    InvalidMoneyValue,
    InvalidQuantityError,
    InvalidSurchargeError,
    MarginOutOfRangeError,
    PricingError,
    UnknownServiceUnitError,
)
from .glass_calculator import GlassCalculator
from .margin_calculator import MarginCalculator
from .money import Money
from .profile_calculator import ProfileCalculator
from .service_calculator import (
    AdjustmentLine,
    AdjustmentResult,
    AdjustmentSign,
    ServiceCalculator,
    ServiceLine,
    ServiceResult,
    ServiceUnit,
)

__all__ = [
    "AdjustmentLine",
    "AdjustmentResult",
    "AdjustmentSign",
    "Dimensions",
    "GlassCalculator",
    "InvalidDimensions",
    "InvalidMarginError",
    "InvalidMoneyValue",
    "InvalidQuantityError",
    "InvalidSurchargeError",
    "MarginCalculator",
    "MarginOutOfRangeError",
    "Meters",
    "Money",
    "PricingError",
    "ProfileCalculator",
    "ServiceCalculator",
    "ServiceLine",
    "ServiceResult",
    "ServiceUnit",
    "UnknownServiceUnitError",
]
