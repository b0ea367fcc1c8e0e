"""
Pricing error taxonomy.

Every error is a ValueError so callers that only care about "bad input"
can catch one thing. The core raises these and never catches them.
"""


class PricingError(ValueError):
    """Base class for all pricing core errors."""


class InvalidMoneyValue(PricingError):
    """Input is not parseable as a finite decimal amount."""


class InvalidDimensions(PricingError):
    """A width/height/minimum is not a number."""


class InvalidMarginError(PricingError):
    """Margin percentage cannot be used to invert a cost."""


class MarginOutOfRangeError(InvalidMarginError):
    """Margin percentage outside [0, 100). 100 would divide by zero."""


class InvalidQuantityError(PricingError):
    """Line item quantity is not a whole number >= 1."""


class UnknownServiceUnitError(PricingError):
    """Service/adjustment unit is not one of unit, sqm, ml."""


class InvalidSurchargeError(PricingError):
    """Color surcharge percentage outside [0, 100]."""
