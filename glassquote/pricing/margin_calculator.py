"""
Margin Calculator — turns a cost into a sales price.

Margin is a share of the SALES price, not a markup on cost:

  sales_price = cost / (1 - margin/100)

  100 at 20% → 125    (125 - 100) / 125 = 20%   ✓
  100 × 1.20 = 120    (120 - 100) / 120 = 16.7% ✗  (markup, not margin)

Margin is applied to the model cost only (profile + glass + accessory, with
color surcharge). Services and adjustments are added after, un-margined.
"""

from decimal import Decimal

from .errors import InvalidMarginError, MarginOutOfRangeError
from .money import DECIMAL_CONTEXT, Money, to_decimal

MAX_MARGIN_PERCENTAGE = Decimal(100)


class MarginCalculator:

    @staticmethod
    def validate_margin(margin_percentage) -> Decimal:
        """Returns the margin as Decimal; raises if it can't be inverted."""
        margin = to_decimal(margin_percentage, error=InvalidMarginError)
        if margin < 0 or margin >= MAX_MARGIN_PERCENTAGE:
            raise MarginOutOfRangeError(
                f"Margin percentage must be in [0, 100), got {margin_percentage}"
            )
        return margin

    @classmethod
    def calculate_sales_price(cls, cost, margin_percentage) -> Money:
        margin = cls.validate_margin(margin_percentage)
        divisor = DECIMAL_CONTEXT.subtract(1, DECIMAL_CONTEXT.divide(margin, MAX_MARGIN_PERCENTAGE))
        return Money(cost).divide(divisor)

    @classmethod
    def calculate_model_sales_price(cls, model_cost, margin_percentage) -> Money:
        """Sales price for a combined model cost (profile + glass [+ color])."""
        return cls.calculate_sales_price(model_cost, margin_percentage)

    @staticmethod
    def realized_margin(cost, sales_price) -> Decimal:
        """Margin percentage a sales price represents: (sales - cost) / sales × 100."""
        sales = Money(sales_price)
        if sales.is_zero():
            return Decimal(0)
        profit = DECIMAL_CONTEXT.subtract(sales.amount, Money(cost).amount)
        return DECIMAL_CONTEXT.multiply(DECIMAL_CONTEXT.divide(profit, sales.amount), 100)
