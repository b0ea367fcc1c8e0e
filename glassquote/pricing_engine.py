"""
Item Pricing Engine.

Combines the pricing core into one line-item price with a full breakdown.
Pure math: same inputs, same Money out, every time. The live preview and the
stored quote line must agree to the cent, so nothing here rounds: rounding
happens once, in PriceBreakdown.as_display().

Pipeline:
  1. Dimensions (entered size + model minimums)
  2. Glass: billable area × price/m²
  3. Profile: base + per-mm cost beyond minimum; accessory kit
  4. Model cost = profile + glass + accessory, × (1 + color surcharge %)
  5. Sales price = model cost / (1 - margin %)
  6. Unit price = sales price + services + adjustments   (no margin on these)
  7. Line subtotal = unit price × quantity
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional

from .pricing import (
    AdjustmentLine,
    AdjustmentResult,
    Dimensions,
    GlassCalculator,
    InvalidQuantityError,
    InvalidSurchargeError,
    MarginCalculator,
    Money,
    ProfileCalculator,
    ServiceCalculator,
    ServiceLine,
    ServiceResult,
)
from .pricing.money import DECIMAL_CONTEXT, round_half_up, to_decimal

logger = logging.getLogger(__name__)

AREA_DISPLAY_SCALE = 2


# --- Inputs ---

@dataclass(frozen=True)
class ModelPricing:
    """Per-model configuration from the catalog."""
    base_price: Money
    cost_per_mm_width: Money
    cost_per_mm_height: Money
    min_width_mm: Decimal = Decimal(0)
    min_height_mm: Decimal = Decimal(0)
    profit_margin_percentage: Decimal = Decimal(0)
    accessory_price: Optional[Money] = None

    def __post_init__(self):
        for name in ("base_price", "cost_per_mm_width", "cost_per_mm_height"):
            object.__setattr__(self, name, Money(getattr(self, name)))
        if self.accessory_price is not None:
            object.__setattr__(self, "accessory_price", Money(self.accessory_price))


@dataclass(frozen=True)
class GlassPricing:
    """Selected glass type price plus the model's profile discount per side."""
    price_per_m2: Money
    discount_width_mm: Decimal = Decimal(0)
    discount_height_mm: Decimal = Decimal(0)

    def __post_init__(self):
        object.__setattr__(self, "price_per_m2", Money(self.price_per_m2))


@dataclass(frozen=True)
class ItemPriceInput:
    """Flattened view of a cart/quote line item."""
    width_mm: Decimal
    height_mm: Decimal
    model: ModelPricing
    quantity: int = 1
    glass: Optional[GlassPricing] = None
    color_surcharge_percentage: Decimal = Decimal(0)
    services: List[ServiceLine] = field(default_factory=list)
    adjustments: List[AdjustmentLine] = field(default_factory=list)


# --- Outputs ---

@dataclass(frozen=True)
class PriceBreakdown:
    """Every intermediate value of one item price, at full precision."""
    dimensions: Dimensions
    glass_area_m2: Decimal
    glass_cost: Money
    profile_cost: Money
    accessory_cost: Money
    model_cost_before_color: Money
    color_surcharge_percentage: Decimal
    color_surcharge_amount: Money
    model_cost: Money
    margin_percentage: Decimal
    margin_amount: Money
    sales_price: Money
    services: List[ServiceResult]
    adjustments: List[AdjustmentResult]
    services_total: Money
    adjustments_total: Money
    unit_price: Money
    quantity: int
    line_subtotal: Money

    def as_display(self) -> dict:
        """Rounded view (2 decimals for money and area) for UI, storage and export."""
        return {
            "width_mm": float(self.dimensions.width_mm),
            "height_mm": float(self.dimensions.height_mm),
            "glass_area_m2": float(round_half_up(self.glass_area_m2, AREA_DISPLAY_SCALE)),
            "glass_cost": self.glass_cost.to_number(),
            "profile_cost": self.profile_cost.to_number(),
            "accessory_cost": self.accessory_cost.to_number(),
            "model_cost_before_color": self.model_cost_before_color.to_number(),
            "color_surcharge_percentage": float(self.color_surcharge_percentage),
            "color_surcharge_amount": self.color_surcharge_amount.to_number(),
            "model_cost": self.model_cost.to_number(),
            "margin_percentage": float(self.margin_percentage),
            "margin_amount": self.margin_amount.to_number(),
            "sales_price": self.sales_price.to_number(),
            "services": [
                {
                    "service_id": s.service_id,
                    "name": s.name,
                    "unit": s.unit.value,
                    "quantity": float(round_half_up(s.quantity)),
                    "amount": s.amount.to_number(),
                }
                for s in self.services
            ],
            "adjustments": [
                {
                    "adjustment_id": a.adjustment_id,
                    "concept": a.concept,
                    "unit": a.unit.value,
                    "quantity": float(round_half_up(a.quantity)),
                    "amount": a.amount.to_number(),
                }
                for a in self.adjustments
            ],
            "services_total": self.services_total.to_number(),
            "adjustments_total": self.adjustments_total.to_number(),
            "unit_price": self.unit_price.to_number(),
            "quantity": self.quantity,
            "line_subtotal": self.line_subtotal.to_number(),
        }


@dataclass(frozen=True)
class QuotePricing:
    items: List[PriceBreakdown]
    total: Money
    currency: str

    def as_display(self) -> dict:
        return {
            "items": [item.as_display() for item in self.items],
            "total": self.total.to_number(),
            "currency": self.currency,
        }


class PricingEngine:
    """
    Assembles PriceBreakdowns from catalog configuration and entered dimensions.
    Holds no mutable state; one instance can serve concurrent requests.
    """

    MAX_COLOR_SURCHARGE_PCT = Decimal(100)

    def __init__(self, currency: str = "COP"):
        self.currency = currency

    def price_item(self, item: ItemPriceInput) -> PriceBreakdown:
        quantity = self._validate_quantity(item.quantity)
        model = item.model

        # --- 1. Dimensions ---
        dimensions = Dimensions(
            width_mm=item.width_mm,
            height_mm=item.height_mm,
            min_width_mm=model.min_width_mm,
            min_height_mm=model.min_height_mm,
        )

        # --- 2. Glass (color surcharge is applied later, on the model cost) ---
        glass_area, glass_cost = self._calculate_glass(item.glass, dimensions)

        # --- 3. Profile + accessory ---
        profile_cost = ProfileCalculator.calculate_profile_cost(
            model.base_price, model.cost_per_mm_width, model.cost_per_mm_height, dimensions,
        )
        accessory_cost = ProfileCalculator.calculate_accessory_cost(model.accessory_price)

        # --- 4. Model cost with color surcharge ---
        model_cost_before_color = profile_cost.add(glass_cost).add(accessory_cost)
        surcharge_pct = self._validate_surcharge(item.color_surcharge_percentage)
        model_cost = self._apply_color_surcharge(model_cost_before_color, surcharge_pct)
        color_surcharge_amount = model_cost.subtract(model_cost_before_color)

        # --- 5. Margin (model cost only) ---
        margin_pct = MarginCalculator.validate_margin(model.profit_margin_percentage)
        sales_price = MarginCalculator.calculate_model_sales_price(model_cost, margin_pct)

        # --- 6. Services and adjustments ---
        services = [
            ServiceCalculator.calculate_service_amount(service, dimensions)
            for service in item.services
        ]
        adjustments = [
            ServiceCalculator.calculate_adjustment_amount(adjustment, dimensions)
            for adjustment in item.adjustments
        ]
        services_total = Money.sum(s.amount for s in services)
        adjustments_total = Money.sum(a.amount for a in adjustments)

        unit_price = sales_price.add(services_total).add(adjustments_total)

        # --- 7. Quantity ---
        line_subtotal = unit_price.multiply(quantity)

        logger.debug(
            "Priced %sx%smm x%d: model_cost=%s sales_price=%s unit_price=%s subtotal=%s",
            dimensions.width_mm, dimensions.height_mm, quantity,
            model_cost.amount, sales_price.amount, unit_price.amount, line_subtotal.amount,
        )

        return PriceBreakdown(
            dimensions=dimensions,
            glass_area_m2=glass_area,
            glass_cost=glass_cost,
            profile_cost=profile_cost,
            accessory_cost=accessory_cost,
            model_cost_before_color=model_cost_before_color,
            color_surcharge_percentage=surcharge_pct,
            color_surcharge_amount=color_surcharge_amount,
            model_cost=model_cost,
            margin_percentage=margin_pct,
            margin_amount=sales_price.subtract(model_cost),
            sales_price=sales_price,
            services=services,
            adjustments=adjustments,
            services_total=services_total,
            adjustments_total=adjustments_total,
            unit_price=unit_price,
            quantity=quantity,
            line_subtotal=line_subtotal,
        )

    def price_quote(self, items: List[ItemPriceInput]) -> QuotePricing:
        """Price every line item; total = sum of line subtotals."""
        breakdowns = [self.price_item(item) for item in items]
        total = Money.sum(b.line_subtotal for b in breakdowns)
        logger.info("Priced quote: %d items, total %s %s", len(breakdowns), total.amount, self.currency)
        return QuotePricing(items=breakdowns, total=total, currency=self.currency)

    def _calculate_glass(self, glass: Optional[GlassPricing], dimensions: Dimensions):
        """(billable area m², glass cost). No glass selected → (0, 0)."""
        if glass is None:
            return Decimal(0), Money.zero()
        area = GlassCalculator.calculate_billable_area(
            dimensions, glass.discount_width_mm, glass.discount_height_mm,
        )
        if glass.price_per_m2 <= Money.zero():
            return area, Money.zero()
        cost = GlassCalculator.calculate_glass_cost(
            glass.price_per_m2, dimensions, glass.discount_width_mm, glass.discount_height_mm,
        )
        return area, cost

    def _validate_surcharge(self, surcharge_percentage) -> Decimal:
        pct = to_decimal(surcharge_percentage, error=InvalidSurchargeError)
        if pct < 0 or pct > self.MAX_COLOR_SURCHARGE_PCT:
            raise InvalidSurchargeError(
                f"Color surcharge percentage must be between 0 and 100, got {surcharge_percentage}"
            )
        return pct

    def _apply_color_surcharge(self, cost: Money, surcharge_pct: Decimal) -> Money:
        if surcharge_pct == 0:
            return cost
        return cost.add(cost.percentage(surcharge_pct))

    def _validate_quantity(self, quantity) -> int:
        value = to_decimal(quantity, error=InvalidQuantityError)
        if value < 1 or value != value.to_integral_value(context=DECIMAL_CONTEXT):
            raise InvalidQuantityError(f"Quantity must be a whole number >= 1, got {quantity}")
        return int(value)
