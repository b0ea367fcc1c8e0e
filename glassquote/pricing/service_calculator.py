"""
Service Calculator — additive services (installation, tempering, edge polishing)
and manual adjustments (surcharges/discounts).

Both are priced per unit type from the RAW dimensions:
  unit → fixed quantity (1, or the override: 10 screws, 4 hinges)
  sqm  → area in m²,            rounded to 2 decimals
  ml   → perimeter 2×(w+h) m,   rounded to 2 decimals

Services and adjustments are NOT affected by color surcharge or margin. They
are added to the unit price after the margin-adjusted model price.
"""

import enum
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from .dimensions import Dimensions
from .errors import UnknownServiceUnitError
from .money import DECIMAL_CONTEXT, Money, round_half_up, to_decimal

SERVICE_QUANTITY_SCALE = 2


class ServiceUnit(str, enum.Enum):
    UNIT = "unit"
    SQM = "sqm"
    ML = "ml"


class AdjustmentSign(str, enum.Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"


def _coerce_unit(unit) -> ServiceUnit:
    try:
        return ServiceUnit(unit)
    except ValueError:
        raise UnknownServiceUnitError(f"Unknown service unit: {unit!r}") from None


@dataclass(frozen=True)
class ServiceLine:
    service_id: str
    name: str
    unit: ServiceUnit
    rate: Money
    minimum_billing_unit: Optional[Decimal] = None
    quantity_override: Optional[Decimal] = None

    def __post_init__(self):
        object.__setattr__(self, "unit", _coerce_unit(self.unit))
        object.__setattr__(self, "rate", Money(self.rate))


@dataclass(frozen=True)
class ServiceResult:
    service_id: str
    name: str
    unit: ServiceUnit
    quantity: Decimal
    amount: Money


@dataclass(frozen=True)
class AdjustmentLine:
    adjustment_id: str
    concept: str
    unit: ServiceUnit
    value: Money
    sign: AdjustmentSign = AdjustmentSign.POSITIVE

    def __post_init__(self):
        object.__setattr__(self, "unit", _coerce_unit(self.unit))
        object.__setattr__(self, "value", Money(self.value))
        object.__setattr__(self, "sign", AdjustmentSign(self.sign))


@dataclass(frozen=True)
class AdjustmentResult:
    adjustment_id: str
    concept: str
    unit: ServiceUnit
    quantity: Decimal
    amount: Money


class ServiceCalculator:

    @staticmethod
    def calculate_area_quantity(dimensions: Dimensions) -> Decimal:
        meters = dimensions.to_meters()
        area = DECIMAL_CONTEXT.multiply(meters.width_m, meters.height_m)
        return round_half_up(area, SERVICE_QUANTITY_SCALE)

    @staticmethod
    def calculate_perimeter_quantity(dimensions: Dimensions) -> Decimal:
        meters = dimensions.to_meters()
        perimeter = DECIMAL_CONTEXT.multiply(2, DECIMAL_CONTEXT.add(meters.width_m, meters.height_m))
        return round_half_up(perimeter, SERVICE_QUANTITY_SCALE)

    @staticmethod
    def calculate_fixed_quantity(quantity_override=None) -> Decimal:
        if quantity_override is None:
            return Decimal(1)
        return to_decimal(quantity_override)

    @staticmethod
    def apply_minimum_billing_unit(quantity: Decimal, minimum_billing_unit=None) -> Decimal:
        """Bill at least the minimum (e.g. minimum 2 m²). None/0 → no minimum."""
        if not minimum_billing_unit:
            return quantity
        return max(quantity, to_decimal(minimum_billing_unit))

    @classmethod
    def calculate_quantity(cls, unit, dimensions: Dimensions, quantity_override=None) -> Decimal:
        unit = _coerce_unit(unit)
        if unit is ServiceUnit.UNIT:
            return cls.calculate_fixed_quantity(quantity_override)
        if quantity_override is not None:
            return round_half_up(to_decimal(quantity_override), SERVICE_QUANTITY_SCALE)
        if unit is ServiceUnit.SQM:
            return cls.calculate_area_quantity(dimensions)
        return cls.calculate_perimeter_quantity(dimensions)

    @classmethod
    def calculate_service_amount(cls, service: ServiceLine, dimensions: Dimensions) -> ServiceResult:
        """quantity (unit-based, then minimum applied) × rate."""
        quantity = cls.calculate_quantity(service.unit, dimensions, service.quantity_override)
        quantity = cls.apply_minimum_billing_unit(quantity, service.minimum_billing_unit)
        return ServiceResult(
            service_id=service.service_id,
            name=service.name,
            unit=service.unit,
            quantity=quantity,
            amount=service.rate.multiply(quantity),
        )

    @classmethod
    def calculate_adjustment_amount(cls, adjustment: AdjustmentLine,
                                    dimensions: Dimensions) -> AdjustmentResult:
        """value × unit quantity, negated for NEGATIVE adjustments."""
        quantity = cls.calculate_quantity(adjustment.unit, dimensions)
        amount = adjustment.value.multiply(quantity)
        if adjustment.sign is AdjustmentSign.NEGATIVE:
            amount = amount.negate()
        return AdjustmentResult(
            adjustment_id=adjustment.adjustment_id,
            concept=adjustment.concept,
            unit=adjustment.unit,
            quantity=quantity,
            amount=amount,
        )
