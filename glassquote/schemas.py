from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from .pricing import AdjustmentSign, ServiceUnit

# Upper bounds keep every computed amount well inside the 34-digit pricing context
MAX_AMOUNT = Decimal("1e12")
MAX_SIZE_MM = Decimal(100000)
MAX_QUANTITY = 100000


# --- Requests ---

class ModelPricingIn(BaseModel):
    base_price: Decimal = Field(ge=0, le=MAX_AMOUNT)
    cost_per_mm_width: Decimal = Field(Decimal(0), ge=0, le=MAX_AMOUNT)
    cost_per_mm_height: Decimal = Field(Decimal(0), ge=0, le=MAX_AMOUNT)
    min_width_mm: Decimal = Field(Decimal(0), ge=0, le=MAX_SIZE_MM)
    min_height_mm: Decimal = Field(Decimal(0), ge=0, le=MAX_SIZE_MM)
    # Range is enforced by the pricing core (MarginOutOfRangeError)
    profit_margin_percentage: Optional[Decimal] = None
    accessory_price: Optional[Decimal] = Field(None, ge=0, le=MAX_AMOUNT)


class GlassPricingIn(BaseModel):
    price_per_m2: Decimal = Field(ge=0, le=MAX_AMOUNT)
    discount_width_mm: Decimal = Field(Decimal(0), ge=0, le=MAX_SIZE_MM)
    discount_height_mm: Decimal = Field(Decimal(0), ge=0, le=MAX_SIZE_MM)


class ServiceIn(BaseModel):
    service_id: str
    name: str
    unit: ServiceUnit
    rate: Decimal = Field(ge=0, le=MAX_AMOUNT)
    minimum_billing_unit: Optional[Decimal] = Field(None, ge=0, le=MAX_QUANTITY)
    quantity_override: Optional[Decimal] = Field(None, ge=0, le=MAX_QUANTITY)


class AdjustmentIn(BaseModel):
    adjustment_id: str
    concept: str
    unit: ServiceUnit
    value: Decimal = Field(ge=0, le=MAX_AMOUNT)
    sign: AdjustmentSign = AdjustmentSign.POSITIVE


class ItemPriceRequest(BaseModel):
    width_mm: Decimal = Field(gt=0, le=MAX_SIZE_MM)
    height_mm: Decimal = Field(gt=0, le=MAX_SIZE_MM)
    quantity: int = Field(1, ge=1, le=MAX_QUANTITY)
    model: ModelPricingIn
    glass: Optional[GlassPricingIn] = None
    color_surcharge_percentage: Decimal = Field(Decimal(0), ge=0, le=100)
    services: List[ServiceIn] = []
    adjustments: List[AdjustmentIn] = []


class QuotePriceRequest(BaseModel):
    items: List[ItemPriceRequest] = Field(min_length=1)


# --- Responses (display-rounded) ---

class ServiceLineOut(BaseModel):
    service_id: str
    name: str
    unit: ServiceUnit
    quantity: float
    amount: float


class AdjustmentLineOut(BaseModel):
    adjustment_id: str
    concept: str
    unit: ServiceUnit
    quantity: float
    amount: float


class ItemPriceResponse(BaseModel):
    width_mm: float
    height_mm: float
    glass_area_m2: float
    glass_cost: float
    profile_cost: float
    accessory_cost: float
    model_cost_before_color: float
    color_surcharge_percentage: float
    color_surcharge_amount: float
    model_cost: float
    margin_percentage: float
    margin_amount: float
    sales_price: float
    services: List[ServiceLineOut] = []
    adjustments: List[AdjustmentLineOut] = []
    services_total: float
    adjustments_total: float
    unit_price: float
    quantity: int
    line_subtotal: float
    currency: str


class QuotePriceResponse(BaseModel):
    items: List[ItemPriceResponse]
    total: float
    currency: str
