"""
Pricing endpoints — the authoritative server-side price calculation.

POST /api/pricing/calculate-item  — one line item, full breakdown
POST /api/pricing/calculate-quote — several line items + quote total

The client computes the same numbers for live preview; what is stored on the
quote line comes from here.
"""

import logging

from fastapi import APIRouter, HTTPException

from .. import schemas
from ..config import settings
from ..pricing import AdjustmentLine, PricingError, ServiceLine
from ..pricing_engine import GlassPricing, ItemPriceInput, ModelPricing, PricingEngine

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/pricing", tags=["pricing"])

engine = PricingEngine(currency=settings.CURRENCY)


def to_item_input(req: schemas.ItemPriceRequest) -> ItemPriceInput:
    """Map a validated request onto the pricing core's input types."""
    margin = req.model.profit_margin_percentage
    if margin is None:
        margin = settings.DEFAULT_PROFIT_MARGIN_PCT

    model = ModelPricing(
        base_price=req.model.base_price,
        cost_per_mm_width=req.model.cost_per_mm_width,
        cost_per_mm_height=req.model.cost_per_mm_height,
        min_width_mm=req.model.min_width_mm,
        min_height_mm=req.model.min_height_mm,
        profit_margin_percentage=margin,
        accessory_price=req.model.accessory_price,
    )
    glass = None
    if req.glass is not None:
        glass = GlassPricing(
            price_per_m2=req.glass.price_per_m2,
            discount_width_mm=req.glass.discount_width_mm,
            discount_height_mm=req.glass.discount_height_mm,
        )
    return ItemPriceInput(
        width_mm=req.width_mm,
        height_mm=req.height_mm,
        model=model,
        quantity=req.quantity,
        glass=glass,
        color_surcharge_percentage=req.color_surcharge_percentage,
        services=[
            ServiceLine(
                service_id=s.service_id,
                name=s.name,
                unit=s.unit,
                rate=s.rate,
                minimum_billing_unit=s.minimum_billing_unit,
                quantity_override=s.quantity_override,
            )
            for s in req.services
        ],
        adjustments=[
            AdjustmentLine(
                adjustment_id=a.adjustment_id,
                concept=a.concept,
                unit=a.unit,
                value=a.value,
                sign=a.sign,
            )
            for a in req.adjustments
        ],
    )


@router.post("/calculate-item", response_model=schemas.ItemPriceResponse)
def calculate_item(req: schemas.ItemPriceRequest):
    """Price one line item. Pricing errors → 422 with the core's message."""
    try:
        breakdown = engine.price_item(to_item_input(req))
        display = breakdown.as_display()
    except PricingError as e:
        logger.warning("Item price calculation rejected: %s", e)
        raise HTTPException(status_code=422, detail=str(e))
    return {**display, "currency": engine.currency}


@router.post("/calculate-quote", response_model=schemas.QuotePriceResponse)
def calculate_quote(req: schemas.QuotePriceRequest):
    """Price every item of a quote and sum the line subtotals."""
    try:
        quote = engine.price_quote([to_item_input(item) for item in req.items])
        display = quote.as_display()
    except PricingError as e:
        logger.warning("Quote price calculation rejected: %s", e)
        raise HTTPException(status_code=422, detail=str(e))
    return {
        "items": [{**item, "currency": quote.currency} for item in display["items"]],
        "total": display["total"],
        "currency": quote.currency,
    }
