"""
Pricing API tests — POST /api/pricing/calculate-item, /api/pricing/calculate-quote.

Fractional prices are sent as strings so they reach the server as exact decimals.
"""

from glassquote.config import settings


def _full_item_payload(**overrides):
    payload = {
        "width_mm": 1000,
        "height_mm": 2000,
        "quantity": 2,
        "model": {
            "base_price": 100,
            "cost_per_mm_width": "0.5",
            "cost_per_mm_height": "0.3",
            "min_width_mm": 800,
            "min_height_mm": 800,
            "profit_margin_percentage": 20,
        },
        "glass": {"price_per_m2": 50, "discount_width_mm": 10, "discount_height_mm": 10},
        "color_surcharge_percentage": 10,
        "services": [
            {"service_id": "svc-install", "name": "Instalación", "unit": "unit", "rate": 100},
            {"service_id": "svc-temper", "name": "Templado", "unit": "sqm", "rate": 50},
        ],
        "adjustments": [
            {"adjustment_id": "adj-1", "concept": "Descuento cliente", "unit": "unit",
             "value": 30, "sign": "negative"},
        ],
    }
    payload.update(overrides)
    return payload


def _plain_item_payload():
    return {
        "width_mm": 1000,
        "height_mm": 2000,
        "model": {
            "base_price": 100,
            "cost_per_mm_width": "0.5",
            "cost_per_mm_height": "0.3",
            "min_width_mm": 800,
            "min_height_mm": 800,
        },
        "color_surcharge_percentage": 10,
    }


# --- calculate-item ---

def test_calculate_item_returns_rounded_breakdown(client):
    resp = client.post("/api/pricing/calculate-item", json=_full_item_payload())
    assert resp.status_code == 200
    data = resp.json()
    assert data["glass_area_m2"] == 1.97
    assert data["glass_cost"] == 98.51
    assert data["profile_cost"] == 560
    assert data["model_cost"] == 724.36
    assert data["sales_price"] == 905.44
    assert data["services_total"] == 200
    assert data["adjustments_total"] == -30
    assert data["unit_price"] == 1075.44
    assert data["quantity"] == 2
    assert data["line_subtotal"] == 2150.89
    assert data["currency"] == "COP"


def test_calculate_item_lists_services_and_adjustments(client):
    data = client.post("/api/pricing/calculate-item", json=_full_item_payload()).json()
    assert [s["service_id"] for s in data["services"]] == ["svc-install", "svc-temper"]
    assert data["services"][1]["unit"] == "sqm"
    assert data["services"][1]["quantity"] == 2
    assert data["adjustments"][0]["amount"] == -30


def test_missing_margin_uses_default(client):
    data = client.post("/api/pricing/calculate-item", json=_plain_item_payload()).json()
    assert data["margin_percentage"] == 0
    assert data["model_cost"] == 616
    assert data["sales_price"] == 616
    assert data["line_subtotal"] == 616


def test_default_margin_setting_applies_when_margin_missing(client, monkeypatch):
    monkeypatch.setattr(settings, "DEFAULT_PROFIT_MARGIN_PCT", 20.0)
    data = client.post("/api/pricing/calculate-item", json=_plain_item_payload()).json()
    assert data["margin_percentage"] == 20
    assert data["model_cost"] == 616
    # 616 / 0.8
    assert data["sales_price"] == 770
    assert data["margin_amount"] == 154


def test_explicit_margin_overrides_default_setting(client, monkeypatch):
    monkeypatch.setattr(settings, "DEFAULT_PROFIT_MARGIN_PCT", 20.0)
    payload = _plain_item_payload()
    payload["model"]["profit_margin_percentage"] = 0
    data = client.post("/api/pricing/calculate-item", json=payload).json()
    assert data["margin_percentage"] == 0
    assert data["sales_price"] == 616


def test_zero_width_rejected(client):
    resp = client.post("/api/pricing/calculate-item", json=_full_item_payload(width_mm=0))
    assert resp.status_code == 422


def test_fractional_quantity_rejected(client):
    resp = client.post("/api/pricing/calculate-item", json=_full_item_payload(quantity=1.5))
    assert resp.status_code == 422


def test_unknown_service_unit_rejected(client):
    payload = _full_item_payload(services=[
        {"service_id": "svc-x", "name": "Peso", "unit": "kg", "rate": 1},
    ])
    resp = client.post("/api/pricing/calculate-item", json=payload)
    assert resp.status_code == 422


def test_margin_of_100_returns_pricing_error(client):
    payload = _full_item_payload()
    payload["model"]["profit_margin_percentage"] = 100
    resp = client.post("/api/pricing/calculate-item", json=payload)
    assert resp.status_code == 422
    assert "Margin percentage" in resp.json()["detail"]


def test_oversized_amount_rejected_by_validation(client):
    payload = _full_item_payload()
    payload["model"]["base_price"] = "1e40"
    resp = client.post("/api/pricing/calculate-item", json=payload)
    assert resp.status_code == 422


def test_oversized_width_rejected_by_validation(client):
    resp = client.post("/api/pricing/calculate-item", json=_full_item_payload(width_mm="1e40"))
    assert resp.status_code == 422


def test_price_too_large_to_display_returns_pricing_error(client):
    """Margin 99.999...% divides 616 by 1e-32; the result no longer rounds to cents."""
    payload = _plain_item_payload()
    payload["model"]["profit_margin_percentage"] = "99." + "9" * 30
    resp = client.post("/api/pricing/calculate-item", json=payload)
    assert resp.status_code == 422
    assert "too large" in resp.json()["detail"]


def test_color_surcharge_over_100_rejected(client):
    resp = client.post("/api/pricing/calculate-item",
                       json=_full_item_payload(color_surcharge_percentage=150))
    assert resp.status_code == 422


# --- calculate-quote ---

def test_calculate_quote_total(client):
    resp = client.post("/api/pricing/calculate-quote",
                       json={"items": [_full_item_payload(), _plain_item_payload()]})
    assert resp.status_code == 200
    data = resp.json()
    assert len(data["items"]) == 2
    assert data["items"][0]["line_subtotal"] == 2150.89
    assert data["items"][1]["line_subtotal"] == 616
    assert data["total"] == 2766.89
    assert data["currency"] == "COP"


def test_calculate_quote_requires_items(client):
    resp = client.post("/api/pricing/calculate-quote", json={"items": []})
    assert resp.status_code == 422


def test_calculate_quote_rejects_bad_item(client):
    bad = _full_item_payload()
    bad["model"]["profit_margin_percentage"] = 100
    resp = client.post("/api/pricing/calculate-quote", json={"items": [_plain_item_payload(), bad]})
    assert resp.status_code == 422


# --- health ---

def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"
    assert resp.json()["currency"] == "COP"
