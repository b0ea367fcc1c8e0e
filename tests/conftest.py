"""
Shared test fixtures — pricing engine, API test client, sample catalog data.
"""

import os

import pytest
from fastapi.testclient import TestClient

# Settings are read at import time
os.environ["CURRENCY"] = "COP"
os.environ["DEFAULT_PROFIT_MARGIN_PCT"] = "0"

from glassquote.main import app
from glassquote.pricing import Dimensions
from glassquote.pricing_engine import ModelPricing, PricingEngine


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def engine():
    return PricingEngine(currency="COP")


@pytest.fixture
def window_dimensions():
    """1000 x 1200 mm window on a model with 800 x 800 mm minimum."""
    return Dimensions(width_mm=1000, height_mm=1200, min_width_mm=800, min_height_mm=800)


@pytest.fixture
def sliding_model():
    """Model used across pipeline tests: base 100, 0.5/mm width, 0.3/mm height."""
    return ModelPricing(
        base_price=100,
        cost_per_mm_width="0.5",
        cost_per_mm_height="0.3",
        min_width_mm=800,
        min_height_mm=800,
    )
