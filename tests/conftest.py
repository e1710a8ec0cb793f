"""Pytest configuration and fixtures."""

from collections.abc import Generator
from datetime import date, datetime

import pytest

from src.config import reset_settings
from src.core.entities.inventory import MovementType, Product, StockMovement


@pytest.fixture(autouse=True)
def fresh_settings() -> Generator[None, None, None]:
    """Re-read settings from the environment for every test."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def report_range() -> tuple[date, date]:
    """Inclusive reporting window used across tests."""
    return date(2024, 6, 1), date(2024, 6, 30)


@pytest.fixture
def sample_products() -> list[Product]:
    """Small inventory snapshot."""
    return [
        Product(
            id="P1",
            barcode="6001001",
            name="Paracetamol 500mg",
            category="Analgesics",
            cost_price=10.0,
            selling_price=15.0,
            current_quantity=50,
        ),
        Product(
            id="P2",
            barcode="6001002",
            name="Amoxicillin 250mg",
            category="Antibiotics",
            cost_price=5.0,
            selling_price=8.0,
            current_quantity=12,
        ),
    ]


@pytest.fixture
def sample_movements() -> list[StockMovement]:
    """Movements for P1 only."""
    return [
        StockMovement(
            id="M1",
            product_id="P1",
            type=MovementType.IN,
            quantity=30,
            timestamp=datetime(2024, 6, 3, 9, 30),
            batch_number="B-001",
            performed_by="Ama",
        ),
        StockMovement(
            id="M2",
            product_id="P1",
            type=MovementType.OUT,
            quantity=20,
            timestamp=datetime(2024, 6, 10, 14, 0),
            reason="POS sale",
            performed_by="Kofi",
        ),
    ]


@pytest.fixture
def sample_product_payload() -> list[dict]:
    """Inventory endpoint payload (wire shape)."""
    return [
        {
            "_id": "P1",
            "barcode": "6001001",
            "name": "Paracetamol 500mg",
            "category": "Analgesics",
            "costPrice": 10,
            "sellingPrice": 15,
            "quantity": 50,
        },
        {
            "_id": "P2",
            "barcode": "6001002",
            "name": "Amoxicillin 250mg",
            "category": "Antibiotics",
            "costPrice": 5,
            "sellingPrice": 8,
            "quantity": 12,
        },
    ]


@pytest.fixture
def sample_movement_payload() -> list[dict]:
    """Stock-history endpoint payload (wire shape)."""
    return [
        {
            "_id": "M1",
            "productId": "P1",
            "productName": "Paracetamol 500mg",
            "type": "in",
            "quantity": 30,
            "batchNumber": "B-001",
            "reason": "",
            "performedBy": "Ama",
            "createdAt": "2024-06-03T09:30:00Z",
        },
        {
            "_id": "M2",
            "productId": "P1",
            "productName": "Paracetamol 500mg",
            "type": "out",
            "quantity": 20,
            "batchNumber": "",
            "reason": "POS sale",
            "performedBy": "Kofi",
            "createdAt": "2024-06-10T14:00:00Z",
        },
    ]
