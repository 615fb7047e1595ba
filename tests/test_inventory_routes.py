"""
Tests for the inventory stock check.
"""

import pytest


@pytest.fixture
async def stocked(db):
    await db.inventory.insert_many([
        {"_id": 1, "sku_code": "iphone_13", "quantity": 100},
        {"_id": 2, "sku_code": "iphone_13_red", "quantity": 0},
    ])
    return db


@pytest.mark.parametrize(
    "sku_code,expected",
    [("iphone_13", True), ("iphone_13_red", False), ("unknown_sku", False)],
)
async def test_is_in_stock(client, stocked, sku_code: str, expected: bool) -> None:
    response = await client.get(f"/api/v1/inventory/{sku_code}")
    assert response.status_code == 200
    assert response.json() is expected
