"""Fixtures compartidos para los tests de order_models."""

import pytest

from order_models.core.config import get_settings
from order_models.domain.models import OrderLineItemDiscount
from order_models.domain.value_objects import Money


@pytest.fixture(autouse=True)
def fresh_settings():
    """Cada test lee la configuración desde cero."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def full_discount() -> OrderLineItemDiscount:
    """Descuento con todos los campos presentes."""
    return (
        OrderLineItemDiscount.builder()
        .uid("d1")
        .catalog_object_id("CATALOG-42")
        .name("Black Friday")
        .type("FIXED_AMOUNT")
        .amount_money(Money(amount=500, currency="USD"))
        .applied_money(Money(amount=450, currency="USD"))
        .metadata({"campaign": "bf-2025", "source": "pos"})
        .scope("ORDER")
        .build()
    )


@pytest.fixture
def percentage_payload() -> dict:
    """Payload mínimo de un descuento porcentual."""
    return {"uid": "d1", "type": "FIXED_PERCENTAGE", "percentage": "7.25", "scope": "LINE_ITEM"}
