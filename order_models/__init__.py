"""
Client-side models for the orders API.

Immutable value objects with builders, plus the converters that move
them to and from the JSON wire format.
"""

from order_models.domain.enums import OrderLineItemDiscountScope, OrderLineItemDiscountType
from order_models.domain.models import OrderLineItemDiscount, OrderLineItemDiscountBuilder
from order_models.domain.value_objects import Money, MoneyBuilder
from order_models.utils.error_handler import AppException, MalformedPayloadException, SerializationException

__all__ = [
    "AppException",
    "MalformedPayloadException",
    "Money",
    "MoneyBuilder",
    "OrderLineItemDiscount",
    "OrderLineItemDiscountBuilder",
    "OrderLineItemDiscountScope",
    "OrderLineItemDiscountType",
    "SerializationException",
]
