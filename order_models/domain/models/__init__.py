"""
Domain models for order payload entities.

Each model is an immutable value object paired with a builder
used to create and derive instances.
"""

from .order_line_item_discount import OrderLineItemDiscount, OrderLineItemDiscountBuilder

__all__ = ["OrderLineItemDiscount", "OrderLineItemDiscountBuilder"]
