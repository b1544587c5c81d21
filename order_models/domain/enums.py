"""Known wire values for discount fields."""

from enum import Enum


class OrderLineItemDiscountType(str, Enum):
    """How the discount amount is computed and applied."""

    UNKNOWN_DISCOUNT = "UNKNOWN_DISCOUNT"
    FIXED_PERCENTAGE = "FIXED_PERCENTAGE"
    FIXED_AMOUNT = "FIXED_AMOUNT"
    VARIABLE_PERCENTAGE = "VARIABLE_PERCENTAGE"
    VARIABLE_AMOUNT = "VARIABLE_AMOUNT"


class OrderLineItemDiscountScope(str, Enum):
    """Level the discount attaches to."""

    OTHER_DISCOUNT_SCOPE = "OTHER_DISCOUNT_SCOPE"
    LINE_ITEM = "LINE_ITEM"
    ORDER = "ORDER"
