"""
Converters between domain value objects and the JSON wire format.
"""

from .discount_converter import (
    deserialize,
    deserialize_money,
    from_json,
    serialize,
    serialize_money,
    to_json,
)

__all__ = ["deserialize", "deserialize_money", "from_json", "serialize", "serialize_money", "to_json"]
