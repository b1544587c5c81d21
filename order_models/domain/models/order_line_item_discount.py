"""
Order line item discount (value object + builder).

Represents a discount applied to a single line item or to a whole order,
as returned and accepted by the orders API.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields

from order_models.domain.value_objects.money import Money


@dataclass(frozen=True, eq=False, repr=False)
class OrderLineItemDiscount:
    """
    Immutable value object representing an order line item discount.

    Every field is optional and stored verbatim: no normalization and no
    business validation happen here. Any combination of fields, including
    none at all, produces a valid object.

    `amount_money`, `applied_money` and `metadata` are shared by reference
    with whoever supplied them and must be treated as immutable by callers.

    Attributes:
        uid: ID of the discount, unique only within its order
        catalog_object_id: ID of the catalog discount this one comes from
        name: Display name
        type: How the discount is applied (see OrderLineItemDiscountType)
        percentage: Decimal as string; "7.25" means 7.25%. Not set for
            amount-based discounts
        amount_money: Amount for amount-based discounts
        applied_money: Money actually applied after computation
        metadata: Application-defined string annotations. Keys are at most
            60 chars of [a-zA-Z0-9_-], values at most 255 chars, up to 10
            entries per application (documented, not enforced)
        scope: LINE_ITEM or ORDER (see OrderLineItemDiscountScope)
    """

    uid: str | None = None
    catalog_object_id: str | None = None
    name: str | None = None
    type: str | None = None
    percentage: str | None = None
    amount_money: Money | None = None
    applied_money: Money | None = None
    metadata: Mapping[str, str] | None = None
    scope: str | None = None

    @classmethod
    def builder(cls) -> "OrderLineItemDiscountBuilder":
        """Return an empty builder."""
        return OrderLineItemDiscountBuilder()

    def to_builder(self) -> "OrderLineItemDiscountBuilder":
        """
        Return a new builder pre-populated with this object's values.

        The builder gets its own copy of metadata, so changes made through
        it never reach this object.
        """
        return (
            OrderLineItemDiscountBuilder()
            .uid(self.uid)
            .catalog_object_id(self.catalog_object_id)
            .name(self.name)
            .type(self.type)
            .percentage(self.percentage)
            .amount_money(self.amount_money)
            .applied_money(self.applied_money)
            .metadata(_copy_metadata(self.metadata))
            .scope(self.scope)
        )

    def _scalars(self) -> tuple:
        return (
            self.uid,
            self.catalog_object_id,
            self.name,
            self.type,
            self.percentage,
            self.amount_money,
            self.applied_money,
            self.scope,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderLineItemDiscount):
            return NotImplemented
        # None and {} metadata read the same
        return self._scalars() == other._scalars() and dict(self.metadata or {}) == dict(other.metadata or {})

    def __hash__(self) -> int:
        return hash((self._scalars(), frozenset((self.metadata or {}).items())))

    def __repr__(self) -> str:
        """Developer-friendly representation listing only the fields that are set."""
        parts = [f"{f.name}={getattr(self, f.name)!r}" for f in fields(self) if getattr(self, f.name) is not None]
        return f"OrderLineItemDiscount({', '.join(parts)})"


class OrderLineItemDiscountBuilder:
    """
    Mutable accumulator for `OrderLineItemDiscount`.

    Setters return the builder itself so calls can be chained; setting a
    field twice keeps the last value. `build()` may be called any number of
    times and never fails. A builder is meant for a single writer and is
    not thread-safe.

    Example:
        >>> discount = (
        ...     OrderLineItemDiscount.builder()
        ...     .uid("d1")
        ...     .type("FIXED_PERCENTAGE")
        ...     .percentage("7.25")
        ...     .scope("LINE_ITEM")
        ...     .build()
        ... )
    """

    def __init__(self) -> None:
        self._uid: str | None = None
        self._catalog_object_id: str | None = None
        self._name: str | None = None
        self._type: str | None = None
        self._percentage: str | None = None
        self._amount_money: Money | None = None
        self._applied_money: Money | None = None
        # Present but empty unless the caller says otherwise
        self._metadata: Mapping[str, str] | None = {}
        self._scope: str | None = None

    def uid(self, value: str | None) -> "OrderLineItemDiscountBuilder":
        self._uid = value
        return self

    def catalog_object_id(self, value: str | None) -> "OrderLineItemDiscountBuilder":
        self._catalog_object_id = value
        return self

    def name(self, value: str | None) -> "OrderLineItemDiscountBuilder":
        self._name = value
        return self

    def type(self, value: str | None) -> "OrderLineItemDiscountBuilder":
        self._type = value
        return self

    def percentage(self, value: str | None) -> "OrderLineItemDiscountBuilder":
        self._percentage = value
        return self

    def amount_money(self, value: Money | None) -> "OrderLineItemDiscountBuilder":
        self._amount_money = value
        return self

    def applied_money(self, value: Money | None) -> "OrderLineItemDiscountBuilder":
        self._applied_money = value
        return self

    def metadata(self, value: Mapping[str, str] | None) -> "OrderLineItemDiscountBuilder":
        self._metadata = value
        return self

    def scope(self, value: str | None) -> "OrderLineItemDiscountBuilder":
        self._scope = value
        return self

    def build(self) -> OrderLineItemDiscount:
        """Snapshot the current state into a new immutable discount."""
        return OrderLineItemDiscount(
            uid=self._uid,
            catalog_object_id=self._catalog_object_id,
            name=self._name,
            type=self._type,
            percentage=self._percentage,
            amount_money=self._amount_money,
            applied_money=self._applied_money,
            metadata=_copy_metadata(self._metadata),
            scope=self._scope,
        )


def _copy_metadata(value: Mapping[str, str] | None) -> Mapping[str, str] | None:
    """Shallow-copy a metadata mapping; anything else passes through untouched."""
    if isinstance(value, Mapping):
        return dict(value)
    return value
