"""Discount converter - moves discounts between value objects and the JSON wire format."""

import logging
from collections.abc import Mapping
from dataclasses import fields
from enum import Enum
from typing import Any

from pydantic import BaseModel, ValidationError

from order_models.core.config import get_settings
from order_models.domain.models import OrderLineItemDiscount
from order_models.domain.value_objects import Money
from order_models.schemas.order_schemas import MoneySchema, OrderLineItemDiscountSchema
from order_models.utils.error_handler import MalformedPayloadException, SerializationException, log_error

logger = logging.getLogger(__name__)

_MONEY_FIELDS = frozenset({"amount_money", "applied_money"})
_DISCOUNT_FIELDS = tuple(f.name for f in fields(OrderLineItemDiscount))


def _validation_errors(exc: ValidationError) -> list[dict[str, Any]]:
    return exc.errors(include_url=False, include_context=False, include_input=False)


def _parse(schema: type[BaseModel], payload: Any, from_text: bool = False) -> BaseModel:
    """
    Valida un payload contra su schema.

    Raises:
        MalformedPayloadException: JSON inválido, payload que no es objeto
            o tipo incorrecto en alguna clave
    """
    try:
        if from_text:
            return schema.model_validate_json(payload)
        return schema.model_validate(payload)
    except ValidationError as e:
        exc = MalformedPayloadException(
            message=f"Malformed {schema.__name__} payload: {e.error_count()} error(s)",
            model=schema.__name__,
            errors=_validation_errors(e),
        )
        log_error(exc, context={"operation": "deserialize"}, level=logging.WARNING)
        raise exc from e


def _money_from_schema(schema: MoneySchema) -> Money:
    builder = Money.builder()
    if "amount" in schema.model_fields_set:
        builder.amount(schema.amount)
    if "currency" in schema.model_fields_set:
        builder.currency(schema.currency)
    return builder.build()


def _discount_from_schema(schema: OrderLineItemDiscountSchema) -> OrderLineItemDiscount:
    """
    Puebla un builder solo con las claves presentes en el payload.

    Una clave ausente no llama al setter (metadata conserva el {} por
    defecto del builder); una clave con null lo llama con None.
    """
    builder = OrderLineItemDiscount.builder()
    for field_name in _DISCOUNT_FIELDS:
        if field_name not in schema.model_fields_set:
            continue
        value = getattr(schema, field_name)
        if field_name in _MONEY_FIELDS and value is not None:
            value = _money_from_schema(value)
        getattr(builder, field_name)(value)
    return builder.build()


def _money_to_wire(value: Any) -> Any:
    if isinstance(value, Money):
        return {k: v for k, v in (("amount", value.amount), ("currency", value.currency)) if v is not None}
    return value


def _to_schema(schema: type[BaseModel], raw: dict[str, Any]) -> BaseModel:
    try:
        return schema.model_validate(raw)
    except ValidationError as e:
        exc = SerializationException(
            message=f"Cannot serialize {schema.__name__}: {e.error_count()} error(s)",
            model=schema.__name__,
            errors=_validation_errors(e),
        )
        log_error(exc, context={"operation": "serialize"})
        raise exc from e


def _discount_to_schema(discount: OrderLineItemDiscount) -> OrderLineItemDiscountSchema:
    raw: dict[str, Any] = {}
    for field_name in _DISCOUNT_FIELDS:
        value = getattr(discount, field_name)
        if value is None:
            continue
        if field_name in _MONEY_FIELDS:
            value = _money_to_wire(value)
        elif isinstance(value, Enum):
            value = value.value
        elif isinstance(value, Mapping):
            value = dict(value)
        raw[field_name] = value
    return _to_schema(OrderLineItemDiscountSchema, raw)


def serialize_money(money: Money) -> dict[str, Any]:
    """Convierte Money a dict de cable, omitiendo los campos en None."""
    return _to_schema(MoneySchema, _money_to_wire(money)).model_dump(mode="json", exclude_none=True)


def deserialize_money(payload: Any) -> Money:
    """Construye Money desde un dict de cable."""
    return _money_from_schema(_parse(MoneySchema, payload))


def serialize(discount: OrderLineItemDiscount) -> dict[str, Any]:
    """
    Convierte un descuento a dict listo para JSON.

    Los campos en None se omiten (nunca se emiten como null). metadata
    se emite siempre que no sea None, incluso vacío ({}).

    Raises:
        SerializationException: Si el objeto contiene valores que no
            pueden escribirse en el formato de cable
    """
    payload = _discount_to_schema(discount).model_dump(mode="json", exclude_none=True)
    if get_settings().LOG_PAYLOADS:
        logger.debug(f"Serialized discount uid={discount.uid}: {payload}")
    return payload


def to_json(discount: OrderLineItemDiscount) -> str:
    """Serializa un descuento a texto JSON."""
    return _discount_to_schema(discount).model_dump_json(exclude_none=True, indent=get_settings().JSON_INDENT)


def deserialize(payload: Any) -> OrderLineItemDiscount:
    """
    Construye un descuento desde un dict de cable ya decodificado.

    Args:
        payload: Objeto JSON decodificado (dict)

    Returns:
        OrderLineItemDiscount: Descuento inmutable

    Raises:
        MalformedPayloadException: Si el payload no respeta el formato
    """
    discount = _discount_from_schema(_parse(OrderLineItemDiscountSchema, payload))
    logger.debug(f"Deserialized discount uid={discount.uid} scope={discount.scope}")
    if get_settings().LOG_PAYLOADS:
        logger.debug(f"Discount payload: {payload}")
    return discount


def from_json(data: str | bytes) -> OrderLineItemDiscount:
    """
    Construye un descuento desde texto JSON.

    Raises:
        MalformedPayloadException: JSON inválido o payload malformado
    """
    discount = _discount_from_schema(_parse(OrderLineItemDiscountSchema, data, from_text=True))
    logger.debug(f"Deserialized discount uid={discount.uid} scope={discount.scope}")
    return discount
