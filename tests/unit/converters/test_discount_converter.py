"""Tests unitarios para la conversión de descuentos al formato de cable y desde él."""

import json
import logging

import pytest

from order_models.converters import (
    deserialize,
    deserialize_money,
    from_json,
    serialize,
    serialize_money,
    to_json,
)
from order_models.domain.enums import OrderLineItemDiscountType
from order_models.domain.models import OrderLineItemDiscount
from order_models.domain.value_objects import Money
from order_models.utils.error_handler import ErrorCode, MalformedPayloadException, SerializationException


class TestDeserialize:
    """Tests para deserialize / from_json."""

    def test_percentage_scenario(self, percentage_payload):
        """Debe poblar solo las claves presentes y dejar metadata vacía."""
        discount = deserialize(percentage_payload)

        assert discount.uid == "d1"
        assert discount.type == "FIXED_PERCENTAGE"
        assert discount.percentage == "7.25"
        assert discount.scope == "LINE_ITEM"
        assert discount.catalog_object_id is None
        assert discount.name is None
        assert discount.amount_money is None
        assert discount.applied_money is None
        assert discount.metadata == {}

    def test_explicit_null_is_same_as_absent(self):
        """Una clave con null debe leerse igual que una clave ausente."""
        with_nulls = deserialize({"uid": "d1", "name": None, "amount_money": None, "metadata": None})
        without = deserialize({"uid": "d1"})

        assert with_nulls.name is None
        assert with_nulls.amount_money is None
        assert with_nulls.metadata is None
        assert with_nulls == without

    def test_money_fields(self):
        """Los montos deben convertirse a Money."""
        discount = deserialize(
            {
                "uid": "d2",
                "type": "FIXED_AMOUNT",
                "amount_money": {"amount": 500, "currency": "USD"},
                "applied_money": {"amount": 450, "currency": "USD"},
            }
        )

        assert discount.amount_money == Money(amount=500, currency="USD")
        assert discount.applied_money == Money(amount=450, currency="USD")

    def test_metadata(self):
        """metadata debe leerse como dict de strings."""
        discount = deserialize({"metadata": {"campaign": "bf-2025"}})

        assert discount.metadata == {"campaign": "bf-2025"}

    def test_unknown_keys_are_ignored(self):
        """Claves nuevas de la API no deben romper la lectura."""
        discount = deserialize({"uid": "d1", "pricing_rule_id": "PR-1", "reward_ids": ["r1"]})

        assert discount == OrderLineItemDiscount(uid="d1")

    def test_from_json_text_and_bytes(self, percentage_payload):
        """from_json debe aceptar str y bytes."""
        text = json.dumps(percentage_payload)

        assert from_json(text) == deserialize(percentage_payload)
        assert from_json(text.encode("utf-8")) == deserialize(percentage_payload)

    def test_returns_immutable_value_object(self, percentage_payload):
        """El resultado debe ser un OrderLineItemDiscount."""
        assert isinstance(deserialize(percentage_payload), OrderLineItemDiscount)


class TestMalformedPayload:
    """Tests para payloads que no respetan el formato de cable."""

    @pytest.mark.parametrize(
        "payload",
        [
            {"uid": 123},
            {"percentage": 7.25},
            {"amount_money": {"amount": "100", "currency": "USD"}},
            {"amount_money": {"amount": True}},
            {"amount_money": "USD 100"},
            {"metadata": {"k": 1}},
            {"metadata": ["k", "v"]},
            ["uid", "d1"],
            "uid=d1",
            None,
        ],
    )
    def test_wrong_types_raise(self, payload):
        """Un tipo incorrecto debe lanzar MalformedPayloadException."""
        with pytest.raises(MalformedPayloadException) as exc_info:
            deserialize(payload)

        assert exc_info.value.error_code == ErrorCode.MALFORMED_PAYLOAD
        assert exc_info.value.model == "OrderLineItemDiscountSchema"
        assert exc_info.value.errors

    def test_invalid_json_raises(self):
        """JSON inválido debe lanzar MalformedPayloadException."""
        with pytest.raises(MalformedPayloadException):
            from_json('{"uid": "d1",')

    def test_error_points_at_offending_key(self):
        """Los errores deben indicar la clave con el tipo incorrecto."""
        with pytest.raises(MalformedPayloadException) as exc_info:
            deserialize({"uid": "d1", "name": 42})

        locations = [tuple(error["loc"]) for error in exc_info.value.errors]
        assert ("name",) in locations

    def test_failure_is_logged(self, caplog):
        """El fallo debe quedar registrado como warning."""
        with caplog.at_level(logging.WARNING, logger="order_models.utils.error_handler"):
            with pytest.raises(MalformedPayloadException):
                deserialize({"uid": 1})

        assert any("MALFORMED_PAYLOAD" in record.getMessage() for record in caplog.records)


class TestSerialize:
    """Tests para serialize / to_json."""

    def test_percentage_scenario_round_trip_emits_empty_metadata(self, percentage_payload):
        """Debe omitir claves ausentes y emitir metadata vacía."""
        payload = serialize(deserialize(percentage_payload))

        assert payload == {**percentage_payload, "metadata": {}}

    def test_absent_fields_are_not_emitted_as_null(self):
        """Los campos en None no deben aparecer en el payload."""
        payload = serialize(OrderLineItemDiscount(uid="d1"))

        assert payload == {"uid": "d1"}
        assert "metadata" not in payload

    def test_full_discount(self, full_discount):
        """Debe usar las claves snake_case del formato de cable."""
        payload = serialize(full_discount)

        assert payload == {
            "uid": "d1",
            "catalog_object_id": "CATALOG-42",
            "name": "Black Friday",
            "type": "FIXED_AMOUNT",
            "amount_money": {"amount": 500, "currency": "USD"},
            "applied_money": {"amount": 450, "currency": "USD"},
            "metadata": {"campaign": "bf-2025", "source": "pos"},
            "scope": "ORDER",
        }

    def test_partial_money_omits_absent_amount(self):
        """Money sin amount debe emitir solo currency."""
        payload = serialize(OrderLineItemDiscount(applied_money=Money(currency="USD")))

        assert payload == {"applied_money": {"currency": "USD"}}

    def test_enum_values_serialize_as_strings(self):
        """Los miembros de enum deben escribirse como su valor."""
        payload = serialize(OrderLineItemDiscount(type=OrderLineItemDiscountType.VARIABLE_AMOUNT))

        assert payload == {"type": "VARIABLE_AMOUNT"}

    def test_invalid_values_raise_serialization_exception(self):
        """Valores imposibles de escribir deben lanzar SerializationException."""
        with pytest.raises(SerializationException) as exc_info:
            serialize(OrderLineItemDiscount(metadata={"k": 1}))

        assert exc_info.value.error_code == ErrorCode.SERIALIZATION_ERROR

    def test_to_json_compact_by_default(self, percentage_payload):
        """Sin JSON_INDENT el JSON debe ir en una sola línea."""
        text = to_json(deserialize(percentage_payload))

        assert "\n" not in text
        assert json.loads(text) == {**percentage_payload, "metadata": {}}

    def test_to_json_respects_indent_setting(self, monkeypatch, percentage_payload):
        """JSON_INDENT debe aplicarse al texto generado."""
        monkeypatch.setenv("ORDER_MODELS_JSON_INDENT", "2")

        text = to_json(deserialize(percentage_payload))

        assert '\n  "uid": "d1"' in text


class TestRoundTrip:
    """Tests de ida y vuelta sobre el formato de cable."""

    def test_full_discount_round_trip(self, full_discount):
        """deserialize(serialize(v)) debe ser igual a v."""
        assert deserialize(serialize(full_discount)) == full_discount

    def test_json_round_trip(self, full_discount):
        """from_json(to_json(v)) debe ser igual a v."""
        assert from_json(to_json(full_discount)) == full_discount

    def test_absent_metadata_round_trip(self):
        """metadata ausente vuelve como {} y se considera igual."""
        original = OrderLineItemDiscount(uid="d1", metadata=None)

        restored = deserialize(serialize(original))

        assert restored.metadata == {}
        assert restored == original

    def test_update_then_round_trip(self, full_discount):
        """Un descuento derivado debe sobrevivir la ida y vuelta."""
        updated = full_discount.to_builder().name("X").applied_money(None).build()

        restored = deserialize(serialize(updated))

        assert restored == updated
        assert restored.applied_money is None


class TestMoneyConversion:
    """Tests para serialize_money / deserialize_money."""

    def test_round_trip(self):
        """Money debe sobrevivir la ida y vuelta."""
        money = Money(amount=-300, currency="JPY")

        assert deserialize_money(serialize_money(money)) == money

    def test_null_fields(self):
        """Claves con null deben leerse como ausentes."""
        assert deserialize_money({"amount": None, "currency": "USD"}) == Money(currency="USD")

    def test_wrong_type_raises(self):
        """Un amount no entero debe rechazarse."""
        with pytest.raises(MalformedPayloadException) as exc_info:
            deserialize_money({"amount": 1.5})

        assert exc_info.value.model == "MoneySchema"
