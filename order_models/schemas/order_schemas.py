"""
Modelos Pydantic para el formato de cable (JSON) de la API de órdenes.

Los schemas solo describen la forma del payload: claves snake_case,
todos los campos opcionales y tipos estrictos para que un tipo incorrecto
en una clave se rechace en lugar de convertirse. Las claves desconocidas
se ignoran para tolerar campos nuevos de la API.
"""

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr


class MoneySchema(BaseModel):
    """Schema para montos (amount en unidades mínimas + código de moneda)."""

    model_config = ConfigDict(extra="ignore")

    amount: Optional[StrictInt] = None
    currency: Optional[StrictStr] = None


class OrderLineItemDiscountSchema(BaseModel):
    """Schema para un descuento de línea u orden."""

    model_config = ConfigDict(extra="ignore")

    uid: Optional[StrictStr] = None
    catalog_object_id: Optional[StrictStr] = None
    name: Optional[StrictStr] = None
    type: Optional[StrictStr] = None
    percentage: Optional[StrictStr] = None
    amount_money: Optional[MoneySchema] = None
    applied_money: Optional[MoneySchema] = None
    metadata: Optional[Dict[StrictStr, StrictStr]] = None
    scope: Optional[StrictStr] = None
