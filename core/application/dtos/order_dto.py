"""Application DTOs for Order reads."""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, field_serializer
from pydantic.alias_generators import to_camel


class OrderResponse(BaseModel):
    """Read-only projection of an Order.

    Keeps storage types and query objects from leaving the data-access
    layer. Serialized with camelCase keys; ``total`` stays a Decimal and
    is written as an exact JSON number by ``DecimalJSONResponse``.
    """

    id: int = Field(..., description="Storage-assigned identity")
    number: str = Field(..., description="Business order number")
    total: Decimal = Field(..., description="Order total")
    billing_address: str = Field(..., description="Billing address")
    shipping_address: str = Field(..., description="Shipping address")

    model_config = {
        "frozen": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

    @field_serializer("total")
    def _serialize_total(self, total: Decimal) -> Decimal:
        # Same value without trailing fractional zeros or exponent notation
        return Decimal(format(total.normalize(), "f"))

    @classmethod
    def from_entity(cls, source: Any) -> "OrderResponse":
        """Copy the order fields of an entity or result row.

        Args:
            source: Order entity, or any row exposing the same attributes

        Returns:
            OrderResponse instance
        """
        return cls(
            id=source.id,
            number=source.number,
            total=source.total,
            billing_address=source.billing_address,
            shipping_address=source.shipping_address,
        )
