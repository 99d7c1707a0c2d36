"""SQLAlchemy ORM model for the Order entity."""

from decimal import Decimal

from sqlalchemy import Column, Integer, Numeric, String

from .base import Base


class Order(Base):
    """
    Order entity persisted in the ``orders`` table.

    ``id`` stays ``None`` until the session flushes the row; the storage
    engine assigns it and nothing in the application writes it afterwards.
    """

    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    number = Column(String(50), nullable=False)
    total = Column(Numeric(18, 2), nullable=False)
    billing_address = Column(String(500), nullable=False)
    shipping_address = Column(String(500), nullable=False)

    def __init__(
        self,
        number: str,
        total: Decimal,
        billing_address: str,
        shipping_address: str,
    ) -> None:
        self.number = number
        self.total = total
        self.billing_address = billing_address
        self.shipping_address = shipping_address

    def __repr__(self) -> str:
        return f"<Order(id={self.id}, number={self.number}, total={self.total})>"
