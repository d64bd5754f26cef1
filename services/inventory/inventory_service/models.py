"""
SQLAlchemy ORM models for the Inventory service.

Defines the database schema for the items table.
"""
from sqlalchemy import Column, Integer, Numeric, String

from .database import Base


class Item(Base):
    """
    Inventory item tracked by the service.

    Attributes:
        id (int): Primary key, assigned by the database on insert
        name (str): Display name of the item
        quantity (int): Units on hand
        price (Decimal): Unit price with two decimal places
    """
    __tablename__ = "items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    quantity = Column(Integer, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
