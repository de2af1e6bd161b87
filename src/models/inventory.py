"""Inventory SQLAlchemy models: sources, source items, stocks and sales channels"""

from sqlalchemy import (
    Column,
    Integer,
    Text,
    ForeignKey,
    Boolean,
    Numeric,
    Index,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from .base import Base


class InventorySource(Base):
    """Physical inventory source (warehouse or store).

    A source flagged with is_pickup_location_active doubles as an in-store
    pickup location; its source_code is the pickup location code.
    """
    __tablename__ = "inventory_source"

    source_code = Column(Text, primary_key=True)
    name = Column(Text, nullable=False)
    enabled = Column(Boolean, nullable=False, default=True)
    is_pickup_location_active = Column(Boolean, nullable=False, default=False)
    city = Column(Text, nullable=True)
    street = Column(Text, nullable=True)
    postcode = Column(Text, nullable=True)
    country_id = Column(Text, nullable=True)
    phone = Column(Text, nullable=True)

    # Relationships
    items = relationship("InventorySourceItem", back_populates="source")
    stock_links = relationship("InventorySourceStockLink", back_populates="source")


class InventorySourceItem(Base):
    """Quantity and stock status of one SKU at one source.

    status holds the raw stored value (1 = in stock / enabled).
    """
    __tablename__ = "inventory_source_item"
    __table_args__ = (
        UniqueConstraint("source_code", "sku", name="uq_inventory_source_item_source_sku"),
        Index("ix_inventory_source_item_sku_source", "sku", "source_code"),
    )

    source_item_id = Column(Integer, primary_key=True, autoincrement=True)
    source_code = Column(
        Text,
        ForeignKey("inventory_source.source_code", ondelete="CASCADE"),
        nullable=False
    )
    sku = Column(Text, nullable=False)
    quantity = Column(Numeric(12, 4), nullable=False, default=0)
    status = Column(Integer, nullable=False, default=0)

    # Relationships
    source = relationship("InventorySource", back_populates="items")


class InventoryStock(Base):
    """Virtual stock aggregating one or more sources."""
    __tablename__ = "inventory_stock"

    stock_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)

    # Relationships
    source_links = relationship("InventorySourceStockLink", back_populates="stock")
    sales_channels = relationship("InventoryStockSalesChannel", back_populates="stock")


class InventorySourceStockLink(Base):
    """Assignment of a source to a stock."""
    __tablename__ = "inventory_source_stock_link"
    __table_args__ = (
        UniqueConstraint("stock_id", "source_code", name="uq_inventory_source_stock_link"),
    )

    link_id = Column(Integer, primary_key=True, autoincrement=True)
    stock_id = Column(Integer, ForeignKey("inventory_stock.stock_id", ondelete="CASCADE"), nullable=False)
    source_code = Column(
        Text,
        ForeignKey("inventory_source.source_code", ondelete="CASCADE"),
        nullable=False
    )
    priority = Column(Integer, nullable=False, default=0)

    # Relationships
    stock = relationship("InventoryStock", back_populates="source_links")
    source = relationship("InventorySource", back_populates="stock_links")


class InventoryStockSalesChannel(Base):
    """Assignment of a sales channel (e.g. website code) to a stock."""
    __tablename__ = "inventory_stock_sales_channel"

    type = Column(Text, primary_key=True)
    code = Column(Text, primary_key=True)
    stock_id = Column(Integer, ForeignKey("inventory_stock.stock_id", ondelete="CASCADE"), nullable=False)

    # Relationships
    stock = relationship("InventoryStock", back_populates="sales_channels")
