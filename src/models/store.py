"""Store and website SQLAlchemy models"""

from sqlalchemy import Column, Integer, Text, ForeignKey, Boolean
from sqlalchemy.orm import relationship

from .base import Base


class Website(Base):
    """Website model - top-level sales scope grouping store views.

    The website code is the sales channel code used to resolve pickup
    locations and stock.
    """
    __tablename__ = "store_website"

    website_id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(Text, nullable=False, unique=True)
    name = Column(Text, nullable=False)

    # Relationships
    stores = relationship("Store", back_populates="website")


class Store(Base):
    """Store view model. Every quote is created in exactly one store."""
    __tablename__ = "store"

    store_id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(Text, nullable=False, unique=True)
    website_id = Column(Integer, ForeignKey("store_website.website_id", ondelete="CASCADE"), nullable=False)
    name = Column(Text, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)

    # Relationships
    website = relationship("Website", back_populates="stores")
