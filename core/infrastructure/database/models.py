"""
SQLAlchemy ORM Models.

Maps domain entities to database tables.
"""
from datetime import datetime

from sqlalchemy import (
    Boolean, Column, DateTime, ForeignKey, Index, Integer, Numeric, String
)
from sqlalchemy.orm import declarative_base, relationship


Base = declarative_base()


# =============================================================================
# RAW MATERIAL MODEL
# =============================================================================

class RawMaterialModel(Base):
    """Raw material kinds (sand, copper, ...) with the quantity on hand."""

    __tablename__ = "raw_materials"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), unique=True, nullable=False)
    quantity = Column(Integer, nullable=False, default=0)

    purchase_orders = relationship("PurchaseOrderModel", back_populates="raw_material")

    def __repr__(self):
        return f"<RawMaterialModel(id={self.id}, name={self.name})>"


# =============================================================================
# PURCHASE ORDER MODEL
# =============================================================================

class PurchaseOrderModel(Base):
    """
    Purchase order database model.

    The status column drives the workflow queue.
    """

    __tablename__ = "purchase_orders"

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Supplier side
    order_id = Column(Integer, nullable=False, index=True)
    quantity = Column(Integer, nullable=False)
    quantity_delivered = Column(Integer, nullable=False, default=0)
    order_date = Column(DateTime(timezone=True), nullable=False)
    unit_price = Column(Numeric(15, 2), nullable=False)
    seller_bank_account = Column(String(255), nullable=False)
    origin = Column(String(255), nullable=False)

    # Shipping side
    shipment_id = Column(String(255), nullable=True, index=True)
    shipper_bank_account = Column(String(255), nullable=True)
    order_shipping_price = Column(Numeric(15, 2), nullable=False, default=0)

    status = Column(String(50), nullable=False, index=True)

    # Classification
    equipment_order = Column(Boolean, nullable=False, default=False)
    raw_material_id = Column(Integer, ForeignKey("raw_materials.id"), nullable=True)

    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    raw_material = relationship("RawMaterialModel", back_populates="purchase_orders", lazy="selectin")

    __table_args__ = (
        Index("ix_purchase_orders_status_order_date", "status", "order_date"),
    )

    def __repr__(self):
        return f"<PurchaseOrderModel(id={self.id}, order_id={self.order_id}, status={self.status})>"


# =============================================================================
# EQUIPMENT PARAMETERS MODEL
# =============================================================================

class EquipmentParametersModel(Base):
    """Declared inputs, output and shipping weight of one production machine."""

    __tablename__ = "equipment_parameters"

    id = Column(Integer, primary_key=True, autoincrement=True)
    input_sand_kg = Column(Integer, nullable=False)
    input_copper_kg = Column(Integer, nullable=False)
    output_screens_day = Column(Integer, nullable=False)
    equipment_weight = Column(Integer, nullable=False)
