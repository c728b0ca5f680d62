"""
SQLAlchemy ORM models for the Seed Ledger service.

Each ledger lives in its own table; there are no relationships between them.
Column names are the camelCase names used on the wire.
"""
from sqlalchemy import Column, Integer, String, Date, DateTime, Numeric, Text, func
from .database import Base


class LedgerEntryMixin:
    """Columns shared by every ledger table."""
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    seed_name = Column("seedName", String(255), nullable=False)
    quantity = Column(Numeric(10, 2), nullable=False)
    created_at = Column("createdAt", DateTime, server_default=func.now(), nullable=False)


class InwardEntry(LedgerEntryMixin, Base):
    """
    Seed stock received from a supplier.

    Attributes:
        party (str): Supplier the seed came from
        date (date): Date the shipment arrived
        notes (str): Optional free text
    """
    __tablename__ = "inward"

    party = Column(String(255), nullable=False)
    date = Column(Date, nullable=False)
    notes = Column(Text, nullable=True)


class OutwardEntry(LedgerEntryMixin, Base):
    """
    Seed stock dispatched to a customer.

    Attributes:
        party (str): Recipient of the shipment
        date (date): Date the shipment left
        notes (str): Optional free text
    """
    __tablename__ = "outward"

    party = Column(String(255), nullable=False)
    date = Column(Date, nullable=False)
    notes = Column(Text, nullable=True)


class ReturnEntry(LedgerEntryMixin, Base):
    """Seed stock sent back, with the reason for the return."""
    __tablename__ = "returns"

    reason = Column(String(255), nullable=False)
    date = Column(Date, nullable=False)
    notes = Column(Text, nullable=True)


class ExpiryEntry(LedgerEntryMixin, Base):
    """Seed stock reaching its expiry date and what was done with it."""
    __tablename__ = "expiry"

    expiry_date = Column("expiryDate", Date, nullable=False)
    action = Column(String(255), nullable=False)
