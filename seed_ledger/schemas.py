"""
Pydantic schemas for request/response validation in the Seed Ledger service.

Fields are snake_case in Python and camelCase on the wire; request bodies
accept either spelling.
"""
import datetime as dt
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema mapping snake_case attributes to camelCase JSON keys."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class LedgerEntryBase(CamelModel):
    """Fields every ledger entry carries."""
    seed_name: str = Field(..., min_length=1, max_length=255, description="Seed variety name")
    quantity: Decimal = Field(..., max_digits=10, decimal_places=2, description="Quantity, two decimal places")


class InwardEntryCreate(LedgerEntryBase):
    """Schema for recording seed received from a supplier."""
    party: str = Field(..., min_length=1, max_length=255)
    date: dt.date
    notes: Optional[str] = None


class OutwardEntryCreate(LedgerEntryBase):
    """Schema for recording seed dispatched to a customer."""
    party: str = Field(..., min_length=1, max_length=255)
    date: dt.date
    notes: Optional[str] = None


class ReturnEntryCreate(LedgerEntryBase):
    """Schema for recording returned seed."""
    reason: str = Field(..., min_length=1, max_length=255)
    date: dt.date
    notes: Optional[str] = None


class ExpiryEntryCreate(LedgerEntryBase):
    """Schema for recording expired seed. Expiry entries have no notes."""
    expiry_date: dt.date
    action: str = Field(..., min_length=1, max_length=255)


class InwardEntry(InwardEntryCreate):
    """
    Schema for inward entry responses, includes all database fields.

    Attributes:
        id (int): Entry's unique identifier within the inward ledger
        created_at (datetime): When the entry was recorded
    """
    id: int
    created_at: dt.datetime


class OutwardEntry(OutwardEntryCreate):
    """Schema for outward entry responses."""
    id: int
    created_at: dt.datetime


class ReturnEntry(ReturnEntryCreate):
    """Schema for return entry responses."""
    id: int
    created_at: dt.datetime


class ExpiryEntry(ExpiryEntryCreate):
    """Schema for expiry entry responses."""
    id: int
    created_at: dt.datetime


class EntryCreated(BaseModel):
    """Response body for a successful create."""
    message: str
    id: int


class Message(BaseModel):
    """Response body carrying only a message."""
    message: str


class Report(CamelModel):
    """
    Combined snapshot of all four ledgers.

    The four lists are read by separate queries and are not guaranteed to
    reflect a single point in time.
    """
    inward_data: List[InwardEntry]
    outward_data: List[OutwardEntry]
    return_data: List[ReturnEntry]
    expiry_data: List[ExpiryEntry]
