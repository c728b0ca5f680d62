"""
Registry of the four ledgers.

A ``Ledger`` bundles everything the generic CRUD and routing code needs to
serve one collection: its URL name, ORM model, schemas and the label used in
response messages.
"""
from dataclasses import dataclass
from typing import Dict, List, Type

from pydantic import BaseModel

from . import models, schemas


@dataclass(frozen=True)
class Ledger:
    name: str
    label: str
    model: type
    create_schema: Type[BaseModel]
    read_schema: Type[BaseModel]
    report_key: str

    @property
    def added_message(self) -> str:
        return f"{self.label} entry added"

    @property
    def deleted_message(self) -> str:
        return f"{self.label} entry deleted"

    @property
    def columns(self) -> List[str]:
        """Wire field names, ``id`` first and ``createdAt`` last."""
        names = [field.alias or name for name, field in self.read_schema.model_fields.items()]
        middle = [n for n in names if n not in ("id", "createdAt")]
        return ["id"] + middle + ["createdAt"]


INWARD = Ledger(
    name="inward",
    label="Inward",
    model=models.InwardEntry,
    create_schema=schemas.InwardEntryCreate,
    read_schema=schemas.InwardEntry,
    report_key="inward_data",
)
OUTWARD = Ledger(
    name="outward",
    label="Outward",
    model=models.OutwardEntry,
    create_schema=schemas.OutwardEntryCreate,
    read_schema=schemas.OutwardEntry,
    report_key="outward_data",
)
RETURNS = Ledger(
    name="returns",
    label="Return",
    model=models.ReturnEntry,
    create_schema=schemas.ReturnEntryCreate,
    read_schema=schemas.ReturnEntry,
    report_key="return_data",
)
EXPIRY = Ledger(
    name="expiry",
    label="Expiry",
    model=models.ExpiryEntry,
    create_schema=schemas.ExpiryEntryCreate,
    read_schema=schemas.ExpiryEntry,
    report_key="expiry_data",
)

LEDGERS: Dict[str, Ledger] = {ledger.name: ledger for ledger in (INWARD, OUTWARD, RETURNS, EXPIRY)}
