"""
HTTP routes for the four ledgers and the combined report.

``build_ledger_router`` produces the create/list/delete/export routes for one
ledger; ``create_app`` mounts one router per entry in ``LEDGERS``.
"""
import csv
import io
from typing import List

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse, StreamingResponse
from sqlalchemy.orm import Session

from . import crud, schemas
from .database import get_db
from .ledgers import Ledger


def build_ledger_router(ledger: Ledger) -> APIRouter:
    """
    Build the routes for a single ledger.

    Args:
        ledger: Ledger descriptor the routes operate on

    Returns:
        APIRouter meant to be mounted under ``/api/<ledger name>``
    """
    router = APIRouter()
    create_schema = ledger.create_schema
    read_schema = ledger.read_schema

    @router.post("", response_model=schemas.EntryCreated, name=f"create_{ledger.name}_entry")
    def create_entry(entry: create_schema, db: Session = Depends(get_db)):
        """Record one entry; returns the assigned id."""
        entry_id = crud.create_entry(db, ledger, entry)
        return {"message": ledger.added_message, "id": entry_id}

    @router.get("", response_model=List[read_schema], name=f"list_{ledger.name}_entries")
    def list_entries(db: Session = Depends(get_db)):
        """List every entry of the ledger, newest first."""
        return crud.get_entries(db, ledger)

    @router.get("/export/csv", name=f"export_{ledger.name}_csv")
    def export_csv(db: Session = Depends(get_db)):
        """
        Export the ledger to CSV, in the same order as the list endpoint.

        Returns:
            CSV file with one column per wire field
        """
        entries = crud.get_entries(db, ledger)
        columns = ledger.columns

        output = io.StringIO()
        writer = csv.writer(output)
        writer.writerow(columns)
        for entry in entries:
            row = read_schema.model_validate(entry).model_dump(mode="json", by_alias=True)
            writer.writerow([row[column] for column in columns])

        output.seek(0)
        return StreamingResponse(
            iter([output.getvalue()]),
            media_type="text/csv",
            headers={"Content-Disposition": f"attachment; filename={ledger.name}.csv"}
        )

    @router.delete(
        "/{entry_id}",
        response_model=schemas.Message,
        responses={status.HTTP_404_NOT_FOUND: {"model": schemas.Message}},
        name=f"delete_{ledger.name}_entry",
    )
    def delete_entry(entry_id: int, db: Session = Depends(get_db)):
        """
        Delete one entry by id.

        A missing id, including one deleted earlier, is answered with 404.
        """
        if not crud.delete_entry(db, ledger, entry_id):
            return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"message": "Entry not found"})
        return {"message": ledger.deleted_message}

    return router


reports_router = APIRouter()


@reports_router.get("", response_model=schemas.Report)
def get_report(db: Session = Depends(get_db)):
    """Return all four ledgers in one response."""
    return crud.get_report(db)
