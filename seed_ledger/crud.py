"""
Database operations for the Seed Ledger service.

Every function takes the ``Ledger`` it operates on, so the same code serves
all four collections. Datastore errors roll back the session, are logged
here with the ledger they concern, and are re-raised for the API layer to
turn into an opaque 500 response.
"""
import logging
from typing import Dict, List

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .ledgers import Ledger, LEDGERS

logger = logging.getLogger(__name__)

# Surrogate keys are signed 64-bit integers in every supported datastore
MAX_ENTRY_ID = 2 ** 63 - 1


def create_entry(db: Session, ledger: Ledger, entry: BaseModel) -> int:
    """
    Insert a new entry into a ledger.

    Args:
        db: Database session
        ledger: Ledger to write to
        entry: Validated entry data (one of the ``*Create`` schemas)

    Returns:
        The surrogate id assigned by the datastore
    """
    try:
        db_entry = ledger.model(**entry.model_dump())
        db.add(db_entry)
        db.flush()
        entry_id = db_entry.id
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Failed to create {ledger.name} entry")
        raise

    logger.info(f"Created {ledger.name} entry {entry_id}")
    return entry_id


def get_entries(db: Session, ledger: Ledger) -> List:
    """
    Retrieve every entry of a ledger, newest first.

    Rows sharing a creation timestamp are ordered by descending id, so the
    most recently inserted row still comes first.
    """
    model = ledger.model
    try:
        return db.query(model).order_by(model.created_at.desc(), model.id.desc()).all()
    except SQLAlchemyError:
        logger.exception(f"Failed to list {ledger.name} entries")
        raise


def delete_entry(db: Session, ledger: Ledger, entry_id: int) -> bool:
    """
    Delete one entry by id.

    Returns:
        True if a row was deleted, False if no row had that id
    """
    if not -MAX_ENTRY_ID - 1 <= entry_id <= MAX_ENTRY_ID:
        logger.info(f"No {ledger.name} entry with id {entry_id}")
        return False

    model = ledger.model
    try:
        deleted = db.query(model).filter(model.id == entry_id).delete(synchronize_session=False)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Failed to delete {ledger.name} entry {entry_id}")
        raise

    if deleted:
        logger.info(f"Deleted {ledger.name} entry {entry_id}")
    else:
        logger.info(f"No {ledger.name} entry with id {entry_id}")
    return bool(deleted)


def get_report(db: Session) -> Dict[str, List]:
    """
    Read all four ledgers in full, keyed by each ledger's report key.

    The reads are independent queries, not a single snapshot. A failure in
    any of them aborts the whole report.
    """
    report = {}
    for ledger in LEDGERS.values():
        try:
            report[ledger.report_key] = db.query(ledger.model).all()
        except SQLAlchemyError:
            logger.exception(f"Failed to read {ledger.name} ledger for report")
            raise
    return report
