# backend/modules/tables/services/layout_service.py

from typing import List
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
import logging

from ..models.table_models import Table
from ..schemas.table_schemas import TableCreate, TableUpdate
from core.exceptions import ConflictError, NotFoundError

logger = logging.getLogger(__name__)


class LayoutService:
    """Service for managing the restaurant's tables"""

    async def get_tables(self, db: Session) -> List[Table]:
        """Get all tables ordered by number"""
        return db.query(Table).order_by(Table.number.asc()).all()

    async def get_table(self, db: Session, table_id: int) -> Table:
        table = db.query(Table).filter(Table.id == table_id).first()
        if not table:
            raise NotFoundError(f"Table with id {table_id} not found")
        return table

    async def _ensure_number_free(
        self, db: Session, number: int, exclude_id: int = None
    ):
        query = db.query(Table.id).filter(Table.number == number)
        if exclude_id is not None:
            query = query.filter(Table.id != exclude_id)
        if query.first():
            raise ConflictError(f"Table number {number} already exists")

    async def create_table(self, db: Session, table_data: TableCreate) -> Table:
        """Create a new table"""

        await self._ensure_number_free(db, table_data.number)

        table = Table(**table_data.model_dump())
        db.add(table)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            raise ConflictError(f"Table number {table_data.number} already exists")
        db.refresh(table)

        logger.info(f"Created table {table.number}")
        return table

    async def update_table(
        self, db: Session, table_id: int, update_data: TableUpdate
    ) -> Table:
        """Manual override of table fields; unset fields are left alone"""

        table = await self.get_table(db, table_id)
        changes = update_data.model_dump(exclude_unset=True, exclude_none=True)

        if "number" in changes and changes["number"] != table.number:
            await self._ensure_number_free(db, changes["number"], exclude_id=table.id)

        for field, value in changes.items():
            setattr(table, field, value)

        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            raise ConflictError(f"Table number {changes.get('number')} already exists")
        db.refresh(table)
        return table

    async def delete_table(self, db: Session, table_id: int) -> None:
        """Delete a table together with its orders"""

        table = await self.get_table(db, table_id)
        db.delete(table)
        db.commit()

        logger.info(f"Deleted table {table_id}")


layout_service = LayoutService()
