# backend/modules/tables/schemas/table_schemas.py

from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict

from ..models.table_models import TableStatus


class TableBase(BaseModel):
    """Base table schema"""

    number: int = Field(..., gt=0, description="Table number shown to staff")
    status: TableStatus = TableStatus.FREE
    customer_count: Optional[int] = Field(None, ge=0)


class TableCreate(TableBase):
    """Table creation schema"""

    pass


class TableUpdate(BaseModel):
    """Manual table update; omitted fields are left unchanged"""

    number: Optional[int] = Field(None, gt=0)
    status: Optional[TableStatus] = None
    customer_count: Optional[int] = Field(None, ge=0)


class TableResponse(TableBase):
    """Table response schema"""

    id: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class TableSyncResult(BaseModel):
    """Outcome of a bulk status resync"""

    message: str
    tables_updated: int
