# backend/modules/tables/__init__.py

from .models.table_models import Table, TableStatus

from .services.table_state_service import table_state_service, derive_table_status
from .services.layout_service import layout_service

__all__ = [
    # Models
    "Table", "TableStatus",

    # Services
    "table_state_service", "derive_table_status", "layout_service",
]
