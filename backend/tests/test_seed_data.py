from decimal import Decimal

from modules.menu.models.menu_models import MenuItem
from modules.staff.models.staff_models import StaffMember
from modules.tables.models.table_models import Table, TableStatus
from scripts.seed_data import seed_database
from tests.factories import TableFactory


class TestSeedData:

    def test_seeds_demo_data(self, db_session):
        counts = seed_database(db_session)

        assert counts == {"tables": 12, "menu_items": 12, "staff": 6}
        numbers = [t.number for t in db_session.query(Table).order_by(Table.number)]
        assert numbers == list(range(1, 13))
        assert all(t.status == TableStatus.FREE for t in db_session.query(Table))
        salmon = db_session.query(MenuItem).filter_by(name="Grilled Salmon").one()
        assert salmon.price == Decimal("22.50")
        assert db_session.query(StaffMember).filter_by(name="Michael Brown").one().status.value == "Off Duty"

    def test_is_idempotent(self, db_session):
        TableFactory(number=3)

        first = seed_database(db_session)
        second = seed_database(db_session)

        assert first["tables"] == 11
        assert second == {"tables": 0, "menu_items": 0, "staff": 0}
        assert db_session.query(Table).count() == 12
