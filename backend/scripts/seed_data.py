#!/usr/bin/env python3
"""
Seed the demo floor plan, menu and staff roster.

Safe to run repeatedly: tables are matched on number, menu items and staff
members on name, and existing rows are left untouched.
"""

import logging
import os
import sys
from decimal import Decimal
from typing import Dict

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy.orm import Session

from core.config import get_settings
from core.database import create_db_engine, create_session_factory, init_db
from modules.menu.models.menu_models import MenuItem, MenuCategory
from modules.staff.enums.staff_enums import StaffRole, StaffStatus
from modules.staff.models.staff_models import StaffMember
from modules.tables.models.table_models import Table

logger = logging.getLogger(__name__)

TABLE_COUNT = 12
MENU_IMAGE = "https://placehold.co/100x100.png"
STAFF_AVATAR = "https://placehold.co/96x96.png"

MENU_ITEMS = [
    ("Bruschetta", "8.50", MenuCategory.STARTERS),
    ("Caprese Salad", "10.00", MenuCategory.STARTERS),
    ("Garlic Bread", "6.00", MenuCategory.STARTERS),
    ("Fried Calamari", "12.50", MenuCategory.STARTERS),
    ("Margherita Pizza", "15.00", MenuCategory.MAINS),
    ("Spaghetti Carbonara", "18.00", MenuCategory.MAINS),
    ("Grilled Salmon", "22.50", MenuCategory.MAINS),
    ("Chicken Parmesan", "20.00", MenuCategory.MAINS),
    ("Coca-Cola", "3.50", MenuCategory.DRINKS),
    ("Fresh Orange Juice", "5.00", MenuCategory.DRINKS),
    ("Espresso", "3.00", MenuCategory.DRINKS),
    ("House Red Wine", "7.00", MenuCategory.DRINKS),
]

STAFF = [
    ("James Smith", StaffRole.HEAD_WAITER, "9am - 5pm", StaffStatus.ON_SHIFT),
    ("Maria Garcia", StaffRole.WAITER, "9am - 5pm", StaffStatus.ON_SHIFT),
    ("David Johnson", StaffRole.CHEF, "8am - 4pm", StaffStatus.ON_SHIFT),
    ("Emily White", StaffRole.WAITER, "5pm - 11pm", StaffStatus.ON_SHIFT),
    ("Michael Brown", StaffRole.SOUS_CHEF, "5pm - 11pm", StaffStatus.OFF_DUTY),
    ("Jessica Lee", StaffRole.HOSTESS, "5pm - 11pm", StaffStatus.ON_SHIFT),
]


def seed_tables(db: Session) -> int:
    """Create tables 1..12; all start Free since no orders exist yet."""
    existing = {number for (number,) in db.query(Table.number)}
    created = 0
    for number in range(1, TABLE_COUNT + 1):
        if number in existing:
            continue
        db.add(Table(number=number))
        created += 1
    return created


def seed_menu(db: Session) -> int:
    existing = {name for (name,) in db.query(MenuItem.name)}
    created = 0
    for name, price, category in MENU_ITEMS:
        if name in existing:
            continue
        db.add(
            MenuItem(
                name=name,
                price=Decimal(price),
                category=category,
                image=MENU_IMAGE,
                is_available=True,
            )
        )
        created += 1
    return created


def seed_staff(db: Session) -> int:
    existing = {name for (name,) in db.query(StaffMember.name)}
    created = 0
    for name, role, shift, status in STAFF:
        if name in existing:
            continue
        db.add(
            StaffMember(
                name=name, role=role, shift=shift, status=status, avatar=STAFF_AVATAR
            )
        )
        created += 1
    return created


def seed_database(db: Session) -> Dict[str, int]:
    """Insert whatever demo rows are missing and commit once."""
    try:
        counts = {
            "tables": seed_tables(db),
            "menu_items": seed_menu(db),
            "staff": seed_staff(db),
        }
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info(
        f"Seeded {counts['tables']} tables, {counts['menu_items']} menu items, "
        f"{counts['staff']} staff members"
    )
    return counts


def main():
    """Create the schema if needed and seed the configured database."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    settings = get_settings()
    print(f"Seeding {settings.database_url}")
    print("=" * 50)

    engine = create_db_engine(settings=settings)
    init_db(engine)
    db = create_session_factory(engine)()

    try:
        counts = seed_database(db)
        print("Seeding completed successfully!")
        for name, count in counts.items():
            print(f"- {name}: {count} created")
    finally:
        db.close()
        engine.dispose()


if __name__ == "__main__":
    main()
