"""Create tables, menu_items, staff, orders and order_items

Revision ID: 0001_create_pos_tables
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001_create_pos_tables'
down_revision = None
branch_labels = None
depends_on = None

TABLE_STATUSES = ('Free', 'Occupied', 'Serving', 'Billing')
MENU_CATEGORIES = ('Starters', 'Mains', 'Drinks')
STAFF_ROLES = ('Manager', 'Head Waiter', 'Waiter', 'Chef', 'Sous Chef', 'Hostess')
STAFF_STATUSES = ('On Shift', 'Off Duty')
ORDER_STATUSES = ('Pending', 'Preparing', 'Ready', 'Served', 'Paid')


def _enum(values, name):
    # Stored as VARCHAR with a CHECK constraint, matching the models
    return sa.Enum(*values, name=name, native_enum=False, create_constraint=True)


def _timestamps(updated=True):
    columns = [
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(),
                  nullable=False),
    ]
    if updated:
        columns.append(
            sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(),
                      nullable=False)
        )
    return columns


def upgrade():
    op.create_table(
        'tables',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('number', sa.Integer(), nullable=False),
        sa.Column('status', _enum(TABLE_STATUSES, 'table_status'),
                  nullable=False),
        sa.Column('customer_count', sa.Integer(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('number'),
        sa.CheckConstraint('number > 0', name='chk_table_number_positive'),
        sa.CheckConstraint('customer_count IS NULL OR customer_count >= 0',
                           name='chk_table_customer_count'),
    )
    op.create_index('ix_tables_status', 'tables', ['status'])

    op.create_table(
        'menu_items',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('price', sa.Numeric(10, 2), nullable=False),
        sa.Column('category', _enum(MENU_CATEGORIES, 'menu_category'),
                  nullable=False),
        sa.Column('image', sa.String(length=500), nullable=False),
        sa.Column('is_available', sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint('price > 0', name='chk_menu_item_price_positive'),
    )
    op.create_index('ix_menu_items_id', 'menu_items', ['id'])
    op.create_index('ix_menu_items_category', 'menu_items', ['category'])

    op.create_table(
        'staff',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('role', _enum(STAFF_ROLES, 'staff_role'), nullable=False),
        sa.Column('shift', sa.String(), nullable=False),
        sa.Column('status', _enum(STAFF_STATUSES, 'staff_status'),
                  nullable=False),
        sa.Column('avatar', sa.String(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_staff_id', 'staff', ['id'])
    op.create_index('ix_staff_status', 'staff', ['status'])

    op.create_table(
        'orders',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('table_id', sa.Integer(), nullable=False),
        sa.Column('staff_id', sa.Integer(), nullable=True),
        sa.Column('status', _enum(ORDER_STATUSES, 'order_status'),
                  nullable=False),
        sa.Column('total_amount', sa.Numeric(10, 2), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['table_id'], ['tables.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['staff_id'], ['staff.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_orders_id', 'orders', ['id'])
    op.create_index('ix_orders_table_id', 'orders', ['table_id'])
    op.create_index('ix_orders_staff_id', 'orders', ['staff_id'])
    op.create_index('ix_orders_status', 'orders', ['status'])

    op.create_table(
        'order_items',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('order_id', sa.Integer(), nullable=False),
        sa.Column('menu_item_id', sa.Integer(), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('unit_price', sa.Numeric(10, 2), nullable=False),
        sa.Column('subtotal', sa.Numeric(10, 2), nullable=False),
        *_timestamps(updated=False),
        sa.ForeignKeyConstraint(['order_id'], ['orders.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['menu_item_id'], ['menu_items.id'],
                                ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint('quantity > 0', name='chk_order_item_quantity'),
    )
    op.create_index('ix_order_items_id', 'order_items', ['id'])
    op.create_index('ix_order_items_order_id', 'order_items', ['order_id'])


def downgrade():
    op.drop_table('order_items')
    op.drop_table('orders')
    op.drop_table('staff')
    op.drop_table('menu_items')
    op.drop_table('tables')
