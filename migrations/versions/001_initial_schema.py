"""Initial schema for users, workers, days off, menus and orders

Revision ID: 001_initial_schema
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001_initial_schema'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Users and workers
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('first_name', sa.String(100), nullable=False),
        sa.Column('last_name', sa.String(100), nullable=False),
        sa.Column('hashed_password', sa.String(255), nullable=False),
        sa.Column('admin', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'workers',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('person_id', sa.Uuid(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, unique=True),
        sa.Column('employment_date', sa.Date(), nullable=False, server_default=sa.func.current_date()),
        sa.Column('permissions', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
    )

    op.create_table(
        'work_hours',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('worker_id', sa.Uuid(), sa.ForeignKey('workers.id', ondelete='CASCADE'), nullable=False),
        sa.Column('day', sa.Integer(), nullable=False),
        sa.Column('start_hour', sa.Time(), nullable=False),
        sa.Column('end_hour', sa.Time(), nullable=False),
        sa.UniqueConstraint('worker_id', 'day', name='uq_work_hours_worker_day'),
    )

    op.create_table(
        'days_off',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('worker_id', sa.Uuid(), sa.ForeignKey('workers.id', ondelete='CASCADE'), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('state', sa.String(20), nullable=False, server_default='UNRESOLVED'),
        sa.Column('resolved_by_id', sa.Uuid(), sa.ForeignKey('workers.id', ondelete='SET NULL'), nullable=True),
        sa.Column('resolved_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
    )
    op.create_index('idx_days_off_date_state', 'days_off', ['date', 'state'])
    op.create_index('idx_days_off_worker', 'days_off', ['worker_id'])

    # Catalog
    op.create_table(
        'menus',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
    )

    op.create_table(
        'foods',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('price', sa.Numeric(10, 2), nullable=False),
        sa.Column('description', sa.Text(), nullable=False, server_default=''),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
    )

    op.create_table(
        'food_additions',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('price', sa.Numeric(10, 2), nullable=False),
    )

    op.create_table(
        'menu_foods',
        sa.Column('menu_id', sa.Uuid(), sa.ForeignKey('menus.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('food_id', sa.Uuid(), sa.ForeignKey('foods.id', ondelete='CASCADE'), primary_key=True),
    )

    op.create_table(
        'food_food_additions',
        sa.Column('food_id', sa.Uuid(), sa.ForeignKey('foods.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('food_addition_id', sa.Uuid(), sa.ForeignKey('food_additions.id', ondelete='CASCADE'), primary_key=True),
    )

    # Orders
    op.create_table(
        'orders',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('total_price', sa.Numeric(10, 2), nullable=False),
        sa.Column('comment', sa.Text(), nullable=False, server_default=''),
        sa.Column('created_date', sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_orders_user_id', 'orders', ['user_id'])

    op.create_table(
        'order_items',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('order_id', sa.Uuid(), sa.ForeignKey('orders.id', ondelete='CASCADE'), nullable=False),
        sa.Column('food_id', sa.Uuid(), sa.ForeignKey('foods.id', ondelete='SET NULL'), nullable=True),
        sa.Column('quantity', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('price', sa.Numeric(10, 2), nullable=False),
    )

    op.create_table(
        'order_item_additions',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('order_item_id', sa.Uuid(), sa.ForeignKey('order_items.id', ondelete='CASCADE'), nullable=False),
        sa.Column('food_addition_id', sa.Uuid(), sa.ForeignKey('food_additions.id', ondelete='SET NULL'), nullable=True),
        sa.Column('quantity', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('price', sa.Numeric(10, 2), nullable=False),
    )

    op.create_table(
        'order_states',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('order_id', sa.Uuid(), sa.ForeignKey('orders.id', ondelete='CASCADE'), nullable=False),
        sa.Column('state', sa.String(30), nullable=False),
        sa.Column('entered_by_id', sa.Uuid(), sa.ForeignKey('users.id', ondelete='SET NULL'), nullable=True),
        sa.Column('entered_date', sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )

    # Refresh token rotation
    op.create_table(
        'token_blacklist',
        sa.Column('token_hash', sa.String(64), primary_key=True),
        sa.Column('blacklisted_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('expires_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('idx_token_blacklist_expires', 'token_blacklist', ['expires_at'])


def downgrade() -> None:
    op.drop_table('token_blacklist')
    op.drop_table('order_states')
    op.drop_table('order_item_additions')
    op.drop_table('order_items')
    op.drop_table('orders')
    op.drop_table('food_food_additions')
    op.drop_table('menu_foods')
    op.drop_table('food_additions')
    op.drop_table('foods')
    op.drop_table('menus')
    op.drop_table('days_off')
    op.drop_table('work_hours')
    op.drop_table('workers')
    op.drop_table('users')
