"""initial travel tables: resources, custom package catalog and bookings

Revision ID: 20261019_01
Revises:
Create Date: 2026-10-19 00:00:00.000000
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

revision: str = '20261019_01'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list:
    return [
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        'employees',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('employee_id', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False, unique=True),
        sa.Column('nic', sa.String(), nullable=False, unique=True),
        sa.Column(
            'role',
            sa.Enum('Travel Agent', 'Driver', 'Worker', 'Supplier', name='employeerole'),
            nullable=False,
        ),
        sa.Column('phone_number', sa.String(), nullable=False),
        sa.Column('salary', sa.Float(), nullable=False),
        sa.Column('join_date', sa.DateTime(), nullable=True),
        sa.Column('status', sa.String(), nullable=False, server_default='active'),
        *_timestamps(),
    )
    op.create_index('ix_employees_employee_id', 'employees', ['employee_id'], unique=True)
    op.create_index('ix_employees_status', 'employees', ['status'])

    op.create_table(
        'hotels',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('location', sa.String(), nullable=False),
        sa.Column('contact_number', sa.String(), nullable=False),
        sa.Column('available_rooms', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('room_types', sa.JSON(), nullable=False),
        sa.Column('room_prices', sa.JSON(), nullable=False),
        sa.Column('room_quantities', sa.JSON(), nullable=False),
        sa.Column('facilities', sa.JSON(), nullable=False),
        sa.Column('status', sa.String(), nullable=False, server_default='available'),
        *_timestamps(),
    )
    op.create_index('ix_hotels_status', 'hotels', ['status'])

    op.create_table(
        'vehicles',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('vehicle_id', sa.String(), nullable=False),
        sa.Column('type', sa.String(), nullable=False),
        sa.Column('model', sa.String(), nullable=False),
        sa.Column('seats', sa.Integer(), nullable=False),
        sa.Column('fuel_type', sa.String(), nullable=True),
        sa.Column('license_insurance_updated', sa.DateTime(), nullable=True),
        sa.Column('license_insurance_expiry', sa.DateTime(), nullable=True),
        sa.Column('status', sa.String(), nullable=False, server_default='available'),
        *_timestamps(),
    )
    op.create_index('ix_vehicles_vehicle_id', 'vehicles', ['vehicle_id'], unique=True)
    op.create_index('ix_vehicles_status', 'vehicles', ['status'])

    op.create_table(
        'custom_package_categories',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False, unique=True),
        *_timestamps(),
    )

    op.create_table(
        'custom_package_options',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column(
            'category_id',
            sa.Integer(),
            sa.ForeignKey('custom_package_categories.id', ondelete='CASCADE'),
            nullable=False,
        ),
        sa.Column('position', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('description', sa.String(), nullable=False, server_default=''),
        sa.Column('price', sa.Float(), nullable=False),
        sa.Column('is_available', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column(
            'item_model',
            sa.Enum('Employee', 'Hotel', 'Vehicle', name='itemmodel'),
            nullable=True,
        ),
        sa.Column('item_id', sa.Integer(), nullable=True),
        sa.Column('room_type', sa.String(), nullable=True),
        *_timestamps(),
    )
    op.create_index(
        'ix_custom_package_options_category_id', 'custom_package_options', ['category_id']
    )

    op.create_table(
        'custom_package_bookings',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('customer_name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('phone_number', sa.String(), nullable=False),
        sa.Column('travel_date', sa.DateTime(), nullable=False),
        sa.Column('additional_notes', sa.String(), nullable=False, server_default=''),
        sa.Column('selected_options', sa.JSON(), nullable=False),
        sa.Column('total_price', sa.Float(), nullable=False),
        sa.Column('status', sa.String(), nullable=False, server_default='pending'),
        *_timestamps(),
    )
    op.create_index('ix_custom_package_bookings_email', 'custom_package_bookings', ['email'])
    op.create_index('ix_custom_package_bookings_status', 'custom_package_bookings', ['status'])
    op.create_index(
        'ix_custom_package_bookings_created_at', 'custom_package_bookings', ['created_at']
    )


def downgrade() -> None:
    op.drop_table('custom_package_bookings')
    op.drop_table('custom_package_options')
    op.drop_table('custom_package_categories')
    op.drop_table('vehicles')
    op.drop_table('hotels')
    op.drop_table('employees')
    bind = op.get_bind()
    if bind.dialect.name == 'postgresql':
        op.execute("DROP TYPE IF EXISTS itemmodel")
        op.execute("DROP TYPE IF EXISTS employeerole")
