"""add tour packages and package bookings

Revision ID: 20261019_02
Revises: 20261019_01
Create Date: 2026-10-19 12:00:00.000000
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

revision: str = '20261019_02'
down_revision: Union[str, None] = '20261019_01'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'packages',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('price', sa.Float(), nullable=False),
        sa.Column('duration', sa.String(), nullable=False),
        sa.Column('location', sa.String(), nullable=False),
        sa.Column('image_url', sa.String(), nullable=True),
        sa.Column('max_pax', sa.Integer(), nullable=False),
        sa.Column('status', sa.String(), nullable=False, server_default='active'),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_packages_status', 'packages', ['status'])
    op.create_index('ix_packages_created_at', 'packages', ['created_at'])

    op.create_table(
        'package_bookings',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column(
            'package_id',
            sa.Integer(),
            sa.ForeignKey('packages.id', ondelete='SET NULL'),
            nullable=True,
        ),
        sa.Column('customer_name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('phone_number', sa.String(), nullable=False),
        sa.Column('travel_date', sa.DateTime(), nullable=False),
        sa.Column('number_of_people', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('total_price', sa.Float(), nullable=False),
        sa.Column('status', sa.String(), nullable=False, server_default='pending'),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_package_bookings_package_id', 'package_bookings', ['package_id'])
    op.create_index('ix_package_bookings_email', 'package_bookings', ['email'])
    op.create_index('ix_package_bookings_status', 'package_bookings', ['status'])
    op.create_index('ix_package_bookings_created_at', 'package_bookings', ['created_at'])


def downgrade() -> None:
    op.drop_table('package_bookings')
    op.drop_table('packages')
