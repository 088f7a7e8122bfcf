"""init_flight_booking_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19

Schema:
- user: registered accounts (email + bcrypt hash)
- flight: seat inventory and price per flight, loaded by script/seed_flights.py
- booking: append-only ledger of confirmed bookings, passengers stored as JSONB
  in request order, price snapshot taken under the flight row lock
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create all tables."""

    op.create_table(
        'user',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('hashed_password', sa.String(length=255), nullable=False),
        sa.Column(
            'created_at',
            sa.DateTime(timezone=True),
            server_default=sa.text('now()'),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_user_email'), 'user', ['email'], unique=True)

    op.create_table(
        'flight',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('airline', sa.String(length=100), nullable=False),
        sa.Column('airline_code', sa.String(length=10), nullable=False),
        sa.Column('flight_number', sa.String(length=20), nullable=False),
        sa.Column('origin', sa.String(length=3), nullable=False),
        sa.Column('destination', sa.String(length=3), nullable=False),
        sa.Column('departure', sa.DateTime(timezone=True), nullable=False),
        sa.Column('arrival', sa.DateTime(timezone=True), nullable=True),
        sa.Column('duration', sa.String(length=20), nullable=True),
        sa.Column('price', sa.Numeric(10, 2), nullable=False),
        sa.Column('available_seats', sa.Integer(), nullable=False),
        sa.Column('operational_days', JSONB, nullable=False, server_default=sa.text("'[]'::jsonb")),
        sa.Column('raw_meta', JSONB, nullable=False, server_default=sa.text("'{}'::jsonb")),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint(
            'airline_code', 'flight_number', 'departure', name='uq_flight_code_number_departure'
        ),
        sa.CheckConstraint('available_seats >= 0', name='ck_flight_available_seats_non_negative'),
        sa.CheckConstraint('price >= 0', name='ck_flight_price_non_negative'),
    )
    op.create_index(op.f('ix_flight_origin'), 'flight', ['origin'])
    op.create_index(op.f('ix_flight_destination'), 'flight', ['destination'])
    op.create_index(op.f('ix_flight_departure'), 'flight', ['departure'])

    op.create_table(
        'booking',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('flight_id', sa.Integer(), nullable=False),
        sa.Column('passengers', JSONB, nullable=False),
        sa.Column('seats_booked', sa.Integer(), nullable=False),
        sa.Column('confirmation_code', sa.String(length=64), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('price_per_seat', sa.Numeric(10, 2), nullable=True),
        sa.Column('total_price', sa.Numeric(12, 2), nullable=True),
        sa.Column(
            'created_at',
            sa.DateTime(timezone=True),
            server_default=sa.text('now()'),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(['user_id'], ['user.id'], ondelete='RESTRICT'),
        sa.ForeignKeyConstraint(['flight_id'], ['flight.id'], ondelete='RESTRICT'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('confirmation_code'),
        sa.CheckConstraint('seats_booked > 0', name='ck_booking_seats_positive'),
    )
    op.create_index(op.f('ix_booking_user_id'), 'booking', ['user_id'])
    op.create_index(op.f('ix_booking_flight_id'), 'booking', ['flight_id'])


def downgrade() -> None:
    op.drop_table('booking')
    op.drop_table('flight')
    op.drop_index(op.f('ix_user_email'), table_name='user')
    op.drop_table('user')
