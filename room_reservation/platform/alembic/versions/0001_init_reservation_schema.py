"""init_reservation_schema

Revision ID: 0001
Revises:
Create Date: 2024-01-01

Schema:
- reservation: room reservations over half-open date ranges [start_date, end_date)
- ix_reservation_room_status_dates: backs the approved-overlap lookup
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'reservation',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('room_id', sa.Integer(), nullable=False),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column(
            'created_at',
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            'updated_at',
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_reservation_user_id'), 'reservation', ['user_id'], unique=False)
    op.create_index(
        'ix_reservation_room_status_dates',
        'reservation',
        ['room_id', 'status', 'start_date', 'end_date'],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index('ix_reservation_room_status_dates', table_name='reservation')
    op.drop_index(op.f('ix_reservation_user_id'), table_name='reservation')
    op.drop_table('reservation')
