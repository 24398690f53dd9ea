"""Create payments table

Revision ID: 5c2f0d9a41b7
Revises:
Create Date: 2025-11-18 09:14:02.118356

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5c2f0d9a41b7'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'payments',
        sa.Column('id', sa.String(length=36), nullable=False, comment='Payment UUID'),
        sa.Column('status', sa.String(length=20), nullable=False, comment='Authorization outcome'),
        sa.Column('card_last4', sa.String(length=4), nullable=False, comment='Last four digits of the card number'),
        sa.Column('expiry_month', sa.Integer(), nullable=False),
        sa.Column('expiry_year', sa.Integer(), nullable=False),
        sa.Column('currency', sa.String(length=3), nullable=False, comment='ISO 4217 currency code'),
        sa.Column('amount', sa.BigInteger(), nullable=False, comment='Amount in minor currency units'),
        sa.Column('created_at', sa.TIMESTAMP(timezone=True), server_default=sa.func.now(), nullable=False, comment='Record creation timestamp'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('idx_payments_created_at', 'payments', ['created_at'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('idx_payments_created_at', table_name='payments')
    op.drop_table('payments')
