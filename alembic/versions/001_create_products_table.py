"""Create products table.

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create products table."""
    op.create_table(
        'products',
        sa.Column('id', sa.String(24), primary_key=True),
        sa.Column('category', sa.String(200), nullable=False, index=True),
        sa.Column('name', sa.String(500), nullable=False),
        sa.Column('price', sa.Numeric(10, 2), nullable=False, index=True),
        sa.Column('image', sa.String(1000), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('now()')),
        sa.CheckConstraint('price > 0', name='ck_products_price_positive'),
    )


def downgrade() -> None:
    """Drop products table."""
    op.drop_table('products')
