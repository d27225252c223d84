"""create artists table

Revision ID: k1l2m3n4o5p6
Revises:
Create Date: 2025-02-03 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'k1l2m3n4o5p6'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'artists',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('full_name', sa.String(255), nullable=True),
        sa.Column('bio', sa.Text(), nullable=True),
        sa.Column('avatar_url', sa.String(500), nullable=True),
        sa.Column('location', sa.String(255), nullable=True),
        sa.Column('website', sa.String(500), nullable=True),
        sa.Column('phone', sa.String(50), nullable=True),
        sa.Column('total_plays', sa.Integer(), server_default='0', nullable=False),
        sa.Column('total_followers', sa.Integer(), server_default='0', nullable=False),
        sa.Column('total_concerts', sa.Integer(), server_default='0', nullable=False),
        sa.Column('coins_balance', sa.Integer(), server_default='0', nullable=False),
        sa.Column('is_verified', sa.Boolean(), nullable=True),
        sa.Column('instagram', sa.String(255), nullable=True),
        sa.Column('twitter', sa.String(255), nullable=True),
        sa.Column('facebook', sa.String(255), nullable=True),
        sa.Column('youtube', sa.String(255), nullable=True),
        sa.Column('spotify', sa.String(255), nullable=True),
        sa.Column('apple_music', sa.String(255), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint('total_plays >= 0 AND total_followers >= 0 AND total_concerts >= 0 AND coins_balance >= 0', name='artists_aggregates_non_negative'),
    )
    op.create_index('ix_artists_email', 'artists', ['email'], unique=True)


def downgrade() -> None:
    op.drop_index('ix_artists_email', table_name='artists')
    op.drop_table('artists')
