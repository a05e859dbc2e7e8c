"""Create users and notes tables

Revision ID: 0001
Revises:
Create Date: 2026-10-17 12:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from swingnotes.core.models.types import GUID


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('id', GUID(), primary_key=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('username', sa.String(length=50), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.UniqueConstraint('username', name='uq_users_username'),
        sa.CheckConstraint(
            'length(username) >= 3 AND length(username) <= 50', name='ck_users_username_len'
        ),
    )

    op.create_table(
        'notes',
        sa.Column('id', GUID(), primary_key=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('modified_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('title', sa.String(length=50), nullable=False),
        sa.Column('text', sa.String(length=300), nullable=False),
        sa.Column(
            'owner_id', GUID(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False
        ),
        sa.CheckConstraint(
            'length(title) >= 1 AND length(title) <= 50', name='ck_notes_title_len'
        ),
        sa.CheckConstraint(
            'length(text) >= 1 AND length(text) <= 300', name='ck_notes_text_len'
        ),
    )
    op.create_index('idx_notes_owner_modified', 'notes', ['owner_id', 'modified_at'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('idx_notes_owner_modified', table_name='notes')
    op.drop_table('notes')
    op.drop_table('users')
