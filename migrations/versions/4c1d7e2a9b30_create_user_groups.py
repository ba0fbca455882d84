"""create_user_groups

Revision ID: 4c1d7e2a9b30
Revises:
Create Date: 2026-10-19 09:12:04.318552

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '4c1d7e2a9b30'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create users, user_groups and analytics_events tables."""
    op.create_table('users',
        sa.Column('id', sa.UUID(), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email'),
    )

    op.create_table('user_groups',
        sa.Column('id', sa.UUID(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('default_workspace_id', sa.UUID(), nullable=True),
        sa.Column('users', postgresql.JSONB(), nullable=False, server_default='[]'),
        sa.Column('policies', postgresql.JSONB(), nullable=False, server_default='[]'),
        sa.Column('version', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        'ix_user_groups_default_workspace_id', 'user_groups',
        ['default_workspace_id'], unique=False,
    )

    op.create_table('analytics_events',
        sa.Column('id', sa.UUID(), nullable=False),
        sa.Column('event', sa.String(length=50), nullable=False),
        sa.Column('entity_type', sa.String(length=50), nullable=False),
        sa.Column('entity_id', sa.UUID(), nullable=False),
        sa.Column('actor_id', sa.UUID(), nullable=True),
        sa.Column('properties', postgresql.JSONB(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        'ix_analytics_events_entity_id', 'analytics_events',
        ['entity_id'], unique=False,
    )


def downgrade() -> None:
    """Drop the tables created above."""
    op.drop_index('ix_analytics_events_entity_id', table_name='analytics_events')
    op.drop_table('analytics_events')
    op.drop_index('ix_user_groups_default_workspace_id', table_name='user_groups')
    op.drop_table('user_groups')
    op.drop_table('users')
