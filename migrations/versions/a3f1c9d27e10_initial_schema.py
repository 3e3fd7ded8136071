"""initial_schema

Revision ID: a3f1c9d27e10
Revises:
Create Date: 2026-10-19 09:12:44.218530

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'a3f1c9d27e10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('display_name', sa.String(), nullable=True),
        sa.Column('email', sa.String(), nullable=True),
        sa.Column('role', sa.String(), nullable=True),
        sa.Column('status', sa.String(), nullable=False),
        sa.Column('joined_date', sa.DateTime(), nullable=False),
        sa.Column('last_modified', sa.DateTime(), nullable=True),
        sa.Column('modified_by', sa.String(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_users_id', 'users', ['id'], unique=False)
    op.create_index('ix_users_role', 'users', ['role'], unique=False)
    op.create_index('ix_users_status', 'users', ['status'], unique=False)
    op.create_index('ix_users_joined_date', 'users', ['joined_date'], unique=False)

    op.create_table(
        'admin_actions',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('admin_id', sa.String(), nullable=False),
        sa.Column('action', sa.String(), nullable=False),
        sa.Column('target_user_id', sa.String(), nullable=True),
        sa.Column('report_id', sa.String(), nullable=True),
        sa.Column('changes', sa.JSON(), nullable=True),
        sa.Column('resolution', sa.String(), nullable=True),
        sa.Column('reason', sa.Text(), nullable=False),
        sa.Column('timestamp', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_admin_actions_admin_id', 'admin_actions', ['admin_id'], unique=False)
    op.create_index('ix_admin_actions_timestamp', 'admin_actions', ['timestamp'], unique=False)

    op.create_table(
        'user_progress',
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('progress', sa.Float(), nullable=False),
        sa.Column('badges', sa.JSON(), nullable=False),
        sa.Column('recent_activity', sa.JSON(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('user_id'),
    )

    op.create_table(
        'community_posts',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('author_id', sa.String(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('is_reported', sa.Boolean(), nullable=False),
        sa.Column('moderated_by', sa.String(), nullable=True),
        sa.Column('moderated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_community_posts_author_id', 'community_posts', ['author_id'], unique=False)
    op.create_index('ix_community_posts_created_at', 'community_posts', ['created_at'], unique=False)

    op.create_table(
        'comments',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('post_id', sa.String(), nullable=False),
        sa.Column('author_id', sa.String(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('is_reported', sa.Boolean(), nullable=False),
        sa.Column('moderated_by', sa.String(), nullable=True),
        sa.Column('moderated_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['post_id'], ['community_posts.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_comments_post_id', 'comments', ['post_id'], unique=False)
    op.create_index('ix_comments_author_id', 'comments', ['author_id'], unique=False)
    op.create_index('ix_comments_created_at', 'comments', ['created_at'], unique=False)

    op.create_table(
        'reports',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('content_type', sa.String(), nullable=False),
        sa.Column('content_id', sa.String(), nullable=False),
        sa.Column('reported_by', sa.String(), nullable=False),
        sa.Column('reason', sa.Text(), nullable=True),
        sa.Column('status', sa.String(), nullable=False),
        sa.Column('reported_at', sa.DateTime(), nullable=False),
        sa.Column('resolved_by', sa.String(), nullable=True),
        sa.Column('resolved_at', sa.DateTime(), nullable=True),
        sa.Column('resolution', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_reports_status_reported_at', 'reports', ['status', 'reported_at'], unique=False)


def downgrade() -> None:
    op.drop_index('ix_reports_status_reported_at', table_name='reports')
    op.drop_table('reports')
    op.drop_index('ix_comments_created_at', table_name='comments')
    op.drop_index('ix_comments_author_id', table_name='comments')
    op.drop_index('ix_comments_post_id', table_name='comments')
    op.drop_table('comments')
    op.drop_index('ix_community_posts_created_at', table_name='community_posts')
    op.drop_index('ix_community_posts_author_id', table_name='community_posts')
    op.drop_table('community_posts')
    op.drop_table('user_progress')
    op.drop_index('ix_admin_actions_timestamp', table_name='admin_actions')
    op.drop_index('ix_admin_actions_admin_id', table_name='admin_actions')
    op.drop_table('admin_actions')
    op.drop_index('ix_users_joined_date', table_name='users')
    op.drop_index('ix_users_status', table_name='users')
    op.drop_index('ix_users_role', table_name='users')
    op.drop_index('ix_users_id', table_name='users')
    op.drop_table('users')
