"""Create users, labels, issues, issue_labels and comments tables

Revision ID: 4c1e2f7a9b10
Revises:
Create Date: 2025-11-02 10:14:32.418207

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4c1e2f7a9b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('email', sa.String(320), nullable=False),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('password_hash', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint('email', name='uq_users_email'),
    )

    op.create_table(
        'labels',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('color', sa.String(32), nullable=False),
        sa.UniqueConstraint('name', name='uq_labels_name'),
    )

    op.create_table(
        'issues',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('title', sa.String(500), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('status', sa.String(20), nullable=False, server_default='todo'),
        sa.Column('priority', sa.String(20), nullable=False, server_default='medium'),
        sa.Column(
            'assignee_id', sa.String(36),
            sa.ForeignKey('users.id', ondelete='SET NULL'), nullable=True,
        ),
        sa.Column('created_by', sa.String(36), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint(
            "status IN ('todo', 'in_progress', 'done', 'cancelled')", name='ck_issues_status'
        ),
        sa.CheckConstraint(
            "priority IN ('low', 'medium', 'high')", name='ck_issues_priority'
        ),
    )
    op.create_index('ix_issues_updated_at', 'issues', ['updated_at'])
    op.create_index('ix_issues_assignee_id', 'issues', ['assignee_id'])

    op.create_table(
        'issue_labels',
        sa.Column(
            'issue_id', sa.String(36),
            sa.ForeignKey('issues.id', ondelete='CASCADE'), primary_key=True,
        ),
        sa.Column(
            'label_id', sa.String(36),
            sa.ForeignKey('labels.id', ondelete='CASCADE'), primary_key=True,
        ),
    )
    op.create_index('ix_issue_labels_label_id', 'issue_labels', ['label_id'])

    op.create_table(
        'comments',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column(
            'issue_id', sa.String(36),
            sa.ForeignKey('issues.id', ondelete='CASCADE'), nullable=False,
        ),
        sa.Column(
            'user_id', sa.String(36),
            sa.ForeignKey('users.id', ondelete='SET NULL'), nullable=True,
        ),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_comments_issue_id', 'comments', ['issue_id'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_comments_issue_id', table_name='comments')
    op.drop_table('comments')
    op.drop_index('ix_issue_labels_label_id', table_name='issue_labels')
    op.drop_table('issue_labels')
    op.drop_index('ix_issues_assignee_id', table_name='issues')
    op.drop_index('ix_issues_updated_at', table_name='issues')
    op.drop_table('issues')
    op.drop_table('labels')
    op.drop_table('users')
