"""create issues and issue_counters

Creates the issues table and the counter table backing CIV### identifiers,
seeding the "issues" counter at 0.

Revision ID: 0001_create_issues
Revises:
Create Date: 2026-10-18 12:00:00.000000

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001_create_issues'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'issues',
        sa.Column('id', sa.String(length=32), primary_key=True),
        sa.Column('title', sa.Text(), nullable=True),
        sa.Column('category', sa.Text(), nullable=True),
        sa.Column('location', sa.Text(), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('priority', sa.Text(), nullable=True),
        sa.Column('status', sa.Text(), nullable=True),
        sa.Column('date_reported', sa.DateTime(timezone=True), nullable=True),
        sa.Column('reported_by', sa.Text(), nullable=True),
        sa.Column('photo', sa.Text(), nullable=True),
        sa.Column('department', sa.Text(), nullable=True),
        sa.Column('lat', sa.Float(), nullable=True),
        sa.Column('lng', sa.Float(), nullable=True),
    )
    op.create_index('ix_issues_category', 'issues', ['category'])
    op.create_index('ix_issues_status', 'issues', ['status'])
    op.create_index('ix_issues_date_reported', 'issues', ['date_reported'])

    counters = op.create_table(
        'issue_counters',
        sa.Column('name', sa.String(length=50), primary_key=True),
        sa.Column('value', sa.Integer(), server_default='0', nullable=False),
    )
    op.bulk_insert(counters, [{'name': 'issues', 'value': 0}])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('issue_counters')
    op.drop_index('ix_issues_date_reported', table_name='issues')
    op.drop_index('ix_issues_status', table_name='issues')
    op.drop_index('ix_issues_category', table_name='issues')
    op.drop_table('issues')
