"""Create tasks and users tables

Revision ID: 0001
Revises:
Create Date: 2026-10-18 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision = '0001'
down_revision = None  # This is the first migration
branch_labels = None
depends_on = None


def upgrade():
    op.create_table('tasks',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.String(length=255), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('completed', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('priority', sa.String(length=20), server_default='medium', nullable=False),
        sa.Column('due_date', sa.String(length=10), nullable=True),
        sa.Column('created_at', sa.BigInteger(), nullable=False),
        sa.Column('updated_at', sa.BigInteger(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint("priority IN ('low', 'medium', 'high')", name='task_priority'),
    )

    # Lookup paths used by the task queries
    op.create_index('by_user', 'tasks', ['user_id'])
    op.create_index('by_user_completed', 'tasks', ['user_id', 'completed'])
    op.create_index('by_user_priority', 'tasks', ['user_id', 'priority'])

    op.create_table('users',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('image', sa.String(length=500), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('by_email', 'users', ['email'], unique=True)


def downgrade():
    op.drop_index('by_email', table_name='users')
    op.drop_table('users')

    op.drop_index('by_user_priority', table_name='tasks')
    op.drop_index('by_user_completed', table_name='tasks')
    op.drop_index('by_user', table_name='tasks')
    op.drop_table('tasks')
