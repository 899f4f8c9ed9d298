"""Create book network tables

Revision ID: 3f1c9a7d2b64
Revises: 
Create Date: 2026-10-19 10:12:41.208317

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c9a7d2b64'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table('user',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name')
    )
    op.create_table('book',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=500), nullable=False),
        sa.Column('author_name', sa.String(length=255), nullable=False),
        sa.Column('isbn', sa.String(length=20), nullable=True),
        sa.Column('synopsis', sa.String(), nullable=True),
        sa.Column('shareable', sa.Boolean(), nullable=False),
        sa.Column('archived', sa.Boolean(), nullable=False),
        sa.Column('owner_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['owner_id'], ['user.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('idx_book_owner_id', 'book', ['owner_id'])
    op.create_index('idx_book_created_at', 'book', ['created_at'])

    op.create_table('book_transaction_history',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('book_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('returned', sa.Boolean(), nullable=False),
        sa.Column('return_approved', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['book_id'], ['book.id']),
        sa.ForeignKeyConstraint(['user_id'], ['user.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('idx_history_user_id', 'book_transaction_history', ['user_id'])
    # One unreturned record per (book, user)
    op.create_index(
        'uix_history_active_book_user',
        'book_transaction_history',
        ['book_id', 'user_id'],
        unique=True,
        sqlite_where=sa.text('returned = 0'),
        postgresql_where=sa.text('NOT returned')
    )

    op.create_table('feedback',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('note', sa.Float(), nullable=False),
        sa.Column('comment', sa.String(), nullable=False),
        sa.Column('book_id', sa.Integer(), nullable=False),
        sa.Column('created_by', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['book_id'], ['book.id']),
        sa.ForeignKeyConstraint(['created_by'], ['user.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_feedback_book_id', 'feedback', ['book_id'])


def downgrade() -> None:
    op.drop_index('ix_feedback_book_id', table_name='feedback')
    op.drop_table('feedback')
    op.drop_index('uix_history_active_book_user', table_name='book_transaction_history')
    op.drop_index('idx_history_user_id', table_name='book_transaction_history')
    op.drop_table('book_transaction_history')
    op.drop_index('idx_book_created_at', table_name='book')
    op.drop_index('idx_book_owner_id', table_name='book')
    op.drop_table('book')
    op.drop_table('user')
