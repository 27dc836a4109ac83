"""create_books_table

Revision ID: 0001
Revises:
Create Date: 2026-01-17 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import mysql


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _exact_match_string() -> sa.String:
    # Binary collation on MySQL: author/category filters are case-sensitive
    return sa.String(length=255).with_variant(
        mysql.VARCHAR(length=255, collation='utf8mb4_bin'), 'mysql'
    )


def upgrade() -> None:
    op.create_table(
        'books',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('author', _exact_match_string(), nullable=False),
        sa.Column('category', _exact_match_string(), nullable=False),
        sa.Column(
            'year',
            sa.Integer().with_variant(mysql.YEAR(), 'mysql'),
            nullable=True,
        ),
        sa.Column('publisher', sa.String(length=255), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        mysql_engine='InnoDB',
        mysql_charset='utf8mb4',
        sqlite_autoincrement=True,
        if_not_exists=True,
    )


def downgrade() -> None:
    op.drop_table('books')
