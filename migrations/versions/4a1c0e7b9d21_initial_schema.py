"""initial schema: users, apps, catalogs and per-user junctions

Revision ID: 4a1c0e7b9d21
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '4a1c0e7b9d21'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_ID = sa.BigInteger().with_variant(sa.Integer(), 'sqlite')


def _catalog_table(name: str, *, described: bool) -> None:
    columns = [
        sa.Column('id', _ID, autoincrement=True, nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('image', sa.String(), nullable=False),
    ]
    if described:
        columns.append(sa.Column('description', sa.Text(), nullable=False, server_default=''))
    op.create_table(name, *columns, sa.PrimaryKeyConstraint('id'))


def _junction_table(name: str, catalog: str, item_column: str) -> None:
    op.create_table(
        name,
        sa.Column('userId', _ID, nullable=False),
        sa.Column(item_column, _ID, nullable=False),
        sa.ForeignKeyConstraint(['userId'], ['users.id']),
        sa.ForeignKeyConstraint([item_column], [f'{catalog}.id']),
        sa.PrimaryKeyConstraint('userId', item_column),
    )
    op.create_index(f'idx_{name}_{catalog}_id', name, [item_column], unique=False)


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', _ID, autoincrement=True, nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('pass_hash', sa.LargeBinary(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('image', sa.String(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email'),
    )
    op.create_index('idx_users_email', 'users', ['email'], unique=False)

    op.create_table(
        'apps',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('secret', sa.String(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name'),
        sa.UniqueConstraint('secret'),
    )

    _catalog_table('author', described=False)
    _catalog_table('article', described=True)
    _catalog_table('poet', described=False)
    _catalog_table('course', described=True)
    _catalog_table('feed', described=True)

    _junction_table('authors', 'author', 'authorId')
    _junction_table('articles', 'article', 'articleId')
    _junction_table('poets', 'poet', 'poetId')


def downgrade() -> None:
    for name, catalog in (('poets', 'poet'), ('articles', 'article'), ('authors', 'author')):
        op.drop_index(f'idx_{name}_{catalog}_id', table_name=name)
        op.drop_table(name)
    for catalog in ('feed', 'course', 'poet', 'article', 'author'):
        op.drop_table(catalog)
    op.drop_table('apps')
    op.drop_index('idx_users_email', table_name='users')
    op.drop_table('users')
