"""create_advocates

Revision ID: a1c2e3f4b5d6
Revises:
Create Date: 2026-10-19 09:00:00.000000

어드보킷 디렉터리 테이블 및 검색 인덱스 생성.
Create the advocates table with its search indexes.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB


# revision identifiers, used by Alembic.
revision: str = 'a1c2e3f4b5d6'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # advocates: 검색 가능한 어드보킷 디렉터리
    # Searchable advocate directory
    op.create_table(
        'advocates',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('first_name', sa.Text(), nullable=False),
        sa.Column('last_name', sa.Text(), nullable=False),
        sa.Column('city', sa.Text(), nullable=False),
        sa.Column('degree', sa.Text(), nullable=False),
        sa.Column('specialties', JSONB(), server_default=sa.text("'[]'::jsonb"), nullable=False),
        sa.Column('years_of_experience', sa.Integer(), nullable=False),
        sa.Column('phone_number', sa.BigInteger(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
    )

    # 텍스트 필드 인덱스: B-tree indexes for the text field search
    op.create_index('idx_advocates_first_name', 'advocates', ['first_name'])
    op.create_index('idx_advocates_last_name', 'advocates', ['last_name'])
    op.create_index('idx_advocates_city', 'advocates', ['city'])
    op.create_index('idx_advocates_degree', 'advocates', ['degree'])

    # 전문 분야 GIN 인덱스: GIN index on the JSONB specialties list
    op.create_index(
        'idx_advocates_specialties_gin',
        'advocates',
        ['specialties'],
        postgresql_using='gin',
    )


def downgrade() -> None:
    op.drop_index('idx_advocates_specialties_gin', table_name='advocates')
    op.drop_index('idx_advocates_degree', table_name='advocates')
    op.drop_index('idx_advocates_city', table_name='advocates')
    op.drop_index('idx_advocates_last_name', table_name='advocates')
    op.drop_index('idx_advocates_first_name', table_name='advocates')
    op.drop_table('advocates')
