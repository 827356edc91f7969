"""Initial schema

Revision ID: 0001
Revises:
Create Date: 2026-03-01

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Ukers table (organisational units, filled by the HR master data sync)
    op.create_table(
        'ukers',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('kode_uker', sa.String(50), nullable=False, index=True),
        sa.Column('nama_uker', sa.String(255), nullable=False, index=True),
        sa.Column('active', sa.Boolean(), nullable=False, server_default=sa.true(), index=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), onupdate=sa.func.now(), nullable=False),
    )

    # RFMTs table
    op.create_table(
        'rfmts',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('uker_id', sa.Uuid(), sa.ForeignKey('ukers.id', ondelete='SET NULL'), index=True),
        sa.Column('pn', sa.String(50), nullable=False, index=True),
        sa.Column('nama_lengkap', sa.String(255), nullable=False, server_default=''),
        sa.Column('jg', sa.String(50), nullable=False, server_default=''),
        sa.Column('esgdesc', sa.Text(), nullable=False, server_default=''),
        sa.Column('kanca', sa.String(255), nullable=False, server_default='', index=True),
        sa.Column('uker', sa.String(255), nullable=False, server_default=''),
        sa.Column('uker_tujuan', sa.String(255), nullable=False, server_default=''),
        sa.Column('keterangan', sa.Text(), nullable=False, server_default=''),
        sa.Column('kelompok_jabatan_rmft', sa.String(255), nullable=False, server_default=''),
        sa.Column('deleted_at', sa.DateTime(timezone=True), index=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), onupdate=sa.func.now(), nullable=False),
    )


def downgrade() -> None:
    op.drop_table('rfmts')
    op.drop_table('ukers')
