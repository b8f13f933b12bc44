"""Create case pack tables

Revision ID: 001
Revises:
Create Date: 2025-08-25 12:00:00.000000

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

PACK_SOURCES = ('GDSN', 'DISTRIBUTOR', 'ORG_PHOTO', 'HEURISTIC')


def upgrade() -> None:
    """Create trade_item, case_pack and commodity_pack"""

    # 1. Trade items (each & case-level GTIN)
    op.create_table('trade_item',
        sa.Column('id', sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column('gtin_each', sa.Text(), nullable=True),
        sa.Column('gtin_case', sa.Text(), nullable=True),
        sa.Column('category', sa.Text(), nullable=True),
        sa.Column('unit_net', sa.Numeric(12, 4), nullable=True),
        sa.Column('unit_uom', sa.Text(), server_default='lb', nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),

        sa.PrimaryKeyConstraint('id', name='pk_trade_item'),
        sa.UniqueConstraint('gtin_each', name='uq_trade_item_gtin_each'),
        sa.UniqueConstraint('gtin_case', name='uq_trade_item_gtin_case'),
    )

    # 2. Pack source enum + case packs
    pack_source = postgresql.ENUM(*PACK_SOURCES, name='pack_source', create_type=False)
    pack_source.create(op.get_bind(), checkfirst=True)

    op.create_table('case_pack',
        sa.Column('id', sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column('trade_item_id', sa.BigInteger(), nullable=True),
        sa.Column('units_per_case', sa.Integer(), nullable=True),
        sa.Column('case_net_weight', sa.Numeric(12, 4), nullable=True),
        sa.Column('case_uom', sa.Text(), server_default='lb', nullable=True),
        sa.Column('source', pack_source, nullable=False),
        sa.Column('confidence', sa.Numeric(3, 2), server_default='0.90', nullable=True),
        sa.Column('evidence_url', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),

        sa.PrimaryKeyConstraint('id', name='pk_case_pack'),
        sa.ForeignKeyConstraint(
            ['trade_item_id'], ['trade_item.id'],
            name='fk_case_pack_trade_item_id_trade_item',
            ondelete='CASCADE',
        ),
        sa.CheckConstraint('units_per_case > 0', name='ck_case_pack_units_per_case_positive'),
    )
    op.create_index('idx_case_pack_trade_item', 'case_pack', ['trade_item_id'])

    # 3. Commodity defaults, one row per (commodity_code, region_code)
    op.create_table('commodity_pack',
        sa.Column('id', sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column('commodity_code', sa.Text(), nullable=True),
        sa.Column('default_case_weight', sa.Numeric(12, 4), nullable=True),
        sa.Column('uom', sa.Text(), server_default='lb', nullable=True),
        sa.Column('region_code', sa.Text(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),

        sa.PrimaryKeyConstraint('id', name='pk_commodity_pack'),
    )
    op.create_index(
        'idx_commodity_region',
        'commodity_pack',
        ['commodity_code', sa.text("COALESCE(region_code, '__ANY__')")],
        unique=True,
    )


def downgrade() -> None:
    """Drop case pack tables"""
    op.drop_index('idx_commodity_region', table_name='commodity_pack')
    op.drop_table('commodity_pack')

    op.drop_index('idx_case_pack_trade_item', table_name='case_pack')
    op.drop_table('case_pack')
    postgresql.ENUM(name='pack_source').drop(op.get_bind(), checkfirst=True)

    op.drop_table('trade_item')
