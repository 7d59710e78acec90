"""initial schema: profiles, domains, offers, daily_content, inquiries

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001_initial_schema'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table('profiles',
        sa.Column('id', sa.String(length=50), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('role', sa.Enum('USER', 'ADMIN', name='profilerole'), nullable=False),
        sa.Column('status', sa.Enum('ACTIVE', 'DISABLED', name='profilestatus'), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email')
    )
    op.create_index('idx_profiles_status', 'profiles', ['status'], unique=False)

    op.create_table('domains',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=253), nullable=False),
        sa.Column('list_price', sa.Numeric(precision=12, scale=2), nullable=True),
        sa.Column('is_for_sale', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('landing_page_type', sa.String(length=50), nullable=False, server_default='default_inspiration'),
        sa.Column('owner_id', sa.String(length=50), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.ForeignKeyConstraint(['owner_id'], ['profiles.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name')
    )
    # Landing lookups hit the unique index on name; dashboards filter by owner
    op.create_index('idx_domains_owner_id', 'domains', ['owner_id'], unique=False)

    op.create_table('offers',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('domain_id', sa.Integer(), nullable=False),
        sa.Column('buyer_email', sa.String(length=255), nullable=False),
        sa.Column('offer_amount', sa.Numeric(precision=12, scale=2), nullable=True),
        sa.Column('message', sa.Text(), nullable=False, server_default=''),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.ForeignKeyConstraint(['domain_id'], ['domains.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('idx_offers_domain_id', 'offers', ['domain_id'], unique=False)

    op.create_table('daily_content',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('content_type', sa.Enum('VERSE', 'QUOTE', 'BANNER', name='contenttype'), nullable=False),
        sa.Column('body', sa.Text(), nullable=False),
        sa.Column('reference', sa.String(length=255), nullable=True),
        sa.Column('target_url', sa.String(length=500), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('idx_daily_content_is_active', 'daily_content', ['is_active'], unique=False)

    op.create_table('inquiries',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('submitter_email', sa.String(length=255), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='New'),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id')
    )


def downgrade() -> None:
    op.drop_table('inquiries')

    op.drop_index('idx_daily_content_is_active', table_name='daily_content')
    op.drop_table('daily_content')

    op.drop_index('idx_offers_domain_id', table_name='offers')
    op.drop_table('offers')

    op.drop_index('idx_domains_owner_id', table_name='domains')
    op.drop_table('domains')

    op.drop_index('idx_profiles_status', table_name='profiles')
    op.drop_table('profiles')

    # Enum types only exist as named types on PostgreSQL
    if op.get_bind().dialect.name == 'postgresql':
        op.execute('DROP TYPE IF EXISTS contenttype')
        op.execute('DROP TYPE IF EXISTS profilestatus')
        op.execute('DROP TYPE IF EXISTS profilerole')
