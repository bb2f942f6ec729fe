"""Initial schema: profiles, contracts, jobs and ledger entries

Revision ID: 3f2a9c1d7e54
Revises: 
Create Date: 2026-10-19 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f2a9c1d7e54'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

profile_type_enum = sa.Enum('client', 'contractor', name='profile_type_enum')
contract_status_enum = sa.Enum('new', 'in_progress', 'terminated', name='contract_status_enum')
approval_status_enum = sa.Enum('pending', 'approved', 'rejected', name='approval_status_enum')
ledger_entry_type_enum = sa.Enum('deposit', 'job_payment', name='ledger_entry_type_enum')


def _timestamps() -> list:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'profiles',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('type', profile_type_enum, nullable=False),
        sa.Column('profession', sa.String(length=120), nullable=True),
        sa.Column('first_name', sa.String(length=120), nullable=False),
        sa.Column('last_name', sa.String(length=120), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('balance', sa.Numeric(precision=12, scale=2), nullable=False, server_default='0'),
        sa.Column('password_hash', sa.String(length=255), nullable=True),
        *_timestamps(),
        sa.CheckConstraint('balance >= 0', name='ck_profiles_balance_non_negative'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_profiles_email', 'profiles', ['email'], unique=True)
    op.create_index('ix_profiles_type', 'profiles', ['type'])
    op.create_index('ix_profiles_profession', 'profiles', ['profession'])

    op.create_table(
        'contracts',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('client_id', sa.Uuid(), nullable=False),
        sa.Column('contractor_id', sa.Uuid(), nullable=False),
        sa.Column('status', contract_status_enum, nullable=False, server_default='new'),
        *_timestamps(),
        sa.ForeignKeyConstraint(['client_id'], ['profiles.id']),
        sa.ForeignKeyConstraint(['contractor_id'], ['profiles.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_contracts_client_id', 'contracts', ['client_id'])
    op.create_index('ix_contracts_contractor_id', 'contracts', ['contractor_id'])
    op.create_index('ix_contracts_status', 'contracts', ['status'])

    op.create_table(
        'jobs',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('contract_id', sa.Uuid(), nullable=False),
        sa.Column('client_id', sa.Uuid(), nullable=False),
        sa.Column('contractor_id', sa.Uuid(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('price', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('completed', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('approval_status', approval_status_enum, nullable=False, server_default='pending'),
        sa.Column('paid', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('paid_at', sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.CheckConstraint('price > 0', name='ck_jobs_price_positive'),
        sa.ForeignKeyConstraint(['contract_id'], ['contracts.id']),
        sa.ForeignKeyConstraint(['client_id'], ['profiles.id']),
        sa.ForeignKeyConstraint(['contractor_id'], ['profiles.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_jobs_contract_id', 'jobs', ['contract_id'])
    op.create_index('ix_jobs_client_id', 'jobs', ['client_id'])
    op.create_index('ix_jobs_contractor_id', 'jobs', ['contractor_id'])
    op.create_index('ix_jobs_completed', 'jobs', ['completed'])
    op.create_index('ix_jobs_approval_status', 'jobs', ['approval_status'])
    op.create_index('ix_jobs_paid', 'jobs', ['paid'])

    op.create_table(
        'ledger_entries',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('entry_type', ledger_entry_type_enum, nullable=False),
        sa.Column('amount', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('debit_profile_id', sa.Uuid(), nullable=True),
        sa.Column('credit_profile_id', sa.Uuid(), nullable=False),
        sa.Column('job_id', sa.Uuid(), nullable=True),
        *_timestamps(),
        sa.CheckConstraint('amount > 0', name='ck_ledger_entries_amount_positive'),
        sa.ForeignKeyConstraint(['debit_profile_id'], ['profiles.id']),
        sa.ForeignKeyConstraint(['credit_profile_id'], ['profiles.id']),
        sa.ForeignKeyConstraint(['job_id'], ['jobs.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_ledger_entries_debit_profile_id', 'ledger_entries', ['debit_profile_id'])
    op.create_index('ix_ledger_entries_credit_profile_id', 'ledger_entries', ['credit_profile_id'])
    op.create_index('ix_ledger_entries_job_id', 'ledger_entries', ['job_id'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('ledger_entries')
    op.drop_table('jobs')
    op.drop_table('contracts')
    op.drop_table('profiles')

    bind = op.get_bind()
    for enum in (
        ledger_entry_type_enum,
        approval_status_enum,
        contract_status_enum,
        profile_type_enum,
    ):
        enum.drop(bind, checkfirst=True)
