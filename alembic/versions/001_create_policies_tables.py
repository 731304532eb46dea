"""create policies and policy_lines_of_business tables

Revision ID: 001
Revises:
Create Date: 2025-02-10 10:00:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "policies",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("policy_number", sa.String(50), nullable=False),
        sa.Column("named_insured", sa.String(255), nullable=False),
        sa.Column("status", sa.String(50), nullable=False),
        sa.Column("effective_date", sa.Date(), nullable=True),
        sa.Column("expiration_date", sa.Date(), nullable=True),
        sa.Column("premium", sa.Numeric(12, 2), nullable=True),
        sa.Column("MNPID", sa.String(100), nullable=True),
        sa.Column("MBU_handler", sa.String(255), nullable=True),
        sa.Column("producing_UW", sa.String(255), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("policy_number", name="uq_policies_policy_number"),
    )
    op.create_index("ix_policies_id", "policies", ["id"], unique=False)
    op.create_index("ix_policies_status", "policies", ["status"], unique=False)

    # One row per line of business a policy belongs to
    op.create_table(
        "policy_lines_of_business",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("policy_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.ForeignKeyConstraint(["policy_id"], ["policies.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_policy_lines_of_business_id", "policy_lines_of_business", ["id"], unique=False
    )
    op.create_index(
        "ix_policy_lines_of_business_policy_id",
        "policy_lines_of_business",
        ["policy_id"],
        unique=False,
    )
    op.create_index(
        "ix_policy_lines_of_business_name", "policy_lines_of_business", ["name"], unique=False
    )


def downgrade() -> None:
    op.drop_index("ix_policy_lines_of_business_name", table_name="policy_lines_of_business")
    op.drop_index("ix_policy_lines_of_business_policy_id", table_name="policy_lines_of_business")
    op.drop_index("ix_policy_lines_of_business_id", table_name="policy_lines_of_business")
    op.drop_table("policy_lines_of_business")
    op.drop_index("ix_policies_status", table_name="policies")
    op.drop_index("ix_policies_id", table_name="policies")
    op.drop_table("policies")
