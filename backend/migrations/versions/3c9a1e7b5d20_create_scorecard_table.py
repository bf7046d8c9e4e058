"""create scorecard table

Revision ID: 3c9a1e7b5d20
Revises:
Create Date: 2026-10-18 00:00:00
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3c9a1e7b5d20'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)
    if 'scorecard' in set(insp.get_table_names()):
        return
    op.create_table(
        'scorecard',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('scores', sa.Text(), nullable=False),
        sa.Column('total', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )


def downgrade():
    op.drop_table('scorecard')
