from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB

from courtscore.config import PLAYERS_TABLE, MATCHES_TABLE

revision = "0001_initial"
down_revision = None
branch_labels = None
depends_on = None

_TEAM_TYPE = sa.JSON().with_variant(JSONB, "postgresql")


def upgrade():
    op.create_table(
        PLAYERS_TABLE,
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("avatar", sa.String(), nullable=False),
        sa.Column("matches", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("wins", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("losses", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()
        ),
    )
    op.create_table(
        MATCHES_TABLE,
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("date", sa.DateTime(), nullable=False),
        sa.Column("team1", _TEAM_TYPE, nullable=False),
        sa.Column("team2", _TEAM_TYPE, nullable=False),
        sa.Column(
            "created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()
        ),
    )
    op.create_index(f"ix_{MATCHES_TABLE}_date", MATCHES_TABLE, ["date"])


def downgrade():
    op.drop_index(f"ix_{MATCHES_TABLE}_date", table_name=MATCHES_TABLE)
    op.drop_table(MATCHES_TABLE)
    op.drop_table(PLAYERS_TABLE)
