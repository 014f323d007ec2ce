"""create users, items and email verification tables"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "marketplace_20240701"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "users",
        sa.Column("email", sa.String(length=255), primary_key=True),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("is_email_verified", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("bio", sa.Text(), nullable=False, server_default=""),
        sa.Column("profile_pic", sa.String(length=1024), nullable=False, server_default=""),
        sa.Column("items_list", sa.JSON(), nullable=False),
        sa.Column("cart", sa.JSON(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "items",
        sa.Column("id", sa.String(length=32), primary_key=True),
        sa.Column(
            "artist_email",
            sa.String(length=255),
            sa.ForeignKey("users.email"),
            nullable=False,
        ),
        sa.Column("item_name", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("price", sa.Float(), nullable=False, server_default="0"),
        sa.Column("quantity", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("item_pic", sa.String(length=1024), nullable=False, server_default=""),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("price >= 0", name="ck_items_price_non_negative"),
        sa.CheckConstraint("quantity >= 0", name="ck_items_quantity_non_negative"),
    )
    op.create_index("ix_items_artist_email", "items", ["artist_email"])

    op.create_table(
        "email_verifications",
        sa.Column("token", sa.String(length=64), primary_key=True),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_email_verifications_email", "email_verifications", ["email"])


def downgrade():
    op.drop_index("ix_email_verifications_email", table_name="email_verifications")
    op.drop_table("email_verifications")

    op.drop_index("ix_items_artist_email", table_name="items")
    op.drop_table("items")

    op.drop_table("users")
