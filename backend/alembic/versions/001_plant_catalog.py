"""Plant catalog schema: images, plant groups, plants, gallery and issues.

Revision ID: 001_plant_catalog
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB


revision = "001_plant_catalog"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Images carry no FKs in either direction; references to them are plain ids
    op.create_table(
        "images",
        sa.Column("id", sa.String(255), primary_key=True),
        sa.Column("filename", sa.String(500), nullable=False),
        sa.Column("content_type", sa.String(100), nullable=False),
        sa.Column("bytes", sa.LargeBinary(), nullable=False),
        sa.Column("created_date", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_images_created_date", "images", ["created_date"])

    op.create_table(
        "plant_groups",
        sa.Column("id", sa.String(100), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("image_id", sa.String(255), nullable=True),
    )

    op.create_table(
        "plants",
        sa.Column("id", sa.String(255), primary_key=True),
        sa.Column("group_id", sa.String(100), sa.ForeignKey("plant_groups.id"), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("scientific_name", sa.String(255)),
        sa.Column("thumbnail_id", sa.String(255)),
        sa.Column("description", sa.Text()),
        sa.Column("size", sa.Text()),
        sa.Column("toxicity", sa.Text()),
        sa.Column("benefits", sa.JSON().with_variant(JSONB(), "postgresql"), nullable=False),
        sa.Column("care_watering", sa.Text()),
        sa.Column("care_light", sa.Text()),
        sa.Column("care_temperature", sa.Text()),
        sa.Column("care_humidity", sa.Text()),
        sa.Column("care_soil", sa.Text()),
        sa.Column("care_fertilizing", sa.Text()),
    )
    op.create_index("ix_plants_group_id", "plants", ["group_id"])

    op.create_table(
        "plant_images",
        sa.Column("plant_id", sa.String(255), sa.ForeignKey("plants.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("display_order", sa.Integer(), primary_key=True),
        sa.Column("image_id", sa.String(255), nullable=False),
    )
    op.create_index("ix_plant_images_image_id", "plant_images", ["image_id"])

    op.create_table(
        "plant_issues",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("plant_id", sa.String(255), sa.ForeignKey("plants.id", ondelete="CASCADE"), nullable=False),
        sa.Column("issue", sa.Text(), nullable=False),
        sa.Column("solution", sa.Text(), nullable=False),
    )
    op.create_index("ix_plant_issues_plant_id", "plant_issues", ["plant_id"])


def downgrade() -> None:
    op.drop_table("plant_issues")
    op.drop_table("plant_images")
    op.drop_table("plants")
    op.drop_table("plant_groups")
    op.drop_table("images")
