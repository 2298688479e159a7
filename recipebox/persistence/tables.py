"""SQLAlchemy table definitions for recipebox.

Only the tables the social engine reads or writes. They match the schema
defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

from recipebox.domain.repository.like import UNIQUE_LIKE_CONSTRAINT

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# PROFILES TABLE (keyed by identity provider user ID)
# ============================================================================
profiles_table = Table(
    "profiles",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("username", String(255), nullable=False),
    Column("full_name", String(255), nullable=False, server_default=""),
    Column("bio", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_profiles_username", profiles_table.c.username)

# ============================================================================
# RECIPES TABLE (social counters only; authoring columns live elsewhere)
# ============================================================================
recipes_table = Table(
    "recipes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(300), nullable=False),
    Column("user_id", UUID, nullable=False),  # Author
    Column("like_count", Integer, nullable=False, server_default="0"),
    Column("comment_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("like_count >= 0", name="like_count_non_negative"),
    CheckConstraint("comment_count >= 0", name="comment_count_non_negative"),
)

Index("idx_recipes_user_id", recipes_table.c.user_id)

# ============================================================================
# LIKES TABLE
# ============================================================================
likes_table = Table(
    "likes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "recipe_id", UUID, ForeignKey("recipes.id", ondelete="CASCADE"), nullable=False
    ),
    Column("user_id", UUID, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("recipe_id", "user_id", name=UNIQUE_LIKE_CONSTRAINT),
)

Index("idx_likes_recipe_id", likes_table.c.recipe_id)
Index("idx_likes_user_id", likes_table.c.user_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "recipe_id", UUID, ForeignKey("recipes.id", ondelete="CASCADE"), nullable=False
    ),
    Column("user_id", UUID, nullable=False),  # Author
    Column("content", Text, nullable=False),
    # No foreign key: replies may outlive their parent (orphan reply policy)
    Column("parent_id", UUID, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "char_length(content) BETWEEN 1 AND 2000", name="content_length"
    ),
)

Index("idx_comments_recipe_id", comments_table.c.recipe_id)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_user_id", comments_table.c.user_id)
Index("idx_comments_created_at", comments_table.c.created_at)
