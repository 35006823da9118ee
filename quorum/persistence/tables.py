"""SQLAlchemy table definitions for Quorum.

Questions are stored document-style: answers, vote ledgers, the view log
and attachment metadata live in JSONB columns of the question row, so the
whole aggregate is read and written in one statement. The ``version``
column guards concurrent writes.

These definitions match the schema created by the Alembic migrations.
Timestamps are stored without time zone and always hold naive local times.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    func,
)
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("username", String(30), nullable=False, unique=True),
    Column("email", String(255), nullable=False, unique=True),
    Column("password_hash", String(255), nullable=False),
    Column("role", String(20), nullable=False, server_default="user"),
    Column("reputation", Integer, nullable=False, server_default="0"),
    Column("questions_asked", Integer, nullable=False, server_default="0"),
    Column("avatar", Text, nullable=False, server_default=""),
    Column("bio", String(500), nullable=False, server_default=""),
    Column("location", String(100), nullable=False, server_default=""),
    Column("website", String(200), nullable=False, server_default=""),
    Column("followed_topic_ids", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("following_ids", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("follower_ids", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column("last_login", TIMESTAMP, nullable=True),
    Column("created_at", TIMESTAMP, nullable=False, server_default=func.now()),
    Column("updated_at", TIMESTAMP, nullable=False, server_default=func.now()),
    CheckConstraint("questions_asked >= 0", name="ck_users_questions_asked"),
)

Index("idx_users_reputation", users_table.c.reputation.desc())

# ============================================================================
# TOPICS TABLE
# ============================================================================
topics_table = Table(
    "topics",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("name", String(50), nullable=False),
    Column("slug", String(60), nullable=False, unique=True),
    Column("description", String(500), nullable=False, server_default=""),
    Column("color", String(7), nullable=False, server_default="#8B5CF6"),
    Column("icon", String(16), nullable=False),
    Column("question_count", Integer, nullable=False, server_default="0"),
    Column("follower_count", Integer, nullable=False, server_default="0"),
    Column("moderator_ids", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("created_by", UUID, ForeignKey("users.id"), nullable=False),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column("last_activity", TIMESTAMP, nullable=False, server_default=func.now()),
    Column("created_at", TIMESTAMP, nullable=False, server_default=func.now()),
    Column("updated_at", TIMESTAMP, nullable=False, server_default=func.now()),
    CheckConstraint("question_count >= 0", name="ck_topics_question_count"),
    CheckConstraint("follower_count >= 0", name="ck_topics_follower_count"),
)

# Names are unique case-insensitively
Index("uq_topics_name_lower", func.lower(topics_table.c.name), unique=True)

# ============================================================================
# QUESTIONS TABLE (aggregate root with embedded answers)
# ============================================================================
questions_table = Table(
    "questions",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("title", String(200), nullable=False),
    Column("description", Text, nullable=False),
    Column("author_id", UUID, ForeignKey("users.id"), nullable=False),
    Column("author_username", String(30), nullable=False),
    Column("topic_ids", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("tags", ARRAY(String(100)), nullable=False, server_default="{}"),
    Column("attachments", JSONB, nullable=False, server_default="[]"),
    Column("answers", JSONB, nullable=False, server_default="[]"),
    Column("votes", JSONB, nullable=False),  # {"upvotes": [...], "downvotes": [...]}
    Column("views", Integer, nullable=False, server_default="0"),
    Column("view_log", JSONB, nullable=False, server_default="[]"),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column("last_activity", TIMESTAMP, nullable=False, server_default=func.now()),
    Column("created_at", TIMESTAMP, nullable=False, server_default=func.now()),
    Column("updated_at", TIMESTAMP, nullable=False, server_default=func.now()),
    Column("version", Integer, nullable=False, server_default="1"),
    CheckConstraint("views >= 0", name="ck_questions_views"),
)

Index("idx_questions_author_id", questions_table.c.author_id)
Index("idx_questions_last_activity", questions_table.c.last_activity.desc())
Index("idx_questions_created_at", questions_table.c.created_at.desc())
Index("idx_questions_topic_ids", questions_table.c.topic_ids, postgresql_using="gin")
Index("idx_questions_tags", questions_table.c.tags, postgresql_using="gin")
