"""SQLAlchemy table definitions for StackIt.

These table definitions match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    MetaData,
    SmallInteger,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("username", String(30), nullable=False, unique=True),
    Column("password_hash", String(128), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# QUESTIONS TABLE
# ============================================================================
questions_table = Table(
    "questions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(300), nullable=False),
    Column("body", Text, nullable=False),
    Column("tags", ARRAY(String(30)), nullable=False, server_default="{}"),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("author_username", String(30), nullable=False),  # Denormalized from users
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("cardinality(tags) <= 5", name="max_five_tags"),
)

Index("idx_questions_created_at", questions_table.c.created_at.desc())
Index("idx_questions_author_id", questions_table.c.author_id)

# ============================================================================
# ANSWERS TABLE
# ============================================================================
answers_table = Table(
    "answers",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "question_id",
        UUID,
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("body", Text, nullable=False),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("author_username", String(30), nullable=False),  # Denormalized from users
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_answers_question_id", answers_table.c.question_id, answers_table.c.created_at)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "voter_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "answer_id", UUID, ForeignKey("answers.id", ondelete="CASCADE"), nullable=False
    ),
    Column("polarity", SmallInteger, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("voter_id", "answer_id", name="unique_vote"),
    CheckConstraint("polarity IN (-1, 1)", name="polarity_is_unit"),
)

Index("idx_votes_answer_id", votes_table.c.answer_id)

# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "recipient_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("kind", String(20), nullable=False),  # 'answer', 'mention', 'vote'
    Column("title", String(200), nullable=False),
    Column("message", Text, nullable=False),
    Column(
        "related_question_id",
        UUID,
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column(
        "related_answer_id",
        UUID,
        ForeignKey("answers.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column(
        "related_user_id",
        UUID,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("is_read", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("kind IN ('answer', 'mention', 'vote')", name="known_kind"),
)

Index(
    "idx_notifications_recipient_created",
    notifications_table.c.recipient_id,
    notifications_table.c.created_at.desc(),
)
Index(
    "idx_notifications_recipient_unread",
    notifications_table.c.recipient_id,
    postgresql_where=notifications_table.c.is_read.is_(False),
)
