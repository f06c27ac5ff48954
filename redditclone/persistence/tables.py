"""SQLAlchemy table definitions for the relational store.

Users and login sessions live in MySQL. Timestamps are stored as naive
UTC values since MySQL DATETIME carries no zone.
"""

from sqlalchemy import Column, DateTime, Index, MetaData, String, Table

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", String(24), primary_key=True),
    Column("username", String(255), nullable=False, unique=True),
    Column("password", String(255), nullable=False),  # bcrypt hash
)

# ============================================================================
# SESSIONS TABLE
# ============================================================================
sessions_table = Table(
    "sessions",
    metadata,
    Column("id", String(24), primary_key=True),
    Column("user_id", String(24), nullable=False),
    Column("created_at", DateTime, nullable=False),
    Column("expires_at", DateTime, nullable=False),
)

Index(
    "idx_sessions_user_id_expires_at",
    sessions_table.c.user_id,
    sessions_table.c.expires_at,
)
