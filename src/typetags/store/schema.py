"""Database schema definitions for typetags."""

SCHEMA_VERSION = 1

SCHEMA_SQL = """\
-- Key-value settings; values are JSON text
CREATE TABLE IF NOT EXISTS settings (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at TEXT NOT NULL
);
"""


def get_schema() -> str:
    """Get the complete database schema SQL."""
    return SCHEMA_SQL
