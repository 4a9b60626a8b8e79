"""Core constants: search limits and shared literal values."""

# Global search
SEARCH_MIN_TERM_LENGTH = 2
SEARCH_DEFAULT_MAX_PER_TYPE = 5
SEARCH_MIN_PER_TYPE = 1
SEARCH_MAX_PER_TYPE = 20
SEARCH_TERM_TOO_SHORT_MESSAGE = "Search term must be at least 2 characters."

# PostgreSQL text search configuration for tsvector/tsquery
SEARCH_TEXT_CONFIG = "english"

# Permission action checked before an entity type is searched
VIEW_ACTION = "View"
