"""Errors raised by the data access layer."""

from __future__ import annotations


class DataAccessError(RuntimeError):
    """An upstream read or write against Supabase failed.

    The message is the upstream message, unchanged.
    """


class DatabaseNotConfiguredError(DataAccessError):
    """Supabase URL or key is missing."""

    def __init__(self, message: str = "Supabase not configured. Set CLM_SUPABASE_URL and CLM_SUPABASE_KEY environment variables.") -> None:
        super().__init__(message)


class RecordNotFoundError(DataAccessError):
    def __init__(self, table: str, record_id: str) -> None:
        super().__init__(f"No {table} record with id '{record_id}'")
        self.table = table
        self.record_id = record_id


class RecordValidationError(ValueError):
    """A row returned by the store cannot be coerced into a domain object."""
