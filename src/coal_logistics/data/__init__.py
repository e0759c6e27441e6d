"""Data access over the Supabase tables."""

from .analytics_source import AnalyticsDataSource, SupabaseAnalyticsSource, get_analytics_source
from .errors import DataAccessError, DatabaseNotConfiguredError, RecordNotFoundError, RecordValidationError

__all__ = [
    "AnalyticsDataSource",
    "SupabaseAnalyticsSource",
    "get_analytics_source",
    "DataAccessError",
    "DatabaseNotConfiguredError",
    "RecordNotFoundError",
    "RecordValidationError",
]
