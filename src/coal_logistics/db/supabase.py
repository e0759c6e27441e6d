"""Supabase client shared by the repositories."""

import logging
from functools import lru_cache

from supabase import Client, create_client

from ..config import Settings, settings

logger = logging.getLogger(__name__)


def create_supabase_client(config: Settings) -> Client | None:
    """Build a client from ``config``; None when credentials are missing or rejected.

    No request is made here, so a returned client may still fail on its first query.
    """
    if not config.supabase_url or not config.supabase_key:
        logger.warning("Supabase credentials not configured (set CLM_SUPABASE_URL and CLM_SUPABASE_KEY)")
        return None

    try:
        client = create_client(config.supabase_url, config.supabase_key)
    except Exception as e:
        logger.error(f"Failed to create Supabase client for {config.supabase_url}: {e}")
        return None
    logger.info(f"Supabase client created for {config.supabase_url}")
    return client


@lru_cache()
def get_supabase_client() -> Client | None:
    return create_supabase_client(settings)
