from __future__ import annotations

from functools import lru_cache

from supabase import Client, create_client
from supabase.lib.client_options import ClientOptions

from notebook_api.config import settings
from notebook_api.utils.logging import get_logger

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def get_supabase_client() -> Client:
    """Return a cached Supabase client for the notes store.

    The client holds no per-request state, so a single instance is shared by
    all requests.
    """
    logger.debug("Initializing Supabase client")
    if not settings.supabase_key:
        raise RuntimeError("supabase_key is required for the notes store client")
    return create_client(
        settings.supabase_url,
        settings.supabase_key,
        options=ClientOptions(auto_refresh_token=False, persist_session=False),
    )
