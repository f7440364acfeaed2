"""
Supabase client factory.

One service-role client per process serves the ``users``/``posts`` tables
and the image storage bucket alike. Ownership rules live in the service
layer, so row-level security is bypassed on purpose.
"""

from typing import Optional
from supabase import Client, ClientOptions, create_client

from .config import Settings, get_settings

_client: Optional[Client] = None


def _build_client(settings: Settings) -> Client:
    if not settings.supabase_url or not settings.supabase_service_role_key:
        raise RuntimeError(
            "Supabase configuration missing. "
            "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
        )
    options = ClientOptions(
        postgrest_client_timeout=settings.supabase_timeout_seconds,
        storage_client_timeout=settings.supabase_timeout_seconds,
    )
    return create_client(
        settings.supabase_url,
        settings.supabase_service_role_key,
        options=options,
    )


def get_supabase_client() -> Client:
    """
    Return the process-wide Supabase client, creating it on first use.

    Raises:
        RuntimeError: If the URL or service role key is not configured
    """
    global _client
    if _client is None:
        _client = _build_client(get_settings())
    return _client


def reset_client_cache() -> None:
    """Forget the cached client (tests, configuration changes)."""
    global _client
    _client = None
