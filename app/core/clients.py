from functools import lru_cache
from supabase import create_client, Client
from app.config import SUPABASE_URL, SUPABASE_KEY
from app.utils.logging_utils import log_debug

@lru_cache()
def get_supabase_client() -> Client:
    """Build the Supabase client on first use. Used as a FastAPI dependency."""
    log_debug("=== SUPABASE CLIENT INITIALIZATION ===", {
        "url": SUPABASE_URL,
        "key_present": bool(SUPABASE_KEY)
    }, service="database")

    if not SUPABASE_URL or not SUPABASE_KEY:
        raise ValueError("Missing required Supabase environment variables")

    try:
        client = create_client(SUPABASE_URL, SUPABASE_KEY)
    except Exception as e:
        log_debug(f"❌ Error initializing Supabase client: {str(e)}", service="database")
        raise

    log_debug("✅ Supabase client initialized successfully", service="database")
    return client
